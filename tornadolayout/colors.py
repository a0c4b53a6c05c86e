import logging
from typing import Any, Dict, Optional, Sequence

from matplotlib import colors as mcolors

from .settings import ChartProperty


logger = logging.getLogger(__name__)


class ColorResolver:
    """Shared color policy: explicit override, then palette slot, then default.

    Args:
        palette: Optional sequence of colors indexed by series position. Any
            matplotlib color format is accepted (``"C0"``, ``"tab:blue"``, hex);
            palette entries are normalised to hex strings.

    Examples:
        resolver = ColorResolver(palette=["#01B8AA", "#374649"])
        resolver.resolve(ChartProperty.DATA_POINT_FILL, None, "purple", index=1)  # '#374649'
    """

    def __init__(self, palette: Optional[Sequence[str]] = None):
        self.palette = [mcolors.to_hex(color) for color in palette] if palette else []

    def resolve(
        self,
        prop: ChartProperty,
        objects: Optional[Dict[str, Any]],
        default: str,
        index: Optional[int] = None
    ) -> str:
        """Resolve the color for ``prop``.

        Args:
            prop: Property holding a possible override
            objects: Property bag (``{"labels": {"insideFill": ...}}``)
            default: Color used when neither override nor palette applies
            index: Series position for palette lookup

        Returns:
            Resolved color string
        """
        override = self._override(prop.lookup(objects))
        if override:
            return override

        if index is not None and self.palette:
            return self.palette[index % len(self.palette)]

        return default

    @staticmethod
    def _override(value: Any) -> Optional[str]:
        # Fill properties arrive either as a bare color or as {"solid": {"color": ...}}
        if isinstance(value, str):
            return value or None
        if isinstance(value, dict):
            solid = value.get("solid")
            if isinstance(solid, dict) and solid.get("color"):
                return str(solid["color"])
        if value is not None:
            logger.warning("Ignoring unrecognised color override: %r", value)
        return None
