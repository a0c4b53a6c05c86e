from typing import Dict, Tuple

from matplotlib.font_manager import FontProperties
from matplotlib.textpath import TextToPath


ELLIPSIS = "…"


class TextMeasurer:
    """Text measurement service used by the label and category layout.

    Subclasses provide ``measure_width`` and ``measure_height``;
    ``truncate_to_width`` is shared and only relies on ``measure_width``.
    """

    def measure_width(self, text: str) -> float:
        raise NotImplementedError

    def measure_height(self, text: str) -> float:
        raise NotImplementedError

    def truncate_to_width(self, text: str, max_width: float) -> str:
        """Return ``text`` or its longest prefix plus an ellipsis that fits ``max_width``.

        The result is never wider than ``max_width``; when not even the
        ellipsis fits, an empty string is returned.
        """
        text = text or ""
        if self.measure_width(text) <= max_width:
            return text

        # Largest prefix length whose ellipsized form still fits
        low, high = 0, len(text) - 1
        best = None
        while low <= high:
            mid = (low + high) // 2
            if self.measure_width(text[:mid] + ELLIPSIS) <= max_width:
                best = mid
                low = mid + 1
            else:
                high = mid - 1

        if best is None:
            return ""
        return text[:best] + ELLIPSIS


class MatplotlibTextMeasurer(TextMeasurer):
    """Measures text with matplotlib's font machinery (1 pt == 1 px).

    Heights are line heights: every string of the same font reports the same
    height, measured on a reference string with ascender and descender.

    Args:
        font_family: Font family understood by matplotlib's font manager
        font_size: Font size in pixels

    Examples:
        measurer = MatplotlibTextMeasurer(font_size=12)
        measurer.truncate_to_width("A very long category name", 60)
    """

    REFERENCE_TEXT = "Ág"

    def __init__(self, font_family: str = "sans-serif", font_size: float = 11):
        self.font_family = font_family
        self.font_size = font_size
        self._prop = FontProperties(family=font_family, size=font_size)
        self._text_to_path = TextToPath()
        self._cache: Dict[str, Tuple[float, float]] = {}

    def _extent(self, text: str) -> Tuple[float, float]:
        if text not in self._cache:
            width, height, _ = self._text_to_path.get_text_width_height_descent(
                text, self._prop, ismath=False
            )
            self._cache[text] = (float(width), float(height))
        return self._cache[text]

    def measure_width(self, text: str) -> float:
        if not text:
            return 0.0
        return self._extent(text)[0]

    def measure_height(self, text: str) -> float:
        return self._extent(self.REFERENCE_TEXT)[1]
