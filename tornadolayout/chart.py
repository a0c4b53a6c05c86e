import logging
from typing import Any, Dict, List, Optional, Sequence

from .colors import ColorResolver
from .geometry import ChartGeometry, Viewport
from .layout import layout_chart
from .legend import Legend, TextLegend
from .model import CategoricalResult, TornadoChartData
from .normalizer import convert, settings_snapshot
from .selection import MAX_OPACITY, SelectionState
from .settings import ChartOptions
from .text import MatplotlibTextMeasurer, TextMeasurer


logger = logging.getLogger(__name__)

MIN_OPACITY = 0.0


class TornadoChart:
    """Tornado chart visual: turns query results into renderable geometry.

    Every ``update`` recomputes the model and all geometry from scratch. The
    only state kept between updates is the column selection.

    Args:
        options: Chart options (sections, margins, padding, label sizes)
        measurer: Text measurement service (defaults to matplotlib)
        legend: Legend widget (defaults to a single-row text legend)
        palette: Optional series palette for the color resolver

    Examples:
        chart = TornadoChart()
        geometry = chart.update(result, Viewport(400, 240))
        chart.bar_clicked(0)
        chart.column_opacities()
    """

    def __init__(
        self,
        options: ChartOptions = None,
        measurer: TextMeasurer = None,
        legend: Legend = None,
        palette: Optional[Sequence[str]] = None
    ):
        self.options = options or ChartOptions()
        self.measurer = measurer or MatplotlibTextMeasurer()
        self.legend = legend or TextLegend(self.measurer)
        self.colors = ColorResolver(palette)
        self.selection = SelectionState(self.options.min_column_opacity)

        self.data: Optional[TornadoChartData] = None
        self.geometry: Optional[ChartGeometry] = None
        self.viewport: Optional[Viewport] = None

    # ================================================================
    # UPDATE CYCLE
    # ================================================================

    def converter(self, result: Optional[CategoricalResult]) -> Optional[TornadoChartData]:
        return convert(result, self.colors, self.options.max_series)

    def update(self, result: Optional[CategoricalResult], viewport: Viewport) -> Optional[ChartGeometry]:
        """Recompute the model and geometry for new data, size or settings.

        Args:
            result: Raw categorical result (None or incomplete means no chart)
            viewport: Full size of the visual

        Returns:
            ChartGeometry, or None when there is nothing to draw
        """
        self.data = self.converter(result)

        if self.data is None:
            self.geometry = None
            self.viewport = None
            return None

        inner = self._inner_viewport(viewport)
        legend_height = self.legend.draw(self.data.legend, inner, self.data.settings.show_legend)
        self.viewport = Viewport(width=inner.width, height=max(inner.height - legend_height, 0.0))

        self.geometry = layout_chart(self.data, self.viewport, self.options, self.measurer)
        logger.debug(
            "Updated tornado chart: %d categories, %d series, viewport %sx%s",
            len(self.data.categories), len(self.data.series),
            self.viewport.width, self.viewport.height,
        )
        return self.geometry

    def _inner_viewport(self, viewport: Viewport) -> Viewport:
        margin = self.options.margin
        return Viewport(
            width=max(viewport.width - margin.left - margin.right, 0.0),
            height=max(viewport.height - margin.top - margin.bottom, 0.0),
        )

    # ================================================================
    # INTERACTION
    # ================================================================

    def bar_clicked(self, index: int) -> List[float]:
        """Select the column at ``index`` and return the new column opacities."""
        self.selection.bar_clicked(index)
        return self.column_opacities()

    def background_clicked(self) -> List[float]:
        """Clear the selection and return the new column opacities."""
        self.selection.background_clicked()
        return self.column_opacities()

    def column_opacities(self) -> List[float]:
        if self.geometry is None:
            return []
        return self.selection.opacities(
            len(self.geometry.columns),
            self.geometry.context.is_two_sided,
        )

    def label_opacity(self) -> float:
        if self.geometry is None or not self.geometry.labels_visible:
            return MIN_OPACITY
        return MAX_OPACITY

    # ================================================================
    # PROPERTY SNAPSHOTS
    # ================================================================

    def enumerate_object_instances(self, object_name: str) -> List[Dict[str, Any]]:
        """Current settings of ``object_name`` for a property editor.

        Examples:
            chart.enumerate_object_instances("labels")
            # [{'objectName': 'labels', ..., 'properties': {'show': True, 'labelPrecision': 2, ...}}]
        """
        return settings_snapshot(self.data, object_name)
