from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float


@dataclass(frozen=True)
class SectionWidths:
    """Pixel widths of the category-text (left) and chart (right) regions."""

    left: float
    right: float


@dataclass(frozen=True)
class LayoutContext:
    """Immutable layout values shared by every stage of one update.

    Attributes:
        chart_width: Width available to both sections
        chart_height: Height available to the rows (legend already removed)
        sections: Left/right section widths
        region_width: Width a single series may grow into
        row_height: Height of every category row
        padding: Gap between rows
        min_value: Joint minimum across series, never above 0
        max_value: Joint maximum across series
        series_count: Number of drawn series
    """

    chart_width: float
    chart_height: float
    sections: SectionWidths
    region_width: float
    row_height: float
    padding: float
    min_value: float
    max_value: float
    series_count: int

    @property
    def is_two_sided(self) -> bool:
        return self.series_count == 2

    def row_top(self, index: int) -> float:
        return (self.row_height + self.padding) * index


@dataclass(frozen=True)
class TooltipItem:
    display_name: str
    value: str


@dataclass(frozen=True)
class LabelGeometry:
    x: float
    y: float
    dx: float
    dy: float
    source: Optional[float]
    value: str
    color: str
    width: float
    height: float
    visible: bool = True


@dataclass(frozen=True)
class ColumnGeometry:
    x: float
    y: float
    dx: float
    dy: float
    px: float
    py: float
    angle: float
    width: float
    height: float
    color: str
    label: LabelGeometry
    tooltip: Tuple[TooltipItem, ...]
    series_index: int
    category_index: int

    @property
    def mirrored(self) -> bool:
        return self.angle == 180

    @property
    def extent(self) -> Tuple[float, float]:
        """Horizontal span of the drawn bar within the chart region."""
        left = self.x + self.dx
        return left, left + self.width


@dataclass(frozen=True)
class AxisLine:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class CategoryText:
    text: str
    title: str
    x: float
    y: float
    color: str
    width: float
    height: float


@dataclass(frozen=True)
class ChartGeometry:
    """Everything a rendering surface needs for one update.

    ``offset_x`` is the translation applied to the column, label and axis
    layers so that they start after the category-text region.
    """

    context: LayoutContext
    columns: List[ColumnGeometry] = field(default_factory=list)
    axis: Optional[AxisLine] = None
    categories: List[CategoryText] = field(default_factory=list)
    labels_visible: bool = True
    show_categories: bool = True

    @property
    def offset_x(self) -> float:
        return self.context.sections.left

    @property
    def labels(self) -> List[LabelGeometry]:
        return [column.label for column in self.columns]
