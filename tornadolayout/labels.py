from typing import List, Optional

from .geometry import LabelGeometry, LayoutContext
from .settings import ChartOptions, ChartSettings
from .text import TextMeasurer


def place_label(
    value: Optional[float],
    dx: float,
    dy: float,
    column_width: float,
    mirrored: bool,
    settings: ChartSettings,
    context: LayoutContext,
    options: ChartOptions,
    measurer: TextMeasurer,
    x: float = 0.0,
    y: float = 0.0
) -> LabelGeometry:
    """Place the value label of one bar.

    The formatted value is truncated to ``options.max_label_width``. It is
    centered inside the bar when the bar is wider than the label, otherwise
    it sits past the growing end of the bar, ``options.left_label_margin``
    away, in the outside color.

    Args:
        value: Raw bar value
        dx: Horizontal offset of the bar
        dy: Vertical offset of the bar
        column_width: Drawn bar width
        mirrored: Whether the bar grows leftward
        settings: Resolved chart settings (formatter, colors)
        context: Layout context (row height, chart section)
        options: Chart options (label width, margins)
        measurer: Text measurement service

    Returns:
        LabelGeometry with visibility from the horizontal clipping check
    """
    formatted = settings.formatter.format(value)
    text = measurer.truncate_to_width(formatted, options.max_label_width)
    width = measurer.measure_width(text)
    height = measurer.measure_height(formatted)

    color = settings.label_inside_fill
    if column_width > width:
        label_dx = dx + column_width / 2 - width / 2
    else:
        if mirrored:
            label_dx = dx - options.left_label_margin - width
        else:
            label_dx = dx + column_width + options.left_label_margin
        color = settings.label_outside_fill

    label_dy = dy + context.row_height / 2 + height / 2 - options.inner_text_height_delta

    return LabelGeometry(
        x=x,
        y=y,
        dx=label_dx,
        dy=label_dy,
        source=value,
        value=text,
        color=color,
        width=width,
        height=height,
        visible=within_chart_region(x + label_dx, width, context),
    )


def within_chart_region(left: float, width: float, context: LayoutContext) -> bool:
    """True when a label spanning ``[left, left + width]`` stays inside the chart section."""
    return 0 < left and left + width < context.sections.right


def labels_visible(labels: List[LabelGeometry], settings: ChartSettings, context: LayoutContext) -> bool:
    """Whole-layer visibility: off when labels are disabled or taller than a row."""
    if not settings.show_labels:
        return False

    height = labels[0].height if labels else 0.0
    return not height > context.row_height

