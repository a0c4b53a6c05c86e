import logging
from dataclasses import replace
from typing import List, Optional

from .axes import axis_line, layout_categories
from .columns import compute_row_height, layout_columns, value_range
from .geometry import ChartGeometry, ColumnGeometry, LayoutContext, Viewport
from .labels import labels_visible
from .model import TornadoChartData
from .sections import compute_sections
from .settings import ChartOptions
from .text import MatplotlibTextMeasurer, TextMeasurer


logger = logging.getLogger(__name__)


def build_context(data: TornadoChartData, viewport: Viewport, options: ChartOptions) -> LayoutContext:
    """Compute the layout values every stage of one update shares.

    Args:
        data: Canonical chart model
        viewport: Space for sections and rows (margins and legend removed)
        options: Chart options

    Returns:
        LayoutContext
    """
    sections = compute_sections(options.sections, viewport.width, data.settings.show_categories)
    min_value, max_value = value_range(data.series)

    region_width = sections.right
    if len(data.series) == 2:
        region_width = region_width / 2

    return LayoutContext(
        chart_width=viewport.width,
        chart_height=viewport.height,
        sections=sections,
        region_width=region_width,
        row_height=compute_row_height(viewport.height, len(data.categories), options.column_padding),
        padding=options.column_padding,
        min_value=min_value,
        max_value=max_value,
        series_count=len(data.series),
    )


def hide_labels(columns: List[ColumnGeometry]) -> List[ColumnGeometry]:
    return [replace(column, label=replace(column.label, visible=False)) for column in columns]


def layout_chart(
    data: Optional[TornadoChartData],
    viewport: Viewport,
    options: Optional[ChartOptions] = None,
    measurer: Optional[TextMeasurer] = None
) -> Optional[ChartGeometry]:
    """Full geometry for one update.

    Pure: identical inputs give identical geometry.

    Args:
        data: Canonical chart model, or None for "no chart"
        viewport: Space for sections and rows (margins and legend removed)
        options: Chart options (defaults to ChartOptions())
        measurer: Text measurement service (defaults to matplotlib)

    Returns:
        ChartGeometry, or None when there is no data

    Examples:
        data = convert(result)
        geometry = layout_chart(data, Viewport(400, 200))
        geometry.axis.x1   # half of the chart section
    """
    if data is None:
        return None

    options = options or ChartOptions()
    measurer = measurer or MatplotlibTextMeasurer()

    context = build_context(data, viewport, options)
    columns = layout_columns(data, context, options, measurer)

    visible = labels_visible([column.label for column in columns], data.settings, context)
    if not visible:
        columns = hide_labels(columns)

    return ChartGeometry(
        context=context,
        columns=columns,
        axis=axis_line(context),
        categories=layout_categories(data.categories, data.settings, context, options, measurer),
        labels_visible=visible,
        show_categories=data.settings.show_categories,
    )
