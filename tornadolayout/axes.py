from typing import List, Optional

from .geometry import AxisLine, CategoryText, LayoutContext
from .settings import ChartOptions, ChartSettings
from .text import TextMeasurer


def axis_line(context: LayoutContext) -> Optional[AxisLine]:
    """Center divider of a two-sided chart, None otherwise."""
    if not context.is_two_sided:
        return None

    x = context.sections.right / 2
    return AxisLine(x1=x, y1=0.0, x2=x, y2=context.chart_height)


def layout_categories(
    categories: List[str],
    settings: ChartSettings,
    context: LayoutContext,
    options: ChartOptions,
    measurer: TextMeasurer
) -> List[CategoryText]:
    """Category text rows, vertically centered on their bar rows.

    Text is truncated to the left section width. Nothing is produced when
    categories are hidden.
    """
    if not settings.show_categories:
        return []

    rows = []
    for index, category in enumerate(categories):
        height = measurer.measure_height(category)
        y = (
            context.row_top(index)
            + context.row_height / 2
            + height / 2
            - options.inner_text_height_delta
        )
        text = measurer.truncate_to_width(category, context.sections.left)

        rows.append(CategoryText(
            text=text,
            title=category,
            x=0.0,
            y=y,
            color=settings.categories_fill,
            width=measurer.measure_width(text),
            height=height,
        ))

    return rows
