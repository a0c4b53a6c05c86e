import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .geometry import ColumnGeometry, LayoutContext, TooltipItem
from .labels import place_label
from .model import Series, TornadoChartData
from .settings import ChartOptions
from .text import TextMeasurer


logger = logging.getLogger(__name__)

MIRROR_ANGLE = 180


def series_array(values: Sequence[Optional[float]]) -> np.ndarray:
    """Series values as floats, missing values drawn as 0."""
    arr = np.array([np.nan if v is None else v for v in values], dtype=float)
    return np.nan_to_num(arr, nan=0.0, posinf=0.0, neginf=0.0)


def value_range(series: List[Series]) -> Tuple[float, float]:
    """Joint (min, max) over all series, with the minimum clamped to <= 0."""
    arrays = [series_array(item.values) for item in series]
    arrays = [arr for arr in arrays if arr.size]
    if not arrays:
        return 0.0, 0.0

    combined = np.concatenate(arrays)
    return float(min(combined.min(), 0.0)), float(combined.max())


def compute_row_height(chart_height: float, count: int, padding: float) -> float:
    if count <= 0:
        return 0.0
    return max((chart_height - (count - 1) * padding) / count, 0.0)


def column_widths(values: np.ndarray, min_value: float, max_value: float, width: float) -> np.ndarray:
    """Linear bar widths in ``[0, width]``; full width when there is no variance."""
    width = max(float(width), 0.0)
    if min_value == max_value:
        return np.full(values.shape, float(width))

    widths = width * (values - min_value) / (max_value - min_value)
    return np.clip(widths, 0.0, width)


def layout_columns(
    data: TornadoChartData,
    context: LayoutContext,
    options: ChartOptions,
    measurer: TextMeasurer
) -> List[ColumnGeometry]:
    """One ColumnGeometry per (series, category), series-major.

    Series 0 of a two-sided chart is mirrored: it is shifted against the axis
    and rotated 180 degrees about its own center. Series 1 starts at the axis.
    A sole series starts at the left edge of the chart region.

    Args:
        data: Canonical chart model
        context: Layout values for this update
        options: Chart options (padding, label sizes)
        measurer: Text measurement service

    Returns:
        Column geometry list, bars of series 0 first
    """
    columns: List[ColumnGeometry] = []
    width = context.region_width

    for series_index, series in enumerate(data.series):
        shift_to_middle = series_index == 0 and context.is_two_sided
        shift_to_right = series_index == 1

        values = series_array(series.values)
        widths = column_widths(values, context.min_value, context.max_value, width)

        for category_index, value in enumerate(series.values):
            bar_width = float(widths[category_index])
            shift = width - bar_width

            dx = shift * shift_to_middle + width * shift_to_right
            dy = context.row_top(category_index)

            label = place_label(
                value,
                dx=dx,
                dy=dy,
                column_width=bar_width,
                mirrored=shift_to_middle,
                settings=data.settings,
                context=context,
                options=options,
                measurer=measurer,
            )

            columns.append(ColumnGeometry(
                x=0.0,
                y=0.0,
                dx=dx,
                dy=dy,
                px=bar_width / 2,
                py=context.row_height / 2,
                angle=MIRROR_ANGLE if shift_to_middle else 0,
                width=bar_width,
                height=context.row_height,
                color=series.fill,
                label=label,
                tooltip=tooltip_data(
                    data.display_name,
                    data.categories[category_index],
                    series.name,
                    label.value,
                ),
                series_index=series_index,
                category_index=category_index,
            ))

    logger.debug(
        "Laid out %d columns (region width %.2f, row height %.2f)",
        len(columns), width, context.row_height,
    )
    return columns


def tooltip_data(display_name: str, category: str, series_name: str, value: str) -> Tuple[TooltipItem, ...]:
    return (
        TooltipItem(display_name=display_name, value=category),
        TooltipItem(display_name=series_name, value=value),
    )
