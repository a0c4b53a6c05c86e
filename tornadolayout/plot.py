from typing import List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Patch, Rectangle

from .geometry import ChartGeometry
from .model import LegendEntry


def tornado_plot(
    geometry: ChartGeometry,
    opacities: Optional[Sequence[float]] = None,
    legend: Optional[List[LegendEntry]] = None,
    ax: Optional[Axes] = None,
    font_size: float = 11,
    axis_color: str = "#777"
) -> Tuple[Figure, Axes]:
    """Draw computed tornado geometry with matplotlib.

    Coordinates are pixels with the origin at the top left, as produced by the
    layout. Mirrored bars are drawn over the box they cover after their
    180 degree rotation, which is the box they were laid out in.

    Args:
        geometry: Geometry from ``layout_chart`` or ``TornadoChart.update``
        opacities: Per-column opacity (e.g. ``TornadoChart.column_opacities()``)
        legend: Legend entries to show above the chart
        ax: Axes to draw on (a new figure is created when omitted)
        font_size: Text size in points
        axis_color: Color of the center axis

    Returns:
        Tuple of (figure, axes)

    Examples:
        fig, ax = tornado_plot(chart.geometry, chart.column_opacities(), chart.data.legend)
        fig.savefig("tornado.png")
    """
    context = geometry.context

    if ax is None:
        fig, ax = plt.subplots(figsize=(max(context.chart_width, 1) / 100, max(context.chart_height, 1) / 100))
    else:
        fig = ax.figure

    offset = geometry.offset_x
    opacities = list(opacities) if opacities is not None else [1.0] * len(geometry.columns)

    for column, alpha in zip(geometry.columns, opacities):
        left, _ = column.extent
        ax.add_patch(Rectangle(
            (offset + left, column.y + column.dy),
            column.width,
            column.height,
            facecolor=column.color,
            edgecolor="none",
            alpha=alpha,
        ))

    if geometry.labels_visible:
        for label in geometry.labels:
            if not label.visible:
                continue
            ax.text(
                offset + label.x + label.dx,
                label.y + label.dy,
                label.value,
                color=label.color,
                fontsize=font_size,
                va="baseline",
                ha="left",
            )

    if geometry.axis is not None:
        line = geometry.axis
        ax.plot(
            [offset + line.x1, offset + line.x2],
            [line.y1, line.y2],
            color=axis_color,
            linewidth=1,
        )

    for category in geometry.categories:
        ax.text(
            category.x,
            category.y,
            category.text,
            color=category.color,
            fontsize=font_size,
            va="baseline",
            ha="left",
        )

    if legend:
        handles = [Patch(facecolor=entry.color, label=entry.label) for entry in legend]
        ax.legend(handles=handles, loc="lower center", bbox_to_anchor=(0.5, 1.0), ncol=len(handles), frameon=False)

    ax.set_xlim(0, max(context.chart_width, 1))
    ax.set_ylim(max(context.chart_height, 1), 0)
    ax.axis("off")

    return fig, ax
