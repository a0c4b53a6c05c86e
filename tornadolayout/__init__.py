"""
TornadoLayout - layout engine for two-sided tornado bar charts.

This library converts categorical query results into exact pixel geometry
for tornado charts: mirrored bars around a shared axis, value labels,
category text and highlight selection.
"""

import logging

from .chart import TornadoChart
from .datasource import from_frame
from .excel import read_excel_result
from .geometry import ChartGeometry, Viewport
from .layout import layout_chart
from .model import CategoricalResult
from .normalizer import convert
from .plot import tornado_plot
from .settings import ChartOptions, Sections
from .text import MatplotlibTextMeasurer, TextMeasurer

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "TornadoChart",
    "ChartGeometry",
    "ChartOptions",
    "CategoricalResult",
    "MatplotlibTextMeasurer",
    "Sections",
    "TextMeasurer",
    "Viewport",
    "convert",
    "from_frame",
    "layout_chart",
    "read_excel_result",
    "tornado_plot",
]
