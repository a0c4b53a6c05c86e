from typing import List

from .geometry import Viewport
from .model import LegendEntry
from .text import TextMeasurer


class Legend:
    """Legend widget: draws entries and reports the height it occupies."""

    def draw(self, entries: List[LegendEntry], viewport: Viewport, show: bool) -> float:
        raise NotImplementedError


class TextLegend(Legend):
    """Single-row legend on top of the chart, sized from its label text.

    Args:
        measurer: Text measurement service
        padding: Vertical padding above and below the row
    """

    def __init__(self, measurer: TextMeasurer, padding: float = 4):
        self.measurer = measurer
        self.padding = padding
        self.entries: List[LegendEntry] = []
        self.height = 0.0

    def draw(self, entries: List[LegendEntry], viewport: Viewport, show: bool) -> float:
        self.entries = list(entries) if show else []

        if not self.entries:
            self.height = 0.0
        else:
            text_height = max(self.measurer.measure_height(entry.label) for entry in self.entries)
            self.height = min(text_height + 2 * self.padding, viewport.height)

        return self.height
