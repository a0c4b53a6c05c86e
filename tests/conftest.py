import matplotlib

matplotlib.use("Agg")

import pytest

from tornadolayout.model import CategoricalResult
from tornadolayout.text import TextMeasurer


CHAR_WIDTH = 6.0
TEXT_HEIGHT = 12.0


class FixedWidthMeasurer(TextMeasurer):
    """Every character is CHAR_WIDTH wide, every line TEXT_HEIGHT tall."""

    def measure_width(self, text: str) -> float:
        return CHAR_WIDTH * len(text or "")

    def measure_height(self, text: str) -> float:
        return TEXT_HEIGHT


@pytest.fixture
def measurer():
    return FixedWidthMeasurer()


def make_result(categories, series, objects=None, names=None, category_name="Category"):
    names = names or [f"Series {i}" for i in range(len(series))]
    return CategoricalResult.model_validate({
        "categories": {
            "source": {"display_name": category_name},
            "values": categories,
        },
        "values": [
            {"source": {"display_name": name, "query_name": f"q.{name}"}, "values": values}
            for name, values in zip(names, series)
        ],
        "objects": objects,
    })


@pytest.fixture
def two_series_result():
    return make_result(["A", "B"], [[10, -5], [20, 15]])


@pytest.fixture
def result_factory():
    return make_result
