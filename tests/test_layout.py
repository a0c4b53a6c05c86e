import numpy as np
import pytest

from tornadolayout.columns import column_widths, compute_row_height, value_range
from tornadolayout.geometry import Viewport
from tornadolayout.layout import build_context, layout_chart
from tornadolayout.normalizer import convert
from tornadolayout.settings import ChartOptions


def test_two_series_scenario(two_series_result, measurer):
    data = convert(two_series_result)
    geometry = layout_chart(data, Viewport(400, 200), measurer=measurer)
    context = geometry.context

    assert context.sections.left == 75
    assert context.sections.right == 325
    assert context.region_width == pytest.approx(162.5)
    assert context.row_height == pytest.approx(95)
    assert (context.min_value, context.max_value) == (-5, 20)
    assert geometry.offset_x == 75

    assert len(geometry.columns) == 4
    a0, b0, a1, b1 = geometry.columns

    # Series 0 is mirrored and pushed against the axis
    assert a0.angle == 180 and b0.angle == 180
    assert a0.width == pytest.approx(97.5)
    assert a0.dx == pytest.approx(65)
    assert a0.extent[1] == pytest.approx(162.5)
    assert (a0.px, a0.py) == (pytest.approx(48.75), pytest.approx(47.5))
    assert b0.width == pytest.approx(0)
    assert b0.dy == pytest.approx(105)

    # Series 1 grows rightward from the axis
    assert a1.angle == 0 and b1.angle == 0
    assert a1.dx == pytest.approx(162.5)
    assert a1.width == pytest.approx(162.5)
    assert b1.width == pytest.approx(130)

    assert geometry.axis.x1 == geometry.axis.x2 == pytest.approx(162.5)
    assert (geometry.axis.y1, geometry.axis.y2) == (0, 200)


def test_columns_carry_colors_and_tooltips(two_series_result, measurer):
    geometry = layout_chart(convert(two_series_result), Viewport(400, 200), measurer=measurer)
    first = geometry.columns[0]

    assert first.color == "purple"
    assert geometry.columns[2].color == "teal"
    assert [(item.display_name, item.value) for item in first.tooltip] == [
        ("Category", "A"),
        ("Series 0", "10"),
    ]
    assert [(c.series_index, c.category_index) for c in geometry.columns] == [
        (0, 0), (0, 1), (1, 0), (1, 1)
    ]


def test_single_series_degenerate_values_fill_region(result_factory, measurer):
    geometry = layout_chart(convert(result_factory(["A", "B"], [[5, 5]])), Viewport(400, 200), measurer=measurer)

    assert geometry.axis is None
    assert geometry.context.region_width == 325
    for column in geometry.columns:
        assert column.width == pytest.approx(325)
        assert column.dx == 0
        assert column.angle == 0


def test_equal_min_and_max_gives_full_width():
    widths = column_widths(np.array([0.0, 0.0]), 0.0, 0.0, 120.0)
    assert widths.tolist() == [120.0, 120.0]


def test_min_value_is_clamped_to_zero(result_factory):
    data = convert(result_factory(["A", "B"], [[3, 8], [4, 6]]))
    assert value_range(data.series) == (0.0, 8.0)


def test_missing_values_are_drawn_as_zero(result_factory, measurer):
    data = convert(result_factory(["A", "B"], [[None, 10]]))
    geometry = layout_chart(data, Viewport(400, 200), measurer=measurer)

    assert geometry.columns[0].width == 0
    assert geometry.columns[0].label.value == ""


@pytest.mark.parametrize("count", [1, 2, 3, 7, 20])
def test_rows_partition_chart_height(count):
    padding = 10
    height = compute_row_height(300, count, padding)
    assert height * count + padding * (count - 1) == pytest.approx(300)


def test_widths_stay_within_region(result_factory, measurer):
    rng = np.random.default_rng(7)
    low = rng.uniform(-100, 50, size=12).tolist()
    high = rng.uniform(-20, 200, size=12).tolist()
    data = convert(result_factory([str(i) for i in range(12)], [low, high]))

    geometry = layout_chart(data, Viewport(640, 480), measurer=measurer)
    region = geometry.context.region_width
    for column in geometry.columns:
        assert 0 <= column.width <= region + 1e-9


def test_hidden_categories_collapse_left_section(result_factory, measurer):
    data = convert(result_factory(["A", "B"], [[10, -5], [20, 15]], objects={"categories": {"show": False}}))
    geometry = layout_chart(data, Viewport(400, 200), measurer=measurer)

    assert geometry.context.sections.left == 0
    assert geometry.context.sections.right == 400
    assert geometry.categories == []
    assert geometry.show_categories is False
    assert geometry.axis.x1 == 200


def test_percent_sections(two_series_result):
    options = ChartOptions(sections={"left": 25, "is_percent": True})
    context = build_context(convert(two_series_result), Viewport(400, 200), options)

    assert context.sections.left == 100
    assert context.sections.right == 300
    assert context.region_width == 150


def test_category_rows(two_series_result, measurer):
    geometry = layout_chart(convert(two_series_result), Viewport(400, 200), measurer=measurer)

    assert [row.text for row in geometry.categories] == ["A", "B"]
    assert geometry.categories[0].y == pytest.approx(47.5 + 6 - 2)
    assert geometry.categories[1].y == pytest.approx(105 + 47.5 + 6 - 2)
    assert {row.color for row in geometry.categories} == {"#777"}


def test_long_category_is_truncated_to_left_section(result_factory, measurer):
    name = "A very long category name"
    geometry = layout_chart(convert(result_factory([name], [[1]])), Viewport(400, 200), measurer=measurer)
    row = geometry.categories[0]

    assert row.title == name
    assert row.text.endswith("…")
    assert row.width <= geometry.context.sections.left


def test_layout_is_idempotent(two_series_result, measurer):
    data = convert(two_series_result)
    first = layout_chart(data, Viewport(400, 200), measurer=measurer)
    second = layout_chart(data, Viewport(400, 200), measurer=measurer)

    assert first == second


def test_no_data_gives_no_geometry(measurer):
    assert layout_chart(None, Viewport(400, 200), measurer=measurer) is None


def test_viewport_narrower_than_left_section(two_series_result, measurer):
    geometry = layout_chart(convert(two_series_result), Viewport(60, 200), measurer=measurer)
    context = geometry.context

    assert context.sections.right == 0
    assert context.region_width == 0
    assert all(column.width == 0 for column in geometry.columns)
    assert geometry.axis.x1 == 0


def test_column_widths_never_negative():
    widths = column_widths(np.array([-5.0, 10.0, 20.0]), -5.0, 20.0, -7.5)
    assert widths.tolist() == [0.0, 0.0, 0.0]
