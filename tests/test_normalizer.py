from tornadolayout.colors import ColorResolver
from tornadolayout.model import CategoricalResult
from tornadolayout.normalizer import convert


def test_missing_parts_give_no_model(result_factory):
    assert convert(None) is None
    assert convert(CategoricalResult()) is None

    no_source = CategoricalResult.model_validate({
        "categories": {"values": ["A"]},
        "values": [{"values": [1]}],
    })
    assert convert(no_source) is None

    no_values = CategoricalResult.model_validate({
        "categories": {"source": {"display_name": "Category"}, "values": ["A"]},
    })
    assert convert(no_values) is None

    assert convert(result_factory([], [[]])) is None


def test_defaults(two_series_result):
    data = convert(two_series_result)

    assert data.display_name == "Category"
    assert data.categories == ["A", "B"]
    assert [s.name for s in data.series] == ["Series 0", "Series 1"]
    assert [s.fill for s in data.series] == ["purple", "teal"]
    assert data.is_two_sided

    settings = data.settings
    assert settings.precision == 2
    assert settings.show_labels and settings.show_legend and settings.show_categories
    assert settings.label_inside_fill == "#fff"
    assert settings.label_outside_fill == "#777"
    assert settings.categories_fill == "#777"


def test_extra_series_are_dropped(result_factory):
    data = convert(result_factory(["A"], [[1], [2], [3]]))
    assert len(data.series) == 2
    assert len(data.legend) == 2


def test_precision_is_clamped(result_factory):
    data = convert(result_factory(["A"], [[1.5]], objects={"labels": {"labelPrecision": -3}}))
    assert data.settings.precision == 0
    assert data.settings.formatter.format(2.4) == "2"


def test_formatter_uses_first_value(result_factory):
    integral = convert(result_factory(["A", "B"], [[10, 2.5]]))
    assert integral.settings.formatter.format(10) == "10"
    assert integral.settings.formatter.format(2.5) == "2.50"

    decimal = convert(result_factory(["A", "B"], [[1.5, 10]]))
    assert decimal.settings.formatter.format(10) == "10.00"


def test_format_string_from_category_source():
    result = CategoricalResult.model_validate({
        "categories": {"source": {"display_name": "Region", "format": "#,0"}, "values": ["A"]},
        "values": [{"source": {"display_name": "Sales"}, "values": [1234567]}],
    })
    assert convert(result).settings.formatter.format(1234567) == "1,234,567"


def test_color_overrides(result_factory):
    objects = {
        "labels": {"insideFill": {"solid": {"color": "#123456"}}, "outsideFill": "#abcdef"},
        "categories": {"fill": {"solid": {"color": "black"}}},
    }
    data = convert(result_factory(["A"], [[1]], objects=objects))

    assert data.settings.label_inside_fill == "#123456"
    assert data.settings.label_outside_fill == "#abcdef"
    assert data.settings.categories_fill == "black"


def test_series_fill_override_and_palette():
    result = CategoricalResult.model_validate({
        "categories": {"source": {"display_name": "Region"}, "values": ["A"]},
        "values": [
            {"source": {"display_name": "Low", "objects": {"dataPoint": {"fill": {"solid": {"color": "#ff0000"}}}}},
             "values": [1]},
            {"source": {"display_name": "High"}, "values": [2]},
        ],
    })
    data = convert(result, ColorResolver(palette=["tab:blue", "tab:orange"]))

    assert data.series[0].fill == "#ff0000"
    assert data.series[1].fill == "#ff7f0e"
    assert [(entry.label, entry.color, entry.icon, entry.selected) for entry in data.legend] == [
        ("Low", "#ff0000", "box", False),
        ("High", "#ff7f0e", "box", False),
    ]


def test_values_aligned_to_categories(result_factory):
    data = convert(result_factory(["A", "B", "C"], [[1], [1, 2, 3, 4]]))

    assert data.series[0].values == [1.0, None, None]
    assert data.series[1].values == [1.0, 2.0, 3.0]


def test_category_values_are_strings(result_factory):
    data = convert(result_factory([2023, None], [[1, 2]]))
    assert data.categories == ["2023", ""]


def test_invalid_setting_values_fall_back_to_defaults(result_factory, caplog):
    objects = {
        "labels": {"show": "maybe", "labelPrecision": "many"},
        "legend": {"show": False},
    }
    data = convert(result_factory(["A"], [[1.5]], objects=objects))

    assert data.settings.show_labels is True
    assert data.settings.precision == 2
    assert data.settings.show_legend is False
    assert "Ignoring invalid labels.show value 'maybe'" in caplog.text
    assert "Ignoring invalid labels.labelPrecision value 'many'" in caplog.text


def test_unusable_precision_types_fall_back(result_factory):
    data = convert(result_factory(["A"], [[1.5]], objects={"labels": {"labelPrecision": [3]}}))
    assert data.settings.precision == 2
