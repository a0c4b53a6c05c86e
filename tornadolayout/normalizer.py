import logging
from typing import Any, Dict, List, Optional

from .colors import ColorResolver
from .formatting import create_formatter
from .model import CategoricalResult, LegendEntry, Series, TornadoChartData, ValueColumn
from .settings import DEFAULT_FILL_COLORS, DEFAULT_SETTINGS, ChartProperty, ChartSettings


logger = logging.getLogger(__name__)

MAX_SERIES = 2


def convert(
    result: Optional[CategoricalResult],
    colors: Optional[ColorResolver] = None,
    max_series: int = MAX_SERIES
) -> Optional[TornadoChartData]:
    """Convert a raw categorical result into the canonical chart model.

    Args:
        result: Raw result, possibly None or incomplete
        colors: Color resolver (defaults to one without a palette)
        max_series: Number of value columns kept

    Returns:
        TornadoChartData, or None when categories, their source metadata or
        the value columns are missing
    """
    if (
        result is None
        or result.categories is None
        or result.categories.source is None
        or not result.categories.values
        or not result.values
    ):
        logger.debug("No chart: categorical result is missing categories or values")
        return None

    colors = colors or ColorResolver()

    values = result.values[:max_series]
    if len(result.values) > max_series:
        logger.warning(
            "Dropping %d value column(s); at most %d series are drawn",
            len(result.values) - max_series,
            max_series,
        )

    categories = ["" if item is None else str(item) for item in result.categories.values]
    display_name = result.categories.source.display_name

    first_value = values[0].values[0] if values[0].values else None
    settings = parse_settings(result, first_value, colors)
    series = parse_series(values, len(categories), colors)

    return TornadoChartData(
        display_name=display_name,
        categories=categories,
        series=series,
        settings=settings,
        legend=legend_entries(series),
    )


def parse_settings(
    result: CategoricalResult,
    value: Any,
    colors: ColorResolver
) -> ChartSettings:
    """Resolve typed settings from the loose ``objects`` bag of a result."""
    objects = result.objects
    defaults = DEFAULT_SETTINGS

    fields = {
        "precision": ChartProperty.LABELS_PRECISION,
        "show_categories": ChartProperty.CATEGORIES_SHOW,
        "show_labels": ChartProperty.LABELS_SHOW,
        "show_legend": ChartProperty.LEGEND_SHOW,
    }
    checked = {}
    for name, prop in fields.items():
        raw = prop.lookup(objects)
        if raw is None:
            continue
        try:
            ChartSettings(**{name: raw})
        except ValueError as e:
            logger.warning(
                "Ignoring invalid %s.%s value %r; using default: %s",
                prop.object_name, prop.property_name, raw, e,
            )
            continue
        checked[name] = raw

    settings = ChartSettings(
        **checked,
        label_inside_fill=colors.resolve(
            ChartProperty.LABELS_INSIDE_FILL, objects, defaults.label_inside_fill
        ),
        label_outside_fill=colors.resolve(
            ChartProperty.LABELS_OUTSIDE_FILL, objects, defaults.label_outside_fill
        ),
        categories_fill=colors.resolve(
            ChartProperty.CATEGORIES_FILL, objects, defaults.categories_fill
        ),
    )

    formatter = create_formatter(_format_string(result), settings.precision, value)
    return settings.model_copy(update={"formatter": formatter})


def _format_string(result: CategoricalResult) -> Optional[str]:
    source = result.categories.source
    if source.format:
        return source.format
    if source.objects:
        nested = ChartProperty.FORMAT_STRING.lookup(source.objects)
        if nested:
            return nested
    return ChartProperty.FORMAT_STRING.lookup(result.objects)


def parse_series(
    columns: List[ValueColumn],
    category_count: int,
    colors: ColorResolver
) -> List[Series]:
    series = []
    for index, column in enumerate(columns):
        fill = colors.resolve(
            ChartProperty.DATA_POINT_FILL,
            column.source.objects,
            DEFAULT_FILL_COLORS[index % len(DEFAULT_FILL_COLORS)],
            index=index,
        )
        series.append(Series(
            name=column.source.display_name,
            fill=fill,
            values=_align(column.values, category_count, column.source.display_name),
            query_name=column.source.query_name,
        ))
    return series


def _align(values: List[Optional[float]], count: int, name: str) -> List[Optional[float]]:
    if len(values) == count:
        return list(values)
    logger.warning(
        "Series '%s' has %d values for %d categories; aligning by index",
        name, len(values), count,
    )
    return list(values[:count]) + [None] * max(count - len(values), 0)


def legend_entries(series: List[Series]) -> List[LegendEntry]:
    return [LegendEntry(label=item.name, color=item.fill) for item in series]


def settings_snapshot(data: Optional[TornadoChartData], object_name: str) -> List[Dict[str, Any]]:
    """Current-settings snapshot of one property object for a property editor.

    Args:
        data: Canonical model of the last update (may be None)
        object_name: ``dataPoint``, ``labels``, ``legend`` or ``categories``

    Returns:
        List of object instances; empty for unknown names or missing data
    """
    if data is None:
        return []

    settings = data.settings

    if object_name == "dataPoint":
        return [
            {
                "objectName": "dataPoint",
                "displayName": item.name,
                "selector": {"metadata": item.query_name},
                "properties": {"fill": {"solid": {"color": item.fill}}},
            }
            for item in data.series
        ]

    if object_name == "labels":
        properties = {
            "show": settings.show_labels,
            "labelPrecision": settings.precision,
            "insideFill": settings.label_inside_fill,
            "outsideFill": settings.label_outside_fill,
        }
    elif object_name == "legend":
        properties = {"show": settings.show_legend}
    elif object_name == "categories":
        properties = {
            "show": settings.show_categories,
            "fill": settings.categories_fill,
        }
    else:
        return []

    return [{
        "objectName": object_name,
        "displayName": object_name,
        "selector": None,
        "properties": properties,
    }]
