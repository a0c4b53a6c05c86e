import logging
from typing import Any, Dict, List, Optional

import polars as pl
import polars.selectors as cs

from .model import CategoricalResult, CategoryColumn, ColumnSource, ValueColumn


logger = logging.getLogger(__name__)


def from_frame(
    df: pl.DataFrame,
    category: Optional[str] = None,
    values: Optional[List[str]] = None,
    objects: Optional[Dict[str, Any]] = None,
    formats: Optional[Dict[str, str]] = None
) -> CategoricalResult:
    """Build a categorical result from a polars DataFrame.

    Args:
        df: Source frame, one row per category
        category: Category column (defaults to the first column)
        values: Value columns (defaults to every other numeric column)
        objects: Optional property bag passed through to the result
        formats: Optional format string per column name

    Returns:
        CategoricalResult; an empty frame gives a result without categories

    Examples:
        df = pl.DataFrame({"region": ["North", "South"], "2023": [10, -5], "2024": [20, 15]})
        result = from_frame(df, objects={"labels": {"labelPrecision": 1}})
    """
    if df.width == 0:
        return CategoricalResult(objects=objects)

    category = category or df.columns[0]
    if category not in df.columns:
        raise ValueError(f"Category column '{category}' not found. Available: {df.columns}")

    if values is None:
        values = [col for col in df.select(cs.numeric()).columns if col != category]
    else:
        missing = [col for col in values if col not in df.columns]
        if missing:
            raise ValueError(f"Value columns not found: {missing}. Available: {df.columns}")

    if not values:
        logger.warning("No numeric value columns found next to '%s'", category)

    formats = formats or {}

    return CategoricalResult(
        categories=CategoryColumn(
            source=_source(category, formats),
            values=df[category].cast(pl.Utf8).to_list(),
        ),
        values=[
            ValueColumn(
                source=_source(col, formats),
                values=df[col].cast(pl.Float64, strict=False).to_list(),
            )
            for col in values
        ],
        objects=objects,
    )


def _source(name: str, formats: Dict[str, str]) -> ColumnSource:
    return ColumnSource(display_name=name, query_name=name, format=formats.get(name))
