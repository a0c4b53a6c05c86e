from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .settings import ChartSettings


# ================================================================
# RAW CATEGORICAL RESULT (input)
# ================================================================


class ColumnSource(BaseModel):
    """Source metadata of a result column."""

    display_name: str = ""
    query_name: Optional[str] = None
    format: Optional[str] = None
    objects: Optional[Dict[str, Any]] = None


class CategoryColumn(BaseModel):
    source: Optional[ColumnSource] = None
    values: List[Any] = Field(default_factory=list)


class ValueColumn(BaseModel):
    source: ColumnSource = Field(default_factory=ColumnSource)
    values: List[Optional[float]] = Field(default_factory=list)


class CategoricalResult(BaseModel):
    """Raw categorical query result: one category column and value columns.

    Every part is optional so that incomplete results can be represented;
    the normalizer turns those into "no chart" instead of failing.

    Examples:
        result = CategoricalResult.model_validate({
            "categories": {"source": {"display_name": "Region"}, "values": ["North", "South"]},
            "values": [
                {"source": {"display_name": "2023"}, "values": [10, -5]},
                {"source": {"display_name": "2024"}, "values": [20, 15]},
            ],
        })
    """

    categories: Optional[CategoryColumn] = None
    values: Optional[List[ValueColumn]] = None
    objects: Optional[Dict[str, Any]] = None


# ================================================================
# CANONICAL MODEL (output of the normalizer)
# ================================================================


class Series(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    fill: str
    values: List[Optional[float]]
    query_name: Optional[str] = None


class LegendEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    color: str
    icon: str = "box"
    selected: bool = False


class TornadoChartData(BaseModel):
    model_config = ConfigDict(frozen=True)

    display_name: str
    categories: List[str]
    series: List[Series]
    settings: ChartSettings
    legend: List[LegendEntry]

    @property
    def is_two_sided(self) -> bool:
        return len(self.series) == 2
