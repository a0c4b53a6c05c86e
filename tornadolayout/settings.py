from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .formatting import ValueFormatter


MIN_PRECISION = 0
MAX_SIZE_SECTIONS = 100


class ChartProperty(Enum):
    """Object/property pairs understood in the ``objects`` property bag."""

    FORMAT_STRING = ("general", "formatString")
    LABELS_SHOW = ("labels", "show")
    LABELS_PRECISION = ("labels", "labelPrecision")
    LABELS_INSIDE_FILL = ("labels", "insideFill")
    LABELS_OUTSIDE_FILL = ("labels", "outsideFill")
    DATA_POINT_FILL = ("dataPoint", "fill")
    LEGEND_SHOW = ("legend", "show")
    CATEGORIES_SHOW = ("categories", "show")
    CATEGORIES_FILL = ("categories", "fill")

    @property
    def object_name(self) -> str:
        return self.value[0]

    @property
    def property_name(self) -> str:
        return self.value[1]

    def lookup(self, objects: Optional[Dict[str, Any]], default: Any = None) -> Any:
        """Return the raw value stored for this property or ``default``."""
        if not objects:
            return default
        group = objects.get(self.object_name)
        if not isinstance(group, dict):
            return default
        value = group.get(self.property_name)
        return default if value is None else value


class Sections(BaseModel):
    """Split between the category-text region and the chart region."""

    model_config = ConfigDict(frozen=True)

    left: float = 75
    right: float = 0
    is_percent: bool = False

    @model_validator(mode="after")
    def _check_bounds(self) -> "Sections":
        if self.left < 0 or self.right < 0:
            raise ValueError("Section sizes must be non-negative")
        if self.is_percent and self.left > MAX_SIZE_SECTIONS:
            raise ValueError(f"Percent sections cannot exceed {MAX_SIZE_SECTIONS}")
        return self


class Margin(BaseModel):
    model_config = ConfigDict(frozen=True)

    top: float = Field(10, ge=0)
    right: float = Field(10, ge=0)
    bottom: float = Field(10, ge=0)
    left: float = Field(10, ge=0)


class ChartOptions(BaseModel):
    """Construction-time options of the chart.

    Examples:
        options = ChartOptions(column_padding=4, sections=Sections(left=20, is_percent=True))
    """

    model_config = ConfigDict(frozen=True)

    sections: Sections = Field(default_factory=Sections)
    margin: Margin = Field(default_factory=Margin)
    max_label_width: float = Field(55, ge=0)
    column_padding: float = Field(10, ge=0)
    left_label_margin: float = Field(4, ge=0)
    inner_text_height_delta: float = 2
    min_column_opacity: float = Field(0.2, ge=0, le=1)
    max_series: int = Field(2, ge=1, le=2)


DEFAULT_FILL_COLORS: Tuple[str, ...] = ("purple", "teal")


class ChartSettings(BaseModel):
    """Per-update settings resolved from the data view.

    ``precision`` values at or below ``MIN_PRECISION`` are clamped to it.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    precision: int = 2
    formatter: ValueFormatter = Field(default_factory=ValueFormatter)
    show_labels: bool = True
    show_legend: bool = True
    show_categories: bool = True
    label_inside_fill: str = "#fff"
    label_outside_fill: str = "#777"
    categories_fill: str = "#777"

    @field_validator("precision", mode="before")
    @classmethod
    def _clamp_precision(cls, value: Any) -> int:
        if value is None:
            return 2
        try:
            value = int(value)
        except (TypeError, ValueError, OverflowError):
            raise ValueError(f"labelPrecision must be a number, got {value!r}")
        return MIN_PRECISION if value <= MIN_PRECISION else value


DEFAULT_SETTINGS = ChartSettings()
