import math
import re
from typing import Any, Optional


_FORMAT_PATTERN = re.compile(r"^(?P<prefix>[^#0,.]*)(?P<body>[#0,.]+)(?P<suffix>.*)$")


class ValueFormatter:
    """Formats label values the way the host's format strings describe them.

    Only the parts of a format string that matter for bar labels are honoured:
    literal prefix/suffix text (currency symbols, units), thousands
    separators (a ``,`` in the numeric body) and percent scaling (a ``%`` in
    the suffix). The number of decimals always comes from ``precision``.

    Args:
        format_string: Host format string such as ``"#,0.00"`` or ``"0%"``
        precision: Decimal places for non-integral output
        integer: Print integral values without decimals

    Examples:
        ValueFormatter("#,0", precision=2).format(12345.678)   # '12,345.68'
        ValueFormatter("0%", precision=1).format(0.256)        # '25.6%'
    """

    def __init__(self, format_string: Optional[str] = None, precision: int = 2, integer: bool = False):
        self.format_string = format_string
        self.precision = max(int(precision), 0)
        self.integer = integer

        self.prefix = ""
        self.suffix = ""
        self.thousands = False

        if format_string:
            match = _FORMAT_PATTERN.match(format_string)
            if match:
                self.prefix = match.group("prefix")
                self.suffix = match.group("suffix")
                self.thousands = "," in match.group("body")
            elif "%" in format_string:
                self.suffix = "%"

        self.percent = "%" in self.suffix

    def format(self, value: Any) -> str:
        """Return the display string for ``value`` (empty for missing values)."""
        if value is None:
            return ""
        if isinstance(value, str):
            return value

        try:
            number = float(value)
        except (TypeError, ValueError):
            return str(value)

        if math.isnan(number):
            return ""

        if self.percent:
            number *= 100

        decimals = self.precision
        if self.integer and number.is_integer():
            decimals = 0

        separator = "," if self.thousands else ""
        body = f"{number:{separator}.{decimals}f}"
        return f"{self.prefix}{body}{self.suffix}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueFormatter):
            return NotImplemented
        return (
            self.format_string == other.format_string
            and self.precision == other.precision
            and self.integer == other.integer
        )

    def __hash__(self) -> int:
        return hash((self.format_string, self.precision, self.integer))

    def __repr__(self) -> str:
        return (
            f"ValueFormatter(format_string={self.format_string!r}, "
            f"precision={self.precision}, integer={self.integer})"
        )


def create_formatter(format_string: Optional[str], precision: int, value: Any = None) -> ValueFormatter:
    """Build a formatter, using a sample ``value`` to choose integer or decimal output.

    Args:
        format_string: Host format string (may be None)
        precision: Requested decimals, clamped to >= 0
        value: Sample value, usually the first value of the first series

    Returns:
        ValueFormatter configured for the data
    """
    integer = False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        integer = math.isfinite(value) and float(value).is_integer()

    return ValueFormatter(format_string, precision=max(int(precision), 0), integer=integer)
