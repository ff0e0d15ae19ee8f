"""
epochdate — compact date handling.

Dates from 1970-01-01 through 2149-06-06 stored as 16-bit day ordinals
(Date), and months from 1970-01 through 7431-04 stored as 16-bit month
ordinals (YearMonth).
"""

from epochdate.core.domain import (
    MAX_DATE,
    MAX_YEAR_MONTH,
    MIN_DATE,
    MIN_YEAR_MONTH,
    RFC3339,
    Date,
    OrdinalConfig,
    YearMonth,
    clamp_from_date,
    clamp_from_time,
    clamp_from_unix,
    clamp_year_month,
    must_parse_rfc,
    new_from_date,
    new_from_time,
    new_from_unix,
    new_year_month,
    parse,
    parse_rfc,
    today,
    today_utc,
)
from epochdate.core.errors import (
    EpochDateError,
    InvalidLiteralError,
    OutOfRangeError,
    ParseError,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "Date",
    "YearMonth",
    "OrdinalConfig",
    "MIN_DATE",
    "MAX_DATE",
    "MIN_YEAR_MONTH",
    "MAX_YEAR_MONTH",
    "RFC3339",
    # Constructors
    "new_from_unix",
    "clamp_from_unix",
    "new_from_time",
    "clamp_from_time",
    "new_from_date",
    "clamp_from_date",
    "new_year_month",
    "clamp_year_month",
    "today",
    "today_utc",
    "parse",
    "parse_rfc",
    "must_parse_rfc",
    # Errors
    "EpochDateError",
    "OutOfRangeError",
    "ParseError",
    "InvalidLiteralError",
]
