"""
Domain value types.

Contains the compact calendar ordinals Date and YearMonth, their shared
BoundedOrdinal base, and an example pydantic model using them.
"""

from epochdate.core.domain.date import (
    AMERICAN_COMMON,
    MAX_DATE,
    MAX_UNIX,
    MIN_DATE,
    RFC3339,
    SECONDS_PER_DAY,
    Date,
    clamp_from_date,
    clamp_from_time,
    clamp_from_unix,
    must_parse,
    must_parse_rfc,
    new_from_date,
    new_from_time,
    new_from_unix,
    parse,
    parse_rfc,
    today,
    today_strict,
    today_utc,
    unix_in_range,
)
from epochdate.core.domain.ordinal import (
    CLAMPING,
    ORDINAL_MAX,
    ORDINAL_MIN,
    STRICT,
    BoundedOrdinal,
    OrdinalConfig,
)
from epochdate.core.domain.record import DatedRecord
from epochdate.core.domain.year_month import (
    MAX_YEAR_MONTH,
    MIN_YEAR_MONTH,
    RFC3339_YEAR_MONTH,
    YearMonth,
    clamp_year_month,
    new_year_month,
)

__all__ = [
    # Ordinal base
    "ORDINAL_MIN",
    "ORDINAL_MAX",
    "BoundedOrdinal",
    "OrdinalConfig",
    "STRICT",
    "CLAMPING",
    # Date
    "Date",
    "MIN_DATE",
    "MAX_DATE",
    "MAX_UNIX",
    "SECONDS_PER_DAY",
    "RFC3339",
    "AMERICAN_COMMON",
    "unix_in_range",
    "new_from_unix",
    "clamp_from_unix",
    "new_from_time",
    "clamp_from_time",
    "new_from_date",
    "clamp_from_date",
    "today",
    "today_strict",
    "today_utc",
    "parse",
    "parse_rfc",
    "must_parse",
    "must_parse_rfc",
    # YearMonth
    "YearMonth",
    "MIN_YEAR_MONTH",
    "MAX_YEAR_MONTH",
    "RFC3339_YEAR_MONTH",
    "new_year_month",
    "clamp_year_month",
    # Models
    "DatedRecord",
]
