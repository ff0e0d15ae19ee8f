"""
Contract Validation Module

Text/JSON encoding of Date and YearMonth, and JSON Schema contracts for
their tokens and for DatedRecord.
"""

from .codec import marshal_json, marshal_text, unmarshal_json, unmarshal_text
from .validators import (
    ContractValidator,
    DatedRecordValidator,
    DateTokenValidator,
    SchemaLoader,
    YearMonthTokenValidator,
    validate_date_token,
    validate_dated_record,
    validate_year_month_token,
)

__all__ = [
    # Codec
    "marshal_text",
    "unmarshal_text",
    "marshal_json",
    "unmarshal_json",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DateTokenValidator",
    "YearMonthTokenValidator",
    "DatedRecordValidator",
    # Functions
    "validate_date_token",
    "validate_year_month_token",
    "validate_dated_record",
]
