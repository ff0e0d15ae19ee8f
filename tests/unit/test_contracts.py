"""
Tests for text/JSON codec and JSON Schema contract validators

Покрывает:
- marshal/unmarshal текста и JSON для Date и YearMonth
- JSON null как "без изменений"
- Валидность самих схем
- Валидацию токенов и записей против схем
"""

import json

import pytest
from jsonschema import ValidationError

from epochdate.contracts import (
    DatedRecordValidator,
    DateTokenValidator,
    SchemaLoader,
    YearMonthTokenValidator,
    marshal_json,
    marshal_text,
    unmarshal_json,
    unmarshal_text,
    validate_date_token,
    validate_dated_record,
    validate_year_month_token,
)
from epochdate.core.domain import Date, YearMonth
from epochdate.core.errors import OutOfRangeError, ParseError


# =============================================================================
# CODEC
# =============================================================================


class TestTextCodec:
    """Тесты marshal_text / unmarshal_text"""

    def test_date(self) -> None:
        """Date(1) ↔ b"1970-01-02" """
        assert marshal_text(Date(1)) == b"1970-01-02"
        assert unmarshal_text(Date, b"1970-01-02") == Date(1)

    def test_year_month(self) -> None:
        """YearMonth ↔ b"YYYY-MM" """
        assert marshal_text(YearMonth(65535)) == b"7431-04"
        assert unmarshal_text(YearMonth, b"7431-04") == YearMonth(65535)

    def test_errors(self) -> None:
        """Ошибки разбора и диапазона пробрасываются"""
        with pytest.raises(ParseError):
            unmarshal_text(Date, b"blah")
        with pytest.raises(OutOfRangeError):
            unmarshal_text(YearMonth, b"1969-12")


class TestJsonCodec:
    """Тесты marshal_json / unmarshal_json"""

    def test_marshal(self) -> None:
        """JSON строка в кавычках"""
        assert marshal_json(Date(1)) == b'"1970-01-02"'
        assert marshal_json(YearMonth(0)) == b'"1970-01"'

    def test_unmarshal(self) -> None:
        """Строка в кавычках декодируется"""
        assert unmarshal_json(Date, b'"1970-01-02"') == Date(1)
        assert unmarshal_json(YearMonth, '"2020-02-15"') == YearMonth(601)

    def test_null_keeps_current(self) -> None:
        """null — без изменений, а не ошибка"""
        current = Date(123)
        assert unmarshal_json(Date, b"null", current=current) is current
        assert unmarshal_json(Date, b" null ") is None

    @pytest.mark.parametrize("data", [b"123", b'"blah"', b"blah", b"{}", b'["1970-01-01"]'])
    def test_invalid(self, data: bytes) -> None:
        """Не JSON строка или неверный формат — ParseError"""
        with pytest.raises(ParseError):
            unmarshal_json(Date, data)

    def test_out_of_range(self) -> None:
        """Вне диапазона — OutOfRangeError"""
        with pytest.raises(OutOfRangeError):
            unmarshal_json(Date, b'"2149-06-07"')

    def test_inside_json_document(self) -> None:
        """Токены встраиваются в обычный JSON документ"""
        document = b'{"since": ' + marshal_json(Date(366)) + b"}"
        assert json.loads(document) == {"since": "1971-01-02"}


# =============================================================================
# SCHEMAS
# =============================================================================


class TestSchemaLoader:
    """Тесты SchemaLoader"""

    @pytest.mark.parametrize("name", ["date", "year_month", "dated_record"])
    def test_schemas_are_valid(self, name: str) -> None:
        """Все схемы проходят meta-validation и кэшируются"""
        loader = SchemaLoader()
        schema = loader.load_schema(name)
        assert schema["$schema"].endswith("2020-12/schema")
        assert loader.load_schema(name) is schema

    def test_missing_schema(self) -> None:
        """Несуществующая схема — FileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("missing")

    def test_missing_directory(self, tmp_path) -> None:
        """Несуществующий каталог — RuntimeError"""
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema(self, tmp_path) -> None:
        """Некорректная JSON Schema — ValueError"""
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


class TestTokenValidators:
    """Тесты валидации токенов"""

    def test_date_token(self) -> None:
        """Валидные и невалидные токены Date"""
        validate_date_token(Date(1).to_text())
        assert not DateTokenValidator().is_valid("1970-1-2")
        assert not DateTokenValidator().is_valid("1970-01")
        with pytest.raises(ValidationError):
            validate_date_token(19700102)

    def test_year_month_token(self) -> None:
        """YearMonth допускает обе формы"""
        validate_year_month_token("2020-01")
        validate_year_month_token("2020-01-15")
        assert not YearMonthTokenValidator().is_valid("2020")
        with pytest.raises(ValidationError):
            validate_year_month_token(None)

    def test_iter_errors(self) -> None:
        """iter_errors возвращает все нарушения"""
        errors = list(DatedRecordValidator().iter_errors({"date": "blah", "extra": 1}))
        assert len(errors) == 3  # required record_id, pattern, additionalProperties

    def test_dated_record(self) -> None:
        """Запись с необязательными полями null"""
        validate_dated_record(
            {"record_id": "r1", "date": "2020-01-15", "billing_month": None, "valid_until": None}
        )
        with pytest.raises(ValidationError):
            validate_dated_record({"record_id": "", "date": "2020-01-15"})
