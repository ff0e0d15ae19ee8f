"""
Codec — Текстовое и JSON кодирование Date / YearMonth

Текст: UTF-8 токены "2020-01-15" (Date) и "2020-01" (YearMonth).
JSON: те же токены в кавычках; JSON null декодируется как "без изменений"
(возвращается текущее значение, а не ошибка).
"""

import json
from typing import Optional, Type, TypeVar, Union

from ..core.domain.ordinal import BoundedOrdinal
from ..core.errors import ParseError

O = TypeVar("O", bound=BoundedOrdinal)

JSON_NULL = b"null"


def marshal_text(value: BoundedOrdinal) -> bytes:
    """Date → b"2020-01-15", YearMonth → b"2020-01" """
    return value.to_text().encode("utf-8")


def unmarshal_text(cls: Type[O], data: Union[str, bytes]) -> O:
    """
    Декодирование текстового токена.

    Raises:
        ParseError: Токен не соответствует формату
        OutOfRangeError: Значение вне диапазона типа
    """
    return cls.from_text(data)


def marshal_json(value: BoundedOrdinal) -> bytes:
    """JSON строка: b'"2020-01-15"'"""
    return json.dumps(value.to_text()).encode("utf-8")


def unmarshal_json(
    cls: Type[O], data: Union[str, bytes], current: Optional[O] = None
) -> Optional[O]:
    """
    Декодирование JSON токена.

    Args:
        cls: Date или YearMonth
        data: JSON документ (строка в кавычках или null)
        current: Текущее значение; возвращается без изменений для null

    Returns:
        Декодированное значение или current для null

    Raises:
        ParseError: Не JSON строка или строка не соответствует формату
        OutOfRangeError: Значение вне диапазона типа
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    if data.strip() == JSON_NULL:
        return current

    try:
        token = json.loads(data)
    except ValueError as e:
        raise ParseError(f"epochdate: invalid JSON token {data!r}: {e}") from e
    if not isinstance(token, str):
        raise ParseError(f"epochdate: expected JSON string, got {type(token).__name__}")
    return cls.from_text(token)
