"""
BoundedOrdinal — Общая основа компактных календарных ординалов

Date и YearMonth хранят беззнаковое 16-битное значение (2 байта полезной
информации вместо полноценного datetime). Общая логика вынесена сюда:
- Диапазон [ORDINAL_MIN, ORDINAL_MAX] и насыщение (clamp) на границах
- Арифметика с переполнением по модулю 2**16 (без clamp)
- Сравнение, хеширование, неизменяемость
- Интеграция с pydantic v2 (валидация из текста, JSON сериализация)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Clamp применяется только при конструировании, никогда в арифметике
2. Ошибки синтаксиса (ParseError) не зависят от режима clamp
3. Значения неизменяемы
"""

import logging
import operator
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, ClassVar, Dict, Final, Optional, TypeVar, Union

from pydantic_core import core_schema

from ..errors import OutOfRangeError

logger = logging.getLogger(__name__)


# =============================================================================
# ДИАПАЗОН
# =============================================================================

ORDINAL_BITS: Final[int] = 16
ORDINAL_MIN: Final[int] = 0
ORDINAL_MAX: Final[int] = (1 << ORDINAL_BITS) - 1
_MODULUS: Final[int] = 1 << ORDINAL_BITS


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class OrdinalConfig:
    """Поведение new_from_* конструкторов при выходе за диапазон.

    clamp=False (по умолчанию): OutOfRangeError.
    clamp=True: насыщение до ближайшей границы без ошибки.

    Функции clamp_from_* всегда насыщают и не зависят от конфигурации;
    предпочтительны, когда насыщение нужно явно.
    """
    clamp: bool = False


STRICT: Final[OrdinalConfig] = OrdinalConfig()
CLAMPING: Final[OrdinalConfig] = OrdinalConfig(clamp=True)


def resolve_config(config: Optional[OrdinalConfig]) -> OrdinalConfig:
    return config or STRICT


# =============================================================================
# BOUNDED ORDINAL
# =============================================================================

O = TypeVar("O", bound="BoundedOrdinal")


@total_ordering
class BoundedOrdinal:
    """
    Беззнаковый 16-битный ординал календарной единицы.

    Подклассы задают RANGE_TEXT (для сообщений об ошибках), to_text() и
    from_text(). Сравнение с int разрешено (Date(0) == 0), между разными
    подклассами — нет.
    """

    __slots__ = ("_value",)

    RANGE_TEXT: ClassVar[str] = "[0,65535]"
    TEXT_PATTERN: ClassVar[str] = ""

    def __init__(self, value: int = ORDINAL_MIN):
        value = operator.index(value)
        if not ORDINAL_MIN <= value <= ORDINAL_MAX:
            raise OutOfRangeError(
                f"{type(self).__name__} ordinal {value} out of range {self.RANGE_TEXT}",
                clamped=ORDINAL_MIN if value < ORDINAL_MIN else ORDINAL_MAX,
            )
        object.__setattr__(self, "_value", value)

    @classmethod
    def saturate(cls, raw: int, clamp: bool) -> "BoundedOrdinal":
        """
        Построение из сырого значения с насыщением или ошибкой.

        Args:
            raw: Вычисленный ординал (может быть вне диапазона)
            clamp: True — насыщение до границы, False — OutOfRangeError

        Raises:
            OutOfRangeError: Если clamp=False и raw вне диапазона.
                Атрибут clamped содержит ближайшую границу.
        """
        if ORDINAL_MIN <= raw <= ORDINAL_MAX:
            return cls(raw)

        bound = ORDINAL_MIN if raw < ORDINAL_MIN else ORDINAL_MAX
        if not clamp:
            raise OutOfRangeError(
                f"epochdate: {cls.__name__} must be in range {cls.RANGE_TEXT}",
                clamped=bound,
            )

        logger.debug("%s ordinal %d clamped to %d", cls.__name__, raw, bound)
        return cls(bound)

    # -------------------------------------------------------------------------
    # Текстовое представление (реализуется подклассами)
    # -------------------------------------------------------------------------

    def to_text(self) -> str:
        raise NotImplementedError

    @classmethod
    def from_text(cls, data: Union[str, bytes]) -> Any:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    # -------------------------------------------------------------------------
    # Значение
    # -------------------------------------------------------------------------

    @property
    def value(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._value,))

    def is_zero(self) -> bool:
        return self._value == ORDINAL_MIN

    def is_max(self) -> bool:
        return self._value == ORDINAL_MAX

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def _other_value(self, other: Any) -> Optional[int]:
        if type(other) is type(self):
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __eq__(self, other: Any) -> bool:
        value = self._other_value(other)
        if value is None:
            return NotImplemented
        return self._value == value

    def __lt__(self, other: Any) -> bool:
        value = self._other_value(other)
        if value is None:
            return NotImplemented
        return self._value < value

    def __hash__(self) -> int:
        return hash(self._value)

    # -------------------------------------------------------------------------
    # Арифметика (переполнение по модулю 2**16, без clamp)
    # -------------------------------------------------------------------------

    def __add__(self: O, other: Any) -> O:
        if isinstance(other, BoundedOrdinal) or not isinstance(other, int):
            return NotImplemented
        return type(self)((self._value + other) % _MODULUS)

    __radd__ = __add__

    def __sub__(self, other: Any):
        """
        Ординал - int: сдвиг назад с переполнением.
        Ординал - ординал того же типа: знаковая разница в единицах (int).
        """
        if type(other) is type(self):
            return self._value - other._value
        if isinstance(other, BoundedOrdinal) or not isinstance(other, int):
            return NotImplemented
        return type(self)((self._value - other) % _MODULUS)

    # -------------------------------------------------------------------------
    # pydantic v2
    # -------------------------------------------------------------------------

    @classmethod
    def _coerce(cls, value: Any) -> "BoundedOrdinal":
        if isinstance(value, cls):
            return value
        if isinstance(value, (str, bytes)):
            return cls.from_text(value)
        raise ValueError(
            f"{cls.__name__} expects {cls.__name__} or text, got {type(value).__name__}"
        )

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_text(), when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> Dict[str, Any]:
        return {"type": "string", "pattern": cls.TEXT_PATTERN, "title": cls.__name__}
