"""
Date — Компактная дата (дни от Unix epoch)

Дата хранится как беззнаковое 16-битное число дней от 1970-01-01.
Диапазон: 1970-01-01 .. 2149-06-06 включительно.

Часовой пояс учитывается при конструировании: из datetime берётся
гражданская дата в зоне этого datetime, поэтому любые моменты одного
локального дня (в любых зонах) дают одну и ту же Date.

Обратные преобразования (utc, local, in_zone) возвращают полночь этого
гражданского дня в запрошенной зоне.

Високосные секунды не учитываются: каждая единица — ровно 86400 секунд.
"""

import logging
import re
from datetime import datetime, tzinfo
from typing import TYPE_CHECKING, Final, Optional, Tuple, Union

from .. import civil
from ..errors import InvalidLiteralError, OutOfRangeError, ParseError
from .ordinal import ORDINAL_MAX, BoundedOrdinal, OrdinalConfig, resolve_config

if TYPE_CHECKING:
    from .year_month import YearMonth

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

SECONDS_PER_DAY: Final[int] = civil.SECONDS_PER_DAY

# Последняя секунда последнего представимого дня
MAX_UNIX: Final[int] = (ORDINAL_MAX + 1) * SECONDS_PER_DAY - 1

# Форматы для parse() и Date.format()
RFC3339: Final[str] = "%Y-%m-%d"
AMERICAN_COMMON: Final[str] = "%m-%d-%y"

RFC3339_RE: Final = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


# =============================================================================
# DATE
# =============================================================================


class Date(BoundedOrdinal):
    """
    Количество целых дней от 1970-01-01.

    Арифметика с int переполняется по модулю 2**16:
        Date(65535) + 1 == Date(0)
    Clamp применяется только в конструкторах модуля.
    """

    __slots__ = ()

    RANGE_TEXT = "[1970-01-01,2149-06-06]"
    TEXT_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"

    # -------------------------------------------------------------------------
    # Unix время
    # -------------------------------------------------------------------------

    def unix(self) -> int:
        """
        Секунды от 1970-01-01T00:00:00Z до начала дня.

        Дата здесь считается UTC-датой, а не независимой от зоны.
        """
        return self._value * SECONDS_PER_DAY

    def unix_nano(self) -> int:
        """То же, что unix(), в наносекундах"""
        return self._value * SECONDS_PER_DAY * civil.NANOS_PER_SECOND

    # -------------------------------------------------------------------------
    # Гражданский календарь
    # -------------------------------------------------------------------------

    def date(self) -> Tuple[int, int, int]:
        """(year, month, day) даты"""
        return civil.civil_from_days(self._value)

    def year_month(self) -> "YearMonth":
        """YearMonth, содержащий эту дату"""
        from .year_month import clamp_year_month

        year, month, _ = self.date()
        return clamp_year_month(year, month)

    def is_min(self) -> bool:
        """Минимальная представимая дата; эквивалентно is_zero()"""
        return self.is_zero()

    def utc(self) -> datetime:
        """00:00:00 UTC этого дня"""
        return civil.midnight(*self.date(), tz=civil.UTC)

    def local(self) -> datetime:
        """00:00:00 этого дня в локальной зоне процесса"""
        return civil.midnight(*self.date(), tz=None)

    def in_zone(self, tz: tzinfo) -> datetime:
        """00:00:00 этого дня в зоне tz"""
        return civil.midnight(*self.date(), tz=tz)

    # -------------------------------------------------------------------------
    # Текст
    # -------------------------------------------------------------------------

    def format(self, layout: str) -> str:
        """
        strftime над полуночью UTC.

        Директивы времени суток (%H, %M, %S, %z) дают 00:00:00 / +0000.
        """
        return self.utc().strftime(layout)

    def to_text(self) -> str:
        """RFC 3339 / ISO 8601: "2006-01-02" """
        return self.format(RFC3339)

    @classmethod
    def from_text(cls, data: Union[str, bytes]) -> "Date":
        """
        Строгий разбор YYYY-MM-DD.

        Никогда не насыщает: clamp — явная опция parse_rfc(config=...).

        Raises:
            ParseError: Текст не соответствует YYYY-MM-DD
            OutOfRangeError: Дата вне [1970-01-01, 2149-06-06]
        """
        return parse_rfc(civil.decode_text(data))


# =============================================================================
# ГРАНИЦЫ
# =============================================================================

MIN_DATE: Final[Date] = Date(0)
MAX_DATE: Final[Date] = Date(ORDINAL_MAX)


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def unix_in_range(seconds: int) -> bool:
    """
    True, если Unix timestamp попадает в представимый диапазон Date.

    False ровно тогда, когда new_from_unix бросает OutOfRangeError.
    """
    return 0 <= seconds <= MAX_UNIX


def _from_unix(seconds: int, clamp: bool) -> Date:
    if unix_in_range(seconds):
        return Date(seconds // SECONDS_PER_DAY)
    return Date.saturate(-1 if seconds < 0 else ORDINAL_MAX + 1, clamp)


def new_from_unix(seconds: int, config: Optional[OrdinalConfig] = None) -> Date:
    """
    Date из Unix timestamp.

    Timestamp интерпретируется как UTC. Для datetime с зоной, отличной от
    UTC, используйте new_from_time: он нормализует результат по смещению.

    Args:
        seconds: Секунды от 1970-01-01T00:00:00Z
        config: Режим clamp (по умолчанию строгий)

    Raises:
        OutOfRangeError: seconds вне [0, MAX_UNIX] в строгом режиме
    """
    return _from_unix(seconds, resolve_config(config).clamp)


def clamp_from_unix(seconds: int) -> Date:
    """
    Как new_from_unix, но насыщает вместо ошибки.

    Ошибки диапазона при этом неразличимы: 1970-01-01 и 2149-06-06
    могут означать выход за диапазон.
    """
    return _from_unix(seconds, clamp=True)


def new_from_time(instant: datetime, config: Optional[OrdinalConfig] = None) -> Date:
    """
    Гражданская дата момента в его собственной зоне.

    Naive datetime трактуется как UTC.

    Raises:
        OutOfRangeError: Дата вне диапазона в строгом режиме
    """
    return new_from_unix(civil.local_civil_seconds(instant), config)


def clamp_from_time(instant: datetime) -> Date:
    """Как new_from_time, но насыщает вместо ошибки"""
    return clamp_from_unix(civil.local_civil_seconds(instant))


def new_from_date(
    year: int, month: int, day: int, config: Optional[OrdinalConfig] = None
) -> Date:
    """
    Date из (year, month, day).

    Значения вне календарных границ переносятся: (2019, 13, 1) ==
    (2020, 1, 1), (2019, 2, 29) == (2019, 3, 1).

    Raises:
        OutOfRangeError: Дата вне диапазона в строгом режиме
    """
    return new_from_unix(civil.civil_to_unix(year, month, day), config)


def clamp_from_date(year: int, month: int, day: int) -> Date:
    """Как new_from_date, но насыщает вместо ошибки"""
    return clamp_from_unix(civil.civil_to_unix(year, month, day))


# =============================================================================
# СЕГОДНЯ
# =============================================================================


def today_strict(tz: Optional[tzinfo] = None) -> Date:
    """
    Текущая дата в зоне tz (локальная зона, если None).

    Raises:
        OutOfRangeError: Текущая дата вне представимого диапазона
    """
    return new_from_time(civil.now(tz))


def today(tz: Optional[tzinfo] = None) -> Date:
    """
    Текущая дата в зоне tz (локальная зона, если None).

    Если текущая дата вне представимого диапазона, возвращается нулевое
    значение (1970-01-01) без ошибки. Для видимости ошибки — today_strict().
    """
    try:
        return today_strict(tz)
    except OutOfRangeError:
        logger.warning("current date is outside %s, falling back to %s", Date.RANGE_TEXT, MIN_DATE)
        return MIN_DATE


def today_utc() -> Date:
    """Текущая UTC-дата; вне диапазона — 1970-01-01"""
    return today(civil.UTC)


# =============================================================================
# РАЗБОР
# =============================================================================


def parse(layout: str, value: str, config: Optional[OrdinalConfig] = None) -> Date:
    """
    Разбор по strptime layout; время суток отбрасывается.

    Если layout содержит %z, дата берётся в разобранной зоне (как в
    new_from_time).

    Raises:
        ParseError: value не соответствует layout
        OutOfRangeError: Дата вне диапазона в строгом режиме
    """
    return new_from_time(civil.strptime(value, layout), config)


def parse_rfc(value: str, config: Optional[OrdinalConfig] = None) -> Date:
    """
    Строгий разбор YYYY-MM-DD (двузначные месяц и день обязательны).

    Raises:
        ParseError: value не соответствует YYYY-MM-DD
        OutOfRangeError: Дата вне диапазона в строгом режиме
    """
    if not RFC3339_RE.fullmatch(value):
        raise ParseError(f"epochdate: {value!r} does not match YYYY-MM-DD")
    return parse(RFC3339, value, config)


def must_parse(layout: str, value: str) -> Date:
    """
    Как parse, но для литералов в коде.

    Любая ошибка — InvalidLiteralError (ошибка программиста). Не использовать
    с данными, пришедшими извне.
    """
    try:
        return parse(layout, value)
    except (ParseError, OutOfRangeError) as e:
        raise InvalidLiteralError(f"invalid date literal {value!r}: {e}") from e


def must_parse_rfc(value: str) -> Date:
    """Как parse_rfc, но для литералов в коде (см. must_parse)"""
    try:
        return parse_rfc(value)
    except (ParseError, OutOfRangeError) as e:
        raise InvalidLiteralError(f"invalid date literal {value!r}: {e}") from e
