"""
Civil — Адаптер над datetime/zoneinfo

Гражданский календарь (proleptic Gregorian) и работа с часовыми поясами:
- Unix-секунды для aware/naive datetime (naive трактуется как UTC)
- Смещение зоны относительно UTC
- Построение дня из (year, month, day) с переносом (month=13, day=32)
- Прибавление календарных месяцев
- Полночь заданного гражданского дня в заданной зоне

В отличие от datetime(...), функции этого модуля не бросают исключений
на month=13 или day=32: значения переносятся вперёд линейно.
"""

from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Final, Optional, Tuple, Union

from .errors import ParseError

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

SECONDS_PER_DAY: Final[int] = 60 * 60 * 24
NANOS_PER_SECOND: Final[int] = 1_000_000_000

UTC: Final[tzinfo] = timezone.utc
UNIX_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=UTC)

# date(1970, 1, 1).toordinal()
UNIX_EPOCH_ORDINAL: Final[int] = 719_163

# Дней до начала месяца (невисокосный год), индекс 0 не используется
_DAYS_BEFORE_MONTH: Final[Tuple[int, ...]] = (
    0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334,
)

# Наименьшая единица времени, представимая в datetime
RESOLUTION: Final[timedelta] = timedelta(microseconds=1)


# =============================================================================
# ГРАЖДАНСКИЙ КАЛЕНДАРЬ
# =============================================================================


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def normalize_month(year: int, month: int) -> Tuple[int, int]:
    """
    Перенос месяца в диапазон [1, 12].

    Examples:
        >>> normalize_month(2019, 13)
        (2020, 1)
        >>> normalize_month(2020, 0)
        (2019, 12)
    """
    carry, month0 = divmod(month - 1, 12)
    return year + carry, month0 + 1


def days_from_civil(year: int, month: int, day: int) -> int:
    """
    Количество дней от 1970-01-01 до гражданской даты.

    Месяц нормализуется через normalize_month, день прибавляется линейно,
    поэтому (2019, 2, 29) == (2019, 3, 1) и (2019, 1, 0) == (2018, 12, 31).
    Работает для любых лет, а не только [1, 9999].

    Args:
        year: Год (астрономический)
        month: Месяц, 1-based, допускается выход за [1, 12]
        day: День месяца, допускается выход за границы месяца

    Returns:
        Дни относительно Unix epoch (может быть отрицательным)
    """
    year, month = normalize_month(year, month)
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    days_before_month = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        days_before_month += 1
    return days_before_year + days_before_month + day - UNIX_EPOCH_ORDINAL


def civil_from_days(days: int) -> Tuple[int, int, int]:
    """(year, month, day) для дня, отсчитанного от 1970-01-01"""
    d = date.fromordinal(days + UNIX_EPOCH_ORDINAL)
    return d.year, d.month, d.day


def civil_to_unix(year: int, month: int, day: int) -> int:
    """Unix-секунды для полуночи UTC гражданской даты (с переносом)"""
    return days_from_civil(year, month, day) * SECONDS_PER_DAY


# =============================================================================
# МОМЕНТЫ ВРЕМЕНИ И ЗОНЫ
# =============================================================================


def as_aware(instant: datetime) -> datetime:
    """Naive datetime трактуется как UTC"""
    if instant.tzinfo is None or instant.utcoffset() is None:
        return instant.replace(tzinfo=UTC)
    return instant


def unix_seconds(instant: datetime) -> int:
    """
    Unix-секунды момента времени (floor, как у целочисленных часов).

    Args:
        instant: Момент времени; naive трактуется как UTC

    Returns:
        Целые секунды от 1970-01-01T00:00:00Z
    """
    return (as_aware(instant) - UNIX_EPOCH) // timedelta(seconds=1)


def utc_offset_seconds(instant: datetime) -> int:
    """Смещение зоны момента относительно UTC в секундах (0 для naive)"""
    offset = instant.utcoffset()
    if offset is None:
        return 0
    return offset // timedelta(seconds=1)


def local_civil_seconds(instant: datetime) -> int:
    """
    Unix-секунды, сдвинутые на смещение зоны.

    Целочисленное деление результата на SECONDS_PER_DAY даёт локальный
    гражданский день момента, независимо от зоны.
    """
    return unix_seconds(instant) + utc_offset_seconds(instant)


def now(tz: Optional[tzinfo] = None) -> datetime:
    """Текущий момент в зоне tz (локальная зона, если None)"""
    if tz is None:
        return datetime.now().astimezone()
    return datetime.now(tz)


def midnight(year: int, month: int, day: int, tz: Optional[tzinfo] = None) -> datetime:
    """
    Полночь (00:00:00 по местным часам) гражданского дня в зоне tz.

    tz=None означает локальную зону процесса.
    """
    if tz is None:
        return datetime(year, month, day).astimezone()
    return datetime(year, month, day, tzinfo=tz)


def add_months(instant: datetime, months: int) -> datetime:
    """
    Прибавление календарных месяцев с переносом лишних дней.

    Example: 2019-01-31 + 1 месяц == 2019-03-03.
    """
    year, month = normalize_month(instant.year, instant.month + months)
    first = instant.replace(year=year, month=month, day=1)
    return first + timedelta(days=instant.day - 1)


# =============================================================================
# ТЕКСТ
# =============================================================================


def decode_text(data: Union[str, bytes]) -> str:
    """UTF-8 bytes или str → str; некорректный UTF-8 — ParseError"""
    if isinstance(data, bytes):
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"epochdate: input is not valid UTF-8: {e}") from e
    return data


def strptime(value: str, layout: str) -> datetime:
    """
    datetime.strptime с ParseError вместо ValueError.

    Raises:
        ParseError: value не соответствует layout (или layout некорректен)
    """
    try:
        return datetime.strptime(value, layout)
    except ValueError as e:
        raise ParseError(f"epochdate: cannot parse {value!r} as {layout!r}: {e}") from e
