"""
YearMonth — Компактный календарный месяц (месяцы от 1970-01)

Ординал месяца: 12 * (year - 1970) + (month - 1), беззнаковое 16-битное.
Диапазон: 1970-01 .. 7431-04 включительно.

Каждое значение покрывает диапазон дат (весь месяц), а не момент времени:
YearMonth(0) == "1970-01" == 1970-01-01 .. 1970-01-31.

Инкремент значения — переход к следующему месяцу (декабрь 2019 + 1 ==
январь 2020), + 12 — тот же месяц следующего года.

Совместимость с Date: полностью для 1970-01 .. 2149-05, частично для
2149-06; start_date()/end_date() насыщают до максимальной Date.
"""

import re
from datetime import datetime, tzinfo
from typing import Final, Union

from .. import civil
from ..errors import ParseError
from .date import RFC3339, RFC3339_RE, Date, clamp_from_time
from .ordinal import ORDINAL_MAX, BoundedOrdinal

MIN_YEAR: Final[int] = 1970

# Формат "год-месяц" для format() и to_text()
RFC3339_YEAR_MONTH: Final[str] = "%Y-%m"

_YEAR_MONTH_RE: Final = re.compile(r"[0-9]{4}-[0-9]{2}")


class YearMonth(BoundedOrdinal):
    """Ординальная пара год-месяц"""

    __slots__ = ()

    RANGE_TEXT = "[1970-01,7431-04]"
    TEXT_PATTERN = r"^[0-9]{4}-[0-9]{2}(-[0-9]{2})?$"

    @property
    def year(self) -> int:
        return MIN_YEAR + self._value // 12

    @property
    def month(self) -> int:
        """Месяц, 1-based (январь == 1)"""
        return self._value % 12 + 1

    def start_time(self, tz: tzinfo = civil.UTC) -> datetime:
        """
        Первый момент месяца в зоне tz: 00:00:00.000000 первого дня.
        """
        return datetime(self.year, self.month, 1, tzinfo=tz)

    def end_time(self, tz: tzinfo = civil.UTC) -> datetime:
        """
        Последний момент месяца в зоне tz.

        start_time + 1 календарный месяц - наименьшая единица datetime
        (1 микросекунда).
        """
        return civil.add_months(self.start_time(tz), 1) - civil.RESOLUTION

    def start_date(self) -> Date:
        """
        Date первого дня месяца.

        Если месяц за пределами диапазона Date, возвращается максимальная Date.
        """
        return clamp_from_time(self.start_time(civil.UTC))

    def end_date(self) -> Date:
        """
        Date последнего дня месяца.

        Если месяц за пределами диапазона Date, возвращается максимальная Date.
        """
        return clamp_from_time(self.end_time(civil.UTC))

    def format(self, layout: str) -> str:
        """strftime над start_time(UTC)"""
        return self.start_time(civil.UTC).strftime(layout)

    def to_text(self) -> str:
        """Вид год-месяц, например "2020-01" """
        return self.format(RFC3339_YEAR_MONTH)

    @classmethod
    def from_text(cls, data: Union[str, bytes]) -> "YearMonth":
        """
        Разбор "2020-01" или "2020-01-15".

        В форме год-месяц-день день проверяется на корректность, затем
        отбрасывается.

        Raises:
            ParseError: Текст не соответствует ни одной из форм
            OutOfRangeError: Месяц вне [1970-01, 7431-04]
        """
        value = civil.decode_text(data)
        if RFC3339_RE.fullmatch(value):
            parsed = civil.strptime(value, RFC3339)
        elif _YEAR_MONTH_RE.fullmatch(value):
            parsed = civil.strptime(value, RFC3339_YEAR_MONTH)
        else:
            raise ParseError(f"epochdate: {value!r} does not match YYYY-MM or YYYY-MM-DD")
        return new_year_month(parsed.year, parsed.month)


MIN_YEAR_MONTH: Final[YearMonth] = YearMonth(0)
MAX_YEAR_MONTH: Final[YearMonth] = YearMonth(ORDINAL_MAX)


def _raw_year_month(year: int, month: int) -> int:
    return 12 * (year - MIN_YEAR) + (month - 1)


def new_year_month(year: int, month: int) -> YearMonth:
    """
    YearMonth из года и месяца.

    Месяц вне [1, 12] допустим и следует линейной формуле: (2019, 13) ==
    (2020, 1), (2020, 0) == (2019, 12). Это позволяет, например, получать
    следующий месяц как new_year_month(year, month + 1).

    Raises:
        OutOfRangeError: Результат вне [1970-01, 7431-04]; атрибут
            clamped содержит ближайшую границу.
    """
    return YearMonth.saturate(_raw_year_month(year, month), clamp=False)


def clamp_year_month(year: int, month: int) -> YearMonth:
    """
    Как new_year_month, но насыщает до ближайшей границы без ошибки.

    Большинству приложений достаточно Date.year_month() или
    YearMonth.from_text().
    """
    return YearMonth.saturate(_raw_year_month(year, month), clamp=True)

