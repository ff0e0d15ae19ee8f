"""
Errors — Иерархия ошибок epochdate

Ожидаемые ошибки (данные вне диапазона, нераспознанный текст) наследуют
ValueError, поэтому pydantic превращает их в ValidationError.

InvalidLiteralError — ошибка программиста (некорректный литерал в коде),
поэтому намеренно НЕ является ValueError.
"""

from typing import Optional


class EpochDateError(ValueError):
    """Базовый класс ожидаемых ошибок epochdate"""


class OutOfRangeError(EpochDateError):
    """
    Вычисленный ординал вне диапазона [0, 65535].

    Attributes:
        clamped: Ближайшее представимое граничное значение (0 или 65535),
            для вызывающих, которым нужен best-effort результат.
    """

    def __init__(self, message: str, clamped: Optional[int] = None):
        super().__init__(message)
        self.clamped = clamped


class ParseError(EpochDateError):
    """Текст не соответствует ни одному допустимому формату"""


class InvalidLiteralError(RuntimeError):
    """Литерал, переданный в must_parse*, не является корректной датой"""
