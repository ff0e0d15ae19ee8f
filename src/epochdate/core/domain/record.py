"""
DatedRecord — Пример модели с компактными датами

Immutable Pydantic модель, использующая Date и YearMonth как поля.
В JSON даты сериализуются текстом ("2020-01-15", "2020-01"), на входе
принимаются текст или готовые значения.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from .date import Date
from .year_month import YearMonth


class DatedRecord(BaseModel):
    """
    Запись с датой события, необязательным расчётным месяцем и сроком
    действия.

    Immutable модель (frozen=True).
    """

    record_id: str = Field(..., min_length=1, description="Идентификатор записи")
    date: Date = Field(..., description="Дата события")
    billing_month: Optional[YearMonth] = Field(
        default=None, description="Расчётный месяц (по умолчанию — месяц даты)"
    )
    valid_until: Optional[Date] = Field(
        default=None, description="Последний день действия (включительно)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_validity_window(self) -> "DatedRecord":
        """valid_until не может предшествовать date"""
        if self.valid_until is not None and self.valid_until < self.date:
            raise ValueError(
                f"valid_until {self.valid_until} precedes date {self.date}"
            )
        return self

    def billing_period(self) -> YearMonth:
        """Расчётный месяц: явный billing_month или месяц даты события"""
        if self.billing_month is not None:
            return self.billing_month
        return self.date.year_month()

    def is_valid_on(self, day: Date) -> bool:
        """
        Действует ли запись в указанный день.

        Без valid_until запись действует бессрочно начиная с date.
        """
        if day < self.date:
            return False
        return self.valid_until is None or day <= self.valid_until
