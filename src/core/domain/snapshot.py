"""
NumeralSnapshot — сериализуемый снимок numeral

Immutable Pydantic модель для передачи numeral за пределы процесса.
Соответствует схеме contracts/schema/numeral_snapshot.json.
"""

from pydantic import BaseModel, Field, field_validator

from src.core.domain.decimal_text import decimal_to_int, fold_digits
from src.core.domain.settings import MAX_BASE, MIN_BASE


class NumeralSnapshot(BaseModel):
    """
    Снимок numeral: основание, цифры и десятичное значение.

    Пустой numeral имеет digits=[] и decimal="".
    """

    base: int = Field(..., ge=MIN_BASE, le=MAX_BASE, description="Основание системы счисления")
    digits: list[int] = Field(
        default_factory=list, description="Цифры от старшей к младшей"
    )
    decimal: str = Field(
        "", pattern=r"^[0-9]*$", description="Десятичное значение (пусто для пустого numeral)"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("digits")
    @classmethod
    def validate_digits_in_base(cls, v: list[int], info) -> list[int]:
        """Каждая цифра в [0, base)"""
        if "base" in info.data:
            base = info.data["base"]
            for digit in v:
                if digit < 0 or digit >= base:
                    raise ValueError(f"digit {digit} is invalid for base {base}")
        return v

    @field_validator("decimal")
    @classmethod
    def validate_decimal_matches_digits(cls, v: str, info) -> str:
        """decimal пуст вместе с digits, иначе равен их величине в base"""
        if "digits" in info.data:
            if bool(v) != bool(info.data["digits"]):
                raise ValueError("decimal must be empty exactly when digits are empty")
            if v and "base" in info.data:
                value = fold_digits(info.data["digits"], info.data["base"])
                if decimal_to_int(v) != value:
                    raise ValueError(f"decimal {v} does not match digits value {value}")
        return v

    def is_empty(self) -> bool:
        return not self.digits
