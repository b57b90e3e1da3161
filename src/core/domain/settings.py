"""
Numeral Settings — конфигурация систем счисления

Immutable Pydantic модель с основаниями по умолчанию:
- default_base: основание, в котором создаются новые numerals (двоичная система)
- change_scale_base: дополнительное основание для change_scale (троичная система)

Все конструкторы контейнеров проверяют основание через validate_base().
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ГРАНИЦЫ ОСНОВАНИЙ
# =============================================================================

# Минимальное основание позиционной системы
MIN_BASE: Final[int] = 2

# Максимальное основание: цифры рендерятся алфавитом 0-9a-z
MAX_BASE: Final[int] = 36

# Алфавит для строкового представления цифр в текущем основании
DIGIT_ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"


def validate_base(base: int) -> int:
    """
    Проверка основания системы счисления.

    Args:
        base: Основание (int в диапазоне [MIN_BASE, MAX_BASE])

    Returns:
        base без изменений

    Raises:
        ValueError: Если base не int или вне диапазона
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise ValueError(f"base must be an integer, got {base!r}")
    if base < MIN_BASE or base > MAX_BASE:
        raise ValueError(f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")
    return base


# =============================================================================
# SETTINGS MODEL
# =============================================================================


class NumeralSettings(BaseModel):
    """
    Настройки оснований для numerals.

    Immutable модель (frozen=True): изменение настроек требует нового экземпляра.
    """

    default_base: int = Field(
        2, ge=MIN_BASE, le=MAX_BASE, description="Основание новых numerals"
    )
    change_scale_base: int = Field(
        3, ge=MIN_BASE, le=MAX_BASE, description="Целевое основание change_scale"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("change_scale_base")
    @classmethod
    def validate_distinct_bases(cls, v: int, info) -> int:
        """change_scale должен действительно менять основание"""
        if "default_base" in info.data and v == info.data["default_base"]:
            raise ValueError(
                f"change_scale_base {v} must differ from default_base {info.data['default_base']}"
            )
        return v


# Глобальные настройки по умолчанию
DEFAULT_SETTINGS: Final[NumeralSettings] = NumeralSettings()
