"""
PerplexConfig — конфигурация отображения и сравнения

Immutable Pydantic модель с параметрами, общими для всей библиотеки:
- display_precision: число знаков после запятой в текстовом представлении
- approx_epsilon: толерантность abs_diff_eq (None → машинный epsilon dtype)
"""

from typing import Final, Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# DEFAULTS
# =============================================================================

DISPLAY_PRECISION_DEFAULT: Final[int] = 2

DISPLAY_PRECISION_MAX: Final[int] = 30


# =============================================================================
# CONFIG MODEL
# =============================================================================


class PerplexConfig(BaseModel):
    """
    Конфигурация библиотеки.

    Immutable модель (frozen=True): изменения создают новый экземпляр
    через model_copy(update=...).
    """

    display_precision: int = Field(
        DISPLAY_PRECISION_DEFAULT,
        ge=0,
        le=DISPLAY_PRECISION_MAX,
        description="Знаков после запятой в '<t> ± <x> h'",
    )
    approx_epsilon: Optional[float] = Field(
        None,
        gt=0,
        description="Абсолютная толерантность abs_diff_eq (None → машинный epsilon)",
    )

    model_config = {"frozen": True}

    @field_validator("approx_epsilon")
    @classmethod
    def validate_epsilon_finite(cls, v: Optional[float]) -> Optional[float]:
        """Толерантность должна быть конечной."""
        if v is not None and v == float("inf"):
            raise ValueError("approx_epsilon must be finite")
        return v


# Глобальный экземпляр конфигурации по умолчанию
DEFAULT_CONFIG: Final[PerplexConfig] = PerplexConfig()
