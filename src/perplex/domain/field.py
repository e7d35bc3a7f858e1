"""
Field — Capability-протоколы для типа компонент Perplex

Perplex параметризован типом поля T. Модуль описывает два уровня требований:
- Ring: + - *, сравнение, конструирование нуля и единицы через type(v)(0)
- Field: Ring + деление (нужен для inverse, division и трансцендентных функций)

Практические инстанциации: Python float, numpy.float64, numpy.float32.
Трансцендентные примитивы вычисляются numpy ufunc'ами, поэтому dtype
компонента сохраняется (float32 → float32).
"""

from typing import Any, Final, Protocol, TypeVar, runtime_checkable

import numpy as np


# =============================================================================
# CAPABILITY PROTOCOLS
# =============================================================================


@runtime_checkable
class Ring(Protocol):
    """Скаляр с операциями кольца: + - * и упорядочиванием."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...


@runtime_checkable
class Field(Ring, Protocol):
    """Ring с делением."""

    def __truediv__(self, other: Any) -> Any: ...


# Тип компонент: Ring для алгебры, Field для деления и трансцендентных функций
T = TypeVar("T", bound=Ring)
F = TypeVar("F", bound=Field)


# =============================================================================
# SUPPORTED DTYPES
# =============================================================================

SUPPORTED_DTYPES: Final[tuple[type, ...]] = (np.float32, np.float64)


def validate_dtype(dtype: Any) -> type:
    """
    Проверка, что dtype — поддерживаемый floating-point тип.

    Raises:
        ValueError: Если dtype не float32/float64
    """
    try:
        scalar_type = np.dtype(dtype).type
    except TypeError as e:
        raise ValueError(f"Unsupported field dtype: {dtype!r}") from e

    if scalar_type not in SUPPORTED_DTYPES:
        raise ValueError(
            f"Unsupported field dtype: {dtype!r} "
            f"(expected one of {[t.__name__ for t in SUPPORTED_DTYPES]})"
        )
    return scalar_type


# =============================================================================
# FIELD HELPERS
# =============================================================================


def coerce(value: Any, dtype: Any = None) -> Any:
    """
    Приведение скаляра к типу поля.

    Args:
        value: Исходное значение
        dtype: Целевой тип (None → значение без изменений)
    """
    if dtype is None:
        return value
    return validate_dtype(dtype)(value)


def zero_like(value: Any) -> Any:
    """Аддитивная единица в типе value."""
    return type(value)(0)


def one_like(value: Any) -> Any:
    """Мультипликативная единица в типе value."""
    return type(value)(1)


def two_like(value: Any) -> Any:
    """Константа 2 в типе value (для формул sqrt / ln)."""
    return type(value)(2)

