"""
Numerical Safeguards — Float Primitives для perplex-арифметики

Модуль содержит численные примитивы, общие для всех операций над Perplex:
- Машинный epsilon в зависимости от типа поля (float32 / float64)
- NaN/Inf проверки
- Component-wise приближённое сравнение (abs_diff_eq)
- NaN-poisoning для unchecked-операций
- Возведение скаляра в целую степень с переполнением в inf
- Валидация целочисленных показателей степени

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Тип поля сохраняется: NaN-значение создаётся в dtype исходного компонента
2. Сравнения float всегда явно задают толерантность
3. Все функции чистые и детерминированные
"""

import math
import numbers
from typing import Any

import numpy as np

# =============================================================================
# МАШИННАЯ ТОЧНОСТЬ
# =============================================================================


def machine_epsilon(value: Any) -> float:
    """
    Машинный epsilon для типа значения.

    Для целых чисел и Python float используется epsilon float64.

    Examples:
        >>> machine_epsilon(1.0) == np.finfo(np.float64).eps
        True
        >>> machine_epsilon(np.float32(1.0)) == np.finfo(np.float32).eps
        True
    """
    dtype = np.asarray(value).dtype
    if not np.issubdtype(dtype, np.inexact):
        dtype = np.dtype(np.float64)
    return float(np.finfo(dtype).eps)


def smallest_normal(value: Any) -> float:
    """Минимальное нормализованное положительное значение для типа value."""
    dtype = np.asarray(value).dtype
    if not np.issubdtype(dtype, np.inexact):
        dtype = np.dtype(np.float64)
    return float(np.finfo(dtype).tiny)


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: Any) -> bool:
    """
    Проверка, является ли значение конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение (float, numpy scalar или int)

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def is_normal_float(value: Any) -> bool:
    """
    Проверка, является ли значение нормализованным float.

    Normal: конечное, ненулевое и не subnormal.
    """
    if not is_valid_float(value) or value == 0:
        return False
    return abs(value) >= smallest_normal(value)


def nan_like(value: Any) -> Any:
    """
    NaN в типе поля value.

    Используется для NaN-poisoning в unchecked-операциях.

    Examples:
        >>> type(nan_like(np.float32(1.0))) is np.float32
        True
        >>> math.isnan(nan_like(1.0))
        True
    """
    if isinstance(value, np.generic) and np.issubdtype(value.dtype, np.inexact):
        return value.dtype.type(np.nan)
    return math.nan


def real_power(base: Any, n: int) -> Any:
    """
    base ** n для скаляра поля без OverflowError.

    Python float ** int бросает OverflowError при переполнении, тогда как
    умножение даёт inf. numpy.power сохраняет семантику умножения (±inf) и
    dtype numpy-скаляров. Python int возводится точно.

    Examples:
        >>> real_power(2.0, 3) == 8.0
        True
        >>> real_power(2.0, 1100) == np.inf
        True
    """
    if isinstance(base, int):
        return base**n

    with np.errstate(over="ignore"):
        return np.power(base, n)


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def abs_diff_eq(a: Any, b: Any, epsilon: float) -> bool:
    """
    Абсолютное сравнение двух скаляров: |a - b| <= epsilon.

    Одинаковые бесконечности считаются равными; NaN не равен ничему.

    Args:
        a: Первое значение
        b: Второе значение
        epsilon: Абсолютная толерантность (>= 0)

    Returns:
        True если значения совпадают в пределах epsilon

    Examples:
        >>> abs_diff_eq(1.0, 1.0 + 1e-7, 1e-6)
        True
        >>> abs_diff_eq(float("inf"), float("inf"), 1e-6)
        True
        >>> abs_diff_eq(1.0, 1.1, 1e-6)
        False
    """
    if a == b:
        return True
    return abs(a - b) <= epsilon


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative_epsilon(epsilon: float, name: str = "epsilon") -> None:
    """
    Валидация толерантности сравнения.

    Raises:
        ValueError: Если epsilon < 0 или NaN/Inf
    """
    if not is_valid_float(epsilon):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {epsilon}")

    if epsilon < 0:
        raise ValueError(f"{name} must be non-negative, got {epsilon}")


def validate_exponent(n: Any, name: str = "exponent", allow_negative: bool = True) -> int:
    """
    Валидация целочисленного показателя степени.

    Принимает int и numpy integer; bool отклоняется.

    Args:
        n: Показатель степени
        name: Имя параметра (для сообщения об ошибке)
        allow_negative: Разрешены ли отрицательные показатели

    Returns:
        n как Python int

    Raises:
        ValueError: Если n не целое или отрицательное при allow_negative=False
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise ValueError(f"{name} must be an integer, got {n!r}")

    n = int(n)
    if not allow_negative and n < 0:
        raise ValueError(f"{name} must be non-negative, got {n}")

    return n
