"""
Matrix Form — представление perplex-числа симметричной 2×2 матрицей

    t + x·h  ↔  [[t, x],
                 [x, t]]

Сложение, умножение и инверсия perplex-чисел соответствуют матричным
операциям; D(z) = t² - x² равен определителю. Модуль даёт альтернативный
путь вычисления целых степеней через numpy.linalg.matrix_power, эквивалентный
powu/powi с точностью до округления.

Обратная конверсия читает t = m[0, 0], x = m[0, 1] и не проверяет симметрию.
"""

import logging
from typing import Any, Optional

import numpy as np

from src.perplex.domain.field import F, T
from src.perplex.domain.perplex import Perplex
from src.perplex.math.numerical_safeguards import validate_exponent

_logger = logging.getLogger(__name__)


# =============================================================================
# CONVERSIONS
# =============================================================================


def as_matrix_form(z: Perplex[T]) -> np.ndarray:
    """
    Симметричная матрица [[t, x], [x, t]] в dtype компонент z.

    Examples:
        >>> as_matrix_form(Perplex(1.0, 2.0)).tolist()
        [[1.0, 2.0], [2.0, 1.0]]
    """
    dtype = np.result_type(z.t, z.x)
    return np.array([[z.t, z.x], [z.x, z.t]], dtype=dtype)


def from_matrix_form(m: Any) -> Perplex:
    """
    Perplex из матричной формы: t = m[0, 0], x = m[0, 1].

    Raises:
        ValueError: Если m не 2×2
    """
    m = np.asarray(m)
    if m.shape != (2, 2):
        raise ValueError(f"Matrix form must have shape (2, 2), got {m.shape}")
    return Perplex(m[0, 0], m[0, 1])


# =============================================================================
# MATRIX OPERATIONS
# =============================================================================


def matrix_determinant(z: Perplex[T]) -> Any:
    """det([[t, x], [x, t]]) — совпадает с squared_distance до округления."""
    return np.linalg.det(as_matrix_form(z))


def matrix_inverse(z: Perplex[F]) -> Optional[Perplex]:
    """
    Инверсия через numpy.linalg.inv.

    Returns:
        None если z light-like (матрица вырождена)
    """
    if z.is_light_like():
        _logger.debug("matrix form of light-like %r is singular", z)
        return None
    return from_matrix_form(np.linalg.inv(as_matrix_form(z)))


def matrix_powu(z: Perplex[T], n: int) -> Perplex:
    """
    z^n через numpy.linalg.matrix_power, n >= 0.

    Raises:
        ValueError: Если n отрицательный или не целый
    """
    n = validate_exponent(n, allow_negative=False)
    return from_matrix_form(np.linalg.matrix_power(as_matrix_form(z), n))


def matrix_powi(z: Perplex[F], n: int) -> Optional[Perplex]:
    """
    z^n через матричную форму для целого n любого знака.

    Returns:
        None если n < 0 и z light-like
    """
    n = validate_exponent(n)

    if n < 0 and z.is_light_like():
        _logger.debug("matrix form of light-like %r is singular", z)
        return None

    m = as_matrix_form(z)
    if n < 0 and not np.issubdtype(m.dtype, np.inexact):
        m = m.astype(np.float64)
    return from_matrix_form(np.linalg.matrix_power(m, n))
