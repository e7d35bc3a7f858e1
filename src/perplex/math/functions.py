"""
Functions — трансцендентные функции perplex-аргумента

Аналог cmath для гиперболических чисел. Все функции заданы замкнутыми
формулами по секторам (не рядами):

    exp(z)  = k · (e^t·cosh x, e^t·sinh x),  (t, x) = k·z, k = klein(z) или 1
    ln(z)   = k · (ln(D)/2, atanh(x/t)),     (t, x) = k·z, D = t² - x²
    log(z, b) = ln(z) / ln(b)
    sqrt(z) = ((√(t+x) + √(t-x))/2, (√(t+x) - √(t-x))/2)
    sin, cos, sinh, cosh — смешанные по компонентам
    tan = sin/cos, tanh = sinh/cosh

"Нет результата" (None):
- ln, log: z light-like
- sqrt: z вне замкнутого конуса Right (t+x < 0 или t-x < 0)
- tan, tanh: cos(z) / cosh(z) light-like
"""

import logging
from typing import Optional

import numpy as np

from src.perplex.domain.field import F, two_like
from src.perplex.domain.perplex import Perplex
from src.perplex.math.polar import klein

_logger = logging.getLogger(__name__)


# =============================================================================
# EXP / LN / LOG
# =============================================================================


def exp(z: Perplex[F]) -> Perplex[F]:
    """
    Гиперболическая экспонента.

    Klein-индекс переводит z в сектор Right, экспонента вычисляется там и
    возвращается в исходный сектор. Для light-like z индекс равен 1.
    exp(z) и ln(z) взаимно обратны во всех четырёх секторах.
    """
    k = klein(z)
    if k is None:
        k = z.unit_like()

    w = k * z
    t_exp = np.exp(w.t)
    return k * Perplex(t_exp * np.cosh(w.x), t_exp * np.sinh(w.x))


def ln(z: Perplex[F]) -> Optional[Perplex[F]]:
    """
    Натуральный логарифм.

    Returns:
        None если z light-like
    """
    k = klein(z)
    if k is None:
        _logger.debug("ln undefined for light-like %r", z)
        return None

    w = k * z
    t, x = w.t, w.x
    squared_distance = t * t - x * x
    return k * Perplex(np.log(squared_distance) / two_like(t), np.arctanh(x / t))


def log(z: Perplex[F], base: F) -> Optional[Perplex[F]]:
    """
    Логарифм по вещественному основанию: ln(z) / ln(base).

    Returns:
        None если z light-like
    """
    z_ln = ln(z)
    if z_ln is None:
        return None
    return z_ln / np.log(base)


# =============================================================================
# SQRT
# =============================================================================


def sqrt(z: Perplex[F]) -> Optional[Perplex[F]]:
    """
    Квадратный корень в замкнутом конусе сектора Right.

    Returns:
        None если t + x < 0 или t - x < 0
    """
    t_x_add = z.t + z.x
    t_x_sub = z.t - z.x
    if not (t_x_add >= 0 and t_x_sub >= 0):
        _logger.debug("sqrt undefined outside the right cone for %r", z)
        return None

    sqrt_add = np.sqrt(t_x_add)
    sqrt_sub = np.sqrt(t_x_sub)
    two = two_like(sqrt_add)
    return Perplex((sqrt_add + sqrt_sub) / two, (sqrt_add - sqrt_sub) / two)


# =============================================================================
# TRIGONOMETRIC
# =============================================================================


def sin(z: Perplex[F]) -> Perplex[F]:
    return Perplex(np.sin(z.t) * np.cos(z.x), np.cos(z.t) * np.sin(z.x))


def cos(z: Perplex[F]) -> Perplex[F]:
    return Perplex(np.cos(z.t) * np.cos(z.x), np.sin(z.t) * np.sin(z.x))


def tan(z: Perplex[F]) -> Optional[Perplex[F]]:
    """sin(z) / cos(z); None если cos(z) light-like."""
    return sin(z).try_divide(cos(z))


def sinh(z: Perplex[F]) -> Perplex[F]:
    return Perplex(np.sinh(z.t) * np.cosh(z.x), np.cosh(z.t) * np.sinh(z.x))


def cosh(z: Perplex[F]) -> Perplex[F]:
    return Perplex(np.cosh(z.t) * np.cosh(z.x), np.sinh(z.t) * np.sinh(z.x))


def tanh(z: Perplex[F]) -> Optional[Perplex[F]]:
    """sinh(z) / cosh(z); None если cosh(z) light-like."""
    return sinh(z).try_divide(cosh(z))
