"""
Perplex — гиперболическое (split-complex) число

Immutable value-тип z = t + x·h, где h² = 1. Компоненты соответствуют
времени (t) и пространству (x) в двумерном пространстве Минковского.

Модуль содержит всё, что определяется только полем T:
- Конструкторы и константы (zero, one, h), конверсию dtype
- Аксессоры: real, hyperbolic, squared_distance, scale, conj
- Классификацию по знаку D(z) = t² - x²: time-like / space-like / light-like
- Нормы: modulus (квадратичная форма), l1, l2, max
- Бинарную алгебру: + - * / (включая скалярные варианты)
- Инверсию и деление с явным "нет результата" (None) для light-like делителя
- Текстовое представление "<t> ± <x> h"
- Приближённое сравнение abs_diff_eq

ПОЛИТИКА ДЕЛЕНИЯ:
    a / b, try_divide, try_inverse, inv → Optional[Perplex]
    None ⇔ b (или self) light-like (zero-divisor)
    div_unchecked → NaN-poisoned компоненты вместо None

СКАЛЯРНЫЕ ОПЕРАЦИИ:
    z + s, z - s  → s трактуется как Perplex(s, 0) (меняется только t)
    z * s, z / s  → равномерное масштабирование обеих компонент
"""

import logging
import numbers
import re
from dataclasses import dataclass
from typing import Any, Generic, Optional

import numpy as np

from src.perplex.config import DEFAULT_CONFIG, PerplexConfig
from src.perplex.domain.field import T, coerce, one_like, zero_like
from src.perplex.math.numerical_safeguards import (
    abs_diff_eq,
    is_normal_float,
    is_valid_float,
    machine_epsilon,
    nan_like,
    validate_non_negative_epsilon,
)

_logger = logging.getLogger(__name__)

_PRECISION_SPEC = re.compile(r"^\.(\d+)f?$")


def _is_scalar(value: Any) -> bool:
    """Скаляр поля (int, float, numpy scalar), но не Perplex."""
    return isinstance(value, numbers.Real)


# =============================================================================
# PERPLEX VALUE TYPE
# =============================================================================


@dataclass(frozen=True, order=True)
class Perplex(Generic[T]):
    """
    Гиперболическое число t + x·h.

    Perplex() — мультипликативная единица (1, 0).
    Perplex(t) — вещественное число (t, 0) в типе t.
    Perplex(t, x) — общий случай.

    Порядок и hash — лексикографические по (t, x); используются только для
    сравнения на равенство и отладки, не для алгебраической структуры.
    """

    t: T = 1.0
    x: Optional[T] = None

    # numpy scalars слева (np.float32(2) * z) делегируют в reflected-операторы
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        if self.x is None:
            object.__setattr__(self, "x", zero_like(self.t))

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, t: T, x: T) -> "Perplex[T]":
        return cls(t, x)

    @classmethod
    def of(cls, t: Any, x: Any = 0, dtype: Any = None) -> "Perplex":
        """
        Perplex с компонентами, приведёнными к dtype.

        Args:
            t: Временная компонента
            x: Пространственная компонента
            dtype: numpy.float32 / numpy.float64 (None → без приведения)

        Raises:
            ValueError: Если dtype не поддерживается
        """
        return cls(coerce(t, dtype), coerce(x, dtype))

    @classmethod
    def zero(cls, dtype: Any = None) -> "Perplex":
        """Аддитивная единица (0, 0)."""
        return cls.of(0.0, 0.0, dtype)

    @classmethod
    def one(cls, dtype: Any = None) -> "Perplex":
        """Мультипликативная единица (1, 0)."""
        return cls.of(1.0, 0.0, dtype)

    @classmethod
    def h(cls, dtype: Any = None) -> "Perplex":
        """Гиперболическая единица (0, 1), h·h = 1."""
        return cls.of(0.0, 1.0, dtype)

    def astype(self, dtype: Any) -> "Perplex":
        """Копия с компонентами в dtype."""
        return Perplex.of(self.t, self.x, dtype)

    def unit_like(self) -> "Perplex[T]":
        """Мультипликативная единица в типе поля self."""
        return Perplex(one_like(self.t), zero_like(self.t))

    # -------------------------------------------------------------------------
    # Аксессоры
    # -------------------------------------------------------------------------

    def real(self) -> T:
        return self.t

    def hyperbolic(self) -> T:
        return self.x

    def squared_distance(self) -> T:
        """
        D(z) = t² - x².

        Знак D(z) классифицирует число; abs() здесь не применяется.
        """
        return self.t * self.t - self.x * self.x

    def scale(self, factor: T) -> "Perplex[T]":
        return Perplex(factor * self.t, factor * self.x)

    def conj(self) -> "Perplex[T]":
        """Сопряжение (t, -x)."""
        return Perplex(self.t, -self.x)

    # -------------------------------------------------------------------------
    # Классификация
    # -------------------------------------------------------------------------

    def is_time_like(self) -> bool:
        """D(z) > 0."""
        return self.squared_distance() > 0

    def is_space_like(self) -> bool:
        """D(z) < 0."""
        return self.squared_distance() < 0

    def is_light_like(self) -> bool:
        """D(z) == 0 (включая ноль); light-like числа — делители нуля."""
        return self.squared_distance() == 0

    def is_zero(self) -> bool:
        return self.t == 0 and self.x == 0

    def is_one(self) -> bool:
        return self.t == 1 and self.x == 0

    # -------------------------------------------------------------------------
    # Нормы
    # -------------------------------------------------------------------------

    def modulus(self) -> T:
        """
        Модуль квадратичной формы: sqrt(|t² - x²|).

        Определён для всех чисел; для light-like равен нулю.
        """
        return np.sqrt(abs(self.squared_distance()))

    def norm(self) -> T:
        return self.modulus()

    def magnitude(self) -> T:
        return self.modulus()

    def l1_norm(self) -> T:
        return abs(self.t) + abs(self.x)

    def l2_norm(self) -> T:
        return np.sqrt(self.t * self.t + self.x * self.x)

    def max_norm(self) -> T:
        return max(abs(self.t), abs(self.x))

    # -------------------------------------------------------------------------
    # Float-предикаты
    # -------------------------------------------------------------------------

    def is_nan(self) -> bool:
        return bool(np.isnan(self.t) or np.isnan(self.x))

    def is_infinite(self) -> bool:
        return not self.is_nan() and bool(np.isinf(self.t) or np.isinf(self.x))

    def is_finite(self) -> bool:
        return is_valid_float(self.t) and is_valid_float(self.x)

    def is_normal(self) -> bool:
        return is_normal_float(self.t) and is_normal_float(self.x)

    # -------------------------------------------------------------------------
    # Инверсия и деление
    # -------------------------------------------------------------------------

    def try_inverse(self) -> Optional["Perplex[T]"]:
        """
        Мультипликативная обратная: z⁻¹ = conj(z) / D(z).

        Returns:
            None если z light-like (D(z) == 0)

        Examples:
            >>> Perplex(2.0, -1.0).try_inverse() == Perplex(2.0 / 3.0, 1.0 / 3.0)
            True
            >>> Perplex(1.0, 1.0).try_inverse() is None
            True
        """
        d = self.squared_distance()
        if d == 0:
            _logger.debug("inverse undefined for light-like %r", self)
            return None
        return Perplex(self.t / d, -self.x / d)

    def inv(self) -> Optional["Perplex[T]"]:
        return self.try_inverse()

    def try_divide(self, other: "Perplex[T]") -> Optional["Perplex[T]"]:
        """
        Деление self / other = self · other⁻¹.

        Returns:
            None если other light-like
        """
        t2, x2 = other.t, other.x
        d2 = t2 * t2 - x2 * x2
        if d2 == 0:
            _logger.debug("division by light-like divisor %r", other)
            return None

        t1, x1 = self.t, self.x
        return Perplex((t1 * t2 - x1 * x2) / d2, (t2 * x1 - t1 * x2) / d2)

    def div_unchecked(self, other: "Perplex[T]") -> "Perplex[T]":
        """
        Деление без Optional: light-like делитель даёт NaN в обеих компонентах.

        NaN создаётся в типе поля self.t.
        """
        result = self.try_divide(other)
        if result is None:
            nan = nan_like(self.t)
            return Perplex(nan, nan)
        return result

    def mul_add(self, other: "Perplex[T]", add: "Perplex[T]") -> "Perplex[T]":
        """Fused self * other + add."""
        return Perplex(
            self.t * other.t + self.x * other.x + add.t,
            other.t * self.x + self.t * other.x + add.x,
        )

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Perplex[T]":
        if isinstance(other, Perplex):
            return Perplex(self.t + other.t, self.x + other.x)
        if _is_scalar(other):
            return Perplex(self.t + other, self.x)
        return NotImplemented

    def __radd__(self, other: Any) -> "Perplex[T]":
        if _is_scalar(other):
            return Perplex(other + self.t, self.x)
        return NotImplemented

    def __sub__(self, other: Any) -> "Perplex[T]":
        if isinstance(other, Perplex):
            return Perplex(self.t - other.t, self.x - other.x)
        if _is_scalar(other):
            return Perplex(self.t - other, self.x)
        return NotImplemented

    def __rsub__(self, other: Any) -> "Perplex[T]":
        if _is_scalar(other):
            return Perplex(other - self.t, -self.x)
        return NotImplemented

    def __mul__(self, other: Any) -> "Perplex[T]":
        if isinstance(other, Perplex):
            return Perplex(
                self.t * other.t + self.x * other.x,
                other.t * self.x + self.t * other.x,
            )
        if _is_scalar(other):
            return Perplex(self.t * other, self.x * other)
        return NotImplemented

    def __rmul__(self, other: Any) -> "Perplex[T]":
        if _is_scalar(other):
            return Perplex(other * self.t, other * self.x)
        return NotImplemented

    def __truediv__(self, other: Any) -> Any:
        # Perplex-делитель → Optional, скалярный делитель → Perplex
        if isinstance(other, Perplex):
            return self.try_divide(other)
        if _is_scalar(other):
            return Perplex(self.t / other, self.x / other)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> Optional["Perplex[T]"]:
        if _is_scalar(other):
            return Perplex(other, zero_like(other)).try_divide(self)
        return NotImplemented

    def __neg__(self) -> "Perplex[T]":
        return Perplex(-self.t, -self.x)

    def __pos__(self) -> "Perplex[T]":
        return self

    def __abs__(self) -> T:
        return self.modulus()

    def __pow__(self, n: Any) -> Any:
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            return NotImplemented

        from src.perplex.math.powers import powi, powu

        if n < 0:
            return powi(self, n)
        return powu(self, n)

    # -------------------------------------------------------------------------
    # Сравнение и форматирование
    # -------------------------------------------------------------------------

    def abs_diff_eq(
        self,
        other: "Perplex[T]",
        epsilon: Optional[float] = None,
        config: PerplexConfig = DEFAULT_CONFIG,
    ) -> bool:
        """
        Component-wise |a - b| <= epsilon.

        Args:
            other: Сравниваемое число
            epsilon: Толерантность (None → config.approx_epsilon или машинный
                epsilon dtype компоненты t)
            config: Конфигурация

        Raises:
            ValueError: Если epsilon отрицательный или NaN/Inf
        """
        if epsilon is None:
            epsilon = config.approx_epsilon
        if epsilon is None:
            epsilon = machine_epsilon(self.t)
        validate_non_negative_epsilon(epsilon)

        return abs_diff_eq(self.t, other.t, epsilon) and abs_diff_eq(
            self.x, other.x, epsilon
        )

    def __str__(self) -> str:
        return format_perplex(self)

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return format_perplex(self)

        match = _PRECISION_SPEC.match(format_spec)
        if match is None:
            raise ValueError(f"Invalid format specifier {format_spec!r} for Perplex")
        return format_perplex(self, precision=int(match.group(1)))


# =============================================================================
# FORMATTING
# =============================================================================


def format_perplex(
    z: Perplex,
    precision: Optional[int] = None,
    config: PerplexConfig = DEFAULT_CONFIG,
) -> str:
    """
    Текстовое представление "<t> ± <x> h".

    Знак выбирается по знаку x; модуль x печатается после знака.

    Args:
        z: Число для форматирования
        precision: Знаков после запятой (None → config.display_precision)
        config: Конфигурация

    Examples:
        >>> format_perplex(Perplex(2.0, -1.0))
        '2.00 - 1.00 h'
        >>> format_perplex(Perplex(1.1235, 1.10), precision=3)
        '1.123 + 1.100 h'
    """
    if precision is None:
        precision = config.display_precision
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")

    if z.x < 0:
        x, sign = -z.x, "-"
    else:
        x, sign = z.x, "+"

    return f"{z.t:.{precision}f} {sign} {x:.{precision}f} h"
