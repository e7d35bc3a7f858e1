"""
Hyperbolic Polar — полярное разложение perplex-чисел

Гиперболическая плоскость делится диагоналями x = t и x = -t на четыре
открытых сектора и световой конус:

              Up (|x| > |t|, x > 0)
                      \\   /
    Left (|t| > |x|,   \\ /   Right (|t| > |x|,
          t < 0)        X          t > 0)
                       / \\
                      /   \\
             Down (|x| > |t|, x < 0)

Каждое не light-like число записывается как

    z = klein(z) · rho · (cosh θ + h·sinh θ),   klein(z) ∈ {1, h, -1, -h}

Light-like числа (диагонали) получают сектор Diagonal(t) и аргумент
+∞ на линии x = t, -∞ на линии x = -t. Round trip
Perplex → HyperbolicPolar → Perplex воспроизводит исходное значение во всех
секторах, включая диагонали.
"""

import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Optional

import numpy as np

from src.perplex.domain.field import F, T, coerce, one_like, zero_like
from src.perplex.domain.perplex import Perplex
from src.perplex.math.numerical_safeguards import real_power, validate_exponent


# =============================================================================
# SECTORS
# =============================================================================


class SectorKind(str, Enum):
    """Сектор гиперболической плоскости."""

    RIGHT = "right"
    UP = "up"
    LEFT = "left"
    DOWN = "down"
    DIAGONAL = "diagonal"


@dataclass(frozen=True, order=True)
class HyperbolicSector(Generic[T]):
    """
    Tagged-вариант {Right, Up, Left, Down, Diagonal(t)}.

    Payload t присутствует только у DIAGONAL: это t-компонента light-like
    числа (знак t против x выбирает диагональ, см. аргумент).
    """

    kind: SectorKind = SectorKind.RIGHT
    t: Optional[T] = None

    def __post_init__(self) -> None:
        if self.kind == SectorKind.DIAGONAL and self.t is None:
            raise ValueError("Diagonal sector requires its t component")
        if self.kind != SectorKind.DIAGONAL and self.t is not None:
            raise ValueError(f"Sector {self.kind.value} carries no payload")

    @classmethod
    def diagonal(cls, t: T) -> "HyperbolicSector[T]":
        return cls(SectorKind.DIAGONAL, t)

    @classmethod
    def from_perplex(cls, z: Perplex[T]) -> "HyperbolicSector[T]":
        """
        Сектор числа z.

        |t| == |x| → Diagonal(t); |t| > |x| → Right/Left по знаку t;
        иначе Up/Down по знаку x.
        """
        t, x = z.t, z.x
        t_abs, x_abs = abs(t), abs(x)

        if t_abs == x_abs:
            return cls.diagonal(t)
        if t_abs > x_abs:
            return RIGHT if t > 0 else LEFT
        return UP if x > 0 else DOWN

    def is_diagonal(self) -> bool:
        return self.kind == SectorKind.DIAGONAL


RIGHT: HyperbolicSector = HyperbolicSector(SectorKind.RIGHT)
UP: HyperbolicSector = HyperbolicSector(SectorKind.UP)
LEFT: HyperbolicSector = HyperbolicSector(SectorKind.LEFT)
DOWN: HyperbolicSector = HyperbolicSector(SectorKind.DOWN)


# =============================================================================
# ARGUMENT / KLEIN / SECTOR
# =============================================================================


def argument(z: Perplex[F]) -> F:
    """
    Гиперболический угол θ числа z.

    - |t| > |x|: θ = atanh(x / t)
    - |x| > |t|: θ = atanh(t / x)
    - |t| == |x|: +∞ на линии x = t, -∞ на линии x = -t

    Функция тотальна: бесконечности на диагоналях — часть определения.

    Examples:
        >>> argument(Perplex(1.0, 1.0))
        inf
        >>> argument(Perplex(1.0, -1.0))
        -inf
    """
    t, x = z.t, z.x
    t_abs, x_abs = abs(t), abs(x)

    if t_abs == x_abs:
        inf = t.dtype.type(np.inf) if isinstance(t, np.floating) else np.inf
        return inf if t == x else -inf
    if t_abs > x_abs:
        return np.arctanh(x / t)
    return np.arctanh(t / x)


def klein(z: Perplex[T]) -> Optional[Perplex[T]]:
    """
    Klein-индекс: 1, h, -1, -h для секторов Right, Up, Left, Down.

    Returns:
        None для light-like z
    """
    t, x = z.t, z.x
    t_abs, x_abs = abs(t), abs(x)

    if t_abs == x_abs:
        return None

    one, zero = one_like(t), zero_like(t)
    if t_abs > x_abs:
        return Perplex(one, zero) if t > 0 else Perplex(-one, zero)
    return Perplex(zero, one) if x > 0 else Perplex(zero, -one)


def sector(z: Perplex[T]) -> HyperbolicSector[T]:
    return HyperbolicSector.from_perplex(z)


def cis(theta: F, dtype: Any = None) -> Perplex[F]:
    """
    Единичное число сектора Right с гиперболическим углом θ:
    cis(θ) = cosh θ + h·sinh θ.

    dtype приводит θ к типу поля до вычисления (None → тип θ).
    """
    theta = coerce(theta, dtype)
    return Perplex(np.cosh(theta), np.sinh(theta))


# =============================================================================
# HYPERBOLIC POLAR
# =============================================================================


@dataclass(frozen=True, order=True)
class HyperbolicPolar(Generic[T]):
    """
    Полярная форма (rho, theta, sector).

    HyperbolicPolar() — полярная единица (1, 0, Right).
    Строится из Perplex через from_perplex / to_polar.
    """

    rho: T = 1.0
    theta: T = 0.0
    sector: HyperbolicSector[T] = field(default=RIGHT)

    @classmethod
    def from_perplex(cls, z: Perplex[T]) -> "HyperbolicPolar[T]":
        """rho = norm(z), theta = argument(z), sector = sector(z)."""
        return cls(rho=z.norm(), theta=argument(z), sector=sector(z))

    def to_perplex(self) -> Perplex[T]:
        """
        Обратная конверсия по формуле сектора.

        - Right: ( rho·cosh θ,  rho·sinh θ)
        - Up:    ( rho·sinh θ,  rho·cosh θ)
        - Left:  (-rho·cosh θ, -rho·sinh θ)
        - Down:  (-rho·sinh θ, -rho·cosh θ)
        - Diagonal(t): (t, t) если θ == +∞, иначе (t, -t)
        """
        rho, theta, kind = self.rho, self.theta, self.sector.kind

        if kind == SectorKind.DIAGONAL:
            t = self.sector.t
            if theta == np.inf:
                return Perplex(t, t)
            return Perplex(t, -t)

        cosh, sinh = rho * np.cosh(theta), rho * np.sinh(theta)
        if kind == SectorKind.RIGHT:
            return Perplex(cosh, sinh)
        if kind == SectorKind.UP:
            return Perplex(sinh, cosh)
        if kind == SectorKind.LEFT:
            return Perplex(-cosh, -sinh)
        return Perplex(-sinh, -cosh)

    def pow(self, n: int) -> "HyperbolicPolar[T]":
        """
        Целая неотрицательная степень в полярной форме.

        - n = 0: полярная единица (1, 0, Right)
        - обычные секторы: rho^n, n·θ; сектор становится Right для чётного n
          ((-1)² = 1, h² = 1) и не меняется для нечётного
        - Diagonal(t): t_new = t · (2t)^(n-1), rho и θ без изменений

        Raises:
            ValueError: Если n отрицательный или не целый
        """
        n = validate_exponent(n, allow_negative=False)

        if n == 0:
            one = one_like(self.rho)
            return HyperbolicPolar(rho=one, theta=zero_like(one), sector=RIGHT)
        if n == 1:
            return self

        if self.sector.is_diagonal():
            t = self.sector.t
            t_new = t * real_power(t + t, n - 1)
            return HyperbolicPolar(
                rho=self.rho,
                theta=self.theta,
                sector=HyperbolicSector.diagonal(t_new),
            )

        new_sector = RIGHT if n % 2 == 0 else self.sector
        return HyperbolicPolar(
            rho=real_power(self.rho, n),
            theta=self.theta * n,
            sector=new_sector,
        )

    def __pow__(self, n: Any) -> "HyperbolicPolar[T]":
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            return NotImplemented
        return self.pow(n)


def to_polar(z: Perplex[T]) -> HyperbolicPolar[T]:
    return HyperbolicPolar.from_perplex(z)


def from_polar(polar: HyperbolicPolar[T]) -> Perplex[T]:
    return polar.to_perplex()
