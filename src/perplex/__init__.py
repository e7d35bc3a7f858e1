"""
perplex — арифметика и анализ гиперболических (split-complex) чисел

Perplex-число z = t + x·h, h² = 1. Библиотека содержит:
- Value-тип Perplex с алгеброй поля и классификацией по D(z) = t² - x²
- Полярную форму (rho, theta, sector) с четырьмя секторами и диагоналями
- Трансцендентные функции, согласованные по секторам
- Целые степени (квадрирование и матричная форма)
- JSON Schema контракты для сериализации
"""

from src.perplex.config import DEFAULT_CONFIG, PerplexConfig
from src.perplex.domain import (
    SUPPORTED_DTYPES,
    Field,
    Perplex,
    Ring,
    format_perplex,
)
from src.perplex.math.functions import (
    cos,
    cosh,
    exp,
    ln,
    log,
    sin,
    sinh,
    sqrt,
    tan,
    tanh,
)
from src.perplex.math.matrix_form import (
    as_matrix_form,
    from_matrix_form,
    matrix_determinant,
    matrix_inverse,
    matrix_powi,
    matrix_powu,
)
from src.perplex.math.polar import (
    DOWN,
    LEFT,
    RIGHT,
    UP,
    HyperbolicPolar,
    HyperbolicSector,
    SectorKind,
    argument,
    cis,
    from_polar,
    klein,
    sector,
    to_polar,
)
from src.perplex.math.powers import powi, powu

__all__ = [
    # Config
    "PerplexConfig",
    "DEFAULT_CONFIG",
    # Value type
    "Perplex",
    "Ring",
    "Field",
    "SUPPORTED_DTYPES",
    "format_perplex",
    # Polar
    "SectorKind",
    "HyperbolicSector",
    "HyperbolicPolar",
    "RIGHT",
    "UP",
    "LEFT",
    "DOWN",
    "argument",
    "klein",
    "sector",
    "cis",
    "to_polar",
    "from_polar",
    # Functions
    "exp",
    "ln",
    "log",
    "sqrt",
    "sin",
    "cos",
    "tan",
    "sinh",
    "cosh",
    "tanh",
    # Powers
    "powu",
    "powi",
    # Matrix form
    "as_matrix_form",
    "from_matrix_form",
    "matrix_determinant",
    "matrix_inverse",
    "matrix_powu",
    "matrix_powi",
]
