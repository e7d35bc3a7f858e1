"""
Domain: value-тип Perplex и capability-протоколы поля.
"""

from src.perplex.domain.field import (
    SUPPORTED_DTYPES,
    F,
    Field,
    Ring,
    T,
    coerce,
    one_like,
    validate_dtype,
    zero_like,
)
from src.perplex.domain.perplex import Perplex, format_perplex

__all__ = [
    # Field capabilities
    "Ring",
    "Field",
    "T",
    "F",
    "SUPPORTED_DTYPES",
    "coerce",
    "one_like",
    "zero_like",
    "validate_dtype",
    # Value type
    "Perplex",
    "format_perplex",
]
