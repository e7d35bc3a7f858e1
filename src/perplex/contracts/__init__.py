"""
Contract Validation Module

JSON Schema контракты и dict-сериализация perplex-значений.
"""

from .serialization import (
    perplex_from_dict,
    perplex_to_dict,
    polar_from_dict,
    polar_to_dict,
)
from .validators import (
    ContractValidator,
    HyperbolicPolarValidator,
    PerplexValidator,
    SchemaLoader,
    validate_hyperbolic_polar,
    validate_perplex,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PerplexValidator",
    "HyperbolicPolarValidator",
    # Functions
    "validate_perplex",
    "validate_hyperbolic_polar",
    "perplex_to_dict",
    "perplex_from_dict",
    "polar_to_dict",
    "polar_from_dict",
]
