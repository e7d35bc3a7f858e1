"""
Serialization — dict-представление perplex-значений

Конверсии Perplex / HyperbolicPolar ↔ dict, совместимые с JSON.
Десериализация всегда валидирует вход против JSON Schema контракта.

Бесконечный гиперболический угол (light-like числа) кодируется строками
"+inf" / "-inf", т.к. JSON не содержит бесконечностей.
"""

import math
from typing import Any, Dict, Final

from src.perplex.contracts.validators import (
    validate_hyperbolic_polar,
    validate_perplex,
)
from src.perplex.domain.perplex import Perplex
from src.perplex.math.polar import HyperbolicPolar, HyperbolicSector, SectorKind

THETA_POS_INF: Final[str] = "+inf"
THETA_NEG_INF: Final[str] = "-inf"


# =============================================================================
# PERPLEX
# =============================================================================


def perplex_to_dict(z: Perplex) -> Dict[str, Any]:
    return {"t": float(z.t), "x": float(z.x)}


def perplex_from_dict(data: Dict[str, Any]) -> Perplex:
    """
    Perplex из dict.

    Raises:
        ValidationError: Если data не соответствует perplex.json
    """
    validate_perplex(data)
    return Perplex(float(data["t"]), float(data["x"]))


# =============================================================================
# HYPERBOLIC POLAR
# =============================================================================


def _theta_to_json(theta: Any) -> Any:
    if math.isinf(theta):
        return THETA_POS_INF if theta > 0 else THETA_NEG_INF
    return float(theta)


def _theta_from_json(theta: Any) -> float:
    if theta == THETA_POS_INF:
        return math.inf
    if theta == THETA_NEG_INF:
        return -math.inf
    return float(theta)


def polar_to_dict(polar: HyperbolicPolar) -> Dict[str, Any]:
    """
    dict-представление полярной формы.

    Examples:
        >>> polar_to_dict(HyperbolicPolar())
        {'rho': 1.0, 'theta': 0.0, 'sector': {'kind': 'right'}}
    """
    sector: Dict[str, Any] = {"kind": polar.sector.kind.value}
    if polar.sector.is_diagonal():
        sector["t"] = float(polar.sector.t)

    return {
        "rho": float(polar.rho),
        "theta": _theta_to_json(polar.theta),
        "sector": sector,
    }


def polar_from_dict(data: Dict[str, Any]) -> HyperbolicPolar:
    """
    HyperbolicPolar из dict.

    Raises:
        ValidationError: Если data не соответствует hyperbolic_polar.json
    """
    validate_hyperbolic_polar(data)

    sector_data = data["sector"]
    kind = SectorKind(sector_data["kind"])
    if kind == SectorKind.DIAGONAL:
        sector = HyperbolicSector.diagonal(float(sector_data["t"]))
    else:
        sector = HyperbolicSector(kind)

    return HyperbolicPolar(
        rho=float(data["rho"]),
        theta=_theta_from_json(data["theta"]),
        sector=sector,
    )
