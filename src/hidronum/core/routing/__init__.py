"""
Módulo de tránsito en cauces.

- Muskingum-Cunge (coeficientes C0, C1, C2 y parámetros de Cunge)
- Lag-and-Route
"""

from .base import RoutingResult

from .muskingum import (
    muskingum_coefficients,
    initial_outflow,
    muskingum_cunge,
    cunge_parameters,
)

from .lag import lag_and_route

__all__ = [
    "RoutingResult",
    # Muskingum-Cunge
    "muskingum_coefficients",
    "initial_outflow",
    "muskingum_cunge",
    "cunge_parameters",
    # Lag-and-Route
    "lag_and_route",
]
