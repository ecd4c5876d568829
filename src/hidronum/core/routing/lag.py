"""
Tránsito Lag-and-Route.

Suma ponderada de la entrada retardada, atenuada por el tiempo de retardo,
con un búfer de retardo de longitud igual al número de coeficientes.
"""

import numpy as np
from numpy.typing import ArrayLike

from hidronum.config import LagAndRouteParams
from hidronum.core.linalg import as_series, vector

from .base import RoutingResult


def lag_and_route(inflow: ArrayLike, params: LagAndRouteParams) -> RoutingResult:
    """
    Transita un hidrograma con Lag-and-Route.

    O[i] = Σ_j c[j] × I[i-j] / (1 + lag)     (solo i-j ≥ 0)

    Tras cada paso el búfer se desplaza y recibe I[i] - O[i] en la cabeza.

    Args:
        inflow: Hidrograma de entrada
        params: LagAndRouteParams (lag, coeficientes)

    Returns:
        RoutingResult con el caudal de salida y el búfer final como almacenamiento
    """
    inflow = as_series(inflow, "caudal de entrada")
    coefficients = np.asarray(params.coefficients, dtype=float)
    attenuation = 1 + params.lag_time

    outflow = vector(len(inflow))
    buffer = vector(len(coefficients))

    for i, current_in in enumerate(inflow):
        span = min(i + 1, len(coefficients))
        # I[i], I[i-1], ..., I[i-span+1]
        window = inflow[i - span + 1:i + 1][::-1]
        outflow[i] = float(np.dot(coefficients[:span], window)) / attenuation

        buffer = np.roll(buffer, 1)
        buffer[0] = current_in - outflow[i]

    return RoutingResult(outflow=outflow, storage=buffer)
