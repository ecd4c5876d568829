"""
Tránsito Muskingum-Cunge.

Referencias:
- Cunge, J.A. (1969). On the subject of a flood propagation computation
  method (Muskingum method). J. Hydraulic Research 7(2).
- Chow, Maidment & Mays (1988). Applied Hydrology, Cap. 8.
"""

import warnings

import numpy as np
from numpy.typing import ArrayLike

from hidronum.config import MuskingumCungeParams
from hidronum.core.linalg import as_series, vector
from hidronum.exceptions import NumericalWarning, ValidationError

from .base import RoutingResult


def muskingum_coefficients(k: float, x: float, dt: float) -> tuple[float, float, float]:
    """
    Calcula los coeficientes C0, C1, C2.

    D  = K(1-X) + Δt/2
    C0 = (-KX + Δt/2) / D
    C1 = ( KX + Δt/2) / D
    C2 = (K(1-X) - Δt/2) / D

    C0 + C1 + C2 = 1
    """
    d = k * (1 - x) + 0.5 * dt
    c0 = (-k * x + 0.5 * dt) / d
    c1 = (k * x + 0.5 * dt) / d
    c2 = (k * (1 - x) - 0.5 * dt) / d
    return c0, c1, c2


def initial_outflow(storage: float, inflow: float, k: float, x: float) -> float:
    """
    Caudal de salida compatible con el almacenamiento inicial.

    S = K [X I + (1-X) O]  →  O = (S/K - X I) / (1-X)
    """
    return max((storage / k - x * inflow) / (1 - x), 0.0)


def muskingum_cunge(inflow: ArrayLike, params: MuskingumCungeParams) -> RoutingResult:
    """
    Transita un hidrograma por un tramo con Muskingum-Cunge.

    O[i] = C0 I[i] + C1 I[i-1] + C2 O[i-1]
    S[i] = K [X I[i] + (1-X) O[i]]

    Los términos C1 × I[i] se guardan por índice y se consumen en el paso
    siguiente. La recurrencia es lineal y conserva el volumen; si
    Δt > 2K(1-X) entonces C2 < 0 y la salida puede oscilar con valores
    negativos, lo que se advierte con NumericalWarning.

    outflow[0] no sale de la recurrencia: es el caudal despejado del
    almacenamiento inicial (ver initial_outflow), y vale 0 si el tramo
    arranca vacío.

    Args:
        inflow: Hidrograma de entrada
        params: MuskingumCungeParams (K, X, Δt, almacenamiento inicial)

    Returns:
        RoutingResult con caudal de salida y almacenamiento por paso
    """
    inflow = as_series(inflow, "caudal de entrada")
    n = len(inflow)
    outflow = vector(n)
    storage = vector(n)
    if n == 0:
        return RoutingResult(outflow=outflow, storage=storage)

    k, x, dt = params.k, params.x, params.dt
    c0, c1, c2 = muskingum_coefficients(k, x, dt)
    if c2 < 0:
        warnings.warn(
            f"Δt = {dt:g} > 2K(1-X) = {2 * k * (1 - x):g}: C2 < 0, la salida puede oscilar. "
            f"Reduzca Δt o aumente K.",
            NumericalWarning,
            stacklevel=2,
        )

    # índice → C1 × I[índice]
    lagged_terms: dict[int, float] = {}
    prev_out = initial_outflow(params.initial_storage, inflow[0], k, x)

    for i, current_in in enumerate(inflow):
        if i == 0:
            current_out = prev_out
        else:
            current_out = c0 * current_in + lagged_terms.pop(i - 1) + c2 * prev_out
        lagged_terms[i] = c1 * current_in

        outflow[i] = current_out
        storage[i] = k * (x * current_in + (1 - x) * outflow[i])
        prev_out = current_out

    return RoutingResult(outflow=outflow, storage=storage)


def cunge_parameters(
    reach_length: float,
    celerity: float,
    discharge: float,
    top_width: float,
    bed_slope: float,
    dt: float,
    initial_storage: float = 0.0,
) -> MuskingumCungeParams:
    """
    Calcula K y X de Muskingum a partir de la hidráulica del tramo (Cunge).

    K = Δx / c
    X = 0.5 × (1 - Q / (B × S0 × c × Δx))

    Args:
        reach_length: Longitud del tramo Δx (m)
        celerity: Celeridad de la onda c (m/s)
        discharge: Caudal de referencia Q (m³/s)
        top_width: Ancho superficial B (m)
        bed_slope: Pendiente del fondo S0 (m/m)
        dt: Paso de tiempo (s)
        initial_storage: Almacenamiento inicial

    Returns:
        MuskingumCungeParams con X limitado a [0, 0.5]
    """
    for name, value in (
        ("Longitud del tramo", reach_length),
        ("Celeridad", celerity),
        ("Ancho superficial", top_width),
        ("Pendiente", bed_slope),
        ("Paso de tiempo", dt),
    ):
        if value <= 0:
            raise ValidationError(f"{name} debe ser > 0")
    if discharge < 0:
        raise ValidationError("Caudal de referencia debe ser >= 0")

    k = reach_length / celerity
    x = 0.5 * (1 - discharge / (top_width * bed_slope * celerity * reach_length))

    if x < 0:
        warnings.warn(
            f"X = {x:.3f} < 0 para Δx = {reach_length:g}; se usa X = 0. "
            f"Considere subdividir el tramo.",
            NumericalWarning,
            stacklevel=2,
        )
        x = 0.0

    return MuskingumCungeParams(
        k=k, x=float(np.clip(x, 0.0, 0.5)), dt=dt, initial_storage=initial_storage
    )
