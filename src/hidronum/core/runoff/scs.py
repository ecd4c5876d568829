"""
Método SCS Curve Number (CN).

Retención potencial y escorrentía directa en ambos sistemas de unidades.
"""

import numpy as np
from numpy.typing import NDArray

from hidronum.config import UnitSystem, coerce_enum
from hidronum.exceptions import ValidationError


def scs_potential_retention(cn: float, units: UnitSystem | str) -> float:
    """
    Calcula retención potencial máxima S.

    S = 1000/CN - 10    [pulgadas, sistema si]
    S = 25400/CN - 254  [mm, sistema m]

    Args:
        cn: Número de curva (0 < CN ≤ 100)
        units: Sistema de unidades ('si' o 'm')

    Returns:
        Retención potencial S
    """
    units = coerce_enum(UnitSystem, units, "Sistema de unidades")
    if not 0 < cn <= 100:
        raise ValidationError(f"CN debe estar entre 0 y 100 (recibido: {cn})")

    if units == UnitSystem.SI:
        return 1000 / cn - 10
    return 25400 / cn - 254


def scs_initial_abstraction(s: float, lambda_coef: float = 0.2) -> float:
    """
    Calcula abstracción inicial Ia.

    Ia = λ × S
    """
    return lambda_coef * s


def scs_runoff(
    rainfall: float | NDArray[np.floating],
    cn: float,
    units: UnitSystem | str,
    lambda_coef: float = 0.2,
) -> float | NDArray[np.floating]:
    """
    Calcula escorrentía directa usando método SCS-CN.

    Q = (P - Ia)² / (P - Ia + S)  para P > Ia
    Q = 0  para P ≤ Ia

    Args:
        rainfall: Precipitación acumulada (escalar o array, in o mm)
        cn: Número de curva
        units: Sistema de unidades
        lambda_coef: Coeficiente λ para Ia (default 0.2)

    Returns:
        Escorrentía directa acumulada en las mismas unidades que P
    """
    s = scs_potential_retention(cn, units)
    ia = scs_initial_abstraction(s, lambda_coef)
    p = np.asarray(rainfall, dtype=float)

    excess = np.maximum(p - ia, 0.0)
    with np.errstate(divide="ignore", invalid="ignore"):
        q = np.where(p > ia, excess ** 2 / (excess + s), 0.0)

    if np.isscalar(rainfall):
        return float(q)
    return q
