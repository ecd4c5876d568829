"""
Precipitación media areal.

- Media aritmética entre estaciones
- Polígonos de Thiessen (ponderación por área)
"""

from collections.abc import Sequence
from numbers import Real

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hidronum.core.linalg import as_series, matrix, total, vector
from hidronum.exceptions import ValidationError


def arithmetic_mean(data: Sequence[ArrayLike]) -> NDArray[np.floating]:
    """
    Calcula la precipitación media aritmética por paso de tiempo.

    P[j] = Σ_i P_i[j] / m

    Args:
        data: m series de estaciones, todas de n pasos

    Returns:
        Serie de n valores medios

    Raises:
        ValidationError: si las estaciones tienen distinta longitud
    """
    series = [as_series(s, f"estación {i}") for i, s in enumerate(data)]
    if not series:
        raise ValidationError("Se requiere al menos una estación")

    lengths = {len(s) for s in series}
    if len(lengths) > 1:
        raise ValidationError(
            f"Todas las estaciones deben tener igual longitud (longitudes: {sorted(lengths)})"
        )
    return np.vstack(series).mean(axis=0)


def _check_areas(areas: Sequence) -> NDArray[np.floating]:
    for i, area in enumerate(areas):
        if isinstance(area, bool) or not isinstance(area, Real):
            raise ValidationError(f"Área {i} no es numérica: {area!r}")
    return np.asarray(areas, dtype=float)


def pad_series(data: Sequence[ArrayLike]) -> NDArray[np.floating]:
    """
    Apila series de distinta longitud rellenando con ceros al final.

    Returns:
        Matriz (m, n_max)
    """
    series = [as_series(s, f"estación {i}") for i, s in enumerate(data)]
    width = max((len(s) for s in series), default=0)
    stacked = matrix(len(series), width)
    for i, s in enumerate(series):
        stacked[i, :len(s)] = s
    return stacked


def thiessen(rainfall: Sequence[ArrayLike], areas: Sequence) -> NDArray[np.floating]:
    """
    Calcula la precipitación media por polígonos de Thiessen.

    P[j] = Σ_i P_i[j] × A_i / Σ A_i

    Las series más cortas se completan con ceros. Si el área total es 0
    la salida es nula.

    Args:
        rainfall: m series de lluvia
        areas: m áreas de influencia

    Returns:
        Serie de precipitación media

    Raises:
        ValidationError: número de áreas distinto al de estaciones o área no numérica
    """
    if len(areas) != len(rainfall):
        raise ValidationError(
            f"Número de áreas ({len(areas)}) distinto al de estaciones ({len(rainfall)})"
        )
    weights = _check_areas(areas)
    stacked = pad_series(rainfall)
    total_area = total(weights)

    if total_area == 0:
        return vector(stacked.shape[1])

    return weights @ stacked / total_area
