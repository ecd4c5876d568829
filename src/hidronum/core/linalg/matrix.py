"""
Construcción de contenedores numéricos.

Matrices y vectores rectangulares de tamaño fijo, prellenados con un escalar.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hidronum.exceptions import ValidationError


def matrix(m: int, n: int, fill: float = 0.0) -> NDArray[np.floating]:
    """
    Crea una matriz m × n llena con un valor.

    Args:
        m: Número de filas
        n: Número de columnas
        fill: Valor de relleno (default 0)

    Returns:
        Array (m, n) de float64
    """
    if m < 0 or n < 0:
        raise ValidationError(f"Dimensiones inválidas: {m} × {n}")
    return np.full((m, n), fill, dtype=float)


def vector(n: int, fill: float = 0.0) -> NDArray[np.floating]:
    """Crea un vector de longitud n lleno con un valor."""
    if n < 0:
        raise ValidationError(f"Longitud inválida: {n}")
    return np.full(n, fill, dtype=float)


def as_series(values: ArrayLike, label: str = "serie") -> NDArray[np.floating]:
    """
    Convierte una secuencia numérica a un array 1D de float64.

    Raises:
        ValidationError: si la secuencia no es 1D o no es numérica
    """
    try:
        arr = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{label} debe contener solo números") from exc
    if arr.ndim != 1:
        raise ValidationError(f"{label} debe ser unidimensional (ndim={arr.ndim})")
    return arr


def total(values: ArrayLike) -> float:
    """Suma aritmética de los valores (precipitación total de un evento)."""
    return float(np.sum(np.asarray(values, dtype=float)))
