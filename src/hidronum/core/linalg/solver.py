"""
Solución directa de sistemas lineales Ax = b.

Eliminación gaussiana con pivoteo parcial y sustitución hacia atrás.
"""

import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hidronum.exceptions import NumericalWarning, SingularMatrixError, ValidationError


# Magnitud mínima aceptada para un pivote
PIVOT_TOLERANCE = 1e-10


def _prepare(
    a: ArrayLike,
    b: ArrayLike,
    overwrite: bool,
) -> tuple[NDArray[np.floating], NDArray[np.floating]]:
    """Valida dimensiones y obtiene los buffers de trabajo."""
    if overwrite:
        if not (isinstance(a, np.ndarray) and a.dtype == np.float64):
            raise ValidationError("overwrite=True requiere A como ndarray float64")
        if not (isinstance(b, np.ndarray) and b.dtype == np.float64):
            raise ValidationError("overwrite=True requiere b como ndarray float64")
        mat, rhs = a, b
    else:
        mat = np.array(a, dtype=float)
        rhs = np.array(b, dtype=float)

    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        raise ValidationError(f"La matriz debe ser cuadrada (forma: {mat.shape})")
    if rhs.ndim != 1 or rhs.shape[0] != mat.shape[0]:
        raise ValidationError(
            f"El vector b debe tener longitud {mat.shape[0]} (forma: {rhs.shape})"
        )
    return mat, rhs


def forward_eliminate(
    mat: NDArray[np.floating],
    rhs: NDArray[np.floating],
    strict: bool = True,
) -> None:
    """
    Triangulación superior in situ con pivoteo parcial.

    Para cada columna k se busca la fila con el mayor |A[i][k]| (i ≥ k),
    se intercambia con la fila k (junto con b) y se elimina la columna k
    de las filas inferiores.

    Raises:
        SingularMatrixError: si |pivote| < PIVOT_TOLERANCE y strict=True
    """
    n = mat.shape[0]
    for k in range(n):
        m = k + int(np.argmax(np.abs(mat[k:, k])))
        if m != k:
            mat[[k, m], k:] = mat[[m, k], k:]
            rhs[k], rhs[m] = rhs[m], rhs[k]

        pivot = mat[k, k]
        if abs(pivot) < PIVOT_TOLERANCE:
            if strict:
                raise SingularMatrixError(k, float(pivot))
            warnings.warn(
                f"Matriz singular: pivote {pivot:.3e} en la fila {k}, "
                "la solución no es confiable",
                NumericalWarning,
                stacklevel=3,
            )

        # Con strict=False un pivote nulo propaga inf/nan a la solución
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            for j in range(k + 1, n):
                factor = -mat[j, k] / pivot
                if factor == 0.0:
                    continue
                mat[j, k:] += factor * mat[k, k:]
                rhs[j] += factor * rhs[k]


def back_substitute(
    mat: NDArray[np.floating],
    rhs: NDArray[np.floating],
) -> NDArray[np.floating]:
    """
    Sustitución hacia atrás sobre una matriz triangular superior.

    x[k] = (b[k] - Σ_{i>k} A[k][i]·x[i]) / A[k][k]
    """
    n = mat.shape[0]
    x = np.zeros(n, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        for k in range(n - 1, -1, -1):
            x[k] = (rhs[k] - mat[k, k + 1:] @ x[k + 1:]) / mat[k, k]
    return x


def solve_linear_system(
    a: ArrayLike,
    b: ArrayLike,
    *,
    strict: bool = True,
    overwrite: bool = False,
) -> NDArray[np.floating]:
    """
    Resuelve Ax = b por eliminación gaussiana con pivoteo parcial.

    Por defecto trabaja sobre copias: A y b del llamador no se modifican.
    Con overwrite=True la eliminación se hace in situ sobre los arrays
    recibidos (que quedan triangulados/permutados tras la llamada).

    Args:
        a: Matriz cuadrada n × n
        b: Vector de términos independientes (n)
        strict: Si True, un pivote casi nulo lanza SingularMatrixError;
            si False, emite NumericalWarning y continúa
        overwrite: Eliminar in situ sobre a y b

    Returns:
        Vector solución x (nuevo array)

    Raises:
        ValidationError: dimensiones inconsistentes
        SingularMatrixError: matriz numéricamente singular (strict=True)
    """
    mat, rhs = _prepare(a, b, overwrite)
    forward_eliminate(mat, rhs, strict=strict)
    return back_substitute(mat, rhs)
