"""
Módulo de álgebra lineal.

- Construcción de matrices y vectores prellenados
- Solución directa de Ax = b (eliminación gaussiana con pivoteo parcial)
"""

from .matrix import (
    matrix,
    vector,
    as_series,
    total,
)

from .solver import (
    PIVOT_TOLERANCE,
    forward_eliminate,
    back_substitute,
    solve_linear_system,
)

__all__ = [
    # Contenedores
    "matrix",
    "vector",
    "as_series",
    "total",
    # Solver
    "PIVOT_TOLERANCE",
    "forward_eliminate",
    "back_substitute",
    "solve_linear_system",
]
