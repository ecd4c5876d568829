"""
Flujo subterráneo 1D estacionario.

Resuelve -k × d²h/dx² = w(x) con w(x) = w0 + w1 × x por diferencias
finitas centradas (Molkentin, 2019).
"""

import numpy as np
from numpy.typing import NDArray

from hidronum.config import BoundaryCondition, BoundaryType, SteadyGroundwaterConfig
from hidronum.core.linalg import matrix, solve_linear_system, vector
from hidronum.exceptions import ValidationError

from .base import SteadyGroundwaterResult, as_boundary, darcy_discharge, node_coordinates


def assemble_steady_system(
    length: float,
    k: float,
    nodes: int,
    left: BoundaryCondition,
    right: BoundaryCondition,
    w0: float = 0.0,
    w1: float = 0.0,
) -> tuple[NDArray[np.floating], NDArray[np.floating]]:
    """
    Arma el sistema lineal del problema estacionario.

    Filas interiores:  -k/dx² × h[i-1] + 2k/dx² × h[i] - k/dx² × h[i+1] = w0 + w1·i·dx
    Borde de carga:    h = valor
    Borde de caudal:   k/dx × (h[0] - h[1]) = q0   y   k/dx × (h[n-2] - h[n-1]) = qL

    Returns:
        Tupla (A, b)
    """
    _, dx = node_coordinates(length, nodes)
    a = matrix(nodes, nodes)
    b = vector(nodes)

    factor = k / dx
    last = nodes - 1

    if left.type == BoundaryType.HEAD:
        a[0, 0] = 1.0
    else:
        a[0, 0] = factor
        a[0, 1] = -factor
    b[0] = left.value

    if right.type == BoundaryType.HEAD:
        a[last, last] = 1.0
    else:
        a[last, last] = -factor
        a[last, last - 1] = factor
    b[last] = right.value

    inner = k / (dx * dx)
    for i in range(1, last):
        a[i, i] = 2 * inner
        a[i, i - 1] = -inner
        a[i, i + 1] = -inner
        b[i] = w0 + w1 * i * dx

    return a, b


def solve_steady_groundwater(
    length: float,
    k: float,
    nodes: int,
    left: BoundaryCondition | float,
    right: BoundaryCondition | float,
    w0: float = 0.0,
    w1: float = 0.0,
) -> SteadyGroundwaterResult:
    """
    Calcula la carga hidráulica estacionaria en un dominio 1D.

    Args:
        length: Longitud del dominio (m)
        k: Conductividad hidráulica (m/d)
        nodes: Número de nodos (≥ 3)
        left: Condición de borde en x=0 (un número es carga impuesta)
        right: Condición de borde en x=L
        w0: Extracción/recarga en x=0
        w1: Variación lineal de la extracción/recarga con x

    Returns:
        SteadyGroundwaterResult con carga y caudal de Darcy por nodo

    Raises:
        ValidationError: parámetros fuera de rango
        SingularMatrixError: ambos bordes de caudal (carga indeterminada)
    """
    if length <= 0:
        raise ValidationError("Longitud debe ser > 0")
    if k <= 0:
        raise ValidationError("Conductividad debe ser > 0")
    if nodes < 3:
        raise ValidationError("Se requieren al menos 3 nodos")

    left = as_boundary(left)
    right = as_boundary(right)

    a, b = assemble_steady_system(length, k, nodes, left, right, w0, w1)
    head = solve_linear_system(a, b)

    x, dx = node_coordinates(length, nodes)
    return SteadyGroundwaterResult(
        x=x,
        head=head,
        discharge=darcy_discharge(head, k, dx),
    )


def run_steady(config: SteadyGroundwaterConfig) -> SteadyGroundwaterResult:
    """Ejecuta el flujo estacionario desde un SteadyGroundwaterConfig."""
    return solve_steady_groundwater(
        length=config.length,
        k=config.k,
        nodes=config.nodes,
        left=config.left,
        right=config.right,
        w0=config.w0,
        w1=config.w1,
    )
