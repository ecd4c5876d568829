"""
Tipos base y utilidades de discretización para flujo subterráneo 1D.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from hidronum.config import BoundaryCondition, BoundaryType


@dataclass
class SteadyGroundwaterResult:
    """Resultado del flujo estacionario."""
    x: NDArray[np.floating]
    head: NDArray[np.floating]
    discharge: NDArray[np.floating]


@dataclass
class TransientGroundwaterResult:
    """Resultado del flujo transitorio."""
    x: NDArray[np.floating]
    time: NDArray[np.floating]
    head: NDArray[np.floating]
    left_flux: NDArray[np.floating]
    right_flux: NDArray[np.floating]
    history: NDArray[np.floating] | None = None


def as_boundary(value: BoundaryCondition | float) -> BoundaryCondition:
    """Un número se interpreta como carga impuesta."""
    if isinstance(value, BoundaryCondition):
        return value
    return BoundaryCondition(value=float(value), type=BoundaryType.HEAD)


def node_coordinates(length: float, nodes: int) -> tuple[NDArray[np.floating], float]:
    """
    Coordenadas de los nodos y espaciamiento.

    dx = L / (n - 1)
    """
    dx = length / (nodes - 1)
    return np.arange(nodes) * dx, dx


def darcy_discharge(
    head: NDArray[np.floating],
    conductivity: float,
    dx: float,
) -> NDArray[np.floating]:
    """
    Caudal de Darcy por diferencias finitas.

    q = -k × dh/dx (centradas en el interior, de un lado en los extremos)
    """
    return -conductivity * np.gradient(head, dx)
