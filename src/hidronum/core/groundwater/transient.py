"""
Flujo subterráneo 1D transitorio.

S × ∂h/∂t = T × ∂²h/∂x² + w

Discretización Crank-Nicolson (promedio de los operadores explícito e
implícito). En cada paso se rearma la matriz tridiagonal, se resuelve el
sistema lineal y se recalculan los caudales en los bordes.
"""

import math
import warnings

import numpy as np
from numpy.typing import NDArray

from hidronum.config import BoundaryCondition, BoundaryType, TransientGroundwaterConfig
from hidronum.core.linalg import matrix, solve_linear_system, vector
from hidronum.exceptions import NumericalWarning

from .base import TransientGroundwaterResult, node_coordinates


# Por encima de este número de difusión Crank-Nicolson puede oscilar
DIFFUSION_NUMBER_ADVISORY = 1.0


def step_count(total_time: float, dt: float) -> int:
    """Número de pasos: ⌈T / Δt⌉"""
    return max(1, math.ceil(total_time / dt - 1e-9))


def assemble_crank_nicolson(
    head: NDArray[np.floating],
    dx: float,
    dt: float,
    transmissivity: float,
    storage: float,
    left: BoundaryCondition,
    right: BoundaryCondition,
    recharge: float = 0.0,
) -> tuple[NDArray[np.floating], NDArray[np.floating]]:
    """
    Arma el sistema tridiagonal de un paso Crank-Nicolson.

    Nodos interiores:
        (S/Δt + r) h'[i] - r/2 (h'[i-1] + h'[i+1])
            = S/Δt h[i] + r/2 (h[i-1] - 2h[i] + h[i+1]) + w,   r = T/dx²

    Bordes de carga: fila identidad. Bordes de caudal: nodo fantasma con
    q = -T dh/dx impuesto, que aporta ±2q/dx al término independiente.

    Returns:
        Tupla (A, b)
    """
    n = head.shape[0]
    last = n - 1
    r = transmissivity / (dx * dx)
    s = storage / dt

    a = matrix(n, n)
    b = vector(n)

    for i in range(1, last):
        a[i, i] = s + r
        a[i, i - 1] = -0.5 * r
        a[i, i + 1] = -0.5 * r
        b[i] = s * head[i] + 0.5 * r * (head[i - 1] - 2 * head[i] + head[i + 1]) + recharge

    if left.type == BoundaryType.HEAD:
        a[0, 0] = 1.0
        b[0] = left.value
    else:
        a[0, 0] = s + r
        a[0, 1] = -r
        b[0] = s * head[0] + r * (head[1] - head[0]) + 2 * left.value / dx + recharge

    if right.type == BoundaryType.HEAD:
        a[last, last] = 1.0
        b[last] = right.value
    else:
        a[last, last] = s + r
        a[last, last - 1] = -r
        b[last] = (
            s * head[last] + r * (head[last - 1] - head[last])
            - 2 * right.value / dx + recharge
        )

    return a, b


def boundary_fluxes(
    head: NDArray[np.floating],
    dx: float,
    transmissivity: float,
) -> tuple[float, float]:
    """Caudal de Darcy (positivo en +x) en x=0 y x=L."""
    left = -transmissivity * (head[1] - head[0]) / dx
    right = -transmissivity * (head[-1] - head[-2]) / dx
    return float(left), float(right)


def solve_transient_groundwater(
    config: TransientGroundwaterConfig,
    keep_history: bool = False,
) -> TransientGroundwaterResult:
    """
    Avanza en el tiempo el flujo subterráneo 1D.

    El bucle es estrictamente secuencial: el paso t+1 parte de la carga
    resuelta en el paso t. La estabilidad (Δt, dx) es responsabilidad del
    llamador; solo se advierte con NumericalWarning cuando el número de
    difusión supera DIFFUSION_NUMBER_ADVISORY.

    Args:
        config: Parámetros del dominio, acuífero y simulación
        keep_history: Guardar la carga de todos los pasos

    Returns:
        TransientGroundwaterResult con la carga en el último paso
    """
    x, dx = node_coordinates(config.length, config.nodes)
    transmissivity = config.transmissivity
    storage = config.storage
    n_steps = step_count(config.total_time, config.dt)

    diffusion_number = transmissivity / storage * config.dt / (dx * dx)
    if diffusion_number > DIFFUSION_NUMBER_ADVISORY:
        warnings.warn(
            f"Número de difusión {diffusion_number:.2f} > {DIFFUSION_NUMBER_ADVISORY}: "
            "Crank-Nicolson puede oscilar",
            NumericalWarning,
            stacklevel=2,
        )

    if isinstance(config.initial_head, list):
        head = np.asarray(config.initial_head, dtype=float)
    else:
        head = np.full(config.nodes, float(config.initial_head))

    history = np.zeros((n_steps + 1, config.nodes)) if keep_history else None
    left_flux = np.zeros(n_steps + 1)
    right_flux = np.zeros(n_steps + 1)

    if history is not None:
        history[0] = head
    left_flux[0], right_flux[0] = boundary_fluxes(head, dx, transmissivity)

    for t in range(1, n_steps + 1):
        a, b = assemble_crank_nicolson(
            head, dx, config.dt, transmissivity, storage,
            config.left, config.right, config.recharge,
        )
        head = solve_linear_system(a, b, overwrite=True)
        left_flux[t], right_flux[t] = boundary_fluxes(head, dx, transmissivity)
        if history is not None:
            history[t] = head

    return TransientGroundwaterResult(
        x=x,
        time=np.arange(n_steps + 1) * config.dt,
        head=head,
        left_flux=left_flux,
        right_flux=right_flux,
        history=history,
    )
