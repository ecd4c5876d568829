"""
Módulo de flujo subterráneo 1D.

- Flujo estacionario (diferencias finitas + eliminación gaussiana)
- Flujo transitorio (Crank-Nicolson)
"""

from .base import (
    SteadyGroundwaterResult,
    TransientGroundwaterResult,
    as_boundary,
    node_coordinates,
    darcy_discharge,
)

from .steady import (
    assemble_steady_system,
    solve_steady_groundwater,
    run_steady,
)

from .transient import (
    DIFFUSION_NUMBER_ADVISORY,
    step_count,
    assemble_crank_nicolson,
    boundary_fluxes,
    solve_transient_groundwater,
)

__all__ = [
    # Base
    "SteadyGroundwaterResult",
    "TransientGroundwaterResult",
    "as_boundary",
    "node_coordinates",
    "darcy_discharge",
    # Estacionario
    "assemble_steady_system",
    "solve_steady_groundwater",
    "run_steady",
    # Transitorio
    "DIFFUSION_NUMBER_ADVISORY",
    "step_count",
    "assemble_crank_nicolson",
    "boundary_fluxes",
    "solve_transient_groundwater",
]
