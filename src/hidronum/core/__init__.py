"""Motor numérico hidrológico."""

from hidronum.core.linalg import (
    matrix,
    vector,
    total,
    solve_linear_system,
)

from hidronum.core.groundwater import (
    SteadyGroundwaterResult,
    TransientGroundwaterResult,
    solve_steady_groundwater,
    run_steady,
    solve_transient_groundwater,
)

from hidronum.core.runoff import (
    scs_potential_retention,
    scs_runoff,
    bucket_model,
)

from hidronum.core.hydrograph import (
    UnitHydrograph,
    ObservedUnitHydrograph,
    FloodHydrograph,
    SyntheticTimes,
    synthetic_times,
    dimensionless_hydrograph,
    unit_hydrograph,
    convolve,
    flood_hydrograph,
)

from hidronum.core.routing import (
    RoutingResult,
    muskingum_cunge,
    cunge_parameters,
    lag_and_route,
)

from hidronum.core.precipitation import (
    arithmetic_mean,
    thiessen,
    rain_aggregation,
)

__all__ = [
    # Álgebra lineal
    "matrix",
    "vector",
    "total",
    "solve_linear_system",
    # Aguas subterráneas
    "SteadyGroundwaterResult",
    "TransientGroundwaterResult",
    "solve_steady_groundwater",
    "run_steady",
    "solve_transient_groundwater",
    # Escorrentía
    "scs_potential_retention",
    "scs_runoff",
    "bucket_model",
    # Hidrogramas
    "UnitHydrograph",
    "ObservedUnitHydrograph",
    "FloodHydrograph",
    "SyntheticTimes",
    "synthetic_times",
    "dimensionless_hydrograph",
    "unit_hydrograph",
    "convolve",
    "flood_hydrograph",
    # Tránsito
    "RoutingResult",
    "muskingum_cunge",
    "cunge_parameters",
    "lag_and_route",
    # Precipitación
    "arithmetic_mean",
    "thiessen",
    "rain_aggregation",
]
