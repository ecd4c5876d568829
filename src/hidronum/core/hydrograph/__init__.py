"""
Módulo de hidrogramas unitarios y de crecida.

- Parámetros temporales sintéticos (SCS, Kerby-Kirpich, Kerby)
- Hidrogramas adimensionales (Gamma, Log-Pearson III, Weibull)
- Hidrograma unitario desde adimensional u observado
- Hidrograma de crecida por convolución
"""

from .base import (
    UnitHydrograph,
    ObservedUnitHydrograph,
    FloodHydrograph,
    SyntheticTimes,
    reverse_time_order,
)

from .constants import (
    GAMMA_SHAPE_BY_PRF,
    KERBY_KIRPICH_COEFFICIENTS,
    METRIC_PRF_CONVERSION,
    DT_TC_RATIO,
    RUNOFF_DEPTH_FACTOR,
)

from .synthetic import (
    scs_times,
    kerby_kirpich_times,
    kerby_times,
    synthetic_times,
    run_synthetic_times,
)

from .dimensionless import (
    gamma_shape,
    time_ratios,
    gamma_ratios,
    lp3_ratios,
    weibull_ratios,
    dimensionless_hydrograph,
    run_dimensionless,
)

from .unit import (
    as_hydrograph,
    unit_peak_flow,
    dimensionless_unit_hydrograph,
    observed_unit_hydrograph,
    unit_hydrograph,
    run_unit_hydrograph,
)

from .convolution import (
    convolve,
    incremental_scs_runoff,
    scs_flood_hydrograph,
    observed_flood_hydrograph,
    flood_hydrograph,
    run_flood_hydrograph,
)

__all__ = [
    # Tipos
    "UnitHydrograph",
    "ObservedUnitHydrograph",
    "FloodHydrograph",
    "SyntheticTimes",
    "reverse_time_order",
    # Constantes
    "GAMMA_SHAPE_BY_PRF",
    "KERBY_KIRPICH_COEFFICIENTS",
    "METRIC_PRF_CONVERSION",
    "DT_TC_RATIO",
    "RUNOFF_DEPTH_FACTOR",
    # Tiempos sintéticos
    "scs_times",
    "kerby_kirpich_times",
    "kerby_times",
    "synthetic_times",
    "run_synthetic_times",
    # Adimensionales
    "gamma_shape",
    "time_ratios",
    "gamma_ratios",
    "lp3_ratios",
    "weibull_ratios",
    "dimensionless_hydrograph",
    "run_dimensionless",
    # Hidrograma unitario
    "as_hydrograph",
    "unit_peak_flow",
    "dimensionless_unit_hydrograph",
    "observed_unit_hydrograph",
    "unit_hydrograph",
    "run_unit_hydrograph",
    # Convolución
    "convolve",
    "incremental_scs_runoff",
    "scs_flood_hydrograph",
    "observed_flood_hydrograph",
    "flood_hydrograph",
    "run_flood_hydrograph",
]
