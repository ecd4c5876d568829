"""
Módulo de precipitación.

- Media areal (aritmética, Thiessen)
- Agregación temporal e hietogramas
"""

from .areal import (
    arithmetic_mean,
    pad_series,
    thiessen,
)

from .aggregation import (
    RainfallSeries,
    to_minutes,
    rain_aggregation,
    run_rain_aggregation,
    hyetograph,
)

__all__ = [
    # Media areal
    "arithmetic_mean",
    "pad_series",
    "thiessen",
    # Agregación
    "RainfallSeries",
    "to_minutes",
    "rain_aggregation",
    "run_rain_aggregation",
    "hyetograph",
]
