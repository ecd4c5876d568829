"""
Modelo de baldes para análisis lluvia-escorrentía de largo plazo.

Cinco baldes por uso de suelo (agricultura, roca desnuda, pradera, bosque,
urbano). Todo en mm. Ver Wilby (1994), "Rainfall-runoff modelling".
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hidronum.config import BucketModelConfig
from hidronum.core.linalg import as_series, matrix
from hidronum.exceptions import ValidationError


# Capacidad de campo (mm) por uso de suelo, en el orden de BucketModelConfig.landuse
FIELD_CAPACITIES = (25.0, 5.0, 25.0, 50.0, 5.0)


def bucket_model(
    rainfall: ArrayLike,
    evaporation: ArrayLike,
    config: BucketModelConfig,
) -> NDArray[np.floating]:
    """
    Calcula la escorrentía total ponderada por uso de suelo.

    Para cada balde:
        θ[0] = FC × fracción + P[0] - E[0]
        θ[t] = θ[t-1] × (1 - f) + P[t] - E[t]
        desborde = θ - FC si θ > FC (θ queda en FC)
        interflujo = θ × f si θ > 0
        total = desborde + interflujo + caudal_base / 24

    Args:
        rainfall: Serie de precipitación (mm)
        evaporation: Serie de evaporación (mm), misma longitud
        config: Caudal base, infiltración y fracciones de uso de suelo

    Returns:
        Serie de escorrentía total (mm)
    """
    rain = as_series(rainfall, "rainfall")
    evap = as_series(evaporation, "evaporation")
    if rain.shape != evap.shape:
        raise ValidationError(
            f"Precipitación ({rain.size}) y evaporación ({evap.size}) deben tener igual longitud"
        )

    n = rain.size
    landuse = config.landuse
    infiltration = config.infiltration
    baseflow = config.baseflow / 24

    totalflow = matrix(len(FIELD_CAPACITIES), n)

    for j, (capacity, fraction) in enumerate(zip(FIELD_CAPACITIES, landuse)):
        moisture = 0.0
        for t in range(n):
            if t == 0:
                moisture = capacity * fraction + rain[0] - evap[0]
            else:
                moisture = moisture * (1 - infiltration) + rain[t] - evap[t]

            overflow = 0.0
            if moisture > capacity:
                overflow = moisture - capacity
                moisture = capacity

            interflow = moisture * infiltration if moisture > 0 else 0.0
            totalflow[j, t] = overflow + interflow + baseflow

    return np.asarray(landuse) @ totalflow
