"""
Agregación temporal de lluvia.

Suma bloques consecutivos de muestras hasta el intervalo pedido. Los tiempos
pueden ser minutos o marcas ISO 8601.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hidronum.config import AggregationType, RainAggregationConfig, coerce_enum
from hidronum.core.linalg import as_series
from hidronum.exceptions import ValidationError


@dataclass
class RainfallSeries:
    """Serie de lluvia agregada (tiempo en minutos desde el inicio)."""
    time: NDArray[np.floating]
    values: NDArray[np.floating]


def to_minutes(time) -> NDArray[np.floating]:
    """
    Convierte tiempos a minutos desde la primera muestra.

    Acepta números (minutos) o cadenas ISO 8601 ("2024-01-01T00:30").
    """
    values = list(time)
    if values and isinstance(values[0], str):
        try:
            stamps = np.array(values, dtype="datetime64[s]")
        except ValueError as exc:
            raise ValidationError(f"Fecha inválida: {exc}") from exc
        return (stamps - stamps[0]) / np.timedelta64(1, "m")
    minutes = as_series(values, "tiempo")
    return minutes - minutes[0] if len(minutes) else minutes


def rain_aggregation(
    time,
    values: ArrayLike,
    interval: float,
    type: AggregationType | str = AggregationType.AGGREGATE,
) -> RainfallSeries:
    """
    Agrega una serie de lluvia a un intervalo mayor.

    pasos por bloque = round(intervalo / Δt)

    Args:
        time: Tiempos (minutos o ISO 8601), paso constante
        values: Lluvia por muestra
        interval: Intervalo de agregación (min)
        type: 'aggr' (agregar) o 'disagg' (no implementado)

    Returns:
        RainfallSeries con el inicio de cada bloque y su lluvia total

    Raises:
        ValidationError: longitudes distintas o intervalo menor que el paso
        NotImplementedError: desagregación
    """
    type = coerce_enum(AggregationType, type, "Tipo de agregación")
    if type == AggregationType.DISAGGREGATE:
        raise NotImplementedError("La desagregación de lluvia no está implementada")

    minutes = to_minutes(time)
    rain = as_series(values, "lluvia")
    if len(minutes) != len(rain):
        raise ValidationError(
            f"Tiempo y lluvia deben tener igual longitud ({len(minutes)} != {len(rain)})"
        )
    if len(rain) < 2:
        raise ValidationError("Se requieren al menos dos muestras")
    if interval <= 0:
        raise ValidationError("Intervalo debe ser > 0")

    timestep = abs(minutes[1] - minutes[0])
    count = int(round(interval / timestep)) if timestep > 0 else 0
    if count < 1:
        raise ValidationError(
            f"Intervalo ({interval:g} min) menor que el paso de la serie ({timestep:g} min)"
        )

    starts = np.arange(0, len(rain), count)
    return RainfallSeries(
        time=minutes[starts],
        values=np.add.reduceat(rain, starts),
    )


def run_rain_aggregation(config: RainAggregationConfig, time, values: ArrayLike) -> RainfallSeries:
    """Agrega la lluvia desde un RainAggregationConfig."""
    return rain_aggregation(time, values, config.interval, config.type)


def hyetograph(time, values: ArrayLike) -> RainfallSeries:
    """
    Hietograma de pulsos horarios de un evento de lluvia uniforme.

    Valida el evento (tiempos en minutos o ISO 8601, igual longitud, paso
    constante) pero la redistribución en pulsos no está implementada.

    Raises:
        ValidationError: longitudes distintas o menos de dos muestras
        NotImplementedError: siempre que el evento sea válido
    """
    minutes = to_minutes(time)
    rain = as_series(values, "lluvia")
    if len(minutes) != len(rain):
        raise ValidationError(
            f"Tiempo y lluvia deben tener igual longitud ({len(minutes)} != {len(rain)})"
        )
    if len(rain) < 2:
        raise ValidationError("Se requieren al menos dos muestras")
    raise NotImplementedError("La generación de hietogramas no está implementada")
