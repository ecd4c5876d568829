"""
Hidrograma de crecida por convolución.

Cada pulso de escorrentía (o de lluvia efectiva) genera una copia del
hidrograma unitario desplazada en el tiempo; la suma de las copias más el
caudal base es el hidrograma de crecida.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hidronum.config import (
    FloodHydrographConfig,
    FloodHydrographType,
    UnitSystem,
    coerce_enum,
)
from hidronum.core.linalg import as_series, vector
from hidronum.core.runoff import scs_runoff
from hidronum.exceptions import ValidationError

from .base import FloodHydrograph, UnitHydrograph, reverse_time_order
from .unit import as_hydrograph


def convolve(pulses: ArrayLike, ordinates: ArrayLike) -> NDArray[np.floating]:
    """
    Convolución discreta por desplazamiento y suma.

    Q[n] = Σ_i P[i] × U[n - i]

    Cada copia P[i] × U se rellena con ceros hasta la longitud común
    len(P) + len(U) - 1 antes de sumarse.

    Args:
        pulses: Pulsos de escorrentía
        ordinates: Ordenadas del hidrograma unitario

    Returns:
        Serie de caudales de longitud len(P) + len(U) - 1
    """
    p = as_series(pulses, "pulsos")
    u = as_series(ordinates, "ordenadas")
    if len(p) == 0 or len(u) == 0:
        return vector(0)

    flow = vector(len(p) + len(u) - 1)
    for i, pulse in enumerate(p):
        flow[i:i + len(u)] += pulse * u
    return flow


def incremental_scs_runoff(
    rain: NDArray[np.floating],
    cn: float,
    units: UnitSystem,
    storm_duration: float,
    timestep: float,
) -> NDArray[np.floating]:
    """
    Pulsos de escorrentía SCS a partir de la lluvia por intervalo.

    P acumulada → Q acumulada (SCS-CN) → ΔQ por diferencias.
    Solo se consideran round(duración / Δt) pulsos.
    """
    count = min(int(round(storm_duration / timestep)), len(rain))
    cumulative = np.cumsum(rain[:count])
    runoff = np.asarray(scs_runoff(cumulative, cn, units), dtype=float)
    return np.abs(np.diff(runoff, prepend=0.0))


def scs_flood_hydrograph(
    rain: ArrayLike,
    unit: UnitHydrograph,
    units: UnitSystem | str,
    cn: float,
    storm_duration: float,
    timestep: float,
    baseflow: float = 0.0,
    reverse: bool = True,
) -> FloodHydrograph:
    """
    Hidrograma de crecida con escorrentía SCS-CN.

    Args:
        rain: Lluvia por intervalo (in o mm)
        unit: Hidrograma unitario con el mismo paso que la lluvia
        units: 'si' o 'm'
        cn: Número de curva
        storm_duration: Duración de la tormenta (hr)
        timestep: Paso de tiempo (hr)
        baseflow: Caudal base
        reverse: Invertir el orden temporal del caudal

    Returns:
        FloodHydrograph con tiempos Δt, 2Δt, ...
    """
    units = coerce_enum(UnitSystem, units, "Sistema de unidades")
    if storm_duration <= 0:
        raise ValidationError("Duración de la tormenta debe ser > 0")
    if timestep <= 0:
        raise ValidationError("Paso de tiempo debe ser > 0")

    rain = as_series(rain, "lluvia")
    runoff = incremental_scs_runoff(rain, cn, units, storm_duration, timestep)
    flow = convolve(runoff, unit.flow) + baseflow
    if reverse:
        flow = reverse_time_order(flow)

    time = np.arange(1, len(flow) + 1) * timestep
    return FloodHydrograph(time=time, flow=flow, runoff=runoff)


def observed_flood_hydrograph(
    rain: ArrayLike,
    unit: UnitHydrograph,
    rain_time: ArrayLike | None = None,
    baseflow: float = 0.0,
) -> FloodHydrograph:
    """
    Hidrograma de crecida a partir de pulsos de lluvia efectiva.

    Args:
        rain: Pulsos de lluvia efectiva por intervalo
        unit: Hidrograma unitario con el mismo paso que la lluvia
        rain_time: Tiempos de los pulsos (si falta se usa el paso del HU)
        baseflow: Caudal base

    Returns:
        FloodHydrograph de longitud len(lluvia) + len(HU) - 1
    """
    rain = as_series(rain, "lluvia")
    flow = convolve(rain, unit.flow) + baseflow

    if rain_time is not None:
        times = as_series(rain_time, "tiempo de lluvia")
        if len(times) != len(rain):
            raise ValidationError(
                f"Tiempo y lluvia deben tener igual longitud ({len(times)} != {len(rain)})"
            )
    else:
        times = unit.time
    start = times[0] if len(times) else 0.0
    step = abs(times[1] - times[0]) if len(times) > 1 else 1.0

    time = start + np.arange(len(flow)) * step
    return FloodHydrograph(time=time, flow=flow, runoff=rain)


def flood_hydrograph(
    type: FloodHydrographType | str,
    rain: ArrayLike,
    unit_hydrograph,
    rain_time: ArrayLike | None = None,
    units: UnitSystem | str | None = None,
    cn: float | None = None,
    storm_duration: float | None = None,
    timestep: float | None = None,
    baseflow: float | None = None,
    reverse: bool = True,
) -> FloodHydrograph:
    """
    Genera un hidrograma de crecida por convolución.

    Args:
        type: 'scs' (escorrentía SCS-CN) u 'obs' (pulsos observados)
        rain: Lluvia por intervalo
        unit_hydrograph: UnitHydrograph o par (tiempo, caudal)
        rain_time: Tiempos de la lluvia (obs)
        units: 'si' o 'm' (scs)
        cn: Número de curva (scs)
        storm_duration: Duración de la tormenta en horas (scs)
        timestep: Paso de tiempo en horas (scs)
        baseflow: Caudal base (default 0)
        reverse: Invertir orden temporal (scs)

    Returns:
        FloodHydrograph

    Raises:
        ValidationError: tipo, unidades o parámetros inválidos
    """
    type = coerce_enum(FloodHydrographType, type, "Tipo de hidrograma de crecida")
    unit = as_hydrograph(unit_hydrograph)
    if baseflow is None:
        baseflow = 0.0

    if type == FloodHydrographType.SCS:
        if units is None:
            raise ValidationError("Hidrograma SCS requiere units")
        units = coerce_enum(UnitSystem, units, "Sistema de unidades")
        if cn is None or storm_duration is None or timestep is None:
            raise ValidationError("Hidrograma SCS requiere cn, storm_duration y timestep")
        return scs_flood_hydrograph(
            rain, unit, units, cn, storm_duration, timestep,
            baseflow=baseflow, reverse=reverse,
        )

    return observed_flood_hydrograph(rain, unit, rain_time=rain_time, baseflow=baseflow)


def run_flood_hydrograph(
    config: FloodHydrographConfig,
    rain: ArrayLike,
    unit_hydrograph,
    rain_time: ArrayLike | None = None,
) -> FloodHydrograph:
    """Genera el hidrograma de crecida desde un FloodHydrographConfig."""
    return flood_hydrograph(
        config.type,
        rain,
        unit_hydrograph,
        rain_time=rain_time,
        units=config.units,
        cn=config.cn,
        storm_duration=config.storm_duration,
        timestep=config.timestep,
        baseflow=config.baseflow,
        reverse=config.reverse,
    )
