"""
Construcción de hidrogramas unitarios.

- A partir de un hidrograma adimensional (t/tp, q/qp) y Tc
- A partir de un hidrograma observado y su caudal base
"""

import numpy as np

from hidronum.config import (
    UnitHydrographConfig,
    UnitHydrographType,
    UnitSystem,
    coerce_enum,
)
from hidronum.core.linalg import as_series
from hidronum.exceptions import ValidationError

from .base import ObservedUnitHydrograph, UnitHydrograph, reverse_time_order
from .constants import DT_TC_RATIO, METRIC_PRF_CONVERSION, RUNOFF_DEPTH_FACTOR


def as_hydrograph(data) -> UnitHydrograph:
    """
    Normaliza la entrada a UnitHydrograph.

    Acepta un UnitHydrograph o un par (tiempos, caudales).
    Las series se normalizan a float 1D.
    """
    if isinstance(data, UnitHydrograph):
        time, flow = data.time, data.flow
    else:
        try:
            time, flow = data
        except (TypeError, ValueError):
            raise ValidationError("El hidrograma debe ser un par (tiempo, caudal)") from None
    time = as_series(time, "tiempo")
    flow = as_series(flow, "caudal")
    if len(time) != len(flow):
        raise ValidationError(
            f"Tiempo y caudal deben tener igual longitud ({len(time)} != {len(flow)})"
        )
    return UnitHydrograph(time=time, flow=flow)


def unit_peak_flow(peak: float, drainage_area: float, time_to_peak: float, units: UnitSystem) -> float:
    """
    Caudal pico del hidrograma unitario.

    si: qp = PRF × A / Tp                 [cfs/in, A en mi²]
    m:  qp = PRF × (2.08/484) × A / Tp    [m³/s/cm, A en km²]
    """
    qp = peak * drainage_area / time_to_peak
    if units == UnitSystem.M:
        qp *= METRIC_PRF_CONVERSION
    return qp


def dimensionless_unit_hydrograph(
    dimensionless: UnitHydrograph,
    drainage_area: float,
    peak: float,
    tconcentration: float,
    units: UnitSystem | str,
) -> UnitHydrograph:
    """
    Escala un hidrograma adimensional a hidrograma unitario.

    ΔD = round(0.133 × Tc, 3)
    Tp = ΔD/2 + 0.6 × Tc
    t = (t/tp) × Tp,  q = (q/qp) × qp

    Args:
        dimensionless: Hidrograma (t/tp, q/qp)
        drainage_area: Área (mi² o km²)
        peak: Peak Rate Factor
        tconcentration: Tiempo de concentración (hr)
        units: 'si' o 'm'

    Returns:
        UnitHydrograph en horas y caudal por unidad de lámina
    """
    units = coerce_enum(UnitSystem, units, "Sistema de unidades")
    if drainage_area <= 0:
        raise ValidationError("Área debe ser > 0")
    if peak <= 0:
        raise ValidationError("Peak Rate Factor debe ser > 0")
    if tconcentration <= 0:
        raise ValidationError("Tc debe ser > 0")

    dt = round(DT_TC_RATIO * tconcentration, 3)
    tp = dt / 2 + 0.6 * tconcentration
    qp = unit_peak_flow(peak, drainage_area, tp, units)

    return UnitHydrograph(
        time=dimensionless.time * tp,
        flow=dimensionless.flow * qp,
    )


def observed_unit_hydrograph(
    observed: UnitHydrograph,
    drainage_area: float,
    units: UnitSystem | str,
    baseflow: float = 0.0,
    reverse: bool = True,
) -> ObservedUnitHydrograph:
    """
    Deriva el hidrograma unitario de un evento observado.

    DRH = |Q - Qbase|
    V = Σ DRH × Δt                    [Δt en segundos]
    lámina = V / A × 12 (in) o × 100 (cm)
    HU = DRH / lámina

    Args:
        observed: Hidrograma observado (tiempo en horas, caudal)
        drainage_area: Área (ft² para si, m² para m)
        units: 'si' o 'm'
        baseflow: Caudal base a separar
        reverse: Invertir el orden temporal del resultado

    Returns:
        ObservedUnitHydrograph con la lámina total de escorrentía

    Raises:
        ValidationError: serie de menos de dos puntos o volumen nulo
    """
    units = coerce_enum(UnitSystem, units, "Sistema de unidades")
    if drainage_area <= 0:
        raise ValidationError("Área debe ser > 0")
    if len(observed.time) < 2:
        raise ValidationError("El hidrograma observado requiere al menos dos puntos")

    drh = np.abs(observed.flow - baseflow)
    timestep = abs(observed.time[1] - observed.time[0]) * 3600
    volume = float(np.sum(drh)) * timestep
    depth = volume / drainage_area * RUNOFF_DEPTH_FACTOR[units.value]

    if depth == 0:
        raise ValidationError("Volumen de escorrentía directa nulo")

    flow = drh / depth
    if reverse:
        flow = reverse_time_order(flow)

    return ObservedUnitHydrograph(
        unit_hydrograph=UnitHydrograph(time=observed.time.copy(), flow=flow),
        total_volume=depth,
    )


def unit_hydrograph(
    type: UnitHydrographType | str,
    units: UnitSystem | str,
    drainage_area: float,
    data,
    peak: float | None = None,
    tconcentration: float | None = None,
    baseflow: float = 0.0,
    reverse: bool = True,
) -> UnitHydrograph | ObservedUnitHydrograph:
    """
    Construye un hidrograma unitario.

    Args:
        type: 'dim' (desde adimensional) u 'obs' (desde observado)
        units: 'si' o 'm'
        drainage_area: Área de la cuenca
        data: UnitHydrograph o par (tiempo, caudal)
        peak: Peak Rate Factor (dim)
        tconcentration: Tc en horas (dim)
        baseflow: Caudal base (obs)
        reverse: Invertir orden temporal (obs)

    Returns:
        UnitHydrograph (dim) u ObservedUnitHydrograph (obs)
    """
    type = coerce_enum(UnitHydrographType, type, "Tipo de hidrograma unitario")
    units = coerce_enum(UnitSystem, units, "Sistema de unidades")
    hydrograph = as_hydrograph(data)

    if type == UnitHydrographType.DIMENSIONLESS:
        if peak is None or tconcentration is None:
            raise ValidationError("Hidrograma adimensional requiere peak y tconcentration")
        return dimensionless_unit_hydrograph(
            hydrograph, drainage_area, peak, tconcentration, units
        )

    return observed_unit_hydrograph(
        hydrograph, drainage_area, units, baseflow=baseflow, reverse=reverse
    )


def run_unit_hydrograph(
    config: UnitHydrographConfig, data
) -> UnitHydrograph | ObservedUnitHydrograph:
    """Construye el hidrograma unitario desde un UnitHydrographConfig."""
    return unit_hydrograph(
        config.type,
        config.units,
        config.drainage_area,
        data,
        peak=config.peak,
        tconcentration=config.tconcentration,
        baseflow=config.baseflow,
        reverse=config.reverse,
    )
