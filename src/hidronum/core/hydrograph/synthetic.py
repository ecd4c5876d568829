"""
Parámetros temporales sintéticos para hidrogramas unitarios.

Tiempo de concentración, tiempo al pico y tiempo de retardo (horas) según:
- SCS (lag equation, NEH-4)
- Kerby-Kirpich (flujo superficial Kerby + cauce Kirpich)
- Kerby (flujo superficial)
"""

from hidronum.config import SyntheticMethod, SyntheticTimesConfig, UnitSystem, coerce_enum
from hidronum.core.runoff import scs_potential_retention
from hidronum.exceptions import ValidationError

from .base import SyntheticTimes
from .constants import KERBY_KIRPICH_COEFFICIENTS


def scs_times(length: float, slope: float, cn: float, units: UnitSystem) -> SyntheticTimes:
    """
    Método SCS.

    Tc  = L^0.8 × (S+1)^0.7 / (1140 × Y^0.5)
    Tp  = 0.7 × Tc
    lag = L^0.8 × (S+1)^0.7 / (1900 × Y^0.5)

    L en pies (si) o metros (m), Y pendiente en %, S retención potencial.
    """
    s = scs_potential_retention(cn, units)
    numerator = (length ** 0.8) * ((s + 1) ** 0.7)
    tc = numerator / (1140 * slope ** 0.5)
    return SyntheticTimes(
        time_concentration=tc,
        time_to_peak=0.7 * tc,
        lag_time=numerator / (1900 * slope ** 0.5),
        max_retention=s,
    )


def kerby_kirpich_times(
    length: float,
    slope: float,
    roughness: float,
    units: UnitSystem,
) -> SyntheticTimes:
    """
    Método Kerby-Kirpich.

    tov = M × (L × N)^0.467 × (Y/100)^-0.235   [min]
    tch = K × L^0.77 × (Y/100)^-0.385          [min]
    Tc  = (tov + tch) / 60                     [hr]
    """
    k, m = KERBY_KIRPICH_COEFFICIENTS[units.value]
    s = slope / 100
    tov = m * (length * roughness) ** 0.467 * s ** -0.235
    tch = k * length ** 0.77 * s ** -0.385
    tc = (tov + tch) / 60
    return SyntheticTimes(time_concentration=tc, time_to_peak=0.7 * tc, lag_time=0.6 * tc)


def kerby_times(length: float, slope: float, manning: float, units: UnitSystem) -> SyntheticTimes:
    """
    Método Kerby.

    si: Tc = (2.2 × n × L / (Y/100)^0.5)^0.324 / 60
    m:  Tc = 1.4394 × (n × L / (Y/100)^0.5)^0.467 / 60
    """
    root = (slope / 100) ** 0.5
    if units == UnitSystem.SI:
        tc = ((2.2 * manning * length) / root) ** 0.324 / 60
    else:
        tc = 1.4394 * ((manning * length) / root) ** 0.467 / 60
    return SyntheticTimes(time_concentration=tc, time_to_peak=0.7 * tc, lag_time=0.6 * tc)


def synthetic_times(
    method: SyntheticMethod | str,
    units: UnitSystem | str,
    length: float,
    slope: float,
    cn: float | None = None,
    roughness: float | None = None,
    manning: float | None = None,
) -> SyntheticTimes:
    """
    Calcula Tc, Tp y tiempo de retardo según el método.

    Args:
        method: 'scs', 'kerby_kirpich' (o 'kerby-kirpich') o 'kerby'
        units: 'si' (pies) o 'm' (metros)
        length: Longitud del cauce
        slope: Pendiente en %
        cn: Número de curva (SCS)
        roughness: Rugosidad N de Kerby (Kerby-Kirpich)
        manning: Coeficiente de Manning (Kerby)

    Returns:
        SyntheticTimes en horas

    Raises:
        ValidationError: unidad, método o parámetros inválidos
    """
    units = coerce_enum(UnitSystem, units, "Sistema de unidades")
    method = coerce_enum(SyntheticMethod, method, "Método")

    if length <= 0:
        raise ValidationError("Longitud debe ser > 0")
    if slope <= 0:
        raise ValidationError("Pendiente debe ser > 0")

    if method == SyntheticMethod.SCS:
        if cn is None:
            raise ValidationError("SCS requiere cn")
        return scs_times(length, slope, cn, units)

    elif method == SyntheticMethod.KERBY_KIRPICH:
        if roughness is None or roughness <= 0:
            raise ValidationError("Kerby-Kirpich requiere roughness > 0")
        return kerby_kirpich_times(length, slope, roughness, units)

    else:
        if manning is None or manning <= 0:
            raise ValidationError("Kerby requiere manning > 0")
        return kerby_times(length, slope, manning, units)


def run_synthetic_times(config: SyntheticTimesConfig) -> SyntheticTimes:
    """Calcula los parámetros temporales desde un SyntheticTimesConfig."""
    return synthetic_times(
        config.method,
        config.units,
        config.length,
        config.slope,
        cn=config.cn,
        roughness=config.roughness,
        manning=config.manning,
    )
