"""
Hidrogramas unitarios adimensionales (t/tp, q/qp).

Familias de forma cerrada, todas con pico unitario:
- Gamma (NEH 630, Cap. 16), forma m según Peak Rate Factor
- Log-Pearson III (núcleo Pearson III en tiempo logarítmico)
- Weibull de tres parámetros
"""

import numpy as np
from numpy.typing import NDArray

from hidronum.config import (
    DimensionlessDistribution,
    DimensionlessHydrographConfig,
    coerce_enum,
)
from hidronum.exceptions import ValidationError

from .base import UnitHydrograph
from .constants import GAMMA_SHAPE_BY_PRF


def gamma_shape(prf: int) -> float:
    """
    Factor de forma m de la distribución Gamma.

    Raises:
        ValidationError: si el PRF no está tabulado
    """
    try:
        return GAMMA_SHAPE_BY_PRF[prf]
    except KeyError:
        valid = ", ".join(str(k) for k in GAMMA_SHAPE_BY_PRF)
        raise ValidationError(f"PRF no soportado: {prf} (válidos: {valid})") from None


def time_ratios(timestep: float, duration: float) -> NDArray[np.floating]:
    """
    Abscisas t/tp desde 0 con paso constante.

    n = round(duración / paso) + 1
    """
    if timestep <= 0:
        raise ValidationError("El paso debe ser > 0")
    if duration <= 0:
        raise ValidationError("La duración debe ser > 0")
    n = int(round(duration / timestep)) + 1
    return np.arange(n) * timestep


def gamma_ratios(t_tp: NDArray[np.floating], m: float) -> NDArray[np.floating]:
    """
    q/qp = e^m × (t/tp)^m × e^(-m × t/tp)
    """
    return np.exp(m) * t_tp ** m * np.exp(-m * t_tp)


def lp3_ratios(
    t_tp: NDArray[np.floating],
    shape: float,
    peak_time: float,
) -> NDArray[np.floating]:
    """
    Núcleo Pearson III en tiempo logarítmico con moda en peak_time.

    y = ln(1 + t/tpeak),  y* = ln 2
    q/qp = (y/y*)^λ × e^(λ(1 - y/y*))
    """
    if shape <= 0:
        raise ValidationError("La forma λ debe ser > 0")
    if peak_time <= 0:
        raise ValidationError("El tiempo al pico debe ser > 0")
    ratio = np.log1p(t_tp / peak_time) / np.log(2.0)
    return ratio ** shape * np.exp(shape * (1 - ratio))


def weibull_ratios(
    t_tp: NDArray[np.floating],
    alpha: float,
    beta: float,
    location: float = 0.0,
) -> NDArray[np.floating]:
    """
    Densidad Weibull de tres parámetros normalizada por su moda.

    z = (t - t0)/β,  zm = ((α-1)/α)^(1/α)
    q/qp = (z/zm)^(α-1) × e^(zm^α - z^α),  0 para t ≤ t0
    """
    if alpha <= 1:
        raise ValidationError("Weibull requiere α > 1 para tener rama ascendente")
    if beta <= 0:
        raise ValidationError("La escala β debe ser > 0")

    z = np.maximum((t_tp - location) / beta, 0.0)
    zm = ((alpha - 1) / alpha) ** (1 / alpha)
    q = (z / zm) ** (alpha - 1) * np.exp(zm ** alpha - z ** alpha)
    return np.where(t_tp > location, q, 0.0)


def dimensionless_hydrograph(
    distribution: DimensionlessDistribution | str,
    timestep: float,
    duration: float,
    prf: int | None = None,
    shape: float | None = None,
    peak_time: float | None = None,
    alpha: float | None = None,
    beta: float | None = None,
    location: float = 0.0,
) -> UnitHydrograph:
    """
    Genera un hidrograma adimensional (t/tp, q/qp).

    Args:
        distribution: 'gamma', 'lp3' o 'weibull'
        timestep: Paso en t/tp (ej. 0.1)
        duration: Duración total en t/tp (ej. 5)
        prf: Peak Rate Factor (gamma): 101, 238, 349, 433, 484, 504, 566
        shape: Forma λ (lp3)
        peak_time: Tiempo al pico en t/tp (lp3)
        alpha: Forma α > 1 (weibull)
        beta: Escala β (weibull)
        location: Ubicación t0 (weibull)

    Returns:
        UnitHydrograph con time = t/tp y flow = q/qp

    Raises:
        ValidationError: distribución o parámetros inválidos
    """
    distribution = coerce_enum(DimensionlessDistribution, distribution, "Distribución")
    t_tp = time_ratios(timestep, duration)

    if distribution == DimensionlessDistribution.GAMMA:
        if prf is None:
            raise ValidationError("Gamma requiere prf")
        q_qp = gamma_ratios(t_tp, gamma_shape(prf))

    elif distribution == DimensionlessDistribution.LP3:
        if shape is None or peak_time is None:
            raise ValidationError("Log-Pearson III requiere shape y peak_time")
        q_qp = lp3_ratios(t_tp, shape, peak_time)

    else:
        if alpha is None or beta is None:
            raise ValidationError("Weibull requiere alpha y beta")
        q_qp = weibull_ratios(t_tp, alpha, beta, location)

    return UnitHydrograph(time=t_tp, flow=q_qp)


def run_dimensionless(config: DimensionlessHydrographConfig) -> UnitHydrograph:
    """Genera el hidrograma adimensional desde un DimensionlessHydrographConfig."""
    return dimensionless_hydrograph(
        config.distribution,
        config.timestep,
        config.duration,
        prf=config.prf,
        shape=config.shape,
        peak_time=config.peak_time,
        alpha=config.alpha,
        beta=config.beta,
        location=config.location,
    )
