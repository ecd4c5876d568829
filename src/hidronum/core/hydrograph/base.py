"""
Tipos base de hidrogramas.

Incluye:
- UnitHydrograph, ObservedUnitHydrograph, FloodHydrograph, SyntheticTimes
- reverse_time_order: inversión temporal de salidas (convención heredada)
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass
class UnitHydrograph:
    """Par de series (tiempo, caudal) de igual longitud."""
    time: NDArray[np.floating]
    flow: NDArray[np.floating]

    def __post_init__(self):
        self.time = np.asarray(self.time, dtype=float)
        self.flow = np.asarray(self.flow, dtype=float)
        if len(self.time) != len(self.flow):
            # Error de programación interno, no una entrada del usuario
            raise ValueError("time y flow deben tener igual longitud")

    @property
    def peak_flow(self) -> float:
        return float(np.max(self.flow)) if len(self.flow) else 0.0

    @property
    def time_to_peak(self) -> float:
        return float(self.time[int(np.argmax(self.flow))]) if len(self.flow) else 0.0


@dataclass
class ObservedUnitHydrograph:
    """Hidrograma unitario derivado de un evento observado."""
    unit_hydrograph: UnitHydrograph
    total_volume: float  # lámina de escorrentía directa (in o cm)


@dataclass
class FloodHydrograph:
    """Hidrograma de crecida resultante de la convolución."""
    time: NDArray[np.floating]
    flow: NDArray[np.floating]
    runoff: NDArray[np.floating]  # pulsos de escorrentía utilizados

    @property
    def peak_flow(self) -> float:
        return float(np.max(self.flow)) if len(self.flow) else 0.0


@dataclass
class SyntheticTimes:
    """Parámetros temporales sintéticos (horas)."""
    time_concentration: float
    time_to_peak: float
    lag_time: float
    max_retention: float | None = None


def reverse_time_order(values: NDArray[np.floating]) -> NDArray[np.floating]:
    """
    Invierte el orden temporal de una serie.

    Las salidas del hidrograma unitario observado y del hidrograma de crecida
    SCS se entregan invertidas para mantener compatibilidad con resultados
    existentes. Se aplica solo si reverse=True en la configuración.
    """
    return np.asarray(values)[::-1].copy()
