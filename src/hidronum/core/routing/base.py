"""
Tipos base del tránsito en cauces.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass
class RoutingResult:
    """Resultado de un tránsito: caudal de salida y almacenamiento."""
    outflow: NDArray[np.floating]
    storage: NDArray[np.floating]

    @property
    def peak_outflow(self) -> float:
        return float(np.max(self.outflow)) if len(self.outflow) else 0.0
