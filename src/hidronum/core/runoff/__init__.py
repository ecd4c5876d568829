"""
Módulo de cálculo de escorrentía.

- Método SCS Curve Number (CN)
- Modelo de baldes por uso de suelo
"""

from .scs import (
    scs_potential_retention,
    scs_initial_abstraction,
    scs_runoff,
)

from .bucket import (
    FIELD_CAPACITIES,
    bucket_model,
)

__all__ = [
    # SCS-CN
    "scs_potential_retention",
    "scs_initial_abstraction",
    "scs_runoff",
    # Baldes
    "FIELD_CAPACITIES",
    "bucket_model",
]
