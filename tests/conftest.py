"""Configuración de pytest para tests de hidronum."""

import numpy as np
import pytest

from hidronum.config import (
    BoundaryCondition,
    LagAndRouteParams,
    MuskingumCungeParams,
    TransientGroundwaterConfig,
)
from hidronum.core.hydrograph import UnitHydrograph


@pytest.fixture
def muskingum_params():
    """Tramo Muskingum de referencia (K=0.4, X=0.2, Δt=1)."""
    return MuskingumCungeParams(k=0.4, x=0.2, dt=1.0, initial_storage=0.0)


@pytest.fixture
def lag_params():
    """Lag-and-Route con dos coeficientes y retardo unitario."""
    return LagAndRouteParams(lag_time=1.0, coefficients=(0.5, 0.5))


@pytest.fixture
def simple_uh():
    """Hidrograma unitario de tres ordenadas con paso de 1 hora."""
    return UnitHydrograph(time=np.array([0.0, 1.0, 2.0]), flow=np.array([0.0, 1.0, 0.5]))


@pytest.fixture
def transient_config():
    """Acuífero confinado de 100 m, carga 10 en x=0 y borde impermeable en x=L."""
    return TransientGroundwaterConfig(
        length=100.0,
        k=10.0,
        nodes=11,
        dt=1.0,
        total_time=2000.0,
        initial_head=0.0,
        left=BoundaryCondition.head(10.0),
        right=BoundaryCondition.flux(0.0),
        storativity=0.1,
    )


@pytest.fixture
def sample_stations():
    """Tres estaciones con lluvia constante 1, 2 y 3."""
    return [[1.0] * 5, [2.0] * 5, [3.0] * 5]
