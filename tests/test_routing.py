"""
Tests para tránsito en cauces (Muskingum-Cunge, Lag-and-Route).
"""

import warnings

import numpy as np
import pytest
from pydantic import ValidationError as PydanticValidationError

from hidronum.config import LagAndRouteParams, MuskingumCungeParams
from hidronum.core.routing import (
    cunge_parameters,
    initial_outflow,
    lag_and_route,
    muskingum_coefficients,
    muskingum_cunge,
)
from hidronum.exceptions import NumericalWarning, ValidationError


class TestMuskingumCunge:
    """Tests para el tránsito Muskingum-Cunge."""

    def test_coefficients_sum_to_one(self):
        c0, c1, c2 = muskingum_coefficients(k=0.4, x=0.2, dt=1.0)
        assert c0 + c1 + c2 == pytest.approx(1.0)

    def test_coefficients_values(self):
        # D = 2 × 0.8 + 0.5 = 2.1
        c0, c1, c2 = muskingum_coefficients(k=2.0, x=0.2, dt=1.0)
        assert c0 == pytest.approx(0.1 / 2.1)
        assert c1 == pytest.approx(0.9 / 2.1)
        assert c2 == pytest.approx(1.1 / 2.1)

    def test_steady_inflow_converges(self, muskingum_params):
        """Entrada constante de 100: la salida tiende a 100."""
        with pytest.warns(NumericalWarning):
            result = muskingum_cunge(np.full(50, 100.0), muskingum_params)
        assert result.outflow[-1] == pytest.approx(100.0, abs=1e-6)
        assert result.storage[-1] == pytest.approx(0.4 * 100.0, abs=1e-6)

    def test_steady_initial_storage(self):
        """Almacenamiento inicial en equilibrio: salida constante desde el inicio."""
        params = MuskingumCungeParams(k=2.0, x=0.2, dt=1.0, initial_storage=200.0)
        result = muskingum_cunge(np.full(10, 100.0), params)
        assert result.outflow == pytest.approx(np.full(10, 100.0))

    def test_initial_outflow(self):
        assert initial_outflow(40.0, 100.0, k=0.4, x=0.2) == pytest.approx(100.0)
        assert initial_outflow(0.0, 100.0, k=0.4, x=0.2) == 0.0

    def test_attenuation_and_mass(self):
        """Una onda transitada se atenúa y conserva el volumen."""
        inflow = np.concatenate([[0, 20, 60, 100, 60, 20], np.zeros(40)])
        params = MuskingumCungeParams(k=2.0, x=0.2, dt=1.0)
        result = muskingum_cunge(inflow, params)

        assert result.peak_outflow < 100.0
        assert np.argmax(result.outflow) > np.argmax(inflow)
        assert result.outflow.sum() == pytest.approx(inflow.sum(), rel=1e-3)

    def test_short_reach_conserves_volume(self, muskingum_params):
        """Δt > 2K(1-X): C2 < 0, la salida oscila pero conserva el volumen."""
        inflow = np.zeros(20)
        inflow[1] = 100.0

        with pytest.warns(NumericalWarning):
            result = muskingum_cunge(inflow, muskingum_params)

        assert result.outflow.sum() == pytest.approx(100.0, rel=1e-6)
        assert result.outflow[3] < 0.0

    def test_positive_coefficients_no_warning(self):
        """Con C0, C1, C2 ≥ 0 la salida es no negativa y no hay advertencia."""
        params = MuskingumCungeParams(k=2.0, x=0.2, dt=1.0)
        with warnings.catch_warnings():
            warnings.simplefilter("error", NumericalWarning)
            result = muskingum_cunge([0.0, 100.0, 0.0, 0.0, 0.0], params)
        assert np.all(result.outflow >= 0.0)

    def test_first_sample_from_initial_storage(self):
        """outflow[0] es el caudal despejado del almacenamiento inicial."""
        params = MuskingumCungeParams(k=2.0, x=0.2, dt=1.0, initial_storage=120.0)
        result = muskingum_cunge([50.0, 80.0], params)
        # O = (S/K - X I) / (1-X) = (60 - 10) / 0.8
        assert result.outflow[0] == pytest.approx(62.5)
        assert result.storage[0] == pytest.approx(120.0)

    def test_empty_inflow(self, muskingum_params):
        result = muskingum_cunge([], muskingum_params)
        assert len(result.outflow) == 0

    def test_params_frozen(self, muskingum_params):
        with pytest.raises(PydanticValidationError):
            muskingum_params.k = 1.0

    def test_x_out_of_range(self):
        with pytest.raises(PydanticValidationError):
            MuskingumCungeParams(k=1.0, x=0.7, dt=1.0)


class TestCungeParameters:
    """Tests para K y X físicos de Cunge."""

    def test_k_and_x(self):
        # K = 1000 / 1; X = 0.5 (1 - 5 / (10 × 0.001 × 1 × 1000)) = 0.25
        params = cunge_parameters(1000, 1.0, 5.0, 10.0, 0.001, dt=600)
        assert params.k == pytest.approx(1000.0)
        assert params.x == pytest.approx(0.25)
        assert params.dt == pytest.approx(600.0)

    def test_negative_x_clipped(self):
        with pytest.warns(NumericalWarning):
            params = cunge_parameters(1000, 1.0, 20.0, 10.0, 0.001, dt=600)
        assert params.x == 0.0

    def test_invalid_celerity(self):
        with pytest.raises(ValidationError):
            cunge_parameters(1000, 0.0, 5.0, 10.0, 0.001, dt=600)


class TestLagAndRoute:
    """Tests para Lag-and-Route."""

    def test_identity(self):
        """Un coeficiente unitario sin retardo reproduce la entrada."""
        params = LagAndRouteParams(lag_time=0.0, coefficients=(1.0,))
        result = lag_and_route([1.0, 5.0, 3.0], params)
        assert result.outflow == pytest.approx([1.0, 5.0, 3.0])
        assert result.storage == pytest.approx([0.0])

    def test_weighted_sum(self, lag_params):
        result = lag_and_route([2.0, 4.0, 6.0], lag_params)
        assert result.outflow == pytest.approx([0.5, 1.5, 2.5])

    def test_delay_buffer(self, lag_params):
        """El búfer recibe I - O en la cabeza y se desplaza."""
        result = lag_and_route([2.0, 4.0, 6.0], lag_params)
        assert result.storage == pytest.approx([3.5, 2.5])

    def test_negative_coefficients(self):
        with pytest.raises(PydanticValidationError):
            LagAndRouteParams(lag_time=1.0, coefficients=(0.5, -0.1))

    def test_empty_coefficients(self):
        with pytest.raises(PydanticValidationError):
            LagAndRouteParams(lag_time=1.0, coefficients=())
