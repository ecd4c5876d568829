"""
Tests para hidrogramas unitarios: tiempos sintéticos, familias
adimensionales y construcción desde adimensional u observado.
"""

import numpy as np
import pytest
from pydantic import ValidationError as PydanticValidationError

from hidronum.config import (
    DimensionlessHydrographConfig,
    SyntheticTimesConfig,
    UnitHydrographConfig,
)
from hidronum.core.hydrograph import (
    GAMMA_SHAPE_BY_PRF,
    UnitHydrograph,
    dimensionless_hydrograph,
    gamma_shape,
    lp3_ratios,
    observed_unit_hydrograph,
    reverse_time_order,
    run_dimensionless,
    run_synthetic_times,
    run_unit_hydrograph,
    synthetic_times,
    unit_hydrograph,
    weibull_ratios,
)
from hidronum.exceptions import ValidationError


class TestSyntheticTimes:
    """Tests para Tc, Tp y tiempo de retardo."""

    def test_scs_si(self):
        """SCS: Tc = L^0.8 (S+1)^0.7 / (1140 √Y)."""
        times = synthetic_times("scs", "si", length=4000, slope=10, cn=82)

        s = 1000 / 82 - 10
        tc = 4000 ** 0.8 * (s + 1) ** 0.7 / (1140 * 10 ** 0.5)
        assert times.max_retention == pytest.approx(s)
        assert times.time_concentration == pytest.approx(tc)
        assert times.time_to_peak == pytest.approx(0.7 * tc)
        # Retardo con 1900 en lugar de 1140
        assert times.lag_time == pytest.approx(tc * 1140 / 1900)

    def test_scs_metric_retention(self):
        times = synthetic_times("SCS", "m", length=1200, slope=2, cn=75)
        assert times.max_retention == pytest.approx(25400 / 75 - 254)

    def test_kerby_kirpich(self):
        times = synthetic_times("kerby-kirpich", "si", length=2000, slope=1, roughness=0.4)

        tov = 1.44 * (2000 * 0.4) ** 0.467 * 0.01 ** -0.235
        tch = 0.0078 * 2000 ** 0.77 * 0.01 ** -0.385
        tc = (tov + tch) / 60
        assert times.time_concentration == pytest.approx(tc)
        assert times.time_to_peak == pytest.approx(0.7 * tc)
        assert times.lag_time == pytest.approx(0.6 * tc)

    def test_kerby_metric(self):
        times = synthetic_times("kerby", "m", length=300, slope=4, manning=0.4)
        tc = 1.4394 * (0.4 * 300 / 0.2) ** 0.467 / 60
        assert times.time_concentration == pytest.approx(tc)

    def test_kerby_si(self):
        times = synthetic_times("kerby", "si", length=500, slope=1, manning=0.2)
        tc = (2.2 * 0.2 * 500 / 0.1) ** 0.324 / 60
        assert times.time_concentration == pytest.approx(tc)

    def test_invalid_unit_system(self):
        with pytest.raises(ValidationError):
            synthetic_times("scs", "imperial", length=4000, slope=10, cn=82)

    def test_invalid_method(self):
        with pytest.raises(ValidationError):
            synthetic_times("snyder", "si", length=4000, slope=10)

    def test_missing_cn(self):
        with pytest.raises(ValidationError):
            synthetic_times("scs", "si", length=4000, slope=10)

    def test_run_from_config(self):
        config = SyntheticTimesConfig(method="kerby", units="m", length=300, slope=4, manning=0.4)
        times = run_synthetic_times(config)
        assert times.lag_time == pytest.approx(0.6 * times.time_concentration)

    def test_config_requires_method_input(self):
        with pytest.raises(PydanticValidationError):
            SyntheticTimesConfig(method="kerby_kirpich", units="si", length=300, slope=4)


class TestDimensionlessHydrograph:
    """Tests para hidrogramas adimensionales Gamma, LP3 y Weibull."""

    def test_gamma_prf_238_peak(self):
        """m = 1: q/qp(1) = e × 1 × e^-1 = 1."""
        uh = dimensionless_hydrograph("gamma", timestep=0.1, duration=5, prf=238)
        assert uh.flow[10] == pytest.approx(1.0)
        assert uh.time_to_peak == pytest.approx(1.0)
        assert uh.peak_flow == pytest.approx(1.0)

    @pytest.mark.parametrize("prf", sorted(GAMMA_SHAPE_BY_PRF))
    def test_gamma_peak_normalized(self, prf):
        uh = dimensionless_hydrograph("gamma", timestep=0.1, duration=5, prf=prf)
        assert uh.flow[10] == pytest.approx(1.0)
        assert np.all(uh.flow <= 1.0 + 1e-12)

    def test_steps_and_origin(self):
        uh = dimensionless_hydrograph("gamma", timestep=0.25, duration=5, prf=484)
        assert len(uh.time) == 21
        assert uh.time[-1] == pytest.approx(5.0)
        assert uh.flow[0] == pytest.approx(0.0)

    def test_gamma_unknown_prf(self):
        with pytest.raises(ValidationError):
            gamma_shape(300)

    def test_lp3_peak_at_peak_time(self):
        t = np.array([0.5, 1.0, 2.0])
        q = lp3_ratios(t, shape=3.0, peak_time=1.0)
        assert q[1] == pytest.approx(1.0)
        assert q[0] < 1.0
        assert q[2] < 1.0

    def test_lp3_hydrograph(self):
        uh = dimensionless_hydrograph("lp3", timestep=0.1, duration=5, shape=4.0, peak_time=1.0)
        assert uh.time_to_peak == pytest.approx(1.0)
        assert uh.peak_flow == pytest.approx(1.0)

    def test_weibull_mode(self):
        """Pico en t0 + β ((α-1)/α)^(1/α)."""
        zm = (1 / 2) ** (1 / 2)
        q = weibull_ratios(np.array([0.0, zm, 3.0]), alpha=2.0, beta=1.0)
        assert q[0] == pytest.approx(0.0)
        assert q[1] == pytest.approx(1.0)
        assert 0 < q[2] < 1

    def test_weibull_location_shift(self):
        q = weibull_ratios(np.array([0.4, 0.5, 1.0]), alpha=3.0, beta=1.0, location=0.5)
        assert q[0] == 0.0
        assert q[1] == 0.0
        assert q[2] > 0.0

    def test_weibull_requires_alpha_above_one(self):
        with pytest.raises(ValidationError):
            weibull_ratios(np.array([1.0]), alpha=1.0, beta=1.0)

    def test_unknown_distribution(self):
        with pytest.raises(ValidationError):
            dimensionless_hydrograph("beta", timestep=0.1, duration=5)

    def test_missing_parameters(self):
        with pytest.raises(ValidationError):
            dimensionless_hydrograph("weibull", timestep=0.1, duration=5, alpha=2.0)

    def test_run_from_config(self):
        config = DimensionlessHydrographConfig(timestep=0.1, duration=3, prf=484)
        uh = run_dimensionless(config)
        assert len(uh.time) == 31


class TestUnitHydrograph:
    """Tests para construcción del hidrograma unitario."""

    @pytest.fixture
    def gamma_484(self):
        return dimensionless_hydrograph("gamma", timestep=0.1, duration=5, prf=484)

    def test_dimensionless_si(self, gamma_484):
        """Tp = round(0.133 Tc, 3)/2 + 0.6 Tc; qp = 484 A / Tp."""
        uh = unit_hydrograph("dim", "si", 1.0, gamma_484, peak=484, tconcentration=2.0)

        tp = 0.266 / 2 + 1.2
        assert uh.time_to_peak == pytest.approx(tp)
        assert uh.peak_flow == pytest.approx(484 / tp)

    def test_dimensionless_metric(self, gamma_484):
        """Sistema métrico: qp = 2.08 A / Tp para PRF 484."""
        uh = unit_hydrograph("dim", "m", 10.0, gamma_484, peak=484, tconcentration=2.0)
        tp = 0.133 + 1.2
        assert uh.peak_flow == pytest.approx(2.08 * 10 / tp)

    def test_dimensionless_requires_peak(self, gamma_484):
        with pytest.raises(ValidationError):
            unit_hydrograph("dim", "si", 1.0, gamma_484, tconcentration=2.0)

    def test_invalid_unit_system(self, gamma_484):
        with pytest.raises(ValidationError):
            unit_hydrograph("dim", "ft", 1.0, gamma_484, peak=484, tconcentration=2.0)

    def test_observed(self):
        """
        DRH = [0, 20, 10, 0], V = 30 × 3600 = 108000 ft³.
        Con A = 1 296 000 ft² la lámina es 1 in.
        """
        observed = UnitHydrograph(
            time=np.array([0.0, 1.0, 2.0, 3.0]),
            flow=np.array([10.0, 30.0, 20.0, 10.0]),
        )
        result = observed_unit_hydrograph(observed, 1_296_000, "si", baseflow=10.0)

        assert result.total_volume == pytest.approx(1.0)
        # Salida invertida en el tiempo
        assert result.unit_hydrograph.flow == pytest.approx([0.0, 10.0, 20.0, 0.0])
        assert result.unit_hydrograph.time == pytest.approx([0.0, 1.0, 2.0, 3.0])

    def test_observed_without_reversal(self):
        result = unit_hydrograph(
            "obs", "si", 1_296_000,
            ([0.0, 1.0, 2.0, 3.0], [10.0, 30.0, 20.0, 10.0]),
            baseflow=10.0, reverse=False,
        )
        assert result.unit_hydrograph.flow == pytest.approx([0.0, 20.0, 10.0, 0.0])

    def test_fields_converted_to_arrays(self):
        uh = UnitHydrograph(time=[0, 1, 2], flow=[0, 5, 1])
        assert isinstance(uh.time, np.ndarray)
        assert uh.flow.dtype == float

    def test_observed_from_lists(self):
        """Un UnitHydrograph armado con listas se procesa igual que con arrays."""
        observed = UnitHydrograph(time=[0, 1, 2, 3], flow=[10, 30, 20, 10])
        result = unit_hydrograph("obs", "si", 1_296_000, observed, baseflow=10.0)

        assert result.total_volume == pytest.approx(1.0)
        assert result.unit_hydrograph.flow == pytest.approx([0.0, 10.0, 20.0, 0.0])

    def test_dimensionless_from_lists(self, gamma_484):
        dimensionless = UnitHydrograph(time=list(gamma_484.time), flow=list(gamma_484.flow))
        uh = unit_hydrograph("dim", "si", 1.0, dimensionless, peak=484, tconcentration=2.0)

        tp = 0.266 / 2 + 1.2
        assert uh.peak_flow == pytest.approx(484 / tp)

    def test_observed_metric_depth(self):
        """Lámina en cm: V / A × 100."""
        result = unit_hydrograph("obs", "m", 3600.0, ([0.0, 1.0], [1.0, 1.0]))
        # V = 2 × 3600 = 7200 m³ → 7200 / 3600 × 100 = 200 cm
        assert result.total_volume == pytest.approx(200.0)
        assert result.unit_hydrograph.flow == pytest.approx([0.005, 0.005])

    def test_observed_zero_volume(self):
        with pytest.raises(ValidationError):
            unit_hydrograph("obs", "si", 1000.0, ([0.0, 1.0, 2.0], [5.0, 5.0, 5.0]), baseflow=5.0)

    def test_mismatched_series(self):
        with pytest.raises(ValidationError):
            unit_hydrograph("obs", "si", 1000.0, ([0.0, 1.0, 2.0], [5.0, 6.0]))

    def test_unknown_type(self):
        with pytest.raises(ValidationError):
            unit_hydrograph("snyder", "si", 1000.0, ([0.0, 1.0], [1.0, 2.0]))

    def test_run_from_config(self, gamma_484):
        config = UnitHydrographConfig(
            type="dim", units="si", drainage_area=1.0, peak=484, tconcentration=2.0,
        )
        uh = run_unit_hydrograph(config, gamma_484)
        assert uh.peak_flow == pytest.approx(484 / 1.333)

    def test_config_dim_requires_tc(self):
        with pytest.raises(PydanticValidationError):
            UnitHydrographConfig(type="dim", units="si", drainage_area=1.0, peak=484)

    def test_reverse_time_order_copies(self):
        values = np.array([1.0, 2.0, 3.0])
        reversed_values = reverse_time_order(values)
        reversed_values[0] = 99.0
        assert values == pytest.approx([1.0, 2.0, 3.0])
