"""
Tests para hidrogramas de crecida por convolución.
"""

import numpy as np
import pytest

from hidronum.config import FloodHydrographConfig
from hidronum.core.hydrograph import (
    convolve,
    flood_hydrograph,
    incremental_scs_runoff,
    run_flood_hydrograph,
)
from hidronum.exceptions import ValidationError


class TestConvolve:
    """Tests para el núcleo de desplazamiento y suma."""

    def test_unit_impulse_identity(self):
        u = np.array([0.0, 3.0, 5.0, 2.0, 1.0])
        assert convolve([1.0, 0.0, 0.0], u)[:len(u)] == pytest.approx(u)

    def test_known_result(self):
        assert convolve([1.0, 2.0], [1.0, 1.0, 1.0]) == pytest.approx([1.0, 3.0, 3.0, 2.0])

    def test_length(self):
        assert len(convolve(np.ones(4), np.ones(7))) == 10

    def test_matches_numpy(self):
        p = np.array([0.2, 1.4, 0.7, 0.1])
        u = np.array([0.0, 10.0, 25.0, 15.0, 5.0, 0.0])
        assert convolve(p, u) == pytest.approx(np.convolve(p, u))

    def test_empty(self):
        assert len(convolve([], [1.0, 2.0])) == 0


class TestObservedFlood:
    """Tests para la rama de pulsos observados."""

    def test_impulse_reproduces_uh(self, simple_uh):
        """Un pulso unitario reproduce el hidrograma unitario más el caudal base."""
        result = flood_hydrograph("obs", [1.0], simple_uh, baseflow=2.0)
        assert result.flow == pytest.approx(simple_uh.flow + 2.0)

    def test_superposition(self, simple_uh):
        result = flood_hydrograph("obs", [1.0, 2.0], simple_uh, baseflow=5.0)

        assert result.flow == pytest.approx([5.0, 6.0, 7.5, 6.0])
        assert result.time == pytest.approx([0.0, 1.0, 2.0, 3.0])
        assert result.peak_flow == pytest.approx(7.5)

    def test_rain_time_axis(self, simple_uh):
        result = flood_hydrograph("obs", [1.0, 2.0], simple_uh, rain_time=[6.0, 7.0])
        assert result.time == pytest.approx([6.0, 7.0, 8.0, 9.0])

    def test_missing_baseflow_is_zero(self, simple_uh):
        result = flood_hydrograph("obs", [1.0], simple_uh, baseflow=None)
        assert result.flow == pytest.approx(simple_uh.flow)

    def test_rain_time_length_mismatch(self, simple_uh):
        with pytest.raises(ValidationError):
            flood_hydrograph("obs", [1.0, 2.0], simple_uh, rain_time=[0.0])


class TestSCSFlood:
    """Tests para la rama SCS-CN."""

    def test_incremental_runoff_cn_100(self):
        """CN = 100: S = 0, toda la lluvia escurre."""
        runoff = incremental_scs_runoff(np.array([1.0, 2.0, 0.5]), 100, "si", 3, 1)
        assert runoff == pytest.approx([1.0, 2.0, 0.5])

    def test_initial_abstraction(self):
        """Sin escorrentía mientras P ≤ Ia = 0.2 S."""
        # CN = 50 → S = 10 in, Ia = 2 in
        runoff = incremental_scs_runoff(np.array([1.0, 0.5, 3.0]), 50, "si", 3, 1)
        assert runoff[:2] == pytest.approx([0.0, 0.0])
        # P = 4.5 → Q = 2.5² / 12.5 = 0.5
        assert runoff[2] == pytest.approx(0.5)

    def test_storm_duration_limits_pulses(self):
        runoff = incremental_scs_runoff(np.array([1.0, 2.0, 3.0]), 100, "m", 2, 1)
        assert runoff == pytest.approx([1.0, 2.0])

    def test_reversed_output(self, simple_uh):
        result = flood_hydrograph(
            "scs", [1.0, 2.0], simple_uh,
            units="si", cn=100, storm_duration=2, timestep=1,
        )
        assert result.flow == pytest.approx([1.0, 2.5, 1.0, 0.0])
        assert result.time == pytest.approx([1.0, 2.0, 3.0, 4.0])
        assert result.runoff == pytest.approx([1.0, 2.0])

    def test_reverse_disabled(self, simple_uh):
        result = flood_hydrograph(
            "scs", [1.0, 2.0], simple_uh,
            units="si", cn=100, storm_duration=2, timestep=1,
            baseflow=1.0, reverse=False,
        )
        assert result.flow == pytest.approx([1.0, 2.0, 3.5, 2.0])

    def test_invalid_units(self, simple_uh):
        with pytest.raises(ValidationError):
            flood_hydrograph(
                "scs", [1.0], simple_uh,
                units="km", cn=80, storm_duration=1, timestep=1,
            )

    def test_missing_cn(self, simple_uh):
        with pytest.raises(ValidationError):
            flood_hydrograph("scs", [1.0], simple_uh, units="si", storm_duration=1, timestep=1)

    def test_unknown_type(self, simple_uh):
        with pytest.raises(ValidationError):
            flood_hydrograph("rational", [1.0], simple_uh)

    def test_run_from_config(self, simple_uh):
        config = FloodHydrographConfig(
            type="scs", units="si", cn=100, storm_duration=2, timestep=1, reverse=False,
        )
        result = run_flood_hydrograph(config, [1.0, 2.0], simple_uh)
        assert result.flow == pytest.approx([0.0, 1.0, 2.5, 1.0])
