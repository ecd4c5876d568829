"""
Tests para la CLI de hidronum.
"""

import csv

import pytest
import typer
from typer.testing import CliRunner

from hidronum.cli import app
from hidronum.cli.validators import parse_series, run_checked, validate_nodes
from hidronum.exceptions import NumericalWarning, SingularMatrixError


runner = CliRunner()


class TestValidators:
    """Tests para conversores y validadores de la CLI."""

    def test_parse_series(self):
        assert parse_series("1, 2.5,3") == [1.0, 2.5, 3.0]

    def test_parse_series_invalid(self, capsys):
        with pytest.raises(typer.Exit):
            parse_series("1,dos,3", "lluvia")
        assert "lluvia" in capsys.readouterr().out

    def test_parse_series_empty(self):
        with pytest.raises(typer.Exit):
            parse_series(" , ")

    def test_validate_nodes(self):
        assert validate_nodes(11) is True
        assert validate_nodes(2, exit_on_error=False) is False

    def test_run_checked_error(self):
        def fail():
            raise SingularMatrixError(row=1, pivot=0.0)

        with pytest.raises(typer.Exit):
            run_checked(fail)

    def test_run_checked_warning(self, capsys):
        import warnings

        def warn():
            warnings.warn("paso grande", NumericalWarning)
            return 42

        assert run_checked(warn) == 42
        assert "paso grande" in capsys.readouterr().out


class TestGroundwaterCommands:
    """Tests para gw steady / transient."""

    def test_steady(self):
        result = runner.invoke(app, ["gw", "steady", "-l", "100", "--k", "10", "--left", "10", "--right", "5"])
        assert result.exit_code == 0
        assert "ESTACIONARIO" in result.output

    def test_steady_csv(self, tmp_path):
        path = tmp_path / "perfil.csv"
        result = runner.invoke(app, [
            "gw", "steady", "-l", "100", "--k", "10", "--left", "10", "--right", "5",
            "-n", "5", "-o", str(path),
        ])
        assert result.exit_code == 0

        with open(path, newline="") as f:
            rows = list(csv.reader(f))
        assert rows[0] == ["x_m", "h_m", "q_m2d"]
        assert len(rows) == 6
        assert float(rows[-1][1]) == pytest.approx(5.0)

    def test_steady_flux_flux_singular(self):
        result = runner.invoke(app, [
            "gw", "steady", "-l", "100", "--k", "10", "--left", "1", "--right", "1",
            "--left-type", "flux", "--right-type", "flux",
        ])
        assert result.exit_code == 1

    def test_steady_too_few_nodes(self):
        result = runner.invoke(app, ["gw", "steady", "-l", "100", "--k", "10", "--left", "1", "--right", "0", "-n", "2"])
        assert result.exit_code == 1

    def test_transient(self):
        result = runner.invoke(app, [
            "gw", "transient", "-l", "100", "--k", "10", "--dt", "1", "-t", "20",
            "--h0", "0", "--left", "10", "--right", "0", "-s", "0.1",
        ])
        assert result.exit_code == 0
        assert "Crank-Nicolson" in result.output

    def test_transient_missing_storage(self):
        result = runner.invoke(app, [
            "gw", "transient", "-l", "100", "--k", "10", "--dt", "1", "-t", "20",
            "--h0", "0", "--left", "10", "--right", "0",
        ])
        assert result.exit_code == 1


class TestHydrographCommands:
    """Tests para uh y flood."""

    def test_synthetic_scs(self):
        result = runner.invoke(app, ["uh", "synthetic", "-l", "4000", "-s", "10", "--cn", "82"])
        assert result.exit_code == 0
        assert "Tiempo de concentración" in result.output

    def test_synthetic_missing_cn(self):
        result = runner.invoke(app, ["uh", "synthetic", "-l", "4000", "-s", "10"])
        assert result.exit_code == 1

    def test_dimensionless(self):
        result = runner.invoke(app, ["uh", "dimensionless", "--prf", "484"])
        assert result.exit_code == 0
        assert "ADIMENSIONAL" in result.output

    def test_dimensionless_unknown_prf(self):
        result = runner.invoke(app, ["uh", "dimensionless", "--prf", "300"])
        assert result.exit_code == 1
        assert "[x]" in result.output

    def test_weibull(self):
        result = runner.invoke(app, ["uh", "dimensionless", "-d", "weibull", "--alpha", "2.5", "--beta", "1.2"])
        assert result.exit_code == 0

    def test_unit(self):
        result = runner.invoke(app, ["uh", "unit", "-a", "2.5", "--tc", "1.8"])
        assert result.exit_code == 0
        assert "cfs/in" in result.output

    def test_observed(self, tmp_path):
        path = tmp_path / "hu.csv"
        result = runner.invoke(app, [
            "uh", "observed", "-t", "0,1,2,3", "-q", "10,30,20,10",
            "-a", "1296000", "-b", "10", "-o", str(path),
        ])
        assert result.exit_code == 0
        assert "Evento observado" in result.output
        with open(path, newline="") as f:
            rows = list(csv.reader(f))
        assert [float(r[1]) for r in rows[1:]] == pytest.approx([0.0, 10.0, 20.0, 0.0])

    def test_observed_zero_volume(self):
        result = runner.invoke(app, [
            "uh", "observed", "-t", "0,1,2", "-q", "5,5,5", "-a", "1000", "-b", "5",
        ])
        assert result.exit_code == 1

    def test_flood_obs(self, tmp_path):
        path = tmp_path / "crecida.csv"
        result = runner.invoke(app, [
            "flood", "obs", "-r", "1,2", "--uh", "0,1,0.5", "-b", "5", "-o", str(path),
        ])
        assert result.exit_code == 0
        with open(path, newline="") as f:
            rows = list(csv.reader(f))
        assert [float(r[1]) for r in rows[1:]] == pytest.approx([5.0, 6.0, 7.5, 6.0])

    def test_flood_obs_invalid_rain(self):
        result = runner.invoke(app, ["flood", "obs", "-r", "1,x", "--uh", "0,1,0.5"])
        assert result.exit_code == 1

    def test_flood_scs(self):
        result = runner.invoke(app, [
            "flood", "scs", "-r", "0.2,0.8,1.5,0.6", "--uh", "0,120,300,180,60,0",
            "--cn", "80", "--storm", "4",
        ])
        assert result.exit_code == 0
        assert "SCS-CN" in result.output


class TestRoutingCommands:
    """Tests para route muskingum / lag."""

    def test_muskingum(self):
        result = runner.invoke(app, ["route", "muskingum", "-i", "10,50,120,80,40,20,10", "--k", "2", "--x", "0.2"])
        assert result.exit_code == 0
        assert "MUSKINGUM" in result.output

    def test_muskingum_invalid_x(self):
        result = runner.invoke(app, ["route", "muskingum", "-i", "10,50", "--k", "2", "--x", "0.8"])
        assert result.exit_code == 1

    def test_lag(self):
        result = runner.invoke(app, ["route", "lag", "-i", "2,4,6", "-c", "0.5,0.5", "--lag", "1"])
        assert result.exit_code == 0
        assert "LAG-AND-ROUTE" in result.output

    def test_lag_negative_coefficient(self):
        result = runner.invoke(app, ["route", "lag", "-i", "2,4,6", "-c", "0.5,-0.5"])
        assert result.exit_code == 1


class TestRainCommands:
    """Tests para rain mean / thiessen."""

    def test_mean(self):
        result = runner.invoke(app, ["rain", "mean", "-s", "1,2,3", "-s", "3,4,5"])
        assert result.exit_code == 0
        assert "ARITMÉTICA" in result.output

    def test_mean_unequal(self):
        result = runner.invoke(app, ["rain", "mean", "-s", "1,2,3", "-s", "3"])
        assert result.exit_code == 1

    def test_thiessen(self, tmp_path):
        path = tmp_path / "thiessen.csv"
        result = runner.invoke(app, [
            "rain", "thiessen", "-s", "10", "-s", "20", "-s", "30", "-a", "1,2,3", "-o", str(path),
        ])
        assert result.exit_code == 0
        with open(path, newline="") as f:
            rows = list(csv.reader(f))
        assert float(rows[1][1]) == pytest.approx(140.0 / 6.0, rel=1e-5)

    def test_thiessen_area_mismatch(self):
        result = runner.invoke(app, ["rain", "thiessen", "-s", "10", "-s", "20", "-a", "1"])
        assert result.exit_code == 1


class TestTheme:
    def test_minimal_theme(self):
        result = runner.invoke(app, ["--theme", "minimal", "rain", "mean", "-s", "1,2"])
        assert result.exit_code == 0
