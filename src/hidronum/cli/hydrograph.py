"""
Comandos CLI para hidrogramas unitarios y de crecida.
"""

import numpy as np

from hidronum.cli.common import (
    Annotated,
    Optional,
    OutputOption,
    PlotOption,
    export_csv,
    parse_series,
    print_field,
    print_header,
    print_section,
    print_series_table,
    run_checked,
    typer,
    validate_positive,
)
from hidronum.config import (
    DimensionlessDistribution,
    DimensionlessHydrographConfig,
    FloodHydrographConfig,
    FloodHydrographType,
    SyntheticMethod,
    SyntheticTimesConfig,
    UnitHydrographConfig,
    UnitHydrographType,
    UnitSystem,
)
from hidronum.core.hydrograph import (
    UnitHydrograph,
    run_dimensionless,
    run_flood_hydrograph,
    run_synthetic_times,
    run_unit_hydrograph,
)

uh_app = typer.Typer(help="Hidrogramas unitarios (tiempos sintéticos, adimensionales)")
flood_app = typer.Typer(help="Hidrogramas de crecida por convolución")


def _show_hydrograph(
    time, flow, headers: list[str], title: str, plot: bool, output: Optional[str]
) -> None:
    print_series_table(headers, time, flow, title=title)
    if plot:
        from hidronum.cli.preview import plot_hydrograph_terminal
        plot_hydrograph_terminal(time, flow, title=title)
    if output:
        export_csv(output, [h.split(" ")[0] for h in headers], time, flow)


def _uh_from_ordinates(ordinates: list[float], dt: float) -> UnitHydrograph:
    flow = np.asarray(ordinates, dtype=float)
    return UnitHydrograph(time=np.arange(len(flow)) * dt, flow=flow)


# ============================================================================
# Hidrograma unitario
# ============================================================================

@uh_app.command("synthetic")
def uh_synthetic(
    length: Annotated[float, typer.Option("--length", "-l", help="Longitud del cauce (ft o m)")],
    slope: Annotated[float, typer.Option("--slope", "-s", help="Pendiente media (%)")],
    method: Annotated[SyntheticMethod, typer.Option("--method", "-m", help="scs, kerby_kirpich o kerby")] = SyntheticMethod.SCS,
    units: Annotated[UnitSystem, typer.Option("--units", "-u", help="si (pies) o m (metros)")] = UnitSystem.SI,
    cn: Annotated[Optional[float], typer.Option("--cn", help="Número de curva (scs)")] = None,
    roughness: Annotated[Optional[float], typer.Option("--roughness", "-N", help="Rugosidad de Kerby (kerby_kirpich)")] = None,
    manning: Annotated[Optional[float], typer.Option("--manning", "-n", help="Coef. de Manning (kerby)")] = None,
):
    """
    Calcula Tc, Tp y tiempo de retardo.

    Ejemplo:
        hidronum uh synthetic -l 4000 -s 10 --cn 82
        hidronum uh synthetic -l 1200 -s 2 -m kerby_kirpich -u m -N 0.4
    """
    config = run_checked(
        SyntheticTimesConfig,
        method=method, units=units, length=length, slope=slope,
        cn=cn, roughness=roughness, manning=manning,
    )
    times = run_checked(run_synthetic_times, config)

    print_header("TIEMPOS SINTÉTICOS", f"Método {method.value}")
    print_field("Tiempo de concentración", f"{times.time_concentration:.3f}", "hr")
    print_field("Tiempo al pico", f"{times.time_to_peak:.3f}", "hr")
    print_field("Tiempo de retardo", f"{times.lag_time:.3f}", "hr")
    if times.max_retention is not None:
        print_field("Retención potencial S", f"{times.max_retention:.3f}", "in" if units == UnitSystem.SI else "mm")


@uh_app.command("dimensionless")
def uh_dimensionless(
    distribution: Annotated[DimensionlessDistribution, typer.Option("--dist", "-d", help="gamma, lp3 o weibull")] = DimensionlessDistribution.GAMMA,
    timestep: Annotated[float, typer.Option("--step", help="Paso en t/tp")] = 0.1,
    duration: Annotated[float, typer.Option("--duration", help="Duración en t/tp")] = 5.0,
    prf: Annotated[Optional[int], typer.Option("--prf", help="Peak Rate Factor (gamma)")] = 484,
    shape: Annotated[Optional[float], typer.Option("--shape", help="Forma λ (lp3)")] = None,
    peak_time: Annotated[Optional[float], typer.Option("--peak-time", help="Tiempo al pico en t/tp (lp3)")] = None,
    alpha: Annotated[Optional[float], typer.Option("--alpha", help="Forma α > 1 (weibull)")] = None,
    beta: Annotated[Optional[float], typer.Option("--beta", help="Escala β (weibull)")] = None,
    location: Annotated[float, typer.Option("--location", help="Ubicación t0 (weibull)")] = 0.0,
    plot: PlotOption = False,
    output: OutputOption = None,
):
    """
    Genera un hidrograma adimensional (t/tp, q/qp).

    Ejemplo:
        hidronum uh dimensionless --prf 484
        hidronum uh dimensionless -d weibull --alpha 2.5 --beta 1.2 --plot
    """
    config = run_checked(
        DimensionlessHydrographConfig,
        distribution=distribution, timestep=timestep, duration=duration,
        prf=prf, shape=shape, peak_time=peak_time,
        alpha=alpha, beta=beta, location=location,
    )
    uh = run_checked(run_dimensionless, config)

    print_header("HIDROGRAMA ADIMENSIONAL", f"Distribución {distribution.value}")
    print_field("Pico q/qp", f"{uh.peak_flow:.3f}")
    print_field("t/tp del pico", f"{uh.time_to_peak:.2f}")
    print_section("Ordenadas")
    _show_hydrograph(uh.time, uh.flow, ["t/tp", "q/qp"], "Adimensional", plot, output)


@uh_app.command("unit")
def uh_unit(
    area: Annotated[float, typer.Option("--area", "-a", help="Área (mi² o km²)")],
    tc: Annotated[float, typer.Option("--tc", help="Tiempo de concentración (hr)")],
    prf: Annotated[int, typer.Option("--prf", help="Peak Rate Factor")] = 484,
    units: Annotated[UnitSystem, typer.Option("--units", "-u", help="si o m")] = UnitSystem.SI,
    timestep: Annotated[float, typer.Option("--step", help="Paso en t/tp")] = 0.1,
    duration: Annotated[float, typer.Option("--duration", help="Duración en t/tp")] = 5.0,
    plot: PlotOption = False,
    output: OutputOption = None,
):
    """
    Escala el hidrograma Gamma adimensional con el área y Tc.

    Ejemplo:
        hidronum uh unit -a 2.5 --tc 1.8 --prf 484
    """
    validate_positive(area, "Área")
    validate_positive(tc, "Tc")
    dimensionless = run_checked(
        run_dimensionless,
        run_checked(DimensionlessHydrographConfig, timestep=timestep, duration=duration, prf=prf),
    )
    config = run_checked(
        UnitHydrographConfig,
        type=UnitHydrographType.DIMENSIONLESS, units=units,
        drainage_area=area, peak=prf, tconcentration=tc,
    )
    uh = run_checked(run_unit_hydrograph, config, dimensionless)

    unit = "cfs/in" if units == UnitSystem.SI else "m³/s/cm"
    print_header("HIDROGRAMA UNITARIO", f"PRF {prf}")
    print_field("Caudal pico", f"{uh.peak_flow:.3f}", unit)
    print_field("Tiempo al pico", f"{uh.time_to_peak:.3f}", "hr")
    print_section("Ordenadas")
    _show_hydrograph(uh.time, uh.flow, ["t (hr)", f"q ({unit})"], "Hidrograma unitario", plot, output)


@uh_app.command("observed")
def uh_observed(
    time: Annotated[str, typer.Option("--time", "-t", help="Tiempos del evento (hr), separados por coma")],
    flow: Annotated[str, typer.Option("--flow", "-q", help="Caudales observados, separados por coma")],
    area: Annotated[float, typer.Option("--area", "-a", help="Área (ft² o m²)")],
    units: Annotated[UnitSystem, typer.Option("--units", "-u", help="si o m")] = UnitSystem.SI,
    baseflow: Annotated[float, typer.Option("--baseflow", "-b", help="Caudal base")] = 0.0,
    keep_order: Annotated[bool, typer.Option("--keep-order", help="No invertir el orden temporal")] = False,
    plot: PlotOption = False,
    output: OutputOption = None,
):
    """
    Deriva un hidrograma unitario de un evento observado.

    Ejemplo:
        hidronum uh observed -t 0,1,2,3 -q 10,30,20,10 -a 1296000 -b 10
    """
    series = (parse_series(time, "tiempo"), parse_series(flow, "caudal"))
    config = run_checked(
        UnitHydrographConfig,
        type=UnitHydrographType.OBSERVED, units=units, drainage_area=area,
        baseflow=baseflow, reverse=not keep_order,
    )
    result = run_checked(run_unit_hydrograph, config, series)
    uh = result.unit_hydrograph

    depth = "in" if units == UnitSystem.SI else "cm"
    print_header("HIDROGRAMA UNITARIO", "Evento observado")
    print_field("Lámina de escorrentía directa", f"{result.total_volume:.4g}", depth)
    print_field("Caudal pico", f"{uh.peak_flow:.4g}", f"por {depth}")
    print_section("Ordenadas")
    _show_hydrograph(uh.time, uh.flow, ["t (hr)", "q"], "Hidrograma unitario observado", plot, output)


# ============================================================================
# Hidrograma de crecida
# ============================================================================

@flood_app.command("obs")
def flood_obs(
    rain: Annotated[str, typer.Option("--rain", "-r", help="Pulsos de lluvia efectiva, separados por coma")],
    uh: Annotated[str, typer.Option("--uh", help="Ordenadas del hidrograma unitario, separadas por coma")],
    dt: Annotated[float, typer.Option("--dt", help="Paso de tiempo (hr)")] = 1.0,
    baseflow: Annotated[float, typer.Option("--baseflow", "-b", help="Caudal base")] = 0.0,
    plot: PlotOption = False,
    output: OutputOption = None,
):
    """
    Convoluciona pulsos de lluvia con un hidrograma unitario.

    Ejemplo:
        hidronum flood obs -r 0.5,1.2,0.3 --uh 0,40,100,60,20,0
    """
    validate_positive(dt, "Paso de tiempo")
    pulses = parse_series(rain, "lluvia")
    unit = _uh_from_ordinates(parse_series(uh, "hidrograma unitario"), dt)

    config = run_checked(FloodHydrographConfig, type=FloodHydrographType.OBSERVED, baseflow=baseflow)
    result = run_checked(
        run_flood_hydrograph, config, pulses, unit,
        rain_time=np.arange(len(pulses)) * dt,
    )

    print_header("HIDROGRAMA DE CRECIDA", "Pulsos observados")
    print_field("Caudal pico", f"{result.peak_flow:.3f}")
    print_field("Duración", f"{result.time[-1] - result.time[0]:g}", "hr")
    print_section("Hidrograma")
    _show_hydrograph(result.time, result.flow, ["t (hr)", "Q"], "Hidrograma de crecida", plot, output)


@flood_app.command("scs")
def flood_scs(
    rain: Annotated[str, typer.Option("--rain", "-r", help="Lluvia por intervalo, separada por coma")],
    uh: Annotated[str, typer.Option("--uh", help="Ordenadas del hidrograma unitario, separadas por coma")],
    cn: Annotated[float, typer.Option("--cn", help="Número de curva")],
    storm_duration: Annotated[float, typer.Option("--storm", help="Duración de la tormenta (hr)")],
    dt: Annotated[float, typer.Option("--dt", help="Paso de tiempo (hr)")] = 1.0,
    units: Annotated[UnitSystem, typer.Option("--units", "-u", help="si (in) o m (mm)")] = UnitSystem.SI,
    baseflow: Annotated[float, typer.Option("--baseflow", "-b", help="Caudal base")] = 0.0,
    keep_order: Annotated[bool, typer.Option("--keep-order", help="No invertir el orden temporal")] = False,
    plot: PlotOption = False,
    output: OutputOption = None,
):
    """
    Hidrograma de crecida con escorrentía SCS-CN.

    Ejemplo:
        hidronum flood scs -r 0.2,0.8,1.5,0.6 --uh 0,120,300,180,60,0 --cn 80 --storm 4
    """
    pulses = parse_series(rain, "lluvia")
    ordinates = parse_series(uh, "hidrograma unitario")

    config = run_checked(
        FloodHydrographConfig,
        type=FloodHydrographType.SCS, units=units, cn=cn,
        storm_duration=storm_duration, timestep=dt,
        baseflow=baseflow, reverse=not keep_order,
    )
    result = run_checked(run_flood_hydrograph, config, pulses, _uh_from_ordinates(ordinates, dt))

    print_header("HIDROGRAMA DE CRECIDA", f"SCS-CN (CN = {cn:g})")
    print_field("Escorrentía total", f"{float(np.sum(result.runoff)):.3f}", "in" if units == UnitSystem.SI else "mm")
    print_field("Caudal pico", f"{result.peak_flow:.3f}")
    print_section("Hidrograma")
    _show_hydrograph(result.time, result.flow, ["t (hr)", "Q"], "Hidrograma de crecida", plot, output)
