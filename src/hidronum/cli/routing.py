"""
Comandos CLI para tránsito en cauces.
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
    validate_weighting_factor,
)
from hidronum.config import LagAndRouteParams, MuskingumCungeParams
from hidronum.core.routing import RoutingResult, lag_and_route, muskingum_cunge

route_app = typer.Typer(help="Tránsito de hidrogramas en cauces")


def _show_routing(
    inflow: list[float],
    result: RoutingResult,
    dt: float,
    plot: bool,
    output: Optional[str],
) -> None:
    time = np.arange(len(inflow)) * dt
    print_field("Pico de entrada", f"{max(inflow):.3f}")
    print_field("Pico de salida", f"{result.peak_outflow:.3f}")
    print_section("Hidrogramas")
    print_series_table(["t", "I", "O"], time, inflow, result.outflow, title="Tránsito")
    if plot:
        from hidronum.cli.preview import plot_hydrograph_terminal
        plot_hydrograph_terminal(time, result.outflow, title="Caudal de salida")
    if output:
        export_csv(output, ["t", "inflow", "outflow"], time, inflow, result.outflow)


@route_app.command("muskingum")
def route_muskingum(
    inflow: Annotated[str, typer.Option("--inflow", "-i", help="Hidrograma de entrada, separado por coma")],
    k: Annotated[float, typer.Option("--k", help="Tiempo de tránsito K")],
    x: Annotated[float, typer.Option("--x", help="Factor de ponderación X (0-0.5)")] = 0.2,
    dt: Annotated[float, typer.Option("--dt", help="Paso de tiempo")] = 1.0,
    storage: Annotated[float, typer.Option("--storage", "-s", help="Almacenamiento inicial")] = 0.0,
    plot: PlotOption = False,
    output: OutputOption = None,
):
    """
    Tránsito Muskingum-Cunge.

    Ejemplo:
        hidronum route muskingum -i 10,50,120,80,40,20,10 --k 2 --x 0.2
    """
    validate_positive(k, "K")
    validate_weighting_factor(x)
    validate_positive(dt, "Paso de tiempo")
    series = parse_series(inflow, "caudal de entrada")

    params = run_checked(MuskingumCungeParams, k=k, x=x, dt=dt, initial_storage=storage)
    result = run_checked(muskingum_cunge, series, params)

    print_header("TRÁNSITO MUSKINGUM-CUNGE", f"K = {k:g}, X = {x:g}, Δt = {dt:g}")
    _show_routing(series, result, dt, plot, output)


@route_app.command("lag")
def route_lag(
    inflow: Annotated[str, typer.Option("--inflow", "-i", help="Hidrograma de entrada, separado por coma")],
    coefficients: Annotated[str, typer.Option("--coef", "-c", help="Coeficientes de tránsito, separados por coma")],
    lag: Annotated[float, typer.Option("--lag", help="Tiempo de retardo")] = 0.0,
    dt: Annotated[float, typer.Option("--dt", help="Paso de tiempo")] = 1.0,
    plot: PlotOption = False,
    output: OutputOption = None,
):
    """
    Tránsito Lag-and-Route.

    Ejemplo:
        hidronum route lag -i 10,50,120,80,40 -c 0.5,0.3,0.2 --lag 1
    """
    series = parse_series(inflow, "caudal de entrada")
    coefs = parse_series(coefficients, "coeficientes")

    params = run_checked(LagAndRouteParams, lag_time=lag, coefficients=tuple(coefs))
    result = run_checked(lag_and_route, series, params)

    print_header("TRÁNSITO LAG-AND-ROUTE", f"Retardo = {lag:g}, {len(coefs)} coeficientes")
    _show_routing(series, result, dt, plot, output)
