"""
Comandos CLI para precipitación media areal.
"""

import numpy as np

from hidronum.cli.common import (
    Annotated,
    OutputOption,
    PlotOption,
    export_csv,
    parse_series,
    parse_stations,
    print_field,
    print_header,
    print_section,
    print_series_table,
    run_checked,
    typer,
)
from hidronum.core.precipitation import arithmetic_mean, thiessen

rain_app = typer.Typer(help="Precipitación media areal")

StationOption = Annotated[
    list[str],
    typer.Option("--station", "-s", help="Serie de una estación, separada por coma (repetible)"),
]


def _show_mean(values, plot: bool, output) -> None:
    steps = np.arange(len(values))
    print_field("Precipitación total", f"{float(np.sum(values)):.3f}")
    print_section("Serie media")
    print_series_table(["Paso", "P media"], steps, values, decimals=3)
    if plot:
        from hidronum.cli.preview import plot_series_terminal
        plot_series_terminal(steps, values, title="Precipitación media", xlabel="Paso", ylabel="P")
    if output:
        export_csv(output, ["step", "rainfall"], steps, values)


@rain_app.command("mean")
def rain_mean(
    station: StationOption,
    plot: PlotOption = False,
    output: OutputOption = None,
):
    """
    Media aritmética entre estaciones.

    Ejemplo:
        hidronum rain mean -s 1,2,3 -s 2,3,4 -s 3,4,5
    """
    data = parse_stations(station)
    values = run_checked(arithmetic_mean, data)

    print_header("PRECIPITACIÓN MEDIA ARITMÉTICA", f"{len(data)} estaciones")
    _show_mean(values, plot, output)


@rain_app.command("thiessen")
def rain_thiessen(
    station: StationOption,
    areas: Annotated[str, typer.Option("--areas", "-a", help="Áreas de influencia, separadas por coma")],
    plot: PlotOption = False,
    output: OutputOption = None,
):
    """
    Media ponderada por polígonos de Thiessen.

    Ejemplo:
        hidronum rain thiessen -s 1,1,1 -s 2,2,2 -s 3,3,3 -a 10,20,30
    """
    data = parse_stations(station)
    weights = parse_series(areas, "áreas")
    values = run_checked(thiessen, data, weights)

    print_header("PRECIPITACIÓN MEDIA - THIESSEN", f"Área total = {sum(weights):g}")
    _show_mean(values, plot, output)
