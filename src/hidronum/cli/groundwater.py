"""
Comandos CLI para flujo subterráneo 1D.
"""

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
    validate_nodes,
)
from hidronum.config import (
    AquiferType,
    BoundaryCondition,
    BoundaryType,
    SteadyGroundwaterConfig,
    TransientGroundwaterConfig,
)
from hidronum.core.groundwater import darcy_discharge, run_steady, solve_transient_groundwater

gw_app = typer.Typer(help="Flujo subterráneo 1D (estacionario y transitorio)")


def _boundary(value: float, kind: BoundaryType) -> BoundaryCondition:
    return BoundaryCondition(value=value, type=kind)


def _show_profile(x, head, discharge, plot: bool, output: Optional[str]) -> None:
    print_series_table(["x (m)", "h (m)", "q (m²/d)"], x, head, discharge, title="Perfil")
    if plot:
        from hidronum.cli.preview import plot_profile_terminal
        plot_profile_terminal(x, head)
    if output:
        export_csv(output, ["x_m", "h_m", "q_m2d"], x, head, discharge)


@gw_app.command("steady")
def gw_steady(
    length: Annotated[float, typer.Option("--length", "-l", help="Longitud del dominio (m)")],
    k: Annotated[float, typer.Option("--k", help="Conductividad hidráulica (m/d)")],
    left: Annotated[float, typer.Option("--left", help="Valor del borde x=0")],
    right: Annotated[float, typer.Option("--right", help="Valor del borde x=L")],
    nodes: Annotated[int, typer.Option("--nodes", "-n", help="Número de nodos")] = 11,
    left_type: Annotated[BoundaryType, typer.Option("--left-type", help="Borde x=0: head o flux")] = BoundaryType.HEAD,
    right_type: Annotated[BoundaryType, typer.Option("--right-type", help="Borde x=L: head o flux")] = BoundaryType.HEAD,
    w0: Annotated[float, typer.Option("--w0", help="Extracción/recarga en x=0")] = 0.0,
    w1: Annotated[float, typer.Option("--w1", help="Gradiente de extracción/recarga")] = 0.0,
    plot: PlotOption = False,
    output: OutputOption = None,
):
    """
    Resuelve el flujo estacionario -k h'' = w0 + w1 x.

    Ejemplo:
        hidronum gw steady -l 100 --k 10 --left 10 --right 5 -n 21
        hidronum gw steady -l 100 --k 10 --left 10 --right 0 --right-type flux
    """
    validate_nodes(nodes)
    config = run_checked(
        SteadyGroundwaterConfig,
        length=length, k=k, nodes=nodes,
        left=_boundary(left, left_type), right=_boundary(right, right_type),
        w0=w0, w1=w1,
    )
    result = run_checked(run_steady, config)

    print_header("FLUJO SUBTERRÁNEO ESTACIONARIO")
    print_section("Datos de Entrada")
    print_field("Longitud", f"{length:g}", "m")
    print_field("Conductividad k", f"{k:g}", "m/d")
    print_field("Nodos", nodes)
    print_field("Borde izquierdo", f"{left_type.value} = {left:g}")
    print_field("Borde derecho", f"{right_type.value} = {right:g}")

    print_section("Resultados")
    _show_profile(result.x, result.head, result.discharge, plot, output)


@gw_app.command("transient")
def gw_transient(
    length: Annotated[float, typer.Option("--length", "-l", help="Longitud del dominio (m)")],
    k: Annotated[float, typer.Option("--k", help="Conductividad hidráulica (m/d)")],
    dt: Annotated[float, typer.Option("--dt", help="Paso de tiempo (d)")],
    total_time: Annotated[float, typer.Option("--time", "-t", help="Tiempo total (d)")],
    initial_head: Annotated[str, typer.Option("--h0", help="Carga inicial: valor o lista por nodo")],
    left: Annotated[float, typer.Option("--left", help="Valor del borde x=0")],
    right: Annotated[float, typer.Option("--right", help="Valor del borde x=L")],
    nodes: Annotated[int, typer.Option("--nodes", "-n", help="Número de nodos")] = 11,
    thickness: Annotated[float, typer.Option("--thickness", "-b", help="Espesor saturado (m)")] = 1.0,
    left_type: Annotated[BoundaryType, typer.Option("--left-type", help="Borde x=0: head o flux")] = BoundaryType.HEAD,
    right_type: Annotated[BoundaryType, typer.Option("--right-type", help="Borde x=L: head o flux")] = BoundaryType.HEAD,
    recharge: Annotated[float, typer.Option("--recharge", "-w", help="Recarga (m/d)")] = 0.0,
    aquifer: Annotated[AquiferType, typer.Option("--aquifer", help="confined o unconfined")] = AquiferType.CONFINED,
    storativity: Annotated[Optional[float], typer.Option("--storativity", "-s", help="Coef. de almacenamiento")] = None,
    specific_yield: Annotated[Optional[float], typer.Option("--sy", help="Rendimiento específico")] = None,
    plot: PlotOption = False,
    output: OutputOption = None,
):
    """
    Simula el flujo transitorio con Crank-Nicolson.

    Ejemplo:
        hidronum gw transient -l 100 --k 10 --dt 1 -t 500 --h0 0 --left 10 --right 0 -s 0.1
    """
    validate_nodes(nodes)
    heads = parse_series(initial_head, "carga inicial")
    config = run_checked(
        TransientGroundwaterConfig,
        length=length, k=k, thickness=thickness, nodes=nodes,
        dt=dt, total_time=total_time,
        initial_head=heads[0] if len(heads) == 1 else heads,
        left=_boundary(left, left_type), right=_boundary(right, right_type),
        recharge=recharge, aquifer_type=aquifer,
        storativity=storativity, specific_yield=specific_yield,
    )
    result = run_checked(solve_transient_groundwater, config)

    print_header("FLUJO SUBTERRÁNEO TRANSITORIO", "Crank-Nicolson")
    print_section("Datos de Entrada")
    print_field("Transmisividad T", f"{config.transmissivity:g}", "m²/d")
    print_field("Almacenamiento", f"{config.storage:g}")
    print_field("Paso de tiempo", f"{dt:g}", "d")
    print_field("Tiempo simulado", f"{result.time[-1]:g}", "d")

    print_section("Resultados")
    print_field("Flujo en x=0", f"{result.left_flux[-1]:.4g}", "m²/d")
    print_field("Flujo en x=L", f"{result.right_flux[-1]:.4g}", "m²/d")
    discharge = darcy_discharge(result.head, config.k, result.x[1] - result.x[0])
    _show_profile(result.x, result.head, discharge, plot, output)