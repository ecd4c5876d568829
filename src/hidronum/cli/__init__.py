"""
CLI de hidronum - Motor numérico hidrológico.

Sub-aplicaciones:
- gw: Flujo subterráneo 1D (steady, transient)
- uh: Hidrogramas unitarios (synthetic, dimensionless, unit, observed)
- flood: Hidrogramas de crecida (obs, scs)
- route: Tránsito en cauces (muskingum, lag)
- rain: Precipitación media areal (mean, thiessen)
"""

from typing import Annotated

import typer

from hidronum.cli.theme import ThemeName, set_theme

app = typer.Typer(
    name="hidronum",
    help="Motor numérico hidrológico: aguas subterráneas, hidrogramas y tránsito.",
    no_args_is_help=True,
)


def _register_subapps():
    """Registra las sub-aplicaciones temáticas."""
    from hidronum.cli.groundwater import gw_app
    from hidronum.cli.hydrograph import flood_app, uh_app
    from hidronum.cli.precipitation import rain_app
    from hidronum.cli.routing import route_app

    app.add_typer(gw_app, name="gw")
    app.add_typer(uh_app, name="uh")
    app.add_typer(flood_app, name="flood")
    app.add_typer(route_app, name="route")
    app.add_typer(rain_app, name="rain")


@app.callback()
def main(
    theme: Annotated[ThemeName, typer.Option("--theme", help="Tema de colores")] = ThemeName.DEFAULT,
):
    """
    hidronum - Cálculos hidrológicos numéricos.

    Flujo subterráneo por diferencias finitas, hidrogramas unitarios,
    convolución, tránsito en cauces y precipitación areal.
    """
    set_theme(theme)


_register_subapps()


__all__ = [
    "app",
]
