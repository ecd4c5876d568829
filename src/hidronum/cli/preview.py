"""
Gráficos de series en terminal con plotext.
"""

from typing import Sequence

import plotext as plt

from hidronum.cli.theme import get_palette


def plot_series_terminal(
    x: Sequence[float],
    y: Sequence[float],
    title: str = "Serie",
    xlabel: str = "Tiempo",
    ylabel: str = "Valor",
    width: int = 60,
    height: int = 15,
    mark_peak: bool = True,
) -> None:
    """
    Grafica una serie en la terminal.

    Args:
        x: Abscisas (tiempo o distancia)
        y: Ordenadas
        title: Título del gráfico
        xlabel: Etiqueta del eje x
        ylabel: Etiqueta del eje y
        width: Ancho en caracteres
        height: Alto en caracteres
        mark_peak: Marcar el máximo con una cruz
    """
    x = [float(v) for v in x]
    y = [float(v) for v in y]

    palette = get_palette()
    plt.clear_figure()
    plt.plot_size(width, height)
    plt.plot(x, y, marker="braille", color=palette.curve)

    plt.title(title)
    plt.xlabel(xlabel)
    plt.ylabel(ylabel)

    if mark_peak and y:
        peak_idx = y.index(max(y))
        plt.scatter([x[peak_idx]], [y[peak_idx]], marker="x", color=palette.peak)

    plt.theme("clear")
    plt.show()


def plot_profile_terminal(
    x: Sequence[float],
    head: Sequence[float],
    title: str = "Perfil de carga",
    width: int = 60,
    height: int = 15,
) -> None:
    """Grafica un perfil de carga hidráulica h(x)."""
    plot_series_terminal(
        x, head, title=title, xlabel="x (m)", ylabel="h (m)",
        width=width, height=height, mark_peak=False,
    )


def plot_hydrograph_terminal(
    time: Sequence[float],
    flow: Sequence[float],
    title: str = "Hidrograma",
    width: int = 60,
    height: int = 15,
) -> None:
    """Grafica un hidrograma con el pico marcado."""
    plot_series_terminal(
        time, flow, title=title, xlabel="Tiempo (h)", ylabel="Q",
        width=width, height=height,
    )
