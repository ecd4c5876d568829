"""
Paletas de colores y consola Rich del motor numérico.

Cada paleta define los colores de texto de la consola y los colores de
las series que plotext dibuja en la terminal (curva y marca de pico).
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional

from rich.console import Console
from rich.theme import Theme


class ThemeName(Enum):
    """Temas disponibles."""
    DEFAULT = "default"
    MINIMAL = "minimal"


@dataclass(frozen=True)
class ColorPalette:
    primary: str      # Títulos
    secondary: str    # Secciones y encabezados de tabla
    success: str
    warning: str
    error: str
    info: str
    muted: str
    number: str
    unit: str
    label: str
    border: str
    curve: str = "blue"       # Serie principal (plotext)
    peak: str = "red"         # Marca del máximo (plotext)


PALETTES: dict[ThemeName, ColorPalette] = {
    ThemeName.DEFAULT: ColorPalette(
        primary="#5f87af",
        secondary="#87afaf",
        success="#87af87",
        warning="#d7af5f",
        error="#d75f5f",
        info="#5f87af",
        muted="#808080",
        number="#d7af5f",
        unit="#87af87",
        label="#afafaf",
        border="#5f5f5f",
    ),
    # Grises con un único acento, para terminales de bajo contraste
    ThemeName.MINIMAL: ColorPalette(
        primary="#ffffff",
        secondary="#b0b0b0",
        success="#87d787",
        warning="#ffd787",
        error="#ff8787",
        info="#5fafff",
        muted="#606060",
        number="#ffffff",
        unit="#909090",
        label="#909090",
        border="#404040",
        curve="white",
        peak="orange",
    ),
}


class ConsoleState:
    """Tema activo y consola asociada (una por proceso)."""

    palette: ColorPalette = PALETTES[ThemeName.DEFAULT]
    console: Optional[Console] = None

    @classmethod
    def activate(cls, theme: ThemeName) -> None:
        cls.palette = PALETTES[theme]
        cls.console = None


def set_theme(theme: ThemeName) -> None:
    """Cambia el tema; la consola se recrea en el próximo uso."""
    ConsoleState.activate(theme)


def get_palette() -> ColorPalette:
    return ConsoleState.palette


def get_console() -> Console:
    """Consola Rich con los estilos de texto de la paleta activa."""
    if ConsoleState.console is None:
        styles = {
            name: color
            for name, color in asdict(ConsoleState.palette).items()
            if name not in ("curve", "peak")
        }
        ConsoleState.console = Console(theme=Theme(styles))
    return ConsoleState.console
