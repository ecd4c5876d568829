"""
Impresión directa a la consola con el tema activo.
"""

from hidronum.cli.theme.palette import get_console, get_palette
from hidronum.cli.theme.styled import styled_header, styled_label, styled_message


def format_number(value: float, decimals: int = 3) -> str:
    """Formatea un número; notación científica para magnitudes extremas."""
    magnitude = abs(value)
    if value != 0 and (magnitude < 10 ** -decimals or magnitude >= 1e7):
        return f"{value:.{decimals}e}"
    separator = "," if magnitude >= 1000 else ""
    return f"{value:{separator}.{decimals}f}"


def print_header(title: str, subtitle: str = None) -> None:
    get_console().print(styled_header(title, subtitle))


def print_section(title: str) -> None:
    console = get_console()
    console.print()
    console.print(f"-- {title} --", style=f"bold {get_palette().secondary}")


def print_field(label: str, value, unit: str = None, indent: int = 2) -> None:
    """Campo de resultado con sangría."""
    get_console().print(" " * indent, styled_label(label, value, unit))


def print_success(message: str) -> None:
    get_console().print(styled_message("success", message))


def print_warning(message: str) -> None:
    get_console().print(styled_message("warning", message))


def print_error(message: str) -> None:
    get_console().print(styled_message("error", message))
