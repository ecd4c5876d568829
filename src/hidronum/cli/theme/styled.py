"""
Objetos Rich estilizados (no imprimen).
"""

from rich import box
from rich.panel import Panel
from rich.text import Text

from hidronum.cli.theme.palette import get_palette

# Prefijo de cada tipo de mensaje y el campo de la paleta que lo colorea
MESSAGE_KINDS = {
    "success": "+",
    "warning": "!",
    "error": "x",
}


def styled_header(title: str, subtitle: str = None) -> Panel:
    """Panel de título de un comando; el subtítulo describe el método."""
    p = get_palette()
    body = Text(title, style=f"bold {p.primary}")
    if subtitle:
        body.append("\n" + subtitle, style=p.muted)
    return Panel(body, box=box.ROUNDED, border_style=p.border, padding=(0, 2))


def styled_label(label: str, value, unit: str = None) -> Text:
    """'Etiqueta: valor unidad'."""
    p = get_palette()
    line = Text.assemble((label + ": ", p.label), (str(value), f"bold {p.number}"))
    if unit:
        line.append(" " + unit, style=p.unit)
    return line


def styled_message(kind: str, message: str) -> Text:
    color = getattr(get_palette(), kind)
    return Text(f"[{MESSAGE_KINDS[kind]}] {message}", style=color)
