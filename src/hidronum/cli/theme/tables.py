"""
Tablas Rich para series de resultados.
"""

from collections.abc import Sequence

from rich import box
from rich.table import Table

from hidronum.cli.theme.palette import get_console, get_palette
from hidronum.cli.theme.printing import format_number


def create_results_table(
    title: str = None,
    columns: list[tuple[str, str]] = None,  # [(nombre, justify), ...]
) -> Table:
    """Crea una tabla estilizada para resultados."""
    p = get_palette()
    table = Table(
        title=title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
    )
    for name, justify in columns or []:
        table.add_column(name, justify=justify)
    return table


def print_series_table(
    headers: Sequence[str],
    *series: Sequence[float],
    title: str = None,
    decimals: int = 3,
    max_rows: int = 50,
) -> None:
    """
    Imprime columnas paralelas de valores.

    Con más de max_rows filas se muestran las primeras y las últimas.
    """
    table = create_results_table(title, [(h, "right") for h in headers])
    n = min((len(s) for s in series), default=0)

    if n > max_rows:
        half = max_rows // 2
        rows = list(range(half)) + [None] + list(range(n - half, n))
    else:
        rows = list(range(n))

    for i in rows:
        if i is None:
            table.add_row(*["…"] * len(headers))
        else:
            table.add_row(*[format_number(float(s[i]), decimals) for s in series])

    get_console().print(table)
