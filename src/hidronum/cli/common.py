"""
Imports y utilidades comunes para módulos CLI.
"""

import csv
from collections.abc import Sequence
from typing import Annotated, Optional

import typer

from hidronum.cli.theme import (
    print_header,
    print_section,
    print_field,
    print_series_table,
    print_success,
    print_warning,
    print_error,
    get_console,
)

from hidronum.cli.validators import (
    parse_series,
    parse_stations,
    validate_positive,
    validate_weighting_factor,
    validate_nodes,
    run_checked,
)

# Opciones compartidas por los comandos que producen series
PlotOption = Annotated[bool, typer.Option("--plot", help="Graficar la serie en la terminal")]
OutputOption = Annotated[Optional[str], typer.Option("--output", "-o", help="Archivo CSV de salida")]


def export_csv(path: str, headers: Sequence[str], *series: Sequence[float]) -> None:
    """Escribe columnas paralelas a un archivo CSV."""
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(headers)
        for row in zip(*series):
            writer.writerow([f"{float(v):.6g}" for v in row])
    print_success(f"Resultados exportados a: {path}")


__all__ = [
    # Typing
    "Annotated",
    "Optional",
    "PlotOption",
    "OutputOption",
    # Typer
    "typer",
    # Theme
    "print_header",
    "print_section",
    "print_field",
    "print_series_table",
    "print_success",
    "print_warning",
    "print_error",
    "get_console",
    # Validators
    "parse_series",
    "parse_stations",
    "validate_positive",
    "validate_weighting_factor",
    "validate_nodes",
    "run_checked",
    # Export
    "export_csv",
]
