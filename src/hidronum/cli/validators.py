"""
Validadores y conversores de entradas CLI.

Los errores se informan con print_error y terminan con código 1.
"""

import warnings
from collections.abc import Callable
from typing import TypeVar

import typer

from hidronum.cli.theme import print_error, print_warning
from hidronum.exceptions import NumericalWarning, SingularMatrixError

T = TypeVar("T")


# =============================================================================
# CONVERSORES
# =============================================================================

def parse_series(text: str, label: str = "serie") -> list[float]:
    """
    Convierte "1, 2.5, 3" en [1.0, 2.5, 3.0].

    Args:
        text: Números separados por coma
        label: Nombre de la serie para el mensaje de error

    Returns:
        Lista de floats
    """
    try:
        values = [float(v) for v in text.split(",") if v.strip()]
    except ValueError:
        print_error(f"{label} debe ser una lista de números separados por coma (recibido: {text!r})")
        raise typer.Exit(1)
    if not values:
        print_error(f"{label} está vacía")
        raise typer.Exit(1)
    return values


def parse_stations(texts: list[str]) -> list[list[float]]:
    """Convierte varias opciones --station en una lista de series."""
    if not texts:
        print_error("Se requiere al menos una estación (--station)")
        raise typer.Exit(1)
    return [parse_series(t, f"estación {i + 1}") for i, t in enumerate(texts)]


# =============================================================================
# VALIDADORES DE RANGO
# =============================================================================

def validate_positive(value: float, label: str, exit_on_error: bool = True) -> bool:
    """
    Valida que un valor sea estrictamente positivo.

    Returns:
        True si es válido, False si no
    """
    if value <= 0:
        print_error(f"{label} debe ser > 0 (recibido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def validate_weighting_factor(value: float, exit_on_error: bool = True) -> bool:
    """Valida X de Muskingum en [0, 0.5]."""
    if not 0 <= value <= 0.5:
        print_error(f"X debe estar entre 0 y 0.5 (recibido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def validate_nodes(value: int, exit_on_error: bool = True) -> bool:
    """Valida el número de nodos de la malla (mínimo 3)."""
    if value < 3:
        print_error(f"Se requieren al menos 3 nodos (recibido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    if value > 2000:
        print_warning(f"{value} nodos: el solver directo es O(n³), el cálculo puede ser lento.")
    return True


# =============================================================================
# EJECUCIÓN
# =============================================================================

def run_checked(func: Callable[..., T], *args, **kwargs) -> T:
    """
    Ejecuta un cálculo del motor y traduce sus errores a salida CLI.

    ValueError (incluye ValidationError y errores de pydantic) y
    SingularMatrixError terminan con código 1. NumericalWarning se muestra
    como advertencia sin interrumpir.
    """
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", NumericalWarning)
        try:
            result = func(*args, **kwargs)
        except (ValueError, SingularMatrixError, NotImplementedError) as e:
            print_error(str(e))
            raise typer.Exit(1)

    for w in caught:
        print_warning(str(w.message))
    return result
