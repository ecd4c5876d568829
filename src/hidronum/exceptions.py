"""
Excepciones y advertencias del motor numérico.

- ValidationError: precondición de entrada no cumplida (unidad, método, longitudes)
- SingularMatrixError: pivote casi nulo durante la eliminación gaussiana
- NumericalWarning: advertencia numérica no fatal (emitida con warnings.warn)
"""


class ValidationError(ValueError):
    """Entrada inválida: sistema de unidades, método, tipo o longitudes."""


class SingularMatrixError(ArithmeticError):
    """La matriz es numéricamente singular (pivote menor que la tolerancia)."""

    def __init__(self, row: int, pivot: float):
        self.row = row
        self.pivot = pivot
        super().__init__(
            f"Matriz singular: pivote {pivot:.3e} en la fila {row}"
        )


class NumericalWarning(UserWarning):
    """Resultado numéricamente poco confiable."""
