"""
Define la jerarquía de excepciones del dominio de granulometría.
"""


class GranulometryError(Exception):
    """Clase base para los errores del análisis granulométrico."""


class EmptySampleError(GranulometryError, ValueError):
    """
    La muestra no contiene ningún grano.

    Se lanza desde cualquier operación (percentiles, histograma, parámetros,
    pipeline) antes de calcular sobre datos vacíos.
    """

    def __init__(self, message: str = "La muestra de granos está vacía."):
        super().__init__(message)


class InvalidMeasurementError(GranulometryError, ValueError):
    """
    Un diámetro medido no es válido (cero, negativo o no finito).

    Attributes:
        index (int): Posición del valor inválido dentro de la muestra.
        value (float): El valor rechazado.
    """

    def __init__(self, index: int, value: float):
        self.index = index
        self.value = value
        super().__init__(
            f"Diámetro inválido en la posición {index}: {value!r}. "
            "Los diámetros deben ser positivos y finitos (mm)."
        )
