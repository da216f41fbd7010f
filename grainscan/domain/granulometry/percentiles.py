"""
Estimador de percentiles por interpolación lineal y conversión de unidades
entre milímetros y la escala phi de Krumbein.
"""
import math
from typing import Dict, Iterable, Sequence

import numpy as np

from grainscan.domain.errors import EmptySampleError


def mm_to_phi(mm):
    """phi = -log2(mm). Acepta escalares o arrays."""
    return -np.log2(mm)


def phi_to_mm(phi):
    """mm = 2^(-phi). Acepta escalares o arrays."""
    return np.power(2.0, -np.asarray(phi, dtype=float))


def percentile(sorted_values: Sequence[float], p: float) -> float:
    """
    Calcula el percentil `p` de una secuencia ordenada ascendentemente.

    El rango interpolado es `index = (p / 100) * (n - 1)`; el resultado es la
    media ponderada de los valores en `floor(index)` y `ceil(index)`. Es la
    única regla de interpolación usada para los percentiles D5 a D95.

    Args:
        sorted_values (Sequence[float]): Valores ordenados de menor a mayor.
        p (float): Percentil buscado, en el rango [0, 100].

    Returns:
        float: El valor interpolado.

    Raises:
        EmptySampleError: Si la secuencia está vacía.
        ValueError: Si `p` está fuera de [0, 100].
    """
    values = np.asarray(sorted_values, dtype=float)
    n = values.size
    if n == 0:
        raise EmptySampleError()
    if not 0.0 <= p <= 100.0:
        raise ValueError(f"El percentil debe estar en [0, 100] (recibido: {p}).")

    index = (p / 100.0) * (n - 1)
    lower = math.floor(index)
    upper = math.ceil(index)
    weight = index - lower

    if upper >= n:
        return float(values[n - 1])
    if lower < 0:
        return float(values[0])

    lower_value = values[lower]
    upper_value = values[upper]
    # Un empate devuelve el valor exacto, sin error de redondeo.
    if lower_value == upper_value:
        return float(lower_value)
    return float(lower_value * (1 - weight) + upper_value * weight)


def percentiles(sorted_values: Sequence[float], ps: Iterable[float]) -> Dict[float, float]:
    """Calcula varios percentiles sobre la misma secuencia ordenada."""
    values = np.asarray(sorted_values, dtype=float)
    if values.size == 0:
        raise EmptySampleError()
    return {p: percentile(values, p) for p in ps}
