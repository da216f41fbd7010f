"""
Tablas de umbrales de las escalas sedimentológicas y funciones de
clasificación asociadas.

Cada escala es una lista ordenada de pares `(límite_superior, etiqueta)`. Un
valor pertenece a la primera clase cuyo límite supera estrictamente al valor:
un valor igual al límite cae en la clase siguiente. Tanto la calculadora de
parámetros como el clasificador usan estas mismas tablas.
"""
import math
from typing import List, Optional, Tuple

UNKNOWN = "Unknown"

INF = float("inf")

Thresholds = List[Tuple[float, str]]

WENTWORTH_SCALE: Thresholds = [
    (0.0625, "Silt"),
    (0.125, "Very Fine Sand"),
    (0.25, "Fine Sand"),
    (0.5, "Medium Sand"),
    (1.0, "Coarse Sand"),
    (2.0, "Very Coarse Sand"),
    (4.0, "Granule"),
    (INF, "Pebble"),
]

SORTING_SCALE: Thresholds = [
    (0.35, "Very Well Sorted"),
    (0.5, "Well Sorted"),
    (0.71, "Moderately Well Sorted"),
    (1.0, "Moderately Sorted"),
    (2.0, "Poorly Sorted"),
    (4.0, "Very Poorly Sorted"),
    (INF, "Extremely Poorly Sorted"),
]

SKEWNESS_SCALE: Thresholds = [
    (-0.3, "Very Coarse Skewed"),
    (-0.1, "Coarse Skewed"),
    (0.1, "Near Symmetrical"),
    (0.3, "Fine Skewed"),
    (INF, "Very Fine Skewed"),
]

KURTOSIS_SCALE: Thresholds = [
    (0.67, "Very Platykurtic"),
    (0.9, "Platykurtic"),
    (1.11, "Mesokurtic"),
    (1.5, "Leptokurtic"),
    (3.0, "Very Leptokurtic"),
    (INF, "Extremely Leptokurtic"),
]

SHEPARD_SCALE: Thresholds = [
    (0.0625, "Mud"),
    (2.0, "Sand"),
    (INF, "Gravel"),
]


def is_undefined(value: Optional[float]) -> bool:
    return value is None or math.isnan(value)


def classify_by_thresholds(value: Optional[float], thresholds: Thresholds) -> str:
    """
    Devuelve la etiqueta de la primera clase cuyo límite superior es mayor
    que `value`, o "Unknown" si el valor está indefinido.
    """
    if is_undefined(value):
        return UNKNOWN
    for upper_bound, label in thresholds:
        if value < upper_bound:
            return label
    return thresholds[-1][1]


def wentworth_class(size_mm: Optional[float]) -> str:
    return classify_by_thresholds(size_mm, WENTWORTH_SCALE)


def sorting_description(sorting: Optional[float]) -> str:
    return classify_by_thresholds(sorting, SORTING_SCALE)


def skewness_description(skewness: Optional[float]) -> str:
    return classify_by_thresholds(skewness, SKEWNESS_SCALE)


def kurtosis_description(kurtosis: Optional[float]) -> str:
    return classify_by_thresholds(kurtosis, KURTOSIS_SCALE)


def shepard_class(size_mm: Optional[float]) -> str:
    return classify_by_thresholds(size_mm, SHEPARD_SCALE)


def folk_class(sorting: Optional[float], size_mm: Optional[float]) -> str:
    """Etiqueta textural: descripción de selección seguida de la clase de Wentworth."""
    sorting_label = sorting_description(sorting)
    size_label = wentworth_class(size_mm)
    if UNKNOWN in (sorting_label, size_label):
        return UNKNOWN
    return f"{sorting_label} {size_label}"


def gradation_description(uniformity: Optional[float], curvature: Optional[float]) -> str:
    """
    Interpretación ingenieril de la graduación: bien graduado si Cu > 4 y
    1 < Cc < 3.
    """
    if is_undefined(uniformity) or is_undefined(curvature):
        return UNKNOWN
    if uniformity > 4 and 1 < curvature < 3:
        return "Well Graded"
    return "Poorly Graded"
