"""
Clasificador taxonómico y ambiental de muestras de sedimento.

Recibe el tamaño representativo (D50, mm) y la selección σI (phi) y asigna
una clase por cada esquema, además de las listas de recomendaciones de
gestión e implicancias ambientales.
"""
from typing import List, Optional, Tuple

from grainscan.domain.schemas import ClassificationResult, StatisticalParameters

from .morphodynamics import DeanMorphodynamicModel
from .scales import (INF, UNKNOWN, folk_class, is_undefined, shepard_class,
                     wentworth_class)

# Reglas (tamaño mínimo exclusivo, selección máxima exclusiva, etiqueta),
# evaluadas en orden; gana la primera que se cumple.
ENERGY_RULES: List[Tuple[float, float, str]] = [
    (1.0, 1.0, "High Energy"),
    (0.5, 1.5, "Moderate-High Energy"),
    (0.25, 2.0, "Moderate Energy"),
    (0.125, INF, "Low-Moderate Energy"),
]
ENERGY_DEFAULT = "Low Energy"

STABILITY_RULES: List[Tuple[float, float, str]] = [
    (0.5, 1.0, "Stable"),
    (0.25, 1.5, "Moderately Stable"),
    (0.125, 2.0, "Moderately Unstable"),
]
STABILITY_DEFAULT = "Unstable"

# Reglas (tamaño máximo exclusivo, selección mínima exclusiva, etiqueta).
EROSION_RULES: List[Tuple[float, float, str]] = [
    (0.125, -INF, "Very High"),
    (0.25, 1.5, "High"),
    (0.5, 1.0, "Moderate"),
    (1.0, -INF, "Low"),
]
EROSION_DEFAULT = "Very Low"

HIGH_EROSION_RISKS = ("Very High", "High")

EROSION_RECOMMENDATIONS = (
    "Implement beach nourishment programs",
    "Consider soft engineering solutions (dune restoration)",
    "Monitor shoreline changes frequently",
    "Restrict heavy recreational activities",
)
FINE_GRAIN_RECOMMENDATIONS = (
    "Protect from wind erosion with vegetation",
    "Limit vehicle access to prevent compaction",
)
POOR_SORTING_RECOMMENDATIONS = (
    "Monitor sediment transport patterns",
    "Consider sediment trapping structures",
)
COARSE_GRAIN_RECOMMENDATIONS = (
    "Suitable for recreational activities",
    "Natural storm protection capabilities",
)

DISSIPATIVE_IMPLICATIONS = (
    "High wave energy dissipation",
    "Good habitat for surf zone organisms",
    "Natural coastal protection",
)
REFLECTIVE_IMPLICATIONS = (
    "Low biological productivity in surf zone",
    "High wave reflection - potential scour",
    "Suitable for nesting sea turtles",
)
FINE_GRAIN_IMPLICATIONS = (
    "Important habitat for infaunal organisms",
    "High water retention capacity",
    "Sensitive to pollution retention",
)
COARSE_GRAIN_IMPLICATIONS = (
    "Good drainage and oxygenation",
    "Suitable for epifaunal communities",
    "Natural filtration capabilities",
)

FINE_GRAIN_LIMIT = 0.25
COARSE_GRAIN_LIMIT = 0.5
POOR_SORTING_LIMIT = 1.5


def energy_level(size: float, sorting: float) -> str:
    if is_undefined(size) or is_undefined(sorting):
        return UNKNOWN
    for min_size, max_sorting, label in ENERGY_RULES:
        if size > min_size and sorting < max_sorting:
            return label
    return ENERGY_DEFAULT


def stability(size: float, sorting: float) -> str:
    if is_undefined(size) or is_undefined(sorting):
        return UNKNOWN
    for min_size, max_sorting, label in STABILITY_RULES:
        if size > min_size and sorting < max_sorting:
            return label
    return STABILITY_DEFAULT


def erosion_risk(size: float, sorting: float) -> str:
    if is_undefined(size) or is_undefined(sorting):
        return UNKNOWN
    for max_size, min_sorting, label in EROSION_RULES:
        if size < max_size and sorting > min_sorting:
            return label
    return EROSION_DEFAULT


def management_recommendations(size: float, sorting: float, risk: str) -> List[str]:
    """
    Acumula recomendaciones de gestión. Las condiciones se evalúan en orden
    (riesgo de erosión, grano fino, mala selección, grano grueso) y ninguna
    excluye a las demás.
    """
    recommendations: List[str] = []

    if risk in HIGH_EROSION_RISKS:
        recommendations.extend(EROSION_RECOMMENDATIONS)

    if not is_undefined(size) and size < FINE_GRAIN_LIMIT:
        recommendations.extend(FINE_GRAIN_RECOMMENDATIONS)

    if not is_undefined(sorting) and sorting > POOR_SORTING_LIMIT:
        recommendations.extend(POOR_SORTING_RECOMMENDATIONS)

    if not is_undefined(size) and size > COARSE_GRAIN_LIMIT:
        recommendations.extend(COARSE_GRAIN_RECOMMENDATIONS)

    return recommendations


def environmental_implications(size: float, morphodynamic: str) -> List[str]:
    """
    Acumula implicancias ambientales: estado morfodinámico primero, luego
    grano fino y grano grueso.
    """
    implications: List[str] = []

    if morphodynamic == "Dissipative":
        implications.extend(DISSIPATIVE_IMPLICATIONS)

    if morphodynamic == "Reflective":
        implications.extend(REFLECTIVE_IMPLICATIONS)

    if not is_undefined(size) and size < FINE_GRAIN_LIMIT:
        implications.extend(FINE_GRAIN_IMPLICATIONS)

    if not is_undefined(size) and size > COARSE_GRAIN_LIMIT:
        implications.extend(COARSE_GRAIN_IMPLICATIONS)

    return implications


class TaxonomicClassifier:
    """
    Asigna las clases de cada esquema (Wentworth, Folk, Shepard,
    morfodinámico, energía, estabilidad, erosión) y genera las listas de
    recomendaciones.

    Si el tamaño está indefinido todos los campos son "Unknown"; si sólo la
    selección está indefinida, los esquemas que dependen de ella son
    "Unknown" y el resto se calcula normalmente.
    """
    def __init__(self, morphodynamic_model: Optional[DeanMorphodynamicModel] = None):
        self.morphodynamic_model = morphodynamic_model or DeanMorphodynamicModel()

    def classify(self, parameters: StatisticalParameters) -> ClassificationResult:
        """Clasifica usando D50 como tamaño representativo y σI como selección."""
        return self.classify_values(parameters.d50, parameters.sorting)

    def classify_values(self, size: float, sorting: float) -> ClassificationResult:
        if is_undefined(size):
            return ClassificationResult(
                wentworth=UNKNOWN, folk=UNKNOWN, shepard=UNKNOWN,
                morphodynamic=UNKNOWN, energy_level=UNKNOWN,
                stability=UNKNOWN, erosion_risk=UNKNOWN,
            )

        morphodynamic = self.morphodynamic_model.classify(size)
        risk = erosion_risk(size, sorting)

        return ClassificationResult(
            wentworth=wentworth_class(size),
            folk=folk_class(sorting, size),
            shepard=shepard_class(size),
            morphodynamic=morphodynamic,
            energy_level=energy_level(size, sorting),
            stability=stability(size, sorting),
            erosion_risk=risk,
            management_recommendations=tuple(management_recommendations(size, sorting, risk)),
            environmental_implications=tuple(environmental_implications(size, morphodynamic)),
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.morphodynamic_model!r})"
