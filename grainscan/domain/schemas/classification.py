"""
Define el esquema de datos del resultado de la clasificación taxonómica y
ambiental de una muestra.
"""
from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class ClassificationResult:
    """
    Clases asignadas por cada esquema y listas de recomendaciones derivadas.

    Attributes:
        wentworth (str): Clase granulométrica de Wentworth.
        folk (str): Clase textural (selección + Wentworth).
        shepard (str): Clase simplificada de Shepard (Mud / Sand / Gravel).
        morphodynamic (str): Estado morfodinámico de la playa.
        energy_level (str): Nivel de energía del ambiente.
        stability (str): Estabilidad del depósito.
        erosion_risk (str): Riesgo de erosión.
        management_recommendations (Tuple[str, ...]): Recomendaciones de
            gestión, en el orden en que se evaluaron sus condiciones.
        environmental_implications (Tuple[str, ...]): Implicancias
            ambientales, en el orden en que se evaluaron sus condiciones.
    """
    wentworth: str
    folk: str
    shepard: str
    morphodynamic: str
    energy_level: str
    stability: str
    erosion_risk: str
    management_recommendations: Tuple[str, ...] = ()
    environmental_implications: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "wentworth": self.wentworth,
            "folk": self.folk,
            "shepard": self.shepard,
            "morphodynamic": self.morphodynamic,
            "energyLevel": self.energy_level,
            "stability": self.stability,
            "erosionRisk": self.erosion_risk,
            "managementRecommendations": list(self.management_recommendations),
            "environmentalImplications": list(self.environmental_implications),
        }
