"""
Define el esquema de datos de los parámetros estadísticos de Folk & Ward.
"""
import math
from dataclasses import dataclass, fields
from typing import Any, Dict, List

# Nombre del campo Python -> nombre en el formato de intercambio (JSON).
_EXPORT_NAMES = {
    "mean_size": "meanSize",
    "median_size": "medianSize",
    "sorting": "sorting",
    "skewness": "skewness",
    "kurtosis": "kurtosis",
    "d10": "d10",
    "d16": "d16",
    "d25": "d25",
    "d50": "d50",
    "d75": "d75",
    "d84": "d84",
    "d90": "d90",
    "uniformity_coefficient": "uniformityCoefficient",
    "curvature_coefficient": "curvatureCoefficient",
    "wentworth": "wentworth",
    "folk_ward": "folkWard",
    "sorting_description": "sortingDescription",
    "skewness_description": "skewnessDescription",
    "kurtosis_description": "kurtosisDescription",
}


@dataclass(frozen=True)
class StatisticalParameters:
    """
    Parámetros estadísticos de una muestra según el método gráfico de
    Folk & Ward (1957), más coeficientes de ingeniería.

    Los parámetros cuyo denominador resulta nulo (distribución degenerada)
    se reportan como NaN, que actúa como centinela de "indefinido".

    Attributes:
        mean_size (float): Tamaño medio gráfico Mz (phi).
        median_size (float): Mediana D50 (mm).
        sorting (float): Desviación estándar gráfica inclusiva σI (phi).
        skewness (float): Asimetría gráfica inclusiva SkI.
        kurtosis (float): Curtosis gráfica KG.
        d10, d16, d25, d50, d75, d84, d90 (float): Percentiles (mm).
        uniformity_coefficient (float): Cu = D60 / D10.
        curvature_coefficient (float): Cc = D30² / (D60 · D10).
        wentworth (str): Clase de Wentworth según D50.
        folk_ward (str): Descripción de selección + clase de Wentworth.
        sorting_description (str): Clase de selección.
        skewness_description (str): Clase de asimetría.
        kurtosis_description (str): Clase de curtosis.
    """
    mean_size: float
    median_size: float
    sorting: float
    skewness: float
    kurtosis: float
    d10: float
    d16: float
    d25: float
    d50: float
    d75: float
    d84: float
    d90: float
    uniformity_coefficient: float
    curvature_coefficient: float
    wentworth: str
    folk_ward: str
    sorting_description: str
    skewness_description: str
    kurtosis_description: str

    def undefined_fields(self) -> List[str]:
        """Nombres de los campos numéricos que quedaron indefinidos (NaN)."""
        return [
            f.name for f in fields(self)
            if isinstance(getattr(self, f.name), float) and math.isnan(getattr(self, f.name))
        ]

    @property
    def is_degenerate(self) -> bool:
        return bool(self.undefined_fields())

    def to_dict(self) -> Dict[str, Any]:
        return {export: getattr(self, name) for name, export in _EXPORT_NAMES.items()}
