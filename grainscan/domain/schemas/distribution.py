"""
Define el esquema de datos de un bin del histograma de distribución de tamaños.
"""
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class DistributionBin:
    """
    Representa una única 'gaveta' o 'bin' del histograma de tamaños.

    Attributes:
        size_center (float): Centro del intervalo de diámetros (mm).
        frequency (int): Número de granos cuyo diámetro cae en el intervalo.
        cumulative_percent (float): Porcentaje acumulado de granos hasta este
            bin inclusive, en el rango 0 a 100.
    """
    size_center: float
    frequency: int
    cumulative_percent: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "sizeCenter": self.size_center,
            "frequency": self.frequency,
            "cumulativePercent": self.cumulative_percent,
        }
