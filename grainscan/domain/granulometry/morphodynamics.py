"""
Indicador morfodinámico de playa basado en el parámetro de Dean.

Es una aproximación gruesa con un clima de olas fijo, no un modelo físico de
oleaje. Está aislado en esta clase para poder sustituirlo por un clima de
olas real sin tocar el resto del clasificador.
"""
from typing import Optional

from .scales import INF, UNKNOWN, Thresholds, classify_by_thresholds, is_undefined

GRAVITY = 9.8

MORPHODYNAMIC_SCALE: Thresholds = [
    (1.0, "Reflective"),
    (6.0, "Intermediate"),
    (INF, "Dissipative"),
]


class DeanMorphodynamicModel:
    """
    Clasifica el estado morfodinámico a partir de Ω = H / (ws · T).

    Attributes:
        wave_height (float): Altura de ola de referencia H (m).
        wave_period (float): Periodo de ola de referencia T (s).
    """
    def __init__(self, wave_height: float = 1.5, wave_period: float = 10.0):
        self.wave_height = wave_height
        self.wave_period = wave_period

    @staticmethod
    def fall_velocity(size_mm: float) -> float:
        """Aproximación simplificada de la ley de Stokes: ws = size² · 9.8."""
        return size_mm * size_mm * GRAVITY

    def omega(self, size_mm: float) -> float:
        return self.wave_height / (self.fall_velocity(size_mm) * self.wave_period)

    def classify(self, size_mm: Optional[float]) -> str:
        if is_undefined(size_mm) or size_mm <= 0:
            return UNKNOWN
        return classify_by_thresholds(self.omega(size_mm), MORPHODYNAMIC_SCALE)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(wave_height={self.wave_height}, wave_period={self.wave_period})"
