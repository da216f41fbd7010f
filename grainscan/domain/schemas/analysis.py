"""
Define los esquemas de datos para configurar un análisis y encapsular sus
resultados.
"""
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .classification import ClassificationResult
from .distribution import DistributionBin
from .parameters import StatisticalParameters
from .sample import SampleMetadata


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Configuración de un análisis. Se pasa explícitamente en cada llamada;
    el motor no guarda estado entre análisis.

    Attributes:
        bin_count (int): Número de bins del histograma (recomendado 10 a 50).
        analysis_method (str): Método de cálculo de parámetros.
        wave_height (float): Altura de ola de referencia (m) para el
            indicador morfodinámico.
        wave_period (float): Periodo de ola de referencia (s).
        quality_reference_count (int): Número de granos con el que un
            análisis obtiene la puntuación de calidad máxima.
    """
    bin_count: int = 20
    analysis_method: str = "folk-ward"
    wave_height: float = 1.5
    wave_period: float = 10.0
    quality_reference_count: int = 500

    def __post_init__(self):
        if self.bin_count < 1:
            raise ValueError(f"bin_count debe ser >= 1 (recibido: {self.bin_count}).")
        if self.wave_height <= 0 or self.wave_period <= 0:
            raise ValueError("La altura y el periodo de ola deben ser positivos.")
        if self.quality_reference_count < 1:
            raise ValueError("quality_reference_count debe ser >= 1.")


@dataclass(frozen=True)
class QualityAssessment:
    """
    Indicadores de calidad del análisis.

    Attributes:
        grain_count (int): Número de granos medidos.
        quality_score (int): Puntuación 0 a 100 proporcional al número de granos.
        is_high_quality (bool): True si la puntuación es >= 80.
        gradation (str): Interpretación de Cu y Cc ("Well Graded",
            "Poorly Graded" o "Unknown").
    """
    grain_count: int
    quality_score: int
    is_high_quality: bool
    gradation: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "grainCount": self.grain_count,
            "qualityScore": self.quality_score,
            "isHighQuality": self.is_high_quality,
            "gradation": self.gradation,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """
    Contenedor final de todos los resultados de un análisis.

    Es un objeto de transferencia de datos (DTO) agnóstico a cualquier
    componente de presentación o exportación.
    """
    metadata: SampleMetadata
    grain_count: int
    distribution: Tuple[DistributionBin, ...]
    parameters: StatisticalParameters
    classification: ClassificationResult
    quality: QualityAssessment
    config: AnalysisConfig


@dataclass(frozen=True)
class ComparisonSummary:
    """
    Resumen comparativo de varias muestras analizadas.

    Attributes:
        sample_count (int): Número de muestras comparadas.
        average_mean_size (float): Promedio de D50 (mm).
        size_range (float): Diferencia entre el mayor y el menor D50 (mm).
        total_grains (int): Suma de granos de todas las muestras.
        average_sorting (float): Promedio de σI, ignorando valores indefinidos
            (NaN si ninguno está definido).
    """
    sample_count: int
    average_mean_size: float
    size_range: float
    total_grains: int
    average_sorting: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sampleCount": self.sample_count,
            "averageMeanSize": self.average_mean_size,
            "sizeRange": self.size_range,
            "totalGrains": self.total_grains,
            "averageSorting": self.average_sorting,
        }
