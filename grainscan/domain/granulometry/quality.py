"""
Indicadores de calidad del análisis y resumen comparativo entre muestras.
"""
import math
from typing import Sequence

import numpy as np

from grainscan.domain.schemas import (AnalysisResult, ComparisonSummary,
                                      QualityAssessment, StatisticalParameters)

from .scales import gradation_description

HIGH_QUALITY_SCORE = 80


def quality_score(grain_count: int, reference_count: int = 500) -> int:
    """Puntuación 0 a 100: alcanza 100 con `reference_count` granos."""
    # Redondeo "half up" para que 0.5 suba, como en la interfaz original.
    return min(100, int(math.floor(grain_count / reference_count * 100 + 0.5)))


def assess_quality(grain_count: int, parameters: StatisticalParameters,
                   reference_count: int = 500) -> QualityAssessment:
    score = quality_score(grain_count, reference_count)
    return QualityAssessment(
        grain_count=grain_count,
        quality_score=score,
        is_high_quality=score >= HIGH_QUALITY_SCORE,
        gradation=gradation_description(parameters.uniformity_coefficient,
                                        parameters.curvature_coefficient),
    )


def compare_samples(results: Sequence[AnalysisResult]) -> ComparisonSummary:
    """
    Resume varias muestras analizadas: promedio y rango de D50, total de
    granos y promedio de la selección.

    Raises:
        ValueError: Si no se entrega ningún resultado.
    """
    if not results:
        raise ValueError("Se requiere al menos un resultado para comparar muestras.")

    sizes = np.array([r.parameters.d50 for r in results], dtype=float)
    sortings = np.array([r.parameters.sorting for r in results], dtype=float)
    defined_sortings = sortings[~np.isnan(sortings)]

    return ComparisonSummary(
        sample_count=len(results),
        average_mean_size=float(sizes.mean()),
        size_range=float(sizes.max() - sizes.min()),
        total_grains=int(sum(r.grain_count for r in results)),
        average_sorting=float(defined_sortings.mean()) if defined_sortings.size else float("nan"),
    )
