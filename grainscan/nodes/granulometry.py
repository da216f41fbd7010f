"""
Nodos del pipeline para el análisis granulométrico.

Este módulo contiene los nodos que construyen el histograma de tamaños,
calculan los parámetros de Folk & Ward, clasifican la muestra y ensamblan el
resultado final del análisis.
"""
import logging
from typing import Any, Dict, Optional

from grainscan.domain import AnalysisConfig, AnalysisResult, GrainSample
from grainscan.domain.granulometry import (RECOMMENDED_BIN_RANGE, FolkWard,
                                           TaxonomicClassifier, assess_quality,
                                           build_distribution)

from .base import PipelineNode


def _require_sample(context: Dict[str, Any], node_name: str) -> GrainSample:
    sample = context.get('sample')
    if sample is None:
        raise ValueError(f"[{node_name}] 'sample' no encontrada en el contexto.")
    sample.require_non_empty()
    return sample


class DistributionNode(PipelineNode):
    """
    Calcula el histograma de frecuencias y la curva acumulada de la muestra.
    """
    def __init__(self, bin_count: int = 20, name: str = "distribution"):
        """
        Args:
            bin_count (int): Número de bins del histograma.
            name (str): Nombre del nodo.
        """
        super().__init__(name)
        if bin_count < 1:
            raise ValueError(f"[{name}] bin_count debe ser >= 1 (recibido: {bin_count}).")
        low, high = RECOMMENDED_BIN_RANGE
        if not low <= bin_count <= high:
            logging.warning("[%s] bin_count=%d fuera del rango recomendado (%d-%d).",
                            name, bin_count, low, high)
        self.bin_count = bin_count

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """
        Context Inputs:
            - `sample` (GrainSample): Muestra a analizar.

        Context Outputs:
            - `distribution` (List[DistributionBin]): Bins del histograma.
        """
        sample = _require_sample(context, self.name)
        distribution = build_distribution(sample, self.bin_count)
        context['distribution'] = distribution
        logging.info("[%s] Histograma de %d bins para %d granos.", self.name, len(distribution), len(sample))
        return context


class FolkWardNode(PipelineNode):
    """
    Calcula los parámetros estadísticos de Folk & Ward de la muestra.
    """
    def __init__(self, calculator: Optional[FolkWard] = None, name: str = "folk_ward"):
        super().__init__(name)
        self.calculator = calculator or FolkWard()

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """
        Context Inputs:
            - `sample` (GrainSample): Muestra a analizar.

        Context Outputs:
            - `statistical_parameters` (StatisticalParameters)
        """
        sample = _require_sample(context, self.name)
        params = self.calculator.calculate(sample)

        undefined = params.undefined_fields()
        if undefined:
            logging.warning("[%s] Distribución degenerada, parámetros indefinidos: %s",
                            self.name, ", ".join(undefined))

        context['statistical_parameters'] = params
        logging.info("[%s] D50: %.4f mm, Mz: %.3f phi, σI: %.3f (%s)",
                     self.name, params.d50, params.mean_size, params.sorting, params.folk_ward)
        return context


class ClassificationNode(PipelineNode):
    """
    Clasifica la muestra a partir de sus parámetros estadísticos.
    """
    def __init__(self, classifier: Optional[TaxonomicClassifier] = None, name: str = "classification"):
        super().__init__(name)
        self.classifier = classifier or TaxonomicClassifier()

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """
        Context Inputs:
            - `statistical_parameters` (StatisticalParameters)

        Context Outputs:
            - `classification` (ClassificationResult)
        """
        params = context.get('statistical_parameters')
        if params is None:
            raise ValueError(f"[{self.name}] 'statistical_parameters' no encontrado en el contexto.")

        classification = self.classifier.classify(params)
        context['classification'] = classification
        logging.info("[%s] %s / %s / riesgo de erosión: %s", self.name,
                     classification.wentworth, classification.morphodynamic, classification.erosion_risk)
        return context


class AnalysisResultNode(PipelineNode):
    """
    Evalúa la calidad del análisis y ensambla el `AnalysisResult` final.
    """
    def __init__(self, config: AnalysisConfig, name: str = "analysis_result"):
        super().__init__(name)
        self.config = config

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """
        Context Inputs:
            - `sample`, `distribution`, `statistical_parameters`, `classification`

        Context Outputs:
            - `analysis_result` (AnalysisResult)
        """
        sample = _require_sample(context, self.name)
        missing = [key for key in ('distribution', 'statistical_parameters', 'classification')
                   if context.get(key) is None]
        if missing:
            raise ValueError(f"[{self.name}] Faltan datos en el contexto: {', '.join(missing)}")

        params = context['statistical_parameters']
        quality = assess_quality(len(sample), params, self.config.quality_reference_count)

        context['analysis_result'] = AnalysisResult(
            metadata=sample.metadata,
            grain_count=len(sample),
            distribution=tuple(context['distribution']),
            parameters=params,
            classification=context['classification'],
            quality=quality,
            config=self.config,
        )
        logging.info("[%s] Calidad: %d/100 (%s).", self.name, quality.quality_score, quality.gradation)
        return context
