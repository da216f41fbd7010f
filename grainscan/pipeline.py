"""
Define el pipeline principal de granulometría, que orquesta la secuencia de
pasos del análisis de una muestra.
"""
import logging
import time
import uuid
from typing import Any, Dict, List, Optional

from grainscan.domain import AnalysisConfig, AnalysisResult, GrainSample
from grainscan.domain.granulometry import (DeanMorphodynamicModel, FolkWard,
                                           TaxonomicClassifier)
from grainscan.nodes.base import PipelineNode
from grainscan.nodes.export import JsonExportNode
from grainscan.nodes.granulometry import (AnalysisResultNode, ClassificationNode,
                                          DistributionNode, FolkWardNode)


class GranulometryPipeline:
    """
    Orquesta la ejecución de la secuencia de análisis granulométrico.

    Se instancia una vez por configuración y puede reutilizarse para
    cualquier número de muestras: los nodos no guardan estado entre
    ejecuciones y `run` trabaja sobre una copia del contexto recibido, por lo
    que análisis concurrentes no interfieren entre sí.
    """
    def __init__(self, config: Optional[AnalysisConfig] = None, export: bool = True):
        """
        Inicializa el pipeline de granulometría.

        Args:
            config (Optional[AnalysisConfig]): Configuración del análisis.
            export (bool): Si es True, agrega el nodo de exportación JSON.
        """
        self.config = config or AnalysisConfig()
        self.export = export

        self.nodes: List[PipelineNode] = self._build_pipeline()
        logging.info("Pipeline de granulometría construido con %d nodos.", len(self.nodes))

    def _build_pipeline(self) -> List[PipelineNode]:
        """
        Define la secuencia de pasos del pipeline. El orden de la lista
        define el flujo de ejecución.
        """
        morphodynamic_model = DeanMorphodynamicModel(
            wave_height=self.config.wave_height,
            wave_period=self.config.wave_period,
        )
        nodes: List[PipelineNode] = [
            # 1. Histograma de tamaños y curva acumulada.
            DistributionNode(bin_count=self.config.bin_count, name="Distribution"),
            # 2. Parámetros de Folk & Ward.
            FolkWardNode(calculator=FolkWard(), name="Statistics_FolkWard"),
            # 3. Clasificación taxonómica y recomendaciones.
            ClassificationNode(
                classifier=TaxonomicClassifier(morphodynamic_model),
                name="Classification"
            ),
            # 4. Calidad y ensamblado del resultado.
            AnalysisResultNode(config=self.config, name="Result"),
        ]
        if self.export:
            # 5. Documentos JSON / GeoJSON para los consumidores externos.
            nodes.append(JsonExportNode(name="Export"))
        return nodes

    def run(self, initial_context: Dict[str, Any]) -> Dict[str, Any]:
        """
        Ejecuta la secuencia completa de nodos sobre un contexto dado.

        Args:
            initial_context (Dict[str, Any]): Contexto inicial del trabajo.
                Debe contener como mínimo la clave 'sample' (GrainSample).

        Returns:
            Dict[str, Any]: El contexto final, enriquecido con los resultados
            de todos los nodos, incluyendo los tiempos de ejecución.

        Raises:
            EmptySampleError: Si la muestra está vacía.
            Exception: Si cualquier nodo falla, la excepción se propaga.
        """
        context = initial_context.copy()
        context['execution_times'] = {}

        sample = context.get('sample')
        if sample is None:
            raise ValueError("El contexto inicial no contiene la clave 'sample'.")
        sample.require_non_empty()

        job_id = context.get('job_id') or f"job_{uuid.uuid4().hex[:8]}"
        context['job_id'] = job_id
        logging.info(">>> Iniciando JOB: %s (%d granos)", job_id, len(sample))

        total_start_time = time.perf_counter()

        for node in self.nodes:
            node_start_time = time.perf_counter()
            try:
                context = node.run(context)
                context['execution_times'][node.name] = time.perf_counter() - node_start_time

            except Exception as e:
                logging.error(
                    "!!! Error en nodo '%s' (Job: %s): %s",
                    node.name, job_id, e, exc_info=True
                )
                raise

        total_duration = time.perf_counter() - total_start_time
        context['execution_times']['total_pipeline'] = total_duration

        logging.info("<<< JOB %s finalizado en %.4f segundos.", job_id, total_duration)

        return context

    def analyze(self, sample: GrainSample, job_id: Optional[str] = None) -> AnalysisResult:
        """Ejecuta el pipeline y devuelve sólo el `AnalysisResult`."""
        context = self.run({'sample': sample, 'job_id': job_id})
        return context['analysis_result']


def analyze(sample: GrainSample, config: Optional[AnalysisConfig] = None) -> AnalysisResult:
    """
    Analiza una muestra con la configuración indicada. Función pura de
    `(sample, config)`.

    Raises:
        EmptySampleError: Si la muestra está vacía.
    """
    return GranulometryPipeline(config, export=False).analyze(sample)
