"""
Nodo y funciones de exportación de resultados a documentos JSON.

Convierte los objetos de valor del análisis en diccionarios con los nombres
de campo del formato de intercambio (camelCase) y los serializa, resolviendo
tipos de NumPy y valores indefinidos (NaN) que romperían el JSON estándar.
"""
import dataclasses
import json
import logging
import math
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence

import numpy as np

from grainscan.domain import AnalysisResult

from .base import PipelineNode


def _json_serializer_helper(obj):
    """
    Ayudante para que json.dumps pueda manejar tipos que no son estándar,
    como números de NumPy o Dataclasses anidados.
    """
    # 1. Tipos de NumPy (int / bool)
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.bool_):
        return bool(obj)

    # 2. Tipos de NumPy (float)
    if isinstance(obj, np.floating):
        return _clean_float(float(obj))

    # 3. Arrays de NumPy
    if isinstance(obj, np.ndarray):
        return _sanitize(obj.tolist())

    # 4. Dataclasses (por si alguno escapó al to_dict inicial)
    if dataclasses.is_dataclass(obj):
        return _sanitize(dataclasses.asdict(obj))

    # 5. Fallback a string para fechas u otros objetos
    return str(obj)


def _clean_float(value: float) -> Optional[float]:
    # NaN e infinito se exportan como null.
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def _sanitize(obj: Any) -> Any:
    """Recorre dicts/listas reemplazando floats no finitos por None."""
    if isinstance(obj, dict):
        return {key: _sanitize(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_sanitize(value) for value in obj]
    if isinstance(obj, float):
        return _clean_float(obj)
    return obj


def to_json(document: Dict[str, Any], indent: Optional[int] = 2) -> str:
    """Serializa un documento de exportación a texto JSON válido."""
    return json.dumps(_sanitize(document), default=_json_serializer_helper,
                      indent=indent, allow_nan=False, ensure_ascii=False)


def build_analysis_document(result: AnalysisResult, timestamp: Optional[str] = None) -> Dict[str, Any]:
    """
    Construye el documento de exportación completo de un análisis.

    Args:
        result (AnalysisResult): Resultado del análisis.
        timestamp (Optional[str]): Marca de tiempo del documento. Por defecto
            se usa la de la muestra o, si no tiene, la hora actual (UTC).
    """
    metadata = result.metadata.to_dict()
    document_timestamp = timestamp or metadata["timestamp"] or datetime.now(timezone.utc).isoformat()

    return {
        "grainSizeDistribution": [b.to_dict() for b in result.distribution],
        "statisticalParameters": result.parameters.to_dict(),
        "classification": result.classification.to_dict(),
        "qualityAssessment": result.quality.to_dict(),
        "metadata": {
            "binCount": result.config.bin_count,
            "analysisMethod": result.config.analysis_method,
            "timestamp": document_timestamp,
            "sampleId": metadata["sampleId"],
            "coordinates": metadata["coordinates"],
        },
    }


def build_geojson(results: Sequence[AnalysisResult]) -> Dict[str, Any]:
    """
    Construye una FeatureCollection GeoJSON con un punto por muestra.

    Las muestras sin coordenadas se ubican en [0, 0]. GeoJSON ordena las
    coordenadas como [longitud, latitud].
    """
    features = []
    for result in results:
        lat, lng = result.metadata.coordinates or (0.0, 0.0)
        features.append({
            "type": "Feature",
            "geometry": {
                "type": "Point",
                "coordinates": [lng, lat],
            },
            "properties": {
                "sampleId": result.metadata.sample_id,
                "meanGrainSize": result.parameters.d50,
                "sorting": result.parameters.sorting,
                "grainCount": result.grain_count,
                "classification": result.parameters.folk_ward,
                "timestamp": result.metadata.timestamp,
            },
        })
    return {"type": "FeatureCollection", "features": features}


class JsonExportNode(PipelineNode):
    """
    Toma el `AnalysisResult` del contexto y genera los documentos de
    exportación (análisis completo y GeoJSON).
    """
    def __init__(self, input_key: str = "analysis_result", name: str = "json_export"):
        super().__init__(name)
        self.input_key = input_key

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """
        Context Inputs:
            - `analysis_result` (AnalysisResult)

        Context Outputs:
            - `analysis_document` (dict): Documento de exportación del análisis.
            - `geojson` (dict): FeatureCollection con la muestra.
        """
        result = context.get(self.input_key)
        if result is None:
            logging.warning("[%s] No hay datos en '%s'. Se omite la exportación.", self.name, self.input_key)
            return context

        context['analysis_document'] = build_analysis_document(result)
        context['geojson'] = build_geojson([result])
        logging.info("[%s] Documentos de exportación generados (job: %s).",
                     self.name, context.get('job_id'))
        return context
