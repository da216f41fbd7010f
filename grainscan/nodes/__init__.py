from .base import PipelineNode
from .export import JsonExportNode, build_analysis_document, build_geojson, to_json
from .granulometry import AnalysisResultNode, ClassificationNode, DistributionNode, FolkWardNode
