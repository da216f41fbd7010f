from .analysis import AnalysisConfig, AnalysisResult, ComparisonSummary, QualityAssessment
from .classification import ClassificationResult
from .distribution import DistributionBin
from .parameters import StatisticalParameters
from .sample import GrainSample, SampleMetadata
