from .errors import EmptySampleError, GranulometryError, InvalidMeasurementError
from .schemas import (AnalysisConfig, AnalysisResult, ClassificationResult,
                      ComparisonSummary, DistributionBin, GrainSample,
                      QualityAssessment, SampleMetadata, StatisticalParameters)
