from .binning import DEFAULT_BIN_COUNT, RECOMMENDED_BIN_RANGE, build_distribution
from .classifier import TaxonomicClassifier
from .folk_ward import FolkWard
from .morphodynamics import DeanMorphodynamicModel
from .percentiles import mm_to_phi, percentile, percentiles, phi_to_mm
from .quality import assess_quality, compare_samples, quality_score
from .scales import UNKNOWN
