from .config import load_analysis_config
from .samples import find_sample_files, load_sample
