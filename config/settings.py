import os
from dotenv import load_dotenv

load_dotenv()

BIN_COUNT = os.getenv("bin_count", "20")
WAVE_HEIGHT = os.getenv("wave_height", "1.5")
WAVE_PERIOD = os.getenv("wave_period", "10.0")
QUALITY_REFERENCE_COUNT = os.getenv("quality_reference_count", "500")

INPUT_DIR = os.getenv("input_dir", "samples")
OUTPUT_DIR = os.getenv("output_dir", "results")

LOG_LEVEL = os.getenv("log_level", "INFO")
