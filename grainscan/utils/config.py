from config.settings import BIN_COUNT, QUALITY_REFERENCE_COUNT, WAVE_HEIGHT, WAVE_PERIOD
from grainscan.domain import AnalysisConfig


def load_analysis_config(bin_count=None) -> AnalysisConfig:
    """Construye la configuración del análisis desde las variables de entorno."""
    try:
        return AnalysisConfig(
            bin_count=int(bin_count if bin_count is not None else BIN_COUNT),
            wave_height=float(WAVE_HEIGHT),
            wave_period=float(WAVE_PERIOD),
            quality_reference_count=int(QUALITY_REFERENCE_COUNT),
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"Configuración de análisis inválida: {e}") from e
