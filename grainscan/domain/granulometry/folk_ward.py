"""
Calculadora de parámetros estadísticos por el método gráfico de Folk & Ward
(1957), a partir de percentiles expresados en la escala phi.
"""
from grainscan.domain.schemas import GrainSample, StatisticalParameters

from .percentiles import mm_to_phi, percentiles
from .scales import (kurtosis_description, skewness_description,
                     sorting_description, wentworth_class, folk_class)

NAN = float("nan")

# Percentiles (mm) requeridos por las fórmulas.
REQUIRED_PERCENTILES = (5, 10, 16, 25, 30, 50, 60, 75, 84, 90, 95)


def _safe_ratio(numerator: float, denominator: float) -> float:
    """Cociente que devuelve NaN (indefinido) cuando el denominador es cero."""
    if denominator == 0:
        return NAN
    return float(numerator / denominator)


class FolkWard:
    """
    Calcula Mz, σI, SkI, KG y los coeficientes Cu y Cc de una muestra.

    Los parámetros cuyo denominador es cero se reportan como NaN en lugar de
    lanzar una excepción: la muestra es degenerada (un único valor repetido
    o un empate entre percentiles).
    """
    def __init__(self):
        self.name = "folk-ward"

    def calculate(self, sample: GrainSample) -> StatisticalParameters:
        """
        Calcula todos los parámetros estadísticos de la muestra.

        Raises:
            EmptySampleError: Si la muestra está vacía.
        """
        sample.require_non_empty()
        d = percentiles(sample.sorted_array(), REQUIRED_PERCENTILES)
        phi = {p: float(mm_to_phi(value)) for p, value in d.items()}

        mean_size = self.calculate_mean_grain_size(phi[16], phi[50], phi[84])
        sorting = self.calculate_sorting(phi[5], phi[16], phi[84], phi[95])
        skewness = self.calculate_skewness(phi[5], phi[16], phi[50], phi[84], phi[95])
        kurtosis = self.calculate_kurtosis(phi[5], phi[25], phi[75], phi[95])
        uniformity = self.calculate_uniformity(d[10], d[60])
        curvature = self.calculate_curvature(d[10], d[30], d[60])

        return StatisticalParameters(
            mean_size=mean_size,
            median_size=d[50],
            sorting=sorting,
            skewness=skewness,
            kurtosis=kurtosis,
            d10=d[10],
            d16=d[16],
            d25=d[25],
            d50=d[50],
            d75=d[75],
            d84=d[84],
            d90=d[90],
            uniformity_coefficient=uniformity,
            curvature_coefficient=curvature,
            wentworth=wentworth_class(d[50]),
            folk_ward=folk_class(sorting, d[50]),
            sorting_description=sorting_description(sorting),
            skewness_description=skewness_description(skewness),
            kurtosis_description=kurtosis_description(kurtosis),
        )

    @staticmethod
    def calculate_mean_grain_size(phi16: float, phi50: float, phi84: float) -> float:
        return (phi16 + phi50 + phi84) / 3.0

    @staticmethod
    def calculate_sorting(phi5: float, phi16: float, phi84: float, phi95: float) -> float:
        # Sin dispersión entre phi5 y phi95 la selección no está definida.
        if phi95 - phi5 == 0:
            return NAN
        return ((phi84 - phi16) / 4.0) + ((phi95 - phi5) / 6.6)

    @staticmethod
    def calculate_skewness(phi5: float, phi16: float, phi50: float, phi84: float, phi95: float) -> float:
        term1 = _safe_ratio(phi16 + phi84 - 2 * phi50, 2 * (phi84 - phi16))
        term2 = _safe_ratio(phi5 + phi95 - 2 * phi50, 2 * (phi95 - phi5))
        return term1 + term2

    @staticmethod
    def calculate_kurtosis(phi5: float, phi25: float, phi75: float, phi95: float) -> float:
        return _safe_ratio(phi95 - phi5, 2.44 * (phi75 - phi25))

    @staticmethod
    def calculate_uniformity(d10: float, d60: float) -> float:
        if d60 == 0:
            return NAN
        return _safe_ratio(d60, d10)

    @staticmethod
    def calculate_curvature(d10: float, d30: float, d60: float) -> float:
        return _safe_ratio(d30 * d30, d60 * d10)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

