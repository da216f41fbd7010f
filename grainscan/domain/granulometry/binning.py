"""
Construcción del histograma de frecuencias y de la curva acumulada a partir
de los diámetros medidos.
"""
from typing import List

import numpy as np

from grainscan.domain.schemas import DistributionBin, GrainSample

DEFAULT_BIN_COUNT = 20
RECOMMENDED_BIN_RANGE = (10, 50)


def build_distribution(sample: GrainSample, bin_count: int = DEFAULT_BIN_COUNT) -> List[DistributionBin]:
    """
    Divide el rango [min, max] de la muestra en `bin_count` intervalos de
    igual ancho y cuenta los granos de cada uno.

    Cada bin i cubre `[min + i*w, min + (i+1)*w)`; el último incluye su borde
    superior para capturar el máximo. Si todos los diámetros son iguales
    (w = 0), todos caen en el primer bin.

    Args:
        sample (GrainSample): Muestra de diámetros (mm).
        bin_count (int): Número de bins.

    Returns:
        List[DistributionBin]: Bins ordenados por centro ascendente. El
        porcentaje acumulado del último bin es 100.

    Raises:
        EmptySampleError: Si la muestra está vacía.
        ValueError: Si `bin_count` < 1.
    """
    sample.require_non_empty()
    if bin_count < 1:
        raise ValueError(f"bin_count debe ser >= 1 (recibido: {bin_count}).")

    diameters = sample.as_array()
    n = diameters.size
    min_size = float(diameters.min())
    max_size = float(diameters.max())
    bin_width = (max_size - min_size) / bin_count

    bin_starts = min_size + np.arange(bin_count) * bin_width
    bin_centers = bin_starts + bin_width / 2

    if bin_width == 0:
        counts_per_bin = np.zeros(bin_count, dtype=int)
        counts_per_bin[0] = n
    else:
        bin_edges = min_size + np.arange(bin_count + 1) * bin_width
        # np.digitize asigna el intervalo semiabierto; el máximo (y cualquier
        # desborde por redondeo del último borde) va al último bin.
        bin_indices = np.digitize(diameters, bin_edges) - 1
        bin_indices = np.clip(bin_indices, 0, bin_count - 1)
        counts_per_bin = np.bincount(bin_indices, minlength=bin_count)

    cumulative_pct = np.cumsum(counts_per_bin) / n * 100.0

    return [
        DistributionBin(
            size_center=float(bin_centers[i]),
            frequency=int(counts_per_bin[i]),
            cumulative_percent=float(cumulative_pct[i]),
        ) for i in range(bin_count)
    ]
