"""
Define los esquemas de datos para una muestra de granos medidos y sus
metadatos de adquisición.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple

import numpy as np

from grainscan.domain.errors import EmptySampleError, InvalidMeasurementError


@dataclass(frozen=True)
class SampleMetadata:
    """
    Metadatos opcionales de una muestra. El motor no los interpreta: se
    transportan sin modificar hasta los consumidores (exportación, mapas).

    Attributes:
        sample_id (Optional[str]): Identificador de la muestra.
        coordinates (Optional[Tuple[float, float]]): Par (latitud, longitud)
            en grados decimales.
        timestamp (Optional[str]): Fecha de captura en formato ISO 8601.
    """
    sample_id: Optional[str] = None
    coordinates: Optional[Tuple[float, float]] = None
    timestamp: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SampleMetadata":
        """
        Construye los metadatos desde un diccionario. Acepta coordenadas como
        `{"lat": .., "lng": ..}` o como lista `[lat, lng]`.
        """
        if not data:
            return cls()

        coords = data.get("coordinates")
        if isinstance(coords, dict):
            coords = (float(coords["lat"]), float(coords["lng"]))
        elif coords is not None:
            lat, lng = coords
            coords = (float(lat), float(lng))

        sample_id = data.get("sample_id", data.get("id"))
        return cls(
            sample_id=str(sample_id) if sample_id is not None else None,
            coordinates=coords,
            timestamp=data.get("timestamp"),
        )

    def to_dict(self) -> Dict[str, Any]:
        coords = None
        if self.coordinates is not None:
            coords = {"lat": self.coordinates[0], "lng": self.coordinates[1]}
        return {
            "sampleId": self.sample_id,
            "coordinates": coords,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class GrainSample:
    """
    Colección inmutable de diámetros de grano, en milímetros.

    El orden de los valores es irrelevante. La muestra puede estar vacía
    (caso degenerado), pero todas las operaciones del motor la rechazan con
    `EmptySampleError`. Cualquier diámetro <= 0 o no finito se rechaza al
    construir la muestra, ya que la conversión a phi exige valores positivos.

    Attributes:
        diameters (Tuple[float, ...]): Diámetros medidos (mm).
        metadata (SampleMetadata): Metadatos de la muestra.
    """
    diameters: Tuple[float, ...] = ()
    metadata: SampleMetadata = field(default_factory=SampleMetadata)

    def __post_init__(self):
        values = tuple(float(d) for d in self.diameters)
        for idx, value in enumerate(values):
            if not math.isfinite(value) or value <= 0:
                raise InvalidMeasurementError(idx, value)
        # frozen=True: se normaliza el contenido a una tupla de floats.
        object.__setattr__(self, "diameters", values)

    @classmethod
    def from_values(cls, values: Iterable[float], metadata: Optional[SampleMetadata] = None) -> "GrainSample":
        return cls(diameters=tuple(values), metadata=metadata or SampleMetadata())

    def __len__(self) -> int:
        return len(self.diameters)

    @property
    def is_empty(self) -> bool:
        return len(self.diameters) == 0

    def require_non_empty(self) -> None:
        if self.is_empty:
            raise EmptySampleError()

    def as_array(self) -> np.ndarray:
        return np.asarray(self.diameters, dtype=float)

    def sorted_array(self) -> np.ndarray:
        """Devuelve los diámetros ordenados de forma ascendente."""
        return np.sort(self.as_array())
