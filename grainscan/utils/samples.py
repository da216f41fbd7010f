"""
Carga de muestras de granos desde archivos locales (.json, .csv, .txt).
"""
import json
import re
from pathlib import Path
from typing import List, Union

from grainscan.domain import GrainSample, SampleMetadata

SUPPORTED_EXTENSIONS = ('.json', '.csv', '.txt')

_SEPARATORS = re.compile(r"[,;\s]+")


def load_sample(path: Union[str, Path]) -> GrainSample:
    """
    Lee una muestra de diámetros (mm) desde un archivo.

    - JSON: una lista de diámetros, o un objeto
      `{"diameters": [...], "metadata": {...}}`.
    - CSV/TXT: números separados por comas, punto y coma, espacios o saltos
      de línea. Las líneas que empiezan con '#' se ignoran.

    Si los metadatos no traen identificador se usa el nombre del archivo.

    Raises:
        ValueError: Si el formato no es soportado o el contenido no es válido.
        InvalidMeasurementError: Si algún diámetro es <= 0.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise ValueError(f"Formato no soportado: '{path.name}'.")

    text = path.read_text(encoding="utf-8")
    metadata = {}

    if suffix == '.json':
        data = json.loads(text)
        if isinstance(data, dict):
            diameters = data.get("diameters")
            metadata = data.get("metadata") or {}
            if not isinstance(metadata, dict):
                raise ValueError(f"'{path.name}': 'metadata' debe ser un objeto.")
        else:
            diameters = data
        if not isinstance(diameters, list):
            raise ValueError(f"'{path.name}' no contiene una lista de diámetros.")
    else:
        diameters = _parse_numbers(text, path.name)

    if metadata.get("sample_id") is None and metadata.get("id") is None:
        metadata["sample_id"] = path.stem
    return GrainSample.from_values(diameters, SampleMetadata.from_dict(metadata))


def _parse_numbers(text: str, source: str) -> List[float]:
    values = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        for token in _SEPARATORS.split(line):
            if not token:
                continue
            try:
                values.append(float(token))
            except ValueError:
                raise ValueError(f"Valor no numérico en '{source}': {token!r}") from None
    return values


def find_sample_files(directory: Union[str, Path]) -> List[Path]:
    directory = Path(directory)
    files = set()
    for ext in SUPPORTED_EXTENSIONS:
        files.update(directory.glob(f"*{ext}"))
        files.update(directory.glob(f"*{ext.upper()}"))
    return sorted(files)
