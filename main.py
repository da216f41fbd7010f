"""
Script de procesamiento local de muestras de granos.

Analiza cada archivo de muestra (.json, .csv, .txt) de una carpeta, escribe
un documento JSON por muestra y un GeoJSON con todas ellas.
"""
import argparse
import logging
import sys
from pathlib import Path

from config.settings import INPUT_DIR, LOG_LEVEL, OUTPUT_DIR
from grainscan.domain.granulometry import compare_samples
from grainscan.nodes.export import build_geojson, to_json
from grainscan.pipeline import GranulometryPipeline
from grainscan.utils import find_sample_files, load_analysis_config, load_sample


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Análisis granulométrico de Folk & Ward.")
    parser.add_argument("--input", default=INPUT_DIR,
                        help="Archivo de muestra o carpeta con muestras (.json, .csv, .txt).")
    parser.add_argument("--output", default=OUTPUT_DIR,
                        help="Carpeta donde se escriben los resultados.")
    parser.add_argument("--bins", type=int, default=None,
                        help="Número de bins del histograma (recomendado 10-50).")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(LOG_LEVEL).upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logging.info(">>> Iniciando análisis granulométrico...")

    input_path = Path(args.input)
    if not input_path.exists():
        logging.error("No se encontró la entrada: %s", input_path.absolute())
        return 1

    try:
        config = load_analysis_config(args.bins)
    except ValueError as e:
        logging.critical("Error fatal cargando la configuración: %s", e)
        return 1

    sample_files = [input_path] if input_path.is_file() else find_sample_files(input_path)
    if not sample_files:
        logging.warning("No se encontraron muestras en %s", input_path)
        return 1

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    pipeline = GranulometryPipeline(config)
    results = []

    logging.info("Se encontraron %d muestras para procesar.", len(sample_files))
    for sample_path in sample_files:
        logging.info("--- Procesando: %s ---", sample_path.name)
        try:
            sample = load_sample(sample_path)
            context = pipeline.run({'sample': sample, 'job_id': sample_path.stem})
        except Exception as e:
            logging.error("Fallo al procesar %s: %s", sample_path.name, e, exc_info=True)
            continue

        output_path = output_dir / f"{sample_path.stem}_analysis.json"
        output_path.write_text(to_json(context['analysis_document']), encoding="utf-8")
        results.append(context['analysis_result'])
        logging.info("Guardado: %s", output_path)

    if not results:
        logging.error("Ninguna muestra pudo ser procesada.")
        return 1

    geojson_path = output_dir / "samples.geojson"
    geojson_path.write_text(to_json(build_geojson(results)), encoding="utf-8")

    summary = compare_samples(results)
    logging.info(
        "Resumen: %d muestras, D50 promedio %.3f mm, rango %.3f mm, %d granos en total.",
        summary.sample_count, summary.average_mean_size, summary.size_range, summary.total_grains
    )
    logging.info(">>> Procesamiento finalizado.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
