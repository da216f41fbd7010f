"""
Tests for the local processing script.
"""

import json

import main


class TestMain:
    def test_processes_directory(self, tmp_path):
        input_dir = tmp_path / "samples"
        input_dir.mkdir()
        (input_dir / "north.csv").write_text("0.20, 0.22, 0.25, 0.28, 0.30, 0.32, 0.35, 0.40")
        (input_dir / "south.json").write_text(json.dumps({
            "diameters": [0.8, 0.9, 1.0, 1.1, 1.2],
            "metadata": {"coordinates": {"lat": -33.0, "lng": -71.6}},
        }))
        (input_dir / "broken.csv").write_text("0.3, -1")
        output_dir = tmp_path / "results"

        exit_code = main.main(["--input", str(input_dir), "--output", str(output_dir), "--bins", "15"])

        assert exit_code == 0
        north = json.loads((output_dir / "north_analysis.json").read_text())
        assert north["metadata"]["binCount"] == 15
        assert north["statisticalParameters"]["wentworth"] == "Medium Sand"
        assert not (output_dir / "broken_analysis.json").exists()

        geojson = json.loads((output_dir / "samples.geojson").read_text())
        assert len(geojson["features"]) == 2

    def test_single_file(self, tmp_path):
        sample = tmp_path / "one.txt"
        sample.write_text("0.5 0.6 0.7")
        assert main.main(["--input", str(sample), "--output", str(tmp_path / "out")]) == 0
        assert (tmp_path / "out" / "one_analysis.json").exists()

    def test_missing_input(self, tmp_path):
        assert main.main(["--input", str(tmp_path / "nope"), "--output", str(tmp_path)]) == 1

    def test_no_valid_samples(self, tmp_path):
        (tmp_path / "bad.csv").write_text("0")
        assert main.main(["--input", str(tmp_path), "--output", str(tmp_path / "out")]) == 1
