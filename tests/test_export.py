"""
Tests for the JSON and GeoJSON export documents.
"""

import json

import numpy as np
import pytest

from grainscan.domain import GrainSample, SampleMetadata
from grainscan.nodes.export import build_analysis_document, build_geojson, to_json
from grainscan.pipeline import analyze


class TestAnalysisDocument:
    def test_sections(self, scenario_sample):
        document = build_analysis_document(analyze(scenario_sample))

        assert set(document) == {
            "grainSizeDistribution", "statisticalParameters", "classification",
            "qualityAssessment", "metadata",
        }
        assert len(document["grainSizeDistribution"]) == 20
        assert document["metadata"] == {
            "binCount": 20,
            "analysisMethod": "folk-ward",
            "timestamp": "2024-05-01T10:00:00Z",
            "sampleId": "beach-01",
            "coordinates": {"lat": 40.7128, "lng": -74.006},
        }

    def test_explicit_timestamp(self, uniform_sample):
        document = build_analysis_document(analyze(uniform_sample), timestamp="2025-01-01T00:00:00Z")
        assert document["metadata"]["timestamp"] == "2025-01-01T00:00:00Z"

    def test_default_timestamp_when_sample_has_none(self, uniform_sample):
        document = build_analysis_document(analyze(uniform_sample))
        assert document["metadata"]["timestamp"]
        assert document["metadata"]["coordinates"] is None

    def test_json_round_trip(self, scenario_sample):
        document = build_analysis_document(analyze(scenario_sample))
        parsed = json.loads(to_json(document))

        assert parsed["statisticalParameters"]["d50"] == pytest.approx(0.29)
        assert parsed["classification"]["wentworth"] == "Medium Sand"
        assert parsed["grainSizeDistribution"][-1]["cumulativePercent"] == pytest.approx(100.0)

    def test_undefined_parameters_serialised_as_null(self, uniform_sample):
        """NaN sentinels must not leak into the JSON text."""
        text = to_json(build_analysis_document(analyze(uniform_sample)))
        parsed = json.loads(text)

        assert "NaN" not in text
        assert parsed["statisticalParameters"]["sorting"] is None
        assert parsed["statisticalParameters"]["kurtosis"] is None
        assert parsed["statisticalParameters"]["sortingDescription"] == "Unknown"

    def test_numpy_values(self):
        text = to_json({"count": np.int64(3), "values": np.array([0.5, np.nan]), "ok": np.bool_(True)})
        assert json.loads(text) == {"count": 3, "values": [0.5, None], "ok": True}


class TestGeoJson:
    def test_point_uses_lng_lat_order(self, scenario_sample):
        collection = build_geojson([analyze(scenario_sample)])

        assert collection["type"] == "FeatureCollection"
        feature = collection["features"][0]
        assert feature["geometry"] == {"type": "Point", "coordinates": [-74.006, 40.7128]}
        assert feature["properties"]["grainCount"] == 8
        assert feature["properties"]["meanGrainSize"] == pytest.approx(0.29)
        assert feature["properties"]["timestamp"] == "2024-05-01T10:00:00Z"

    def test_missing_coordinates_default_to_origin(self):
        sample = GrainSample.from_values([0.2, 0.3, 0.4], SampleMetadata(sample_id="no-gps"))
        feature = build_geojson([analyze(sample)])["features"][0]
        assert feature["geometry"]["coordinates"] == [0.0, 0.0]
        assert feature["properties"]["sampleId"] == "no-gps"

    def test_one_feature_per_result(self, scenario_sample, uniform_sample):
        collection = build_geojson([analyze(scenario_sample), analyze(uniform_sample)])
        assert len(collection["features"]) == 2
        json.loads(to_json(collection))
