"""
Tests for quality assessment and sample comparison.
"""

import math

import pytest

from grainscan.domain import AnalysisConfig, GrainSample
from grainscan.domain.granulometry import assess_quality, compare_samples, quality_score
from grainscan.pipeline import analyze


class TestQualityScore:
    @pytest.mark.parametrize(
        ("grains", "expected"),
        [(0, 0), (8, 2), (5, 1), (400, 80), (500, 100), (5000, 100)],
    )
    def test_score(self, grains, expected):
        assert quality_score(grains) == expected

    def test_custom_reference(self):
        assert quality_score(50, reference_count=100) == 50

    def test_assessment(self, scenario_sample):
        result = analyze(scenario_sample)
        quality = assess_quality(400, result.parameters)

        assert quality.quality_score == 80
        assert quality.is_high_quality
        assert quality.gradation == "Poorly Graded"

    def test_reference_count_from_config(self, scenario_sample):
        result = analyze(scenario_sample, AnalysisConfig(quality_reference_count=10))
        assert result.quality.quality_score == 80
        assert result.quality.to_dict()["isHighQuality"] is True

    def test_uniform_gradation_unknown_only_if_undefined(self, uniform_sample):
        """Cu = Cc = 1 is defined, so a uniform sample is poorly graded."""
        assert analyze(uniform_sample).quality.gradation == "Poorly Graded"


class TestCompareSamples:
    def test_summary(self, scenario_sample):
        coarse = GrainSample.from_values([0.8, 0.9, 1.0, 1.1, 1.2])
        results = [analyze(scenario_sample), analyze(coarse)]
        summary = compare_samples(results)

        assert summary.sample_count == 2
        assert summary.average_mean_size == pytest.approx((0.29 + 1.0) / 2)
        assert summary.size_range == pytest.approx(1.0 - 0.29)
        assert summary.total_grains == 13

    def test_undefined_sorting_ignored(self, scenario_sample, uniform_sample):
        scenario = analyze(scenario_sample)
        summary = compare_samples([scenario, analyze(uniform_sample)])
        assert summary.average_sorting == pytest.approx(scenario.parameters.sorting)

    def test_all_sorting_undefined(self, uniform_sample):
        summary = compare_samples([analyze(uniform_sample)])
        assert math.isnan(summary.average_sorting)
        assert summary.size_range == 0.0

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            compare_samples([])
