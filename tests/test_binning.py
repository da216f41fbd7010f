"""
Tests for the frequency histogram and cumulative curve.
"""

import numpy as np
import pytest

from grainscan.domain import EmptySampleError, GrainSample
from grainscan.domain.granulometry import build_distribution


class TestBuildDistribution:
    """Equal-width binning over [min, max]."""

    def test_half_open_bins_with_inclusive_last_edge(self):
        """Edge values go to the upper bin, the maximum to the last bin."""
        sample = GrainSample.from_values([1.0, 2.0, 3.0, 4.0, 5.0])
        bins = build_distribution(sample, 4)

        assert [b.frequency for b in bins] == [1, 1, 1, 2]
        assert [b.size_center for b in bins] == pytest.approx([1.5, 2.5, 3.5, 4.5])
        assert [b.cumulative_percent for b in bins] == pytest.approx([20.0, 40.0, 60.0, 100.0])

    def test_bins_ordered_by_center(self, scenario_sample):
        centers = [b.size_center for b in build_distribution(scenario_sample, 20)]
        assert centers == sorted(centers)

    @pytest.mark.parametrize("bin_count", [1, 2, 7, 10, 20, 50, 100])
    def test_frequencies_sum_to_sample_size(self, bin_count):
        rng = np.random.default_rng(7)
        sample = GrainSample.from_values(rng.lognormal(mean=-1.2, sigma=0.6, size=137))
        bins = build_distribution(sample, bin_count)

        assert len(bins) == bin_count
        assert sum(b.frequency for b in bins) == 137
        assert bins[-1].cumulative_percent == pytest.approx(100.0)

    def test_cumulative_is_non_decreasing(self, scenario_sample):
        cumulative = [b.cumulative_percent for b in build_distribution(scenario_sample, 10)]
        assert all(b >= a for a, b in zip(cumulative, cumulative[1:]))

    def test_uniform_sample_goes_to_first_bin(self, uniform_sample):
        """Zero bin width: every grain lands in bin 0 without division errors."""
        bins = build_distribution(uniform_sample, 10)

        assert bins[0].frequency == 5
        assert all(b.frequency == 0 for b in bins[1:])
        assert all(b.cumulative_percent == pytest.approx(100.0) for b in bins)
        assert all(b.size_center == pytest.approx(0.3) for b in bins)

    def test_single_bin(self, scenario_sample):
        bins = build_distribution(scenario_sample, 1)
        assert bins[0].frequency == len(scenario_sample)
        assert bins[0].size_center == pytest.approx(0.30)

    def test_empty_sample_rejected(self, empty_sample):
        with pytest.raises(EmptySampleError):
            build_distribution(empty_sample, 20)

    def test_invalid_bin_count_rejected(self, scenario_sample):
        with pytest.raises(ValueError, match="bin_count"):
            build_distribution(scenario_sample, 0)

    def test_to_dict_field_names(self, scenario_sample):
        data = build_distribution(scenario_sample, 5)[0].to_dict()
        assert set(data) == {"sizeCenter", "frequency", "cumulativePercent"}
