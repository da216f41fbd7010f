"""
Tests for the threshold tables shared by the calculator and the classifier.
"""

import pytest

from grainscan.domain.granulometry.scales import (UNKNOWN, classify_by_thresholds,
                                                  folk_class, gradation_description,
                                                  kurtosis_description, shepard_class,
                                                  skewness_description,
                                                  sorting_description, wentworth_class)

NAN = float("nan")


class TestWentworth:
    """A value equal to a threshold falls into the next, coarser class."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0.01, "Silt"),
            (0.0625, "Very Fine Sand"),
            (0.1, "Very Fine Sand"),
            (0.125, "Fine Sand"),
            (0.25, "Medium Sand"),
            (0.29, "Medium Sand"),
            (0.4999, "Medium Sand"),
            (0.5, "Coarse Sand"),
            (1.0, "Very Coarse Sand"),
            (2.0, "Granule"),
            (4.0, "Pebble"),
            (60.0, "Pebble"),
        ],
    )
    def test_brackets(self, size, expected):
        assert wentworth_class(size) == expected

    def test_undefined(self):
        assert wentworth_class(NAN) == UNKNOWN
        assert wentworth_class(None) == UNKNOWN


class TestDescriptions:
    @pytest.mark.parametrize(
        ("sorting", "expected"),
        [
            (0.2, "Very Well Sorted"),
            (0.35, "Well Sorted"),
            (0.5, "Moderately Well Sorted"),
            (0.71, "Moderately Sorted"),
            (0.9, "Moderately Sorted"),
            (1.0, "Poorly Sorted"),
            (2.0, "Very Poorly Sorted"),
            (4.0, "Extremely Poorly Sorted"),
        ],
    )
    def test_sorting(self, sorting, expected):
        assert sorting_description(sorting) == expected

    @pytest.mark.parametrize(
        ("skewness", "expected"),
        [
            (-0.5, "Very Coarse Skewed"),
            (-0.3, "Coarse Skewed"),
            (-0.1, "Near Symmetrical"),
            (0.0, "Near Symmetrical"),
            (0.1, "Fine Skewed"),
            (0.3, "Very Fine Skewed"),
        ],
    )
    def test_skewness(self, skewness, expected):
        assert skewness_description(skewness) == expected

    @pytest.mark.parametrize(
        ("kurtosis", "expected"),
        [
            (0.5, "Very Platykurtic"),
            (0.67, "Platykurtic"),
            (0.9, "Mesokurtic"),
            (1.11, "Leptokurtic"),
            (1.5, "Very Leptokurtic"),
            (3.0, "Extremely Leptokurtic"),
        ],
    )
    def test_kurtosis(self, kurtosis, expected):
        assert kurtosis_description(kurtosis) == expected

    def test_undefined_values_are_unknown(self):
        assert sorting_description(NAN) == UNKNOWN
        assert skewness_description(NAN) == UNKNOWN
        assert kurtosis_description(NAN) == UNKNOWN


class TestCompositeClasses:
    def test_folk_joins_sorting_and_wentworth(self):
        assert folk_class(0.9, 0.5) == "Moderately Sorted Coarse Sand"
        assert folk_class(0.3, 0.1) == "Very Well Sorted Very Fine Sand"

    def test_folk_unknown_when_any_part_undefined(self):
        assert folk_class(NAN, 0.5) == UNKNOWN
        assert folk_class(0.9, NAN) == UNKNOWN

    @pytest.mark.parametrize(
        ("size", "expected"),
        [(0.03, "Mud"), (0.0625, "Sand"), (1.9, "Sand"), (2.0, "Gravel")],
    )
    def test_shepard(self, size, expected):
        assert shepard_class(size) == expected

    def test_gradation(self):
        assert gradation_description(6.0, 1.5) == "Well Graded"
        assert gradation_description(4.0, 1.5) == "Poorly Graded"
        assert gradation_description(6.0, 3.0) == "Poorly Graded"
        assert gradation_description(NAN, 1.0) == UNKNOWN

    def test_generic_lookup_uses_last_label_past_table(self):
        assert classify_by_thresholds(10.0, [(1.0, "low"), (5.0, "high")]) == "high"
