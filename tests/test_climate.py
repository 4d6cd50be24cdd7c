"""Tests for climate classification."""

import pytest

from trail_pack.climate.classifier import (
    InsufficientDataError,
    categorize_temperature,
    classify,
)
from trail_pack.models.climate import (
    ClimateCategory,
    ClimateSample,
    ClimateThresholds,
)


class TestClimateSample:
    """Tests for the ClimateSample model."""

    def test_parallel_series(self):
        """Test a sample with equal-length series."""
        sample = ClimateSample(
            temperature_mean_c=[1, 2],
            precipitation_sum_mm=[0, None],
            snowfall_sum=[0, 0],
        )
        assert len(sample) == 2
        assert sample.is_empty is False

    def test_mismatched_series_rejected(self):
        """Test series of different lengths are rejected."""
        with pytest.raises(ValueError, match="same length"):
            ClimateSample(
                temperature_mean_c=[1, 2, 3],
                precipitation_sum_mm=[0],
                snowfall_sum=[0, 0, 0],
            )

    def test_empty_sample(self):
        """Test the default sample is empty."""
        assert ClimateSample().is_empty is True


class TestCategorizeTemperature:
    """Tests for the temperature thresholds."""

    @pytest.mark.parametrize(
        "mean, expected",
        [
            (-5.0, ClimateCategory.COLD),
            (10.0, ClimateCategory.COLD),
            (10.1, ClimateCategory.TEMPERATE),
            (21.9, ClimateCategory.TEMPERATE),
            (22.0, ClimateCategory.HOT),
            (35.0, ClimateCategory.HOT),
        ],
    )
    def test_default_thresholds(self, mean, expected):
        """Test boundaries are inclusive on both sides."""
        assert categorize_temperature(mean, ClimateThresholds()) == expected

    def test_custom_thresholds(self):
        """Test thresholds can be tuned."""
        thresholds = ClimateThresholds(cold_max_c=5, hot_min_c=28)
        assert categorize_temperature(8, thresholds) == ClimateCategory.TEMPERATE
        assert categorize_temperature(25, thresholds) == ClimateCategory.TEMPERATE


class TestClassify:
    """Tests for sample classification."""

    def test_cold_and_dry(self, cold_dry_sample: ClimateSample):
        """Test a cold, dry month."""
        assessment = classify(cold_dry_sample)
        assert assessment.category == ClimateCategory.COLD
        assert assessment.heavy_rain is False
        assert assessment.heavy_snow is False
        assert assessment.filter_label == ClimateCategory.COLD
        assert assessment.mean_temperature_c == pytest.approx(6.0)

    def test_heavy_rain_overrides_hot(self, hot_wet_sample: ClimateSample):
        """Test heavy rain wins over a hot temperature category."""
        assessment = classify(hot_wet_sample)
        assert assessment.category == ClimateCategory.HOT
        assert assessment.heavy_rain is True
        assert assessment.filter_label == ClimateCategory.RAIN
        assert assessment.mean_precipitation_mm == pytest.approx(5.0)

    def test_heavy_snow_overrides_rain(self):
        """Test heavy snow wins over heavy rain."""
        sample = ClimateSample(
            temperature_mean_c=[-2, -1, 0],
            precipitation_sum_mm=[4, 5, 6],
            snowfall_sum=[0.2, 0.3, 0.0],
        )
        assessment = classify(sample)
        assert assessment.heavy_rain is True
        assert assessment.heavy_snow is True
        assert assessment.total_snowfall == pytest.approx(0.5)
        assert assessment.filter_label == ClimateCategory.SNOW

    def test_snow_threshold_is_strict(self):
        """Test cumulative snowfall equal to the threshold is not heavy snow."""
        sample = ClimateSample(
            temperature_mean_c=[0, 0],
            precipitation_sum_mm=[0, 0],
            snowfall_sum=[0.2, 0.2],
        )
        assert classify(sample, ClimateThresholds(heavy_snow_total=0.4)).heavy_snow is False

    def test_rain_threshold_is_inclusive(self):
        """Test mean precipitation equal to the threshold is heavy rain."""
        sample = ClimateSample(
            temperature_mean_c=[15, 15],
            precipitation_sum_mm=[2, 4],
            snowfall_sum=[0, 0],
        )
        assert classify(sample).heavy_rain is True

    def test_missing_values_ignored(self):
        """Test missing temperatures are skipped and missing rain counts as dry."""
        sample = ClimateSample(
            temperature_mean_c=[20, None, 24, float("nan")],
            precipitation_sum_mm=[None, None, 1, 1],
            snowfall_sum=[None, None, None, None],
        )
        assessment = classify(sample)
        assert assessment.mean_temperature_c == pytest.approx(22.0)
        assert assessment.mean_precipitation_mm == pytest.approx(0.5)
        assert assessment.total_snowfall == 0.0
        assert assessment.category == ClimateCategory.HOT

    def test_narrative(self, hot_wet_sample: ClimateSample):
        """Test the narrative mentions temperature and qualifiers."""
        assessment = classify(hot_wet_sample)
        assert assessment.narrative == "mean temp ≈ 25.0 °C, rainy"

    def test_narrative_snow(self):
        """Test the snow qualifier."""
        sample = ClimateSample(
            temperature_mean_c=[-4.3],
            precipitation_sum_mm=[0],
            snowfall_sum=[3],
        )
        assert classify(sample).narrative == "mean temp ≈ -4.3 °C, snow possible"

    def test_empty_sample_fails(self):
        """Test an empty sample cannot be classified."""
        with pytest.raises(InsufficientDataError):
            classify(ClimateSample())

    def test_no_temperature_fails(self):
        """Test a sample without any temperature cannot be classified."""
        sample = ClimateSample(
            temperature_mean_c=[None, None],
            precipitation_sum_mm=[1, 2],
            snowfall_sum=[0, 0],
        )
        with pytest.raises(InsufficientDataError) as exc_info:
            classify(sample)
        assert exc_info.value.sample_size == 2

    def test_thresholds_from_settings(self, cold_dry_sample: ClimateSample, monkeypatch):
        """Test default thresholds come from configuration."""
        monkeypatch.setenv("CLIMATE_COLD_MAX_C", "5")
        assessment = classify(cold_dry_sample)
        assert assessment.category == ClimateCategory.TEMPERATE

    def test_sparse_rain_averaged_over_window(self):
        """Test one wet day among unreported days is not heavy rain."""
        sample = ClimateSample(
            temperature_mean_c=[15, 15, 15, 15],
            precipitation_sum_mm=[4, None, None, None],
            snowfall_sum=[0, 0, 0, 0],
        )
        assessment = classify(sample)
        assert assessment.mean_precipitation_mm == pytest.approx(1.0)
        assert assessment.heavy_rain is False

    def test_infinite_values_ignored(self):
        """Test infinite readings are treated as missing."""
        sample = ClimateSample(
            temperature_mean_c=[float("inf"), 8, 10],
            precipitation_sum_mm=[float("inf"), 0, 0],
            snowfall_sum=[float("-inf"), 0, 0],
        )
        assessment = classify(sample)
        assert assessment.mean_temperature_c == pytest.approx(9.0)
        assert assessment.mean_precipitation_mm == 0.0
        assert assessment.total_snowfall == 0.0
        assert assessment.category == ClimateCategory.COLD
