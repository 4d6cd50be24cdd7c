"""Tests for destination presets."""

import pytest

from trail_pack.models.selection import DestinationPreset, SelectionCriteria
from trail_pack.selection.presets import DEFAULT_PRESETS, apply_preset, get_preset


class TestGetPreset:
    """Tests for preset lookup."""

    @pytest.mark.parametrize(
        "key", ["gr20", "compostelle", "thailande", "alpes", "alpinisme", "ski"]
    )
    def test_bundled_presets(self, key):
        """Test every bundled destination is available."""
        preset = get_preset(key)
        assert preset is not None
        assert preset.key == key

    def test_case_and_whitespace_insensitive(self):
        """Test keys are matched ignoring case and surrounding spaces."""
        assert get_preset("  GR20 ") == DEFAULT_PRESETS["gr20"]

    def test_unknown_key(self):
        """Test an unknown key gives None."""
        assert get_preset("everest") is None

    def test_custom_presets(self):
        """Test lookup in a caller-supplied table."""
        table = {"ecosse": DestinationPreset(key="ecosse", label="Écosse", climate="Pluie")}
        assert get_preset("ecosse", table).label == "Écosse"
        assert get_preset("gr20", table) is None

    def test_gr20_values(self):
        """Test the GR20 preset describes a cold self-sufficient trek."""
        preset = DEFAULT_PRESETS["gr20"]
        assert preset.label == "GR20 autonomie"
        assert preset.activity == "Trek"
        assert preset.climate == "Froid"
        assert preset.autonomy is True
        assert preset.tech_level == 2

    def test_ski_values(self):
        """Test the ski preset targets snow."""
        preset = DEFAULT_PRESETS["ski"]
        assert preset.activity == "Ski rando"
        assert preset.climate == "Neige"
        assert preset.tech_level == 3


class TestApplyPreset:
    """Tests for pre-filling criteria from a preset."""

    def test_fills_unset_fields(self):
        """Test an empty criteria set takes every preset value."""
        criteria = apply_preset(SelectionCriteria(), DEFAULT_PRESETS["gr20"])
        assert criteria.activity == "Trek"
        assert criteria.climate == "Froid"
        assert criteria.autonomy_required is True
        assert criteria.tech_level_ceiling == 2
        assert criteria.destination == "gr20"

    def test_user_values_win(self):
        """Test values the user set are kept."""
        criteria = SelectionCriteria(activity="Randonnée", climate="Chaud", autonomy_required=False)
        applied = apply_preset(criteria, DEFAULT_PRESETS["gr20"])
        assert applied.activity == "Randonnée"
        assert applied.climate == "Chaud"
        assert applied.autonomy_required is False

    def test_tech_level_always_from_preset(self):
        """Test the technical ceiling follows the destination."""
        criteria = SelectionCriteria(tech_level_ceiling=1)
        applied = apply_preset(criteria, DEFAULT_PRESETS["alpinisme"])
        assert applied.tech_level_ceiling == 3

    def test_input_criteria_untouched(self):
        """Test the input criteria are not modified."""
        criteria = SelectionCriteria(trip_duration_days=4)
        applied = apply_preset(criteria, DEFAULT_PRESETS["compostelle"])
        assert criteria.activity is None
        assert criteria.destination is None
        assert applied.trip_duration_days == 4
