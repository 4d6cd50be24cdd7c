"""Pytest fixtures for trail pack tests.

This module provides test fixtures that ensure:
1. No external API calls are made (geocoding, weather archive)
2. Isolated test environment with controlled configuration
"""

import os

import pytest

# Set test environment BEFORE importing application modules
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

from trail_pack.catalog.normalizer import normalize
from trail_pack.config import DEFAULT_CATALOG_PATH
from trail_pack.catalog.loader import load_catalog
from trail_pack.models.climate import ClimateSample
from trail_pack.models.equipment import EquipmentItem
from trail_pack.models.selection import SelectionCriteria


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset settings cache before each test to ensure clean state."""
    from trail_pack.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Catalog Fixtures
# =============================================================================


@pytest.fixture
def headlamp() -> EquipmentItem:
    """Generic item: no activities, no climate restriction."""
    return EquipmentItem(
        category="Frontale",
        family="Électronique",
        brand="Petzl",
        model="Actik Core",
        packs=["Base"],
        weight_g=75,
    )


@pytest.fixture
def crampons() -> EquipmentItem:
    """Mountaineering item above the default technical level."""
    return EquipmentItem(
        category="Crampons",
        family="Technique",
        brand="Grivel",
        model="G12",
        activities=["Alpinisme"],
        meteo=["Froid", "Neige"],
        tech_level=3,
        weight_g=1020,
    )


@pytest.fixture
def water_filter() -> EquipmentItem:
    """Self-sufficiency item."""
    return EquipmentItem(
        category="Filtre à eau",
        family="Cuisine / Hydratation",
        brand="Katadyn",
        model="BeFree",
        autonomy_only=True,
        weight_g=63,
    )


@pytest.fixture
def socks() -> EquipmentItem:
    """Item packed once per trip day."""
    return EquipmentItem(
        category="Chaussettes",
        family="Vêtements",
        model="Hike Light Crew",
        activities=["Trek", "Randonnée"],
        days_dependent=True,
        weight_g=60,
    )


@pytest.fixture
def three_item_catalog(headlamp, crampons, water_filter) -> list[EquipmentItem]:
    return [headlamp, crampons, water_filter]


@pytest.fixture
def sample_catalog() -> list[EquipmentItem]:
    """The bundled sample catalog, normalized."""
    return load_catalog(DEFAULT_CATALOG_PATH)


@pytest.fixture
def raw_records() -> list[dict]:
    """Raw records with the field shapes found in real catalog documents."""
    return [
        {"category": "Frontale", "activities": [], "packs": ["Base"], "meteo": None},
        {"category": "Filtre", "activities": "['Trek', 'Randonnée']", "packs": "Autonomie"},
        {"category": "Crampons", "activities": "[Alpinisme, Trek]", "tech_level": "3"},
        {"category": "Veste", "meteo": " Froid , Pluie ,, ", "days_dependent": 1},
        {"category": "Sac", "packs": 42, "tech_level": "abc", "weight_g": "900"},
    ]


@pytest.fixture
def normalized_records(raw_records) -> list[EquipmentItem]:
    return normalize(raw_records)


# =============================================================================
# Criteria and Weather Fixtures
# =============================================================================


@pytest.fixture
def hiking_criteria() -> SelectionCriteria:
    """Plain hiking trip, not self-sufficient."""
    return SelectionCriteria(
        activity="Randonnée",
        tech_level_ceiling=2,
        autonomy_required=False,
        trip_duration_days=5,
    )


@pytest.fixture
def cold_dry_sample() -> ClimateSample:
    return ClimateSample(
        temperature_mean_c=[5, 6, 7],
        precipitation_sum_mm=[0, 0, 0],
        snowfall_sum=[0, 0, 0],
    )


@pytest.fixture
def hot_wet_sample() -> ClimateSample:
    return ClimateSample(
        temperature_mean_c=[25, 26, 24],
        precipitation_sum_mm=[5, 4, 6],
        snowfall_sum=[0, 0, 0],
    )
