"""Tests for location models."""

import pytest

from trail_pack.models.location import Coordinates, GeocodedPlace


class TestCoordinates:
    """Tests for the Coordinates model."""

    def test_valid_coordinates(self):
        """Test creating valid coordinates."""
        coords = Coordinates(latitude=42.1497, longitude=9.11)
        assert coords.latitude == 42.1497
        assert coords.longitude == 9.11

    def test_boundary_values(self):
        """Test poles and the date line are accepted."""
        assert Coordinates(latitude=90, longitude=0).latitude == 90
        assert Coordinates(latitude=-90, longitude=0).latitude == -90
        assert Coordinates(latitude=0, longitude=180).longitude == 180
        assert Coordinates(latitude=0, longitude=-180).longitude == -180

    @pytest.mark.parametrize(
        "latitude, longitude",
        [(91, 0), (-91, 0), (0, 181), (0, -181)],
    )
    def test_out_of_range(self, latitude, longitude):
        """Test out-of-range values are rejected."""
        with pytest.raises(ValueError):
            Coordinates(latitude=latitude, longitude=longitude)

    def test_str(self):
        """Test the compact 'lat,lon' form."""
        assert str(Coordinates(latitude=45.8326, longitude=6.8652)) == "45.8326,6.8652"


class TestGeocodedPlace:
    """Tests for the GeocodedPlace model."""

    def test_shortcuts(self):
        """Test latitude and longitude are exposed on the place."""
        place = GeocodedPlace(
            coordinates=Coordinates(latitude=-33.8688, longitude=151.2093),
            display_name="Sydney, New South Wales, Australia",
        )
        assert place.latitude == pytest.approx(-33.8688)
        assert place.longitude == pytest.approx(151.2093)

    def test_display_name_required(self):
        """Test a place needs a name."""
        with pytest.raises(ValueError):
            GeocodedPlace(coordinates=Coordinates(latitude=0, longitude=0))
