import pytest
from pydantic import ValidationError

from bucketlist.schemas.geo import Coordinates
from bucketlist.schemas.location import Location


@pytest.mark.parametrize(
    "latitude, longitude",
    [(0.0, 0.0), (90.0, 180.0), (-90.0, -180.0), (60.1699, 24.9384)],
)
def test_coordinates_within_range(latitude, longitude):
    """Test that boundary and ordinary values are accepted"""
    coordinates = Coordinates(latitude=latitude, longitude=longitude)

    assert coordinates.latitude == latitude
    assert coordinates.longitude == longitude


@pytest.mark.parametrize(
    "latitude, longitude, field",
    [(90.5, 0.0, "latitude"), (-91.0, 0.0, "latitude"), (0.0, 180.1, "longitude"), (0.0, -181.0, "longitude")],
)
def test_coordinates_out_of_range(latitude, longitude, field):
    """Test that out-of-range values name the offending field"""
    with pytest.raises(ValidationError) as exc_info:
        Coordinates(latitude=latitude, longitude=longitude)

    assert exc_info.value.errors()[0]["loc"] == (field,)


def test_coordinates_from_location(eiffel_tower: Location):
    """Test building coordinates from a record"""
    coordinates = Coordinates.from_location(eiffel_tower)

    assert coordinates == Coordinates(latitude=48.8584, longitude=2.2945)
    assert str(coordinates) == "(48.8584, 2.2945)"


def test_coordinates_from_out_of_range_location():
    """Test that a permissive record can fail the range check"""
    location = Location(name="Nowhere", description="", latitude=95.0, longitude=0.0)

    with pytest.raises(ValidationError):
        Coordinates.from_location(location)
