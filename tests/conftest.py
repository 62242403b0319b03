import os
import sys

import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from bucketlist.schemas.location import Location  # noqa: E402
from bucketlist.services.location_codec import LocationCodec  # noqa: E402


@pytest.fixture
def eiffel_tower():
    """A freshly constructed location."""
    return Location(
        name="Eiffel Tower",
        description="Iconic landmark",
        latitude=48.8584,
        longitude=2.2945,
    )


@pytest.fixture
def eiffel_tower_document():
    """A serialized location as another implementation would write it."""
    return {
        "id": "e621e1f8-c36c-495a-93fc-0c247a3e6e5f",
        "name": "Eiffel Tower",
        "description": "Iconic landmark",
        "latitude": 48.8584,
        "longitude": 2.2945,
    }


@pytest.fixture
def codec():
    """Codec with the permissive defaults."""
    return LocationCodec(validate_coordinates=False, include_version=False)
