"""
Coordinate Type Definitions

Range-checked latitude/longitude pair. Location records themselves accept
any float; this model is where the geographic range is enforced.
"""

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from bucketlist.schemas.location import Location

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


class Coordinates(BaseModel):
    """
    Geographic coordinates (latitude and longitude) in decimal degrees.
    """

    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")

    model_config = ConfigDict(frozen=True)

    @field_validator("latitude")
    @classmethod
    def validate_latitude(cls, v: float) -> float:
        """Ensure latitude is within valid range."""
        if not MIN_LATITUDE <= v <= MAX_LATITUDE:
            raise ValueError("Latitude must be between -90 and 90 degrees")
        return v

    @field_validator("longitude")
    @classmethod
    def validate_longitude(cls, v: float) -> float:
        """Ensure longitude is within valid range."""
        if not MIN_LONGITUDE <= v <= MAX_LONGITUDE:
            raise ValueError("Longitude must be between -180 and 180 degrees")
        return v

    @classmethod
    def from_location(cls, location: "Location") -> "Coordinates":
        return cls(latitude=location.latitude, longitude=location.longitude)

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"
