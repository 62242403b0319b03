"""
Location Schema

Pydantic model for a named point of interest.

The identifier is generated once at construction. Coordinates are fixed
after construction, while name and description stay editable by whoever
owns the record. Coordinate ranges are not checked here; see
``bucketlist.schemas.geo.Coordinates``.
"""

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """A point of interest with a stable identity."""

    id: UUID = Field(default_factory=uuid4, frozen=True)
    name: str = Field(..., strict=True, description="Human-readable label")
    description: str = Field(..., strict=True, description="Free-text notes")
    latitude: float = Field(..., strict=True, frozen=True, allow_inf_nan=False, description="Latitude in decimal degrees")
    longitude: float = Field(..., strict=True, frozen=True, allow_inf_nan=False, description="Longitude in decimal degrees")

    model_config = ConfigDict(validate_assignment=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
            and self.latitude == other.latitude
            and self.longitude == other.longitude
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.latitude}, {self.longitude})"
