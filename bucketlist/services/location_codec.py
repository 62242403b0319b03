"""
Location codec for converting records to and from their JSON form.

Serialized records are JSON objects with the keys ``id``, ``name``,
``description``, ``latitude`` and ``longitude``. Collections are JSON arrays
of such objects. The format is version 0; the ``version`` tag is optional.
"""

import json
import logging
import re
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from bucketlist.core.config import settings
from bucketlist.schemas.geo import Coordinates
from bucketlist.schemas.location import Location

logger = logging.getLogger(__name__)

FORMAT_VERSION = 0
VERSION_KEY = "version"
REQUIRED_FIELDS = ("id", "name", "description", "latitude", "longitude")
CANONICAL_UUID = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")


class DecodingError(Exception):
    """Base exception for documents that cannot be turned into a Location."""

    def __init__(self, message: str, field: Optional[str] = None, index: Optional[int] = None):
        super().__init__(message)
        self.field = field
        self.index = index


class MissingFieldError(DecodingError):
    """Raised when a required key is absent from the document."""


class InvalidFieldError(DecodingError):
    """Raised when a value has the wrong type or an out-of-range coordinate."""


class UnsupportedVersionError(DecodingError):
    """Raised when the document carries a format version other than 0."""


class LocationCodec:
    """
    Encoder/decoder for Location records.

    Decoding never substitutes defaults: a missing or malformed field is
    reported to the caller as a DecodingError and no record is produced.
    """

    def __init__(
        self,
        validate_coordinates: Optional[bool] = None,
        include_version: Optional[bool] = None,
    ):
        self.validate_coordinates = (
            settings.VALIDATE_COORDINATES if validate_coordinates is None else validate_coordinates
        )
        self.include_version = (
            settings.INCLUDE_FORMAT_VERSION if include_version is None else include_version
        )

    def to_dict(self, location: Location) -> Dict[str, Any]:
        """
        Serialize a location into a JSON-compatible dictionary.

        Args:
            location: Record to serialize

        Returns:
            Dictionary with the id as its canonical string form and
            coordinates as plain floats
        """
        document = location.model_dump(mode="json")
        if self.include_version:
            document[VERSION_KEY] = FORMAT_VERSION
        return document

    def encode(self, location: Location, indent: Optional[int] = None) -> str:
        """Serialize a location into a JSON object string."""
        logger.debug("Encoding location %s", location.id)
        return json.dumps(self.to_dict(location), indent=indent, ensure_ascii=False)

    def encode_many(self, locations: Iterable[Location], indent: Optional[int] = None) -> str:
        """Serialize a collection of locations into a JSON array string."""
        documents = [self.to_dict(location) for location in locations]
        logger.debug("Encoding %d locations", len(documents))
        return json.dumps(documents, indent=indent, ensure_ascii=False)

    def from_dict(self, document: Any) -> Location:
        """
        Build a location from a decoded JSON document.

        Args:
            document: Mapping holding the five location keys

        Returns:
            The decoded Location, with its persisted id

        Raises:
            MissingFieldError: If a required key is absent
            InvalidFieldError: If a value has the wrong shape, or coordinates
                are out of range while coordinate validation is enabled
            UnsupportedVersionError: If the version tag is not 0
            DecodingError: If the document is not a JSON object
        """
        if not isinstance(document, dict):
            raise DecodingError(
                f"Location document must be a JSON object, got {type(document).__name__}"
            )

        self._check_version(document)

        for field in REQUIRED_FIELDS:
            if field not in document:
                raise MissingFieldError(f"Missing required field '{field}'", field=field)

        # Hyphenated 8-4-4-4-12 form only, either case
        location_id = document["id"]
        if not isinstance(location_id, str) or not CANONICAL_UUID.fullmatch(location_id):
            raise InvalidFieldError(
                f"Invalid value for field 'id': expected a hyphenated UUID string, got {location_id!r}",
                field="id",
            )

        try:
            location = Location.model_validate({field: document[field] for field in REQUIRED_FIELDS})
        except ValidationError as exc:
            raise self._invalid_field(exc) from exc

        if self.validate_coordinates:
            try:
                Coordinates.from_location(location)
            except ValidationError as exc:
                raise self._invalid_field(exc) from exc

        return location

    def decode(self, text: str) -> Location:
        """Deserialize a location from a JSON object string."""
        location = self.from_dict(self._load(text))
        logger.debug("Decoded location %s", location.id)
        return location

    def decode_many(self, text: str, skip_invalid: bool = False) -> List[Location]:
        """
        Deserialize a JSON array of locations.

        Args:
            text: JSON array string
            skip_invalid: Drop malformed elements instead of failing the batch

        Returns:
            Decoded locations in document order

        Raises:
            DecodingError: If the text is not a JSON array, or, unless
                skip_invalid is set, if any element fails to decode. The
                error's ``index`` names the failing element.
        """
        documents = self._load(text)
        if not isinstance(documents, list):
            raise DecodingError(
                f"Location collection must be a JSON array, got {type(documents).__name__}"
            )

        locations = []
        for index, document in enumerate(documents):
            try:
                locations.append(self.from_dict(document))
            except DecodingError as exc:
                if not skip_invalid:
                    raise type(exc)(
                        f"Location at index {index}: {exc}", field=exc.field, index=index
                    ) from exc
                logger.warning("Skipping location at index %d: %s", index, exc)

        logger.debug("Decoded %d of %d locations", len(locations), len(documents))
        return locations

    @staticmethod
    def _load(text: str) -> Any:
        try:
            return json.loads(text)
        except (TypeError, ValueError, RecursionError) as exc:
            raise DecodingError(f"Malformed JSON: {exc}") from exc

    @staticmethod
    def _check_version(document: Dict[str, Any]) -> None:
        if VERSION_KEY not in document:
            return
        version = document[VERSION_KEY]
        # False == 0, so bools are rejected explicitly
        if isinstance(version, bool) or version != FORMAT_VERSION:
            raise UnsupportedVersionError(
                f"Unsupported location format version: {version!r}", field=VERSION_KEY
            )

    @staticmethod
    def _invalid_field(exc: ValidationError) -> InvalidFieldError:
        error = exc.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else None
        return InvalidFieldError(f"Invalid value for field '{field}': {error['msg']}", field=field)


# Create a singleton instance
location_codec = LocationCodec()
