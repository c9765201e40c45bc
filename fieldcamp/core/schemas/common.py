# (c) Copyright Datacraft, 2026
"""Field types shared by the feature schemas."""
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, AwareDatetime, BaseModel, BeforeValidator, ConfigDict

from fieldcamp.core.db.geo import GeoPoint, point_from_element


def to_utc(value: datetime) -> datetime:
	return value.astimezone(timezone.utc)


# Naive datetimes are rejected; aware ones are normalised to UTC.
UTCDateTime = Annotated[AwareDatetime, AfterValidator(to_utc)]

# Accepts a GeoPoint, a {"latitude", "longitude"} mapping or a stored
# geography element.
Location = Annotated[GeoPoint | None, BeforeValidator(point_from_element)]


class WriteModel(BaseModel):
	"""Base for create/update payloads."""
	model_config = ConfigDict(use_enum_values=True, extra="forbid")


class ReadModel(BaseModel):
	model_config = ConfigDict(from_attributes=True)
