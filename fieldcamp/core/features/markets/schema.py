# (c) Copyright Datacraft, 2026
"""Market schemas."""

from fieldcamp.core.schemas.common import Location, ReadModel, WriteModel


class Market(ReadModel):
	id: int
	name: str
	opening_hours: str | None = None
	phone: str | None = None
	website: str | None = None
	address: str | None = None
	location: Location = None
	google_maps_link: str | None = None
	comments: str | None = None


class MarketCreate(WriteModel):
	name: str
	opening_hours: str | None = None
	phone: str | None = None
	website: str | None = None
	address: str | None = None
	location: Location = None
	google_maps_link: str | None = None
	comments: str | None = None


class MarketUpdate(WriteModel):
	name: str | None = None
	opening_hours: str | None = None
	phone: str | None = None
	website: str | None = None
	address: str | None = None
	location: Location = None
	google_maps_link: str | None = None
	comments: str | None = None
