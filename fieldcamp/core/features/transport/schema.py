# (c) Copyright Datacraft, 2026
"""Transport schemas."""

from fieldcamp.core.schemas.common import Location, ReadModel, UTCDateTime, WriteModel


class VehicleType(ReadModel):
	id: int
	type: str


class VehicleTypeCreate(WriteModel):
	type: str


class VehicleTypeUpdate(WriteModel):
	type: str | None = None


class AvailableVehicle(ReadModel):
	id: int
	code: str
	type_id: int | None = None
	available_seats: int
	image_path: str | None = None


class AvailableVehicleCreate(WriteModel):
	code: str
	type_id: int | None = None
	available_seats: int
	image_path: str | None = None


class AvailableVehicleUpdate(WriteModel):
	code: str | None = None
	type_id: int | None = None
	available_seats: int | None = None
	image_path: str | None = None


class TransportLocation(ReadModel):
	id: int
	code: str
	name: str
	location: Location = None
	description: str | None = None


class TransportLocationCreate(WriteModel):
	code: str
	name: str
	location: Location = None
	description: str | None = None


class TransportLocationUpdate(WriteModel):
	code: str | None = None
	name: str | None = None
	location: Location = None
	description: str | None = None


class Transportation(ReadModel):
	id: int
	vehicule_id: int | None = None
	pax: int
	origin_id: int | None = None
	destination_id: int | None = None
	departure_date_time: UTCDateTime
	scheduled_arrival_date_time: UTCDateTime


class TransportationCreate(WriteModel):
	"""Departure before arrival is the caller's responsibility."""
	vehicule_id: int | None = None
	pax: int
	origin_id: int | None = None
	destination_id: int | None = None
	departure_date_time: UTCDateTime
	scheduled_arrival_date_time: UTCDateTime


class TransportationUpdate(WriteModel):
	vehicule_id: int | None = None
	pax: int | None = None
	origin_id: int | None = None
	destination_id: int | None = None
	departure_date_time: UTCDateTime | None = None
	scheduled_arrival_date_time: UTCDateTime | None = None
