# (c) Copyright Datacraft, 2026
"""Transport database API."""
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession

from fieldcamp.core.db import crud, geo
from fieldcamp.core.db.geo import GeoPoint
from fieldcamp.core.exceptions import DomainViolation
from fieldcamp.core.features.transport import schema

from .orm import AvailableVehicle, TransportLocation, Transportation, VehicleType


def _utc(value: datetime, name: str) -> datetime:
	if value.tzinfo is None:
		raise DomainViolation(
			f"transportations: {name} must be timezone-aware",
			entity="transportations",
			column="departure_date_time",
		)
	return value.astimezone(timezone.utc)


# Vehicle types

async def create_vehicle_type(
	session: AsyncSession,
	data: schema.VehicleTypeCreate | Mapping[str, Any],
) -> VehicleType:
	return await crud.create_row(session, VehicleType, schema.VehicleTypeCreate, data)


async def get_vehicle_type(session: AsyncSession, type_id: int) -> VehicleType:
	return await crud.get_row(session, VehicleType, type_id)


async def update_vehicle_type(
	session: AsyncSession,
	type_id: int,
	data: schema.VehicleTypeUpdate | Mapping[str, Any],
) -> VehicleType:
	return await crud.update_row(
		session, VehicleType, schema.VehicleTypeUpdate, type_id, data
	)


async def delete_vehicle_type(session: AsyncSession, type_id: int) -> None:
	"""Delete a vehicle type with its vehicles and their transportations."""
	await crud.delete_row(session, VehicleType, type_id)


async def ensure_vehicle_types(
	session: AsyncSession,
	types: Iterable[str],
) -> list[VehicleType]:
	return await crud.ensure_reference_rows(session, VehicleType, VehicleType.type, types)


# Vehicles

async def create_vehicle(
	session: AsyncSession,
	data: schema.AvailableVehicleCreate | Mapping[str, Any],
) -> AvailableVehicle:
	return await crud.create_row(
		session, AvailableVehicle, schema.AvailableVehicleCreate, data
	)


async def get_vehicle(session: AsyncSession, vehicle_id: int) -> AvailableVehicle:
	return await crud.get_row(session, AvailableVehicle, vehicle_id)


async def get_vehicle_by_code(session: AsyncSession, code: str) -> AvailableVehicle:
	return await crud.get_row_by(session, AvailableVehicle, AvailableVehicle.code, code)


async def update_vehicle(
	session: AsyncSession,
	vehicle_id: int,
	data: schema.AvailableVehicleUpdate | Mapping[str, Any],
) -> AvailableVehicle:
	return await crud.update_row(
		session, AvailableVehicle, schema.AvailableVehicleUpdate, vehicle_id, data
	)


async def delete_vehicle(session: AsyncSession, vehicle_id: int) -> None:
	await crud.delete_row(session, AvailableVehicle, vehicle_id)


async def list_vehicles(
	session: AsyncSession,
	type_id: int | None = None,
	min_seats: int | None = None,
	page_size: int | None = None,
	page_number: int = 1,
) -> tuple[list[AvailableVehicle], int]:
	criteria = []
	if type_id is not None:
		criteria.append(AvailableVehicle.type_id == type_id)
	if min_seats is not None:
		criteria.append(AvailableVehicle.available_seats >= min_seats)
	return await crud.list_rows(
		session,
		AvailableVehicle,
		*criteria,
		order_by=[AvailableVehicle.code],
		page_size=page_size,
		page_number=page_number,
	)


# Transport locations

async def create_location(
	session: AsyncSession,
	data: schema.TransportLocationCreate | Mapping[str, Any],
) -> TransportLocation:
	return await crud.create_row(
		session, TransportLocation, schema.TransportLocationCreate, data
	)


async def get_location(session: AsyncSession, location_id: int) -> TransportLocation:
	return await crud.get_row(session, TransportLocation, location_id)


async def get_location_by_code(session: AsyncSession, code: str) -> TransportLocation:
	return await crud.get_row_by(session, TransportLocation, TransportLocation.code, code)


async def update_location(
	session: AsyncSession,
	location_id: int,
	data: schema.TransportLocationUpdate | Mapping[str, Any],
) -> TransportLocation:
	return await crud.update_row(
		session, TransportLocation, schema.TransportLocationUpdate, location_id, data
	)


async def delete_location(session: AsyncSession, location_id: int) -> None:
	"""Delete a location and every transportation starting or ending there."""
	await crud.delete_row(session, TransportLocation, location_id)


async def locations_within_radius(
	session: AsyncSession,
	point: GeoPoint,
	radius_m: float,
	limit: int | None = None,
) -> list[tuple[TransportLocation, float]]:
	return await geo.within_radius(
		session, TransportLocation, TransportLocation.location, point, radius_m, limit
	)


async def nearest_locations(
	session: AsyncSession,
	point: GeoPoint,
	limit: int = 10,
) -> list[tuple[TransportLocation, float]]:
	return await geo.nearest(
		session, TransportLocation, TransportLocation.location, point, limit
	)


# Transportations

async def create_transportation(
	session: AsyncSession,
	data: schema.TransportationCreate | Mapping[str, Any],
) -> Transportation:
	return await crud.create_row(
		session, Transportation, schema.TransportationCreate, data
	)


async def get_transportation(session: AsyncSession, transportation_id: int) -> Transportation:
	return await crud.get_row(session, Transportation, transportation_id)


async def update_transportation(
	session: AsyncSession,
	transportation_id: int,
	data: schema.TransportationUpdate | Mapping[str, Any],
) -> Transportation:
	return await crud.update_row(
		session, Transportation, schema.TransportationUpdate, transportation_id, data
	)


async def delete_transportation(session: AsyncSession, transportation_id: int) -> None:
	await crud.delete_row(session, Transportation, transportation_id)


async def list_transportations(
	session: AsyncSession,
	vehicle_id: int | None = None,
	location_id: int | None = None,
	departing_from: datetime | None = None,
	departing_until: datetime | None = None,
	page_size: int | None = None,
	page_number: int = 1,
) -> tuple[list[Transportation], int]:
	"""Transportations by departure time.

	``location_id`` matches either end of the trip. Time bounds must be
	timezone-aware and are compared in UTC; ``departing_until`` is exclusive.
	"""
	criteria = []
	if vehicle_id is not None:
		criteria.append(Transportation.vehicule_id == vehicle_id)
	if location_id is not None:
		criteria.append(
			or_(
				Transportation.origin_id == location_id,
				Transportation.destination_id == location_id,
			)
		)
	if departing_from is not None:
		criteria.append(
			Transportation.departure_date_time >= _utc(departing_from, "departing_from")
		)
	if departing_until is not None:
		criteria.append(
			Transportation.departure_date_time < _utc(departing_until, "departing_until")
		)
	return await crud.list_rows(
		session,
		Transportation,
		*criteria,
		order_by=[Transportation.departure_date_time, Transportation.id],
		page_size=page_size,
		page_number=page_number,
	)
