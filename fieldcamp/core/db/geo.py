# (c) Copyright Datacraft, 2026
"""Geography point columns and spatial reads.

Points are stored as ``GEOGRAPHY(POINT, 4326)`` so distances are measured on
the WGS84 ellipsoid, in metres. Every geo column carries a GIST index that
PostgreSQL keeps current on insert, update and delete.
"""
import logging
from typing import Any, TypeVar

from geoalchemy2 import Geography
from geoalchemy2.elements import WKBElement, WKTElement
from geoalchemy2.shape import to_shape
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from fieldcamp.core.exceptions import DomainViolation

logger = logging.getLogger(__name__)

SRID = 4326

T = TypeVar("T")


def geography_point() -> Geography:
	"""Column type for a lat/long point; the GIST index is declared explicitly."""
	return Geography(geometry_type="POINT", srid=SRID, spatial_index=False)


class GeoPoint(BaseModel):
	"""A WGS84 coordinate."""
	latitude: float = Field(ge=-90, le=90)
	longitude: float = Field(ge=-180, le=180)

	model_config = ConfigDict(frozen=True)

	def to_wkt(self) -> str:
		# WKT is x y, i.e. longitude first
		return f"POINT({self.longitude} {self.latitude})"

	def to_element(self) -> WKTElement:
		return WKTElement(self.to_wkt(), srid=SRID)

	def to_geography(self):
		"""SQL expression for this point as a geography value."""
		return func.ST_GeogFromText(f"SRID={SRID};{self.to_wkt()}")


def point_from_element(value: Any) -> Any:
	"""Turn a stored WKB/WKT element into a GeoPoint; other values pass through."""
	if isinstance(value, (WKBElement, WKTElement)):
		shape = to_shape(value)
		return GeoPoint(latitude=shape.y, longitude=shape.x)
	return value


def to_column_value(value: Any) -> Any:
	if isinstance(value, GeoPoint):
		return value.to_element()
	return value


def within_radius_stmt(
	model: type[T],
	column: InstrumentedAttribute,
	point: GeoPoint,
	radius_m: float,
	limit: int | None = None,
) -> Select:
	target = point.to_geography()
	distance = func.ST_Distance(column, target).label("distance_m")
	stmt = (
		select(model, distance)
		.where(column.is_not(None))
		.where(func.ST_DWithin(column, target, radius_m))
		.order_by(distance)
	)
	if limit is not None:
		stmt = stmt.limit(limit)
	return stmt


def nearest_stmt(
	model: type[T],
	column: InstrumentedAttribute,
	point: GeoPoint,
	limit: int = 10,
) -> Select:
	target = point.to_geography()
	distance = func.ST_Distance(column, target).label("distance_m")
	return (
		select(model, distance)
		.where(column.is_not(None))
		.order_by(column.op("<->")(target))
		.limit(limit)
	)


async def within_radius(
	session: AsyncSession,
	model: type[T],
	column: InstrumentedAttribute,
	point: GeoPoint,
	radius_m: float,
	limit: int | None = None,
) -> list[tuple[T, float]]:
	"""Rows within ``radius_m`` metres of ``point``, nearest first."""
	if radius_m < 0:
		raise DomainViolation(
			f"{model.__tablename__}: radius_m must not be negative",
			entity=model.__tablename__,
			column=column.key,
		)

	stmt = within_radius_stmt(model, column, point, radius_m, limit)
	result = await session.execute(stmt)
	rows = [(row[0], float(row[1])) for row in result.all()]
	logger.debug(
		f"{model.__name__}: {len(rows)} rows within {radius_m} m of {point.to_wkt()}"
	)
	return rows


async def nearest(
	session: AsyncSession,
	model: type[T],
	column: InstrumentedAttribute,
	point: GeoPoint,
	limit: int = 10,
) -> list[tuple[T, float]]:
	"""The ``limit`` rows closest to ``point``, with their distance in metres."""
	if limit <= 0:
		raise DomainViolation(
			f"{model.__tablename__}: limit must be positive",
			entity=model.__tablename__,
		)

	result = await session.execute(nearest_stmt(model, column, point, limit))
	return [(row[0], float(row[1])) for row in result.all()]
