# (c) Copyright Datacraft, 2026
"""Markets database API."""
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from fieldcamp.core.db import crud, geo
from fieldcamp.core.db.geo import GeoPoint
from fieldcamp.core.features.markets import schema

from .orm import Market


async def create_market(
	session: AsyncSession,
	data: schema.MarketCreate | Mapping[str, Any],
) -> Market:
	return await crud.create_row(session, Market, schema.MarketCreate, data)


async def get_market(session: AsyncSession, market_id: int) -> Market:
	return await crud.get_row(session, Market, market_id)


async def update_market(
	session: AsyncSession,
	market_id: int,
	data: schema.MarketUpdate | Mapping[str, Any],
) -> Market:
	return await crud.update_row(session, Market, schema.MarketUpdate, market_id, data)


async def delete_market(session: AsyncSession, market_id: int) -> None:
	await crud.delete_row(session, Market, market_id)


async def list_markets(
	session: AsyncSession,
	name: str | None = None,
	page_size: int | None = None,
	page_number: int = 1,
) -> tuple[list[Market], int]:
	criteria = []
	if name:
		criteria.append(Market.name.ilike(f"%{name}%"))
	return await crud.list_rows(
		session,
		Market,
		*criteria,
		order_by=[Market.name],
		page_size=page_size,
		page_number=page_number,
	)


async def markets_within_radius(
	session: AsyncSession,
	point: GeoPoint,
	radius_m: float,
	limit: int | None = None,
) -> list[tuple[Market, float]]:
	"""Markets whose location lies within ``radius_m`` metres; unlocated markets never match."""
	return await geo.within_radius(session, Market, Market.location, point, radius_m, limit)


async def nearest_markets(
	session: AsyncSession,
	point: GeoPoint,
	limit: int = 10,
) -> list[tuple[Market, float]]:
	return await geo.nearest(session, Market, Market.location, point, limit)
