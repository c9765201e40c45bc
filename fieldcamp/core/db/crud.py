# (c) Copyright Datacraft, 2026
"""Generic data-access helpers shared by the feature APIs."""
import logging
from typing import Any, Iterable, Mapping, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from fieldcamp.core.config import get_settings
from fieldcamp.core.db.geo import to_column_value
from fieldcamp.core.exceptions import (
	NotFound,
	from_validation_error,
	translate_db_errors,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S", bound=BaseModel)


def entity_name(model: type) -> str:
	return model.__tablename__


def coerce(
	schema: type[S],
	data: S | Mapping[str, Any],
	entity: str,
) -> S:
	"""Validate ``data`` against ``schema``; domain errors become DomainViolation."""
	if isinstance(data, schema):
		return data
	try:
		if isinstance(data, BaseModel):
			return schema.model_validate(data.model_dump(exclude_unset=True))
		return schema.model_validate(dict(data))
	except ValidationError as e:
		raise from_validation_error(e, entity) from e


def _column_values(data: BaseModel, only_set: bool = False) -> dict[str, Any]:
	names = data.model_fields_set if only_set else type(data).model_fields.keys()
	return {name: to_column_value(getattr(data, name)) for name in names}


async def create_row(
	session: AsyncSession,
	model: type[T],
	schema: type[S],
	data: S | Mapping[str, Any],
) -> T:
	entity = entity_name(model)
	values = _column_values(coerce(schema, data, entity))
	row = model(**values)
	session.add(row)
	async with translate_db_errors(entity):
		await session.flush()
	await session.refresh(row)
	logger.debug(f"Created {entity} id={row.id}")
	return row


async def get_row(session: AsyncSession, model: type[T], row_id: int, *options) -> T:
	"""Fetch by identity.

	Always reads the database and refreshes an already loaded instance, so
	columns changed by ON DELETE SET NULL or a cascade are never stale.
	"""
	stmt = (
		select(model)
		.where(model.id == row_id)
		.execution_options(populate_existing=True)
	)
	if options:
		stmt = stmt.options(*options)
	result = await session.execute(stmt)
	row = result.scalar_one_or_none()
	if row is None:
		raise NotFound(entity_name(model), row_id)
	return row


async def get_row_by(
	session: AsyncSession,
	model: type[T],
	column: InstrumentedAttribute,
	value: Any,
) -> T:
	stmt = select(model).where(column == value).execution_options(populate_existing=True)
	result = await session.execute(stmt)
	row = result.scalar_one_or_none()
	if row is None:
		raise NotFound(entity_name(model), value, column=column.key)
	return row


async def update_row(
	session: AsyncSession,
	model: type[T],
	schema: type[S],
	row_id: int,
	data: S | Mapping[str, Any],
) -> T:
	"""Apply the explicitly set fields of ``data``; an explicit None clears a column."""
	entity = entity_name(model)
	changes = _column_values(coerce(schema, data, entity), only_set=True)
	row = await get_row(session, model, row_id)

	for key, value in changes.items():
		setattr(row, key, value)

	async with translate_db_errors(entity):
		await session.flush()
	await session.refresh(row)
	return row


async def delete_row(session: AsyncSession, model: type[T], row_id: int) -> None:
	"""Delete one row; dependent rows go with it through ON DELETE CASCADE.

	Issued as a single statement so the cascade runs inside the database,
	atomically with the parent delete.
	"""
	entity = entity_name(model)
	stmt = (
		delete(model)
		.where(model.id == row_id)
		.returning(model.id)
		.execution_options(synchronize_session=False)
	)
	async with translate_db_errors(entity):
		result = await session.execute(stmt)
	if result.scalar_one_or_none() is None:
		raise NotFound(entity, row_id)
	logger.debug(f"Deleted {entity} id={row_id}")


async def list_rows(
	session: AsyncSession,
	model: type[T],
	*criteria,
	order_by: Iterable | None = None,
	page_size: int | None = None,
	page_number: int = 1,
) -> tuple[list[T], int]:
	"""Filtered, paginated list plus the total number of matching rows."""
	settings = get_settings()
	page_size = min(page_size or settings.default_page_size, settings.max_page_size)
	page_number = max(page_number, 1)

	stmt = select(model)
	if criteria:
		stmt = stmt.where(*criteria)

	count_stmt = select(func.count()).select_from(stmt.subquery())
	total = (await session.execute(count_stmt)).scalar_one()

	stmt = stmt.order_by(*(order_by or [model.id]))
	stmt = stmt.offset((page_number - 1) * page_size).limit(page_size)
	stmt = stmt.execution_options(populate_existing=True)

	result = await session.execute(stmt)
	return list(result.scalars().all()), total


async def ensure_reference_rows(
	session: AsyncSession,
	model: type[T],
	column: InstrumentedAttribute,
	values: Iterable[str],
) -> list[T]:
	"""Insert the lookup rows missing from ``model`` and return all requested rows.

	Lookup tables (vehicle types, unit formats, request types...) are loaded
	once and afterwards referenced by identity.
	"""
	wanted = list(dict.fromkeys(values))
	entity = entity_name(model)

	result = await session.execute(select(model).where(column.in_(wanted)))
	existing = {getattr(row, column.key): row for row in result.scalars().all()}

	missing = [value for value in wanted if value not in existing]
	for value in missing:
		row = model(**{column.key: value})
		session.add(row)
		existing[value] = row

	if missing:
		async with translate_db_errors(entity):
			await session.flush()
		logger.info(f"Loaded {len(missing)} {entity} reference rows")

	return [existing[value] for value in wanted]
