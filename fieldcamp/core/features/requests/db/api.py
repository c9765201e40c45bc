# (c) Copyright Datacraft, 2026
"""Requests database API."""
from typing import Any, Iterable, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from fieldcamp.core.db import crud
from fieldcamp.core.features.requests import schema

from .orm import Request, RequestType


async def create_request_type(
	session: AsyncSession,
	data: schema.RequestTypeCreate | Mapping[str, Any],
) -> RequestType:
	return await crud.create_row(session, RequestType, schema.RequestTypeCreate, data)


async def get_request_type(session: AsyncSession, type_id: int) -> RequestType:
	return await crud.get_row(session, RequestType, type_id)


async def update_request_type(
	session: AsyncSession,
	type_id: int,
	data: schema.RequestTypeUpdate | Mapping[str, Any],
) -> RequestType:
	return await crud.update_row(
		session, RequestType, schema.RequestTypeUpdate, type_id, data
	)


async def delete_request_type(session: AsyncSession, type_id: int) -> None:
	"""Fails with IntegrityViolation while requests of this type exist."""
	await crud.delete_row(session, RequestType, type_id)


async def ensure_request_types(
	session: AsyncSession,
	names: Iterable[str],
) -> list[RequestType]:
	return await crud.ensure_reference_rows(session, RequestType, RequestType.name, names)


async def create_request(
	session: AsyncSession,
	data: schema.RequestCreate | Mapping[str, Any],
) -> Request:
	return await crud.create_row(session, Request, schema.RequestCreate, data)


async def get_request(session: AsyncSession, request_id: int) -> Request:
	return await crud.get_row(session, Request, request_id)


async def update_request(
	session: AsyncSession,
	request_id: int,
	data: schema.RequestUpdate | Mapping[str, Any],
) -> Request:
	return await crud.update_row(session, Request, schema.RequestUpdate, request_id, data)


async def delete_request(session: AsyncSession, request_id: int) -> None:
	await crud.delete_row(session, Request, request_id)


async def list_requests(
	session: AsyncSession,
	project_id: int | None = None,
	requested_by: int | None = None,
	status: str | None = None,
	request_type: int | None = None,
	page_size: int | None = None,
	page_number: int = 1,
) -> tuple[list[Request], int]:
	"""Requests newest first, highest priority first within the same instant."""
	criteria = []
	if project_id is not None:
		criteria.append(Request.project_id == project_id)
	if requested_by is not None:
		criteria.append(Request.requested_by == requested_by)
	if status is not None:
		criteria.append(Request.status == status)
	if request_type is not None:
		criteria.append(Request.request_type == request_type)
	return await crud.list_rows(
		session,
		Request,
		*criteria,
		order_by=[
			Request.date_time_requested.desc(),
			Request.priority.desc().nulls_last(),
			Request.id,
		],
		page_size=page_size,
		page_number=page_number,
	)
