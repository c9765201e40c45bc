# (c) Copyright Datacraft, 2026
"""Children database API."""
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from fieldcamp.core.db import crud
from fieldcamp.core.features.children import schema

from .orm import Child


async def create_child(
	session: AsyncSession,
	data: schema.ChildCreate | Mapping[str, Any],
) -> Child:
	return await crud.create_row(session, Child, schema.ChildCreate, data)


async def get_child(session: AsyncSession, child_id: int) -> Child:
	return await crud.get_row(session, Child, child_id)


async def update_child(
	session: AsyncSession,
	child_id: int,
	data: schema.ChildUpdate | Mapping[str, Any],
) -> Child:
	return await crud.update_row(session, Child, schema.ChildUpdate, child_id, data)


async def delete_child(session: AsyncSession, child_id: int) -> None:
	await crud.delete_row(session, Child, child_id)


async def list_children(
	session: AsyncSession,
	project_id: int | None = None,
	page_size: int | None = None,
	page_number: int = 1,
) -> tuple[list[Child], int]:
	criteria = []
	if project_id is not None:
		criteria.append(Child.project_id == project_id)
	return await crud.list_rows(
		session,
		Child,
		*criteria,
		order_by=[Child.surname, Child.name],
		page_size=page_size,
		page_number=page_number,
	)
