# (c) Copyright Datacraft, 2026
"""Checklist database API."""
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from fieldcamp.core.db import crud
from fieldcamp.core.exceptions import DomainViolation
from fieldcamp.core.features.checklists import schema

from .orm import ChecklistArea, ChecklistTask


async def create_area(
	session: AsyncSession,
	data: schema.ChecklistAreaCreate | Mapping[str, Any],
) -> ChecklistArea:
	return await crud.create_row(session, ChecklistArea, schema.ChecklistAreaCreate, data)


async def get_area(session: AsyncSession, area_id: int) -> ChecklistArea:
	return await crud.get_row(session, ChecklistArea, area_id)


async def update_area(
	session: AsyncSession,
	area_id: int,
	data: schema.ChecklistAreaUpdate | Mapping[str, Any],
) -> ChecklistArea:
	return await crud.update_row(
		session, ChecklistArea, schema.ChecklistAreaUpdate, area_id, data
	)


async def delete_area(session: AsyncSession, area_id: int) -> None:
	"""Delete an area and every task filed under it."""
	await crud.delete_row(session, ChecklistArea, area_id)


async def ensure_areas(session: AsyncSession, names: Iterable[str]) -> list[ChecklistArea]:
	return await crud.ensure_reference_rows(session, ChecklistArea, ChecklistArea.name, names)


async def create_task(
	session: AsyncSession,
	data: schema.ChecklistTaskCreate | Mapping[str, Any],
) -> ChecklistTask:
	return await crud.create_row(session, ChecklistTask, schema.ChecklistTaskCreate, data)


async def get_task(session: AsyncSession, task_id: int) -> ChecklistTask:
	return await crud.get_row(session, ChecklistTask, task_id)


async def update_task(
	session: AsyncSession,
	task_id: int,
	data: schema.ChecklistTaskUpdate | Mapping[str, Any],
) -> ChecklistTask:
	return await crud.update_row(
		session, ChecklistTask, schema.ChecklistTaskUpdate, task_id, data
	)


async def mark_task_done(session: AsyncSession, task_id: int, done: bool = True) -> ChecklistTask:
	return await update_task(session, task_id, {"done": done})


async def delete_task(session: AsyncSession, task_id: int) -> None:
	await crud.delete_row(session, ChecklistTask, task_id)


async def list_tasks(
	session: AsyncSession,
	project_id: int | None = None,
	team_id: int | None = None,
	area_id: int | None = None,
	done: bool | None = None,
	due_before: datetime | None = None,
	page_size: int | None = None,
	page_number: int = 1,
) -> tuple[list[ChecklistTask], int]:
	"""Tasks ordered by due date, earliest first, undated last.

	``due_before`` must be timezone-aware; it is compared in UTC.
	"""
	criteria = []
	if project_id is not None:
		criteria.append(ChecklistTask.project_id == project_id)
	if team_id is not None:
		criteria.append(ChecklistTask.team_id == team_id)
	if area_id is not None:
		criteria.append(ChecklistTask.area_id == area_id)
	if done is not None:
		criteria.append(ChecklistTask.done.is_(done))
	if due_before is not None:
		if due_before.tzinfo is None:
			raise DomainViolation(
				"checklist_tasks: due_before must be timezone-aware",
				entity="checklist_tasks",
				column="due_date",
			)
		criteria.append(ChecklistTask.due_date < due_before.astimezone(timezone.utc))

	return await crud.list_rows(
		session,
		ChecklistTask,
		*criteria,
		order_by=[ChecklistTask.due_date.asc().nulls_last(), ChecklistTask.id],
		page_size=page_size,
		page_number=page_number,
	)
