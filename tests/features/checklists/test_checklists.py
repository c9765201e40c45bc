# (c) Copyright Datacraft, 2026
"""
Checklist areas and tasks.
"""
from datetime import datetime, timezone

import pytest
from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from fieldcamp.core import orm
from fieldcamp.core.exceptions import DomainViolation, NotFound
from fieldcamp.core.features.checklists import schema
from fieldcamp.core.features.checklists.db import api as checklists_api
from fieldcamp.core.features.people.db import api as people_api


def utc(*args) -> datetime:
	return datetime(*args, tzinfo=timezone.utc)


def test_new_tasks_are_not_done():
	assert schema.ChecklistTaskCreate(name="Book flights").done is False


async def test_naive_due_before_is_rejected(mock_session):
	with pytest.raises(DomainViolation) as exc_info:
		await checklists_api.list_tasks(mock_session, due_before=datetime(2026, 7, 1))

	assert exc_info.value.column == "due_date"

	mock_session.execute.assert_not_awaited()


async def test_done_defaults_to_false_in_the_database(db_session: AsyncSession):
	task_id = await db_session.scalar(
		insert(orm.ChecklistTask).values(name="Pack first aid kit").returning(orm.ChecklistTask.id)
	)

	done = await db_session.scalar(
		select(orm.ChecklistTask.done).where(orm.ChecklistTask.id == task_id)
	)

	assert done is False


async def test_ensure_areas_is_idempotent(db_session: AsyncSession):
	first = await checklists_api.ensure_areas(db_session, ["Safety", "Logistics"])
	second = await checklists_api.ensure_areas(db_session, ["Logistics", "Safety", "Health"])

	assert [area.name for area in second] == ["Logistics", "Safety", "Health"]
	assert {area.id for area in first} < {area.id for area in second}


async def test_list_tasks_by_due_date(db_session: AsyncSession):
	team = await people_api.create_team(db_session, {"code": "LOGIS1", "name": "Logistics"})
	(area,) = await checklists_api.ensure_areas(db_session, ["Safety"])
	later = await checklists_api.create_task(
		db_session,
		{"name": "Insurance", "team_id": team.id, "area_id": area.id, "due_date": utc(2026, 6, 20)},
	)
	undated = await checklists_api.create_task(
		db_session, {"name": "Read rules", "team_id": team.id}
	)
	sooner = await checklists_api.create_task(
		db_session,
		{"name": "Visa", "team_id": team.id, "due_date": "2026-06-01T09:00:00+07:00"},
	)

	rows, total = await checklists_api.list_tasks(db_session, team_id=team.id)
	assert total == 3
	assert [row.id for row in rows] == [sooner.id, later.id, undated.id]

	rows, _ = await checklists_api.list_tasks(db_session, due_before=utc(2026, 6, 10))
	assert [row.id for row in rows] == [sooner.id]

	rows, _ = await checklists_api.list_tasks(db_session, area_id=area.id)
	assert [row.id for row in rows] == [later.id]


async def test_mark_task_done(db_session: AsyncSession):
	task = await checklists_api.create_task(db_session, {"name": "Buy tickets"})

	await checklists_api.mark_task_done(db_session, task.id)

	rows, _ = await checklists_api.list_tasks(db_session, done=True)
	assert [row.id for row in rows] == [task.id]
	rows, _ = await checklists_api.list_tasks(db_session, done=False)
	assert rows == []


async def test_area_deletion_removes_its_tasks(db_session: AsyncSession):
	area = await checklists_api.create_area(db_session, {"name": "Health"})
	task = await checklists_api.create_task(
		db_session, {"name": "Vaccination card", "area_id": area.id}
	)

	await checklists_api.delete_area(db_session, area.id)

	with pytest.raises(NotFound):
		await checklists_api.get_task(db_session, task.id)
