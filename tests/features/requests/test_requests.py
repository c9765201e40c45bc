# (c) Copyright Datacraft, 2026
"""
Requests and request types.
"""
from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from fieldcamp.core.exceptions import DomainViolation, IntegrityViolation
from fieldcamp.core.features.projects.db import api as projects_api
from fieldcamp.core.features.requests import schema
from fieldcamp.core.features.requests.db import api as requests_api


def utc(*args) -> datetime:
	return datetime(*args, tzinfo=timezone.utc)


def test_request_time_is_required():
	with pytest.raises(ValueError):
		schema.RequestCreate(status="open")


async def test_clearing_request_time_is_domain_violation(db_session: AsyncSession):
	request = await requests_api.create_request(
		db_session, {"date_time_requested": utc(2026, 7, 1)}
	)

	with pytest.raises(DomainViolation) as exc_info:
		await requests_api.update_request(
			db_session, request.id, {"date_time_requested": None}
		)

	assert exc_info.value.column == "date_time_requested"


async def test_list_requests_newest_first(db_session: AsyncSession):
	project = await projects_api.create_project(
		db_session, {"project_code": "ABC", "project_name": "Site A"}
	)
	supplies, transport = await requests_api.ensure_request_types(
		db_session, ["Supplies", "Transport"]
	)
	old = await requests_api.create_request(
		db_session,
		{
			"project_id": project.id,
			"request_type": supplies.id,
			"status": "open",
			"date_time_requested": utc(2026, 6, 1),
		},
	)
	urgent = await requests_api.create_request(
		db_session,
		{
			"project_id": project.id,
			"request_type": transport.id,
			"priority": 5,
			"status": "open",
			"date_time_requested": utc(2026, 6, 2),
		},
	)
	routine = await requests_api.create_request(
		db_session,
		{
			"project_id": project.id,
			"request_type": transport.id,
			"priority": 1,
			"status": "closed",
			"date_time_requested": utc(2026, 6, 2),
		},
	)

	rows, total = await requests_api.list_requests(db_session, project_id=project.id)
	assert total == 3
	assert [row.id for row in rows] == [urgent.id, routine.id, old.id]

	rows, _ = await requests_api.list_requests(db_session, status="open")
	assert [row.id for row in rows] == [urgent.id, old.id]

	rows, _ = await requests_api.list_requests(db_session, request_type=supplies.id)
	assert [row.id for row in rows] == [old.id]


async def test_request_type_in_use_cannot_be_deleted(db_session: AsyncSession):
	(supplies,) = await requests_api.ensure_request_types(db_session, ["Supplies"])
	await requests_api.create_request(
		db_session,
		{"request_type": supplies.id, "date_time_requested": utc(2026, 6, 1)},
	)

	with pytest.raises(IntegrityViolation):
		await requests_api.delete_request_type(db_session, supplies.id)


async def test_rename_request_type(db_session: AsyncSession):
	supplies = await requests_api.create_request_type(db_session, {"name": "Supplies"})

	await requests_api.update_request_type(db_session, supplies.id, {"name": "Food"})

	assert (await requests_api.get_request_type(db_session, supplies.id)).name == "Food"
