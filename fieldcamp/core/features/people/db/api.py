# (c) Copyright Datacraft, 2026
"""Teams, roles and camp people database API."""
import logging
from typing import Any, Mapping

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fieldcamp.core.db import crud
from fieldcamp.core.features.people import schema

from .orm import CampPerson, CampPersonExtraData, Role, Team

logger = logging.getLogger(__name__)


# Teams

async def create_team(
	session: AsyncSession,
	data: schema.TeamCreate | Mapping[str, Any],
) -> Team:
	return await crud.create_row(session, Team, schema.TeamCreate, data)


async def get_team(session: AsyncSession, team_id: int) -> Team:
	return await crud.get_row(session, Team, team_id)


async def get_team_by_code(session: AsyncSession, code: str) -> Team:
	return await crud.get_row_by(session, Team, Team.code, code)


async def update_team(
	session: AsyncSession,
	team_id: int,
	data: schema.TeamUpdate | Mapping[str, Any],
) -> Team:
	return await crud.update_row(session, Team, schema.TeamUpdate, team_id, data)


async def delete_team(session: AsyncSession, team_id: int) -> None:
	"""Delete a team, its roles, the people holding those roles and its checklist tasks."""
	await crud.delete_row(session, Team, team_id)


async def list_teams(
	session: AsyncSession,
	page_size: int | None = None,
	page_number: int = 1,
) -> tuple[list[Team], int]:
	return await crud.list_rows(
		session,
		Team,
		order_by=[Team.name],
		page_size=page_size,
		page_number=page_number,
	)


# Roles

async def create_role(
	session: AsyncSession,
	data: schema.RoleCreate | Mapping[str, Any],
) -> Role:
	return await crud.create_row(session, Role, schema.RoleCreate, data)


async def get_role(session: AsyncSession, role_id: int) -> Role:
	return await crud.get_row(session, Role, role_id)


async def update_role(
	session: AsyncSession,
	role_id: int,
	data: schema.RoleUpdate | Mapping[str, Any],
) -> Role:
	return await crud.update_row(session, Role, schema.RoleUpdate, role_id, data)


async def delete_role(session: AsyncSession, role_id: int) -> None:
	await crud.delete_row(session, Role, role_id)


async def list_roles(
	session: AsyncSession,
	team_id: int | None = None,
	page_size: int | None = None,
	page_number: int = 1,
) -> tuple[list[Role], int]:
	criteria = []
	if team_id is not None:
		criteria.append(Role.team_id == team_id)
	return await crud.list_rows(
		session,
		Role,
		*criteria,
		order_by=[Role.name],
		page_size=page_size,
		page_number=page_number,
	)


# Camp people

async def create_camp_person(
	session: AsyncSession,
	data: schema.CampPersonCreate | Mapping[str, Any],
) -> CampPerson:
	"""Add a person to a project roster; gender must be "M", "F" or unset."""
	return await crud.create_row(session, CampPerson, schema.CampPersonCreate, data)


async def get_camp_person(session: AsyncSession, person_id: int) -> CampPerson:
	return await crud.get_row(session, CampPerson, person_id)


async def get_camp_person_with_extra_data(
	session: AsyncSession,
	person_id: int,
) -> CampPerson:
	return await crud.get_row(
		session,
		CampPerson,
		person_id,
		selectinload(CampPerson.extra_data),
	)


async def update_camp_person(
	session: AsyncSession,
	person_id: int,
	data: schema.CampPersonUpdate | Mapping[str, Any],
) -> CampPerson:
	return await crud.update_row(
		session, CampPerson, schema.CampPersonUpdate, person_id, data
	)


async def delete_camp_person(session: AsyncSession, person_id: int) -> None:
	"""Remove a person from the roster.

	Their extra data goes with them. Material and requests that point at the
	person stay; the pointers are cleared.
	"""
	await crud.delete_row(session, CampPerson, person_id)
	logger.info(f"Camp person {person_id} removed from roster")


async def list_camp_people(
	session: AsyncSession,
	project_id: int | None = None,
	role_id: int | None = None,
	free_text: str | None = None,
	page_size: int | None = None,
	page_number: int = 1,
) -> tuple[list[CampPerson], int]:
	criteria = []
	if project_id is not None:
		criteria.append(CampPerson.project_id == project_id)
	if role_id is not None:
		criteria.append(CampPerson.role_id == role_id)
	if free_text:
		search_term = f"%{free_text}%"
		criteria.append(
			or_(
				CampPerson.name.ilike(search_term),
				CampPerson.surname.ilike(search_term),
				CampPerson.email.ilike(search_term),
			)
		)
	return await crud.list_rows(
		session,
		CampPerson,
		*criteria,
		order_by=[CampPerson.surname, CampPerson.name],
		page_size=page_size,
		page_number=page_number,
	)


# Extra data

async def create_extra_data(
	session: AsyncSession,
	data: schema.CampPersonExtraDataCreate | Mapping[str, Any],
) -> CampPersonExtraData:
	return await crud.create_row(
		session, CampPersonExtraData, schema.CampPersonExtraDataCreate, data
	)


async def get_extra_data(session: AsyncSession, extra_data_id: int) -> CampPersonExtraData:
	return await crud.get_row(session, CampPersonExtraData, extra_data_id)


async def update_extra_data(
	session: AsyncSession,
	extra_data_id: int,
	data: schema.CampPersonExtraDataUpdate | Mapping[str, Any],
) -> CampPersonExtraData:
	return await crud.update_row(
		session,
		CampPersonExtraData,
		schema.CampPersonExtraDataUpdate,
		extra_data_id,
		data,
	)


async def delete_extra_data(session: AsyncSession, extra_data_id: int) -> None:
	await crud.delete_row(session, CampPersonExtraData, extra_data_id)


async def list_extra_data(
	session: AsyncSession,
	camp_person_id: int,
) -> list[CampPersonExtraData]:
	stmt = (
		select(CampPersonExtraData)
		.where(CampPersonExtraData.camp_people_id == camp_person_id)
		.order_by(CampPersonExtraData.id)
		.execution_options(populate_existing=True)
	)
	result = await session.execute(stmt)
	return list(result.scalars().all())
