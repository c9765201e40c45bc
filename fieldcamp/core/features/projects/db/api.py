# (c) Copyright Datacraft, 2026
"""Projects database API."""
import logging
from typing import Any, Mapping

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession

from fieldcamp.core.db import crud, geo
from fieldcamp.core.db.geo import GeoPoint
from fieldcamp.core.features.projects import schema

from .orm import Project

logger = logging.getLogger(__name__)


async def create_project(
	session: AsyncSession,
	data: schema.ProjectCreate | Mapping[str, Any],
) -> Project:
	"""Create a project; the 3-character code must be unused."""
	return await crud.create_row(session, Project, schema.ProjectCreate, data)


async def get_project(session: AsyncSession, project_id: int) -> Project:
	return await crud.get_row(session, Project, project_id)


async def get_project_by_code(session: AsyncSession, project_code: str) -> Project:
	return await crud.get_row_by(session, Project, Project.project_code, project_code)


async def update_project(
	session: AsyncSession,
	project_id: int,
	data: schema.ProjectUpdate | Mapping[str, Any],
) -> Project:
	return await crud.update_row(session, Project, schema.ProjectUpdate, project_id, data)


async def delete_project(session: AsyncSession, project_id: int) -> None:
	"""Delete a project together with everything it owns.

	Camp people (and their extra data), checklist tasks, children, camp
	products (and their purchases), requests and PSE material of the project
	are removed by the database in the same statement.
	"""
	await crud.delete_row(session, Project, project_id)
	logger.info(f"Project {project_id} deleted with its dependent rows")


async def list_projects(
	session: AsyncSession,
	free_text: str | None = None,
	page_size: int | None = None,
	page_number: int = 1,
) -> tuple[list[Project], int]:
	criteria = []
	if free_text:
		search_term = f"%{free_text}%"
		criteria.append(
			or_(
				Project.project_code.ilike(search_term),
				Project.project_name.ilike(search_term),
				Project.project_description.ilike(search_term),
			)
		)
	return await crud.list_rows(
		session,
		Project,
		*criteria,
		order_by=[Project.project_code],
		page_size=page_size,
		page_number=page_number,
	)


async def projects_within_radius(
	session: AsyncSession,
	point: GeoPoint,
	radius_m: float,
	limit: int | None = None,
) -> list[tuple[Project, float]]:
	return await geo.within_radius(
		session, Project, Project.project_location, point, radius_m, limit
	)


async def nearest_projects(
	session: AsyncSession,
	point: GeoPoint,
	limit: int = 10,
) -> list[tuple[Project, float]]:
	return await geo.nearest(session, Project, Project.project_location, point, limit)
