# (c) Copyright Datacraft, 2026
"""Project schemas."""
from typing import Annotated

from pydantic import StringConstraints

from fieldcamp.core.schemas.common import Location, ReadModel, WriteModel

ProjectCode = Annotated[str, StringConstraints(min_length=3, max_length=3)]


class Project(ReadModel):
	id: int
	project_code: str
	project_name: str
	project_description: str | None = None
	project_location: Location = None
	beneficiaries_ages: str | None = None
	budget: float | None = None
	actual_money_spent: float | None = None


class ProjectCreate(WriteModel):
	project_code: ProjectCode
	project_name: str
	project_description: str | None = None
	project_location: Location = None
	beneficiaries_ages: str | None = None
	budget: float | None = None
	actual_money_spent: float | None = None


class ProjectUpdate(WriteModel):
	project_code: ProjectCode | None = None
	project_name: str | None = None
	project_description: str | None = None
	project_location: Location = None
	beneficiaries_ages: str | None = None
	budget: float | None = None
	actual_money_spent: float | None = None


class ProjectDistance(ReadModel):
	"""A project paired with its distance from a query point."""
	project: Project
	distance_m: float
