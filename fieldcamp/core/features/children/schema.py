# (c) Copyright Datacraft, 2026
"""Beneficiary children schemas."""

from fieldcamp.core.schemas.common import ReadModel, WriteModel
from fieldcamp.core.types import Gender


class Child(ReadModel):
	id: int
	name: str
	surname: str
	age: int
	gender: Gender | None = None
	project_id: int | None = None


class ChildCreate(WriteModel):
	name: str
	surname: str
	age: int
	gender: Gender | None = None
	project_id: int | None = None


class ChildUpdate(WriteModel):
	name: str | None = None
	surname: str | None = None
	age: int | None = None
	gender: Gender | None = None
	project_id: int | None = None
