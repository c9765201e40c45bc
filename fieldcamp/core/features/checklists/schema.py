# (c) Copyright Datacraft, 2026
"""Checklist schemas."""

from fieldcamp.core.schemas.common import ReadModel, UTCDateTime, WriteModel


class ChecklistArea(ReadModel):
	id: int
	name: str
	description: str | None = None


class ChecklistAreaCreate(WriteModel):
	name: str
	description: str | None = None


class ChecklistAreaUpdate(WriteModel):
	name: str | None = None
	description: str | None = None


class ChecklistTask(ReadModel):
	id: int
	name: str
	short_description: str | None = None
	project_id: int | None = None
	team_id: int | None = None
	area_id: int | None = None
	priority: int | None = None
	done: bool | None = False
	due_date: UTCDateTime | None = None


class ChecklistTaskCreate(WriteModel):
	name: str
	short_description: str | None = None
	project_id: int | None = None
	team_id: int | None = None
	area_id: int | None = None
	priority: int | None = None
	done: bool = False
	due_date: UTCDateTime | None = None


class ChecklistTaskUpdate(WriteModel):
	name: str | None = None
	short_description: str | None = None
	project_id: int | None = None
	team_id: int | None = None
	area_id: int | None = None
	priority: int | None = None
	done: bool | None = None
	due_date: UTCDateTime | None = None
