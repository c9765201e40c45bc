# (c) Copyright Datacraft, 2026
"""Request schemas."""

from fieldcamp.core.schemas.common import ReadModel, UTCDateTime, WriteModel


class RequestType(ReadModel):
	id: int
	name: str


class RequestTypeCreate(WriteModel):
	name: str


class RequestTypeUpdate(WriteModel):
	name: str | None = None


class Request(ReadModel):
	id: int
	priority: int | None = None
	requested_by: int | None = None
	date_time_requested: UTCDateTime
	status: str | None = None
	project_id: int | None = None
	request_type: int | None = None


class RequestCreate(WriteModel):
	priority: int | None = None
	requested_by: int | None = None
	date_time_requested: UTCDateTime
	status: str | None = None
	project_id: int | None = None
	request_type: int | None = None


class RequestUpdate(WriteModel):
	priority: int | None = None
	requested_by: int | None = None
	date_time_requested: UTCDateTime | None = None
	status: str | None = None
	project_id: int | None = None
	request_type: int | None = None
