# (c) Copyright Datacraft, 2026
"""Request ORM models."""
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fieldcamp.core.db.base import Base


class RequestType(Base):
	__tablename__ = "request_types"

	id: Mapped[int] = mapped_column(primary_key=True)
	name: Mapped[str] = mapped_column(String, nullable=False)

	def __repr__(self) -> str:
		return f"RequestType({self.id=}, {self.name=})"


class Request(Base):
	"""A prioritised request raised within a project.

	``requested_by`` is cleared, not cascaded, when the requester is removed.
	"""
	__tablename__ = "requests"

	id: Mapped[int] = mapped_column(primary_key=True)
	priority: Mapped[int | None] = mapped_column(Integer)
	requested_by: Mapped[int | None] = mapped_column(
		ForeignKey("camp_people.id", ondelete="SET NULL")
	)
	date_time_requested: Mapped[datetime] = mapped_column(
		DateTime(timezone=True),
		nullable=False
	)
	status: Mapped[str | None] = mapped_column(String)
	project_id: Mapped[int | None] = mapped_column(
		ForeignKey("projects.id", ondelete="CASCADE")
	)
	request_type: Mapped[int | None] = mapped_column(
		ForeignKey("request_types.id", ondelete="RESTRICT")
	)

	type: Mapped["RequestType | None"] = relationship(
		"RequestType",
		foreign_keys=[request_type],
	)

	def __repr__(self) -> str:
		return f"Request({self.id=}, {self.status=}, {self.project_id=})"

	__table_args__ = (
		Index("idx_requests_requested_by", "requested_by"),
		Index("idx_requests_project_id", "project_id"),
		Index("idx_requests_request_type", "request_type"),
		Index("idx_requests_date_time_requested", "date_time_requested"),
	)
