# (c) Copyright Datacraft, 2026
"""Checklist ORM models."""
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fieldcamp.core.db.base import Base


class ChecklistArea(Base):
	"""Grouping for checklist tasks, e.g. "Safety" or "Logistics"."""
	__tablename__ = "checklist_area"

	id: Mapped[int] = mapped_column(primary_key=True)
	name: Mapped[str] = mapped_column(String, nullable=False)
	description: Mapped[str | None] = mapped_column(String)

	tasks: Mapped[list["ChecklistTask"]] = relationship(
		"ChecklistTask",
		back_populates="area",
		passive_deletes=True,
	)

	def __repr__(self) -> str:
		return f"ChecklistArea({self.id=}, {self.name=})"


class ChecklistTask(Base):
	__tablename__ = "checklist_tasks"

	id: Mapped[int] = mapped_column(primary_key=True)
	name: Mapped[str] = mapped_column(String, nullable=False)
	short_description: Mapped[str | None] = mapped_column(String)
	project_id: Mapped[int | None] = mapped_column(
		ForeignKey("projects.id", ondelete="CASCADE")
	)
	team_id: Mapped[int | None] = mapped_column(
		ForeignKey("teams.id", ondelete="CASCADE")
	)
	area_id: Mapped[int | None] = mapped_column(
		ForeignKey("checklist_area.id", ondelete="CASCADE")
	)
	priority: Mapped[int | None] = mapped_column(Integer)
	done: Mapped[bool | None] = mapped_column(Boolean, server_default=false())
	due_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

	area: Mapped["ChecklistArea | None"] = relationship(
		"ChecklistArea",
		back_populates="tasks",
	)

	def __repr__(self) -> str:
		return f"ChecklistTask({self.id=}, {self.name=}, {self.done=})"

	__table_args__ = (
		Index("idx_checklist_tasks_name", "name"),
		Index("idx_checklist_tasks_project_id", "project_id"),
		Index("idx_checklist_tasks_team_id", "team_id"),
		Index("idx_checklist_tasks_area_id", "area_id"),
		Index("idx_checklist_tasks_due_date", "due_date"),
	)
