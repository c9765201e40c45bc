# (c) Copyright Datacraft, 2026
"""Projects ORM models."""
from sqlalchemy import CheckConstraint, Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from fieldcamp.core.db.base import Base
from fieldcamp.core.db.geo import geography_point


class Project(Base):
	"""A camp program; every other cluster hangs off ``projects.id``.

	Deleting a project cascades, inside the database, to its camp people,
	checklist tasks, children, camp products, requests and PSE material.
	"""
	__tablename__ = "projects"

	id: Mapped[int] = mapped_column(primary_key=True)
	project_code: Mapped[str] = mapped_column(String(3), unique=True, nullable=False)
	project_name: Mapped[str] = mapped_column(String, nullable=False)
	project_description: Mapped[str | None] = mapped_column(String)
	project_location = mapped_column(geography_point(), nullable=True)
	beneficiaries_ages: Mapped[str | None] = mapped_column(String)
	budget: Mapped[float | None] = mapped_column(Float)
	actual_money_spent: Mapped[float | None] = mapped_column(Float)

	def __repr__(self) -> str:
		return f"Project({self.id=}, {self.project_code=})"

	__table_args__ = (
		CheckConstraint(
			"char_length(project_code) = 3",
			name="project_code"
		),
		Index("idx_project_code", "project_code"),
		Index("idx_project_location", "project_location", postgresql_using="gist"),
	)
