# (c) Copyright Datacraft, 2026
"""Beneficiary children ORM model."""
from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from fieldcamp.core.db.base import Base


class Child(Base):
	__tablename__ = "children"

	id: Mapped[int] = mapped_column(primary_key=True)
	name: Mapped[str] = mapped_column(String, nullable=False)
	surname: Mapped[str] = mapped_column(String, nullable=False)
	age: Mapped[int] = mapped_column(Integer, nullable=False)
	gender: Mapped[str | None] = mapped_column(String(1))
	project_id: Mapped[int | None] = mapped_column(
		ForeignKey("projects.id", ondelete="CASCADE")
	)

	def __repr__(self) -> str:
		return f"Child({self.id=}, {self.name=}, {self.project_id=})"

	__table_args__ = (
		CheckConstraint("gender IN ('M', 'F')", name="gender"),
		Index("idx_children_project_id", "project_id"),
	)
