# (c) Copyright Datacraft, 2026
"""Teams, roles and camp people ORM models.

Ownership runs team -> role -> camp person -> extra data, each link
``ON DELETE CASCADE``. Relationships use ``passive_deletes`` so the database
performs the cascade.
"""
from datetime import datetime

from sqlalchemy import (
	Boolean,
	CheckConstraint,
	DateTime,
	ForeignKey,
	Index,
	Integer,
	String,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fieldcamp.core.db.base import Base


class Team(Base):
	__tablename__ = "teams"

	id: Mapped[int] = mapped_column(primary_key=True)
	code: Mapped[str] = mapped_column(String(6), unique=True, nullable=False)
	name: Mapped[str] = mapped_column(String, nullable=False)
	description: Mapped[str | None] = mapped_column(String)

	roles: Mapped[list["Role"]] = relationship(
		"Role",
		back_populates="team",
		passive_deletes=True,
	)

	def __repr__(self) -> str:
		return f"Team({self.id=}, {self.code=})"

	__table_args__ = (
		Index("idx_team_name", "name"),
	)


class Role(Base):
	__tablename__ = "roles"

	id: Mapped[int] = mapped_column(primary_key=True)
	team_id: Mapped[int | None] = mapped_column(
		ForeignKey("teams.id", ondelete="CASCADE")
	)
	name: Mapped[str] = mapped_column(String, nullable=False)
	description: Mapped[str | None] = mapped_column(String)

	team: Mapped["Team | None"] = relationship("Team", back_populates="roles")
	people: Mapped[list["CampPerson"]] = relationship(
		"CampPerson",
		back_populates="role",
		passive_deletes=True,
	)

	def __repr__(self) -> str:
		return f"Role({self.id=}, {self.name=}, {self.team_id=})"

	__table_args__ = (
		Index("idx_role_name", "name"),
		Index("idx_roles_team_id", "team_id"),
	)


class CampPerson(Base):
	"""A volunteer on a project roster."""
	__tablename__ = "camp_people"

	id: Mapped[int] = mapped_column(primary_key=True)
	role_id: Mapped[int | None] = mapped_column(
		ForeignKey("roles.id", ondelete="CASCADE")
	)
	project_id: Mapped[int | None] = mapped_column(
		ForeignKey("projects.id", ondelete="CASCADE")
	)
	name: Mapped[str] = mapped_column(String, nullable=False)
	surname: Mapped[str] = mapped_column(String, nullable=False)
	international_phone_number: Mapped[str | None] = mapped_column(String)
	kh_phone_number: Mapped[str | None] = mapped_column(String)
	email: Mapped[str | None] = mapped_column(String)
	gender: Mapped[str | None] = mapped_column(String(1))
	age: Mapped[int | None] = mapped_column(Integer)
	nationality: Mapped[str | None] = mapped_column(String)
	passport: Mapped[str | None] = mapped_column(String)
	photo_path: Mapped[str | None] = mapped_column(String)

	role: Mapped["Role | None"] = relationship("Role", back_populates="people")
	extra_data: Mapped[list["CampPersonExtraData"]] = relationship(
		"CampPersonExtraData",
		back_populates="person",
		order_by="CampPersonExtraData.id",
		passive_deletes=True,
	)

	def __repr__(self) -> str:
		return f"CampPerson({self.id=}, {self.name=}, {self.surname=})"

	__table_args__ = (
		CheckConstraint("gender IN ('M', 'F')", name="gender"),
		Index("idx_camp_people_name", "name", "surname"),
		Index("idx_camp_people_email", "email"),
		Index("idx_camp_people_role_id", "role_id"),
		Index("idx_camp_people_project_id", "project_id"),
	)


class CampPersonExtraData(Base):
	"""Travel details and pre-departure compliance flags.

	Nothing prevents several rows per person; the usual case is one.
	Compliance flags are tri-state: NULL means not yet checked.
	"""
	__tablename__ = "camp_people_extra_data"

	id: Mapped[int] = mapped_column(primary_key=True)
	camp_people_id: Mapped[int | None] = mapped_column(
		ForeignKey("camp_people.id", ondelete="CASCADE")
	)
	arrival_flight_number: Mapped[str | None] = mapped_column(String)
	arrival_date_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
	departure_flight_number: Mapped[str | None] = mapped_column(String)
	departure_date_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
	flight_tickets: Mapped[bool | None] = mapped_column(Boolean)
	travel_insurance: Mapped[bool | None] = mapped_column(Boolean)
	vaccination_card: Mapped[bool | None] = mapped_column(Boolean)
	passport_fotocopy: Mapped[str | None] = mapped_column(String)
	cambodia_evisa: Mapped[bool | None] = mapped_column(Boolean)
	passport_photo: Mapped[str | None] = mapped_column(String)
	certificate_sexual_offences: Mapped[bool | None] = mapped_column(Boolean)
	proof_of_payment: Mapped[bool | None] = mapped_column(Boolean)
	programme_rules: Mapped[bool | None] = mapped_column(Boolean)
	volunteer_contract: Mapped[bool | None] = mapped_column(Boolean)

	person: Mapped["CampPerson | None"] = relationship(
		"CampPerson",
		back_populates="extra_data",
	)

	def __repr__(self) -> str:
		return f"CampPersonExtraData({self.id=}, {self.camp_people_id=})"
