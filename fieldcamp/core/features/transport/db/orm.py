# (c) Copyright Datacraft, 2026
"""Vehicles, transport locations and scheduled transportations."""
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fieldcamp.core.db.base import Base
from fieldcamp.core.db.geo import geography_point


class VehicleType(Base):
	__tablename__ = "vehicules_type"

	id: Mapped[int] = mapped_column(primary_key=True)
	type: Mapped[str] = mapped_column(String, nullable=False)

	vehicles: Mapped[list["AvailableVehicle"]] = relationship(
		"AvailableVehicle",
		back_populates="vehicle_type",
		passive_deletes=True,
	)

	def __repr__(self) -> str:
		return f"VehicleType({self.id=}, {self.type=})"

	__table_args__ = (
		Index("idx_vehicules_type", "type"),
	)


class AvailableVehicle(Base):
	__tablename__ = "available_vehicules"

	id: Mapped[int] = mapped_column(primary_key=True)
	code: Mapped[str] = mapped_column(String, unique=True, nullable=False)
	type_id: Mapped[int | None] = mapped_column(
		ForeignKey("vehicules_type.id", ondelete="CASCADE")
	)
	available_seats: Mapped[int] = mapped_column(Integer, nullable=False)
	image_path: Mapped[str | None] = mapped_column(String)

	vehicle_type: Mapped["VehicleType | None"] = relationship(
		"VehicleType",
		back_populates="vehicles",
	)

	def __repr__(self) -> str:
		return f"AvailableVehicle({self.id=}, {self.code=})"

	__table_args__ = (
		Index("idx_vehicule_code", "code"),
		Index("idx_available_vehicules_type_id", "type_id"),
	)


class TransportLocation(Base):
	__tablename__ = "transport_locations"

	id: Mapped[int] = mapped_column(primary_key=True)
	code: Mapped[str] = mapped_column(String, unique=True, nullable=False)
	name: Mapped[str] = mapped_column(String, nullable=False)
	location = mapped_column(geography_point(), nullable=True)
	description: Mapped[str | None] = mapped_column(String)

	def __repr__(self) -> str:
		return f"TransportLocation({self.id=}, {self.code=})"

	__table_args__ = (
		Index("idx_transport_location_code", "code"),
		Index("idx_transport_location_name", "name"),
		Index("idx_transport_location_geog", "location", postgresql_using="gist"),
	)


class Transportation(Base):
	"""A scheduled vehicle movement between two transport locations.

	Departure before arrival is not enforced here.
	"""
	__tablename__ = "transportations"

	id: Mapped[int] = mapped_column(primary_key=True)
	vehicule_id: Mapped[int | None] = mapped_column(
		ForeignKey("available_vehicules.id", ondelete="CASCADE")
	)
	pax: Mapped[int] = mapped_column(Integer, nullable=False)
	origin_id: Mapped[int | None] = mapped_column(
		ForeignKey("transport_locations.id", ondelete="CASCADE")
	)
	destination_id: Mapped[int | None] = mapped_column(
		ForeignKey("transport_locations.id", ondelete="CASCADE")
	)
	departure_date_time: Mapped[datetime] = mapped_column(
		DateTime(timezone=True),
		nullable=False
	)
	scheduled_arrival_date_time: Mapped[datetime] = mapped_column(
		DateTime(timezone=True),
		nullable=False
	)

	vehicle: Mapped["AvailableVehicle | None"] = relationship(
		"AvailableVehicle",
		foreign_keys=[vehicule_id],
	)
	origin: Mapped["TransportLocation | None"] = relationship(
		"TransportLocation",
		foreign_keys=[origin_id],
	)
	destination: Mapped["TransportLocation | None"] = relationship(
		"TransportLocation",
		foreign_keys=[destination_id],
	)

	def __repr__(self) -> str:
		return (
			f"Transportation({self.id=}, {self.origin_id=}, "
			f"{self.destination_id=}, {self.departure_date_time=})"
		)

	__table_args__ = (
		Index("idx_transportations_vehicule_id", "vehicule_id"),
		Index("idx_transportations_origin_id", "origin_id"),
		Index("idx_transportations_destination_id", "destination_id"),
		Index("idx_transport_departure_date", "departure_date_time"),
		Index("idx_transport_arrival_date", "scheduled_arrival_date_time"),
	)
