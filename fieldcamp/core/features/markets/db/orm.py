# (c) Copyright Datacraft, 2026
"""Local markets ORM model."""
from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from fieldcamp.core.db.base import Base
from fieldcamp.core.db.geo import geography_point


class Market(Base):
	"""A place to buy supplies near a camp; standalone and geo-indexed."""
	__tablename__ = "markets"

	id: Mapped[int] = mapped_column(primary_key=True)
	name: Mapped[str] = mapped_column(String, nullable=False)
	opening_hours: Mapped[str | None] = mapped_column(String)
	phone: Mapped[str | None] = mapped_column(String)
	website: Mapped[str | None] = mapped_column(String)
	address: Mapped[str | None] = mapped_column(String)
	location = mapped_column(geography_point(), nullable=True)
	google_maps_link: Mapped[str | None] = mapped_column(String)
	comments: Mapped[str | None] = mapped_column(String)

	def __repr__(self) -> str:
		return f"Market({self.id=}, {self.name=})"

	__table_args__ = (
		Index("idx_market_name", "name"),
		Index("idx_market_location_geog", "location", postgresql_using="gist"),
	)
