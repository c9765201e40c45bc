# (c) Copyright Datacraft, 2026
"""Inventory, purchasing and PSE material ORM models.

Catalog references (Odoo product, unit format, storage type, drop-off
location) are ``ON DELETE RESTRICT``: reference data that is still in use
cannot be removed. The three camp-person pointers on PSE material are
``ON DELETE SET NULL`` so the material's history outlives the person's
place on the roster.
"""
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fieldcamp.core.db.base import Base


class OdooProduct(Base):
	"""Product master data mirrored from the PSE Odoo catalog."""
	__tablename__ = "pse_odoo_products"

	id: Mapped[int] = mapped_column(primary_key=True)
	code: Mapped[str] = mapped_column(String, unique=True, nullable=False)
	product_name: Mapped[str] = mapped_column(String, nullable=False)
	description: Mapped[str | None] = mapped_column(String)

	def __repr__(self) -> str:
		return f"OdooProduct({self.id=}, {self.code=})"

	__table_args__ = (
		Index("idx_odoo_product_code", "code"),
	)


class CampProductType(Base):
	__tablename__ = "camp_product_types"

	id: Mapped[int] = mapped_column(primary_key=True)
	name: Mapped[str] = mapped_column(String, nullable=False)
	description: Mapped[str | None] = mapped_column(String)


class ProductStorageType(Base):
	__tablename__ = "product_storage_types"

	id: Mapped[int] = mapped_column(primary_key=True)
	type: Mapped[str] = mapped_column(String, nullable=False)


class UnitFormat(Base):
	__tablename__ = "unit_format"

	id: Mapped[int] = mapped_column(primary_key=True)
	format: Mapped[str] = mapped_column(String, nullable=False)


class CampProduct(Base):
	"""A consumable or durable good held for a project."""
	__tablename__ = "camp_products"

	id: Mapped[int] = mapped_column(primary_key=True)
	product_name: Mapped[str] = mapped_column(String, nullable=False)
	project_id: Mapped[int | None] = mapped_column(
		ForeignKey("projects.id", ondelete="CASCADE")
	)
	odoo_product_id: Mapped[int | None] = mapped_column(
		ForeignKey("pse_odoo_products.id", ondelete="RESTRICT")
	)
	quantity: Mapped[int | None] = mapped_column(Integer)
	unit_format: Mapped[int | None] = mapped_column(
		ForeignKey("unit_format.id", ondelete="RESTRICT")
	)
	storage_type: Mapped[int | None] = mapped_column(
		ForeignKey("product_storage_types.id", ondelete="RESTRICT")
	)
	storage_id: Mapped[int | None] = mapped_column(Integer)
	comments: Mapped[str | None] = mapped_column(String)

	odoo_product: Mapped["OdooProduct | None"] = relationship(
		"OdooProduct",
		foreign_keys=[odoo_product_id],
	)
	purchases: Mapped[list["Purchase"]] = relationship(
		"Purchase",
		back_populates="camp_product",
		passive_deletes=True,
	)

	def __repr__(self) -> str:
		return f"CampProduct({self.id=}, {self.product_name=}, {self.project_id=})"

	__table_args__ = (
		Index("idx_camp_products_project_id", "project_id"),
		Index("idx_camp_products_odoo_product_id", "odoo_product_id"),
	)


class PurchaseGroup(Base):
	__tablename__ = "purchase_group"

	id: Mapped[int] = mapped_column(primary_key=True)
	name: Mapped[str] = mapped_column(String, nullable=False)


class PurchaseDropOffLocation(Base):
	__tablename__ = "purchase_drop_off_locations"

	id: Mapped[int] = mapped_column(primary_key=True)
	name: Mapped[str] = mapped_column(String, nullable=False)
	location: Mapped[str] = mapped_column(String, nullable=False)

	def __repr__(self) -> str:
		return f"PurchaseDropOffLocation({self.id=}, {self.name=})"


class Purchase(Base):
	"""A purchase request for a camp product, completed by its drop-off."""
	__tablename__ = "purchases"

	id: Mapped[int] = mapped_column(primary_key=True)
	camp_product_id: Mapped[int | None] = mapped_column(
		ForeignKey("camp_products.id", ondelete="CASCADE")
	)
	quantity_requested: Mapped[int] = mapped_column(Integer, nullable=False)
	unit_format: Mapped[int | None] = mapped_column(
		ForeignKey("unit_format.id", ondelete="RESTRICT")
	)
	quantity_received: Mapped[int | None] = mapped_column(Integer)
	drop_off_date_time_requested: Mapped[datetime | None] = mapped_column(
		DateTime(timezone=True)
	)
	actual_drop_off_date_time: Mapped[datetime | None] = mapped_column(
		DateTime(timezone=True)
	)
	drop_off_location_id: Mapped[int | None] = mapped_column(
		ForeignKey("purchase_drop_off_locations.id", ondelete="RESTRICT")
	)

	camp_product: Mapped["CampProduct | None"] = relationship(
		"CampProduct",
		back_populates="purchases",
	)

	@property
	def is_delivered(self) -> bool:
		return self.actual_drop_off_date_time is not None

	def __repr__(self) -> str:
		return f"Purchase({self.id=}, {self.camp_product_id=}, {self.quantity_requested=})"

	__table_args__ = (
		Index("idx_purchases_camp_product_id", "camp_product_id"),
		Index("idx_purchases_drop_off_location_id", "drop_off_location_id"),
		Index(
			"idx_purchases_drop_off_dates",
			"drop_off_date_time_requested",
			"actual_drop_off_date_time",
		),
	)


class MaterialUsed(Base):
	"""Traceable PSE equipment lent to a project.

	The responsible and holder columns are plain foreign keys into
	``camp_people``; no relationship is mapped back from people to material.
	"""
	__tablename__ = "pse_material_used"

	id: Mapped[int] = mapped_column(primary_key=True)
	code: Mapped[str] = mapped_column(String, nullable=False)
	name: Mapped[str] = mapped_column(String, nullable=False)
	project_id: Mapped[int | None] = mapped_column(
		ForeignKey("projects.id", ondelete="CASCADE")
	)
	pse_responsable_id: Mapped[int | None] = mapped_column(
		ForeignKey("camp_people.id", ondelete="SET NULL")
	)
	camp_responsable_id: Mapped[int | None] = mapped_column(
		ForeignKey("camp_people.id", ondelete="SET NULL")
	)
	current_holder_id: Mapped[int | None] = mapped_column(
		ForeignKey("camp_people.id", ondelete="SET NULL")
	)
	image_path: Mapped[str | None] = mapped_column(String)

	def __repr__(self) -> str:
		return f"MaterialUsed({self.id=}, {self.code=}, {self.current_holder_id=})"
