# (c) Copyright Datacraft, 2026
"""Inventory, purchasing and PSE material schemas."""

from fieldcamp.core.schemas.common import ReadModel, UTCDateTime, WriteModel


class OdooProduct(ReadModel):
	id: int
	code: str
	product_name: str
	description: str | None = None


class OdooProductCreate(WriteModel):
	code: str
	product_name: str
	description: str | None = None


class OdooProductUpdate(WriteModel):
	code: str | None = None
	product_name: str | None = None
	description: str | None = None


class CampProductType(ReadModel):
	id: int
	name: str
	description: str | None = None


class CampProductTypeCreate(WriteModel):
	name: str
	description: str | None = None


class CampProductTypeUpdate(WriteModel):
	name: str | None = None
	description: str | None = None


class ProductStorageType(ReadModel):
	id: int
	type: str


class ProductStorageTypeCreate(WriteModel):
	type: str


class ProductStorageTypeUpdate(WriteModel):
	type: str | None = None


class UnitFormat(ReadModel):
	id: int
	format: str


class UnitFormatCreate(WriteModel):
	format: str


class UnitFormatUpdate(WriteModel):
	format: str | None = None


class PurchaseGroup(ReadModel):
	id: int
	name: str


class PurchaseGroupCreate(WriteModel):
	name: str


class PurchaseGroupUpdate(WriteModel):
	name: str | None = None


class PurchaseDropOffLocation(ReadModel):
	id: int
	name: str
	location: str


class PurchaseDropOffLocationCreate(WriteModel):
	name: str
	location: str


class PurchaseDropOffLocationUpdate(WriteModel):
	name: str | None = None
	location: str | None = None


class CampProduct(ReadModel):
	id: int
	product_name: str
	project_id: int | None = None
	odoo_product_id: int | None = None
	quantity: int | None = None
	unit_format: int | None = None
	storage_type: int | None = None
	storage_id: int | None = None
	comments: str | None = None


class CampProductCreate(WriteModel):
	product_name: str
	project_id: int | None = None
	odoo_product_id: int | None = None
	quantity: int | None = None
	unit_format: int | None = None
	storage_type: int | None = None
	storage_id: int | None = None
	comments: str | None = None


class CampProductUpdate(WriteModel):
	product_name: str | None = None
	project_id: int | None = None
	odoo_product_id: int | None = None
	quantity: int | None = None
	unit_format: int | None = None
	storage_type: int | None = None
	storage_id: int | None = None
	comments: str | None = None


class Purchase(ReadModel):
	id: int
	camp_product_id: int | None = None
	quantity_requested: int
	unit_format: int | None = None
	quantity_received: int | None = None
	drop_off_date_time_requested: UTCDateTime | None = None
	actual_drop_off_date_time: UTCDateTime | None = None
	drop_off_location_id: int | None = None


class PurchaseCreate(WriteModel):
	camp_product_id: int | None = None
	quantity_requested: int
	unit_format: int | None = None
	quantity_received: int | None = None
	drop_off_date_time_requested: UTCDateTime | None = None
	actual_drop_off_date_time: UTCDateTime | None = None
	drop_off_location_id: int | None = None


class PurchaseUpdate(WriteModel):
	camp_product_id: int | None = None
	quantity_requested: int | None = None
	unit_format: int | None = None
	quantity_received: int | None = None
	drop_off_date_time_requested: UTCDateTime | None = None
	actual_drop_off_date_time: UTCDateTime | None = None
	drop_off_location_id: int | None = None


class MaterialUsed(ReadModel):
	id: int
	code: str
	name: str
	project_id: int | None = None
	pse_responsable_id: int | None = None
	camp_responsable_id: int | None = None
	current_holder_id: int | None = None
	image_path: str | None = None


class MaterialUsedCreate(WriteModel):
	code: str
	name: str
	project_id: int | None = None
	pse_responsable_id: int | None = None
	camp_responsable_id: int | None = None
	current_holder_id: int | None = None
	image_path: str | None = None


class MaterialUsedUpdate(WriteModel):
	code: str | None = None
	name: str | None = None
	project_id: int | None = None
	pse_responsable_id: int | None = None
	camp_responsable_id: int | None = None
	current_holder_id: int | None = None
	image_path: str | None = None
