# (c) Copyright Datacraft, 2026
"""Inventory, purchasing and PSE material database API."""
import logging
from datetime import datetime
from typing import Any, Iterable, Mapping

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from fieldcamp.core.db import crud
from fieldcamp.core.features.inventory import schema

from .orm import (
	CampProduct,
	CampProductType,
	MaterialUsed,
	OdooProduct,
	ProductStorageType,
	Purchase,
	PurchaseDropOffLocation,
	PurchaseGroup,
	UnitFormat,
)

logger = logging.getLogger(__name__)


# Odoo catalog

async def create_odoo_product(
	session: AsyncSession,
	data: schema.OdooProductCreate | Mapping[str, Any],
) -> OdooProduct:
	return await crud.create_row(session, OdooProduct, schema.OdooProductCreate, data)


async def get_odoo_product(session: AsyncSession, product_id: int) -> OdooProduct:
	return await crud.get_row(session, OdooProduct, product_id)


async def get_odoo_product_by_code(session: AsyncSession, code: str) -> OdooProduct:
	return await crud.get_row_by(session, OdooProduct, OdooProduct.code, code)


async def update_odoo_product(
	session: AsyncSession,
	product_id: int,
	data: schema.OdooProductUpdate | Mapping[str, Any],
) -> OdooProduct:
	return await crud.update_row(
		session, OdooProduct, schema.OdooProductUpdate, product_id, data
	)


async def delete_odoo_product(session: AsyncSession, product_id: int) -> None:
	"""Fails with IntegrityViolation while a camp product still refers to it."""
	await crud.delete_row(session, OdooProduct, product_id)


# Product types

async def create_product_type(
	session: AsyncSession,
	data: schema.CampProductTypeCreate | Mapping[str, Any],
) -> CampProductType:
	return await crud.create_row(
		session, CampProductType, schema.CampProductTypeCreate, data
	)


async def get_product_type(session: AsyncSession, type_id: int) -> CampProductType:
	return await crud.get_row(session, CampProductType, type_id)


async def update_product_type(
	session: AsyncSession,
	type_id: int,
	data: schema.CampProductTypeUpdate | Mapping[str, Any],
) -> CampProductType:
	return await crud.update_row(
		session, CampProductType, schema.CampProductTypeUpdate, type_id, data
	)


async def delete_product_type(session: AsyncSession, type_id: int) -> None:
	await crud.delete_row(session, CampProductType, type_id)


async def ensure_product_types(
	session: AsyncSession,
	names: Iterable[str],
) -> list[CampProductType]:
	return await crud.ensure_reference_rows(
		session, CampProductType, CampProductType.name, names
	)


# Storage types

async def create_storage_type(
	session: AsyncSession,
	data: schema.ProductStorageTypeCreate | Mapping[str, Any],
) -> ProductStorageType:
	return await crud.create_row(
		session, ProductStorageType, schema.ProductStorageTypeCreate, data
	)


async def get_storage_type(
	session: AsyncSession,
	storage_type_id: int,
) -> ProductStorageType:
	return await crud.get_row(session, ProductStorageType, storage_type_id)


async def update_storage_type(
	session: AsyncSession,
	storage_type_id: int,
	data: schema.ProductStorageTypeUpdate | Mapping[str, Any],
) -> ProductStorageType:
	return await crud.update_row(
		session,
		ProductStorageType,
		schema.ProductStorageTypeUpdate,
		storage_type_id,
		data,
	)


async def delete_storage_type(session: AsyncSession, storage_type_id: int) -> None:
	"""Fails with IntegrityViolation while a camp product is stored this way."""
	await crud.delete_row(session, ProductStorageType, storage_type_id)


async def ensure_storage_types(
	session: AsyncSession,
	types: Iterable[str],
) -> list[ProductStorageType]:
	return await crud.ensure_reference_rows(
		session, ProductStorageType, ProductStorageType.type, types
	)


# Unit formats

async def create_unit_format(
	session: AsyncSession,
	data: schema.UnitFormatCreate | Mapping[str, Any],
) -> UnitFormat:
	return await crud.create_row(session, UnitFormat, schema.UnitFormatCreate, data)


async def get_unit_format(session: AsyncSession, unit_format_id: int) -> UnitFormat:
	return await crud.get_row(session, UnitFormat, unit_format_id)


async def update_unit_format(
	session: AsyncSession,
	unit_format_id: int,
	data: schema.UnitFormatUpdate | Mapping[str, Any],
) -> UnitFormat:
	return await crud.update_row(
		session, UnitFormat, schema.UnitFormatUpdate, unit_format_id, data
	)


async def delete_unit_format(session: AsyncSession, unit_format_id: int) -> None:
	"""Fails with IntegrityViolation while products or purchases use the format."""
	await crud.delete_row(session, UnitFormat, unit_format_id)


async def ensure_unit_formats(
	session: AsyncSession,
	formats: Iterable[str],
) -> list[UnitFormat]:
	return await crud.ensure_reference_rows(session, UnitFormat, UnitFormat.format, formats)


# Purchase groups

async def create_purchase_group(
	session: AsyncSession,
	data: schema.PurchaseGroupCreate | Mapping[str, Any],
) -> PurchaseGroup:
	return await crud.create_row(session, PurchaseGroup, schema.PurchaseGroupCreate, data)


async def get_purchase_group(session: AsyncSession, group_id: int) -> PurchaseGroup:
	return await crud.get_row(session, PurchaseGroup, group_id)


async def update_purchase_group(
	session: AsyncSession,
	group_id: int,
	data: schema.PurchaseGroupUpdate | Mapping[str, Any],
) -> PurchaseGroup:
	return await crud.update_row(
		session, PurchaseGroup, schema.PurchaseGroupUpdate, group_id, data
	)


async def delete_purchase_group(session: AsyncSession, group_id: int) -> None:
	await crud.delete_row(session, PurchaseGroup, group_id)


async def ensure_purchase_groups(
	session: AsyncSession,
	names: Iterable[str],
) -> list[PurchaseGroup]:
	return await crud.ensure_reference_rows(session, PurchaseGroup, PurchaseGroup.name, names)


# Drop-off locations

async def create_drop_off_location(
	session: AsyncSession,
	data: schema.PurchaseDropOffLocationCreate | Mapping[str, Any],
) -> PurchaseDropOffLocation:
	return await crud.create_row(
		session, PurchaseDropOffLocation, schema.PurchaseDropOffLocationCreate, data
	)


async def get_drop_off_location(
	session: AsyncSession,
	location_id: int,
) -> PurchaseDropOffLocation:
	return await crud.get_row(session, PurchaseDropOffLocation, location_id)


async def update_drop_off_location(
	session: AsyncSession,
	location_id: int,
	data: schema.PurchaseDropOffLocationUpdate | Mapping[str, Any],
) -> PurchaseDropOffLocation:
	return await crud.update_row(
		session,
		PurchaseDropOffLocation,
		schema.PurchaseDropOffLocationUpdate,
		location_id,
		data,
	)


async def delete_drop_off_location(session: AsyncSession, location_id: int) -> None:
	"""Fails with IntegrityViolation while a purchase is delivered there."""
	await crud.delete_row(session, PurchaseDropOffLocation, location_id)


# Camp products

async def create_camp_product(
	session: AsyncSession,
	data: schema.CampProductCreate | Mapping[str, Any],
) -> CampProduct:
	return await crud.create_row(session, CampProduct, schema.CampProductCreate, data)


async def get_camp_product(session: AsyncSession, camp_product_id: int) -> CampProduct:
	return await crud.get_row(session, CampProduct, camp_product_id)


async def update_camp_product(
	session: AsyncSession,
	camp_product_id: int,
	data: schema.CampProductUpdate | Mapping[str, Any],
) -> CampProduct:
	return await crud.update_row(
		session, CampProduct, schema.CampProductUpdate, camp_product_id, data
	)


async def delete_camp_product(session: AsyncSession, camp_product_id: int) -> None:
	"""Delete a camp product together with its purchases."""
	await crud.delete_row(session, CampProduct, camp_product_id)


async def list_camp_products(
	session: AsyncSession,
	project_id: int | None = None,
	odoo_product_id: int | None = None,
	page_size: int | None = None,
	page_number: int = 1,
) -> tuple[list[CampProduct], int]:
	criteria = []
	if project_id is not None:
		criteria.append(CampProduct.project_id == project_id)
	if odoo_product_id is not None:
		criteria.append(CampProduct.odoo_product_id == odoo_product_id)
	return await crud.list_rows(
		session,
		CampProduct,
		*criteria,
		order_by=[CampProduct.product_name, CampProduct.id],
		page_size=page_size,
		page_number=page_number,
	)


# Purchases

async def create_purchase(
	session: AsyncSession,
	data: schema.PurchaseCreate | Mapping[str, Any],
) -> Purchase:
	return await crud.create_row(session, Purchase, schema.PurchaseCreate, data)


async def get_purchase(session: AsyncSession, purchase_id: int) -> Purchase:
	return await crud.get_row(session, Purchase, purchase_id)


async def update_purchase(
	session: AsyncSession,
	purchase_id: int,
	data: schema.PurchaseUpdate | Mapping[str, Any],
) -> Purchase:
	return await crud.update_row(session, Purchase, schema.PurchaseUpdate, purchase_id, data)


async def record_drop_off(
	session: AsyncSession,
	purchase_id: int,
	quantity_received: int,
	dropped_off_at: datetime,
) -> Purchase:
	"""Record the delivery that completes a purchase."""
	purchase = await update_purchase(
		session,
		purchase_id,
		{
			"quantity_received": quantity_received,
			"actual_drop_off_date_time": dropped_off_at,
		},
	)
	logger.info(f"Purchase {purchase_id} dropped off ({quantity_received} received)")
	return purchase


async def delete_purchase(session: AsyncSession, purchase_id: int) -> None:
	await crud.delete_row(session, Purchase, purchase_id)


async def list_purchases(
	session: AsyncSession,
	camp_product_id: int | None = None,
	drop_off_location_id: int | None = None,
	pending_only: bool = False,
	page_size: int | None = None,
	page_number: int = 1,
) -> tuple[list[Purchase], int]:
	"""Purchases by requested drop-off time; ``pending_only`` keeps undelivered ones."""
	criteria = []
	if camp_product_id is not None:
		criteria.append(Purchase.camp_product_id == camp_product_id)
	if drop_off_location_id is not None:
		criteria.append(Purchase.drop_off_location_id == drop_off_location_id)
	if pending_only:
		criteria.append(Purchase.actual_drop_off_date_time.is_(None))
	return await crud.list_rows(
		session,
		Purchase,
		*criteria,
		order_by=[
			Purchase.drop_off_date_time_requested.asc().nulls_last(),
			Purchase.id,
		],
		page_size=page_size,
		page_number=page_number,
	)


# PSE material

async def create_material(
	session: AsyncSession,
	data: schema.MaterialUsedCreate | Mapping[str, Any],
) -> MaterialUsed:
	return await crud.create_row(session, MaterialUsed, schema.MaterialUsedCreate, data)


async def get_material(session: AsyncSession, material_id: int) -> MaterialUsed:
	return await crud.get_row(session, MaterialUsed, material_id)


async def update_material(
	session: AsyncSession,
	material_id: int,
	data: schema.MaterialUsedUpdate | Mapping[str, Any],
) -> MaterialUsed:
	return await crud.update_row(
		session, MaterialUsed, schema.MaterialUsedUpdate, material_id, data
	)


async def hand_over_material(
	session: AsyncSession,
	material_id: int,
	holder_id: int | None,
) -> MaterialUsed:
	"""Move custody of a piece of material to another camp person."""
	material = await update_material(session, material_id, {"current_holder_id": holder_id})
	logger.info(f"Material {material_id} now held by {holder_id}")
	return material


async def delete_material(session: AsyncSession, material_id: int) -> None:
	await crud.delete_row(session, MaterialUsed, material_id)


async def list_material(
	session: AsyncSession,
	project_id: int | None = None,
	page_size: int | None = None,
	page_number: int = 1,
) -> tuple[list[MaterialUsed], int]:
	criteria = []
	if project_id is not None:
		criteria.append(MaterialUsed.project_id == project_id)
	return await crud.list_rows(
		session,
		MaterialUsed,
		*criteria,
		order_by=[MaterialUsed.code, MaterialUsed.id],
		page_size=page_size,
		page_number=page_number,
	)


async def list_material_held_by(
	session: AsyncSession,
	person_id: int,
	include_responsibilities: bool = False,
) -> list[MaterialUsed]:
	"""Material the person holds, optionally also what they are responsible for."""
	condition = MaterialUsed.current_holder_id == person_id
	if include_responsibilities:
		condition = or_(
			condition,
			MaterialUsed.pse_responsable_id == person_id,
			MaterialUsed.camp_responsable_id == person_id,
		)
	stmt = (
		select(MaterialUsed)
		.where(condition)
		.order_by(MaterialUsed.code, MaterialUsed.id)
		.execution_options(populate_existing=True)
	)
	result = await session.execute(stmt)
	return list(result.scalars().all())
