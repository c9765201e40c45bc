# (c) Copyright Datacraft, 2026
"""
Camp products, purchases and PSE material.
"""
from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from fieldcamp.core.exceptions import IntegrityViolation, NotFound, UniquenessViolation
from fieldcamp.core.features.inventory import schema
from fieldcamp.core.features.inventory.db import api as inventory_api
from fieldcamp.core.features.people.db import api as people_api
from fieldcamp.core.features.projects.db import api as projects_api


@pytest.fixture
async def project(db_session: AsyncSession):
	return await projects_api.create_project(
		db_session, {"project_code": "ABC", "project_name": "Site A"}
	)


@pytest.fixture
async def rice(db_session: AsyncSession, project):
	"""Rice for project ABC, catalogued in Odoo, counted in sacks."""
	odoo = await inventory_api.create_odoo_product(
		db_session, {"code": "FOOD-001", "product_name": "Rice 25kg"}
	)
	(sack,) = await inventory_api.ensure_unit_formats(db_session, ["sack"])
	(dry,) = await inventory_api.ensure_storage_types(db_session, ["dry"])
	return await inventory_api.create_camp_product(
		db_session,
		{
			"product_name": "Rice",
			"project_id": project.id,
			"odoo_product_id": odoo.id,
			"quantity": 4,
			"unit_format": sack.id,
			"storage_type": dry.id,
		},
	)


def test_quantities_accept_any_integer():
	purchase = schema.PurchaseCreate(quantity_requested=-1, quantity_received=0)

	assert purchase.quantity_requested == -1
	assert purchase.quantity_received == 0


async def test_duplicate_odoo_code(db_session: AsyncSession, rice):
	with pytest.raises(UniquenessViolation):
		await inventory_api.create_odoo_product(
			db_session, {"code": "FOOD-001", "product_name": "Rice 50kg"}
		)


async def test_catalog_rows_in_use_cannot_be_deleted(db_session: AsyncSession, rice):
	with pytest.raises(IntegrityViolation):
		await inventory_api.delete_odoo_product(db_session, rice.odoo_product_id)


async def test_unit_format_in_use_cannot_be_deleted(db_session: AsyncSession, rice):
	with pytest.raises(IntegrityViolation):
		await inventory_api.delete_unit_format(db_session, rice.unit_format)


async def test_unknown_catalog_reference(db_session: AsyncSession, project):
	with pytest.raises(IntegrityViolation) as exc_info:
		await inventory_api.create_camp_product(
			db_session,
			{"product_name": "Beans", "project_id": project.id, "odoo_product_id": 999},
		)

	assert exc_info.value.column == "odoo_product_id"


async def test_purchase_lifecycle(db_session: AsyncSession, rice):
	depot = await inventory_api.create_drop_off_location(
		db_session, {"name": "Depot", "location": "Road 6, km 12"}
	)
	purchase = await inventory_api.create_purchase(
		db_session,
		{
			"camp_product_id": rice.id,
			"quantity_requested": 10,
			"unit_format": rice.unit_format,
			"drop_off_date_time_requested": "2026-06-28T09:00:00+07:00",
			"drop_off_location_id": depot.id,
		},
	)
	assert not purchase.is_delivered

	rows, _ = await inventory_api.list_purchases(db_session, pending_only=True)
	assert [row.id for row in rows] == [purchase.id]

	await inventory_api.record_drop_off(
		db_session, purchase.id, 9, datetime(2026, 6, 28, 3, 30, tzinfo=timezone.utc)
	)

	purchase = await inventory_api.get_purchase(db_session, purchase.id)
	assert purchase.is_delivered
	assert purchase.quantity_received == 9
	rows, total = await inventory_api.list_purchases(db_session, pending_only=True)
	assert total == 0

	with pytest.raises(IntegrityViolation):
		await inventory_api.delete_drop_off_location(db_session, depot.id)


async def test_product_deletion_removes_its_purchases(db_session: AsyncSession, rice):
	purchase = await inventory_api.create_purchase(
		db_session, {"camp_product_id": rice.id, "quantity_requested": 5}
	)

	await inventory_api.delete_camp_product(db_session, rice.id)

	with pytest.raises(NotFound):
		await inventory_api.get_purchase(db_session, purchase.id)


async def test_material_custody(db_session: AsyncSession, project):
	jane = await people_api.create_camp_person(
		db_session, {"name": "Jane", "surname": "Doe", "project_id": project.id}
	)
	john = await people_api.create_camp_person(
		db_session, {"name": "John", "surname": "Roe", "project_id": project.id}
	)
	radio = await inventory_api.create_material(
		db_session,
		{
			"code": "RADIO-1",
			"name": "Radio",
			"project_id": project.id,
			"pse_responsable_id": jane.id,
			"current_holder_id": jane.id,
		},
	)
	tent = await inventory_api.create_material(
		db_session,
		{"code": "TENT-1", "name": "Tent", "project_id": project.id, "current_holder_id": john.id},
	)

	await inventory_api.hand_over_material(db_session, radio.id, john.id)

	held = await inventory_api.list_material_held_by(db_session, john.id)
	assert [row.code for row in held] == ["RADIO-1", "TENT-1"]
	assert await inventory_api.list_material_held_by(db_session, jane.id) == []
	responsible = await inventory_api.list_material_held_by(
		db_session, jane.id, include_responsibilities=True
	)
	assert [row.id for row in responsible] == [radio.id]

	rows, total = await inventory_api.list_material(db_session, project_id=project.id)
	assert total == 2
	assert {row.id for row in rows} == {radio.id, tent.id}


async def test_list_camp_products(db_session: AsyncSession, project, rice):
	await inventory_api.create_camp_product(
		db_session, {"product_name": "Beans", "project_id": project.id}
	)

	rows, total = await inventory_api.list_camp_products(db_session, project_id=project.id)
	assert total == 2
	assert [row.product_name for row in rows] == ["Beans", "Rice"]

	rows, _ = await inventory_api.list_camp_products(
		db_session, odoo_product_id=rice.odoo_product_id
	)
	assert [row.id for row in rows] == [rice.id]


async def test_product_type_lifecycle(db_session: AsyncSession):
	food = await inventory_api.create_product_type(
		db_session, {"name": "Food", "description": "Dry rations"}
	)

	found = await inventory_api.get_product_type(db_session, food.id)
	assert (found.name, found.description) == ("Food", "Dry rations")

	await inventory_api.update_product_type(db_session, food.id, {"description": None})
	assert (await inventory_api.get_product_type(db_session, food.id)).description is None

	await inventory_api.delete_product_type(db_session, food.id)
	with pytest.raises(NotFound):
		await inventory_api.get_product_type(db_session, food.id)


async def test_ensure_lookup_rows_is_idempotent(db_session: AsyncSession):
	food, hygiene = await inventory_api.ensure_product_types(db_session, ["Food", "Hygiene"])
	again = await inventory_api.ensure_product_types(db_session, ["Hygiene", "Food", "Food"])

	assert [row.id for row in again] == [hygiene.id, food.id]

	(weekly,) = await inventory_api.ensure_purchase_groups(db_session, ["Weekly"])
	(same,) = await inventory_api.ensure_purchase_groups(db_session, ["Weekly"])
	assert same.id == weekly.id


async def test_purchase_group_lifecycle(db_session: AsyncSession):
	group = await inventory_api.create_purchase_group(db_session, {"name": "Weekly"})

	await inventory_api.update_purchase_group(db_session, group.id, {"name": "Monthly"})
	assert (await inventory_api.get_purchase_group(db_session, group.id)).name == "Monthly"

	await inventory_api.delete_purchase_group(db_session, group.id)
	with pytest.raises(NotFound):
		await inventory_api.get_purchase_group(db_session, group.id)


async def test_unit_format_and_storage_type_lookups(db_session: AsyncSession, rice):
	sack = await inventory_api.get_unit_format(db_session, rice.unit_format)
	dry = await inventory_api.get_storage_type(db_session, rice.storage_type)
	assert (sack.format, dry.type) == ("sack", "dry")

	await inventory_api.update_unit_format(db_session, sack.id, {"format": "bag"})
	assert (await inventory_api.get_unit_format(db_session, sack.id)).format == "bag"

	crate = await inventory_api.create_unit_format(db_session, {"format": "crate"})
	chilled = await inventory_api.create_storage_type(db_session, {"type": "chilled"})
	await inventory_api.update_storage_type(db_session, chilled.id, {"type": "frozen"})
	await inventory_api.delete_unit_format(db_session, crate.id)
	await inventory_api.delete_storage_type(db_session, chilled.id)

	with pytest.raises(NotFound):
		await inventory_api.get_unit_format(db_session, crate.id)
	with pytest.raises(NotFound):
		await inventory_api.get_storage_type(db_session, chilled.id)

	with pytest.raises(IntegrityViolation):
		await inventory_api.delete_storage_type(db_session, dry.id)


async def test_update_drop_off_location(db_session: AsyncSession):
	depot = await inventory_api.create_drop_off_location(
		db_session, {"name": "Depot", "location": "Road 6, km 12"}
	)

	await inventory_api.update_drop_off_location(
		db_session, depot.id, {"location": "Road 6, km 14"}
	)

	found = await inventory_api.get_drop_off_location(db_session, depot.id)
	assert (found.name, found.location) == ("Depot", "Road 6, km 14")
