# (c) Copyright Datacraft, 2026
"""
Teams, roles, camp people and their extra data.
"""
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from fieldcamp.core.exceptions import (
	DomainViolation,
	IntegrityViolation,
	NotFound,
	UniquenessViolation,
)
from fieldcamp.core.features.inventory.db import api as inventory_api
from fieldcamp.core.features.people import schema
from fieldcamp.core.features.people.db import api as people_api
from fieldcamp.core.features.projects.db import api as projects_api
from fieldcamp.core.features.requests.db import api as requests_api


@pytest.fixture
async def make_person(db_session: AsyncSession):
	"""Factory fixture for camp people."""
	async def _make_person(name: str = "Jane", surname: str = "Doe", **kwargs):
		return await people_api.create_camp_person(
			db_session, {"name": name, "surname": surname, **kwargs}
		)

	return _make_person


def test_team_code_is_at_most_six_characters():
	schema.TeamCreate(code="LOGIS1", name="Logistics")

	with pytest.raises(ValidationError):
		schema.TeamCreate(code="LOGIS12", name="Logistics")


@pytest.mark.parametrize("gender", ["X", "m", "MF"])
def test_gender_outside_domain_is_rejected(gender):
	with pytest.raises(ValidationError):
		schema.CampPersonCreate(name="Jane", surname="Doe", gender=gender)


def test_gender_stored_as_single_letter():
	person = schema.CampPersonCreate(name="Jane", surname="Doe", gender="F")

	assert person.gender == "F"


def test_email_is_kept_as_given():
	person = schema.CampPersonCreate(name="Jane", surname="Doe", email="Jane@Example.ORG")

	assert person.email == "Jane@Example.ORG"


def test_extra_data_times_are_normalised_to_utc():
	extra = schema.CampPersonExtraDataCreate(
		arrival_date_time=datetime(2026, 7, 1, 14, 30, tzinfo=timezone(timedelta(hours=7)))
	)

	assert extra.arrival_date_time == datetime(2026, 7, 1, 7, 30, tzinfo=timezone.utc)
	assert extra.arrival_date_time.utcoffset() == timedelta(0)


def test_extra_data_rejects_naive_times():
	with pytest.raises(ValidationError):
		schema.CampPersonExtraDataCreate(arrival_date_time=datetime(2026, 7, 1, 14, 30))


def test_missing_documents_treats_unknown_as_missing():
	extra = schema.CampPersonExtraData(
		id=1,
		flight_tickets=True,
		travel_insurance=False,
		vaccination_card=True,
		cambodia_evisa=True,
		certificate_sexual_offences=True,
		proof_of_payment=True,
		programme_rules=True,
	)

	assert extra.missing_documents == ["travel_insurance", "volunteer_contract"]


async def test_project_deletion_keeps_team_and_role(db_session: AsyncSession):
	project = await projects_api.create_project(
		db_session, {"project_code": "ABC", "project_name": "Site A"}
	)
	team = await people_api.create_team(
		db_session, {"code": "LOGIS1", "name": "Logistics"}
	)
	role = await people_api.create_role(
		db_session, {"team_id": team.id, "name": "Driver"}
	)
	person = await people_api.create_camp_person(
		db_session,
		{
			"role_id": role.id,
			"project_id": project.id,
			"name": "Jane",
			"surname": "Doe",
			"gender": "F",
		},
	)

	await projects_api.delete_project(db_session, project.id)

	with pytest.raises(NotFound):
		await people_api.get_camp_person(db_session, person.id)
	assert (await people_api.get_team_by_code(db_session, "LOGIS1")).id == team.id
	assert (await people_api.get_role(db_session, role.id)).name == "Driver"


async def test_team_deletion_cascades_through_roles(db_session: AsyncSession, make_person):
	team = await people_api.create_team(db_session, {"code": "MED", "name": "Medical"})
	role = await people_api.create_role(db_session, {"team_id": team.id, "name": "Nurse"})
	person = await make_person(role_id=role.id)
	extra = await people_api.create_extra_data(
		db_session, {"camp_people_id": person.id}
	)

	await people_api.delete_team(db_session, team.id)

	for getter, row_id in [
		(people_api.get_role, role.id),
		(people_api.get_camp_person, person.id),
		(people_api.get_extra_data, extra.id),
	]:
		with pytest.raises(NotFound):
			await getter(db_session, row_id)


async def test_gender_x_is_domain_violation(db_session: AsyncSession):
	with pytest.raises(DomainViolation) as exc_info:
		await people_api.create_camp_person(
			db_session, {"name": "Jane", "surname": "Doe", "gender": "X"}
		)

	assert exc_info.value.column == "gender"


@pytest.mark.parametrize("gender", ["M", "F", None])
async def test_valid_genders_are_stored(db_session: AsyncSession, make_person, gender):
	person = await make_person(gender=gender)

	assert (await people_api.get_camp_person(db_session, person.id)).gender == gender


async def test_duplicate_team_code(db_session: AsyncSession):
	await people_api.create_team(db_session, {"code": "LOGIS1", "name": "Logistics"})

	with pytest.raises(UniquenessViolation):
		await people_api.create_team(db_session, {"code": "LOGIS1", "name": "Logistics 2"})


async def test_role_for_unknown_team(db_session: AsyncSession):
	with pytest.raises(IntegrityViolation) as exc_info:
		await people_api.create_role(db_session, {"team_id": 404, "name": "Ghost"})

	assert exc_info.value.constraint == "roles_team_id_fkey"


async def test_person_deletion_clears_references(db_session: AsyncSession, make_person):
	project = await projects_api.create_project(
		db_session, {"project_code": "ABC", "project_name": "Site A"}
	)
	holder = await make_person()
	keeper = await make_person(name="John", surname="Roe")
	material = await inventory_api.create_material(
		db_session,
		{
			"code": "RADIO-1",
			"name": "Radio",
			"project_id": project.id,
			"pse_responsable_id": holder.id,
			"camp_responsable_id": keeper.id,
			"current_holder_id": holder.id,
		},
	)
	request = await requests_api.create_request(
		db_session,
		{
			"project_id": project.id,
			"requested_by": holder.id,
			"date_time_requested": datetime(2026, 7, 1, tzinfo=timezone.utc),
		},
	)

	await people_api.delete_camp_person(db_session, holder.id)

	material = await inventory_api.get_material(db_session, material.id)
	assert material.pse_responsable_id is None
	assert material.current_holder_id is None
	assert material.camp_responsable_id == keeper.id
	request = await requests_api.get_request(db_session, request.id)
	assert request.requested_by is None
	assert request.project_id == project.id


async def test_person_with_extra_data(db_session: AsyncSession, make_person):
	person = await make_person()
	await people_api.create_extra_data(
		db_session,
		{
			"camp_people_id": person.id,
			"arrival_flight_number": "PG931",
			"arrival_date_time": "2026-07-01T14:30:00+07:00",
			"travel_insurance": True,
		},
	)
	# several rows per person are allowed
	await people_api.create_extra_data(
		db_session, {"camp_people_id": person.id, "departure_flight_number": "PG932"}
	)

	rows = await people_api.list_extra_data(db_session, person.id)
	assert len(rows) == 2
	assert rows[0].arrival_date_time == datetime(2026, 7, 1, 7, 30, tzinfo=timezone.utc)
	assert rows[0].flight_tickets is None

	details = schema.CampPersonDetails.model_validate(
		await people_api.get_camp_person_with_extra_data(db_session, person.id)
	)
	assert [row.arrival_flight_number for row in details.extra_data] == ["PG931", None]


async def test_list_camp_people_filters(db_session: AsyncSession, make_person):
	project = await projects_api.create_project(
		db_session, {"project_code": "ABC", "project_name": "Site A"}
	)
	await make_person(project_id=project.id, email="jane@example.org")
	await make_person(name="John", surname="Smith", project_id=project.id)
	await make_person(name="Ana", surname="Lopez")

	rows, total = await people_api.list_camp_people(db_session, project_id=project.id)
	assert total == 2
	assert [row.surname for row in rows] == ["Doe", "Smith"]

	rows, total = await people_api.list_camp_people(db_session, free_text="example.org")
	assert [row.name for row in rows] == ["Jane"]


async def test_update_person_rejects_bad_gender(db_session: AsyncSession, make_person):
	person = await make_person(gender="F")

	with pytest.raises(DomainViolation):
		await people_api.update_camp_person(db_session, person.id, {"gender": "X"})

	assert (await people_api.get_camp_person(db_session, person.id)).gender == "F"


async def test_email_round_trips_unchanged(db_session: AsyncSession, make_person):
	person = await make_person(email="Jane@localhost")

	found = await people_api.get_camp_person(db_session, person.id)

	assert found.email == "Jane@localhost"
