# (c) Copyright Datacraft, 2026
"""Generic data-access helpers against a mocked session."""
import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import IntegrityError

from fieldcamp.core import orm
from fieldcamp.core.db import crud
from fieldcamp.core.exceptions import DomainViolation, NotFound, UniquenessViolation
from fieldcamp.core.features.people.schema import TeamCreate, TeamUpdate
from fieldcamp.core.features.projects.schema import ProjectCreate


def compiled(stmt) -> str:
	return str(
		stmt.compile(
			dialect=postgresql.dialect(),
			compile_kwargs={"literal_binds": True},
		)
	)


class UniqueViolationError(Exception):
	sqlstate = "23505"
	constraint_name = "projects_project_code_key"


def test_coerce_rejects_four_character_project_code():
	with pytest.raises(DomainViolation) as exc_info:
		crud.coerce(
			ProjectCreate,
			{"project_code": "ABCD", "project_name": "Site A"},
			"projects",
		)

	assert exc_info.value.column == "project_code"
	assert exc_info.value.entity == "projects"


def test_coerce_rejects_unknown_fields():
	with pytest.raises(DomainViolation):
		crud.coerce(
			TeamCreate,
			{"code": "LOGIS1", "name": "Logistics", "colour": "red"},
			"teams",
		)


def test_coerce_passes_schema_instances_through():
	data = TeamCreate(code="LOGIS1", name="Logistics")

	assert crud.coerce(TeamCreate, data, "teams") is data


async def test_create_row_adds_and_flushes(mock_session):
	team = await crud.create_row(
		mock_session,
		orm.Team,
		TeamCreate,
		{"code": "LOGIS1", "name": "Logistics"},
	)

	assert isinstance(team, orm.Team)
	assert team.code == "LOGIS1"
	assert team.description is None
	mock_session.add.assert_called_once_with(team)
	mock_session.flush.assert_awaited_once()
	mock_session.refresh.assert_awaited_once_with(team)


async def test_create_row_translates_duplicate_code(mock_session):
	mock_session.flush.side_effect = IntegrityError(
		"INSERT INTO projects ...", {}, UniqueViolationError("duplicate key")
	)

	with pytest.raises(UniquenessViolation) as exc_info:
		await crud.create_row(
			mock_session,
			orm.Project,
			ProjectCreate,
			{"project_code": "ABC", "project_name": "Site A"},
		)

	assert exc_info.value.column == "project_code"
	mock_session.refresh.assert_not_awaited()


async def test_get_row_raises_not_found(mock_session, make_result):
	mock_session.execute.return_value = make_result(scalar=None)

	with pytest.raises(NotFound) as exc_info:
		await crud.get_row(mock_session, orm.CampPerson, 42)

	assert exc_info.value.entity == "camp_people"
	assert exc_info.value.key == 42


async def test_get_row_always_queries_the_database(mock_session, make_result):
	person = orm.CampPerson(id=7, name="Jane", surname="Doe")
	mock_session.execute.return_value = make_result(scalar=person)

	assert await crud.get_row(mock_session, orm.CampPerson, 7) is person

	stmt = mock_session.execute.await_args.args[0]
	assert stmt.get_execution_options()["populate_existing"] is True
	assert "camp_people.id = 7" in compiled(stmt)


async def test_get_row_by_reports_lookup_column(mock_session, make_result):
	mock_session.execute.return_value = make_result(scalar=None)

	with pytest.raises(NotFound) as exc_info:
		await crud.get_row_by(mock_session, orm.Team, orm.Team.code, "LOGIS1")

	assert exc_info.value.column == "code"
	assert exc_info.value.key == "LOGIS1"


async def test_update_row_applies_only_set_fields(mock_session, make_result):
	team = orm.Team(id=1, code="LOGIS1", name="Logistics", description="Trucks")
	mock_session.execute.return_value = make_result(scalar=team)

	await crud.update_row(mock_session, orm.Team, TeamUpdate, 1, {"name": "Supply"})

	assert team.name == "Supply"
	assert team.code == "LOGIS1"
	assert team.description == "Trucks"
	mock_session.flush.assert_awaited_once()


async def test_update_row_explicit_none_clears_column(mock_session, make_result):
	team = orm.Team(id=1, code="LOGIS1", name="Logistics", description="Trucks")
	mock_session.execute.return_value = make_result(scalar=team)

	await crud.update_row(mock_session, orm.Team, TeamUpdate, 1, {"description": None})

	assert team.description is None


async def test_update_row_validates_before_touching_the_database(mock_session):
	with pytest.raises(DomainViolation):
		await crud.update_row(mock_session, orm.Team, TeamUpdate, 1, {"code": "TOOLONG"})

	mock_session.execute.assert_not_awaited()


async def test_delete_row_is_single_returning_statement(mock_session, make_result):
	mock_session.execute.return_value = make_result(scalar=3)

	await crud.delete_row(mock_session, orm.Project, 3)

	mock_session.execute.assert_awaited_once()
	sql = compiled(mock_session.execute.await_args.args[0])
	assert sql.startswith("DELETE FROM projects")
	assert "RETURNING projects.id" in sql


async def test_delete_row_raises_not_found(mock_session, make_result):
	mock_session.execute.return_value = make_result(scalar=None)

	with pytest.raises(NotFound):
		await crud.delete_row(mock_session, orm.Project, 3)


async def test_list_rows_returns_total_and_caps_page_size(mock_session, make_result):
	teams = [orm.Team(id=1, code="LOGIS1", name="Logistics")]
	mock_session.execute.side_effect = [
		make_result(scalar=1),
		make_result(scalars=teams),
	]

	rows, total = await crud.list_rows(
		mock_session,
		orm.Team,
		orm.Team.code == "LOGIS1",
		order_by=[orm.Team.name],
		page_size=10_000,
		page_number=2,
	)

	assert rows == teams
	assert total == 1
	sql = compiled(mock_session.execute.await_args_list[1].args[0])
	assert "ORDER BY teams.name" in sql
	assert "LIMIT 500" in sql
	assert "OFFSET 500" in sql


async def test_ensure_reference_rows_inserts_only_missing(mock_session, make_result):
	van = orm.VehicleType(id=1, type="Van")
	mock_session.execute.return_value = make_result(scalars=[van])

	rows = await crud.ensure_reference_rows(
		mock_session,
		orm.VehicleType,
		orm.VehicleType.type,
		["Van", "Truck", "Van"],
	)

	assert [row.type for row in rows] == ["Van", "Truck"]
	assert rows[0] is van
	mock_session.add.assert_called_once()
	assert mock_session.add.call_args.args[0].type == "Truck"
	mock_session.flush.assert_awaited_once()


async def test_ensure_reference_rows_without_missing_skips_flush(mock_session, make_result):
	van = orm.VehicleType(id=1, type="Van")
	mock_session.execute.return_value = make_result(scalars=[van])

	rows = await crud.ensure_reference_rows(
		mock_session, orm.VehicleType, orm.VehicleType.type, ["Van"]
	)

	assert rows == [van]
	mock_session.flush.assert_not_awaited()
