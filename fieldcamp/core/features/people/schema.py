# (c) Copyright Datacraft, 2026
"""Team, role and camp people schemas."""
from pydantic import Field

from fieldcamp.core.schemas.common import ReadModel, UTCDateTime, WriteModel
from fieldcamp.core.types import Gender

COMPLIANCE_FLAGS = (
	"flight_tickets",
	"travel_insurance",
	"vaccination_card",
	"cambodia_evisa",
	"certificate_sexual_offences",
	"proof_of_payment",
	"programme_rules",
	"volunteer_contract",
)


class Team(ReadModel):
	id: int
	code: str
	name: str
	description: str | None = None


class TeamCreate(WriteModel):
	code: str = Field(..., max_length=6)
	name: str
	description: str | None = None


class TeamUpdate(WriteModel):
	code: str | None = Field(None, max_length=6)
	name: str | None = None
	description: str | None = None


class Role(ReadModel):
	id: int
	team_id: int | None = None
	name: str
	description: str | None = None


class RoleCreate(WriteModel):
	team_id: int | None = None
	name: str
	description: str | None = None


class RoleUpdate(WriteModel):
	team_id: int | None = None
	name: str | None = None
	description: str | None = None


class CampPerson(ReadModel):
	id: int
	role_id: int | None = None
	project_id: int | None = None
	name: str
	surname: str
	international_phone_number: str | None = None
	kh_phone_number: str | None = None
	email: str | None = None
	gender: Gender | None = None
	age: int | None = None
	nationality: str | None = None
	passport: str | None = None
	photo_path: str | None = None


class CampPersonCreate(WriteModel):
	role_id: int | None = None
	project_id: int | None = None
	name: str
	surname: str
	international_phone_number: str | None = None
	kh_phone_number: str | None = None
	email: str | None = None
	gender: Gender | None = None
	age: int | None = None
	nationality: str | None = None
	passport: str | None = None
	photo_path: str | None = None


class CampPersonUpdate(WriteModel):
	role_id: int | None = None
	project_id: int | None = None
	name: str | None = None
	surname: str | None = None
	international_phone_number: str | None = None
	kh_phone_number: str | None = None
	email: str | None = None
	gender: Gender | None = None
	age: int | None = None
	nationality: str | None = None
	passport: str | None = None
	photo_path: str | None = None


class _ExtraDataFields(WriteModel):
	arrival_flight_number: str | None = None
	arrival_date_time: UTCDateTime | None = None
	departure_flight_number: str | None = None
	departure_date_time: UTCDateTime | None = None
	flight_tickets: bool | None = None
	travel_insurance: bool | None = None
	vaccination_card: bool | None = None
	passport_fotocopy: str | None = None
	cambodia_evisa: bool | None = None
	passport_photo: str | None = None
	certificate_sexual_offences: bool | None = None
	proof_of_payment: bool | None = None
	programme_rules: bool | None = None
	volunteer_contract: bool | None = None


class CampPersonExtraDataCreate(_ExtraDataFields):
	camp_people_id: int | None = None


class CampPersonExtraDataUpdate(_ExtraDataFields):
	camp_people_id: int | None = None


class CampPersonExtraData(ReadModel):
	id: int
	camp_people_id: int | None = None
	arrival_flight_number: str | None = None
	arrival_date_time: UTCDateTime | None = None
	departure_flight_number: str | None = None
	departure_date_time: UTCDateTime | None = None
	flight_tickets: bool | None = None
	travel_insurance: bool | None = None
	vaccination_card: bool | None = None
	passport_fotocopy: str | None = None
	cambodia_evisa: bool | None = None
	passport_photo: str | None = None
	certificate_sexual_offences: bool | None = None
	proof_of_payment: bool | None = None
	programme_rules: bool | None = None
	volunteer_contract: bool | None = None

	@property
	def missing_documents(self) -> list[str]:
		"""Compliance flags that are not confirmed yet (False or unknown)."""
		return [
			name for name in COMPLIANCE_FLAGS
			if getattr(self, name) is not True
		]


class CampPersonDetails(CampPerson):
	"""Camp person with their extra data rows."""
	extra_data: list[CampPersonExtraData] = Field(default_factory=list)
