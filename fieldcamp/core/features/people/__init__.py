# (c) Copyright Datacraft, 2026
"""Teams, roles, camp people and their compliance data."""

from .schema import (
	Team,
	TeamCreate,
	TeamUpdate,
	Role,
	RoleCreate,
	RoleUpdate,
	CampPerson,
	CampPersonCreate,
	CampPersonUpdate,
	CampPersonDetails,
	CampPersonExtraData,
	CampPersonExtraDataCreate,
	CampPersonExtraDataUpdate,
)

__all__ = [
	"Team",
	"TeamCreate",
	"TeamUpdate",
	"Role",
	"RoleCreate",
	"RoleUpdate",
	"CampPerson",
	"CampPersonCreate",
	"CampPersonUpdate",
	"CampPersonDetails",
	"CampPersonExtraData",
	"CampPersonExtraDataCreate",
	"CampPersonExtraDataUpdate",
]
