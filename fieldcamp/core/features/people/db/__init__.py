# (c) Copyright Datacraft, 2026
"""People database models and operations."""

from .orm import Team, Role, CampPerson, CampPersonExtraData

__all__ = [
	"Team",
	"Role",
	"CampPerson",
	"CampPersonExtraData",
]
