# (c) Copyright Datacraft, 2026
"""Projects: the aggregate root every other cluster attaches to."""

from .schema import Project, ProjectCreate, ProjectUpdate, ProjectDistance

__all__ = [
	"Project",
	"ProjectCreate",
	"ProjectUpdate",
	"ProjectDistance",
]
