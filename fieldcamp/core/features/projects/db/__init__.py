# (c) Copyright Datacraft, 2026
"""Projects database models and operations."""

from .orm import Project

__all__ = [
	"Project",
]
