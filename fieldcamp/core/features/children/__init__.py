# (c) Copyright Datacraft, 2026
"""Beneficiary children scoped to a project."""

from .schema import Child, ChildCreate, ChildUpdate

__all__ = [
	"Child",
	"ChildCreate",
	"ChildUpdate",
]
