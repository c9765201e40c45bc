# (c) Copyright Datacraft, 2026
"""Prioritised requests raised by camp people."""

from .schema import (
	RequestType,
	RequestTypeCreate,
	RequestTypeUpdate,
	Request,
	RequestCreate,
	RequestUpdate,
)

__all__ = [
	"RequestType",
	"RequestTypeCreate",
	"RequestTypeUpdate",
	"Request",
	"RequestCreate",
	"RequestUpdate",
]
