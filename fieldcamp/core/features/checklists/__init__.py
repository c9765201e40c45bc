# (c) Copyright Datacraft, 2026
"""Pre-departure checklists grouped by area."""

from .schema import (
	ChecklistArea,
	ChecklistAreaCreate,
	ChecklistAreaUpdate,
	ChecklistTask,
	ChecklistTaskCreate,
	ChecklistTaskUpdate,
)

__all__ = [
	"ChecklistArea",
	"ChecklistAreaCreate",
	"ChecklistAreaUpdate",
	"ChecklistTask",
	"ChecklistTaskCreate",
	"ChecklistTaskUpdate",
]
