# (c) Copyright Datacraft, 2026
from .orm import ChecklistArea, ChecklistTask

__all__ = [
	"ChecklistArea",
	"ChecklistTask",
]
