# (c) Copyright Datacraft, 2026
"""Shared enumerations."""
from enum import Enum


class Gender(str, Enum):
	MALE = "M"
	FEMALE = "F"


class IsolationLevel(str, Enum):
	READ_COMMITTED = "READ COMMITTED"
	REPEATABLE_READ = "REPEATABLE READ"
	SERIALIZABLE = "SERIALIZABLE"
