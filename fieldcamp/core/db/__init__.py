# (c) Copyright Datacraft, 2026
"""Database base, session handling and shared data-access helpers."""
from .base import Base
from .engine import get_engine, get_session_factory, session_scope

__all__ = [
	"Base",
	"get_engine",
	"get_session_factory",
	"session_scope",
]
