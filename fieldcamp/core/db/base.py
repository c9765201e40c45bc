# (c) Copyright Datacraft, 2026
"""Declarative base shared by every feature's ORM models."""
from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Mirrors PostgreSQL's own default constraint names so the ORM metadata and
# the migrations produce the same catalog as a hand-written DDL script.
NAMING_CONVENTION = {
	"pk": "%(table_name)s_pkey",
	"uq": "%(table_name)s_%(column_0_name)s_key",
	"fk": "%(table_name)s_%(column_0_name)s_fkey",
	"ck": "%(table_name)s_%(constraint_name)s_check",
	"ix": "ix_%(table_name)s_%(column_0_name)s",
}


class Base(DeclarativeBase):
	metadata = MetaData(naming_convention=NAMING_CONVENTION)
