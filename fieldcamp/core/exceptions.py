# (c) Copyright Datacraft, 2026
"""Error taxonomy of the data-access layer.

Every error raised here aborts the caller's transaction: the data-access
helpers never swallow a database error and never retry. Database errors are
recognised by their SQLSTATE and mapped onto four classes:

==========  ====================  =========================================
SQLSTATE    condition             raised as
==========  ====================  =========================================
23505       unique_violation      :class:`UniquenessViolation`
23503       foreign_key           :class:`IntegrityViolation`
23001       restrict_violation    :class:`IntegrityViolation`
23514       check_violation       :class:`DomainViolation`
23502       not_null_violation    :class:`DomainViolation`
22001       string too long       :class:`DomainViolation`
==========  ====================  =========================================
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from pydantic import ValidationError
from sqlalchemy.exc import DBAPIError

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
RESTRICT_VIOLATION = "23001"
CHECK_VIOLATION = "23514"
NOT_NULL_VIOLATION = "23502"
STRING_DATA_RIGHT_TRUNCATION = "22001"


class FieldCampError(Exception):
	"""Base class for data-access errors."""

	def __init__(
		self,
		message: str,
		entity: str | None = None,
		column: str | None = None,
		constraint: str | None = None,
	):
		self.entity = entity
		self.column = column
		self.constraint = constraint
		super().__init__(message)


class IntegrityViolation(FieldCampError):
	"""A referenced row does not exist, or a restricted row is still referenced."""


class UniquenessViolation(FieldCampError):
	"""Duplicate value on a unique column."""


class DomainViolation(FieldCampError):
	"""Value outside its domain, or a required value is missing."""


class NotFound(FieldCampError):
	"""No row with the requested identity."""

	def __init__(self, entity: str, key: object, column: str = "id"):
		self.key = key
		super().__init__(
			f"{entity} with {column}={key!r} not found",
			entity=entity,
			column=column,
		)


def _sqlstate(err: DBAPIError) -> str | None:
	orig = err.orig
	for candidate in (orig, getattr(orig, "__cause__", None)):
		if candidate is None:
			continue
		code = getattr(candidate, "sqlstate", None) or getattr(candidate, "pgcode", None)
		if code:
			return code
	return None


def _driver_attr(err: DBAPIError, name: str) -> str | None:
	"""Read a diagnostic field from the asyncpg or psycopg error."""
	orig = err.orig
	for candidate in (getattr(orig, "__cause__", None), orig):
		if candidate is None:
			continue
		value = getattr(candidate, name, None)
		if value:
			return value
		diag = getattr(candidate, "diag", None)
		if diag is not None and getattr(diag, name, None):
			return getattr(diag, name)
	return None


def constraint_columns(constraint_name: str | None) -> str | None:
	"""Resolve a constraint name to its column(s) through the ORM metadata."""
	if not constraint_name:
		return None

	from fieldcamp.core.db.base import Base

	for table in Base.metadata.tables.values():
		for constraint in table.constraints:
			if constraint.name != constraint_name:
				continue
			names = [column.name for column in constraint.columns]
			if names:
				return ", ".join(names)
			# table-level checks are named <table>_<column>_check
			prefix = f"{table.name}_"
			if constraint_name.startswith(prefix) and constraint_name.endswith("_check"):
				return constraint_name[len(prefix):-len("_check")]
			return None
	return None


def from_db_error(err: DBAPIError, entity: str) -> FieldCampError | None:
	"""Map a database error onto the taxonomy, or None for unrelated errors."""
	code = _sqlstate(err)
	constraint = _driver_attr(err, "constraint_name")
	column = _driver_attr(err, "column_name") or constraint_columns(constraint)
	lines = str(err.orig if err.orig is not None else err).strip().splitlines()
	detail = lines[0] if lines else type(err).__name__

	if code == UNIQUE_VIOLATION:
		cls = UniquenessViolation
	elif code in (FOREIGN_KEY_VIOLATION, RESTRICT_VIOLATION):
		cls = IntegrityViolation
	elif code in (CHECK_VIOLATION, NOT_NULL_VIOLATION, STRING_DATA_RIGHT_TRUNCATION):
		cls = DomainViolation
	else:
		return None

	return cls(
		f"{entity}: {detail}",
		entity=entity,
		column=column,
		constraint=constraint,
	)


def from_validation_error(err: ValidationError, entity: str) -> DomainViolation:
	first = err.errors()[0]
	column = ".".join(str(part) for part in first["loc"]) or None
	return DomainViolation(
		f"{entity}.{column}: {first['msg']}",
		entity=entity,
		column=column,
		constraint=first.get("type"),
	)


@asynccontextmanager
async def translate_db_errors(entity: str) -> AsyncIterator[None]:
	"""Re-raise database errors from the wrapped block as FieldCampError."""
	try:
		yield
	except DBAPIError as e:
		error = from_db_error(e, entity)
		if error is None:
			raise
		logger.warning(
			f"{type(error).__name__} on {entity} "
			f"(column={error.column}, constraint={error.constraint})"
		)
		raise error from e
