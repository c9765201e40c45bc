# (c) Copyright Datacraft, 2026
"""Alembic migration environment (asyncpg)."""
import asyncio
import logging
from logging.config import fileConfig

from alembic import context
from geoalchemy2 import alembic_helpers
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from fieldcamp.core import orm  # noqa: F401  registers every table
from fieldcamp.core.config import get_settings
from fieldcamp.core.db.base import Base

config = context.config

if config.config_file_name is not None:
	fileConfig(config.config_file_name)

logger = logging.getLogger("alembic.env")

target_metadata = Base.metadata

if not config.get_main_option("sqlalchemy.url"):
	config.set_main_option("sqlalchemy.url", get_settings().async_db_url)


def _configure(**kwargs) -> None:
	context.configure(
		target_metadata=target_metadata,
		include_object=alembic_helpers.include_object,
		process_revision_directives=alembic_helpers.writer,
		render_item=alembic_helpers.render_item,
		compare_type=True,
		**kwargs,
	)


def run_migrations_offline() -> None:
	_configure(
		url=config.get_main_option("sqlalchemy.url"),
		literal_binds=True,
		dialect_opts={"paramstyle": "named"},
	)

	with context.begin_transaction():
		context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
	_configure(connection=connection)

	with context.begin_transaction():
		context.run_migrations()


async def run_async_migrations() -> None:
	connectable = async_engine_from_config(
		config.get_section(config.config_ini_section, {}),
		prefix="sqlalchemy.",
		poolclass=pool.NullPool,
	)

	async with connectable.connect() as connection:
		await connection.run_sync(do_run_migrations)

	await connectable.dispose()
	logger.info("Migrations applied")


def run_migrations_online() -> None:
	asyncio.run(run_async_migrations())


if context.is_offline_mode():
	run_migrations_offline()
else:
	run_migrations_online()
