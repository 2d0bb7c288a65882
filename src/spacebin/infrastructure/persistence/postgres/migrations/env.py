"""Alembic environment for the document schema."""

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

config = context.config

# Only set when invoked through the alembic CLI with alembic.ini.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        from spacebin.infrastructure.persistence.postgres.migrator import sqlalchemy_url

        config.set_main_option("sqlalchemy.url", sqlalchemy_url(database_url).replace("%", "%%"))

target_metadata = None


def run_migrations_offline() -> None:
    """Emit SQL without a database connection."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations over a short-lived connection."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    try:
        with connectable.connect() as connection:
            context.configure(connection=connection, target_metadata=target_metadata)
            with context.begin_transaction():
                context.run_migrations()
    finally:
        connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
