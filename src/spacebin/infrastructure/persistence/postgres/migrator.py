"""Schema migrations bundled with the package (Alembic)."""

from pathlib import Path

from alembic import command
from alembic.config import Config

MIGRATIONS_DIR = Path(__file__).with_name("migrations")


def sqlalchemy_url(database_url: str) -> str:
    """Translate a libpq URL into a SQLAlchemy URL using the psycopg 3 driver."""
    for scheme in ("postgresql://", "postgres://"):
        if database_url.startswith(scheme):
            return "postgresql+psycopg://" + database_url[len(scheme) :]
    return database_url


def alembic_config(database_url: str) -> Config:
    """Build an Alembic config without an ini file."""
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    # configparser interpolation: escape percent-encoded credentials
    cfg.set_main_option("sqlalchemy.url", sqlalchemy_url(database_url).replace("%", "%%"))
    return cfg


def run_migrations(database_url: str, revision: str = "head") -> None:
    """Upgrade the database to ``revision``. Already-applied revisions are skipped."""
    command.upgrade(alembic_config(database_url), revision)
