"""Bundled Alembic migrations, exercised against a temporary SQLite database."""

import sqlalchemy as sa

from spacebin.infrastructure.persistence.postgres.migrator import (
    run_migrations,
    sqlalchemy_url,
)


def test_sqlalchemy_url_uses_psycopg_driver() -> None:
    assert (
        sqlalchemy_url("postgresql://u:p@db:5432/spacebin")
        == "postgresql+psycopg://u:p@db:5432/spacebin"
    )
    assert sqlalchemy_url("postgres://db/spacebin") == "postgresql+psycopg://db/spacebin"
    assert sqlalchemy_url("sqlite:///x.db") == "sqlite:///x.db"


def test_migrations_create_document_table(tmp_path) -> None:
    url = f"sqlite:///{tmp_path / 'spacebin.db'}"

    run_migrations(url)

    engine = sa.create_engine(url)
    try:
        inspector = sa.inspect(engine)
        assert "document" in inspector.get_table_names()
        columns = {c["name"] for c in inspector.get_columns("document")}
        assert columns == {"id", "content", "extension", "content_hash", "created_at"}
        indexes = {i["name"] for i in inspector.get_indexes("document")}
        assert "ix_document_created_at" in indexes
    finally:
        engine.dispose()


def test_migrations_are_idempotent(tmp_path) -> None:
    url = f"sqlite:///{tmp_path / 'spacebin.db'}"
    run_migrations(url)

    engine = sa.create_engine(url)
    try:
        with engine.begin() as conn:
            conn.execute(
                sa.text(
                    "INSERT INTO document (id, content, extension, content_hash) "
                    "VALUES ('abc123', 'hello world', 'txt', :h)"
                ),
                {"h": "0" * 64},
            )

        run_migrations(url)

        with engine.connect() as conn:
            rows = conn.execute(sa.text("SELECT id, content FROM document")).all()
            version = conn.execute(sa.text("SELECT version_num FROM alembic_version")).scalar_one()
        assert rows == [("abc123", "hello world")]
        assert version == "002"
    finally:
        engine.dispose()
