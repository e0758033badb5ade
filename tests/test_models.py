"""DDL for the events table on the supported backends."""

from sqlalchemy.dialects import mysql, sqlite
from sqlalchemy.schema import CreateTable

from models.events import Event as EventModel


def _ddl(dialect):
    return str(CreateTable(EventModel.__table__).compile(dialect=dialect))


def test_mysql_ddl_uses_expression_timestamp_default():
    ddl = _ddl(mysql.dialect())

    assert "created_at VARCHAR(40) DEFAULT (CURRENT_TIMESTAMP)" in ddl
    assert "updated_at VARCHAR(40) DEFAULT (CURRENT_TIMESTAMP)" in ddl
    assert "DEFAULT CURRENT_TIMESTAMP" not in ddl


def test_free_text_columns_are_unbounded():
    ddl = _ddl(mysql.dialect())

    for column in ("title", "creator_name", "creator_email"):
        assert f"{column} TEXT NOT NULL" in ddl
    assert "location TEXT" in ddl


def test_sqlite_ddl_keeps_timestamp_default():
    assert "DEFAULT (CURRENT_TIMESTAMP)" in _ddl(sqlite.dialect())


def test_primary_key_has_no_extra_index():
    assert not EventModel.__table__.indexes
