"""Account Admin CLI — typer commands against a throwaway SQLite file.

Tests cover:
    - Commands never create tables: a fresh file errors cleanly and still migrates
    - add → list shows the account with its role
    - promote grants admin; passwd reports unchanged/changed
    - Unknown email or duplicate account → exit code 1 with "Error:" message
"""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect
from typer.testing import CliRunner

from todo_app.cli import cli

runner = CliRunner()

ALEMBIC_DIR = Path(__file__).resolve().parents[1] / "alembic"


@pytest.fixture
def db_file(tmp_path):
    return tmp_path / "cli.db"


@pytest.fixture
def migrate(db_file, monkeypatch):
    """Run `alembic upgrade head` against db_file."""
    url = f"sqlite+aiosqlite:///{db_file}"
    monkeypatch.setenv("DATABASE_URL", url)

    def _migrate():
        cfg = Config()
        cfg.set_main_option("script_location", str(ALEMBIC_DIR))
        cfg.set_main_option("sqlalchemy.url", url)
        command.upgrade(cfg, "head")

    return _migrate


@pytest.fixture
def raw_invoke(db_file):
    url = f"sqlite+aiosqlite:///{db_file}"

    def _invoke(*args: str):
        return runner.invoke(cli, ["--database-url", url, *args])

    return _invoke


@pytest.fixture
def invoke(migrate, raw_invoke):
    migrate()
    return raw_invoke


def _tables(db_file) -> set[str]:
    engine = create_engine(f"sqlite:///{db_file}")
    try:
        return set(inspect(engine).get_table_names())
    finally:
        engine.dispose()


def test_unmigrated_database_then_upgrade(raw_invoke, migrate, db_file):
    res = raw_invoke("add", "ops@example.com", "--password", "secret1")
    assert res.exit_code == 1
    assert "alembic upgrade head" in res.output
    assert "users" not in _tables(db_file)

    migrate()
    assert {"users", "categories", "todos", "alembic_version"} <= _tables(db_file)

    res = raw_invoke("add", "ops@example.com", "--password", "secret1")
    assert res.exit_code == 0, res.output

    migrate()
    assert raw_invoke("list").output.count("ops@example.com") == 1


def test_add_then_list(invoke):
    res = invoke("add", "ops@example.com", "--password", "secret1")
    assert res.exit_code == 0, res.output
    assert "Created ops@example.com (user)" in res.output

    listed = invoke("list")
    assert listed.exit_code == 0
    [line] = listed.output.strip().splitlines()
    assert line.split("\t")[1:] == ["ops@example.com", "user"]


def test_add_with_admin_role(invoke):
    res = invoke("add", "root@example.com", "--role", "admin", "--password", "secret1")
    assert res.exit_code == 0, res.output
    assert "(admin)" in res.output


def test_add_duplicate_fails(invoke):
    invoke("add", "ops@example.com", "--password", "secret1")
    res = invoke("add", "OPS@example.com", "--password", "secret2")
    assert res.exit_code == 1
    assert "Error: User already exists" in res.output


def test_add_short_password_fails(invoke):
    res = invoke("add", "ops@example.com", "--password", "abc")
    assert res.exit_code == 1
    assert "Error:" in res.output


def test_promote(invoke):
    invoke("add", "ops@example.com", "--password", "secret1")
    res = invoke("promote", "ops@example.com")
    assert res.exit_code == 0, res.output
    assert "ops@example.com is now admin" in res.output
    assert invoke("list").output.strip().endswith("admin")


def test_promote_unknown_email(invoke):
    res = invoke("promote", "ghost@example.com")
    assert res.exit_code == 1
    assert "Error: User not found" in res.output


def test_passwd_unchanged_then_changed(invoke):
    invoke("add", "ops@example.com", "--password", "secret1")
    same = invoke("passwd", "ops@example.com", "--password", "secret1")
    assert same.exit_code == 0, same.output
    assert "Password unchanged" in same.output
    changed = invoke("passwd", "ops@example.com", "--password", "secret2")
    assert "Password changed" in changed.output


def test_passwd_unknown_email(invoke):
    res = invoke("passwd", "ghost@example.com", "--password", "secret1")
    assert res.exit_code == 1
