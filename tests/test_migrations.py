"""Tests for the Alembic migrations"""

import sqlite3
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config

ROOT = Path(__file__).resolve().parent.parent


def test_upgrade_creates_reservations_table(tmp_path):
    db_path = tmp_path / "reservations.db"
    config = Config()
    config.set_main_option("script_location", str(ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{db_path}")

    command.upgrade(config, "head")

    with sqlite3.connect(db_path) as conn:
        columns = [row[1] for row in conn.execute("PRAGMA table_info(reservations)")]
        conn.execute(
            "INSERT INTO reservations (date, time, guests, name, email, phone) "
            "VALUES ('2099-01-01', '19:00', 2, 'A', 'a@b.com', '12345')"
        )
        status, created_at = conn.execute(
            "SELECT status, created_at FROM reservations"
        ).fetchone()

    assert columns == [
        "id", "date", "time", "guests", "name", "email", "phone",
        "special_requests", "status", "created_at",
    ]
    assert status == "pending"
    assert created_at is not None


def test_status_constraint(tmp_path):
    db_path = tmp_path / "reservations.db"
    config = Config()
    config.set_main_option("script_location", str(ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{db_path}")
    command.upgrade(config, "head")

    with sqlite3.connect(db_path) as conn, pytest.raises(sqlite3.IntegrityError):
        conn.execute(
            "INSERT INTO reservations (date, time, guests, name, email, phone, status) "
            "VALUES ('2099-01-01', '19:00', 2, 'A', 'a@b.com', '12345', 'seated')"
        )
