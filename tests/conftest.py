"""Shared fixtures for the LightBnB data layer tests.

Repositories are exercised against a MagicMock connection patched into
their module, so no PostgreSQL server is needed.
"""

from datetime import date
from typing import Any, Generator
from unittest.mock import MagicMock, patch

import pytest


def make_connection(
    fetchone: Any = None,
    fetchall: list | None = None,
    execute_error: Exception | None = None,
) -> tuple[MagicMock, MagicMock]:
    """Build a (connection, cursor) pair mimicking psycopg2's cursor context."""
    cursor = MagicMock()
    cursor.fetchone.return_value = fetchone
    cursor.fetchall.return_value = fetchall or []
    if execute_error is not None:
        cursor.execute.side_effect = execute_error

    conn = MagicMock()
    conn.cursor.return_value.__enter__.return_value = cursor
    conn.cursor.return_value.__exit__.return_value = False
    return conn, cursor


@pytest.fixture
def patch_db():
    """Patch get_connection/release_connection in a repository module.

    Usage:
        conn, cursor, release = patch_db("repositories.user_repo", fetchone=row)
        conn, cursor, release = patch_db("repositories.user_repo", connect_error=PoolError("exhausted"))
    """
    patchers = []

    def _patch(
        module: str, connect_error: Exception | None = None, **kwargs: Any
    ) -> tuple[MagicMock, MagicMock, MagicMock]:
        conn, cursor = make_connection(**kwargs)
        if connect_error is not None:
            get_patcher = patch(f"{module}.get_connection", side_effect=connect_error)
        else:
            get_patcher = patch(f"{module}.get_connection", return_value=conn)
        release_patcher = patch(f"{module}.release_connection")
        get_patcher.start()
        release = release_patcher.start()
        patchers.extend([get_patcher, release_patcher])
        return conn, cursor, release

    yield _patch

    for patcher in reversed(patchers):
        patcher.stop()


# === Sample rows ===


@pytest.fixture
def user_row() -> tuple:
    return (1, "Devin Sanders", "tristanjacobs@gmail.com", "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED")


@pytest.fixture
def property_row() -> tuple:
    """A row in PROPERTY_COLUMNS order followed by the average rating."""
    return (
        7, 123, "Speed lamp", "description", "https://example.com/thumb.jpg",
        93061, 6, 4, 8, "Canada", "536 Namsub Highway", "Sotboske",
        "Quebec", "28142", True, "https://example.com/cover.jpg", 4.5,
    )


@pytest.fixture
def reservation_row(property_row: tuple) -> tuple:
    return (3, 1, 7, date(2018, 9, 11), date(2018, 9, 26)) + property_row


@pytest.fixture
def new_property_data() -> dict[str, Any]:
    return {
        "owner_id": 123,
        "title": "Speed lamp",
        "description": "description",
        "thumbnail_photo_url": "https://example.com/thumb.jpg",
        "cover_photo_url": "https://example.com/cover.jpg",
        "cost_per_night": 93061,
        "street": "536 Namsub Highway",
        "city": "Sotboske",
        "province": "Quebec",
        "post_code": "28142",
        "country": "Canada",
        "parking_spaces": 6,
        "number_of_bathrooms": 4,
        "number_of_bedrooms": 8,
    }


@pytest.fixture
def reset_pool() -> Generator[None, None, None]:
    """Make sure db.connection starts and ends without an open pool."""
    import db.connection as connection

    connection._pool = None
    yield
    connection._pool = None
