"""
repositories/user_repo.py
--------------------------
Data access layer for user accounts.
"""

from typing import Optional

import psycopg2

from db.connection import get_connection, release_connection
from models.user import User
from repositories.errors import QueryFailedError
from utils.logger import get_logger

logger = get_logger(__name__)

_USER_COLUMNS = "id, name, email, password"


class UserRepository:
    """Repository for the users table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, user: User) -> User:
        """
        Insert a new user.

        Args:
            user: The User to persist; its `id` is ignored.

        Returns:
            The inserted row, with the generated `id`.

        Raises:
            QueryFailedError: e.g. when the email is already taken.
        """
        sql = f"""
            INSERT INTO users (name, email, password)
            VALUES (%s, %s, %s)
            RETURNING {_USER_COLUMNS};
        """
        conn = None
        try:
            conn = get_connection()
            with conn.cursor() as cur:
                cur.execute(sql, (user.name, user.email, user.password))
                row = cur.fetchone()
            conn.commit()
            saved = self._row_to_user(row)
            logger.info(f"Added user #{saved.id} ({saved.email})")
            return saved
        except psycopg2.Error as e:
            if conn is not None:
                conn.rollback()
            logger.error(f"Failed to add user {user.email}: {e}")
            raise QueryFailedError("add user", e) from e
        finally:
            if conn is not None:
                release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Fetch a user by email.

        Returns:
            The User, or None if no account uses that email.
        """
        sql = f"SELECT {_USER_COLUMNS} FROM users WHERE email = %s;"
        conn = None
        try:
            conn = get_connection()
            with conn.cursor() as cur:
                cur.execute(sql, (email,))
                row = cur.fetchone()
                return self._row_to_user(row) if row else None
        except psycopg2.Error as e:
            if conn is not None:
                conn.rollback()
            logger.error(f"Failed to look up user by email {email}: {e}")
            raise QueryFailedError("get user by email", e) from e
        finally:
            if conn is not None:
                release_connection(conn)

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Fetch a user by primary key, or None."""
        sql = f"SELECT {_USER_COLUMNS} FROM users WHERE id = %s;"
        conn = None
        try:
            conn = get_connection()
            with conn.cursor() as cur:
                cur.execute(sql, (user_id,))
                row = cur.fetchone()
                return self._row_to_user(row) if row else None
        except psycopg2.Error as e:
            if conn is not None:
                conn.rollback()
            logger.error(f"Failed to look up user #{user_id}: {e}")
            raise QueryFailedError("get user by id", e) from e
        finally:
            if conn is not None:
                release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_user(row: tuple) -> User:
        return User(id=row[0], name=row[1], email=row[2], password=row[3])
