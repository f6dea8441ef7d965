"""
repositories/reservation_repo.py
---------------------------------
Data access layer for reservations.
"""

import psycopg2

from config import DEFAULT_RESULT_LIMIT
from db.connection import get_connection, release_connection
from models.reservation import Reservation
from repositories.errors import QueryFailedError
from repositories.property_query import AVERAGE_RATING, PROPERTY_COLUMNS
from repositories.property_repo import PropertyRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class ReservationRepository:
    """Repository for reading a guest's reservation history."""

    def get_all_for_guest(
        self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT
    ) -> list[Reservation]:
        """
        Fetch a guest's reservations together with the booked properties.

        Args:
            guest_id: The guest's user id.
            limit: Maximum number of reservations.

        Returns:
            Reservations ordered by start_date ascending. Properties without
            reviews have `average_rating` None.
        """
        property_columns = ", ".join(f"properties.{c}" for c in PROPERTY_COLUMNS)
        sql = f"""
            SELECT reservations.id, reservations.guest_id, reservations.property_id,
                   reservations.start_date, reservations.end_date,
                   {property_columns}, {AVERAGE_RATING} AS average_rating
            FROM reservations
            JOIN properties ON reservations.property_id = properties.id
            LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE reservations.guest_id = %s
            GROUP BY reservations.id, properties.id
            ORDER BY reservations.start_date ASC
            LIMIT %s;
        """
        conn = None
        try:
            conn = get_connection()
            with conn.cursor() as cur:
                cur.execute(sql, (guest_id, limit))
                return [self._row_to_reservation(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            if conn is not None:
                conn.rollback()
            logger.error(f"Failed to fetch reservations for guest {guest_id}: {e}")
            raise QueryFailedError("get reservations for guest", e) from e
        finally:
            if conn is not None:
                release_connection(conn)

    @staticmethod
    def _row_to_reservation(row: tuple) -> Reservation:
        """First five columns are the reservation, the rest the joined property."""
        return Reservation(
            id=row[0],
            guest_id=row[1],
            property_id=row[2],
            start_date=row[3],
            end_date=row[4],
            listing=PropertyRepository.row_to_property(row[5:]),
        )
