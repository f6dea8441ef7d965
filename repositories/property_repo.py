"""
repositories/property_repo.py
------------------------------
Data access layer for rental listings.
All SQL touching the `properties` table lives here or in property_query.
"""

import psycopg2

from config import DEFAULT_RESULT_LIMIT
from db.connection import get_connection, release_connection
from models.property import Property, PropertySearchOptions
from repositories.errors import QueryFailedError
from repositories.property_query import PROPERTY_COLUMNS, build_property_search
from utils.logger import get_logger

logger = get_logger(__name__)


class PropertyRepository:
    """Repository for searching and creating properties."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, prop: Property) -> Property:
        """
        Insert a new listing.

        Args:
            prop: The Property to persist; `id`, `active` and
                `average_rating` are left to the database.

        Returns:
            The inserted row, with the generated `id`.
        """
        sql = f"""
            INSERT INTO properties (
                owner_id, title, description, thumbnail_photo_url, cover_photo_url,
                cost_per_night, street, city, province, post_code, country,
                parking_spaces, number_of_bathrooms, number_of_bedrooms
            )
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
            RETURNING {", ".join(PROPERTY_COLUMNS)};
        """
        conn = None
        try:
            conn = get_connection()
            with conn.cursor() as cur:
                cur.execute(sql, (
                    prop.owner_id, prop.title, prop.description,
                    prop.thumbnail_photo_url, prop.cover_photo_url,
                    prop.cost_per_night, prop.street, prop.city,
                    prop.province, prop.post_code, prop.country,
                    prop.parking_spaces, prop.number_of_bathrooms,
                    prop.number_of_bedrooms,
                ))
                row = cur.fetchone()
            conn.commit()
            saved = self.row_to_property(row)
            logger.info(f"Added property #{saved.id} for owner {saved.owner_id}")
            return saved
        except psycopg2.Error as e:
            if conn is not None:
                conn.rollback()
            logger.error(f"Failed to add property '{prop.title}': {e}")
            raise QueryFailedError("add property", e) from e
        finally:
            if conn is not None:
                release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def search(
        self,
        options: PropertySearchOptions | None = None,
        limit: int = DEFAULT_RESULT_LIMIT,
    ) -> list[Property]:
        """
        Find reviewed properties matching the given filters.

        Args:
            options: Optional filters; None searches everything.
            limit: Maximum number of rows.

        Returns:
            Properties ordered by cost_per_night ascending, each with its
            `average_rating` set.
        """
        sql, params = build_property_search(options or PropertySearchOptions(), limit)
        logger.debug(f"Property search: {sql} | params={params}")

        conn = None
        try:
            conn = get_connection()
            with conn.cursor() as cur:
                cur.execute(sql, params)
                return [self.row_to_property(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            if conn is not None:
                conn.rollback()
            logger.error(f"Property search failed: {e}")
            raise QueryFailedError("search properties", e) from e
        finally:
            if conn is not None:
                release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def row_to_property(row: tuple) -> Property:
        """
        Convert a row laid out as PROPERTY_COLUMNS, optionally followed by
        the average rating, to a Property.
        """
        average = row[16] if len(row) > 16 else None
        return Property(
            id=row[0],
            owner_id=row[1],
            title=row[2],
            description=row[3],
            thumbnail_photo_url=row[4],
            cost_per_night=row[5],
            parking_spaces=row[6],
            number_of_bathrooms=row[7],
            number_of_bedrooms=row[8],
            country=row[9],
            street=row[10],
            city=row[11],
            province=row[12],
            post_code=row[13],
            active=row[14],
            cover_photo_url=row[15],
            average_rating=float(average) if average is not None else None,
        )
