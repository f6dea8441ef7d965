"""
main.py
-------
Entry point for the LightBnB data layer.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Run a sample property search and log the results.
    - Close the pool on exit.
"""

from db.connection import init_pool, close_pool
from db.init_db import create_tables
from services.listing_service import ListingService
from utils.logger import get_logger

logger = get_logger(__name__)

SAMPLE_SEARCH = {
    "owner_id": 123,
    "minimum_price_per_night": 50,
    "maximum_price_per_night": 150,
    "minimum_rating": 4,
}


def main() -> None:
    """Initialize the database and run the sample search."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()
    try:
        create_tables()

        # ── 2. Sample search ──────────────────────────────
        service = ListingService()
        for prop in service.get_all_properties(SAMPLE_SEARCH, limit=10):
            logger.info(f"  {prop} | rating {prop.average_rating}")
    finally:
        # ── 3. Cleanup ────────────────────────────────────
        close_pool()


if __name__ == "__main__":
    main()
