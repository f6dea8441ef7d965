"""
services/listing_service.py
---------------------------
The operations the web layer calls. Each one is a single repository call;
accepting plain dicts here keeps route handlers free of model imports.
"""

from typing import Optional

from config import DEFAULT_RESULT_LIMIT
from models.property import Property, PropertySearchOptions
from models.reservation import Reservation
from models.user import User
from repositories.property_repo import PropertyRepository
from repositories.reservation_repo import ReservationRepository
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class ListingService:
    """Facade over the user, reservation and property repositories."""

    def __init__(self):
        self.user_repo = UserRepository()
        self.reservation_repo = ReservationRepository()
        self.property_repo = PropertyRepository()

    # ── Users ─────────────────────────────────────────────

    def get_user_with_email(self, email: str) -> Optional[User]:
        return self.user_repo.get_by_email(email)

    def get_user_with_id(self, user_id: int) -> Optional[User]:
        return self.user_repo.get_by_id(user_id)

    def add_user(self, user: dict) -> User:
        """
        Register a new account.

        Args:
            user: Mapping with 'name', 'email' and 'password'.
        """
        return self.user_repo.add(
            User(name=user["name"], email=user["email"], password=user["password"])
        )

    # ── Reservations ──────────────────────────────────────

    def get_all_reservations(
        self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT
    ) -> list[Reservation]:
        return self.reservation_repo.get_all_for_guest(guest_id, limit)

    # ── Properties ────────────────────────────────────────

    def get_all_properties(
        self, options: dict | None = None, limit: int = DEFAULT_RESULT_LIMIT
    ) -> list[Property]:
        """
        Search listings.

        Args:
            options: Any of 'owner_id', 'minimum_price_per_night',
                'maximum_price_per_night', 'minimum_rating'.
            limit: Maximum number of results.
        """
        search_options = PropertySearchOptions.from_dict(options or {})
        properties = self.property_repo.search(search_options, limit)
        logger.info(f"Property search returned {len(properties)} result(s)")
        return properties

    def add_property(self, prop: dict) -> Property:
        """
        Create a listing from a form-style mapping.

        Counts default to 0 when missing; every other field is required.
        """
        return self.property_repo.add(Property(
            owner_id=prop["owner_id"],
            title=prop["title"],
            description=prop.get("description"),
            thumbnail_photo_url=prop["thumbnail_photo_url"],
            cover_photo_url=prop["cover_photo_url"],
            cost_per_night=prop["cost_per_night"],
            street=prop["street"],
            city=prop["city"],
            province=prop["province"],
            post_code=prop["post_code"],
            country=prop["country"],
            parking_spaces=prop.get("parking_spaces", 0),
            number_of_bathrooms=prop.get("number_of_bathrooms", 0),
            number_of_bedrooms=prop.get("number_of_bedrooms", 0),
        ))
