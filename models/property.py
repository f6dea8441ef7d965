"""
models/property.py
------------------
Domain models for rental listings and the options used to search them.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Property:
    """
    A rental listing.

    Attributes:
        owner_id: The `User.id` of the owner.
        cost_per_night: Nightly price, stored as an integer amount.
        average_rating: Mean review rating; only populated by searches.
        id: Database primary key (None for new records).
    """
    owner_id: int
    title: str
    description: Optional[str]
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int
    street: str
    city: str
    province: str
    post_code: str
    country: str
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    active: bool = True
    average_rating: Optional[float] = None
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.title} ({self.city}) - {self.cost_per_night}/night"


@dataclass
class PropertySearchOptions:
    """
    Optional filters for a property search. Falsy values mean "no filter".

    Attributes:
        owner_id: Only listings owned by this user.
        minimum_price_per_night: Lower bound on `cost_per_night`, inclusive.
        maximum_price_per_night: Upper bound on `cost_per_night`, inclusive.
        minimum_rating: Lower bound on the average review rating, inclusive.
    """
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[int] = None
    maximum_price_per_night: Optional[int] = None
    minimum_rating: Optional[float] = None

    @classmethod
    def from_dict(cls, data: dict) -> "PropertySearchOptions":
        """Build options from a request-style mapping, ignoring unknown keys."""
        return cls(
            owner_id=data.get("owner_id"),
            minimum_price_per_night=data.get("minimum_price_per_night"),
            maximum_price_per_night=data.get("maximum_price_per_night"),
            minimum_rating=data.get("minimum_rating"),
        )
