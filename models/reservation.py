"""
models/reservation.py
---------------------
Domain model for a guest's booking of a property.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from models.property import Property


@dataclass
class Reservation:
    """
    A booking for a date range.

    Attributes:
        guest_id: The `User.id` who booked.
        property_id: The booked `Property.id`.
        start_date: First night.
        end_date: Checkout day.
        listing: The joined property, when loaded through a guest history query.
        id: Database primary key (None for new records).
    """
    guest_id: int
    property_id: int
    start_date: date
    end_date: date
    listing: Optional[Property] = None
    id: Optional[int] = None

    def __str__(self) -> str:
        title = self.listing.title if self.listing else f"property #{self.property_id}"
        return f"{title}: {self.start_date} → {self.end_date}"
