"""
models/user.py
--------------
Domain model for LightBnB accounts (guests and owners alike).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    A registered account.

    Attributes:
        name: Display name.
        email: Login email, unique across users.
        password: Stored as given; hashing happens upstream.
        id: Database primary key (None for new records).
    """
    name: str
    email: str
    password: str
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
