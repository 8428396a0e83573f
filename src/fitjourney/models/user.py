"""User account model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """A registered user. Workouts reference users by id."""

    name: str
    email: str
    password_hash: str
    img: str | None = None
    id: int | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for responses (never includes the hash)."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "img": self.img,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
