"""Domain dataclass for User entities and their DynamoDB item mapping."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(slots=True)
class User:
    uuid: str
    name: str
    email: str
    email_verified_at: Optional[datetime] = None
    password: Optional[str] = None

    def to_item(self) -> Dict[str, Any]:
        item: Dict[str, Any] = {"uuid": self.uuid, "name": self.name, "email": self.email}
        if self.email_verified_at is not None:
            item["email_verified_at"] = self.email_verified_at.isoformat()
        if self.password is not None:
            item["password"] = self.password
        return item

    @staticmethod
    def from_item(item: Dict[str, Any]) -> "User":
        verified = item.get("email_verified_at")
        return User(
            uuid=str(item["uuid"]),
            name=str(item.get("name", "")),
            email=str(item.get("email", "")),
            email_verified_at=datetime.fromisoformat(verified) if verified else None,
            password=item.get("password"),
        )
