"""User service encapsulating business rules."""
from __future__ import annotations

import uuid
from typing import Any, List

from loguru import logger

from ..db.repositories.user_repo import UserRepository
from ..domain.user import User
from ..errors import NotFound


class UserService:
    def __init__(self, repo: UserRepository) -> None:
        self.repo = repo

    def list_users(self) -> List[User]:
        return self.repo.scan()

    def create_user(self, name: str, email: str) -> User:
        # No email-uniqueness check; uuid is the only key.
        user = User(uuid=str(uuid.uuid4()), name=name, email=email)
        self.repo.put(user)
        logger.info("Created user {}", user.uuid)
        return user

    def get_user(self, user_uuid: str) -> User:
        user = self.repo.get(user_uuid)
        if user is None:
            raise NotFound()
        return user

    def update_user(self, user_uuid: str, **fields: Any) -> User:
        return self.apply_update(self.get_user(user_uuid), **fields)

    def apply_update(self, user: User, **fields: Any) -> User:
        """Merge ``fields`` onto an already loaded ``user``; ``uuid`` never changes."""
        changes = {k: v for k, v in fields.items() if v is not None and k != "uuid"}
        if not changes:
            return user
        updated = self.repo.update(user.uuid, **changes)
        logger.info("Updated user {} ({})", user.uuid, ", ".join(sorted(changes)))
        return updated

    def delete_user(self, user_uuid: str) -> None:
        self.get_user(user_uuid)
        self.repo.delete(user_uuid)
        logger.info("Deleted user {}", user_uuid)
