"""Repository for user items in DynamoDB (CRUD)."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger

from ...domain.user import User
from ...errors import NotFound, StoreError


def _error_message(exc: Exception) -> str:
    if isinstance(exc, ClientError):
        return exc.response.get("Error", {}).get("Message") or str(exc)
    return str(exc)


@contextmanager
def _store_call(operation: str) -> Iterator[None]:
    try:
        yield
    except (ClientError, BotoCoreError) as exc:
        message = _error_message(exc)
        logger.error("DynamoDB {} failed: {}", operation, message)
        raise StoreError(message) from exc


class UserRepository:
    """Single-table access keyed by the ``uuid`` hash key."""

    def __init__(self, table: Any) -> None:
        self.table = table

    def get(self, user_uuid: str) -> Optional[User]:
        with _store_call("GetItem"):
            res = self.table.get_item(Key={"uuid": user_uuid})
        item = res.get("Item")
        return User.from_item(item) if item else None

    def put(self, user: User) -> User:
        with _store_call("PutItem"):
            self.table.put_item(Item=user.to_item())
        return user

    def scan(self) -> List[User]:
        # One unbounded Scan; LastEvaluatedKey is not followed.
        with _store_call("Scan"):
            res = self.table.scan()
        return [User.from_item(i) for i in res.get("Items", [])]

    def delete(self, user_uuid: str) -> None:
        with _store_call("DeleteItem"):
            self.table.delete_item(Key={"uuid": user_uuid})

    def update(self, user_uuid: str, **fields: Any) -> User:
        allowed = {"name", "email", "email_verified_at", "password"}
        attrs: Dict[str, Any] = {k: v for k, v in fields.items() if k in allowed and v is not None}
        if not attrs:
            raise ValueError("no attributes to update")
        if "email_verified_at" in attrs and not isinstance(attrs["email_verified_at"], str):
            attrs["email_verified_at"] = attrs["email_verified_at"].isoformat()

        names = {f"#{k}": k for k in attrs}
        names["#uuid"] = "uuid"
        values = {f":{k}": v for k, v in attrs.items()}
        expression = "SET " + ", ".join(f"#{k} = :{k}" for k in attrs)
        # UpdateItem upserts; the condition keeps a deleted user from coming back.
        with _store_call("UpdateItem"):
            try:
                res = self.table.update_item(
                    Key={"uuid": user_uuid},
                    UpdateExpression=expression,
                    ConditionExpression="attribute_exists(#uuid)",
                    ExpressionAttributeNames=names,
                    ExpressionAttributeValues=values,
                    ReturnValues="ALL_NEW",
                )
            except ClientError as exc:
                if exc.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                    raise NotFound() from exc
                raise
        return User.from_item(res["Attributes"])
