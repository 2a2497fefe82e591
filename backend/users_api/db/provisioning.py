"""One-shot DynamoDB table provisioning (not part of the request path)."""
from __future__ import annotations

from typing import Any

from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger

from ..errors import StoreError


READ_CAPACITY_UNITS = 5
WRITE_CAPACITY_UNITS = 5


def create_users_table(client: Any, table_name: str = "users") -> str:
    """Create ``table_name`` with a single string hash key ``uuid``.

    Not idempotent: if the table already exists the service error is raised
    as :class:`StoreError` with its original message.
    """
    try:
        res = client.create_table(
            TableName=table_name,
            AttributeDefinitions=[{"AttributeName": "uuid", "AttributeType": "S"}],
            KeySchema=[{"AttributeName": "uuid", "KeyType": "HASH"}],
            ProvisionedThroughput={
                "ReadCapacityUnits": READ_CAPACITY_UNITS,
                "WriteCapacityUnits": WRITE_CAPACITY_UNITS,
            },
        )
    except ClientError as exc:
        message = exc.response.get("Error", {}).get("Message") or str(exc)
        logger.error("Error creating table '{}': {}", table_name, message)
        raise StoreError(message) from exc
    except BotoCoreError as exc:
        logger.error("Error creating table '{}': {}", table_name, exc)
        raise StoreError(str(exc)) from exc

    created = res["TableDescription"]["TableName"]
    logger.info("Table '{}' created", created)
    return created
