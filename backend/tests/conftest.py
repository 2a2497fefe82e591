from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

import pytest
from botocore.exceptions import ClientError

from users_api import create_app
from users_api.config import BaseConfig


def client_error(code: str, message: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


class FakeTable:
    """In-memory stand-in for a boto3 ``Table`` keyed by ``uuid``."""

    def __init__(self) -> None:
        self.items: Dict[str, Dict[str, Any]] = {}
        self.calls: List[str] = []
        self.fail_with: Optional[ClientError] = None

    def _record(self, op: str) -> None:
        self.calls.append(op)
        if self.fail_with is not None:
            raise self.fail_with

    def get_item(self, Key):
        self._record("GetItem")
        item = self.items.get(Key["uuid"])
        return {"Item": copy.deepcopy(item)} if item is not None else {}

    def put_item(self, Item):
        self._record("PutItem")
        self.items[Item["uuid"]] = copy.deepcopy(Item)
        return {}

    def scan(self):
        self._record("Scan")
        return {"Items": [copy.deepcopy(i) for i in self.items.values()], "Count": len(self.items)}

    def delete_item(self, Key):
        self._record("DeleteItem")
        self.items.pop(Key["uuid"], None)
        return {}

    def update_item(
        self, Key, UpdateExpression, ExpressionAttributeNames, ExpressionAttributeValues, ReturnValues,
        ConditionExpression=None,
    ):
        self._record("UpdateItem")
        assert UpdateExpression.startswith("SET ")
        if ConditionExpression == "attribute_exists(#uuid)" and Key["uuid"] not in self.items:
            raise client_error("ConditionalCheckFailedException", "The conditional request failed", "UpdateItem")
        item = self.items.setdefault(Key["uuid"], dict(Key))
        for assignment in UpdateExpression[len("SET "):].split(", "):
            name, value = (part.strip() for part in assignment.split("="))
            item[ExpressionAttributeNames[name]] = ExpressionAttributeValues[value]
        return {"Attributes": copy.deepcopy(item)}


class FakeClient:
    """In-memory stand-in for the low-level client's ``create_table``."""

    def __init__(self) -> None:
        self.tables: Dict[str, Dict[str, Any]] = {}

    def create_table(self, **kwargs):
        name = kwargs["TableName"]
        if name in self.tables:
            raise client_error("ResourceInUseException", f"Table already exists: {name}", "CreateTable")
        self.tables[name] = kwargs
        return {"TableDescription": {"TableName": name, "TableStatus": "ACTIVE"}}


@pytest.fixture()
def table() -> FakeTable:
    return FakeTable()


@pytest.fixture()
def app(table: FakeTable):
    config = BaseConfig(DYNAMODB_CONNECTION="local", DYNAMODB_TABLE="users", LOG_LEVEL="WARNING")
    application = create_app(config, table=table, client=FakeClient())
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app):
    return app.test_client()
