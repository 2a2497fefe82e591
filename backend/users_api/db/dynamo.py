"""boto3 DynamoDB resource/client construction as a Flask extension."""
from __future__ import annotations

from typing import Any, Dict, Optional

import boto3
from botocore.config import Config
from flask import Flask, current_app

from ..config import DynamoConfig


EXTENSION_KEY = "dynamodb"


class DynamoDB:
    """Store client bound to one resolved :class:`DynamoConfig`.

    An instance is built by the application factory and registered under
    ``app.extensions["dynamodb"]``; there is no module-level instance.
    ``table`` may be supplied to bypass boto3 entirely (used by tests).
    """

    def __init__(self, config: DynamoConfig, table: Any | None = None, client: Any | None = None) -> None:
        self.config = config
        self._table = table
        self._client = client
        self._resource = None

    def init_app(self, app: Flask) -> None:
        app.extensions[EXTENSION_KEY] = self

    def _session_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"region_name": self.config.region}
        if self.config.endpoint_url:
            kwargs["endpoint_url"] = self.config.endpoint_url
        if self.config.access_key and self.config.secret_key:
            kwargs["aws_access_key_id"] = self.config.access_key
            kwargs["aws_secret_access_key"] = self.config.secret_key
        if self.config.use_path_style_endpoint:
            kwargs["config"] = Config(s3={"addressing_style": "path"})
        return kwargs

    @property
    def resource(self):
        if self._resource is None:
            self._resource = boto3.resource("dynamodb", **self._session_kwargs())
        return self._resource

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client("dynamodb", **self._session_kwargs())
        return self._client

    def table(self, name: Optional[str] = None):
        if self._table is not None:
            return self._table
        return self.resource.Table(name or self.config.table_name)


def get_dynamodb(app: Flask | None = None) -> DynamoDB:
    ext = (app or current_app).extensions.get(EXTENSION_KEY)
    if ext is None:
        raise RuntimeError("DynamoDB is not initialized; build the app with create_app().")
    return ext
