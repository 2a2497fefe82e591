"""Application configuration objects."""
from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Any, Mapping

from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def _env_bool(name: str, default: str) -> bool:
    return _as_bool(os.getenv(name, default))


@dataclass
class BaseConfig:
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    # DynamoDB connection selection: "aws" | "local"
    DYNAMODB_CONNECTION: str = os.getenv("DYNAMODB_CONNECTION", "aws")
    DYNAMODB_TABLE: str = os.getenv("DYNAMODB_TABLE", "users")

    # Real service
    AWS_DEFAULT_REGION: str = os.getenv("AWS_DEFAULT_REGION", "us-east-1")
    AWS_ACCESS_KEY_ID: str | None = os.getenv("AWS_ACCESS_KEY_ID") or None
    AWS_SECRET_ACCESS_KEY: str | None = os.getenv("AWS_SECRET_ACCESS_KEY") or None

    # Local emulator (LocalStack)
    DYNAMODB_LOCAL_ENDPOINT: str = os.getenv("DYNAMODB_LOCAL_ENDPOINT", "http://localhost:4566")
    DYNAMODB_LOCAL_KEY: str = os.getenv("DYNAMODB_LOCAL_KEY", "fake")
    DYNAMODB_LOCAL_SECRET: str = os.getenv("DYNAMODB_LOCAL_SECRET", "fake")
    DYNAMODB_USE_PATH_STYLE_ENDPOINT: bool = _env_bool("DYNAMODB_USE_PATH_STYLE_ENDPOINT", "true")


class DynamoProfile(str, enum.Enum):
    AWS = "aws"
    LOCAL = "local"


@dataclass(frozen=True)
class DynamoConfig:
    """Resolved connection settings for the active DynamoDB profile."""

    profile: DynamoProfile
    region: str
    table_name: str = "users"
    endpoint_url: str | None = None
    access_key: str | None = None
    secret_key: str | None = None
    use_path_style_endpoint: bool = False

    @staticmethod
    def from_mapping(data: Mapping[str, Any]) -> "DynamoConfig":
        """Build the config from a flat settings mapping such as ``app.config``."""
        raw = str(data.get("DYNAMODB_CONNECTION") or DynamoProfile.AWS.value).lower()
        try:
            profile = DynamoProfile(raw)
        except ValueError:
            choices = ", ".join(p.value for p in DynamoProfile)
            raise ValueError(f"Unknown DynamoDB connection '{raw}', expected one of: {choices}") from None

        region = str(data.get("AWS_DEFAULT_REGION") or "us-east-1")
        table_name = str(data.get("DYNAMODB_TABLE") or "users")
        if profile is DynamoProfile.LOCAL:
            return DynamoConfig(
                profile=profile,
                region=region,
                table_name=table_name,
                endpoint_url=str(data.get("DYNAMODB_LOCAL_ENDPOINT") or "http://localhost:4566"),
                access_key=str(data.get("DYNAMODB_LOCAL_KEY") or "fake"),
                secret_key=str(data.get("DYNAMODB_LOCAL_SECRET") or "fake"),
                use_path_style_endpoint=_as_bool(data.get("DYNAMODB_USE_PATH_STYLE_ENDPOINT", True)),
            )
        # None credentials fall through to the default boto3 credential chain.
        return DynamoConfig(
            profile=profile,
            region=region,
            table_name=table_name,
            access_key=data.get("AWS_ACCESS_KEY_ID") or None,
            secret_key=data.get("AWS_SECRET_ACCESS_KEY") or None,
        )
