"""Health check endpoints."""
from __future__ import annotations

from flask import Blueprint

from ...db.dynamo import get_dynamodb
from ...errors import ok


bp = Blueprint("health", __name__)


@bp.get("")
def alive():
    cfg = get_dynamodb().config
    return ok({"status": "ok", "dynamodb": cfg.profile.value, "table": cfg.table_name})
