"""Users blueprint (CRUD)."""
from __future__ import annotations

from flask import Blueprint, request

from ...db.dynamo import get_dynamodb
from ...db.repositories.user_repo import UserRepository
from ...domain.user import User
from ...errors import ok
from ...services.user_service import UserService
from .schemas import UserCreateIn, UserOut, UserUpdateIn


bp = Blueprint("users", __name__)


def _service() -> UserService:
    return UserService(UserRepository(get_dynamodb().table()))


def _out(user: User) -> dict:
    return UserOut.model_validate(user).model_dump(mode="json")


@bp.get("")
def list_users():
    svc = _service()
    return ok([_out(u) for u in svc.list_users()])


@bp.post("")
def create_user():
    payload = UserCreateIn.model_validate_json(request.get_data())
    svc = _service()
    user = svc.create_user(name=payload.name, email=payload.email)
    return ok({"message": "User created successfully", "user": _out(user)})


@bp.get("/<user_uuid>")
def get_user(user_uuid: str):
    svc = _service()
    return ok(_out(svc.get_user(user_uuid)))


@bp.put("/<user_uuid>")
def update_user(user_uuid: str):
    svc = _service()
    # Existence is checked before the body is validated.
    current = svc.get_user(user_uuid)
    payload = UserUpdateIn.model_validate_json(request.get_data() or b"{}")
    user = svc.apply_update(current, **payload.model_dump(exclude_none=True))
    return ok({"message": "User updated successfully", "user": _out(user)})


@bp.delete("/<user_uuid>")
def delete_user(user_uuid: str):
    svc = _service()
    svc.delete_user(user_uuid)
    return ok({"message": "User deleted successfully"})
