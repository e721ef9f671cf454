"""Beeswax entity types and their JSON representation.

Decoding follows the API contract loosely: missing keys and ``null`` become
the field's zero value, unknown keys are ignored, and a value of the wrong
JSON type raises ``ValueError``.
"""
from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, TypeVar

from .exceptions import DecodeError

T = TypeVar("T")


def _int(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    # bool is an int subclass; the API never sends booleans for numeric fields
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field '{key}' must be an integer, got {value!r}")
    return value


def _str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field '{key}' must be a string, got {value!r}")
    return value


def _bool(data: Dict[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"field '{key}' must be a boolean, got {value!r}")
    return value


def _list(data: Dict[str, Any], key: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field '{key}' must be a list, got {value!r}")
    return value


def _int_list(data: Dict[str, Any], key: str) -> List[int]:
    items = _list(data, key)
    return [_int({key: item}, key) for item in items]


def _require_object(data: Any, entity: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{entity} payload must be a JSON object, got {type(data).__name__}")
    return data


@dataclass
class Permission:
    """Rights on one object type.

    ``permission`` is a 4-bit mask: Read (1), Create (2), Update (4),
    Delete (8). The range is enforced by the API, not here.
    """
    object_type: str = ""
    permission: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"object_type": self.object_type, "permission": self.permission}

    @classmethod
    def from_dict(cls, data: Any) -> "Permission":
        data = _require_object(data, "permission")
        return cls(object_type=_str(data, "object_type"), permission=_int(data, "permission"))


@dataclass
class User:
    id: int = 0
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    role_id: int = 0
    account_id: int = 0
    active: bool = False
    super_user: bool = False
    all_account_access: bool = False
    account_group_ids: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "super_user": self.super_user,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "role_id": self.role_id,
            "account_id": self.account_id,
            "active": self.active,
            "all_account_access": self.all_account_access,
            "account_group_ids": list(self.account_group_ids),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "User":
        data = _require_object(data, "user")
        return cls(
            id=_int(data, "id"),
            email=_str(data, "email"),
            first_name=_str(data, "first_name"),
            last_name=_str(data, "last_name"),
            role_id=_int(data, "role_id"),
            account_id=_int(data, "account_id"),
            active=_bool(data, "active"),
            super_user=_bool(data, "super_user"),
            all_account_access=_bool(data, "all_account_access"),
            account_group_ids=_int_list(data, "account_group_ids"),
        )


@dataclass
class Role:
    """Beeswax role.

    ``parent_role_id`` points at the system role whose default permissions are
    inherited; it is a lookup key only.
    """
    id: int = 0
    name: str = ""
    parent_role_id: int = 0
    archived: bool = False
    notes: str = ""
    shared_across_accounts: bool = False
    permissions: List[Permission] = field(default_factory=list)
    report_ids: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "parent_role_id": self.parent_role_id,
            "archived": self.archived,
            "notes": self.notes,
            "shared_across_accounts": self.shared_across_accounts,
            "permissions": [p.to_dict() for p in self.permissions],
            "report_ids": list(self.report_ids),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Role":
        data = _require_object(data, "role")
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            parent_role_id=_int(data, "parent_role_id"),
            archived=_bool(data, "archived"),
            notes=_str(data, "notes"),
            shared_across_accounts=_bool(data, "shared_across_accounts"),
            permissions=[Permission.from_dict(p) for p in _list(data, "permissions")],
            report_ids=_int_list(data, "report_ids"),
        )


def decode(raw: bytes, entity: str, loader: Callable[[Any], T]) -> T:
    """Parse a raw response body into an entity.

    Raises:
        DecodeError: If the body is not JSON or does not match the entity shape
    """
    try:
        return loader(json.loads(raw))
    except ValueError as exc:
        raise DecodeError(entity, raw, str(exc)) from exc
