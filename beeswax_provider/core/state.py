"""Desired/observed state records handed over by the declarative engine.

A field set to ``None`` is a null in the caller's configuration. Defaults
mirror the provider schema (``active`` defaults to true, flags to false,
``notes`` to the empty string).
"""
from __future__ import annotations
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid identifier or mask
    return isinstance(value, int) and not isinstance(value, bool)


def _check_int(name: str, value: Any) -> None:
    if value is not None and not _is_int(value):
        raise ValueError(f"Attribute '{name}' must be an integer, got {value!r}")


def _check_str(name: str, value: Any) -> None:
    if value is not None and not isinstance(value, str):
        raise ValueError(f"Attribute '{name}' must be a string, got {value!r}")


def _check_bool(name: str, value: Any) -> None:
    if value is not None and not isinstance(value, bool):
        raise ValueError(f"Attribute '{name}' must be a boolean, got {value!r}")


def _check_int_list(name: str, value: Any) -> None:
    if value is None:
        return
    if not isinstance(value, list):
        raise ValueError(f"Attribute '{name}' must be a list of integers, got {value!r}")
    for item in value:
        if not _is_int(item):
            raise ValueError(f"Attribute '{name}' must be a list of integers, got item {item!r}")


_CHECKS = {
    "int": _check_int,
    "str": _check_str,
    "bool": _check_bool,
    "int_list": _check_int_list,
}


def _validate(cls, data: Any, kinds: Mapping[str, str]) -> Dict[str, Any]:
    """Reject non-mappings, unknown attributes and badly typed values."""
    if not isinstance(data, Mapping):
        raise ValueError(f"{cls.__name__} must be a mapping, got {data!r}")
    known = {f.name for f in fields(cls)}
    unknown = sorted(str(k) for k in set(data) - known)
    if unknown:
        raise ValueError(f"Unknown {cls.__name__} attribute(s): {', '.join(unknown)}")
    for name, value in data.items():
        kind = kinds.get(name)
        if kind is not None:
            _CHECKS[kind](name, value)
    return dict(data)


@dataclass
class PermissionState:
    object_type: Optional[str] = None
    permission: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PermissionState":
        return cls(**_validate(cls, data, {"object_type": "str", "permission": "int"}))


@dataclass
class UserState:
    id: Optional[int] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role_id: Optional[int] = None
    account_group_ids: Optional[List[Optional[int]]] = None
    account_id: Optional[int] = None
    active: Optional[bool] = True
    super_user: Optional[bool] = False
    all_account_access: Optional[bool] = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "UserState":
        return cls(**_validate(cls, data, _USER_KINDS))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


_USER_KINDS = {
    "id": "int",
    "email": "str",
    "first_name": "str",
    "last_name": "str",
    "role_id": "int",
    "account_group_ids": "int_list",
    "account_id": "int",
    "active": "bool",
    "super_user": "bool",
    "all_account_access": "bool",
}


@dataclass
class RoleState:
    id: Optional[int] = None
    name: Optional[str] = None
    parent_role_id: Optional[int] = None
    archived: Optional[bool] = False
    notes: Optional[str] = ""
    shared_across_accounts: Optional[bool] = False
    permissions: List[PermissionState] = field(default_factory=list)
    report_ids: Optional[List[Optional[int]]] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RoleState":
        values = _validate(cls, data, _ROLE_KINDS)
        permissions = values.get("permissions")
        if permissions is None:
            permissions = []
        if not isinstance(permissions, list):
            raise ValueError(f"Attribute 'permissions' must be a list of mappings, got {permissions!r}")
        values["permissions"] = [PermissionState.from_mapping(p) for p in permissions]
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


_ROLE_KINDS = {
    "id": "int",
    "name": "str",
    "parent_role_id": "int",
    "archived": "bool",
    "notes": "str",
    "shared_across_accounts": "bool",
    "report_ids": "int_list",
}


@dataclass
class RoleSummary:
    """Lightweight role projection used by the roles listing."""
    id: int
    name: str


@dataclass
class RolesState:
    roles: List[RoleSummary] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
