"""State ↔ Beeswax entity transformations.

This module converts between the state records exchanged with the
declarative engine and the Beeswax domain entities sent over the wire.

Usage:
    # Desired state → entity
    role = StateTransformer.role_from_state(plan)

    # Entity → observed state
    state = StateTransformer.role_to_state(role)
"""
from __future__ import annotations
from typing import Iterable, List, Optional

from .beeswax.models import Permission, Role, User
from .state import PermissionState, RoleState, RoleSummary, UserState


def _int(value: Optional[int]) -> int:
    return 0 if value is None else value


def _str(value: Optional[str]) -> str:
    return "" if value is None else value


def _bool(value: Optional[bool]) -> bool:
    return False if value is None else value


def convert_int_list(values: Optional[Iterable[Optional[int]]]) -> List[int]:
    """Copy an engine-typed integer list into a plain list, keeping order."""
    return [_int(v) for v in (values or [])]


class StateTransformer:
    """Bidirectional transformer for state records and Beeswax entities."""

    @staticmethod
    def user_from_state(plan: UserState) -> User:
        """Convert a desired user state into a Beeswax user.

        Example:
            >>> plan = UserState(email="a@b.com", first_name="A", last_name="B",
            ...                  role_id=7, account_id=1, account_group_ids=[1, 2])
            >>> StateTransformer.user_from_state(plan).account_group_ids
            [1, 2]
        """
        return User(
            id=_int(plan.id),
            email=_str(plan.email),
            first_name=_str(plan.first_name),
            last_name=_str(plan.last_name),
            role_id=_int(plan.role_id),
            account_id=_int(plan.account_id),
            active=_bool(plan.active),
            super_user=_bool(plan.super_user),
            all_account_access=_bool(plan.all_account_access),
            account_group_ids=convert_int_list(plan.account_group_ids),
        )

    @staticmethod
    def user_to_state(user: User) -> UserState:
        return UserState(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role_id=user.role_id,
            account_group_ids=list(user.account_group_ids),
            account_id=user.account_id,
            active=user.active,
            super_user=user.super_user,
            all_account_access=user.all_account_access,
        )

    @staticmethod
    def role_from_state(plan: RoleState) -> Role:
        """Convert a desired role state into a Beeswax role.

        Permissions keep their order and are not deduplicated; repeated
        object types reach the API unchanged.
        """
        permissions = [
            Permission(object_type=_str(p.object_type), permission=_int(p.permission))
            for p in plan.permissions
        ]
        return Role(
            id=_int(plan.id),
            name=_str(plan.name),
            parent_role_id=_int(plan.parent_role_id),
            archived=_bool(plan.archived),
            notes=_str(plan.notes),
            shared_across_accounts=_bool(plan.shared_across_accounts),
            permissions=permissions,
            report_ids=convert_int_list(plan.report_ids),
        )

    @staticmethod
    def role_to_state(role: Role) -> RoleState:
        """Convert a Beeswax role into observed state.

        Absent server data has already decoded to zero values, so ``notes``
        and ``archived`` are always known.
        """
        return RoleState(
            id=role.id,
            name=role.name,
            parent_role_id=role.parent_role_id,
            archived=role.archived,
            notes=role.notes,
            shared_across_accounts=role.shared_across_accounts,
            permissions=[
                PermissionState(object_type=p.object_type, permission=p.permission)
                for p in role.permissions
            ],
            report_ids=list(role.report_ids),
        )

    @staticmethod
    def role_summary(role: Role) -> RoleSummary:
        return RoleSummary(id=role.id, name=role.name)
