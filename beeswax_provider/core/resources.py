"""Reconciliation adapters called by the declarative engine.

Resources translate desired state into create/update/delete calls and read
back observed state. Data sources are read-only views. Both receive their
gateway through the constructor.
"""
from __future__ import annotations
import logging
from dataclasses import replace
from typing import Protocol, TypeVar

from .beeswax.exceptions import BeeswaxError, ReconcileError
from .beeswax.models import Role, User
from .beeswax.roles import RoleService
from .beeswax.users import UserService
from .state import RoleState, RolesState, UserState
from .state_transformer import StateTransformer

logger = logging.getLogger(__name__)

E = TypeVar("E", covariant=True)


class EntityReader(Protocol[E]):
    """Anything that can fetch one entity by ID (both gateways qualify)."""

    def get(self, entity_id: int) -> E:
        ...


def _state_id(state) -> int:
    return state.id if state.id is not None else 0


class UserResource:
    """Full CRUD reconciliation for ``beeswax_user``."""

    type_name = "beeswax_user"

    def __init__(self, users: UserService):
        self.users = users

    def create(self, plan: UserState) -> UserState:
        """Create the user and return the plan with its new ID filled in."""
        user = StateTransformer.user_from_state(plan)
        try:
            user_id = self.users.create(user)
        except BeeswaxError as exc:
            raise ReconcileError(
                "Error creating user", f"Could not create user, unexpected error: {exc}", exc
            ) from exc
        return replace(plan, id=user_id)

    def read(self, state: UserState) -> UserState:
        user_id = _state_id(state)
        return _read_user(self.users, user_id)

    def update(self, plan: UserState, state: UserState) -> UserState:
        """Push the plan under the ID already on file.

        The plan's own ID is ignored: both the PUT path and body carry the
        stored ID.
        """
        user_id = _state_id(state)
        user = StateTransformer.user_from_state(replace(plan, id=user_id))
        try:
            self.users.update(user)
        except BeeswaxError as exc:
            raise ReconcileError(
                "Error updating user",
                f"Could not update user ID {user_id}, unexpected error: {exc}",
                exc,
            ) from exc
        return replace(plan, id=user_id)

    def delete(self, state: UserState) -> None:
        user_id = _state_id(state)
        try:
            self.users.delete(user_id)
        except BeeswaxError as exc:
            raise ReconcileError(
                "Error deleting user",
                f"Could not delete user ID {user_id}, unexpected error: {exc}",
                exc,
            ) from exc


class RoleResource:
    """Full CRUD reconciliation for ``beeswax_role``."""

    type_name = "beeswax_role"

    def __init__(self, roles: RoleService):
        self.roles = roles

    def create(self, plan: RoleState) -> RoleState:
        role = StateTransformer.role_from_state(plan)
        try:
            role_id = self.roles.create(role)
        except BeeswaxError as exc:
            raise ReconcileError(
                "Error creating role", f"Could not create role, unexpected error: {exc}", exc
            ) from exc
        return replace(plan, id=role_id)

    def read(self, state: RoleState) -> RoleState:
        return _read_role(self.roles, _state_id(state))

    def update(self, plan: RoleState, state: RoleState) -> RoleState:
        role_id = _state_id(state)
        role = StateTransformer.role_from_state(replace(plan, id=role_id))
        try:
            self.roles.update(role)
        except BeeswaxError as exc:
            raise ReconcileError(
                "Error updating role",
                f"Could not update role ID {role_id}, unexpected error: {exc}",
                exc,
            ) from exc
        return replace(plan, id=role_id)

    def delete(self, state: RoleState) -> None:
        role_id = _state_id(state)
        try:
            self.roles.delete(role_id)
        except BeeswaxError as exc:
            raise ReconcileError(
                "Error deleting role",
                f"Could not delete role ID {role_id}, unexpected error: {exc}",
                exc,
            ) from exc


class UserDataSource:
    """Read-only ``beeswax_user`` lookup by ID."""

    type_name = "beeswax_user"

    def __init__(self, reader: EntityReader[User]):
        self.reader = reader

    def read(self, user_id: int) -> UserState:
        return _read_user(self.reader, user_id)


class RoleDataSource:
    """Read-only ``beeswax_role`` lookup by ID."""

    type_name = "beeswax_role"

    def __init__(self, reader: EntityReader[Role]):
        self.reader = reader

    def read(self, role_id: int) -> RoleState:
        return _read_role(self.reader, role_id)


class RolesDataSource:
    """All roles, reduced to ``(id, name)`` in server order."""

    type_name = "beeswax_roles"

    def __init__(self, roles: RoleService):
        self.roles = roles

    def read(self) -> RolesState:
        try:
            roles = self.roles.list()
        except BeeswaxError as exc:
            raise ReconcileError(
                "Error Reading Beeswax role", f"Could not read Beeswax roles: {exc}", exc
            ) from exc
        logger.debug("[roles] Listed %d role(s)", len(roles))
        return RolesState(roles=[StateTransformer.role_summary(r) for r in roles])


def _read_user(reader: EntityReader[User], user_id: int) -> UserState:
    try:
        user = reader.get(user_id)
    except BeeswaxError as exc:
        raise ReconcileError(
            "Error Reading Beeswax user",
            f"Could not read Beeswax user ID {user_id}: {exc}",
            exc,
        ) from exc
    return StateTransformer.user_to_state(user)


def _read_role(reader: EntityReader[Role], role_id: int) -> RoleState:
    try:
        role = reader.get(role_id)
    except BeeswaxError as exc:
        raise ReconcileError(
            "Error Reading Beeswax role",
            f"Could not read Beeswax role ID {role_id}: {exc}",
            exc,
        ) from exc
    return StateTransformer.role_to_state(role)
