"""Beeswax role management operations."""
from __future__ import annotations
import logging
from typing import Any, List

from .client import BeeswaxClient
from .models import Role, decode

logger = logging.getLogger(__name__)

ROLES_PATH = "/rest/v2/roles"


def _role_list(data: Any) -> List[Role]:
    if not isinstance(data, list):
        raise ValueError(f"role list payload must be a JSON array, got {type(data).__name__}")
    return [Role.from_dict(item) for item in data]


class RoleService:
    """Service for managing Beeswax roles."""

    def __init__(self, client: BeeswaxClient):
        """Initialize role service.

        Args:
            client: Authenticated Beeswax client
        """
        self.client = client

    def get(self, role_id: int) -> Role:
        """Fetch a role by ID.

        Raises:
            BeeswaxAPIError: If the API rejects the request (e.g. 404)
            DecodeError: If the response is not a role object
        """
        raw = self.client.get(f"{ROLES_PATH}/{role_id}")
        return decode(raw, "role", Role.from_dict)

    def list(self) -> List[Role]:
        """Return every role visible to the session, in server order."""
        raw = self.client.get(ROLES_PATH)
        return decode(raw, "role list", _role_list)

    def create(self, role: Role) -> int:
        """Create a role and return the server-assigned ID."""
        raw = self.client.post(ROLES_PATH, role.to_dict())
        created = decode(raw, "role", Role.from_dict)
        logger.info("[roles] Role '%s' created (id=%s)", role.name, created.id)
        return created.id

    def update(self, role: Role) -> None:
        """Replace the role stored under ``role.id`` with ``role`` (full PUT)."""
        self.client.put(f"{ROLES_PATH}/{role.id}", role.to_dict())
        logger.info("[roles] Role %s updated", role.id)

    def delete(self, role_id: int) -> None:
        self.client.delete(f"{ROLES_PATH}/{role_id}")
        logger.info("[roles] Role %s deleted", role_id)
