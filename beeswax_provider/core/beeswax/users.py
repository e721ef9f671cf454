"""Beeswax user management operations."""
from __future__ import annotations
import logging

from .client import BeeswaxClient
from .models import User, decode

logger = logging.getLogger(__name__)

USERS_PATH = "/rest/v2/users"


class UserService:
    """Service for managing Beeswax users."""

    def __init__(self, client: BeeswaxClient):
        """Initialize user service.

        Args:
            client: Authenticated Beeswax client
        """
        self.client = client

    def get(self, user_id: int) -> User:
        """Fetch a user by ID.

        Raises:
            BeeswaxAPIError: If the API rejects the request (e.g. 404)
            DecodeError: If the response is not a user object
        """
        raw = self.client.get(f"{USERS_PATH}/{user_id}")
        return decode(raw, "user", User.from_dict)

    def create(self, user: User) -> int:
        """Create a user and return the server-assigned ID.

        Only the ID is read back from the response; other fields are not
        assumed to be echoed.
        """
        raw = self.client.post(USERS_PATH, user.to_dict())
        created = decode(raw, "user", User.from_dict)
        logger.info("[users] User '%s' created (id=%s)", user.email, created.id)
        return created.id

    def update(self, user: User) -> None:
        """Replace the user stored under ``user.id`` with ``user``.

        The PUT body is a full replacement: zero-valued fields reset the
        remote value.
        """
        self.client.put(f"{USERS_PATH}/{user.id}", user.to_dict())
        logger.info("[users] User %s updated", user.id)

    def delete(self, user_id: int) -> None:
        self.client.delete(f"{USERS_PATH}/{user_id}")
        logger.info("[users] User %s deleted", user_id)
