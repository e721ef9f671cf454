"""Beeswax REST API client library.

This package provides a small, testable interface to the Beeswax user and
role endpoints.

Architecture:
- client.py: HTTP client with cookie-based login
- models.py: User, Role and Permission entities and their JSON shape
- users.py: User lifecycle operations (get, create, update, delete)
- roles.py: Role lifecycle operations (get, list, create, update, delete)
- exceptions.py: Typed exceptions for error handling

Usage:
    from beeswax_provider.core.beeswax import BeeswaxClient, RoleService

    client = BeeswaxClient("https://buzz.example.com", "ops@example.com", "secret")
    client.authenticate()

    role_service = RoleService(client)
    role = role_service.get(5)
"""
from .client import BeeswaxClient
from .exceptions import (
    BeeswaxError,
    ConfigurationError,
    AuthenticationError,
    EncodingError,
    InvalidRequestError,
    TransportError,
    BeeswaxAPIError,
    DecodeError,
    ReconcileError,
)
from .models import Permission, Role, User
from .roles import RoleService, ROLES_PATH
from .users import UserService, USERS_PATH

__all__ = [
    # Client
    "BeeswaxClient",

    # Exceptions
    "BeeswaxError",
    "ConfigurationError",
    "AuthenticationError",
    "EncodingError",
    "InvalidRequestError",
    "TransportError",
    "BeeswaxAPIError",
    "DecodeError",
    "ReconcileError",

    # Entities
    "Permission",
    "Role",
    "User",

    # Services
    "UserService",
    "RoleService",
    "USERS_PATH",
    "ROLES_PATH",
]
