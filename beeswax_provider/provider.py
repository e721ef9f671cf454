"""Provider wiring: settings → authenticated client → resources and data sources.

The declarative engine configures the provider once, then looks up resources
and data sources by type name. Every adapter shares the provider's single
authenticated client.
"""
from __future__ import annotations
import logging
from typing import Dict, Optional

import requests

from beeswax_provider.config.settings import load_settings
from beeswax_provider.core.beeswax import (
    BeeswaxClient,
    BeeswaxError,
    ReconcileError,
    RoleService,
    UserService,
)
from beeswax_provider.core.resources import (
    RoleDataSource,
    RoleResource,
    RolesDataSource,
    UserDataSource,
    UserResource,
)

logger = logging.getLogger(__name__)

TYPE_NAME = "beeswax"


class BeeswaxProvider:
    """Entry point used by the declarative engine.

    Usage:
        provider = BeeswaxProvider(version="1.0.0")
        provider.configure(host="https://buzz.example.com")  # email/password from env
        role_resource = provider.resources()["beeswax_role"]
    """

    def __init__(self, version: str = "dev"):
        self.version = version
        self.client: Optional[BeeswaxClient] = None
        self._users: Optional[UserService] = None
        self._roles: Optional[RoleService] = None

    def configure(
        self,
        host: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> BeeswaxClient:
        """Build the API client and log in.

        Raises:
            ConfigurationError: If host, email or password is missing
            ReconcileError: If login fails; no entity operation is possible then
        """
        if self.client is not None and self.client.authenticated:
            logger.debug("[provider] Already configured; reusing the authenticated client")
            return self.client

        config = load_settings(host=host, email=email, password=password, timeout=timeout)
        client = BeeswaxClient(config.host, config.email, config.password, session=session, timeout=config.timeout)
        try:
            client.authenticate()
        except BeeswaxError as exc:
            raise ReconcileError(
                "Unable to Create Beeswax API Client",
                "An unexpected error occurred when creating the Beeswax API client.\n\n"
                f"Beeswax Client Error: {exc}",
                exc,
            ) from exc

        self.client = client
        self._users = UserService(client)
        self._roles = RoleService(client)
        logger.info("[provider] %s provider %s configured for %s", TYPE_NAME, self.version, config.host)
        return client

    def _services(self):
        if self._users is None or self._roles is None:
            raise ReconcileError(
                "Provider not configured",
                "configure() must succeed before resources or data sources are used",
            )
        return self._users, self._roles

    def resources(self) -> Dict[str, object]:
        users, roles = self._services()
        return {
            UserResource.type_name: UserResource(users),
            RoleResource.type_name: RoleResource(roles),
        }

    def data_sources(self) -> Dict[str, object]:
        users, roles = self._services()
        return {
            UserDataSource.type_name: UserDataSource(users),
            RoleDataSource.type_name: RoleDataSource(roles),
            RolesDataSource.type_name: RolesDataSource(roles),
        }
