"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from beeswax_provider.core.beeswax.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_HOST = "BEESWAX_HOST"
ENV_EMAIL = "BEESWAX_EMAIL"
ENV_PASSWORD = "BEESWAX_PASSWORD"
ENV_TIMEOUT = "BEESWAX_TIMEOUT"


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name

    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
            if secret_value:
                logger.info("[settings] Loaded %s from /run/secrets", secret_name)
                return secret_value
        except OSError as e:
            logger.warning("[settings] Failed to read /run/secrets/%s: %s", secret_name, e)

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            return secret_value

    return None


@dataclass
class ProviderConfig:
    """Connection settings for the Beeswax API."""
    host: str
    email: str
    password: str
    timeout: Optional[float] = None

    def __repr__(self) -> str:
        return f"ProviderConfig(host={self.host!r}, email={self.email!r}, password='***', timeout={self.timeout!r})"


def _parse_timeout(raw: str) -> Optional[float]:
    raw = raw.strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_TIMEOUT} must be a number of seconds, got {raw!r}")
    if value <= 0:
        raise ConfigurationError(f"{ENV_TIMEOUT} must be positive, got {raw!r}")
    return value


def load_settings(
    host: Optional[str] = None,
    email: Optional[str] = None,
    password: Optional[str] = None,
    timeout: Optional[float] = None,
) -> ProviderConfig:
    """Resolve provider settings.

    Explicit arguments win; otherwise BEESWAX_HOST, BEESWAX_EMAIL and
    BEESWAX_PASSWORD are read (the password may also come from
    /run/secrets/beeswax_password).

    Raises:
        ConfigurationError: Listing every missing or empty setting
    """
    if host is None:
        host = os.environ.get(ENV_HOST, "")
    if email is None:
        email = os.environ.get(ENV_EMAIL, "")
    if password is None:
        password = _load_secret_from_file("beeswax_password", ENV_PASSWORD) or ""
    if timeout is None:
        timeout = _parse_timeout(os.environ.get(ENV_TIMEOUT, ""))

    missing = []
    for attr, value, env_var in (
        ("host", host, ENV_HOST),
        ("email", email, ENV_EMAIL),
        ("password", password, ENV_PASSWORD),
    ):
        if not value or not value.strip():
            missing.append(f"'{attr}' (or {env_var})")
    if missing:
        raise ConfigurationError(
            "Missing Beeswax API configuration: "
            + ", ".join(missing)
            + ". Set the value in the configuration or the environment; if already set, ensure it is not empty."
        )

    config = ProviderConfig(host=host.strip().rstrip("/"), email=email.strip(), password=password, timeout=timeout)
    logger.debug("[settings] host=%s", config.host)
    return config
