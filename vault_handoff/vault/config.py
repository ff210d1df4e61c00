"""
Vault Handoff Configuration — Environment loading and validated settings.

Reads optional settings from environment variables:
    BOOTSTRAP_VAULT_JSON = <JSON text with vault items>
    BOOTSTRAP_VAULT_FILE = <path to a JSON file with vault items>
    BOOTSTRAP_VAULT_POLL_INTERVAL = <seconds between discovery queries>

Pre-parsed vault items can only be passed programmatically.
"""
import os
import logging
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..options import VAULT_JSON, VAULT_FILE

logger = logging.getLogger("vault_handoff")

_ENV_OPTIONS = {
    "BOOTSTRAP_VAULT_JSON": VAULT_JSON,
    "BOOTSTRAP_VAULT_FILE": VAULT_FILE,
}


def load_options_from_env() -> dict[str, Any]:
    """Collect vault options present in the environment.

    Returns:
        Mapping of option name to raw string value. Unset or empty
        variables are left out.
    """
    options: dict[str, Any] = {}
    for env_name, option in _ENV_OPTIONS.items():
        value = os.environ.get(env_name)
        if value:
            options[option] = value
    if options:
        logger.debug("Vault options from environment: %s", sorted(options))
    return options


class ReconcilerConfig(BaseModel):
    """Validated reconciler settings."""

    poll_interval: float = Field(default=1.0, gt=0)
    search_kind: str = Field(default="client")

    model_config = {"frozen": True}

    @field_validator("search_kind")
    @classmethod
    def validate_search_kind(cls, v: str) -> str:
        """Search kind cannot be blank."""
        if not v.strip():
            raise ValueError("search_kind cannot be empty")
        return v

    @classmethod
    def from_env(cls) -> "ReconcilerConfig":
        """Create ReconcilerConfig from environment variables."""
        raw = os.environ.get("BOOTSTRAP_VAULT_POLL_INTERVAL")
        if raw is None:
            return cls()
        return cls(poll_interval=float(raw))
