"""Exceptions raised by the vault handoff.

Only the secret-store capability probe translates errors. Malformed
vault input, discovery failures and per-item load/save failures reach
the caller unchanged.
"""
from typing import Optional


class VaultHandoffError(Exception):
    """Base exception for vault handoff errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class SecretStoreUnavailableError(VaultHandoffError):
    """Raised when the secret-store integration cannot be used.

    Typically an optional library backing the store is not installed.
    """

    def __init__(
        self,
        dependency: str,
        message: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        full_message = message or (
            "Bootstrap cannot configure vault items when the "
            f"{dependency!r} secret store dependency is not installed"
        )
        super().__init__(full_message, details)
        self.dependency = dependency
