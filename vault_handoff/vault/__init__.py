"""Vault — Grants bootstrapped nodes access to encrypted vault items.

Security Note:
    This package never sees secret material. Encryption and persistence
    of items belong to the injected secret store.
"""

from .reconciler import VaultReconciler
from .poller import DirectoryPoller
from .authorize import grant_access, grant_all
from .collaborators import ClientSearch, LoggerUI, SecretStore, UI, VaultItem
from .config import ReconcilerConfig, load_options_from_env
from .exceptions import VaultHandoffError, SecretStoreUnavailableError
from .items import (
    AuthorizationTarget,
    VaultItemMap,
    client_query,
    parse_vault_json,
    read_vault_file,
)

__all__ = [
    "VaultReconciler",
    "DirectoryPoller",
    "grant_access",
    "grant_all",
    "ClientSearch",
    "LoggerUI",
    "SecretStore",
    "UI",
    "VaultItem",
    "ReconcilerConfig",
    "load_options_from_env",
    "VaultHandoffError",
    "SecretStoreUnavailableError",
    "AuthorizationTarget",
    "VaultItemMap",
    "client_query",
    "parse_vault_json",
    "read_vault_file",
]
