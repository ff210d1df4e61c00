"""Vault Handoff.

Orchestrates the handoff between "node exists" and "node is authorized":
waits until a bootstrapped client is searchable, then adds it to the
authorized clients of every requested vault item.
"""
from .version import __version__
from .options import OptionSet, VAULT_ITEM, VAULT_JSON, VAULT_FILE
from .vault import VaultReconciler

__all__ = [
    "__version__",
    "OptionSet",
    "VAULT_ITEM",
    "VAULT_JSON",
    "VAULT_FILE",
    "VaultReconciler",
]
