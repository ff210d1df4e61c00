"""
Vault Items — Parsing and normalization of the requested vault items.

The requested work is a mapping of vault name to either a single item
name or a list of item names::

    {
        "vault1": "item",
        "vault2": ["item1", "item2"]
    }

Both forms are flattened into ``AuthorizationTarget`` pairs here, so the
updater never has to look at the shape of the input.

Security Note:
    Only vault and item names pass through this module, never secrets.
"""
from pathlib import Path
from typing import Any, NamedTuple, Union

import orjson
from pydantic import RootModel, field_validator


class AuthorizationTarget(NamedTuple):
    """One (vault, item) pair to authorize a client on."""

    vault: str
    item: str


def client_query(node_name: str) -> str:
    """Build the name-based filter expression for a client."""
    return f"name:{node_name}"


# ---------------------------------------------------------------------------
# Input parsing
# ---------------------------------------------------------------------------

def parse_vault_json(text: Union[str, bytes]) -> Any:
    """Parse JSON-encoded vault items.

    Raises:
        orjson.JSONDecodeError: If the text is not valid JSON.
    """
    return orjson.loads(text)


def read_vault_file(path: Union[str, Path]) -> Any:
    """Read and parse a JSON file with vault items.

    Raises:
        OSError: If the file cannot be read.
        orjson.JSONDecodeError: If the content is not valid JSON.
    """
    return parse_vault_json(Path(path).read_bytes())


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

class VaultItemMap(RootModel[dict[str, Union[str, list[str]]]]):
    """Validated vault name -> item(s) mapping."""

    @field_validator("root")
    @classmethod
    def validate_names(
        cls, v: dict[str, Union[str, list[str]]]
    ) -> dict[str, Union[str, list[str]]]:
        for vault, items in v.items():
            if not vault:
                raise ValueError("Vault name cannot be empty")
            names = [items] if isinstance(items, str) else items
            if any(not name for name in names):
                raise ValueError(f"Empty item name in vault {vault!r}")
        return v

    def items_for(self, vault: str) -> list[str]:
        """Item names requested for a vault, single names wrapped in a list."""
        items = self.root[vault]
        if isinstance(items, str):
            return [items]
        # repeated names are updated once
        return list(dict.fromkeys(items))

    def targets(self) -> list[AuthorizationTarget]:
        """Flatten into (vault, item) pairs, preserving input order."""
        return [
            AuthorizationTarget(vault, item)
            for vault in self.root
            for item in self.items_for(vault)
        ]