from typing import Any, Optional
from collections.abc import Iterator, Mapping

# Vault inputs, highest precedence first.
VAULT_ITEM = 'bootstrap_vault_item'
VAULT_JSON = 'bootstrap_vault_json'
VAULT_FILE = 'bootstrap_vault_file'

VAULT_KEYS = (VAULT_ITEM, VAULT_JSON, VAULT_FILE)


def is_empty(value: Any) -> bool:
    """True for None and for empty strings, mappings and sequences."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, Mapping, list, tuple, set, frozenset)):
        return len(value) == 0
    return False


class OptionSet(Mapping[str, Any]):
    """Read-only merged option set.

    Built once from the merged knife-style configuration and never
    mutated afterwards. Values are reachable as items or as attributes
    (``options['bootstrap_vault_json']`` or ``options.bootstrap_vault_json``).
    """

    __slots__ = ('_data',)

    def __init__(
        self,
        data: Optional[Mapping[str, Any]] = None,
        **kwargs: Any
    ) -> None:
        merged = dict(data or {})
        merged.update(kwargs)
        object.__setattr__(self, '_data', merged)

    def __repr__(self) -> str:
        return f'<OptionSet keys={list(self._data.keys())}>'

    # --- Helpers ---

    def is_set(self, key: str) -> bool:
        """Check the key is present with a non-empty value."""
        return not is_empty(self._data.get(key))

    def value(self, key: str) -> Any:
        """Return the value for key, or None when it is absent or empty."""
        value = self._data.get(key)
        return None if is_empty(value) else value

    def merge(self, *layers: Optional[Mapping[str, Any]]) -> "OptionSet":
        """Return a new OptionSet with later layers taking precedence.

        ``None`` values in a layer never override an earlier value.
        """
        merged = dict(self._data)
        for layer in layers:
            if not layer:
                continue
            merged.update(
                {k: v for k, v in layer.items() if v is not None}
            )
        return OptionSet(merged)

    # --- Magic Methods ---

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __getattr__(self, key: str) -> Any:
        if key.startswith('_'):
            raise AttributeError(key)
        try:
            return self._data[key]
        except KeyError:
            raise AttributeError(key) from None

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"OptionSet is read-only, cannot set {key!r}")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"OptionSet is read-only, cannot delete {key!r}")

