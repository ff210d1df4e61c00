"""
VaultReconciler — Grants a freshly bootstrapped node access to vault items.

Public API:
- ``requested`` — whether any vault work was asked for
- ``sanity_check()`` — warn about conflicting vault options
- ``vault_items`` — lazily resolved and memoized requested items
- ``require_secret_store()`` — one-time secret-store capability probe
- ``run(node_name)`` — wait for the client to be searchable, then update items

A run moves through: conflict check -> resolve items -> probe store ->
poll directory -> update items. Only the directory poll blocks.

Security Note:
    Never log item contents. Only vault names, item names and client names.
"""
import time
import logging
from collections.abc import Callable, Mapping
from typing import Any, Optional

from ..options import OptionSet, VAULT_ITEM, VAULT_JSON, VAULT_FILE, VAULT_KEYS
from .authorize import grant_access, grant_all
from .collaborators import ClientSearch, LoggerUI, SecretStore, UI
from .config import ReconcilerConfig, load_options_from_env
from .exceptions import SecretStoreUnavailableError
from .items import AuthorizationTarget, VaultItemMap, parse_vault_json, read_vault_file
from .poller import DirectoryPoller

logger = logging.getLogger("vault_handoff")


class VaultReconciler:
    """Updates vault items for a newly created node.

    The secret store and the directory search are injected, so any
    implementation (or a fake one in tests) can be supplied.
    """

    def __init__(
        self,
        search: ClientSearch,
        store: SecretStore,
        options: Optional[Mapping[str, Any]] = None,
        ui: Optional[UI] = None,
        config: Optional[ReconcilerConfig] = None,
        sleep: Callable[[float], Any] = time.sleep,
    ):
        self.options = options if isinstance(options, OptionSet) else OptionSet(options)
        self.ui = ui or LoggerUI()
        self.config = config or ReconcilerConfig()
        self._search = search
        self._store = store
        self._sleep = sleep
        self._node_name: Optional[str] = None
        self._vault_items: Optional[VaultItemMap] = None
        self._store_checked = False
        self._store_error: Optional[SecretStoreUnavailableError] = None

    @classmethod
    def from_env(
        cls,
        search: ClientSearch,
        store: SecretStore,
        options: Optional[Mapping[str, Any]] = None,
        ui: Optional[UI] = None,
    ) -> "VaultReconciler":
        """Build a reconciler from the environment, explicit options win."""
        merged = OptionSet(load_options_from_env()).merge(options)
        return cls(
            search=search,
            store=store,
            options=merged,
            ui=ui,
            config=ReconcilerConfig.from_env(),
        )

    @property
    def node_name(self) -> Optional[str]:
        """Name of the node (the client name), set once it is searchable."""
        return self._node_name

    # ------------------------------------------------------------------
    # Option resolution
    # ------------------------------------------------------------------

    @property
    def requested(self) -> bool:
        """True if there are vault options to act on."""
        return any(self.options.is_set(key) for key in VAULT_KEYS)

    def given_options(self) -> list[str]:
        """Vault options that are set, highest precedence first."""
        return [key for key in VAULT_KEYS if self.options.is_set(key)]

    def sanity_check(self) -> None:
        """Warn if mutually conflicting vault options were given.

        Never raises: the highest precedence option is used.
        """
        given = self.given_options()
        if len(given) < 2:
            return
        winner, ignored = given[0], given[1:]
        self.ui.warn(
            f"{winner} given with {' and '.join(ignored)}, "
            f"ignoring the latter"
        )

    @property
    def vault_items(self) -> VaultItemMap:
        """Requested vault items, resolved on first access.

        Raises:
            orjson.JSONDecodeError: If the JSON text or file is malformed.
            OSError: If the vault file cannot be read.
            pydantic.ValidationError: If the items have the wrong shape.
        """
        if self._vault_items is None:
            raw = self.options.value(VAULT_ITEM)
            if raw is None:
                text = self.options.value(VAULT_JSON)
                if text is not None:
                    raw = parse_vault_json(text)
                else:
                    raw = read_vault_file(self.options[VAULT_FILE])
            self._vault_items = VaultItemMap.model_validate(raw)
        return self._vault_items

    # ------------------------------------------------------------------
    # Secret store
    # ------------------------------------------------------------------

    def require_secret_store(self) -> None:
        """Probe the secret store once; the outcome is kept for this instance.

        Raises:
            SecretStoreUnavailableError: If the store cannot be used.
        """
        if self._store_checked:
            if self._store_error is not None:
                raise self._store_error
            return
        self._store_checked = True
        try:
            self._store.probe()
        except SecretStoreUnavailableError as err:
            self._store_error = err
            raise
        except ImportError as err:
            self._store_error = SecretStoreUnavailableError(err.name or str(err))
            raise self._store_error from err
        logger.debug("Secret store %s available", type(self._store).__name__)

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def _require_node_name(self) -> str:
        if not self._node_name:
            raise ValueError(
                "No discovered node, call run() and wait for it to succeed first"
            )
        return self._node_name

    def update_vault(self, vault: str, item: str) -> None:
        """Update an individual vault item and save it."""
        node_name = self._require_node_name()
        self.require_secret_store()
        grant_access(self._store, AuthorizationTarget(vault, item), node_name)

    def update_vault_items(self) -> int:
        """Update every requested vault item.

        Returns:
            Number of items updated.
        """
        node_name = self._require_node_name()
        self.require_secret_store()
        stats = grant_all(self._store, self.vault_items.targets(), node_name)
        return stats["updated"]

    def run(self, node_name: str) -> int:
        """Update the vault items for the newly created node.

        Args:
            node_name: Name of the node (the client name).

        Returns:
            Number of items updated, 0 when no vault work was requested.

        Raises:
            ValueError: If node_name is empty.
        """
        if not self.requested:
            logger.debug("No vault options given, nothing to do")
            return 0

        self.sanity_check()

        self._node_name = None
        if not node_name:
            raise ValueError("Node name cannot be empty")

        targets = self.vault_items.targets()
        logger.debug(
            "Vault update requested for %s: %d item(s)", node_name, len(targets)
        )
        self.require_secret_store()

        poller = DirectoryPoller(
            self._search,
            self.ui,
            interval=self.config.poll_interval,
            kind=self.config.search_kind,
            sleep=self._sleep,
        )
        poller.wait_for(node_name)
        # only a searchable client may be authorized
        self._node_name = node_name

        return self.update_vault_items()
