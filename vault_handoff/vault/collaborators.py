"""
Collaborators consumed by the reconciler.

The directory search, the encrypted item store and the user interface
are provided by the caller. Only their shape is defined here.
"""
import logging
import importlib
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from .exceptions import SecretStoreUnavailableError

logger = logging.getLogger("vault_handoff")


@runtime_checkable
class UI(Protocol):
    """Receives user-facing events."""

    def info(self, message: str) -> Any: ...

    def warn(self, message: str) -> Any: ...


@runtime_checkable
class ClientSearch(Protocol):
    """Answers whether a client is visible in the central directory."""

    def search(self, kind: str, query: str) -> Sequence[Any]: ...


@runtime_checkable
class VaultItem(Protocol):
    """A loaded encrypted item."""

    def set_authorized_clients(self, query: str) -> Any: ...

    def save(self) -> Any: ...


class SecretStore(ABC):
    """Loads encrypted vault items.

    Stores backed by an optional library list its modules in ``requires``;
    ``probe()`` checks they can be imported before the first load.
    """

    requires: tuple[str, ...] = ()

    def probe(self) -> None:
        """Check the store can be used.

        Raises:
            SecretStoreUnavailableError: naming the first missing module.
        """
        for name in self.requires:
            try:
                importlib.import_module(name)
            except ImportError as err:
                raise SecretStoreUnavailableError(
                    name, details={"store": type(self).__name__}
                ) from err

    @abstractmethod
    def load(self, vault: str, item: str) -> VaultItem:
        """Load an item from a vault."""


class LoggerUI:
    """UI collaborator that writes to the package logger."""

    def __init__(self, log: logging.Logger = logger):
        self._logger = log

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warn(self, message: str) -> None:
        self._logger.warning(message)
