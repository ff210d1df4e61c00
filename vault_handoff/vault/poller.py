"""
Directory Poller — blocks until a client is searchable.

The newly registered client shows up in search only once the directory
has indexed it, and there is no bound on how long that takes. Polling
uses a fixed interval and never gives up; interrupt the process to stop it.
"""
import time
import logging
from collections.abc import Callable
from typing import Any

import tenacity
from tenacity import Retrying, retry_if_result, stop_never, wait_fixed

from .collaborators import ClientSearch, UI
from .items import client_query

logger = logging.getLogger("vault_handoff")

WAITING_MESSAGE = "Updating vault items, waiting for client to be searchable.."


def _not_found(found: bool) -> bool:
    return not found


class DirectoryPoller:
    """Waits for a client to appear in directory search."""

    def __init__(
        self,
        search: ClientSearch,
        ui: UI,
        interval: float = 1.0,
        kind: str = "client",
        sleep: Callable[[float], Any] = time.sleep,
    ):
        self._search = search
        self._ui = ui
        self._interval = interval
        self._kind = kind
        self._sleep = sleep

    def client_found(self, node_name: str) -> bool:
        """Run one discovery query for the client."""
        results = self._search.search(self._kind, client_query(node_name))
        return bool(results) and results[0] is not None

    def _before_sleep(self, retry_state: tenacity.RetryCallState) -> None:
        logger.debug(
            "Client not searchable yet (attempt %d)", retry_state.attempt_number
        )
        self._ui.info(WAITING_MESSAGE)

    def wait_for(self, node_name: str) -> int:
        """Block until the client is searchable.

        Errors raised by the search collaborator are not retried.

        Returns:
            Number of discovery queries made.
        """
        retryer = Retrying(
            retry=retry_if_result(_not_found),
            wait=wait_fixed(self._interval),
            stop=stop_never,
            before_sleep=self._before_sleep,
            sleep=self._sleep,
            reraise=True,
        )
        retryer(self.client_found, node_name)
        attempts = retryer.statistics.get("attempt_number", 1)
        logger.debug("Client %s searchable after %d query(ies)", node_name, attempts)
        return attempts
