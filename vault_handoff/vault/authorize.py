"""
Authorization Updater — adds a client to the authorized clients of vault items.

Each target is loaded, updated and saved at most once. The batch is not
atomic: the first failure propagates, earlier targets stay updated and
later targets are never attempted.
"""
import logging
from collections.abc import Iterable

from .collaborators import SecretStore
from .items import AuthorizationTarget, client_query

logger = logging.getLogger("vault_handoff")


def grant_access(
    store: SecretStore,
    target: AuthorizationTarget,
    node_name: str,
) -> None:
    """Authorize node_name on a single vault item and persist it."""
    item = store.load(target.vault, target.item)
    item.set_authorized_clients(client_query(node_name))
    item.save()
    logger.debug(
        "Vault item updated: vault=%s item=%s client=%s",
        target.vault, target.item, node_name,
    )


def grant_all(
    store: SecretStore,
    targets: Iterable[AuthorizationTarget],
    node_name: str,
) -> dict:
    """Authorize node_name on every target, in order.

    Returns:
        Stats dict with keys: total, updated.
    """
    targets = list(targets)
    stats = {"total": len(targets), "updated": 0}
    for target in targets:
        grant_access(store, target, node_name)
        stats["updated"] += 1
    logger.info(
        "Vault access granted to %s: %s", node_name, stats,
    )
    return stats
