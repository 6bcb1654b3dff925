"""
Service factory functions for dependency injection.

This module wires infrastructure implementations to core services and
keeps the per-session purchase lists. Use cases and API dependencies
import from here.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

from salonstock.config import get_logger, get_settings
from salonstock.core.exceptions import ValidationError
from salonstock.core.services import OrderMaterializer, PurchaseList, ReorderAdvisor

if TYPE_CHECKING:
    from salonstock.core.interfaces import (
        ICatalogReader,
        IInventoryStore,
        IPurchaseOrderStore,
    )

logger = get_logger(__name__)


@dataclass
class PurchasingSession:
    """A session's purchase list and the materializer bound to it."""

    session_id: str
    purchase_list: PurchaseList
    materializer: OrderMaterializer
    clock: Callable[[], date] = date.today
    last_seen: float = field(default_factory=time.monotonic)


class PurchaseListRegistry:
    """
    In-memory map of session id to purchase list.

    Sessions are created on first use and evicted after ``ttl_seconds``
    without access. Nothing is persisted: a restart empties every list.
    """

    def __init__(
        self,
        order_store: "IPurchaseOrderStore | None" = None,
        catalog: "ICatalogReader | None" = None,
        ttl_seconds: int | None = None,
        clock: Callable[[], date] = date.today,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._order_store = order_store
        self._catalog = catalog
        self._ttl_seconds = (
            ttl_seconds
            if ttl_seconds is not None
            else get_settings().purchasing.session_ttl_seconds
        )
        self._clock = clock
        self._monotonic = monotonic
        self._sessions: dict[str, PurchasingSession] = {}

    async def _get_order_store(self) -> "IPurchaseOrderStore":
        if self._order_store is None:
            from salonstock.infrastructure.storage.sqlite import get_purchase_order_store

            self._order_store = await get_purchase_order_store()
        return self._order_store

    async def _get_catalog(self) -> "ICatalogReader":
        if self._catalog is None:
            from salonstock.infrastructure.storage.sqlite import get_catalog_store

            self._catalog = await get_catalog_store()
        return self._catalog

    async def get_session(self, session_id: str) -> PurchasingSession:
        """Return the session's purchase list, creating it on first use."""
        if not session_id or not session_id.strip():
            raise ValidationError("session_id", "must be a non-empty string", session_id)

        order_store = await self._get_order_store()
        catalog = await self._get_catalog()

        self.evict_expired()
        session = self._sessions.get(session_id)
        if session is None:
            purchase_list = PurchaseList(clock=self._clock)
            session = PurchasingSession(
                session_id=session_id,
                purchase_list=purchase_list,
                materializer=OrderMaterializer(
                    purchase_list=purchase_list,
                    order_store=order_store,
                    catalog=catalog,
                    clock=self._clock,
                ),
                clock=self._clock,
            )
            self._sessions[session_id] = session
            logger.info("purchasing_session_created", session_id=session_id)

        session.last_seen = self._monotonic()
        return session

    def drop(self, session_id: str) -> bool:
        """Discard a session and its purchase list. False if there was none."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        logger.info(
            "purchasing_session_dropped",
            session_id=session_id,
            entries=len(session.purchase_list),
        )
        return True

    def evict_expired(self) -> int:
        """Drop sessions idle for longer than the TTL."""
        cutoff = self._monotonic() - self._ttl_seconds
        expired = [sid for sid, s in self._sessions.items() if s.last_seen < cutoff]
        for session_id in expired:
            session = self._sessions.pop(session_id)
            logger.info(
                "purchasing_session_expired",
                session_id=session_id,
                entries=len(session.purchase_list),
            )
        return len(expired)

    def __len__(self) -> int:
        return len(self._sessions)


# Singleton instances
_purchase_list_registry: PurchaseListRegistry | None = None
_reorder_advisor: ReorderAdvisor | None = None


def get_purchase_list_registry() -> PurchaseListRegistry:
    """Get or create the process-wide purchase list registry."""
    global _purchase_list_registry
    if _purchase_list_registry is None:
        _purchase_list_registry = PurchaseListRegistry()
    return _purchase_list_registry


def reset_purchase_list_registry() -> None:
    """Forget every session's purchase list."""
    global _purchase_list_registry
    _purchase_list_registry = None


async def get_reorder_advisor(
    catalog: "ICatalogReader | None" = None,
    inventory_store: "IInventoryStore | None" = None,
) -> ReorderAdvisor:
    """
    Get or create ReorderAdvisor instance.

    Async because the SQLite stores are resolved lazily.
    """
    global _reorder_advisor

    if _reorder_advisor is not None and catalog is None and inventory_store is None:
        return _reorder_advisor

    from salonstock.infrastructure.storage.sqlite import (
        get_catalog_store,
        get_inventory_store,
    )

    advisor = ReorderAdvisor(
        catalog=catalog or await get_catalog_store(),
        inventory_store=inventory_store or await get_inventory_store(),
    )

    if catalog is None and inventory_store is None:
        _reorder_advisor = advisor

    return advisor


def reset_services() -> None:
    """
    Reset all singleton service instances.

    Useful for testing or when configuration changes.
    """
    global _purchase_list_registry
    global _reorder_advisor

    _purchase_list_registry = None
    _reorder_advisor = None


__all__ = [
    "PurchasingSession",
    "PurchaseListRegistry",
    "get_purchase_list_registry",
    "reset_purchase_list_registry",
    "get_reorder_advisor",
    "reset_services",
]
