"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from stockroom.application.inventory_manager import InventoryManager
from stockroom.infrastructure.config import Settings, get_settings
from stockroom.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from stockroom.infrastructure.persistence.queued_product_repository import (
    QueuedProductRepository,
)


def product_repository(settings: Settings) -> QueuedProductRepository:
    return QueuedProductRepository(
        JsonProductRepository(settings.data_dir, slot=settings.slot)
    )


def inventory_manager(settings: Settings | None = None) -> InventoryManager:
    """Build the process-wide manager and load the stored collection."""
    manager = InventoryManager(product_repo=product_repository(settings or get_settings()))
    manager.load()
    return manager
