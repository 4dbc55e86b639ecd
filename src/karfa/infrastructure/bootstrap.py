"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from karfa.application.shop import Shop
from karfa.config import Settings, get_settings
from karfa.infrastructure.persistence.catalog_seed import default_products
from karfa.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def product_repository(settings: Settings | None = None) -> InMemoryProductRepository:
    settings = settings or get_settings()
    products = default_products() if settings.seed_catalog else []
    return InMemoryProductRepository(products)


def build_shop(settings: Settings | None = None) -> Shop:
    return Shop(catalog=product_repository(settings))
