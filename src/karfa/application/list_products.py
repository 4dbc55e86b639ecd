"""Application service: List Products use case (query)."""

from __future__ import annotations

from karfa.application.formatting import format_catalog_entry
from karfa.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[str]:
        return [format_catalog_entry(p) for p in self._product_repo.list_all()]
