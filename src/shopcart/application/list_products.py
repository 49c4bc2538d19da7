"""Application service: List Products query."""

from __future__ import annotations

from shopcart.application.dto import ProductDTO
from shopcart.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, in_stock_only: bool = False) -> list[ProductDTO]:
        if in_stock_only:
            products = self._product_repo.list_in_stock()
        else:
            products = self._product_repo.list_all()
        return [ProductDTO.from_product(p) for p in products]
