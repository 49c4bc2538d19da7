"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from shopcart.application.dto import ProductDTO
from shopcart.domain.exceptions import ProductNotFoundError
from shopcart.domain.model.value_objects import Money, ProductId
from shopcart.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        new_stock: int | None = None,
    ) -> ProductDTO:
        """Update a product's price and/or stock.

        This does NOT affect any existing cart lines or orders; they
        captured a price snapshot when the product was added.
        """
        pid = ProductId.from_string(product_id)
        product = self._product_repo.get_by_id(pid)
        if product is None:
            raise ProductNotFoundError(f"Product {pid} not found")

        if new_price is not None:
            product.update_price(Money.of(new_price, product.price.currency))
        if new_stock is not None:
            product.update_stock(new_stock)
        self._product_repo.save(product)

        logger.info(
            "Product updated",
            product_id=str(pid),
            price=product.price.formatted,
            stock=product.stock,
        )
        return ProductDTO.from_product(product)
