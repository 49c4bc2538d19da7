"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from shopcart.application.dto import ProductDTO
from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import DEFAULT_CURRENCY, Money
from shopcart.domain.repository.product_repository import ProductRepository
from shopcart.domain.service.identity import IdentityGenerator

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        id_generator: IdentityGenerator,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._product_repo = product_repo
        self._id_generator = id_generator
        self._currency = currency

    def handle(self, name: str, price: str, stock: int = 0) -> ProductDTO:
        """Add a new product to the catalog."""
        if name and self._product_repo.get_by_name(name.strip()) is not None:
            raise ValidationError(f"Product '{name.strip()}' already exists")

        product = Product.create(
            id=self._id_generator.next_product_id(),
            name=name,
            price=Money.of(price, self._currency),
            stock=stock,
        )
        self._product_repo.save(product)

        logger.info(
            "Product added",
            product_id=str(product.id),
            name=product.name,
            price=product.price.formatted,
            stock=product.stock,
        )
        return ProductDTO.from_product(product)
