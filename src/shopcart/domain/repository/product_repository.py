"""Abstract repository for Product aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import ProductId


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: ProductId) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by name (case-insensitive), or None if not found."""

    @abstractmethod
    def get_by_ids(self, product_ids: list[ProductId]) -> list[Product]:
        """Return the products that exist, in the order of ``product_ids``."""

    @abstractmethod
    def list_in_stock(self) -> list[Product]:
        """Return every product with stock > 0."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def remove(self, product: Product) -> None:
        """Delete a product from the catalog."""
