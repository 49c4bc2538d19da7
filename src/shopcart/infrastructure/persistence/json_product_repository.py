"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import DEFAULT_CURRENCY, Money, ProductId
from shopcart.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: ProductId) -> Product | None:
        return self._load().get(str(product_id))

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def get_by_ids(self, product_ids: list[ProductId]) -> list[Product]:
        products = self._load()
        return [products[str(pid)] for pid in product_ids if str(pid) in products]

    def list_in_stock(self) -> list[Product]:
        return [p for p in self._load().values() if p.stock > 0]

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[str(product.id)] = product
        self._persist(products)

    def remove(self, product: Product) -> None:
        products = self._load()
        if products.pop(str(product.id), None) is not None:
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Product(
                id=ProductId(item["id"]),
                name=item["name"],
                price=Money(
                    Decimal(item["price"]), item.get("currency", DEFAULT_CURRENCY)
                ),
                stock=item.get("stock", 0),
            )
            for item in raw
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": str(p.id),
                "name": p.name,
                "price": p.price.formatted,
                "currency": p.price.currency,
                "stock": p.stock,
            }
            for p in products.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
