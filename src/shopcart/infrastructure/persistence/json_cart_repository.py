"""JSON-file-backed implementation of CartRepository.

Cart lines are stored by product ID together with their unit-price
snapshot; products are resolved through the product repository on load.
A line whose product has left the catalog is dropped.

Saving is guarded by an optimistic version check: a cart loaded at
version N can only overwrite a stored cart that is still at version N.
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

import structlog

from shopcart.domain.exceptions import ConcurrencyError
from shopcart.domain.model.cart import Cart, CartItem
from shopcart.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    CartId,
    Money,
    ProductId,
    Quantity,
)
from shopcart.domain.repository.cart_repository import CartRepository
from shopcart.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path, product_repo: ProductRepository) -> None:
        self._file_path = file_path
        self._product_repo = product_repo
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- CartRepository interface ---------------------------------------------

    def get_by_id(self, cart_id: CartId) -> Cart | None:
        for raw in self._load_raw():
            if raw["id"] == str(cart_id):
                return self._to_domain(raw)
        return None

    def get_by_session_id(self, session_id: str) -> Cart | None:
        for raw in self._load_raw():
            if raw.get("session_id") == session_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Cart]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, cart: Cart) -> None:
        carts = self._load_raw()
        new_version = cart.version + 1

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(carts):
            if raw["id"] == str(cart.id):
                stored_version = raw.get("version", 0)
                if stored_version != cart.version:
                    raise ConcurrencyError(
                        f"Cart {cart.id} was modified concurrently "
                        f"(loaded version {cart.version}, stored {stored_version})"
                    )
                carts[i] = self._to_raw(cart, new_version)
                break
        else:
            carts.append(self._to_raw(cart, new_version))

        self._persist_raw(carts)
        cart.version = new_version

    def remove(self, cart: Cart) -> None:
        carts = self._load_raw()
        remaining = [raw for raw in carts if raw["id"] != str(cart.id)]
        if len(remaining) != len(carts):
            self._persist_raw(remaining)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart, version: int) -> dict:
        return {
            "id": str(cart.id),
            "session_id": cart.session_id,
            "currency": cart.currency,
            "total_price": cart.total_price.formatted,
            "created_at": cart.created_at.isoformat(),
            "updated_at": cart.updated_at.isoformat(),
            "version": version,
            "items": [
                {
                    "product_id": str(item.product_id),
                    "quantity": item.quantity.value,
                    "unit_price": item.unit_price.formatted,
                }
                for item in cart.items
            ],
        }

    def _to_domain(self, raw: dict) -> Cart:
        currency = raw.get("currency", DEFAULT_CURRENCY)
        product_ids = [ProductId(i["product_id"]) for i in raw["items"]]
        products = {str(p.id): p for p in self._product_repo.get_by_ids(product_ids)}

        items: list[CartItem] = []
        for i in raw["items"]:
            product = products.get(i["product_id"])
            if product is None:
                logger.warning(
                    "Dropping cart line for unknown product",
                    cart_id=raw["id"],
                    product_id=i["product_id"],
                )
                continue
            items.append(
                CartItem(
                    product=product,
                    quantity=Quantity(i["quantity"]),
                    unit_price=Money(Decimal(i["unit_price"]), currency),
                )
            )

        cart = Cart(
            id=CartId(raw["id"]),
            session_id=raw.get("session_id"),
            items=items,
            total_price=Money.zero(currency),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
            version=raw.get("version", 0),
        )
        # The stored total is informational; always derive it from the lines.
        cart.calculate_total_price()
        return cart

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, carts: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(carts, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
