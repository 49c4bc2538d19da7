"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from shopcart.domain.model.order import Order, OrderItem, OrderStatus
from shopcart.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    Money,
    OrderId,
    ProductId,
    Quantity,
)
from shopcart.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: OrderId) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == str(order_id):
                return self._to_domain(raw)
        return None

    def get_by_order_number(self, order_number: str) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_number.strip().lower():
                return self._to_domain(raw)
        return None

    def list_by_customer_email(self, email: str) -> list[Order]:
        wanted = email.strip().lower()
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["customer_email"].lower() == wanted
        ]

    def list_by_status(self, status: OrderStatus | str) -> list[Order]:
        value = status.value if isinstance(status, OrderStatus) else status
        return [
            self._to_domain(raw) for raw in self._load_raw() if raw["status"] == value
        ]

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(orders):
            if raw["id"] == str(order.id):
                orders[i] = self._to_raw(order)
                break
        else:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)

    def remove(self, order: Order) -> None:
        orders = self._load_raw()
        remaining = [raw for raw in orders if raw["id"] != str(order.id)]
        if len(remaining) != len(orders):
            self._persist_raw(remaining)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": str(order.id),
            "customer_email": order.customer_email,
            "customer_name": order.customer_name,
            "status": order.status.value,
            "currency": order.total_amount.currency,
            "total_amount": order.total_amount.formatted,
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat(),
            "items": [
                {
                    "product_id": str(item.product_id),
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": item.unit_price.formatted,
                    "subtotal": item.subtotal.formatted,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", DEFAULT_CURRENCY)
        items = tuple(
            OrderItem(
                product_id=ProductId(i["product_id"]),
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), currency),
                subtotal=Money(Decimal(i["subtotal"]), currency),
            )
            for i in raw["items"]
        )
        return Order(
            id=OrderId(raw["id"]),
            customer_email=raw["customer_email"],
            customer_name=raw.get("customer_name"),
            items=items,
            total_amount=Money(Decimal(raw["total_amount"]), currency),
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
