"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from shopcart.infrastructure.config import Settings
from shopcart.infrastructure.identity import UuidIdentityGenerator
from shopcart.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from shopcart.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from shopcart.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from shopcart.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.data_dir / "products.json")


def cart_repository(settings: Settings) -> JsonCartRepository:
    return JsonCartRepository(
        settings.data_dir / "carts.json",
        product_repo=product_repository(settings),
    )


def order_repository(settings: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(settings.data_dir / "orders.json")


def unit_of_work(
    cart_repo: JsonCartRepository,
    order_repo: JsonOrderRepository,
) -> JsonUnitOfWork:
    return JsonUnitOfWork([cart_repo.file_path, order_repo.file_path])


def id_generator() -> UuidIdentityGenerator:
    return UuidIdentityGenerator()
