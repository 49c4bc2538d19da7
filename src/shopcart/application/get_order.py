"""Application service: Get Order / List Orders queries."""

from __future__ import annotations

from shopcart.application.commands import GetOrder, ListOrders
from shopcart.application.dto import OrderDTO
from shopcart.domain.exceptions import OrderNotFoundError
from shopcart.domain.model.value_objects import OrderId
from shopcart.domain.repository.order_repository import OrderRepository


class GetOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, query: GetOrder) -> OrderDTO:
        order_id = OrderId.from_string(query.order_id)
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(f"Order {order_id} not found")
        return OrderDTO.from_order(order)


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, query: ListOrders) -> list[OrderDTO]:
        if query.customer_email:
            orders = self._order_repo.list_by_customer_email(query.customer_email)
            if query.status:
                status = query.status.lower()
                orders = [o for o in orders if o.status.value == status]
        elif query.status:
            orders = self._order_repo.list_by_status(query.status.lower())
        else:
            orders = self._order_repo.list_all()

        return [OrderDTO.from_order(order) for order in orders]
