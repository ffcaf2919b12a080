"""Order service layer (Use Cases).

Orchestrates the order and order-item use cases.  All write
operations run inside ``transaction.atomic``.

Business rules enforced:
- RN-PED-001: The customer reference of an order is stored as given.
- RN-PED-002: An order referenced by items is not removed (no cascade).
- RN-ITE-001: An item must reference an existing order and product.
- RN-ITE-002: Quantity must be positive (validated by DTO).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import transaction
from django.db.models import ProtectedError

from modules.orders.constants import (
    CUSTOMER_NOT_FOUND,
    ORDER_HAS_ITEMS,
    ORDER_ITEM_NOT_FOUND,
    ORDER_NOT_FOUND,
    PRODUCT_NOT_FOUND,
)
from modules.orders.exceptions import (
    CustomerNotFound,
    OrderHasItems,
    OrderItemNotFound,
    OrderNotFound,
    ProductNotFound,
)
from modules.orders.models import Order, OrderItem

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.orders.dtos import (
        CreateOrderDTO,
        CreateOrderItemDTO,
        UpdateOrderDTO,
        UpdateOrderItemDTO,
    )
    from modules.orders.repositories.interfaces import (
        IOrderItemRepository,
        IOrderRepository,
    )
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        customer_repository: ICustomerRepository,
    ) -> None:
        self._order_repo = order_repository
        self._customer_repo = customer_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Create an order for the referenced customer.

        The customer id is not validated (RN-PED-001).
        """
        order = Order(data=dto.data, cliente_id=dto.id_cliente)
        order = self._order_repo.save(order)
        logger.info("order.created", order_id=order.id, customer_id=order.cliente_id)
        return order

    @transaction.atomic
    def update_order(self, id: int, dto: UpdateOrderDTO) -> Order:
        """Overwrite the supplied fields of an existing order.

        Raises:
            OrderNotFound: order does not exist.
        """
        order = self._order_repo.get_by_id(id)
        if not order:
            raise OrderNotFound(ORDER_NOT_FOUND)

        if "data" in dto.model_fields_set and dto.data is not None:
            order.data = dto.data
        if "id_cliente" in dto.model_fields_set:
            order.cliente_id = dto.id_cliente

        order = self._order_repo.save(order)
        logger.info("order.updated", order_id=id)
        return order

    @transaction.atomic
    def delete_order(self, id: int) -> None:
        """Remove an order that has no items (RN-PED-002).

        Raises:
            OrderNotFound: order does not exist.
            OrderHasItems: at least one item references the order.
        """
        if not self._order_repo.get_by_id(id):
            raise OrderNotFound(ORDER_NOT_FOUND)

        if self._order_repo.has_items(id):
            logger.warning("order.delete_blocked", order_id=id)
            raise OrderHasItems(ORDER_HAS_ITEMS)

        try:
            self._order_repo.delete(id)
        except ProtectedError as exc:
            logger.warning("order.delete_blocked", order_id=id, race=True)
            raise OrderHasItems(ORDER_HAS_ITEMS) from exc
        logger.info("order.deleted", order_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_orders(self, filters: Optional[Dict[str, Any]] = None) -> List[Order]:
        """Return all orders with their customers loaded."""
        return self._order_repo.list(filters)

    def get_order(self, id: int) -> Order:
        """Retrieve a single order with its customer loaded.

        Raises:
            OrderNotFound: order does not exist.
        """
        order = self._order_repo.get_by_id(id)
        if not order:
            raise OrderNotFound(ORDER_NOT_FOUND)
        return order

    def list_customer_orders(self, customer_id: int) -> List[Order]:
        """Return every order owned by the customer.

        Raises:
            CustomerNotFound: customer does not exist.
        """
        if not self._customer_repo.get_by_id(customer_id):
            raise CustomerNotFound(CUSTOMER_NOT_FOUND)
        orders = self._order_repo.list_by_customer(customer_id)
        logger.info("order.listed_by_customer", customer_id=customer_id, count=len(orders))
        return orders


class OrderItemService:
    """Application service for OrderItem use-cases."""

    def __init__(
        self,
        item_repository: IOrderItemRepository,
        order_repository: IOrderRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._item_repo = item_repository
        self._order_repo = order_repository
        self._product_repo = product_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_item(self, dto: CreateOrderItemDTO) -> OrderItem:
        """Add a product to an order.

        Raises:
            OrderNotFound: the referenced order does not exist.
            ProductNotFound: the referenced product does not exist.
        """
        log = logger.bind(order_id=dto.id_pedido, product_id=dto.id_produto)

        if not self._order_repo.get_by_id(dto.id_pedido):
            log.warning("order_item.order_missing")
            raise OrderNotFound(ORDER_NOT_FOUND)
        if not self._product_repo.get_by_id(dto.id_produto):
            log.warning("order_item.product_missing")
            raise ProductNotFound(PRODUCT_NOT_FOUND)

        item = OrderItem(
            pedido_id=dto.id_pedido,
            produto_id=dto.id_produto,
            quantidade=dto.quantidade,
        )
        item = self._item_repo.save(item)
        log.info("order_item.created", order_item_id=item.id)
        return item

    @transaction.atomic
    def update_item(self, id: int, dto: UpdateOrderItemDTO) -> OrderItem:
        """Change the quantity of an existing item.

        Raises:
            OrderItemNotFound: item does not exist.
        """
        item = self._item_repo.get_by_id(id)
        if not item:
            raise OrderItemNotFound(ORDER_ITEM_NOT_FOUND)

        item.quantidade = dto.quantidade
        item = self._item_repo.save(item)
        logger.info("order_item.updated", order_item_id=id, quantidade=item.quantidade)
        return item

    @transaction.atomic
    def delete_item(self, id: int) -> None:
        """Remove an item.

        Raises:
            OrderItemNotFound: item does not exist.
        """
        if not self._item_repo.delete(id):
            raise OrderItemNotFound(ORDER_ITEM_NOT_FOUND)
        logger.info("order_item.deleted", order_item_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_items(self, filters: Optional[Dict[str, Any]] = None) -> List[OrderItem]:
        return self._item_repo.list(filters)

    def get_item(self, id: int) -> OrderItem:
        """Retrieve an item with its order and product loaded.

        Raises:
            OrderItemNotFound: item does not exist.
        """
        item = self._item_repo.get_by_id(id)
        if not item:
            raise OrderItemNotFound(ORDER_ITEM_NOT_FOUND)
        return item
