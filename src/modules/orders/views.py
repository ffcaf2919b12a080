"""Order and order-item API views.

Expose ``OrderService`` and ``OrderItemService`` via HTTP using DRF
ViewSets.  Each domain exception maps to one status code (400 or 404)
with a ``{"message": ...}`` body; database failures become a 500.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import handle_persistence_errors, validation_message
from modules.core.identifiers import parse_id
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.orders.constants import ORDER_DELETED, ORDER_ITEM_DELETED
from modules.orders.dtos import (
    CreateOrderDTO,
    CreateOrderItemDTO,
    UpdateOrderDTO,
    UpdateOrderItemDTO,
)
from modules.orders.exceptions import (
    CustomerNotFound,
    OrderHasItems,
    OrderItemNotFound,
    OrderNotFound,
    ProductNotFound,
)
from modules.orders.models import Order, OrderItem
from modules.orders.repositories.django_repository import (
    OrderDjangoRepository,
    OrderItemDjangoRepository,
)
from modules.orders.serializers import (
    OrderItemDetailSerializer,
    OrderItemSerializer,
    OrderSerializer,
    OrderWithCustomerSerializer,
)
from modules.orders.services import OrderItemService, OrderService
from modules.products.repositories.django_repository import ProductDjangoRepository


def _bad_request(exc: Exception) -> Response:
    return Response(
        {"message": validation_message(exc)},
        status=status.HTTP_400_BAD_REQUEST,
    )


def _not_found(exc: Exception) -> Response:
    return Response({"message": str(exc)}, status=status.HTTP_404_NOT_FOUND)


class OrderViewSet(GenericViewSet):
    """ViewSet for Order operations.

    Uses ``OrderService`` with injected repositories (DIP).
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            customer_repository=CustomerDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @handle_persistence_errors("Erro ao listar pedidos")
    def list(self, request: Request) -> Response:
        """GET /pedidos

        Each entry separates the ``pedido`` from its ``cliente``.
        """
        orders = self._service.list_orders(request.query_params)
        return Response(
            {"pedidos": OrderWithCustomerSerializer(orders, many=True).data}
        )

    @handle_persistence_errors("Erro ao buscar pedido")
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /pedidos/{pk}"""
        try:
            order = self._service.get_order(parse_id(pk))
        except OrderNotFound as exc:
            return _not_found(exc)
        return Response(OrderWithCustomerSerializer(order).data)

    @handle_persistence_errors("Erro ao listar pedidos do cliente")
    def customer_orders(self, request: Request, pk: str | None = None) -> Response:
        """GET /clientes/{pk}/pedidos

        The flat list is served under ``pedidos`` and mirrored under ``orders``.
        """
        try:
            orders = self._service.list_customer_orders(parse_id(pk))
        except CustomerNotFound as exc:
            return _not_found(exc)
        data = OrderSerializer(orders, many=True).data
        return Response({"pedidos": data, "orders": data})

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @handle_persistence_errors("Erro ao incluir pedido")
    def create(self, request: Request) -> Response:
        """POST /incluirPedido"""
        try:
            dto = CreateOrderDTO.model_validate(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return _bad_request(exc)

        order = self._service.create_order(dto)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    @handle_persistence_errors("Erro ao atualizar pedido")
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /pedidos/{pk}"""
        order_id = parse_id(pk)
        try:
            dto = UpdateOrderDTO.model_validate(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return _bad_request(exc)

        try:
            order = self._service.update_order(order_id, dto)
        except OrderNotFound as exc:
            return _not_found(exc)
        return Response(OrderSerializer(order).data)

    @handle_persistence_errors("Erro ao excluir pedido")
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /pedidos/{pk}"""
        try:
            self._service.delete_order(parse_id(pk))
        except OrderNotFound as exc:
            return _not_found(exc)
        except OrderHasItems as exc:
            return Response({"message": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        return Response({"message": ORDER_DELETED})


class OrderItemViewSet(GenericViewSet):
    """ViewSet for order items (``itensDoPedido``)."""

    queryset = OrderItem.objects.all()
    serializer_class = OrderItemDetailSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderItemService(
            item_repository=OrderItemDjangoRepository(),
            order_repository=OrderDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )

    @handle_persistence_errors("Erro ao listar itens do pedido")
    def list(self, request: Request) -> Response:
        """GET /itensDoPedido"""
        items = self._service.list_items(request.query_params)
        return Response(
            {"itensDoPedido": OrderItemDetailSerializer(items, many=True).data}
        )

    @handle_persistence_errors("Erro ao buscar item do pedido")
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /itensDoPedido/{pk}

        Non-numeric ids are rejected with 400 before any lookup.
        """
        try:
            item = self._service.get_item(parse_id(pk))
        except OrderItemNotFound as exc:
            return _not_found(exc)
        return Response(OrderItemDetailSerializer(item).data)

    @handle_persistence_errors("Erro ao incluir item do pedido")
    def create(self, request: Request) -> Response:
        """POST /incluirItemDoPedido"""
        try:
            dto = CreateOrderItemDTO.model_validate(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return _bad_request(exc)

        try:
            item = self._service.create_item(dto)
        except (OrderNotFound, ProductNotFound) as exc:
            return _not_found(exc)
        return Response(OrderItemSerializer(item).data, status=status.HTTP_201_CREATED)

    @handle_persistence_errors("Erro ao atualizar item do pedido")
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /itensDoPedido/{pk}"""
        item_id = parse_id(pk)
        try:
            dto = UpdateOrderItemDTO.model_validate(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return _bad_request(exc)

        try:
            item = self._service.update_item(item_id, dto)
        except OrderItemNotFound as exc:
            return _not_found(exc)
        return Response(OrderItemSerializer(item).data)

    @handle_persistence_errors("Erro ao excluir item do pedido")
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /itensDoPedido/{pk}"""
        try:
            self._service.delete_item(parse_id(pk))
        except OrderItemNotFound as exc:
            return _not_found(exc)
        return Response({"message": ORDER_ITEM_DELETED})
