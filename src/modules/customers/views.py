"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
Each domain exception maps to one status code (400, 404 or 409)
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
from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerHasOrders,
    CustomerNotFound,
    InvalidCpf,
)
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerSerializer
from modules.customers.services import CustomerService


class CustomerViewSet(GenericViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    queryset = Customer.objects.all()
    serializer_class = CustomerSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @handle_persistence_errors("Erro ao listar clientes")
    def list(self, request: Request) -> Response:
        """GET /clientes"""
        customers = self._service.list_customers(request.query_params)
        return Response({"clientes": CustomerSerializer(customers, many=True).data})

    @handle_persistence_errors("Erro ao buscar cliente")
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /clientes/{pk}"""
        try:
            customer = self._service.get_customer(parse_id(pk))
        except CustomerNotFound as exc:
            return Response({"message": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(CustomerSerializer(customer).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @handle_persistence_errors("Erro ao incluir cliente")
    def create(self, request: Request) -> Response:
        """POST /incluirCliente"""
        try:
            dto = CreateCustomerDTO.model_validate(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return Response(
                {"message": validation_message(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            customer = self._service.create_customer(dto)
        except InvalidCpf as exc:
            return Response({"message": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except CustomerAlreadyExists as exc:
            return Response({"message": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(
            CustomerSerializer(customer).data, status=status.HTTP_201_CREATED
        )

    @handle_persistence_errors("Erro ao atualizar cliente")
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /clientes/{pk}"""
        customer_id = parse_id(pk)
        try:
            dto = UpdateCustomerDTO.model_validate(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return Response(
                {"message": validation_message(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            customer = self._service.update_customer(customer_id, dto)
        except CustomerNotFound as exc:
            return Response({"message": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidCpf as exc:
            return Response({"message": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except CustomerAlreadyExists as exc:
            return Response({"message": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(CustomerSerializer(customer).data)

    @handle_persistence_errors("Erro ao excluir cliente")
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /clientes/{pk}"""
        try:
            self._service.delete_customer(parse_id(pk))
        except CustomerNotFound as exc:
            return Response({"message": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except CustomerHasOrders as exc:
            return Response({"message": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        return Response({"message": "Cliente excluído com sucesso"})
