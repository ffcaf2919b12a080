"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Each domain exception maps to one status code (400 or 404)
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
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductInUse, ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @handle_persistence_errors("Erro ao listar produtos")
    def list(self, request: Request) -> Response:
        """GET /produtos"""
        products = self._service.list_products(request.query_params)
        return Response({"produtos": ProductSerializer(products, many=True).data})

    @handle_persistence_errors("Erro ao buscar produto")
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /produtos/{pk}"""
        try:
            product = self._service.get_product(parse_id(pk))
        except ProductNotFound as exc:
            return Response({"message": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @handle_persistence_errors("Erro ao incluir produto")
    def create(self, request: Request) -> Response:
        """POST /incluirProduto"""
        try:
            dto = CreateProductDTO.model_validate(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return Response(
                {"message": validation_message(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        product = self._service.create_product(dto)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    @handle_persistence_errors("Erro ao atualizar produto")
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /atualizarProduto/{pk}"""
        product_id = parse_id(pk)
        try:
            dto = UpdateProductDTO.model_validate(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return Response(
                {"message": validation_message(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            product = self._service.update_product(product_id, dto)
        except ProductNotFound as exc:
            return Response({"message": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    @handle_persistence_errors("Erro ao excluir produto")
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /produtos/{pk} and DELETE /excluirProduto/{pk}

        Refuses with 400 while order items reference the product.
        """
        try:
            self._service.delete_product(parse_id(pk))
        except ProductNotFound as exc:
            return Response({"message": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except ProductInUse as exc:
            return Response({"message": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        return Response({"message": "Produto excluído com sucesso"})
