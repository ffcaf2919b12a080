"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- RN-PRO-001: Price cannot be negative (validated by DTO).
- RN-PRO-002: A product referenced by order items is never removed;
  the removal is refused and all data is left unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import transaction
from django.db.models import ProtectedError

from modules.products.exceptions import ProductInUse, ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

PRODUCT_NOT_FOUND = "Produto não encontrado"
PRODUCT_IN_USE = "Produto não pode ser removido devido a itens de pedidos associados"


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product."""
        product = Product(descricao=dto.descricao, preco=dto.preco)
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def update_product(self, id: int, dto: UpdateProductDTO) -> Product:
        """Update an existing product with the supplied fields only.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(PRODUCT_NOT_FOUND)

        for field in ("descricao", "preco"):
            value = getattr(dto, field)
            if value is not None:
                setattr(product, field, value)

        product = self._repo.save(product)
        logger.info("product.updated", product_id=id)
        return product

    @transaction.atomic
    def delete_product(self, id: int) -> None:
        """Remove a product unless order items reference it (RN-PRO-002).

        Raises:
            ProductNotFound: if the product does not exist.
            ProductInUse: if at least one order item references it.
        """
        if not self._repo.get_by_id(id):
            raise ProductNotFound(PRODUCT_NOT_FOUND)

        if self._repo.has_order_items(id):
            logger.warning("product.delete_blocked", product_id=id)
            raise ProductInUse(PRODUCT_IN_USE)

        try:
            self._repo.delete(id)
        except ProtectedError as exc:
            # An order item was attached between the check and the delete.
            logger.warning("product.delete_blocked", product_id=id, race=True)
            raise ProductInUse(PRODUCT_IN_USE) from exc
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """Return all products, optionally filtered."""
        return self._repo.list(filters)

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(PRODUCT_NOT_FOUND)
        logger.info("product.retrieved", product_id=id)
        return product
