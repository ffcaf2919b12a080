"""Django ORM implementation of the Product repository.

Look-ups return ``None`` for a missing product.  Removal refuses to
cascade: ``PROTECT`` on ``OrderItem.produto`` raises ``ProtectedError``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from django.db import transaction

from modules.products.filters import ProductFilter
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key, ``None`` if absent."""
        return Product.objects.filter(id=id).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """List products, narrowed by ``ProductFilter`` query parameters.

        Examples of valid filters::

            {"descricao": "teclado"}
            {"preco_min": "10", "preco_max": "99.90"}
        """
        queryset = Product.objects.all()
        if filters:
            queryset = ProductFilter(filters, queryset=queryset).qs
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Remove a product by ID.

        Returns ``True`` if the product was found and removed,
        ``False`` if no product exists with the given ID.
        """
        deleted, _ = Product.objects.filter(id=id).delete()
        return bool(deleted)

    def has_order_items(self, id: int) -> bool:
        """Return ``True`` if any order item references the product."""
        return Product.objects.filter(id=id, itens_do_pedido__isnull=False).exists()
