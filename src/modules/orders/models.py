"""Order (``pedido``) and OrderItem (``item do pedido``) models.

Business rules implemented:
- RN-PED-001: An order optionally belongs to a customer (``id_cliente``).
  The customer is not validated on creation.
- RN-PED-002: An order referenced by items cannot be removed (no cascade).
- RN-ITE-001: An item references exactly one order and one product.
- RN-ITE-002: Quantity is a positive integer.
"""

from __future__ import annotations

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class Order(BaseModel):
    """Order aggregate root.

    ``cliente`` is nullable: an order whose customer relation is absent is
    rendered with ``"cliente": null``.  ``PROTECT`` prevents removing a
    customer that still owns orders.
    """

    data: models.DateField = models.DateField()
    cliente: models.ForeignKey = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="pedidos",
        db_column="id_cliente",
        null=True,
        blank=True,
    )

    class Meta:
        db_table = "pedidos"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["data"], name="pedidos_data_idx"),
        ]

    def __str__(self) -> str:
        return f"Pedido #{self.id} ({self.data})"


class OrderItem(BaseModel):
    """Line item linking an Order to a Product with a quantity.

    Both foreign keys use ``PROTECT``: neither the order nor the product
    can be removed while the item exists.
    """

    pedido: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.PROTECT,
        related_name="itens",
        db_column="id_pedido",
    )
    produto: models.ForeignKey = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="itens_do_pedido",
        db_column="id_produto",
    )
    quantidade: models.PositiveIntegerField = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
    )

    class Meta:
        db_table = "itens_do_pedido"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantidade__gte=1),
                name="itens_do_pedido_quantidade_positive",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.quantidade is not None and self.quantidade < 1:
            raise ValidationError({"quantidade": "Quantidade deve ser no mínimo 1."})

    def __str__(self) -> str:
        return f"{self.produto_id} x{self.quantidade} (pedido #{self.pedido_id})"
