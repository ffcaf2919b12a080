"""Product (``produto``) model.

Business rules implemented:
- RN-PRO-001: Price, when informed, cannot be negative.
- RN-PRO-002: A product referenced by order items cannot be removed
  (checked by the service layer; ``PROTECT`` on ``OrderItem.produto``
  backs it at the database).
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Product aggregate root."""

    descricao = models.CharField(max_length=255)
    preco = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0.00"))],
    )

    class Meta:
        db_table = "produtos"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(preco__isnull=True) | models.Q(preco__gte=0),
                name="produtos_preco_non_negative",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.preco is not None and self.preco < 0:
            raise ValidationError({"preco": "Preço não pode ser negativo."})

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"#{self.id} - {self.descricao}"
