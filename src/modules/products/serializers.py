"""Product DRF serializers for API output.

Input is validated by the Pydantic DTOs in ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Public representation of a product: ``{id, descricao, preco}``."""

    class Meta:
        model = Product
        fields = ["id", "descricao", "preco"]
        read_only_fields = fields
