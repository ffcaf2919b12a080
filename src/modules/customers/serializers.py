"""Customer DRF serializers for API output.

Input is validated by the Pydantic DTOs in ``dtos.py``; these
serializers only render the public fields of a customer.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    """Public representation of a customer: ``{id, nome, sobrenome, cpf}``."""

    class Meta:
        model = Customer
        fields = ["id", "nome", "sobrenome", "cpf"]
        read_only_fields = fields
