"""Customer (``cliente``) model.

Business rules implemented:
- RN-CLI-001: CPF must be unique in the system.
- RN-CLI-002: CPF is stored as digits only (sanitised on save).
- RN-CLI-003: A customer referenced by orders cannot be deleted
  (``PROTECT`` on ``Order.cliente``).
- RN-CLI-004: CPF masked in ``__str__`` and logs.
"""

from __future__ import annotations

import re

from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    """Customer aggregate root.

    ``cpf`` is the national business identifier; ``id`` is the
    database-generated key used by every API route.
    """

    nome = models.CharField(max_length=255)
    sobrenome = models.CharField(max_length=255, blank=True, default="")
    cpf = models.CharField(max_length=14, unique=True)

    class Meta:
        db_table = "clientes"
        ordering = ["id"]

    # ------------------------------------------------------------------
    # Sanitisation
    # ------------------------------------------------------------------

    @staticmethod
    def sanitize_cpf(value: str) -> str:
        """Strip all non-digit characters from a CPF string."""
        return re.sub(r"\D", "", value)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        if self.cpf:
            self.cpf = self.sanitize_cpf(self.cpf)
        super().save(*args, **kwargs)

    # ------------------------------------------------------------------
    # Display (RN-CLI-004: CPF masked)
    # ------------------------------------------------------------------

    @property
    def nome_completo(self) -> str:
        return f"{self.nome} {self.sobrenome}".strip()

    def __str__(self) -> str:
        suffix = self.cpf[-4:] if self.cpf else "????"
        return f"{self.nome_completo} (CPF: ***{suffix})"
