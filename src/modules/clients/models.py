"""Client model.

Rows are keyed by ``(document_type, document_number)``.  Uniqueness and
positivity are enforced by database constraints; the repository does no
duplicate detection of its own.  The document number is masked in
``__str__`` so it never lands whole in logs.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Client(BaseModel):
    """Persisted client record (owned by the record store)."""

    document_type = models.CharField(max_length=5)
    document_number = models.BigIntegerField()
    first_name = models.CharField(max_length=100)
    middle_name = models.CharField(max_length=100, blank=True, default="")
    last_name = models.CharField(max_length=100)
    second_last_name = models.CharField(max_length=100, blank=True, default="")
    phone = models.CharField(max_length=20, blank=True, default="")
    address = models.CharField(max_length=255, blank=True, default="")
    city = models.CharField(max_length=100, blank=True, default="")

    class Meta:
        db_table = "clients"
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["document_type", "document_number"],
                name="clients_document_uniq",
            ),
            models.CheckConstraint(
                condition=models.Q(document_number__gt=0),
                name="clients_document_number_positive",
            ),
        ]

    def __str__(self) -> str:
        suffix = str(self.document_number)[-4:] if self.document_number else "????"
        return f"{self.first_name} {self.last_name} ({self.document_type}: ***{suffix})"
