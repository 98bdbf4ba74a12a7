"""Base abstract model shared by the domain modules.

``BaseModel`` gives every table a UUIDv7 primary key (time-ordered,
index friendly) plus ``created_at`` / ``updated_at`` bookkeeping.
Business keys (e.g. a client's document pair) are separate, constrained
columns on the concrete models.
"""

from __future__ import annotations

import uuid6
from django.db import models


class BaseModel(models.Model):
    """Abstract base with UUIDv7 PK and timestamp bookkeeping."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
