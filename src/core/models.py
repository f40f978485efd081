"""Abstract base models shared across apps."""
from django.db import models


class TimeStampedModel(models.Model):
    """Adds ``created_at`` / ``updated_at`` bookkeeping columns."""

    created_at = models.DateTimeField("created at", auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField("updated at", auto_now=True)

    class Meta:
        abstract = True
