# receipts/models/append_only.py

"""
Append-only guards shared by Receipt and ReceiptItem.

Rows may be inserted (save on a new instance, bulk_create). Any UPDATE or
DELETE through the ORM raises ValidationError.
"""

from django.core.exceptions import ValidationError
from django.db import models


class AppendOnlyQuerySet(models.QuerySet):
    def update(self, **kwargs):
        raise ValidationError(f"{self.model.__name__} records are append-only")

    def delete(self):
        raise ValidationError(f"{self.model.__name__} records are append-only")

    def bulk_update(self, objs, fields, batch_size=None):
        raise ValidationError(f"{self.model.__name__} records are append-only")


class AppendOnlyModel(models.Model):
    objects = AppendOnlyQuerySet.as_manager()

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError(f"{self.__class__.__name__} records are immutable")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError(f"{self.__class__.__name__} records are append-only")
