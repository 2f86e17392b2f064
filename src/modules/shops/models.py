"""Shop model: the storefront (and language sub-shop) a customer belongs to."""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Shop(BaseModel):
    name = models.CharField(max_length=255)
    locale = models.CharField(max_length=10, default="en_GB")
    main = models.ForeignKey(
        "self",
        on_delete=models.CASCADE,
        related_name="language_shops",
        null=True,
        blank=True,
    )

    class Meta:
        db_table = "shops"
        ordering = ["name"]

    @property
    def is_language_shop(self) -> bool:
        return self.main_id is not None

    def __str__(self) -> str:
        return f"{self.name} ({self.locale})"
