"""Country and State look-ups plus the shared address field set.

``AbstractAddress`` is inherited by every concrete address table
(customer billing/shipping and order billing/shipping) so the columns the
address aggregation groups by are defined in one place.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Country(BaseModel):
    name = models.CharField(max_length=100)
    iso = models.CharField(max_length=2, unique=True)

    class Meta:
        db_table = "countries"
        ordering = ["name"]
        verbose_name_plural = "countries"

    def __str__(self) -> str:
        return self.name


class State(BaseModel):
    country = models.ForeignKey(
        "locations.Country",
        on_delete=models.CASCADE,
        related_name="states",
    )
    name = models.CharField(max_length=100)
    short_code = models.CharField(max_length=10, blank=True, default="")

    class Meta:
        db_table = "country_states"
        ordering = ["name"]

    def __str__(self) -> str:
        return f"{self.name} ({self.country.iso})"


class AbstractAddress(BaseModel):
    """Postal address columns shared by customer and order addresses.

    ``country`` and ``state`` use ``related_name="+"``: the look-ups never
    navigate back to the addresses that reference them.
    """

    company = models.CharField(max_length=255, blank=True, default="")
    department = models.CharField(max_length=255, blank=True, default="")
    salutation = models.CharField(max_length=30, blank=True, default="")
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    street = models.CharField(max_length=255)
    zip_code = models.CharField(max_length=20)
    city = models.CharField(max_length=100)
    country = models.ForeignKey(
        "locations.Country",
        on_delete=models.PROTECT,
        related_name="+",
        null=True,
        blank=True,
    )
    state = models.ForeignKey(
        "locations.State",
        on_delete=models.SET_NULL,
        related_name="+",
        null=True,
        blank=True,
    )

    class Meta:
        abstract = True

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}, {self.zip_code} {self.city}"
