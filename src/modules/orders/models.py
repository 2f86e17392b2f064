"""Order and the address snapshots recorded with it.

Every order stores a copy of the billing and shipping address used at
checkout.  The copies are historical: editing the customer's current
addresses never rewrites them, so one customer accumulates one billing
and one shipping row per order.  ``customer`` is denormalised onto the
address rows so the customer-information look-ups can group them without
joining through ``orders``.

- Order number auto-generated as human-readable identifier.
- Customer FK uses PROTECT to preserve order history.
"""

from __future__ import annotations

import secrets
from decimal import Decimal
from typing import Any

from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel
from modules.locations.models import AbstractAddress

ORDER_NUMBER_MAX_RETRIES = 5


class Order(BaseModel):
    """Order header.

    ``order_number`` is generated on first save (format:
    ``ORD-YYYYMMDD-XXXXXX``).  The UUIDv7 ``id`` is used for all internal
    references.
    """

    order_number: models.CharField = models.CharField(
        max_length=20, unique=True, editable=False
    )
    customer: models.ForeignKey = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    invoice_amount: models.DecimalField = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
    )

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="orders_created_idx"),
        ]

    @staticmethod
    def generate_order_number() -> str:
        """Generate a human-readable order number: ``ORD-YYYYMMDD-XXXXXX``."""
        now = timezone.now()
        suffix = secrets.token_hex(3).upper()
        return f"ORD-{now:%Y%m%d}-{suffix}"

    def save(self, *args: Any, **kwargs: Any) -> None:
        if not self.order_number:
            for attempt in range(ORDER_NUMBER_MAX_RETRIES):
                candidate = self.generate_order_number()
                if not Order.objects.filter(order_number=candidate).exists():
                    self.order_number = candidate
                    break
            else:
                raise RuntimeError(
                    f"Failed to generate unique order_number after "
                    f"{ORDER_NUMBER_MAX_RETRIES} attempts"
                )
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.order_number


class OrderBillingAddress(AbstractAddress):
    """Billing address snapshot of one order."""

    customer: models.ForeignKey = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="order_billing_addresses",
    )
    order: models.OneToOneField = models.OneToOneField(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="billing_address",
    )
    phone: models.CharField = models.CharField(max_length=40, blank=True, default="")
    vat_id: models.CharField = models.CharField(max_length=50, blank=True, default="")

    class Meta:
        db_table = "order_billing_addresses"
        indexes = [
            models.Index(fields=["customer"], name="order_billing_customer_idx"),
        ]


class OrderShippingAddress(AbstractAddress):
    """Shipping address snapshot of one order."""

    customer: models.ForeignKey = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="order_shipping_addresses",
    )
    order: models.OneToOneField = models.OneToOneField(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="shipping_address",
    )

    class Meta:
        db_table = "order_shipping_addresses"
        indexes = [
            models.Index(fields=["customer"], name="order_shipping_customer_idx"),
        ]
