"""Customer aggregate: the customer row and the addresses it owns.

- ``Customer``: account data (number, email, shop assignment).
- ``CustomerBillingAddress``: the customer's current default billing address.
- ``CustomerShippingAddress``: the customer's *alternative* shipping
  address.  At most one per customer and independent of any order.
- ``PaymentData``: stored payment profiles (IBAN / BIC for debit).

Historical addresses used on past orders live in ``modules.orders``.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel
from modules.locations.models import AbstractAddress


class Customer(BaseModel):
    """Customer aggregate root.

    ``number`` is the human-readable customer number shown in the backend
    and used by the customer picker search.
    """

    number = models.CharField(max_length=30, unique=True)
    email = models.EmailField(max_length=254)
    active = models.BooleanField(default=True)
    group_key = models.CharField(max_length=15, default="EK")
    shop = models.ForeignKey(
        "shops.Shop",
        on_delete=models.PROTECT,
        related_name="customers",
    )
    language_sub_shop = models.ForeignKey(
        "shops.Shop",
        on_delete=models.SET_NULL,
        related_name="language_customers",
        null=True,
        blank=True,
    )

    class Meta:
        db_table = "customers"
        ordering = ["number"]
        indexes = [
            models.Index(fields=["email"], name="customers_email_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.number} <{self.email}>"


class CustomerBillingAddress(AbstractAddress):
    customer = models.OneToOneField(
        "customers.Customer",
        on_delete=models.CASCADE,
        related_name="billing",
    )
    phone = models.CharField(max_length=40, blank=True, default="")
    vat_id = models.CharField(max_length=50, blank=True, default="")

    class Meta:
        db_table = "customer_billing_addresses"


class CustomerShippingAddress(AbstractAddress):
    """Alternative shipping destination configured on the customer account."""

    customer = models.OneToOneField(
        "customers.Customer",
        on_delete=models.CASCADE,
        related_name="shipping",
    )

    class Meta:
        db_table = "customer_shipping_addresses"


class PaymentData(BaseModel):
    """Stored payment profile.

    ``__str__`` never renders the full IBAN.
    """

    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.CASCADE,
        related_name="payment_data",
    )
    payment_method = models.CharField(max_length=50)
    account_holder = models.CharField(max_length=255, blank=True, default="")
    iban = models.CharField(max_length=34, blank=True, default="")
    bic = models.CharField(max_length=11, blank=True, default="")
    bank_name = models.CharField(max_length=255, blank=True, default="")

    class Meta:
        db_table = "customer_payment_data"
        ordering = ["created_at"]

    def __str__(self) -> str:
        suffix = self.iban[-4:] if self.iban else "????"
        return f"{self.payment_method} (***{suffix})"
