"""Django ORM implementation of the customer-information repository.

Satisfies ``ICustomerInformationRepository`` using ``QuerySet.values()``
so every method returns plain rows.  Error handling follows the Null
Object pattern: a malformed customer id yields ``None`` / ``[]`` instead
of raising, and the Service Layer treats it like any unknown customer.
Database errors propagate untouched.
"""

from __future__ import annotations

from typing import List, Optional, Sequence
from uuid import UUID

import structlog
from django.core.exceptions import ValidationError
from django.db.models import CharField, Min, Q, Value
from django.db.models.functions import Cast, Concat

from modules.core.repositories.interfaces import Row
from modules.customer_information.addresses import (
    get_group_by_fields_for_order_addresses,
)
from modules.customer_information.constants import AddressKind
from modules.customer_information.repositories.interfaces import (
    ICustomerInformationRepository,
)
from modules.customers.models import Customer, CustomerShippingAddress, PaymentData
from modules.orders.models import OrderBillingAddress, OrderShippingAddress

logger = structlog.get_logger(__name__)

CUSTOMER_FIELDS: tuple[str, ...] = (
    "id",
    "number",
    "email",
    "active",
    "group_key",
    "created_at",
    "shop_id",
    "language_sub_shop_id",
)

_ADDRESS_FIELDS: tuple[str, ...] = (
    "id",
    "company",
    "department",
    "salutation",
    "first_name",
    "last_name",
    "street",
    "zip_code",
    "city",
    "country_id",
    "state_id",
    "country__name",
    "state__name",
)

CUSTOMER_RELATION_FIELDS: dict[str, tuple[str, ...]] = {
    "billing": _ADDRESS_FIELDS + ("phone", "vat_id"),
    "shipping": _ADDRESS_FIELDS,
    "shop": ("id", "name", "locale"),
    "language_sub_shop": ("id", "name", "locale"),
}

PAYMENT_DATA_FIELDS: tuple[str, ...] = (
    "id",
    "payment_method",
    "account_holder",
    "iban",
    "bic",
    "bank_name",
)

SEARCH_FIELDS: tuple[str, ...] = (
    "id",
    "number",
    "email",
    "active",
    "billing__id",
    "billing__company",
    "billing__first_name",
    "billing__last_name",
    "shipping__id",
    "shipping__company",
)

ORDER_ADDRESS_MODELS = {
    AddressKind.BILLING: OrderBillingAddress,
    AddressKind.SHIPPING: OrderShippingAddress,
}


def _min_key(field: str) -> Min:
    # MIN() over uuid is not portable (PostgreSQL lacks it); compare as text.
    return Min(Cast(field, output_field=CharField()))


class CustomerInformationDjangoRepository(ICustomerInformationRepository):
    """Concrete customer-information repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Customer loader
    # ------------------------------------------------------------------

    def fetch_one(self, id: str) -> Optional[Row]:
        """Retrieve the customer row with its one-to-one relations joined.

        Returns ``None`` for non-existent or invalid IDs (e.g. malformed UUID).
        """
        related = [
            f"{relation}__{field}"
            for relation, fields in CUSTOMER_RELATION_FIELDS.items()
            for field in fields
        ]
        try:
            return (
                Customer.objects.filter(id=id)
                .values(*CUSTOMER_FIELDS, *related)
                .first()
            )
        except (ValueError, ValidationError):
            return None

    def fetch_payment_data(self, customer_id: str) -> List[Row]:
        try:
            queryset = PaymentData.objects.filter(customer_id=customer_id)
        except (ValueError, ValidationError):
            return []
        return list(queryset.values(*PAYMENT_DATA_FIELDS))

    # ------------------------------------------------------------------
    # Address aggregator
    # ------------------------------------------------------------------

    def fetch_order_addresses(
        self, customer_id: str, kind: str, group_by: Sequence[str]
    ) -> List[Row]:
        """Collapse the customer's order addresses of *kind*.

        ``values()`` before ``annotate()`` turns the listed columns into the
        GROUP BY clause; the row with the smallest address key represents
        its group, and ``address_order_id`` is that same row's order.
        """
        model = ORDER_ADDRESS_MODELS[AddressKind(kind)]
        try:
            queryset = model.objects.filter(customer_id=customer_id)
        except (ValueError, ValidationError):
            return []

        rows = list(
            queryset.values("customer_id", *group_by, "country__name", "state__name")
            .annotate(address_id=_min_key("id"))
            .order_by("address_id")
        )
        for row in rows:
            row["address_id"] = UUID(str(row["address_id"]))
        order_ids = dict(
            model.objects.filter(
                id__in=[row["address_id"] for row in rows]
            ).values_list("id", "order_id")
        )
        for row in rows:
            row["address_order_id"] = order_ids[row["address_id"]]
        logger.debug(
            "customer_information.order_addresses_fetched",
            customer_id=str(customer_id),
            kind=str(kind),
            count=len(rows),
        )
        return rows

    def fetch_alternative_shipping_address(self, customer_id: str) -> Optional[Row]:
        """Retrieve the alternative shipping address with the same columns the
        grouped shipping rows carry, so both compare field by field."""
        fields = get_group_by_fields_for_order_addresses(AddressKind.SHIPPING)
        try:
            queryset = CustomerShippingAddress.objects.filter(customer_id=customer_id)
        except (ValueError, ValidationError):
            return None
        return queryset.values(
            "id", "customer_id", *fields, "country__name", "state__name"
        ).first()

    # ------------------------------------------------------------------
    # Customer picker search
    # ------------------------------------------------------------------

    def search(self, search: str) -> List[Row]:
        """Match the full billing name exactly, everything else as substring.

        ``billing_full_name`` compares with ``iexact``: a partial name never
        matches through that clause, and customers without a billing address
        never do.
        """
        queryset = (
            Customer.objects.annotate(
                billing_full_name=Concat(
                    "billing__first_name",
                    Value(" "),
                    "billing__last_name",
                    output_field=CharField(),
                )
            )
            .filter(
                (Q(billing__isnull=False) & Q(billing_full_name__iexact=search))
                | Q(billing__company__icontains=search)
                | Q(shipping__company__icontains=search)
                | Q(number__icontains=search)
                | Q(email__icontains=search)
            )
            .values(*SEARCH_FIELDS)
            .distinct()
            .order_by("number")
        )
        return list(queryset)
