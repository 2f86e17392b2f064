"""Unit tests for Order and the order address snapshots.

Covers:
- Valid creation with auto-generated order_number.
- Order number format and uniqueness.
- Retry loop on order number collision.
- Customer FK with PROTECT.
- Address snapshots: one billing and one shipping row per order.
- __str__ representation.
"""

from __future__ import annotations

import uuid
from decimal import Decimal
from unittest.mock import patch

import pytest

from django.db import IntegrityError
from django.db.models import ProtectedError

from modules.customers.models import Customer
from modules.orders.models import (
    ORDER_NUMBER_MAX_RETRIES,
    Order,
    OrderBillingAddress,
    OrderShippingAddress,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def customer(shop):
    return Customer.objects.create(
        number=f"C-{uuid.uuid4().hex[:8]}",
        email="orders@example.com",
        shop=shop,
    )


def _make_order(customer, **overrides) -> Order:
    defaults = {"customer": customer}
    defaults.update(overrides)
    return Order.objects.create(**defaults)


def _address(**overrides) -> dict:
    fields = {
        "first_name": "Max",
        "last_name": "Muster",
        "street": "Hauptstrasse 1",
        "zip_code": "80331",
        "city": "Munich",
    }
    fields.update(overrides)
    return fields


# ---------------------------------------------------------------------------
# Creation
# ---------------------------------------------------------------------------


class TestOrderCreation:
    def test_create_order_with_defaults(self, customer):
        order = _make_order(customer)
        order.refresh_from_db()
        assert order.customer_id == customer.pk
        assert order.invoice_amount == Decimal("0.00")

    def test_id_is_uuid7(self, customer):
        order = _make_order(customer)
        assert isinstance(order.id, uuid.UUID)
        assert order.id.version == 7

    def test_str_is_order_number(self, customer):
        order = _make_order(customer)
        assert str(order) == order.order_number


# ---------------------------------------------------------------------------
# Order Number
# ---------------------------------------------------------------------------


class TestOrderNumber:
    """Order number is auto-generated, human-readable, and unique."""

    def test_order_number_format(self, customer):
        order = _make_order(customer)
        # Format: ORD-YYYYMMDD-XXXXXX
        assert order.order_number.startswith("ORD-")
        parts = order.order_number.split("-")
        assert len(parts) == 3
        assert len(parts[1]) == 8  # YYYYMMDD
        assert len(parts[2]) == 6  # hex suffix

    def test_order_numbers_are_unique(self, customer):
        o1 = _make_order(customer)
        o2 = _make_order(customer)
        assert o1.order_number != o2.order_number

    def test_explicit_order_number_preserved(self, customer):
        order = _make_order(customer, order_number="CUSTOM-001")
        assert order.order_number == "CUSTOM-001"

    def test_duplicate_order_number_raises(self, customer):
        _make_order(customer, order_number="DUP-001")
        with pytest.raises(IntegrityError):
            _make_order(customer, order_number="DUP-001")

    def test_retry_on_collision(self, customer):
        """generate_order_number retry loop handles collisions."""
        colliding_number = _make_order(customer).order_number

        call_count = 0
        original_generate = Order.generate_order_number

        def mock_generate():
            nonlocal call_count
            call_count += 1
            if call_count == 1:
                return colliding_number  # first attempt collides
            return original_generate()

        with patch.object(Order, "generate_order_number", side_effect=mock_generate):
            new_order = _make_order(customer)

        assert new_order.order_number != colliding_number
        assert call_count >= 2

    def test_gives_up_after_max_retries(self, customer):
        colliding_number = _make_order(customer).order_number

        with patch.object(
            Order, "generate_order_number", return_value=colliding_number
        ) as generate:
            with pytest.raises(RuntimeError, match="order_number"):
                _make_order(customer)

        assert generate.call_count == ORDER_NUMBER_MAX_RETRIES


# ---------------------------------------------------------------------------
# Customer FK
# ---------------------------------------------------------------------------


class TestCustomerFK:
    """Customer FK uses PROTECT."""

    def test_customer_protect_prevents_delete(self, customer):
        _make_order(customer)
        with pytest.raises(ProtectedError):
            customer.delete()

    def test_orders_reverse_relation(self, customer):
        order = _make_order(customer)
        assert list(customer.orders.all()) == [order]


# ---------------------------------------------------------------------------
# Address snapshots
# ---------------------------------------------------------------------------


class TestOrderAddresses:
    def test_snapshots_reachable_from_order(self, customer, germany):
        order = _make_order(customer)
        billing = OrderBillingAddress.objects.create(
            customer=customer, order=order, country=germany, phone="089 1", **_address()
        )
        shipping = OrderShippingAddress.objects.create(
            customer=customer, order=order, country=germany, **_address()
        )
        order.refresh_from_db()
        assert order.billing_address == billing
        assert order.shipping_address == shipping

    def test_one_billing_snapshot_per_order(self, customer):
        order = _make_order(customer)
        OrderBillingAddress.objects.create(customer=customer, order=order, **_address())
        with pytest.raises(IntegrityError):
            OrderBillingAddress.objects.create(
                customer=customer, order=order, **_address()
            )

    def test_snapshots_accumulate_per_customer(self, customer):
        for _ in range(3):
            OrderShippingAddress.objects.create(
                customer=customer, order=_make_order(customer), **_address()
            )
        assert customer.order_shipping_addresses.count() == 3

    def test_optional_fields_default_empty(self, customer):
        address = OrderBillingAddress.objects.create(
            customer=customer, order=_make_order(customer), **_address()
        )
        address.refresh_from_db()
        assert address.company == ""
        assert address.phone == ""
        assert address.vat_id == ""
        assert address.country_id is None
        assert address.state_id is None

    def test_str(self, customer):
        address = OrderShippingAddress.objects.create(
            customer=customer, order=_make_order(customer), **_address()
        )
        assert str(address) == "Max Muster, 80331 Munich"
