"""Unit tests for CustomerInformationService.

The repository is a ``MagicMock``; these tests pin the orchestration:
- get_customer: not found, address attachment, alternative-address merge.
- get_order_addresses: group-by fields passed per kind, rows reshaped.
- get_alternative_shipping_address: absent vs present.
- get_customer_list: rows annotated for the picker.
"""

from __future__ import annotations

import uuid
from unittest.mock import MagicMock

import pytest

from modules.customer_information.constants import AddressKind
from modules.customer_information.services import CustomerInformationService

pytestmark = pytest.mark.unit

CUSTOMER_ID = str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.fetch_one.return_value = _customer_row()
    repo.fetch_payment_data.return_value = []
    repo.fetch_order_addresses.return_value = []
    repo.fetch_alternative_shipping_address.return_value = None
    repo.search.return_value = []
    return repo


@pytest.fixture()
def service(mock_repo):
    return CustomerInformationService(repository=mock_repo)


def _customer_row() -> dict:
    return {
        "id": CUSTOMER_ID,
        "number": "20001",
        "email": "jd@example.com",
        "billing__id": 1,
        "billing__city": "Berlin",
        "billing__country__name": "Germany",
        "billing__state__name": None,
        "shipping__id": None,
        "shipping__city": None,
        "shipping__country__name": None,
        "shipping__state__name": None,
        "shop__id": 1,
        "shop__name": "Main Shop",
        "language_sub_shop__id": None,
        "language_sub_shop__name": None,
    }


def _address_fields(**overrides) -> dict:
    fields = {
        "customer_id": CUSTOMER_ID,
        "company": "",
        "department": "",
        "salutation": "mr",
        "first_name": "John",
        "last_name": "Doe",
        "street": "Main Street 1",
        "zip_code": "10115",
        "city": "Berlin",
        "country_id": 1,
        "state_id": None,
        "country__name": "Germany",
        "state__name": None,
    }
    fields.update(overrides)
    return fields


def _order_address_row(**overrides) -> dict:
    row = _address_fields(**overrides)
    row.setdefault("address_id", str(uuid.uuid4()))
    row.setdefault("address_order_id", str(uuid.uuid4()))
    return row


def _alternative_row(**overrides) -> dict:
    row = _address_fields(**overrides)
    row["id"] = uuid.uuid4()
    return row


def _addresses_by_kind(billing: list, shipping: list):
    def fetch(customer_id, kind, group_by):
        return billing if kind == AddressKind.BILLING else shipping

    return fetch


# ===========================================================================
# get_customer
# ===========================================================================


class TestGetCustomer:
    def test_not_found_returns_empty_list(self, service, mock_repo):
        mock_repo.fetch_one.return_value = None

        assert service.get_customer(CUSTOMER_ID) == []
        mock_repo.fetch_order_addresses.assert_not_called()
        mock_repo.fetch_alternative_shipping_address.assert_not_called()

    def test_returns_single_record(self, service):
        result = service.get_customer(CUSTOMER_ID)
        assert len(result) == 1
        assert result[0]["id"] == CUSTOMER_ID
        assert result[0]["shop"] == {"id": 1, "name": "Main Shop"}

    def test_keeps_own_addresses_when_no_order_addresses(self, service):
        record = service.get_customer(CUSTOMER_ID)[0]
        assert record["billing"]["city"] == "Berlin"
        assert record["billing"]["country"] == "Germany"
        assert record["shipping"] is None

    def test_billing_replaced_by_order_addresses(self, service, mock_repo):
        mock_repo.fetch_order_addresses.side_effect = _addresses_by_kind(
            [_order_address_row(phone="1", vat_id="DE1")], []
        )
        record = service.get_customer(CUSTOMER_ID)[0]
        assert isinstance(record["billing"], list)
        assert len(record["billing"]) == 1
        assert "order_address_id" in record["billing"][0]

    def test_alternative_only_becomes_shipping_list(self, service, mock_repo):
        alternative = _alternative_row()
        mock_repo.fetch_alternative_shipping_address.return_value = alternative

        record = service.get_customer(CUSTOMER_ID)[0]

        assert len(record["shipping"]) == 1
        assert record["shipping"][0]["id"] == alternative["id"]
        assert record["shipping"][0]["country"] == "Germany"

    def test_duplicate_alternative_is_not_appended(self, service, mock_repo):
        mock_repo.fetch_order_addresses.side_effect = _addresses_by_kind(
            [], [_order_address_row()]
        )
        mock_repo.fetch_alternative_shipping_address.return_value = _alternative_row()

        record = service.get_customer(CUSTOMER_ID)[0]

        assert len(record["shipping"]) == 1
        assert "order_address_id" in record["shipping"][0]

    def test_distinct_alternative_is_appended(self, service, mock_repo):
        mock_repo.fetch_order_addresses.side_effect = _addresses_by_kind(
            [], [_order_address_row()]
        )
        mock_repo.fetch_alternative_shipping_address.return_value = _alternative_row(
            street="Harbour Lane 3"
        )

        record = service.get_customer(CUSTOMER_ID)[0]

        assert [a.get("street") for a in record["shipping"]] == [
            "Main Street 1",
            "Harbour Lane 3",
        ]

    def test_payment_data_attached(self, service, mock_repo):
        mock_repo.fetch_payment_data.return_value = [{"id": 9, "payment_method": "debit"}]
        record = service.get_customer(CUSTOMER_ID)[0]
        assert record["payment_data"] == [{"id": 9, "payment_method": "debit"}]

    def test_repository_errors_propagate(self, service, mock_repo):
        mock_repo.fetch_one.side_effect = RuntimeError("connection lost")
        with pytest.raises(RuntimeError, match="connection lost"):
            service.get_customer(CUSTOMER_ID)


# ===========================================================================
# Address aggregator
# ===========================================================================


class TestGetOrderAddresses:
    def test_billing_passes_phone_and_vat_id(self, service, mock_repo):
        service.get_order_addresses(CUSTOMER_ID, AddressKind.BILLING)
        _, kind, group_by = mock_repo.fetch_order_addresses.call_args.args
        assert kind == AddressKind.BILLING
        assert "phone" in group_by and "vat_id" in group_by

    def test_shipping_omits_phone_and_vat_id(self, service, mock_repo):
        service.get_order_addresses(CUSTOMER_ID, AddressKind.SHIPPING)
        _, _, group_by = mock_repo.fetch_order_addresses.call_args.args
        assert "phone" not in group_by
        assert "vat_id" not in group_by

    def test_rows_are_reshaped(self, service, mock_repo):
        address_id = uuid.uuid4()
        mock_repo.fetch_order_addresses.return_value = [
            _order_address_row(address_id=str(address_id))
        ]
        [address] = service.get_order_addresses(CUSTOMER_ID, AddressKind.SHIPPING)
        assert address["order_address_id"] == address_id
        assert address["country"] == "Germany"
        assert "country__name" not in address

    def test_field_list_matches_public_function(self, service):
        assert "vat_id" in service.get_group_by_fields_for_order_addresses(
            AddressKind.BILLING
        )


class TestGetAlternativeShippingAddress:
    def test_absent_returns_none(self, service):
        assert service.get_alternative_shipping_address(CUSTOMER_ID) is None

    def test_present_is_flattened(self, service, mock_repo):
        mock_repo.fetch_alternative_shipping_address.return_value = _alternative_row(
            state__name="Bavaria"
        )
        address = service.get_alternative_shipping_address(CUSTOMER_ID)
        assert address["state"] == "Bavaria"
        assert "state__name" not in address


# ===========================================================================
# get_customer_list
# ===========================================================================


class TestGetCustomerList:
    def test_annotates_rows(self, service, mock_repo):
        mock_repo.search.return_value = [
            {
                "id": 1,
                "number": "20001",
                "email": "jd@example.com",
                "active": True,
                "billing__id": 1,
                "billing__company": "Doe Ltd",
                "billing__first_name": "John",
                "billing__last_name": "Doe",
                "shipping__id": None,
                "shipping__company": None,
            }
        ]
        [record] = service.get_customer_list("Doe")

        mock_repo.search.assert_called_once_with("Doe")
        assert record["customer_name"] == "John Doe"
        assert record["customer_company"] == "Doe Ltd"
        assert record["customer_number"] == "20001"

    def test_no_match_returns_empty_list(self, service):
        assert service.get_customer_list("nothing") == []
