"""Customer-information service layer (Use Cases).

Backs the customer panel of the backend order form:

- ``get_customer``: the customer record with every billing address used on
  past orders and every shipping address, including the customer's
  alternative shipping address unless an equal order address exists.
- ``get_customer_list``: the customer picker search.

Query construction lives in the injected repository; reshaping rows into
records lives in ``shaping``.  Nothing here writes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.customer_information.addresses import (
    get_group_by_fields_for_order_addresses,
    merge_alternative_shipping_address,
)
from modules.customer_information.constants import AddressKind
from modules.customer_information.shaping import (
    annotate_suggestion,
    build_customer_record,
    flatten_lookups,
    reshape_order_address,
)

if TYPE_CHECKING:
    from modules.core.repositories.interfaces import Row
    from modules.customer_information.repositories.interfaces import (
        ICustomerInformationRepository,
    )

logger = structlog.get_logger(__name__)


class CustomerInformationService:
    """Application service for the customer-information use-cases.

    Receives an ``ICustomerInformationRepository`` via constructor
    injection (DIP).
    """

    def __init__(self, repository: ICustomerInformationRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Customer loader
    # ------------------------------------------------------------------

    def get_customer(self, customer_id: str) -> List[Row]:
        """Return ``[record]`` for the customer, or ``[]`` if there is none.

        ``billing`` and ``shipping`` are replaced by the address lists when
        those are non-empty; otherwise they keep the customer's own
        address (or ``None``).
        """
        log = logger.bind(customer_id=str(customer_id))

        row = self._repo.fetch_one(customer_id)
        if row is None:
            log.info("customer_information.not_found")
            return []

        record = build_customer_record(row, self._repo.fetch_payment_data(customer_id))

        billing_addresses = self.get_order_addresses(customer_id, AddressKind.BILLING)
        shipping_addresses = self.get_order_addresses(
            customer_id, AddressKind.SHIPPING
        )
        alternative_address = self.get_alternative_shipping_address(customer_id)

        merged = merge_alternative_shipping_address(
            shipping_addresses, alternative_address
        )
        if alternative_address is not None and len(merged) == len(shipping_addresses):
            log.debug("customer_information.alternative_shipping_suppressed")

        if billing_addresses:
            record["billing"] = billing_addresses
        if merged:
            record["shipping"] = merged

        log.info(
            "customer_information.loaded",
            billing_count=len(billing_addresses),
            shipping_count=len(merged),
        )
        return [record]

    # ------------------------------------------------------------------
    # Address aggregator
    # ------------------------------------------------------------------

    def get_group_by_fields_for_order_addresses(self, kind: str) -> List[str]:
        return get_group_by_fields_for_order_addresses(kind)

    def get_order_addresses(self, customer_id: str, kind: str) -> List[Row]:
        """Return the distinct order addresses of *kind* for the customer."""
        group_by = self.get_group_by_fields_for_order_addresses(kind)
        rows = self._repo.fetch_order_addresses(customer_id, kind, group_by)
        return [reshape_order_address(row) for row in rows]

    def get_alternative_shipping_address(self, customer_id: str) -> Optional[Row]:
        """Return the alternative shipping address, or ``None`` if unset."""
        row = self._repo.fetch_alternative_shipping_address(customer_id)
        if row is None:
            return None
        return flatten_lookups(row)

    # ------------------------------------------------------------------
    # Customer picker
    # ------------------------------------------------------------------

    def get_customer_list(self, search: str) -> List[Row]:
        """Return the customers matching *search*, shaped for the picker."""
        rows = self._repo.search(search)
        result = [annotate_suggestion(row) for row in rows]
        logger.info(
            "customer_information.searched",
            search_length=len(search),
            result_count=len(result),
        )
        return result
