"""Customer-information repository interface.

Extends ``IReadRepository`` with the look-ups the customer loader, the
address aggregator and the customer picker search need.  Every method
returns raw rows; reshaping them is the service's job.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import List, Optional, Sequence

from modules.core.repositories.interfaces import IReadRepository, Row


class ICustomerInformationRepository(IReadRepository):
    """Read-only contract over customers, their addresses and orders."""

    @abstractmethod
    def fetch_one(self, id: str) -> Optional[Row]:
        """Retrieve the customer row joined with billing, shipping, shop and
        language sub-shop columns (``<relation>__<field>`` keys)."""

    @abstractmethod
    def fetch_payment_data(self, customer_id: str) -> List[Row]:
        """Retrieve the customer's stored payment profiles."""

    @abstractmethod
    def fetch_order_addresses(
        self, customer_id: str, kind: str, group_by: Sequence[str]
    ) -> List[Row]:
        """Retrieve the customer's order addresses of *kind*, one row per
        distinct combination of *group_by* columns.

        Rows carry ``address_id`` of the surviving address,
        ``address_order_id`` of the order that same row belongs to, and
        ``country__name`` / ``state__name``.
        """

    @abstractmethod
    def fetch_alternative_shipping_address(self, customer_id: str) -> Optional[Row]:
        """Retrieve the customer's alternative shipping address, or ``None``."""

    @abstractmethod
    def search(self, search: str) -> List[Row]:
        """Retrieve customers matching the picker search, ordered by number."""
