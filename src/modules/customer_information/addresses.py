"""Order-address deduplication fields and the alternative-address merge.

Pure functions over plain address records (``dict`` of field name to
value); nothing here touches the database.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Set

from modules.customer_information.constants import (
    BILLING_GROUP_BY_FIELDS,
    IGNORED_COMPARISON_FIELDS,
    ORDER_ADDRESS_GROUP_BY_FIELDS,
    AddressKind,
)

Address = Dict[str, Any]


def get_group_by_fields_for_order_addresses(kind: str) -> List[str]:
    """Return the columns order addresses of *kind* are grouped by.

    Billing addresses additionally distinguish phone and VAT id.
    """
    fields = list(ORDER_ADDRESS_GROUP_BY_FIELDS)
    if kind == AddressKind.BILLING:
        fields.extend(BILLING_GROUP_BY_FIELDS)
    return fields


def address_difference(
    address: Mapping[str, Any], other: Mapping[str, Any]
) -> Set[str]:
    """Return the fields whose values differ between two address records.

    A field missing from either record counts as different.
    """
    return {
        key
        for key in address.keys() | other.keys()
        if key not in address or key not in other or address[key] != other[key]
    }


def is_same_address(address: Mapping[str, Any], other: Mapping[str, Any]) -> bool:
    """Compare two addresses ignoring identifiers and order linkage."""
    return not (address_difference(address, other) - IGNORED_COMPARISON_FIELDS)


def is_equal_shipping_address(
    shipping_addresses: Iterable[Mapping[str, Any]],
    alternative_address: Optional[Mapping[str, Any]],
) -> bool:
    """Check whether any shipping address matches the alternative address."""
    if alternative_address is None:
        return False
    return any(
        is_same_address(address, alternative_address)
        for address in shipping_addresses
    )


def merge_alternative_shipping_address(
    shipping_addresses: List[Address],
    alternative_address: Optional[Address],
) -> List[Address]:
    """Append the alternative address unless an equal one is already listed.

    Returns a new list; *shipping_addresses* is left untouched.
    """
    merged = list(shipping_addresses)
    if alternative_address is not None and not is_equal_shipping_address(
        merged, alternative_address
    ):
        merged.append(alternative_address)
    return merged
