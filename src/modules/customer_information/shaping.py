"""Post-fetch transformations from repository rows to API records.

The repository returns flat ``values()`` rows where joined columns are
spelled with Django's ``__`` path (``billing__company``,
``country__name``).  The functions here turn those rows into the records
the order-management UI consumes, independently of how they were queried.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional
from uuid import UUID

from modules.customer_information.constants import LOOKUP_RELATIONS

Row = Dict[str, Any]

CUSTOMER_RELATIONS: tuple[str, ...] = (
    "billing",
    "shipping",
    "shop",
    "language_sub_shop",
)


def _as_uuid(value: Any) -> Optional[UUID]:
    # Aggregated keys come back as text; SQLite renders them without dashes.
    if value is None or isinstance(value, UUID):
        return value
    return UUID(str(value))


def flatten_lookups(row: Row, lookups: Iterable[str] = LOOKUP_RELATIONS) -> Row:
    """Replace ``<lookup>__name`` columns with a plain ``<lookup>`` display name."""
    flat = dict(row)
    for lookup in lookups:
        flat[lookup] = flat.pop(f"{lookup}__name", None)
    return flat


def nest_related(row: Row, relations: Iterable[str]) -> Row:
    """Group ``<relation>__<field>`` columns under a nested ``<relation>`` dict.

    A relation whose ``id`` is ``None`` came from an unmatched LEFT JOIN and
    is reported as ``None``.
    """
    nested: Dict[str, Row] = {relation: {} for relation in relations}
    record: Row = {}
    for key, value in row.items():
        relation, sep, field = key.partition("__")
        if sep and relation in nested:
            nested[relation][field] = value
        else:
            record[key] = value
    for relation, values in nested.items():
        record[relation] = values if values.get("id") is not None else None
    return record


def reshape_order_address(row: Row) -> Row:
    """Turn a grouped order-address row into an address record.

    The surviving row's key is exposed as ``order_address_id`` so it is
    never mistaken for the customer's own id.
    """
    address = flatten_lookups(row)
    address["order_address_id"] = _as_uuid(address.pop("address_id"))
    address["order_id"] = _as_uuid(address.pop("address_order_id"))
    return address


def build_customer_record(row: Row, payment_data: List[Row]) -> Row:
    record = nest_related(row, CUSTOMER_RELATIONS)
    for relation in ("billing", "shipping"):
        if record[relation] is not None:
            record[relation] = flatten_lookups(record[relation])
    record["payment_data"] = list(payment_data)
    return record


def annotate_suggestion(row: Row) -> Row:
    """Add the flat display fields the customer picker renders.

    ``customer_name`` joins the billing first and last name; customers
    without a billing address get empty strings.
    """
    record = nest_related(row, ("billing", "shipping"))
    billing = record["billing"] or {}
    first_name = billing.get("first_name") or ""
    last_name = billing.get("last_name") or ""
    record["customer_company"] = billing.get("company") or ""
    record["customer_number"] = record["number"]
    record["customer_name"] = f"{first_name} {last_name}".strip()
    return record
