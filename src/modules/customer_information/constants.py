"""Customer-information constants.

Field sets used to collapse historical order addresses and to compare
them against the customer's alternative shipping address.
"""

from django.db import models


class AddressKind(models.TextChoices):
    BILLING = "billing", "Billing"
    SHIPPING = "shipping", "Shipping"


# Columns two order addresses must share to be reported once.
ORDER_ADDRESS_GROUP_BY_FIELDS: tuple[str, ...] = (
    "company",
    "country_id",
    "state_id",
    "salutation",
    "zip_code",
    "department",
    "first_name",
    "last_name",
    "street",
    "city",
)

BILLING_GROUP_BY_FIELDS: tuple[str, ...] = ("phone", "vat_id")

# Joined look-ups flattened to their display name after fetching.
LOOKUP_RELATIONS: tuple[str, ...] = ("country", "state")

# Identity and order linkage; never part of address equality.
IGNORED_COMPARISON_FIELDS: frozenset[str] = frozenset(
    {"id", "order_id", "order_address_id"}
)
