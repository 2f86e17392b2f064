"""Customer-information DTOs for the API layer.

Framework-agnostic data transfer objects using Pydantic v2.  DTOs are
immutable (``frozen=True``).

- ``CustomerSuggestionDTO``: one entry of the customer picker list.
"""

from __future__ import annotations

from typing import Any, Mapping
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class CustomerSuggestionDTO(BaseModel):
    """Immutable DTO for a customer picker entry.

    Carries only what the type-ahead renders; the full record is loaded
    through the customer detail endpoint once a customer is chosen.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    email: str
    active: bool
    customer_company: str
    customer_number: str
    customer_name: str

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> CustomerSuggestionDTO:
        """Build a DTO from a record returned by ``get_customer_list``."""
        return cls(
            id=record["id"],
            email=record["email"],
            active=record["active"],
            customer_company=record["customer_company"],
            customer_number=record["customer_number"],
            customer_name=record["customer_name"],
        )
