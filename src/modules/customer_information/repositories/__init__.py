"""Customer-information repositories package."""

from modules.customer_information.repositories.django_repository import (
    CustomerInformationDjangoRepository,
)
from modules.customer_information.repositories.interfaces import (
    ICustomerInformationRepository,
)

__all__ = ["CustomerInformationDjangoRepository", "ICustomerInformationRepository"]
