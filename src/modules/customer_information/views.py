"""Customer-information API views.

Exposes the ``CustomerInformationService`` via HTTP using a DRF ViewSet.
An empty loader result is translated into 404; the view never swallows
generic exceptions.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.customer_information.dtos import CustomerSuggestionDTO
from modules.customer_information.repositories import (
    CustomerInformationDjangoRepository,
)
from modules.customer_information.services import CustomerInformationService


class CustomerInformationViewSet(ViewSet):
    """Read-only ViewSet backing the customer panel of the order form.

    Uses ``CustomerInformationService`` with
    ``CustomerInformationDjangoRepository`` (DIP).
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerInformationService(
            repository=CustomerInformationDjangoRepository()
        )

    @extend_schema(
        parameters=[
            OpenApiParameter(
                "search",
                str,
                description="Customer number, email, company or full name.",
            )
        ]
    )
    def list(self, request: Request) -> Response:
        """GET /api/v1/customer-information/?search=..."""
        search = request.query_params.get("search", "")
        if not search.strip():
            return Response({"data": [], "total": 0})

        records = self._service.get_customer_list(search)
        data = [
            CustomerSuggestionDTO.from_record(record).model_dump(mode="json")
            for record in records
        ]
        return Response({"data": data, "total": len(data)})

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/customer-information/{pk}/"""
        records = self._service.get_customer(pk) if pk else []
        if not records:
            return Response(
                {"detail": "Customer not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(records[0])
