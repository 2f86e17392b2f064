"""Customer-information URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.customer_information.views import CustomerInformationViewSet

router = DefaultRouter(trailing_slash=True)
router.register(
    "customer-information",
    CustomerInformationViewSet,
    basename="customer-information",
)

urlpatterns = router.urls
