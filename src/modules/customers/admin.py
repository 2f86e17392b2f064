"""Read-only admin for customers.

Customer data is maintained by the storefront; the backend only shows it.
"""

from django.contrib import admin

from modules.customers.models import (
    Customer,
    CustomerBillingAddress,
    CustomerShippingAddress,
    PaymentData,
)


class ReadOnlyAdminMixin:
    def has_add_permission(self, request, obj=None) -> bool:
        return False

    def has_change_permission(self, request, obj=None) -> bool:
        return False

    def has_delete_permission(self, request, obj=None) -> bool:
        return False


class BillingInline(ReadOnlyAdminMixin, admin.StackedInline):
    model = CustomerBillingAddress


class ShippingInline(ReadOnlyAdminMixin, admin.StackedInline):
    model = CustomerShippingAddress


class PaymentDataInline(ReadOnlyAdminMixin, admin.TabularInline):
    model = PaymentData
    exclude = ["iban"]


@admin.register(Customer)
class CustomerAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = ["number", "email", "shop", "active"]
    search_fields = ["number", "email", "billing__company"]
    inlines = [BillingInline, ShippingInline, PaymentDataInline]
