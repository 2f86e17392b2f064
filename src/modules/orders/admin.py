from django.contrib import admin

from modules.customers.admin import ReadOnlyAdminMixin
from modules.orders.models import Order, OrderBillingAddress, OrderShippingAddress


class OrderBillingAddressInline(ReadOnlyAdminMixin, admin.StackedInline):
    model = OrderBillingAddress


class OrderShippingAddressInline(ReadOnlyAdminMixin, admin.StackedInline):
    model = OrderShippingAddress


@admin.register(Order)
class OrderAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = ["order_number", "customer", "invoice_amount", "created_at"]
    search_fields = ["order_number", "customer__number"]
    inlines = [OrderBillingAddressInline, OrderShippingAddressInline]
