from django.contrib import admin

from modules.locations.models import Country, State


@admin.register(Country)
class CountryAdmin(admin.ModelAdmin):
    list_display = ["name", "iso"]
    search_fields = ["name", "iso"]


@admin.register(State)
class StateAdmin(admin.ModelAdmin):
    list_display = ["name", "short_code", "country"]
    list_filter = ["country"]
