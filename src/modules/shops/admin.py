from django.contrib import admin

from modules.shops.models import Shop


@admin.register(Shop)
class ShopAdmin(admin.ModelAdmin):
    list_display = ["name", "locale", "main", "language_shop"]

    @admin.display(boolean=True, description="Language shop")
    def language_shop(self, obj: Shop) -> bool:
        return obj.is_language_shop
