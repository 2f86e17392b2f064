from django.apps import AppConfig


class CustomerInformationConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.customer_information"
    label = "customer_information"
