from __future__ import annotations

import random
from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from modules.customers.models import (
    Customer,
    CustomerBillingAddress,
    CustomerShippingAddress,
    PaymentData,
)
from modules.locations.models import Country, State
from modules.orders.models import Order, OrderBillingAddress, OrderShippingAddress
from modules.shops.models import Shop


class Command(BaseCommand):
    help = "Seed database with realistic development data."

    @transaction.atomic
    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        countries = self._seed_countries()
        shop, language_shop = self._seed_shops()
        customers = self._seed_customers(countries, shop, language_shop)
        orders_created = self._seed_orders(customers)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"countries={len(countries)}, "
                f"customers={len(customers)}, "
                f"orders={orders_created}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        created = 0
        if not User.objects.filter(username="admin").exists():
            User.objects.create_superuser("admin", password="admin123")
            created += 1
        if not User.objects.filter(username="user").exists():
            User.objects.create_user("user", password="user123")
            created += 1
        return created

    def _seed_countries(self) -> dict[str, Country]:
        self.stdout.write("Creating countries...")
        catalog = {
            "DE": ("Germany", [("Bavaria", "BY"), ("Berlin", "BE"), ("Hamburg", "HH")]),
            "GB": ("United Kingdom", []),
            "US": ("United States", [("New York", "NY"), ("California", "CA")]),
        }
        countries: dict[str, Country] = {}
        for iso, (name, states) in catalog.items():
            country, _ = Country.objects.get_or_create(iso=iso, defaults={"name": name})
            for state_name, short_code in states:
                State.objects.get_or_create(
                    country=country,
                    short_code=short_code,
                    defaults={"name": state_name},
                )
            countries[iso] = country
        self.stdout.write(self.style.SUCCESS("Creating countries... Done!"))
        return countries

    def _seed_shops(self) -> tuple[Shop, Shop]:
        shop, _ = Shop.objects.get_or_create(
            name="Main Shop", main=None, defaults={"locale": "de_DE"}
        )
        language_shop, _ = Shop.objects.get_or_create(
            name="Main Shop English", main=shop, defaults={"locale": "en_GB"}
        )
        return shop, language_shop

    def _seed_customers(
        self, countries: dict[str, Country], shop: Shop, language_shop: Shop
    ) -> list[Customer]:
        self.stdout.write("Creating customers...")
        customers: list[Customer] = []
        seed_customers = [
            ("20001", "john.doe@example.com", "John", "Doe", "", "DE"),
            ("20002", "jane.roe@example.com", "Jane", "Roe", "Roe Logistics", "DE"),
            ("20003", "max.mustermann@example.com", "Max", "Mustermann", "", "DE"),
            ("20004", "erika.musterfrau@example.com", "Erika", "Musterfrau", "Muster GmbH", "DE"),
            ("20005", "oliver.smith@example.com", "Oliver", "Smith", "", "GB"),
            ("20006", "amelia.jones@example.com", "Amelia", "Jones", "Jones & Co", "GB"),
            ("20007", "liam.miller@example.com", "Liam", "Miller", "", "US"),
            ("20008", "emma.davis@example.com", "Emma", "Davis", "Davis Retail", "US"),
        ]
        streets = ["Main Street 1", "Market Square 5", "Station Road 12", "Harbour Lane 3"]
        cities = [("10115", "Berlin"), ("20095", "Hamburg"), ("80331", "Munich")]

        for number, email, first_name, last_name, company, iso in seed_customers:
            country = countries[iso]
            state = country.states.first()
            customer, created = Customer.objects.get_or_create(
                number=number,
                defaults={
                    "email": email,
                    "shop": shop,
                    "language_sub_shop": language_shop if iso != "DE" else None,
                },
            )
            if created:
                zip_code, city = random.choice(cities)
                address = {
                    "company": company,
                    "salutation": "mr" if first_name in {"John", "Max", "Oliver", "Liam"} else "ms",
                    "first_name": first_name,
                    "last_name": last_name,
                    "street": random.choice(streets),
                    "zip_code": zip_code,
                    "city": city,
                    "country": country,
                    "state": state,
                }
                CustomerBillingAddress.objects.create(
                    customer=customer, phone="+49 30 123456", **address
                )
                if random.random() < 0.5:
                    CustomerShippingAddress.objects.create(
                        customer=customer,
                        **{**address, "street": random.choice(streets)},
                    )
                PaymentData.objects.create(
                    customer=customer,
                    payment_method="debit",
                    account_holder=f"{first_name} {last_name}",
                    iban="DE89370400440532013000",
                    bic="COBADEFFXXX",
                    bank_name="Commerzbank",
                )
            customers.append(customer)
        self.stdout.write(self.style.SUCCESS("Creating customers... Done!"))
        return customers

    def _seed_orders(self, customers: list[Customer]) -> int:
        """Create orders whose address snapshots partly repeat each other."""
        self.stdout.write("Creating orders...")
        orders_created = 0
        for customer in customers:
            if customer.orders.exists():
                continue
            billing = customer.billing
            for _ in range(random.randint(1, 4)):
                order = Order.objects.create(
                    customer=customer,
                    invoice_amount=Decimal(random.randint(1000, 50000)) / 100,
                )
                created_at = timezone.now() - timedelta(days=random.randint(0, 90))
                Order.objects.filter(id=order.id).update(created_at=created_at)

                address = {
                    "customer": customer,
                    "order": order,
                    "company": billing.company,
                    "salutation": billing.salutation,
                    "first_name": billing.first_name,
                    "last_name": billing.last_name,
                    "street": billing.street,
                    "zip_code": billing.zip_code,
                    "city": billing.city,
                    "country": billing.country,
                    "state": billing.state,
                }
                OrderBillingAddress.objects.create(
                    phone=billing.phone, vat_id=billing.vat_id, **address
                )
                OrderShippingAddress.objects.create(**address)
                orders_created += 1

        self.stdout.write(self.style.SUCCESS("Creating orders... Done!"))
        return orders_created
