import pytest

from django.contrib.auth import get_user_model

from rest_framework.test import APIClient

from modules.locations.models import Country, State
from modules.shops.models import Shop


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def auth_client():
    """APIClient with a force-authenticated Django user."""
    client = APIClient()
    user = get_user_model().objects.create_user(
        username="testuser", password="testpass123"
    )
    client.force_authenticate(user=user)
    return client


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def germany():
    return Country.objects.create(name="Germany", iso="DE")


@pytest.fixture()
def bavaria(germany):
    return State.objects.create(country=germany, name="Bavaria", short_code="BY")


@pytest.fixture()
def shop():
    return Shop.objects.create(name="Main Shop", locale="de_DE")
