from decimal import Decimal

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from product.models import Product
from user.models import User
from user.tokens import issue_access_token

PASSWORD = "S3cure!Passw0rd"


@pytest.fixture(autouse=True)
def _fast_hashing_and_clean_cache(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
    cache.clear()
    yield
    cache.clear()


def bearer_client(user):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_access_token(user)['token']}")
    return client


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db):
    return User.objects.create_user(email="buyer@example.com", name="Buyer", password=PASSWORD)


@pytest.fixture
def other_user(db):
    return User.objects.create_user(email="other@example.com", name="Other", password=PASSWORD)


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        email="admin@example.com", name="Admin", password=PASSWORD, role=User.Role.ADMIN
    )


@pytest.fixture
def auth_client(user):
    return bearer_client(user)


@pytest.fixture
def other_client(other_user):
    return bearer_client(other_user)


@pytest.fixture
def admin_client(admin_user):
    return bearer_client(admin_user)


@pytest.fixture
def make_product(db):
    def _make(**kwargs):
        fields = {"title": "Desk Lamp", "price": Decimal("25.00"), "stock": 10}
        fields.update(kwargs)
        return Product.objects.create(**fields)

    return _make
