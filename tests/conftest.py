"""
Pytest configuration for DealerDesk tests.
"""
from datetime import date

import numpy as np
import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from dealerdesk.accounts.models import StaffProfile
from dealerdesk.common.dataclasses import TimePoint
from dealerdesk.inventory.models import Motorcycle
from dealerdesk.sales.models import Customer

User = get_user_model()


@pytest.fixture(autouse=True)
def enable_db_access_for_all_tests(db):
    """Enable database access for all tests automatically."""
    pass


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def today():
    return date(2024, 6, 15)


@pytest.fixture
def increasing_history():
    """Twelve strictly increasing points, January to December 2023."""
    return [
        TimePoint(date=f"2023-{month:02d}-01", value=100.0 + 10 * (month - 1))
        for month in range(1, 13)
    ]


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def sales_rep():
    return User.objects.create_user(username="rep", password="rep-password-1", email="rep@example.com")


@pytest.fixture
def admin_user():
    user = User.objects.create_user(username="boss", password="boss-password-1", email="boss@example.com")
    user.profile.role = StaffProfile.Role.ADMIN
    user.profile.save()
    return user


@pytest.fixture
def rep_client(api_client, sales_rep):
    api_client.force_authenticate(user=sales_rep)
    return api_client


@pytest.fixture
def admin_client(api_client, admin_user):
    api_client.force_authenticate(user=admin_user)
    return api_client


@pytest.fixture
def motorcycle(admin_user):
    return Motorcycle.objects.create(
        make="Yamaha",
        model="MT-07",
        year=2024,
        category="Naked",
        color="Cyan Storm",
        vin="JYARM3000RA000002",
        price=8199.0,
        cost=6700.0,
        stock=10,
        created_by=admin_user,
    )


@pytest.fixture
def customer():
    return Customer.objects.create(first_name="Maria", last_name="Lopez", email="maria.lopez@example.com")
