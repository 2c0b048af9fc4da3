"""
Common test fixtures for the directory.

Provides users with different capabilities (plain, organisation admin,
site staff), Django test clients signed in as each of them, and a
couple of organisations and categories to work with.
"""
import pytest
from django.contrib.auth.models import User

from organisations.models import Category, Organisation


@pytest.fixture
def user(db):
    """Create a signed-up user with no special rights."""
    return User.objects.create_user(username="u1", password="pass12345", email="u1@example.com")


@pytest.fixture
def staff_user(db):
    """Create a site admin."""
    return User.objects.create_user(
        username="boss", password="pass12345", email="boss@example.com", is_staff=True
    )


@pytest.fixture
def organisation(db):
    return Organisation.objects.create(
        name="Friendly Group",
        description="We are friendly",
        address="30 Pinner Road",
        postcode="HA1 4HZ",
        email="friendly@example.com",
        latitude=51.5857,
        longitude=-0.3523,
    )


@pytest.fixture
def org_admin(user, organisation):
    """The plain user, promoted to administer `organisation`."""
    profile = user.profile
    profile.organisation = organisation
    profile.save()
    return user


@pytest.fixture
def category(db):
    return Category.objects.create(name="Health", charity_commission_id=102)


@pytest.fixture
def user_client(client, user):
    """Django test client signed in as the plain user."""
    client.force_login(user)
    return client


@pytest.fixture
def org_admin_client(client, org_admin):
    client.force_login(org_admin)
    return client


@pytest.fixture
def staff_client(client, staff_user):
    client.force_login(staff_user)
    return client
