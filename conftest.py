"""
Shared pytest fixtures.

API clients are authenticated with ``force_authenticate`` so tests don't
depend on the session login flow.
"""
import pytest
from rest_framework.test import APIClient

from users.factories import AdminUserFactory, TherapistUserFactory, UserFactory


@pytest.fixture
def api_client():
    """Unauthenticated DRF API client."""
    return APIClient()


@pytest.fixture
def client_user(db):
    return UserFactory(username="client", first_name="Casey")


@pytest.fixture
def therapist_user(db):
    return TherapistUserFactory(username="therapist", first_name="Jordan")


@pytest.fixture
def admin_user(db):
    return AdminUserFactory(username="admin")


@pytest.fixture
def auth_client(client_user):
    client = APIClient()
    client.force_authenticate(user=client_user)
    return client


@pytest.fixture
def therapist_client(therapist_user):
    client = APIClient()
    client.force_authenticate(user=therapist_user)
    return client


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client
