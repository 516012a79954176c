"""Pytest configuration and shared fixtures."""

import typing as t

import pytest
from rest_framework.test import APIClient

from events.models import Enrollment, Ticket
from tests import factories


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def user() -> t.Any:
    return factories.create_user()


@pytest.fixture
def auth_client(user: t.Any) -> APIClient:
    """A client sending a valid bearer token for ``user``."""
    client = APIClient()
    session = factories.create_session_for(user)
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {session.token}")
    return client


@pytest.fixture
def enrollment(user: t.Any) -> Enrollment:
    return factories.create_enrollment_with_address(user)


@pytest.fixture
def eligible_user(user: t.Any, enrollment: Enrollment) -> t.Any:
    """A user with a paid, in-person ticket that includes lodging."""
    ticket = factories.create_ticket(
        enrollment, factories.create_ticket_with_hotel(), Ticket.Status.PAID
    )
    factories.create_payment(ticket)
    return user
