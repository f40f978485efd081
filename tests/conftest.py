"""Shared fixtures for all tests."""
from datetime import date

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from reports.services import submit_report

User = get_user_model()

PASSWORD = "TestPass123!"


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def staff_user(db):
    return User.objects.create_user(
        email="staff@test.com",
        password=PASSWORD,
        name="Jane Staff",
        position=User.Position.SOCIAL_MEDIA_MANAGER,
        role=User.Role.STAFF,
    )


@pytest.fixture
def other_staff_user(db):
    return User.objects.create_user(
        email="other@test.com",
        password=PASSWORD,
        name="Omar Other",
        position=User.Position.CONTENT_CREATOR,
        role=User.Role.STAFF,
    )


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        email="admin@test.com",
        password=PASSWORD,
        name="Ada Admin",
        position=User.Position.ADMINISTRATOR,
        role=User.Role.ADMIN,
    )


@pytest.fixture
def staff_client(staff_user):
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def report_payload():
    return {
        "brand": "Acme",
        "deliverables": [
            {"title": "Launch post", "description": "Instagram launch carousel", "status": "Completed"},
        ],
        "next_week_targets": [
            {
                "title": "Campaign",
                "description": "Plan the Q3 campaign",
                "due_date": "2024-06-14",
                "priority": "High",
            },
        ],
        "additional_notes": "Smooth week.",
        "kpis": {"engagement_rate": 4.5, "reach": 12000, "conversions": 35},
    }


@pytest.fixture
def make_report(db):
    """Factory submitting a report through the lifecycle service."""

    def _make(user, *, brand="Acme", now=None, **overrides):
        fields = {
            "deliverables": [{"title": "Post", "description": "Weekly post"}],
            "next_week_targets": [
                {"title": "Plan", "description": "Next plan", "due_date": date(2024, 6, 14)},
            ],
        }
        fields.update(overrides)
        return submit_report(user=user, brand=brand, now=now, **fields)

    return _make
