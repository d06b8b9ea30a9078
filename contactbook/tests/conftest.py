"""Pytest fixtures for Contactbook tests."""

import pytest

from contactbook.models import Contact
from contactbook.services import contact as contact_service


@pytest.fixture
def contact(db):
    """Create a contact through the service so its history starts with 'created'."""
    created = contact_service.create_empty_contact()
    return contact_service.update_contact(
        created.id,
        {
            "first": "John",
            "last": "Doe",
            "twitter": "@johndoe",
            "avatar": "https://example.com/john.jpg",
            "notes": "Met at the conference",
        },
    )


@pytest.fixture
def other_contact(db):
    """A second contact written straight to the table (no history)."""
    return Contact.objects.create(first="Jane", last="Roe")
