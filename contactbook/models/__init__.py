"""Contactbook models."""

from contactbook.models.contact import Contact, new_contact_id
from contactbook.models.history import ContactHistoryEvent, EventType

__all__ = [
    "Contact",
    "new_contact_id",
    # Change log
    "ContactHistoryEvent",
    "EventType",
]
