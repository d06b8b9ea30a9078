"""History service — record and query contact change events."""

import logging

from contactbook.conf import contactbook_settings
from contactbook.models import Contact, ContactHistoryEvent

logger = logging.getLogger(__name__)


def record_event(
    contact: Contact,
    event_type: str,
    changes: dict | None = None,
) -> ContactHistoryEvent:
    """
    Append an event to the contact's history.

    Args:
        contact: Contact the event belongs to
        event_type: One of EventType (created, updated, favorited, ...)
        changes: Field-level diff for updates

    Returns:
        Created ContactHistoryEvent
    """
    event = ContactHistoryEvent.objects.create(
        contact=contact,
        event_type=event_type,
        changes=changes or {},
    )
    logger.debug("History: contact %s %s", contact.pk, event_type)
    return event


def get_contact_history(
    contact_id: str,
    limit: int | None = None,
) -> list[ContactHistoryEvent]:
    """
    Get contact history (most recent first).

    Unknown ids yield an empty list.
    """
    if limit is None:
        limit = contactbook_settings.HISTORY_LIMIT
    qs = ContactHistoryEvent.objects.filter(contact_id=contact_id)
    return list(qs[:limit])
