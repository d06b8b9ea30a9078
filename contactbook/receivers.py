"""Signal receivers that turn contact signals into history events."""

from django.dispatch import receiver

from contactbook.models import EventType
from contactbook.services.history import record_event
from contactbook.signals import contact_created, contact_deleted, contact_updated


@receiver(contact_created)
def on_contact_created(sender, contact, **kwargs):
    record_event(contact, EventType.CREATED)


@receiver(contact_updated)
def on_contact_updated(sender, contact, changes, **kwargs):
    if set(changes) == {"favorite"}:
        event_type = EventType.FAVORITED if contact.favorite else EventType.UNFAVORITED
    else:
        event_type = EventType.UPDATED
    record_event(contact, event_type, changes=_jsonable(changes))


@receiver(contact_deleted)
def on_contact_deleted(sender, contact, **kwargs):
    # Cascades away with the contact; kept for log consumers only.
    record_event(contact, EventType.DELETED)


def _jsonable(changes: dict) -> dict:
    return {
        field: {k: v if isinstance(v, (str, bool, int, type(None))) else str(v) for k, v in diff.items()}
        for field, diff in changes.items()
    }
