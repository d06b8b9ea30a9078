"""Contact service - the data module behind every route.

Reads return None when nothing matches; writes raise ContactBookError.
"""

import logging

from django.db import transaction
from django.db.models import Q

from contactbook.conf import contactbook_settings
from contactbook.exceptions import ContactBookError
from contactbook.models import Contact
from contactbook.signals import contact_created, contact_deleted, contact_updated

logger = logging.getLogger(__name__)


UPDATABLE_FIELDS = {
    "first",
    "last",
    "twitter",
    "avatar",
    "notes",
    "favorite",
}

_TRUE_VALUES = {"true", "on", "1", "yes"}


def get_contacts(query: str | None = None) -> list[Contact]:
    """List contacts, optionally filtered by first/last name."""
    qs = Contact.objects.all()
    if query:
        qs = qs.filter(Q(first__icontains=query) | Q(last__icontains=query))
    return list(qs.order_by("last", "created_at")[: contactbook_settings.SEARCH_LIMIT])


def get_contact(contact_id: str) -> Contact | None:
    """Get contact by id."""
    try:
        return Contact.objects.get(pk=contact_id)
    except Contact.DoesNotExist:
        return None


def create_empty_contact() -> Contact:
    """Create a contact with no data; the edit form fills it in."""
    with transaction.atomic():
        contact = Contact.objects.create()
        contact_created.send(sender=Contact, contact=contact)

    logger.info("Contact %s created", contact.id)
    return contact


def _coerce(key: str, value):
    if key == "favorite" and isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return value


def update_contact(contact_id: str, updates: dict) -> Contact:
    """
    Patch a contact (only whitelisted fields are applied).

    Args:
        contact_id: Contact id
        updates: Field values, typically the raw submitted form

    Returns:
        The saved Contact

    Raises:
        ContactBookError: CONTACT_NOT_FOUND if no contact has this id
    """
    with transaction.atomic():
        try:
            contact = Contact.objects.select_for_update().get(pk=contact_id)
        except Contact.DoesNotExist:
            raise ContactBookError(
                "CONTACT_NOT_FOUND",
                f"No contact found for {contact_id}",
                contact_id=contact_id,
            )

        changes = {}
        for key, value in updates.items():
            if key not in UPDATABLE_FIELDS:
                continue
            value = _coerce(key, value)
            old_value = getattr(contact, key)
            if old_value != value:
                changes[key] = {"old": old_value, "new": value}
            setattr(contact, key, value)

        contact.save()
        if changes:
            contact_updated.send(sender=Contact, contact=contact, changes=changes)

    logger.info("Contact %s updated (%s)", contact_id, ", ".join(sorted(changes)) or "no changes")
    return contact


def delete_contact(contact_id: str) -> bool:
    """Delete a contact. Returns False if it did not exist."""
    contact = get_contact(contact_id)
    if not contact:
        return False

    with transaction.atomic():
        contact_deleted.send(sender=Contact, contact=contact)
        contact.delete()

    logger.info("Contact %s deleted", contact_id)
    return True
