"""
Contactbook signals — public event API.

Emitted signals:
- contact_created: Emitted by services.contact.create_empty_contact()
- contact_updated: Emitted by services.contact.update_contact()
- contact_deleted: Emitted by services.contact.delete_contact() before the row goes
"""

from django.dispatch import Signal

# Contact signals (emitted by services)
contact_created = Signal()  # sender=Contact, contact=Contact
contact_updated = Signal()  # sender=Contact, contact=Contact, changes=dict
contact_deleted = Signal()  # sender=Contact, contact=Contact
