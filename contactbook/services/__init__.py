"""Contactbook services.

- contactbook.services.contact: contact store (get/update/create/delete)
- contactbook.services.history: change history per contact
"""

from contactbook.services import contact
from contactbook.services import history

__all__ = ["contact", "history"]
