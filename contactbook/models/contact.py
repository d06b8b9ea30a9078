"""Contact model.

Contact.id is a short random slug (7 chars, lowercase + digits) so URLs stay
readable: /contacts/k3x9q2a/edit/.
"""

from django.db import models
from django.utils.crypto import get_random_string
from django.utils.translation import gettext_lazy as _

CONTACT_ID_CHARS = "abcdefghijklmnopqrstuvwxyz0123456789"
CONTACT_ID_LENGTH = 7


def new_contact_id() -> str:
    return get_random_string(CONTACT_ID_LENGTH, CONTACT_ID_CHARS)


class Contact(models.Model):
    """
    Address book entry.

    Every field except id is optional: an "empty" contact is created first
    and filled in through the edit form.
    """

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=new_contact_id,
        editable=False,
    )

    first = models.CharField(_("first name"), max_length=100, blank=True)
    last = models.CharField(_("last name"), max_length=100, blank=True)
    twitter = models.CharField(
        _("twitter"),
        max_length=100,
        blank=True,
        help_text=_("Handle, e.g. @jack"),
    )
    avatar = models.URLField(_("avatar URL"), max_length=500, blank=True)
    notes = models.TextField(_("notes"), blank=True)
    favorite = models.BooleanField(_("favorite"), default=False)

    created_at = models.DateTimeField(_("created at"), auto_now_add=True, db_index=True)

    class Meta:
        verbose_name = _("contact")
        verbose_name_plural = _("contacts")
        ordering = ["last", "created_at"]

    def __str__(self):
        return self.name or f"<{self.id}>"

    @property
    def name(self) -> str:
        """Full name (first + last)."""
        return f"{self.first} {self.last}".strip()
