"""ContactHistoryEvent model — change log per contact."""

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class EventType(models.TextChoices):
    """History event types."""

    CREATED = "created", _("Created")
    UPDATED = "updated", _("Updated")
    FAVORITED = "favorited", _("Favorited")
    UNFAVORITED = "unfavorited", _("Unfavorited")
    DELETED = "deleted", _("Deleted")


class ContactHistoryEvent(models.Model):
    """
    Single change in a contact's lifecycle.

    Written by the signal receivers in contactbook.receivers; read-only
    everywhere else.
    """

    contact = models.ForeignKey(
        "contactbook.Contact",
        on_delete=models.CASCADE,
        related_name="history_events",
        verbose_name=_("contact"),
    )
    event_type = models.CharField(
        _("type"),
        max_length=20,
        choices=EventType.choices,
        db_index=True,
    )
    date = models.DateTimeField(_("date"), default=timezone.now, db_index=True)

    # Field-level changes for "updated" events ({"first": {"old": .., "new": ..}})
    changes = models.JSONField(_("changes"), default=dict, blank=True)

    class Meta:
        verbose_name = _("contact history event")
        verbose_name_plural = _("contact history events")
        ordering = ["-date", "-id"]
        indexes = [
            models.Index(fields=["contact", "-date"], name="contactbook_history_date_idx"),
        ]

    def __str__(self):
        return f"[{self.event_type}] {self.contact_id}"

    @property
    def change_summary(self) -> str:
        return f"Contact {self.event_type}"
