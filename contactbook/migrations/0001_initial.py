# Generated migration for Contact and ContactHistoryEvent

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models

import contactbook.models.contact


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Contact",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=contactbook.models.contact.new_contact_id,
                        editable=False,
                        max_length=32,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("first", models.CharField(blank=True, max_length=100, verbose_name="first name")),
                ("last", models.CharField(blank=True, max_length=100, verbose_name="last name")),
                (
                    "twitter",
                    models.CharField(
                        blank=True,
                        help_text="Handle, e.g. @jack",
                        max_length=100,
                        verbose_name="twitter",
                    ),
                ),
                ("avatar", models.URLField(blank=True, max_length=500, verbose_name="avatar URL")),
                ("notes", models.TextField(blank=True, verbose_name="notes")),
                ("favorite", models.BooleanField(default=False, verbose_name="favorite")),
                (
                    "created_at",
                    models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="created at"),
                ),
            ],
            options={
                "verbose_name": "contact",
                "verbose_name_plural": "contacts",
                "ordering": ["last", "created_at"],
            },
        ),
        migrations.CreateModel(
            name="ContactHistoryEvent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "event_type",
                    models.CharField(
                        choices=[
                            ("created", "Created"),
                            ("updated", "Updated"),
                            ("favorited", "Favorited"),
                            ("unfavorited", "Unfavorited"),
                            ("deleted", "Deleted"),
                        ],
                        db_index=True,
                        max_length=20,
                        verbose_name="type",
                    ),
                ),
                (
                    "date",
                    models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name="date"),
                ),
                ("changes", models.JSONField(blank=True, default=dict, verbose_name="changes")),
                (
                    "contact",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="history_events",
                        to="contactbook.contact",
                        verbose_name="contact",
                    ),
                ),
            ],
            options={
                "verbose_name": "contact history event",
                "verbose_name_plural": "contact history events",
                "ordering": ["-date", "-id"],
                "indexes": [
                    models.Index(fields=["contact", "-date"], name="contactbook_history_date_idx"),
                ],
            },
        ),
    ]
