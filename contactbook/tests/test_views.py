"""
Tests for the contactbook routes.

Loaders are exercised with GET, actions with POST, both through
django.test.Client so URL routing and templates are covered too.
"""

from unittest.mock import patch

import pytest
from django.core.exceptions import ValidationError
from django.http import HttpResponseRedirect
from django.test import RequestFactory
from django.urls import reverse

from contactbook.exceptions import ContactBookError
from contactbook.forms import ValidationExampleForm, form_action
from contactbook.models import Contact, EventType
from contactbook.services import contact as contact_service
from contactbook.views import (
    HISTORY_COLUMNS,
    ContactHistoryView,
    EditContactView,
    ValidationExampleView,
)


pytestmark = pytest.mark.django_db


def edit_url(contact_id):
    return reverse("contactbook:contact-edit", args=[contact_id])


def detail_url(contact_id):
    return reverse("contactbook:contact", args=[contact_id])


# ═══════════════════════════════════════════════════════════════════
# Root
# ═══════════════════════════════════════════════════════════════════


class TestIndex:
    def test_sidebar_lists_contacts(self, client, contact, other_contact):
        response = client.get("/")

        assert response.status_code == 200
        body = response.content.decode()
        assert "John Doe" in body
        assert "Jane Roe" in body
        assert "<title>Contacts · Remix Forms</title>" in body

    def test_sidebar_search(self, client, contact, other_contact):
        response = client.get("/", {"q": "jane"})

        body = response.content.decode()
        assert "Jane Roe" in body
        assert "John Doe" not in body

    def test_new_creates_empty_contact_and_redirects_to_edit(self, client):
        response = client.post("/")

        created = Contact.objects.get()
        assert response.status_code == 302
        assert response.url == edit_url(created.id)
        assert created.name == ""


# ═══════════════════════════════════════════════════════════════════
# Contact detail
# ═══════════════════════════════════════════════════════════════════


class TestContactDetail:
    def test_renders_contact(self, client, contact):
        response = client.get(detail_url(contact.id))

        assert response.status_code == 200
        assert response.context_data["contact"] == contact
        assert 'class="contact-link active"' in response.content.decode()

    def test_not_found(self, client):
        assert client.get(detail_url("missing")).status_code == 404

    def test_favorite_toggle(self, client, contact):
        response = client.post(detail_url(contact.id), {"favorite": "true"})

        assert response.status_code == 302
        assert response.url == detail_url(contact.id)
        contact.refresh_from_db()
        assert contact.favorite is True

    def test_favorite_on_missing_contact(self, client):
        assert client.post(detail_url("missing"), {"favorite": "true"}).status_code == 404


# ═══════════════════════════════════════════════════════════════════
# Edit contact
# ═══════════════════════════════════════════════════════════════════


class TestEditContact:
    def test_loader_returns_contact(self, client, contact):
        response = client.get(edit_url(contact.id))

        assert response.status_code == 200
        assert response.context_data["contact"] == contact
        assert 'value="John"' in response.content.decode()

    def test_loader_not_found(self, client):
        response = client.get(edit_url("missing"))

        assert response.status_code == 404

    def test_empty_names_return_errors_without_update(self, client, contact):
        response = client.post(
            edit_url(contact.id),
            {"first": "", "last": "", "notes": "should not be saved"},
        )

        assert response.status_code == 200
        errors = response.context_data["action_data"]["errors"]
        assert {k for k, v in errors.items() if v} == {"first", "last"}
        assert errors["first"] == "First name is required"
        assert errors["last"] == "Last name is required"
        body = response.content.decode()
        assert "<em>First name is required</em>" in body

        contact.refresh_from_db()
        assert contact.first == "John"
        assert contact.notes == "Met at the conference"

    def test_only_missing_field_is_reported(self, client, contact):
        response = client.post(edit_url(contact.id), {"first": "Johnny", "last": ""})

        errors = response.context_data["action_data"]["errors"]
        assert {k for k, v in errors.items() if v} == {"last"}
        contact.refresh_from_db()
        assert contact.first == "John"

    def test_absent_fields_count_as_empty(self, client, contact):
        response = client.post(edit_url(contact.id), {})

        errors = response.context_data["action_data"]["errors"]
        assert {k for k, v in errors.items() if v} == {"first", "last"}

    def test_valid_update_redirects_to_detail(self, client, contact):
        response = client.post(
            edit_url(contact.id),
            {
                "first": "Johnny",
                "last": "Doe",
                "twitter": "@johnny",
                "avatar": "https://example.com/johnny.jpg",
                "notes": "Updated",
            },
        )

        assert response.status_code == 302
        assert response.url == detail_url(contact.id)
        contact.refresh_from_db()
        assert contact.first == "Johnny"
        assert contact.twitter == "@johnny"
        assert contact.notes == "Updated"

    def test_missing_param_is_invariant_violation(self):
        request = RequestFactory().post("/contacts//edit/", {"first": "A", "last": "B"})

        with pytest.raises(ContactBookError) as exc_info:
            EditContactView.as_view()(request, contact_id="")

        assert exc_info.value.code == "INVARIANT_VIOLATION"

    def test_valid_names_on_missing_contact_is_not_found(self, client):
        response = client.post(edit_url("missing"), {"first": "A", "last": "B"})

        assert response.status_code == 404
        assert not Contact.objects.filter(pk="missing").exists()


# ═══════════════════════════════════════════════════════════════════
# Destroy
# ═══════════════════════════════════════════════════════════════════


class TestDestroyContact:
    def test_deletes_and_redirects_home(self, client, contact):
        response = client.post(reverse("contactbook:contact-destroy", args=[contact.id]))

        assert response.status_code == 302
        assert response.url == reverse("contactbook:index")
        assert not Contact.objects.filter(pk=contact.id).exists()

    def test_missing_contact(self, client):
        response = client.post(reverse("contactbook:contact-destroy", args=["missing"]))
        assert response.status_code == 404

    def test_get_not_allowed(self, client, contact):
        response = client.get(reverse("contactbook:contact-destroy", args=[contact.id]))
        assert response.status_code == 405


# ═══════════════════════════════════════════════════════════════════
# History grid
# ═══════════════════════════════════════════════════════════════════


class TestContactHistory:
    def test_rows_map_history_events(self, client, contact):
        response = client.get(reverse("contactbook:contact-history", args=[contact.id]))

        assert response.status_code == 200
        rows = response.context_data["contact_history"]
        assert [row["changeSummary"] for row in rows] == [
            "Contact updated",
            "Contact created",
        ]
        assert all(row["viewDetails"] == "" for row in rows)
        event = contact.history_events.order_by("-date", "-id").first()
        assert rows[0]["createdOn"] == event.date.isoformat()

    def test_three_columns(self, client, contact):
        response = client.get(reverse("contactbook:contact-history", args=[contact.id]))

        assert response.context_data["column_definitions"] == [
            {"field": "changeSummary"},
            {"field": "viewDetails"},
            {"field": "createdOn"},
        ]
        body = response.content.decode()
        assert "Contact History" in body
        assert 'id="contact-history-rows"' in body
        assert "ag-theme-quartz" in body

    def test_favorite_event_summary(self, client, contact):
        contact_service.update_contact(contact.id, {"favorite": True})

        response = client.get(reverse("contactbook:contact-history", args=[contact.id]))

        assert response.context_data["contact_history"][0]["changeSummary"] == (
            f"Contact {EventType.FAVORITED}"
        )

    def test_unknown_contact_renders_empty_grid(self, client):
        response = client.get(reverse("contactbook:contact-history", args=["missing"]))

        assert response.status_code == 200
        assert response.context_data["contact_history"] == []

    def test_loader_directly(self, contact):
        request = RequestFactory().get("/")
        data = ContactHistoryView().loader(request, contact_id=contact.id)

        assert data["column_definitions"] is HISTORY_COLUMNS
        assert len(data["contact_history"]) == 2

    def test_missing_param_is_invariant_violation(self):
        request = RequestFactory().get("/contacts//history/")

        with pytest.raises(ContactBookError) as exc_info:
            ContactHistoryView.as_view()(request, contact_id="")

        assert exc_info.value.code == "INVARIANT_VIOLATION"


# ═══════════════════════════════════════════════════════════════════
# Validation example
# ═══════════════════════════════════════════════════════════════════

VALID_SUBMISSION = {
    "first_name": "Maria",
    "last_name": "Silva",
    "email": "maria@example.com",
    "how_you_found_out_about_us": "google",
    "notes": "",
}


class TestValidationExample:
    url = "/validation-example/"

    def test_renders_schema_fields(self, client):
        response = client.get(self.url)

        assert response.status_code == 200
        body = response.content.decode()
        for name in VALID_SUBMISSION:
            assert f'name="{name}"' in body
        assert '<button type="submit">' in body

    def test_valid_submission_redirects_to_success(self, client):
        response = client.post(self.url, VALID_SUBMISSION)

        assert response.status_code == 302
        assert response.url == "/success/"

    def test_success_path_from_settings(self, client, settings):
        settings.CONTACTBOOK = {"SUCCESS_URL": "/thanks/"}

        response = client.post(self.url, VALID_SUBMISSION)

        assert response.url == "/thanks/"

    def test_invalid_submission_returns_field_errors(self, client):
        response = client.post(
            self.url,
            {**VALID_SUBMISSION, "first_name": "", "email": "not-an-email"},
        )

        assert response.status_code == 200
        errors = response.context_data["action_data"]["errors"]
        assert set(errors) == {"first_name", "email"}
        assert 'class="field-error"' in response.content.decode()

    def test_invalid_choice(self, client):
        response = client.post(
            self.url, {**VALID_SUBMISSION, "how_you_found_out_about_us": "tv"}
        )

        errors = response.context_data["action_data"]["errors"]
        assert set(errors) == {"how_you_found_out_about_us"}

    def test_notes_optional(self, client):
        data = {k: v for k, v in VALID_SUBMISSION.items() if k != "notes"}

        assert client.post(self.url, data).status_code == 302

    def test_rerender_keeps_submitted_values(self, client):
        response = client.post(self.url, {**VALID_SUBMISSION, "last_name": ""})

        assert 'value="Maria"' in response.content.decode()

    def test_view_form_class_is_schema(self):
        assert set(ValidationExampleView.form_class.base_fields) == set(VALID_SUBMISSION)

    def test_mutation_error_becomes_form_error(self):
        def reject(values):
            raise ValidationError("Email already registered")

        request = RequestFactory().post(self.url, VALID_SUBMISSION)
        result = form_action(request, ValidationExampleForm, reject)

        assert not isinstance(result, HttpResponseRedirect)
        assert result.errors == {"__all__": ["Email already registered"]}
        assert list(result.form.non_field_errors()) == ["Email already registered"]

    def test_mutation_error_rendered_with_form(self, client):
        def reject(values):
            raise ValidationError("Email already registered")

        with patch("contactbook.views.identity_mutation", reject):
            response = client.post(self.url, VALID_SUBMISSION)

        assert response.status_code == 200
        assert response.context_data["action_data"]["errors"] == {
            "__all__": ["Email already registered"]
        }
        assert (
            '''<div class="errors">
    <p>Email already registered</p>'''
            in response.content.decode()
        )


def test_success_page(client, db):
    response = client.get("/success/")

    assert response.status_code == 200
    assert "<title>Success · Remix Forms</title>" in response.content.decode()
