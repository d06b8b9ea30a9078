"""
Contactbook routes.

Every page is a RouteView: loader() feeds the template on GET, action()
handles the POST and returns either a response (usually a redirect) or
action data that is rendered next to a fresh loader() result.
"""

from __future__ import annotations

import logging

from django.http import Http404, HttpResponse, HttpResponseRedirect
from django.template.response import TemplateResponse
from django.urls import reverse
from django.views import View

from contactbook.conf import contactbook_settings
from contactbook.forms import ValidationExampleForm, form_action
from contactbook.helpers import invariant, meta_tags
from contactbook.services import contact as contact_service
from contactbook.services import history as history_service

logger = logging.getLogger(__name__)


class RouteView(View):
    """Loader/action pair rendered through a single template."""

    template_name = ""
    http_method_names = ["get", "head", "options"]

    def loader(self, request, **params) -> dict:
        return {}

    def action(self, request, **params) -> HttpResponse | dict:
        raise NotImplementedError

    def get_meta(self, data: dict) -> dict:
        return {}

    def get(self, request, **params):
        return self.render(request, self.loader(request, **params))

    def post(self, request, **params):
        result = self.action(request, **params)
        if isinstance(result, HttpResponse):
            return result
        return self.render(request, self.loader(request, **params), action_data=result)

    def render(self, request, data: dict, action_data: dict | None = None):
        context = {
            **data,
            "action_data": action_data or {},
            "meta": meta_tags(**self.get_meta(data)),
        }
        return TemplateResponse(request, self.template_name, context)


def load_contact(contact_id: str):
    invariant(contact_id, "Missing contactId param")
    contact = contact_service.get_contact(contact_id)
    if not contact:
        raise Http404("Not Found")
    return contact


class IndexView(RouteView):
    """Landing page; the sidebar comes from the context processor."""

    template_name = "contactbook/index.html"
    http_method_names = ["get", "post", "head", "options"]

    def get_meta(self, data):
        return {"title": "Contacts", "description": "Your address book"}

    def action(self, request, **params):
        contact = contact_service.create_empty_contact()
        return HttpResponseRedirect(reverse("contactbook:contact-edit", args=[contact.id]))


class ContactView(RouteView):
    template_name = "contactbook/contact.html"
    http_method_names = ["get", "post", "head", "options"]

    def loader(self, request, contact_id=None):
        return {"contact": load_contact(contact_id)}

    def get_meta(self, data):
        return {"title": data["contact"].name or "No Name"}

    def action(self, request, contact_id=None):
        load_contact(contact_id)
        contact_service.update_contact(
            contact_id, {"favorite": request.POST.get("favorite", "false")}
        )
        return HttpResponseRedirect(reverse("contactbook:contact", args=[contact_id]))


class EditContactView(RouteView):
    template_name = "contactbook/contact_edit.html"
    http_method_names = ["get", "post", "head", "options"]

    def loader(self, request, contact_id=None):
        return {"contact": load_contact(contact_id)}

    def get_meta(self, data):
        return {"title": f"Edit {data['contact'].name or 'contact'}"}

    def action(self, request, contact_id=None):
        load_contact(contact_id)
        updates = request.POST.dict()
        person = {
            "first": updates.get("first", ""),
            "last": updates.get("last", ""),
        }
        errors = {"first": "", "last": ""}

        if len(person["first"]) == 0:
            errors["first"] = "First name is required"

        if len(person["last"]) == 0:
            errors["last"] = "Last name is required"

        if any(message for message in errors.values()):
            logger.info("Contact %s edit rejected: %s", contact_id, errors)
            return {"errors": errors}

        contact_service.update_contact(contact_id, updates)
        return HttpResponseRedirect(reverse("contactbook:contact", args=[contact_id]))


class DestroyContactView(View):
    http_method_names = ["post"]

    def post(self, request, contact_id=None):
        invariant(contact_id, "Missing contactId param")
        if not contact_service.delete_contact(contact_id):
            raise Http404("Not Found")
        return HttpResponseRedirect(reverse("contactbook:index"))


HISTORY_COLUMNS = [
    {"field": "changeSummary"},
    {"field": "viewDetails"},
    {"field": "createdOn"},
]


def history_row(event) -> dict:
    return {
        "changeSummary": f"Contact {event.event_type}",
        "viewDetails": "",
        "createdOn": event.date.isoformat(),
    }


class ContactHistoryView(RouteView):
    """Change history rendered by AG Grid in the browser."""

    template_name = "contactbook/contact_history.html"

    def loader(self, request, contact_id=None):
        invariant(contact_id, "Missing contactId param")
        events = history_service.get_contact_history(contact_id)
        return {
            "contact_id": contact_id,
            "contact_history": [history_row(event) for event in events],
            "column_definitions": HISTORY_COLUMNS,
            "grid_theme": contactbook_settings.GRID_THEME,
            "grid_height": contactbook_settings.GRID_HEIGHT,
        }

    def get_meta(self, data):
        return {"title": "Contact History"}


def identity_mutation(values: dict) -> dict:
    return values


class ValidationExampleView(RouteView):
    template_name = "contactbook/validation_example.html"
    http_method_names = ["get", "post", "head", "options"]
    form_class = ValidationExampleForm

    def loader(self, request, **params):
        return {"form": self.form_class()}

    def get_meta(self, data):
        return {"title": "Validation example", "description": "Schema-driven form validation"}

    def action(self, request, **params):
        result = form_action(
            request,
            self.form_class,
            identity_mutation,
            success_path=contactbook_settings.SUCCESS_URL,
        )
        if isinstance(result, HttpResponse):
            return result
        return {"form": result.form, "errors": result.errors}


class SuccessView(RouteView):
    template_name = "contactbook/success.html"

    def get_meta(self, data):
        return {"title": "Success"}
