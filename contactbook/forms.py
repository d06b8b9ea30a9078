"""
Form schemas and the schema-driven form action.

form_action() binds a schema, runs a mutation over the cleaned values and
either redirects or hands back the field-keyed errors for re-render.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from django import forms
from django.core.exceptions import ValidationError
from django.http import HttpResponseRedirect

from contactbook.conf import contactbook_settings

logger = logging.getLogger(__name__)


class ValidationExampleForm(forms.Form):
    """Demo schema for the validation example route."""

    HOW_YOU_FOUND_OUT_CHOICES = [
        ("fromAFriend", "From a friend"),
        ("google", "Google"),
    ]

    first_name = forms.CharField(min_length=1)
    last_name = forms.CharField(min_length=1)
    email = forms.EmailField(min_length=1)
    how_you_found_out_about_us = forms.ChoiceField(choices=HOW_YOU_FOUND_OUT_CHOICES)
    notes = forms.CharField(required=False, widget=forms.Textarea)


@dataclass
class FormActionResult:
    """Outcome of form_action() when the submission did not succeed."""

    form: forms.Form
    errors: dict[str, list[str]] = field(default_factory=dict)


def form_action(
    request,
    form_class: type[forms.Form],
    mutation: Callable[[dict], Any],
    success_path: str | None = None,
) -> HttpResponseRedirect | FormActionResult:
    """
    Validate request.POST against form_class and run mutation on success.

    Args:
        request: Incoming POST request
        form_class: Schema to validate against
        mutation: Called with cleaned_data; may raise ValidationError
        success_path: Redirect target (defaults to SUCCESS_URL setting)

    Returns:
        Redirect on success, FormActionResult with errors otherwise
    """
    form = form_class(request.POST)
    if form.is_valid():
        try:
            mutation(form.cleaned_data)
        except ValidationError as exc:
            form.add_error(None, exc)
        else:
            return HttpResponseRedirect(success_path or contactbook_settings.SUCCESS_URL)

    errors = {name: [str(e) for e in errs] for name, errs in form.errors.items()}
    logger.info("%s rejected: %s", form_class.__name__, errors)
    return FormActionResult(form=form, errors=errors)
