"""Page helpers: CSS class composition, titles, meta tags, invariants."""

from contactbook.conf import contactbook_settings
from contactbook.exceptions import ContactBookError


def _flatten(items):
    for item in items:
        if isinstance(item, (list, tuple)):
            yield from _flatten(item)
        else:
            yield item


def cx(*args) -> str:
    """
    Join CSS class names, skipping None and booleans.

    Usage:
        cx("contact-link", is_active and "active")  # "contact-link active"
        cx(["a", ["b", None]], False)               # "a b"
    """
    return " ".join(
        str(arg)
        for arg in _flatten(args)
        if arg is not None and not isinstance(arg, bool)
    )


def page_title(title: str) -> str:
    return f"{title} · {contactbook_settings.SITE_NAME}"


def meta_tags(title: str | None = None, description: str | None = None, **other_tags) -> dict:
    """
    Build the meta tag mapping for a page.

    title and description are mirrored to their og: counterparts; any other
    tag is passed through unchanged after them.
    """
    tags = {}
    if title:
        full_title = page_title(title)
        tags["title"] = full_title
        tags["og:title"] = full_title
    if description:
        tags["description"] = description
        tags["og:description"] = description
    tags.update(other_tags)
    return tags


def invariant(value, message: str):
    """Fail fast on a programming error (e.g. a route param that must exist)."""
    if not value:
        raise ContactBookError("INVARIANT_VIOLATION", message)
    return value
