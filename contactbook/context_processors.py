"""Template context for the contact sidebar."""

from contactbook.helpers import cx
from contactbook.services import contact as contact_service


def sidebar(request):
    """
    Contacts for the sidebar, filtered by ?q=.

    Only runs on contactbook routes so admin pages don't pay for the query.
    """
    match = getattr(request, "resolver_match", None)
    if not match or match.namespace != "contactbook":
        return {}

    q = request.GET.get("q", "")
    active_id = match.kwargs.get("contact_id")
    return {
        "q": q,
        "sidebar_contacts": [
            {
                "contact": contact,
                "css_class": cx("contact-link", contact.id == active_id and "active"),
            }
            for contact in contact_service.get_contacts(q)
        ],
    }
