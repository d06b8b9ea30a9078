"""
Django Contactbook - Contact Management.

Usage:
    INSTALLED_APPS = [
        ...
        "contactbook",
    ]
    urlpatterns = [path("", include("contactbook.urls"))]

    from contactbook.services import contact as contact_service
    from contactbook.services import history as history_service

    contact = contact_service.get_contact("k3x9q2a")
    contact_service.update_contact("k3x9q2a", {"first": "Ana"})
    events = history_service.get_contact_history("k3x9q2a")
"""


def __getattr__(name):
    if name == "ContactBookError":
        from contactbook.exceptions import ContactBookError

        return ContactBookError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["ContactBookError"]
__version__ = "0.1.0"
