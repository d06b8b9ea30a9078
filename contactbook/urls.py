from django.urls import path

from .views import (
    ContactHistoryView,
    ContactView,
    DestroyContactView,
    EditContactView,
    IndexView,
    SuccessView,
    ValidationExampleView,
)

app_name = "contactbook"

urlpatterns = [
    path("", IndexView.as_view(), name="index"),
    path("contacts/<str:contact_id>/", ContactView.as_view(), name="contact"),
    path("contacts/<str:contact_id>/edit/", EditContactView.as_view(), name="contact-edit"),
    path("contacts/<str:contact_id>/destroy/", DestroyContactView.as_view(), name="contact-destroy"),
    path("contacts/<str:contact_id>/history/", ContactHistoryView.as_view(), name="contact-history"),
    path("validation-example/", ValidationExampleView.as_view(), name="validation-example"),
    path("success/", SuccessView.as_view(), name="success"),
]
