from django.apps import AppConfig


class ContactBookConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "contactbook"
    verbose_name = "Contactbook - Contact Management"

    def ready(self):
        from contactbook import receivers  # noqa: F401
