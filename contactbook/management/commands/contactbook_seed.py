"""Management command to load sample contacts."""

from django.core.management.base import BaseCommand

from contactbook.models import Contact
from contactbook.services import contact as contact_service

SAMPLE_CONTACTS = [
    {
        "first": "Shruti",
        "last": "Kapoor",
        "avatar": "https://sessionize.com/image/124e-400o400o2-wHVdAuNaxi8KJrgtN3ZKci.jpg",
        "twitter": "@shrutikapoor08",
    },
    {
        "first": "Glenn",
        "last": "Reyes",
        "avatar": "https://sessionize.com/image/1940-400o400o2-Enh9dnYmrLYhJSTTPSw3MH.jpg",
        "twitter": "@glnnrys",
    },
    {
        "first": "Ryan",
        "last": "Florence",
        "avatar": "https://sessionize.com/image/9273-400o400o2-3tyrUE3HjsCHJLU5aUJCja.jpg",
    },
    {
        "first": "Oscar",
        "last": "Newman",
        "avatar": "https://sessionize.com/image/d14d-400o400o2-pyB229HyFPCnUcZhHf3kWS.png",
        "twitter": "@__oscarnewman",
    },
    {
        "first": "Michael",
        "last": "Jackson",
        "avatar": "https://sessionize.com/image/fd45-400o400o2-fw91uCdGU9hFP334dnyVCr.jpg",
    },
]


class Command(BaseCommand):
    help = "Create sample contacts (skipped when contacts already exist)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--force",
            action="store_true",
            help="Create the samples even if the store is not empty",
        )

    def handle(self, *args, **options):
        if Contact.objects.exists() and not options["force"]:
            self.stdout.write("Contacts already exist; use --force to seed anyway.")
            return

        for data in SAMPLE_CONTACTS:
            contact = contact_service.create_empty_contact()
            contact_service.update_contact(contact.id, data)

        self.stdout.write(
            self.style.SUCCESS(f"Created {len(SAMPLE_CONTACTS)} sample contacts.")
        )
