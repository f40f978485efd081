"""Create the first administrator account."""
from django.core.management.base import BaseCommand, CommandError

from accounts.models import User


class Command(BaseCommand):
    help = "Create an admin account if none exists yet"

    DEFAULT_EMAIL = "admin@company.com"
    DEFAULT_PASSWORD = "Admin123!"
    DEFAULT_NAME = "System Administrator"

    def add_arguments(self, parser):
        parser.add_argument("--email", default=self.DEFAULT_EMAIL)
        parser.add_argument("--password", default=self.DEFAULT_PASSWORD)
        parser.add_argument("--name", default=self.DEFAULT_NAME)

    def handle(self, *args, **options):
        if User.objects.filter(role=User.Role.ADMIN).exists():
            self.stdout.write("Admin user already exists")
            return

        if User.objects.filter(email__iexact=options["email"]).exists():
            raise CommandError(f"{options['email']} is already registered as a staff account.")

        User.objects.create_user(
            email=options["email"],
            password=options["password"],
            name=options["name"],
            position=User.Position.ADMINISTRATOR,
            role=User.Role.ADMIN,
        )
        self.stdout.write(self.style.SUCCESS("Admin user created successfully"))
        self.stdout.write(f"Email: {options['email'].lower()}")
        if options["password"] == self.DEFAULT_PASSWORD:
            self.stdout.write(self.style.WARNING("Default password in use, change it after first login."))
