from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from accounts.services import create_session


class Command(BaseCommand):
    help = "Open a session for a user and print its bearer token."

    def add_arguments(self, parser):
        parser.add_argument("username")

    def handle(self, *args, **options):
        user_model = get_user_model()
        try:
            user = user_model.objects.get(username=options["username"])
        except user_model.DoesNotExist as exc:
            raise CommandError(f"User {options['username']!r} does not exist") from exc
        session = create_session(user)
        self.stdout.write(session.token)
