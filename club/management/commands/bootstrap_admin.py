"""
Create the first administrator account from the command line
Usage: python manage.py bootstrap_admin --email coach@club.org --password secret --full-name "Head Coach"
"""

from django.core.management.base import BaseCommand, CommandError

from club.services import AccountError, bootstrap_admin


class Command(BaseCommand):
    help = 'Creates the first administrator (refused once an admin exists)'

    def add_arguments(self, parser):
        parser.add_argument('--email', type=str, required=True, help='Login email of the administrator')
        parser.add_argument('--password', type=str, required=True, help='Initial password')
        parser.add_argument('--full-name', type=str, required=True, help='Name shown in the portal')

    def handle(self, *args, **options):
        try:
            user = bootstrap_admin(options['email'], options['password'], options['full_name'])
        except PermissionError as e:
            raise CommandError(str(e))
        except AccountError as e:
            raise CommandError(str(e))

        self.stdout.write(self.style.SUCCESS(f'Admin account created: {user.email}'))
