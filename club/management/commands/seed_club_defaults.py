"""
Create the default competitions and kit colours (safe to run repeatedly)
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from club.defaults import DEFAULT_COMPETITIONS, DEFAULT_KIT_COLORS
from club.models import Competition, KitColor


class Command(BaseCommand):
    help = 'Seeds default competitions and kit colours'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be created without saving'
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']

        if dry_run:
            self.stdout.write(self.style.WARNING('[DRY-RUN] Nothing will be saved'))

        missing_competitions = [
            name for name in DEFAULT_COMPETITIONS
            if not Competition.objects.filter(name=name).exists()
        ]
        missing_kits = [
            kit for kit in DEFAULT_KIT_COLORS
            if not KitColor.objects.filter(name=kit[0]).exists()
        ]

        for name in missing_competitions:
            self.stdout.write(f"  Competition: {name}")
        for name, primary, secondary in missing_kits:
            self.stdout.write(f"  Kit colour: {name} ({primary}/{secondary})")

        if not dry_run:
            with transaction.atomic():
                for name in missing_competitions:
                    Competition.objects.create(name=name)
                for name, primary, secondary in missing_kits:
                    KitColor.objects.create(name=name, primary_color=primary, secondary_color=secondary)

        verb = 'Would create' if dry_run else 'Created'
        self.stdout.write(self.style.SUCCESS(
            f"{verb} {len(missing_competitions)} competitions and {len(missing_kits)} kit colours"
        ))
