"""
Delete club data (matches, lineups, events, announcements, gallery, players)

WARNING: accounts, competitions and kit colours are kept, everything else goes.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from club.models import Announcement, GalleryItem, Match, MatchEvent, MatchLineup, Player


class Command(BaseCommand):
    help = 'Resets club data (deletes fixtures, news, photos and players)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be deleted without deleting anything'
        )
        parser.add_argument(
            '--confirm',
            action='store_true',
            help='Confirm that the data should really be deleted'
        )
        parser.add_argument(
            '--keep-players',
            action='store_true',
            help='Keep the squad, only delete match and news data'
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']
        confirm = options['confirm']
        keep_players = options['keep_players']

        self.stdout.write("=" * 60)
        self.stdout.write(self.style.ERROR('CLUB DATA RESET'))
        self.stdout.write("=" * 60)

        if not confirm and not dry_run:
            self.stdout.write(self.style.ERROR("WARNING: this command deletes club data."))
            self.stdout.write(self.style.ERROR("Use --confirm to continue."))
            return

        if dry_run:
            self.stdout.write(self.style.WARNING('[DRY-RUN] Nothing will be deleted'))

        # Children before parents
        targets = [
            ('Match events', MatchEvent),
            ('Lineup entries', MatchLineup),
            ('Gallery photos', GalleryItem),
            ('Announcements', Announcement),
            ('Matches', Match),
        ]
        if not keep_players:
            targets.append(('Players', Player))

        counts = {label: model.objects.count() for label, model in targets}

        self.stdout.write("Records to delete:")
        self.stdout.write("-" * 60)
        for label, count in counts.items():
            self.stdout.write(f"  {label}: {count}")
        self.stdout.write("")

        if dry_run:
            self.stdout.write(f"Would delete {sum(counts.values())} records in total")
            self.stdout.write(self.style.WARNING("DRY-RUN COMPLETE. Run with --confirm to delete"))
            return

        with transaction.atomic():
            for label, model in targets:
                self.stdout.write(f"Deleting {label}...")
                model.objects.all().delete()

        self.stdout.write("")
        self.stdout.write(self.style.SUCCESS(f"Deleted {sum(counts.values())} records"))
        if keep_players:
            self.stdout.write(self.style.WARNING("Players kept"))
        self.stdout.write("=" * 60)
