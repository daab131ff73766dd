"""
Loads the bundled sample trails into the database.

    python manage.py seed_trails [--clear]
"""
import logging

from django.core.management.base import BaseCommand
from django.db import transaction

from trails.models import Trail
from trails.sample_trails import SAMPLE_TRAILS

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Create or update the sample trails (idempotent, keyed by trail name)"

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help="Delete every existing trail before seeding",
        )

    def handle(self, *args, **options):
        created_count = 0
        with transaction.atomic():
            if options['clear']:
                deleted, _ = Trail.objects.all().delete()
                logger.info(f"Deleted {deleted} rows before seeding")

            for data in SAMPLE_TRAILS:
                defaults = {key: value for key, value in data.items() if key != 'name'}
                _, created = Trail.objects.update_or_create(name=data['name'], defaults=defaults)
                if created:
                    created_count += 1

        self.stdout.write(self.style.SUCCESS(
            f"Seeded {len(SAMPLE_TRAILS)} trails ({created_count} new)"
        ))
