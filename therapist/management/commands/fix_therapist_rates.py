# management/commands/fix_therapist_rates.py
"""
Management command to bring stored hourly rates within the credential caps
"""

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.core.exceptions import ValidationError

from therapist.services import RateCapService


class Command(BaseCommand):
    help = "Cap every therapist hourly rate at the maximum for its credential type"

    def handle(self, *args, **options):
        self.stdout.write(f"Rate caps: {settings.THERAPIST_RATE_CAPS}")
        try:
            fixed = RateCapService.cap_all_rates()
        except ValidationError as e:
            raise CommandError(f"Error fixing therapist rates: {'; '.join(e.messages)}")

        self.stdout.write(self.style.SUCCESS(f"Fixed {fixed} therapist rates"))
