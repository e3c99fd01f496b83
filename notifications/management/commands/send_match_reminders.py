from django.core.management.base import BaseCommand

from notifications.reminders import send_match_reminders


class Command(BaseCommand):
    help = "Sends SMS reminders for matches starting in about 24 hours and 90 minutes"

    def handle(self, *args, **options):
        results = send_match_reminders()
        for notification_type, stats in results.items():
            self.stdout.write(self.style.SUCCESS(
                "{type}: {sent} sent, {failed} failed, {skipped} skipped".format(
                    type=notification_type, **stats
                )
            ))
