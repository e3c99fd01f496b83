from django.core.management.base import BaseCommand

from matches.recurring import create_recurring_matches


class Command(BaseCommand):
    help = "Creates the next occurrence of every recurring match series that needs one"

    def handle(self, *args, **options):
        results = create_recurring_matches()
        self.stdout.write(self.style.SUCCESS(
            "Processed {processed} series: {created} created, {skipped} skipped, {errors} errors".format(**results)
        ))
