from django.conf import settings
from django.core.management.base import BaseCommand

from matches.sync import synchronizer


class Command(BaseCommand):
    help = "Recomputes Match.current_players from joined participants and reports drift"

    def add_arguments(self, parser):
        parser.add_argument(
            "--sample-size",
            type=int,
            default=settings.PARTICIPANT_REPAIR_SAMPLE_SIZE,
            help="Maximum number of corrected matches to list",
        )
        parser.add_argument(
            "--check",
            action="store_true",
            help="Only list drifted matches, do not fix them",
        )

    def handle(self, *args, **options):
        if options["check"]:
            drifted = synchronizer.find_drift()
            for match in drifted[: options["sample_size"]]:
                self.stdout.write(
                    f"  {match.id}: stored={match.current_players} live={match.live_count}"
                )
            self.stdout.write(f"{drifted.count()} matches drifted")
            return

        report = synchronizer.repair_all(sample_size=options["sample_size"])

        for record in report.sample:
            self.stdout.write(
                f"  {record.match_id}: {record.previous_count} -> {record.corrected_count}"
            )
        self.stdout.write(self.style.SUCCESS(
            f"Checked {report.checked} matches, corrected {report.corrected}"
        ))
