from django.conf import settings

from core.views import CronJobView
from matches.recurring import create_recurring_matches
from matches.sync import synchronizer


class RecurringMatchesCronView(CronJobView):
    """GET /api/cron/recurring/"""

    def run(self):
        return create_recurring_matches()


class RepairCountsCronView(CronJobView):
    """GET /api/cron/repair-counts/"""

    def run(self):
        report = synchronizer.repair_all(sample_size=settings.PARTICIPANT_REPAIR_SAMPLE_SIZE)
        return report.as_dict()
