from functools import partial
import logging

from django.db import transaction
from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver

from .models import Participant
from .sync import ParticipantChange, ParticipantSnapshot, synchronizer

logger = logging.getLogger("padel.matches")


@receiver(post_save, sender=Participant)
def sync_count_on_participant_save(sender, instance, created, **kwargs):
    """Recount the match once the participant insert/update is committed."""
    change = ParticipantChange(
        kind=ParticipantChange.KIND_INSERT if created else ParticipantChange.KIND_UPDATE,
        new=ParticipantSnapshot.of(instance),
    )
    transaction.on_commit(partial(synchronizer.on_participant_change, change))


@receiver(post_delete, sender=Participant)
def sync_count_on_participant_delete(sender, instance, **kwargs):
    """Recount the match once the participant delete is committed."""
    change = ParticipantChange(
        kind=ParticipantChange.KIND_DELETE,
        old=ParticipantSnapshot.of(instance),
    )
    transaction.on_commit(partial(synchronizer.on_participant_change, change))
