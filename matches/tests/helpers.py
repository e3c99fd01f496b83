from datetime import timedelta

from django.utils import timezone

from users.models import User
from matches import services


def make_user(username, phone=None, name=None):
    return User.objects.create_user(
        username=username,
        password="pass",
        phone=phone,
        name=name or username.title(),
    )


def make_match(creator, days_ahead=1, **kwargs):
    kwargs.setdefault("location", "The Campus")
    kwargs.setdefault("date_time", timezone.now() + timedelta(days=days_ahead))
    return services.create_match(creator, **kwargs)
