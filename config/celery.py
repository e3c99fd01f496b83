# config/celery.py
import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

app = Celery("padelparrot")

# Read CELERY_* keys from Django settings (broker, beat schedule, timezone)
app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()
