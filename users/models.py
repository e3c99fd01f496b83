# users/models.py
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    # Phone is the login identity (Supabase phone OTP); staff accounts may omit it
    phone = models.CharField(max_length=20, unique=True, blank=True, null=True)
    name = models.CharField(max_length=50, blank=True, null=True)
    avatar_url = models.URLField(max_length=1024, blank=True, null=True)

    # auth.users id on the Supabase side
    supabase_id = models.UUIDField(unique=True, blank=True, null=True)

    updated_at = models.DateTimeField(auto_now=True)

    @property
    def display_name(self):
        return self.name or self.phone or self.username

    def __str__(self):
        return self.display_name
