from datetime import timedelta

from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model
from django.utils import timezone

from clubs.models import Club, District
from matches.models import Match
from matches import services
from matches.exceptions import MatchFull, AlreadyJoined

User = get_user_model()


class Command(BaseCommand):
    help = "Seeds the database with sample players, clubs and matches"

    def handle(self, *args, **options):
        self.stdout.write("🌱 Seeding data...")

        # 1. Ensure Users
        admin, _ = User.objects.get_or_create(username="admin", defaults={"name": "Admin", "is_staff": True, "is_superuser": True})
        if not admin.check_password("admin"):
            admin.set_password("admin")
            admin.save()

        players = []
        for username, name, phone in [
            ("alice", "Alice", "+351910000001"),
            ("bob", "Bob", "+351910000002"),
            ("carla", "Carla", "+351910000003"),
            ("duarte", "Duarte", "+351910000004"),
        ]:
            user, _ = User.objects.get_or_create(username=username, defaults={"name": name, "phone": phone})
            players.append(user)

        # 2. Clubs
        faro = District.objects.filter(pk="faro").first()
        campus, _ = Club.objects.get_or_create(
            slug="the-campus",
            defaults={
                "name": "The Campus",
                "city": "Almancil",
                "address": "Estrada da Quinta do Lago",
                "district": faro,
                "latitude": "37.0352",
                "longitude": "-8.0245",
                "num_courts": 6,
                "court_type": Club.COURT_OUTDOOR,
                "amenities": ["parking", "pro_shop", "cafe"],
                "source": "manual",
                "verified": True,
            },
        )
        self.stdout.write(f"Used Club: {campus.name}")

        # 3. Matches
        if Match.objects.filter(creator=players[0]).exists():
            self.stdout.write("Matches already seeded, skipping.")
            return

        start = (timezone.now() + timedelta(days=2)).replace(minute=0, second=0, microsecond=0)
        weekly = services.create_match(
            players[0],
            date_time=start,
            location=campus.name,
            club=campus,
            description="Friendly doubles, all levels welcome",
            is_public=True,
            recurrence_type=Match.RECURRENCE_WEEKLY,
            recurrence_end_date=start + timedelta(weeks=8),
        )
        private = services.create_match(
            players[1],
            date_time=start + timedelta(days=1, hours=2),
            location="Vilamoura Padel Club",
            duration_minutes=60,
        )

        for match, joiners in [(weekly, players[1:]), (private, players[2:3])]:
            for user in joiners:
                try:
                    services.join_match(match.id, user)
                except (MatchFull, AlreadyJoined) as e:
                    self.stdout.write(f"  skip join {user}: {e.detail}")

        self.stdout.write(self.style.SUCCESS("✅ Seed complete"))
