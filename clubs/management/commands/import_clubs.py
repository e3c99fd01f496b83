import json
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from clubs.models import Club, District
from clubs.utils import slugify_club_name, make_slug_unique, validate_club_payload

IMPORTABLE_FIELDS = [
    "name", "website", "phone", "email", "address", "city", "postal_code",
    "country", "latitude", "longitude", "google_place_id", "num_courts",
    "court_type", "has_lighting", "amenities", "description", "image_url",
    "source", "verified",
]


class Command(BaseCommand):
    help = "Imports padel clubs from a JSON file, deduplicating by Google place id"

    def add_arguments(self, parser):
        parser.add_argument("path", help="JSON file with a list of club records")
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Validate and report the plan without writing",
        )

    def handle(self, *args, **options):
        path = Path(options["path"])
        if not path.exists():
            raise CommandError(f"File not found: {path}")

        try:
            records = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise CommandError(f"Invalid JSON in {path}: {e}")

        if not isinstance(records, list):
            raise CommandError("Expected a JSON list of clubs")

        self.stdout.write(f"🎾 Found {len(records)} clubs to import")

        existing_by_place_id = {
            c.google_place_id: c
            for c in Club.objects.exclude(google_place_id__isnull=True)
        }
        existing_slugs = set(Club.objects.values_list("slug", flat=True))
        district_ids = set(District.objects.values_list("id", flat=True))

        to_insert, to_update, invalid = [], [], []

        for record in records:
            errors = validate_club_payload(record)
            if errors:
                invalid.append((record.get("name") or "<unnamed>", errors))
                continue

            data = {f: record[f] for f in IMPORTABLE_FIELDS if f in record}
            district_id = record.get("district_id")
            data["district_id"] = district_id if district_id in district_ids else None

            place_id = record.get("google_place_id")
            if place_id and place_id in existing_by_place_id:
                to_update.append((existing_by_place_id[place_id], data))
                continue

            slug = record.get("slug") or slugify_club_name(record["name"])
            unique_slug = make_slug_unique(slug, existing_slugs)
            if unique_slug != slug:
                self.stdout.write(f"  ⚠️  Slug collision for \"{record['name']}\": {slug} -> {unique_slug}")
            existing_slugs.add(unique_slug)
            data["slug"] = unique_slug

            to_insert.append(data)

        self.stdout.write(f"  New clubs to insert: {len(to_insert)}")
        self.stdout.write(f"  Existing clubs to update: {len(to_update)}")
        self.stdout.write(f"  Validation errors: {len(invalid)}")
        for name, errors in invalid[:5]:
            self.stdout.write(f"    {name}: {', '.join(errors)}")

        if options["dry_run"]:
            self.stdout.write("Dry run, nothing written.")
            return

        with transaction.atomic():
            for data in to_insert:
                Club.objects.create(**data)
            for club, data in to_update:
                for attr, value in data.items():
                    setattr(club, attr, value)
                club.save()

        self.stdout.write(self.style.SUCCESS(
            f"✅ Import complete: {len(to_insert)} inserted, {len(to_update)} updated, "
            f"{len(invalid)} invalid"
        ))
