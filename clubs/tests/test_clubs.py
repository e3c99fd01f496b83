import json
import tempfile
from io import StringIO

from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from clubs.models import Club, District
from clubs.utils import slugify_club_name, make_slug_unique


class SlugUtilsTestCase(TestCase):
    def test_slug_folds_accents(self):
        self.assertEqual(slugify_club_name("Clube Ténis Porto"), "clube-tenis-porto")
        self.assertEqual(slugify_club_name("  Padel  Açores!  "), "padel-acores")

    def test_make_slug_unique_appends_counter(self):
        existing = {"the-campus", "the-campus-2"}
        self.assertEqual(make_slug_unique("the-campus", existing), "the-campus-3")
        self.assertEqual(make_slug_unique("vilamoura", existing), "vilamoura")


class ClubApiTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.porto, _ = District.objects.update_or_create(
            id="porto", defaults={"name": "Porto", "display_order": 1}
        )
        self.faro, _ = District.objects.update_or_create(
            id="faro", defaults={"name": "Faro (Algarve)", "display_order": 18}
        )

        self.campus = Club.objects.create(
            name="The Campus",
            slug="the-campus",
            city="Almancil",
            address="Estrada da Quinta do Lago",
            district=self.faro,
            latitude="37.0352",
            longitude="-8.0245",
        )
        self.porto_club = Club.objects.create(
            name="Porto Padel Center",
            slug="porto-padel-center",
            city="Porto",
            district=self.porto,
        )
        self.inactive = Club.objects.create(
            name="Closed Club",
            slug="closed-club",
            city="Porto",
            district=self.porto,
            active=False,
        )

    def test_list_only_active_clubs(self):
        resp = self.client.get(reverse("club-list"))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        names = [c["name"] for c in resp.json()]
        self.assertIn("The Campus", names)
        self.assertNotIn("Closed Club", names, "Inactive clubs must not be listed")

    def test_search_matches_city(self):
        resp = self.client.get(reverse("club-list"), {"q": "almancil"})
        names = [c["name"] for c in resp.json()]
        self.assertEqual(names, ["The Campus"])

    def test_filter_by_district(self):
        resp = self.client.get(reverse("club-list"), {"district": "porto"})
        names = [c["name"] for c in resp.json()]
        self.assertEqual(names, ["Porto Padel Center"])

    def test_by_district_follows_display_order(self):
        resp = self.client.get(reverse("club-by-district"))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        district_ids = [group["district"]["id"] for group in resp.json()]
        self.assertEqual(district_ids[:2], ["porto", "faro"])

    def test_detail_hides_inactive(self):
        resp = self.client.get(reverse("club-detail", args=[self.campus.id]))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.json()["district_name"], "Faro (Algarve)")

        resp = self.client.get(reverse("club-detail", args=[self.inactive.id]))
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)


class ImportClubsCommandTestCase(TestCase):
    def setUp(self):
        District.objects.update_or_create(id="faro", defaults={"name": "Faro (Algarve)", "display_order": 18})
        Club.objects.create(name="The Campus", slug="the-campus", google_place_id="place-1")

    def _write(self, records):
        handle = tempfile.NamedTemporaryFile("w", suffix=".json", delete=False, encoding="utf-8")
        json.dump(records, handle)
        handle.close()
        return handle.name

    def test_import_inserts_updates_and_skips_invalid(self):
        path = self._write([
            {"name": "The Campus", "google_place_id": "place-1", "city": "Almancil", "district_id": "faro"},
            {"name": "The Campus", "slug": "the-campus", "google_place_id": "place-2"},
            {"name": "", "slug": "nameless"},
            {"name": "Bad Coords", "latitude": 120},
        ])

        out = StringIO()
        call_command("import_clubs", path, stdout=out)

        self.assertEqual(Club.objects.count(), 2)
        updated = Club.objects.get(google_place_id="place-1")
        self.assertEqual(updated.city, "Almancil")
        self.assertEqual(updated.district_id, "faro")

        inserted = Club.objects.get(google_place_id="place-2")
        self.assertEqual(inserted.slug, "the-campus-2")
        self.assertIn("Validation errors: 2", out.getvalue())
