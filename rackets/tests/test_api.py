from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from matches.tests.helpers import make_user
from rackets.models import Racket


def make_racket(brand, model, power_bias, maneuverability, feel, **kwargs):
    return Racket.objects.create(
        brand=brand,
        model=model,
        power_bias=power_bias,
        maneuverability=maneuverability,
        feel=feel,
        **kwargs,
    )


class RacketApiTestCase(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=make_user("alice", phone="+351910000001"))

        self.control = make_racket("Bullpadel", "Hack Control", 1, 2, 1, shape="round")
        self.power = make_racket("Nox", "AT10", 3, 3, 3, shape="diamond")
        self.power_2 = make_racket("Adidas", "Metalbone", 3, 3, 3)
        make_racket("Head", "Retired", 1, 1, 1, active=False)

    def test_list_and_filters(self):
        resp = self.client.get(reverse("racket-list"))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(len(resp.json()), 3)

        resp = self.client.get(reverse("racket-list"), {"power_bias": 3})
        self.assertEqual({r["model"] for r in resp.json()}, {"AT10", "Metalbone"})
        self.assertEqual(resp.json()[0]["cell_code"], "X3Y3Z3")

        resp = self.client.get(reverse("racket-list"), {"feel": 7})
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

    def test_requires_auth(self):
        self.client.force_authenticate(user=None)
        resp = self.client.get(reverse("racket-list"))
        self.assertEqual(resp.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_cells_counts_only_active(self):
        resp = self.client.get(reverse("racket-cells"))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        counts = {c["cell_code"]: c["count"] for c in resp.json()["cells"]}
        self.assertEqual(counts, {"X1Y2Z1": 1, "X3Y3Z3": 2})

    def test_populated_cell(self):
        resp = self.client.get(reverse("racket-cell-detail", args=["X3Y3Z3"]))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        data = resp.json()
        self.assertEqual(data["persona"]["name"], "Power Cannon")
        self.assertEqual(len(data["rackets"]), 2)
        self.assertEqual(data["nearest_cells"], [])
        self.assertEqual(len(data["adjacent_cells"]), 3)

    def test_empty_cell_suggests_nearest(self):
        resp = self.client.get(reverse("racket-cell-detail", args=["X1Y1Z1"]))
        data = resp.json()
        self.assertEqual(data["rackets"], [])
        self.assertEqual(data["nearest_cells"][0]["cell_code"], "X1Y2Z1")
        self.assertEqual(data["nearest_cells"][0]["persona"], "Soft Touch Artist")

    def test_invalid_cell(self):
        resp = self.client.get(reverse("racket-cell-detail", args=["X4Y1Z1"]))
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

    def test_recommend(self):
        resp = self.client.post(
            reverse("racket-recommend"), {"power": 1, "weight": 2, "feel": 1}, format="json"
        )
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        data = resp.json()
        self.assertEqual(data["cell_code"], "X1Y2Z1")
        self.assertEqual(data["rackets"][0]["model"], "Hack Control")

        resp = self.client.post(
            reverse("racket-recommend"), {"power": 0, "weight": 2, "feel": 1}, format="json"
        )
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
