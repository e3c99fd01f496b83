# clubs/views.py
from django.db.models import Q
from django.shortcuts import get_object_or_404
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import Club, District
from .serializers import ClubSerializer, DistrictSerializer


def active_clubs():
    return Club.objects.filter(active=True).select_related("district")


class ClubListView(APIView):
    """
    GET /api/clubs/?q=<search>&district=<district_id>
    Active clubs ordered by name.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        qs = active_clubs()

        query = (request.query_params.get("q") or "").strip()
        if query:
            qs = qs.filter(
                Q(name__icontains=query)
                | Q(city__icontains=query)
                | Q(address__icontains=query)
            )

        district_id = request.query_params.get("district")
        if district_id:
            qs = qs.filter(district_id=district_id)

        serializer = ClubSerializer(qs.order_by("name"), many=True)
        return Response(serializer.data)


class ClubsByDistrictView(APIView):
    """
    GET /api/clubs/by-district/
    Active clubs grouped by district, districts in display order.
    Clubs without a district are returned last under "other".
    """
    permission_classes = [AllowAny]

    def get(self, request):
        clubs = list(active_clubs().order_by("name"))

        grouped = []
        for district in District.objects.order_by("display_order", "name"):
            district_clubs = [c for c in clubs if c.district_id == district.id]
            if not district_clubs:
                continue
            grouped.append({
                "district": DistrictSerializer(district).data,
                "clubs": ClubSerializer(district_clubs, many=True).data,
            })

        unassigned = [c for c in clubs if c.district_id is None]
        if unassigned:
            grouped.append({
                "district": {"id": "other", "name": "Other", "display_order": 999},
                "clubs": ClubSerializer(unassigned, many=True).data,
            })

        return Response(grouped)


class DistrictListView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        districts = District.objects.order_by("display_order", "name")
        return Response(DistrictSerializer(districts, many=True).data)


class ClubDetailView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, club_id):
        club = get_object_or_404(active_clubs(), pk=club_id)
        return Response(ClubSerializer(club).data)
