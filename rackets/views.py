# rackets/views.py
from django.db.models import Count
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .cube import Cell, adjacent_cells, find_nearest_cells, parse_cell_code
from .models import Racket
from .personas import AXIS_LABELS, get_persona
from .serializers import QuizAnswersSerializer, RacketSerializer

AXIS_FILTERS = ("power_bias", "maneuverability", "feel")


def active_rackets():
    return Racket.objects.filter(active=True)


def rackets_in(cell: Cell):
    return active_rackets().filter(
        power_bias=cell.power_bias,
        maneuverability=cell.maneuverability,
        feel=cell.feel,
    )


def populated_cells():
    """[(Cell, racket count)] for every cell holding at least one active racket."""
    rows = (
        active_rackets()
        .values(*AXIS_FILTERS)
        .annotate(count=Count("id"))
        .order_by(*AXIS_FILTERS)
    )
    return [
        (Cell(row["power_bias"], row["maneuverability"], row["feel"]), row["count"])
        for row in rows
    ]


def cell_payload(cell: Cell) -> dict:
    """
    Persona and rackets for one cell. An empty cell also returns the nearest
    populated cells so the client can suggest where to look.
    """
    rackets = list(rackets_in(cell))
    payload = {
        "cell_code": cell.code,
        "coordinates": cell._asdict(),
        "persona": get_persona(cell).as_dict(),
        "rackets": RacketSerializer(rackets, many=True).data,
        "adjacent_cells": adjacent_cells(cell),
        "nearest_cells": [],
    }
    if not rackets:
        nearest = find_nearest_cells(cell, [c for c, _ in populated_cells()])
        payload["nearest_cells"] = [
            {"cell_code": c.code, "persona": get_persona(c).name} for c in nearest
        ]
    return payload


class RacketListView(APIView):
    """
    GET /api/rackets/?power_bias=1&maneuverability=2&feel=3
    Active rackets, optionally filtered on any axis.
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        qs = active_rackets()

        for axis in AXIS_FILTERS:
            value = request.query_params.get(axis)
            if value is None:
                continue
            if value not in ("1", "2", "3"):
                return Response(
                    {"error": f"{axis} must be 1, 2 or 3"},
                    status=status.HTTP_400_BAD_REQUEST,
                )
            qs = qs.filter(**{axis: int(value)})

        return Response(RacketSerializer(qs, many=True).data)


class CubeCellListView(APIView):
    """GET /api/rackets/cells/  racket counts per populated cell."""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response({
            "axes": AXIS_LABELS,
            "cells": [
                {
                    "cell_code": cell.code,
                    "coordinates": cell._asdict(),
                    "persona": get_persona(cell).name,
                    "count": count,
                }
                for cell, count in populated_cells()
            ],
        })


class CubeCellDetailView(APIView):
    """GET /api/rackets/cells/<code>/"""
    permission_classes = [IsAuthenticated]

    def get(self, request, code):
        cell = parse_cell_code(code)
        if cell is None:
            return Response(
                {"error": "Invalid cell code, expected e.g. X1Y2Z3"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response(cell_payload(cell))


class RecommendView(APIView):
    """
    POST /api/rackets/recommend/  {"power": 1..3, "weight": 1..3, "feel": 1..3}
    Maps quiz answers onto a cube cell.
    """
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = QuizAnswersSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        answers = serializer.validated_data

        cell = Cell(answers["power"], answers["weight"], answers["feel"])
        return Response(cell_payload(cell))
