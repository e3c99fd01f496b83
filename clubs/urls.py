# clubs/urls.py
from django.urls import path

from .views import ClubListView, ClubsByDistrictView, DistrictListView, ClubDetailView

urlpatterns = [
    path("", ClubListView.as_view(), name="club-list"),
    path("by-district/", ClubsByDistrictView.as_view(), name="club-by-district"),
    path("districts/", DistrictListView.as_view(), name="district-list"),
    path("<uuid:club_id>/", ClubDetailView.as_view(), name="club-detail"),
]
