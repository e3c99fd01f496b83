from django.urls import path

from .views import CubeCellDetailView, CubeCellListView, RacketListView, RecommendView

urlpatterns = [
    path("", RacketListView.as_view(), name="racket-list"),
    path("cells/", CubeCellListView.as_view(), name="racket-cells"),
    path("cells/<str:code>/", CubeCellDetailView.as_view(), name="racket-cell-detail"),
    path("recommend/", RecommendView.as_view(), name="racket-recommend"),
]
