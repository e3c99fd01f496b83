# users/urls.py

from django.urls import path

from .views import AvatarUploadView, MeView, PublicProfileView, UserStatsView

urlpatterns = [
    path('me/', MeView.as_view(), name='user-me'),
    path('me/avatar/', AvatarUploadView.as_view(), name='user-avatar'),
    path('me/stats/', UserStatsView.as_view(), name='user-stats'),
    path('<int:user_id>/', PublicProfileView.as_view(), name='user-public-profile'),
]
