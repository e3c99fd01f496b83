from django.contrib import admin

from .models import Club, District


@admin.register(District)
class DistrictAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'display_order')
    ordering = ('display_order',)


@admin.register(Club)
class ClubAdmin(admin.ModelAdmin):
    list_display = ('name', 'city', 'district', 'court_type', 'num_courts', 'verified', 'active')
    list_filter = ('district', 'court_type', 'verified', 'active')
    search_fields = ('name', 'city', 'address', 'google_place_id')
    prepopulated_fields = {'slug': ('name',)}
