from django.contrib import admin

from .models import Racket


@admin.register(Racket)
class RacketAdmin(admin.ModelAdmin):
    list_display = ('brand', 'model', 'cell_code', 'skill_level', 'price_tier', 'active')
    list_filter = ('active', 'brand', 'power_bias', 'maneuverability', 'feel', 'shape')
    search_fields = ('brand', 'model')
