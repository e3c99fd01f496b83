from django.contrib import admin

from .models import Match, Participant
from .sync import synchronizer


class ParticipantInline(admin.TabularInline):
    model = Participant
    extra = 0
    readonly_fields = ('joined_at',)


@admin.register(Match)
class MatchAdmin(admin.ModelAdmin):
    list_display = ('location', 'date_time', 'status', 'creator', 'current_players', 'max_players', 'is_public')
    list_filter = ('status', 'is_public', 'recurrence_type', 'date_time')
    search_fields = ('location', 'description', 'creator__phone', 'creator__name')
    date_hierarchy = 'date_time'
    readonly_fields = ('current_players', 'series_id', 'created_at', 'updated_at')
    inlines = [ParticipantInline]
    actions = ['recount_players']

    @admin.action(description="Recount players from participant rows")
    def recount_players(self, request, queryset):
        for match in queryset:
            synchronizer.recount(match.id)
        self.message_user(request, f"Recounted {queryset.count()} matches.")


@admin.register(Participant)
class ParticipantAdmin(admin.ModelAdmin):
    list_display = ('user', 'match', 'status', 'joined_at')
    list_filter = ('status',)
    search_fields = ('user__phone', 'user__name', 'match__location')
