from django.contrib import admin

from .models import NotificationLog, NotificationPreference, Subscription


@admin.register(Subscription)
class SubscriptionAdmin(admin.ModelAdmin):
    list_display = ('user', 'status', 'current_period_start', 'current_period_end')
    list_filter = ('status',)
    search_fields = ('user__phone', 'user__name', 'stripe_customer_id')


@admin.register(NotificationPreference)
class NotificationPreferenceAdmin(admin.ModelAdmin):
    list_display = ('user', 'day_before_enabled', 'ninety_min_before_enabled', 'updated_at')


@admin.register(NotificationLog)
class NotificationLogAdmin(admin.ModelAdmin):
    list_display = ('user', 'match', 'notification_type', 'status', 'sent_at')
    list_filter = ('notification_type', 'status')
    search_fields = ('user__phone', 'match__location')
    readonly_fields = ('sent_at',)
