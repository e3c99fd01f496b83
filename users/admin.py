from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from .models import User

@admin.register(User)
class CustomUserAdmin(UserAdmin):
    list_display = ('username', 'phone', 'name', 'is_staff', 'date_joined')
    list_filter = ('is_staff', 'is_superuser', 'is_active')
    search_fields = ('username', 'phone', 'name')
    fieldsets = UserAdmin.fieldsets + (
        ('Player', {'fields': ('phone', 'name', 'avatar_url', 'supabase_id')}),
    )
    add_fieldsets = UserAdmin.add_fieldsets + (
        ('Player', {'fields': ('phone', 'name')}),
    )
