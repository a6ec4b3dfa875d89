from django.contrib import admin
from .models import ThemeSettings


@admin.register(ThemeSettings)
class ThemeSettingsAdmin(admin.ModelAdmin):
    list_display = ("updated_at", "home_banner", "login_popup", "breadcrumb_separator", "pager_quantity")
    list_filter = ("home_banner", "login_popup")
    readonly_fields = ("created_at", "updated_at")
