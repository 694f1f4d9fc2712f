from django.contrib import admin

from .models import AdSetting
from .services import invalidate_ad_settings_cache


@admin.register(AdSetting)
class AdSettingAdmin(admin.ModelAdmin):
    list_display = ("slot_id", "type", "is_active", "updated_at")
    list_filter = ("type", "is_active")
    ordering = ("slot_id",)
    readonly_fields = ("created_at", "updated_at")

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        invalidate_ad_settings_cache()

    def delete_model(self, request, obj):
        super().delete_model(request, obj)
        invalidate_ad_settings_cache()
