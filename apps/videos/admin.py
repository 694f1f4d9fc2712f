from django.contrib import admin, messages
from django.utils.html import format_html

from .models import LiveVideo
from .services import enable_live_video, disable_all_live_videos


def habilitar_video(modeladmin, request, queryset):
    if queryset.count() != 1:
        messages.error(request, "Selecione exatamente um vídeo para habilitar")
        return
    result = enable_live_video(queryset.first().pk)
    if result.success:
        messages.info(request, f'Vídeo "{result.data.title}" habilitado')
    else:
        messages.error(request, result.error)

habilitar_video.short_description = "Habilitar vídeo selecionado (desabilita os outros)"


def desabilitar_todos(modeladmin, request, queryset):
    result = disable_all_live_videos()
    if result.success:
        messages.info(request, f'{result.data} vídeo(s) desabilitado(s)')
    else:
        messages.error(request, result.error)

desabilitar_todos.short_description = "Desabilitar todos os vídeos"


@admin.register(LiveVideo)
class LiveVideoAdmin(admin.ModelAdmin):
    list_display = ("title", "miniatura", "youtube_video_id", "is_live", "is_enabled", "created_by", "created_at")
    list_filter = ("is_enabled", "is_live", "created_at")
    search_fields = ("title", "description", "youtube_video_id")
    ordering = ("-created_at",)
    readonly_fields = ("youtube_video_id", "thumbnail_url", "created_at", "updated_at")
    actions = [habilitar_video, desabilitar_todos]

    def miniatura(self, obj):
        if not obj.thumbnail_url:
            return ""
        return format_html('<img src="{}" style="height:40px" />', obj.thumbnail_url)
    miniatura.short_description = "Miniatura"

    def save_model(self, request, obj, form, change):
        if not change and obj.created_by_id is None:
            obj.created_by = request.user
        if obj.is_enabled:
            LiveVideo.objects.filter(is_enabled=True).exclude(pk=obj.pk).update(is_enabled=False)
        super().save_model(request, obj, form, change)
