from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q

from .utils.youtube import extract_video_id, get_video_info, normalize_url


class LiveVideo(models.Model):
    title = models.CharField(max_length=255, verbose_name="Título")
    youtube_url = models.URLField(max_length=500, verbose_name="URL do YouTube")
    youtube_video_id = models.CharField(max_length=64, editable=False, verbose_name="ID do vídeo")
    description = models.TextField(blank=True, default='', verbose_name="Descrição")
    is_live = models.BooleanField(default=False, verbose_name="Ao vivo")
    is_enabled = models.BooleanField(default=False, verbose_name="Habilitado")
    thumbnail_url = models.URLField(max_length=500, blank=True, editable=False, verbose_name="Miniatura")
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True,
        related_name="live_videos", verbose_name="Criado por"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Vídeo ao vivo"
        verbose_name_plural = "Vídeos ao vivo"
        db_table = 'live_videos'
        ordering = ['-created_at']
        constraints = [
            # No máximo um vídeo habilitado por vez
            models.UniqueConstraint(
                fields=['is_enabled'],
                condition=Q(is_enabled=True),
                name='live_videos_single_enabled',
            ),
        ]

    def __str__(self):
        return self.title

    def clean(self):
        if not extract_video_id(self.youtube_url):
            raise ValidationError({'youtube_url': 'URL de YouTube no válida.'})

    def save(self, *args, **kwargs):
        # ID e miniatura são gravados junto com a URL, nunca na leitura
        info = get_video_info(self.youtube_url)
        if info:
            self.youtube_url = normalize_url(self.youtube_url)
            self.youtube_video_id = info['video_id']
            self.thumbnail_url = info['thumbnail_url']
        super().save(*args, **kwargs)
