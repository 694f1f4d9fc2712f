from rest_framework import serializers
from .models import LiveVideo
from .utils.youtube import build_embed_url, is_likely_live_stream


class LiveVideoSerializer(serializers.ModelSerializer):
    created_by = serializers.SerializerMethodField()
    live_hint = serializers.SerializerMethodField()

    class Meta:
        model = LiveVideo
        fields = [
            'id', 'title', 'youtube_url', 'youtube_video_id', 'description',
            'is_live', 'live_hint', 'is_enabled', 'thumbnail_url', 'created_by',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['youtube_video_id', 'thumbnail_url', 'created_at', 'updated_at']

    def get_created_by(self, obj):
        if obj.created_by_id is None:
            return None
        return {'id': obj.created_by_id, 'full_name': obj.created_by.full_name}

    def get_live_hint(self, obj):
        # Só sugestão para o painel; is_live continua sendo o valor do editor
        return is_likely_live_stream(obj.title, obj.description)


class PublicLiveVideoSerializer(serializers.ModelSerializer):
    """Versão pública, com a URL de embed pronta para o player"""

    embed_url = serializers.SerializerMethodField()

    class Meta:
        model = LiveVideo
        fields = [
            'id', 'title', 'youtube_url', 'youtube_video_id', 'description',
            'is_live', 'thumbnail_url', 'embed_url', 'updated_at'
        ]

    def get_embed_url(self, obj):
        autoplay = self.context.get('autoplay', False)
        return build_embed_url(obj.youtube_video_id, autoplay=autoplay, mute=autoplay)


class LiveVideoInputSerializer(serializers.Serializer):
    """Entrada do painel; a URL é validada pelo serviço"""

    title = serializers.CharField(max_length=255)
    youtube_url = serializers.CharField(max_length=500)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    is_live = serializers.BooleanField(required=False, default=False)
    is_enabled = serializers.BooleanField(required=False, default=False)
