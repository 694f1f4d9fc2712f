from rest_framework import serializers
from .models import AdSetting


class AdSettingSerializer(serializers.ModelSerializer):
    configured = serializers.SerializerMethodField()

    class Meta:
        model = AdSetting
        fields = [
            'slot_id', 'type', 'custom_image_url', 'custom_link_url',
            'custom_code', 'is_active', 'configured', 'updated_at'
        ]

    def get_configured(self, obj):
        return obj.pk is not None


class AdSettingUpsertSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=AdSetting.TYPE_CHOICES)
    custom_image_url = serializers.URLField(max_length=500, required=False, allow_blank=True, allow_null=True)
    custom_link_url = serializers.URLField(max_length=500, required=False, allow_blank=True, allow_null=True)
    custom_code = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    is_active = serializers.BooleanField(required=False, default=True)

    def validate(self, attrs):
        # Campos vazios viram NULL
        for field in ('custom_image_url', 'custom_link_url', 'custom_code'):
            if field in attrs and not attrs[field]:
                attrs[field] = None
        return attrs


class ResolvedAdSerializer(serializers.Serializer):
    slot_key = serializers.CharField()
    kind = serializers.CharField()
    ad_slot_id = serializers.CharField(allow_null=True)
    image_url = serializers.CharField(allow_null=True)
    link_url = serializers.CharField(allow_null=True)
    html = serializers.SerializerMethodField()

    def get_html(self, obj):
        return str(obj.render())
