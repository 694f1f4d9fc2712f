from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

import logging

from apps.authentication.permissions import IsEditor
from .models import AdSetting
from .resolver import resolve_ad
from .serializers import AdSettingSerializer, AdSettingUpsertSerializer, ResolvedAdSerializer
from .services import load_ad_settings, upsert_ad_setting

logger = logging.getLogger(__name__)


def slot_not_found_response(slot_key):
    logger.warning(f"Slot de anúncio desconhecido: {slot_key}")
    return Response({
        'success': False,
        'message': 'Espacio publicitario no encontrado.',
        'error_kind': 'not_found'
    }, status=status.HTTP_404_NOT_FOUND)


class AdSlotsView(APIView):
    """
    Todos os espaços já resolvidos
    GET /api/anuncios/
    """
    permission_classes = [AllowAny]

    def get(self, request):
        snapshot = load_ad_settings()
        resolved = [resolve_ad(slot_key, snapshot) for slot_key in AdSetting.slot_keys()]
        return Response({
            'client_id': settings.ADSENSE_CLIENT_ID,
            'slots': {ad.slot_key: ResolvedAdSerializer(ad).data for ad in resolved}
        })


class AdSlotDetailView(APIView):
    """GET /api/anuncios/<slot>/"""
    permission_classes = [AllowAny]

    def get(self, request, slot_key):
        if slot_key not in AdSetting.slot_keys():
            return slot_not_found_response(slot_key)
        ad = resolve_ad(slot_key, load_ad_settings())
        return Response(ResolvedAdSerializer(ad).data)


# ===== Painel administrativo =====

class AdSettingsAdminView(APIView):
    """
    Configuração de todos os slots; slots sem linha aparecem com o padrão (AdSense ativo)
    GET /api/admin/anuncios/
    """
    permission_classes = [IsEditor]

    def get(self, request):
        existing = {setting.slot_id: setting for setting in AdSetting.objects.all()}
        rows = [existing.get(slot_key) or AdSetting(slot_id=slot_key) for slot_key in AdSetting.slot_keys()]
        return Response({'results': AdSettingSerializer(rows, many=True).data})


class AdSettingUpsertView(APIView):
    """PUT /api/admin/anuncios/<slot>/"""
    permission_classes = [IsEditor]

    def put(self, request, slot_key):
        if slot_key not in AdSetting.slot_keys():
            return slot_not_found_response(slot_key)

        serializer = AdSettingUpsertSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({
                'success': False,
                'message': 'Datos inválidos.',
                'error_kind': 'validation',
                'errors': serializer.errors
            }, status=status.HTTP_400_BAD_REQUEST)

        result = upsert_ad_setting(slot_key, serializer.validated_data)
        if not result.success:
            return result.error_response()

        logger.info(f"Anúncio {slot_key} salvo por {request.user.email}")
        return Response({
            'success': True,
            'setting': AdSettingSerializer(result.data).data
        })
