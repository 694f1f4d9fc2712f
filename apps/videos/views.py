from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

import logging

from apps.authentication.permissions import IsEditor
from .models import LiveVideo
from .serializers import LiveVideoSerializer, PublicLiveVideoSerializer, LiveVideoInputSerializer
from . import services

logger = logging.getLogger(__name__)


def invalid_input_response(serializer):
    return Response({
        'success': False,
        'message': 'Datos inválidos.',
        'error_kind': 'validation',
        'errors': serializer.errors
    }, status=status.HTTP_400_BAD_REQUEST)


class CurrentLiveVideoView(APIView):
    """
    Vídeo ao vivo habilitado (ou null)
    GET /api/videos/ao-vivo/
    """
    permission_classes = [AllowAny]

    def get(self, request):
        result = services.get_current_live_video()
        if not result.success:
            # O site segue sem o botão de ao vivo
            return Response({'video': None})

        video = result.data
        return Response({
            'video': PublicLiveVideoSerializer(video).data if video else None
        })


class LiveVideoDetailView(APIView):
    """
    Página do player: apenas vídeos habilitados
    GET /api/videos/<pk>/
    """
    permission_classes = [AllowAny]

    def get(self, request, pk):
        video = LiveVideo.objects.filter(pk=pk, is_enabled=True).first()
        if video is None:
            return Response({
                'success': False,
                'message': 'Video no disponible.'
            }, status=status.HTTP_404_NOT_FOUND)

        serializer = PublicLiveVideoSerializer(video, context={'autoplay': True})
        return Response({'video': serializer.data})


# ===== Painel administrativo =====

class LiveVideoAdminListView(APIView):
    """
    GET /api/admin/videos/
    POST /api/admin/videos/
    """
    permission_classes = [IsEditor]

    def get(self, request):
        result = services.get_all_live_videos()
        if not result.success:
            return result.error_response()
        return Response({'results': LiveVideoSerializer(result.data, many=True).data})

    def post(self, request):
        serializer = LiveVideoInputSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer)

        result = services.create_live_video(serializer.validated_data, request.user)
        if not result.success:
            return result.error_response()

        logger.info(f"Vídeo {result.data.pk} criado por {request.user.email}")
        return Response({
            'success': True,
            'video': LiveVideoSerializer(result.data).data
        }, status=status.HTTP_201_CREATED)


class LiveVideoAdminDetailView(APIView):
    """
    GET | PATCH | DELETE /api/admin/videos/<pk>/
    """
    permission_classes = [IsEditor]

    def get(self, request, pk):
        video = LiveVideo.objects.filter(pk=pk).first()
        if video is None:
            return Response({
                'success': False,
                'message': 'Video no encontrado.'
            }, status=status.HTTP_404_NOT_FOUND)
        return Response({'video': LiveVideoSerializer(video).data})

    def patch(self, request, pk):
        serializer = LiveVideoInputSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return invalid_input_response(serializer)

        # Só os campos enviados; defaults do serializer não entram
        data = {field: value for field, value in serializer.validated_data.items() if field in request.data}
        result = services.update_live_video(pk, data)
        if not result.success:
            return result.error_response()
        return Response({
            'success': True,
            'video': LiveVideoSerializer(result.data).data
        })

    def delete(self, request, pk):
        result = services.delete_live_video(pk)
        if not result.success:
            return result.error_response()
        logger.info(f"Vídeo {pk} excluído por {request.user.email}")
        return Response(status=status.HTTP_204_NO_CONTENT)


class LiveVideoEnableView(APIView):
    """POST /api/admin/videos/<pk>/habilitar/"""
    permission_classes = [IsEditor]

    def post(self, request, pk):
        result = services.enable_live_video(pk)
        if not result.success:
            return result.error_response()
        return Response({
            'success': True,
            'video': LiveVideoSerializer(result.data).data
        })


class LiveVideoDisableAllView(APIView):
    """POST /api/admin/videos/desabilitar-todos/"""
    permission_classes = [IsEditor]

    def post(self, request):
        result = services.disable_all_live_videos()
        if not result.success:
            return result.error_response()
        return Response({'success': True, 'disabled': result.data})
