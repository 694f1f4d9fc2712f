"""
Operações sobre vídeos ao vivo.

Regra central: no máximo um vídeo habilitado. "Desabilitar todos, habilitar
um" roda numa única transação e o índice único parcial
(live_videos_single_enabled) faz o banco recusar um segundo habilitado
concorrente; essa recusa volta como ErrorKind.CONFLICT.
"""
import logging

from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone

from apps.core.results import ErrorKind, OperationResult
from .models import LiveVideo
from .utils.youtube import extract_video_id

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ('title', 'youtube_url', 'description', 'is_live', 'is_enabled')

INVALID_URL_MESSAGE = 'URL de YouTube no válida.'
CONFLICT_MESSAGE = 'Ya existe otro video habilitado. Inténtalo de nuevo.'


def _disable_others(exclude_pk=None):
    queryset = LiveVideo.objects.filter(is_enabled=True)
    if exclude_pk is not None:
        queryset = queryset.exclude(pk=exclude_pk)
    return queryset.update(is_enabled=False, updated_at=timezone.now())


def get_current_live_video():
    """Vídeo habilitado no momento (data=None se não houver)"""
    try:
        video = LiveVideo.objects.filter(is_enabled=True).order_by('-updated_at').first()
    except DatabaseError as e:
        logger.warning(f"Erro ao buscar vídeo ao vivo: {str(e)}")
        return OperationResult.fail(ErrorKind.UPSTREAM_FAILURE, 'No se pudo obtener el video en vivo.')
    return OperationResult.ok(video)


def get_all_live_videos():
    try:
        videos = list(LiveVideo.objects.select_related('created_by').order_by('-created_at'))
    except DatabaseError as e:
        logger.error(f"Erro ao listar vídeos ao vivo: {str(e)}")
        return OperationResult.fail(ErrorKind.UPSTREAM_FAILURE, 'No se pudieron obtener los videos.')
    return OperationResult.ok(videos)


def create_live_video(data, user=None):
    youtube_url = (data.get('youtube_url') or '').strip()
    if not extract_video_id(youtube_url):
        return OperationResult.fail(ErrorKind.VALIDATION, INVALID_URL_MESSAGE)

    title = (data.get('title') or '').strip()
    if not title:
        return OperationResult.fail(ErrorKind.VALIDATION, 'El título es obligatorio.')

    description = data.get('description') or ''
    is_live = bool(data.get('is_live', False))

    is_enabled = bool(data.get('is_enabled', False))
    try:
        with transaction.atomic():
            if is_enabled:
                _disable_others()
            video = LiveVideo.objects.create(
                title=title,
                youtube_url=youtube_url,
                description=description,
                is_live=is_live,
                is_enabled=is_enabled,
                created_by=user if user is not None and user.is_authenticated else None,
            )
    except IntegrityError as e:
        logger.warning(f"Conflito ao criar vídeo habilitado: {str(e)}")
        return OperationResult.fail(ErrorKind.CONFLICT, CONFLICT_MESSAGE)
    except DatabaseError as e:
        logger.error(f"Erro ao criar vídeo ao vivo: {str(e)}")
        return OperationResult.fail(ErrorKind.UPSTREAM_FAILURE, 'Error al crear el video.')

    logger.info(f"Vídeo ao vivo criado: {video.title} ({video.youtube_video_id})")
    return OperationResult.ok(video)


def update_live_video(pk, data):
    if 'youtube_url' in data and not extract_video_id(data.get('youtube_url') or ''):
        return OperationResult.fail(ErrorKind.VALIDATION, INVALID_URL_MESSAGE)
    if 'title' in data and not (data.get('title') or '').strip():
        return OperationResult.fail(ErrorKind.VALIDATION, 'El título es obligatorio.')

    try:
        with transaction.atomic():
            video = LiveVideo.objects.select_for_update().filter(pk=pk).first()
            if video is None:
                return OperationResult.fail(ErrorKind.NOT_FOUND, 'Video no encontrado.')

            for field in EDITABLE_FIELDS:
                if field in data:
                    value = data[field]
                    if field in ('title', 'youtube_url'):
                        value = value.strip()
                    setattr(video, field, value)

            if video.is_enabled:
                _disable_others(exclude_pk=video.pk)
            video.save()
    except IntegrityError as e:
        logger.warning(f"Conflito ao atualizar vídeo {pk}: {str(e)}")
        return OperationResult.fail(ErrorKind.CONFLICT, CONFLICT_MESSAGE)
    except DatabaseError as e:
        logger.error(f"Erro ao atualizar vídeo {pk}: {str(e)}")
        return OperationResult.fail(ErrorKind.UPSTREAM_FAILURE, 'Error al actualizar el video.')

    return OperationResult.ok(video)


def delete_live_video(pk):
    try:
        deleted, _ = LiveVideo.objects.filter(pk=pk).delete()
    except DatabaseError as e:
        logger.error(f"Erro ao excluir vídeo {pk}: {str(e)}")
        return OperationResult.fail(ErrorKind.UPSTREAM_FAILURE, 'Error al eliminar el video.')

    if not deleted:
        return OperationResult.fail(ErrorKind.NOT_FOUND, 'Video no encontrado.')
    logger.info(f"Vídeo ao vivo {pk} excluído")
    return OperationResult.ok()


def enable_live_video(pk):
    """Habilita o vídeo pk e desabilita todos os outros, na mesma transação"""
    try:
        with transaction.atomic():
            if not LiveVideo.objects.filter(pk=pk).exists():
                return OperationResult.fail(ErrorKind.NOT_FOUND, 'Video no encontrado.')
            _disable_others(exclude_pk=pk)
            LiveVideo.objects.filter(pk=pk).update(is_enabled=True, updated_at=timezone.now())
    except IntegrityError as e:
        logger.warning(f"Conflito ao habilitar vídeo {pk}: {str(e)}")
        return OperationResult.fail(ErrorKind.CONFLICT, CONFLICT_MESSAGE)
    except DatabaseError as e:
        logger.error(f"Erro ao habilitar vídeo {pk}: {str(e)}")
        return OperationResult.fail(ErrorKind.UPSTREAM_FAILURE, 'Error al habilitar el video.')

    logger.info(f"Vídeo ao vivo {pk} habilitado")
    return OperationResult.ok(LiveVideo.objects.get(pk=pk))


def disable_all_live_videos():
    try:
        count = _disable_others()
    except DatabaseError as e:
        logger.error(f"Erro ao desabilitar vídeos: {str(e)}")
        return OperationResult.fail(ErrorKind.UPSTREAM_FAILURE, 'Error al deshabilitar los videos.')
    return OperationResult.ok(count)
