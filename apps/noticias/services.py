import logging
import time
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.core.files.storage import default_storage
from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import F
from django.utils import timezone
from django.utils.crypto import get_random_string

from apps.core.results import ErrorKind, OperationResult
from .models import Article, NewsletterSubscriber

logger = logging.getLogger(__name__)


# ===== Contador de visualizações =====

@dataclass
class ViewCount:
    views: Optional[int]
    # False quando o incremento caiu no fallback leitura+escrita,
    # que pode perder contagens com acessos concorrentes
    atomic: bool


def _atomic_increment(article_id):
    """UPDATE articles SET views = views + 1; devolve linhas afetadas"""
    return Article.objects.filter(pk=article_id).update(views=F('views') + 1)


def _manual_increment(article_id):
    current = Article.objects.filter(pk=article_id).values_list('views', flat=True).first()
    if current is None:
        return None
    new_value = current + 1
    Article.objects.filter(pk=article_id).update(views=new_value)
    return new_value


def increment_article_views(article_id):
    """
    Incrementa as visualizações de um artigo (melhor esforço).
    Tenta o incremento atômico; se o banco recusar, faz leitura+escrita.
    Nunca lança exceção: o resultado diz se contou e se foi atômico.
    """
    try:
        with transaction.atomic():
            updated = _atomic_increment(article_id)
    except DatabaseError as e:
        logger.warning(f"Incremento atômico falhou para o artigo {article_id}, usando fallback: {str(e)}")
    else:
        if not updated:
            return OperationResult.fail(ErrorKind.NOT_FOUND, 'Artículo no encontrado.')
        views = Article.objects.filter(pk=article_id).values_list('views', flat=True).first()
        return OperationResult.ok(ViewCount(views=views, atomic=True))

    try:
        views = _manual_increment(article_id)
    except DatabaseError as e:
        logger.error(f"Erro ao incrementar visualizações do artigo {article_id}: {str(e)}")
        return OperationResult.fail(ErrorKind.UPSTREAM_FAILURE, 'No se pudo registrar la visita.')

    if views is None:
        return OperationResult.fail(ErrorKind.NOT_FOUND, 'Artículo no encontrado.')
    return OperationResult.ok(ViewCount(views=views, atomic=False))


# ===== Newsletter =====

def subscribe_newsletter(email, source='website'):
    try:
        with transaction.atomic():
            subscriber = NewsletterSubscriber.objects.create(
                email=email.strip().lower(),
                status='active',
                confirmed_at=timezone.now(),
                source=source,
            )
    except IntegrityError:
        return OperationResult.fail(ErrorKind.CONFLICT, 'Este email ya está suscrito a nuestro boletín.')
    except DatabaseError as e:
        logger.error(f"Erro ao inscrever na newsletter: {str(e)}")
        return OperationResult.fail(
            ErrorKind.UPSTREAM_FAILURE, 'Error al procesar la suscripción. Inténtalo de nuevo.'
        )

    logger.info(f"Nova inscrição na newsletter: {subscriber.email}")
    return OperationResult.ok(subscriber)


# ===== Upload de imagens =====

def upload_image(uploaded_file, folder=None):
    """
    Salva a imagem no storage padrão e devolve a URL pública.
    Nome: <pasta>/<timestamp>-<aleatório>.<extensão>
    """
    content_type = getattr(uploaded_file, 'content_type', '') or ''
    if not content_type.startswith('image/'):
        return OperationResult.fail(
            ErrorKind.VALIDATION, 'El archivo debe ser una imagen (JPG, PNG, GIF, WebP).'
        )

    max_size = settings.IMAGE_UPLOAD_MAX_SIZE
    if uploaded_file.size > max_size:
        return OperationResult.fail(
            ErrorKind.VALIDATION, f'El archivo no puede ser mayor a {max_size // (1024 * 1024)}MB.'
        )

    folder = folder or settings.IMAGE_UPLOAD_FOLDER
    extension = uploaded_file.name.rsplit('.', 1)[-1].lower() if '.' in uploaded_file.name else 'jpg'
    file_name = f"{folder}/{int(time.time() * 1000)}-{get_random_string(13).lower()}.{extension}"

    try:
        path = default_storage.save(file_name, uploaded_file)
    except OSError as e:
        logger.error(f"Erro no upload de imagem: {str(e)}")
        return OperationResult.fail(ErrorKind.UPSTREAM_FAILURE, 'Error al subir el archivo.')

    return OperationResult.ok({'path': path, 'url': default_storage.url(path)})


def delete_image(path):
    """Remove uma imagem enviada; False se não existir"""
    if not path or not default_storage.exists(path):
        return False
    default_storage.delete(path)
    return True
