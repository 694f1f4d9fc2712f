import logging

from celery import shared_task

from .services import increment_article_views

logger = logging.getLogger(__name__)


# Task para registrar a visita fora do ciclo da requisição
@shared_task
def incrementar_visualizacoes_task(article_id):
    result = increment_article_views(article_id)
    if not result.success:
        logger.warning(f"Visita não registrada para o artigo {article_id}: {result.error}")
        return {'success': False, 'error_kind': result.error_kind.value}

    if not result.data.atomic:
        logger.info(f"Visita do artigo {article_id} registrada pelo fallback não atômico")
    return {'success': True, 'views': result.data.views, 'atomic': result.data.atomic}
