import logging

from django.conf import settings
from django.core.cache import cache
from django.db import DatabaseError

from apps.core.results import ErrorKind, OperationResult
from .models import AdSetting
from .resolver import AdSettingsSnapshot

logger = logging.getLogger(__name__)

AD_SETTINGS_CACHE_KEY = 'publicidade:ad_settings'

UPSERT_FIELDS = ('type', 'custom_image_url', 'custom_link_url', 'custom_code', 'is_active')


def load_ad_settings():
    """
    Carrega todas as configurações num snapshot (cache de AD_SETTINGS_CACHE_TIMEOUT).
    Se o banco falhar, devolve snapshot vazio: todos os slots caem no AdSense padrão.
    """
    cached = cache.get(AD_SETTINGS_CACHE_KEY)
    if cached is not None:
        return AdSettingsSnapshot(slots=cached)

    try:
        settings_map = {setting.slot_id: setting for setting in AdSetting.objects.all()}
    except DatabaseError as e:
        logger.error(f"Erro ao carregar configurações de anúncios: {str(e)}")
        return AdSettingsSnapshot(slots={})

    cache.set(AD_SETTINGS_CACHE_KEY, settings_map, settings.AD_SETTINGS_CACHE_TIMEOUT)
    return AdSettingsSnapshot(slots=settings_map)


def invalidate_ad_settings_cache():
    cache.delete(AD_SETTINGS_CACHE_KEY)


def upsert_ad_setting(slot_id, data):
    """Cria ou atualiza a configuração do slot (uma linha por slot)"""
    if slot_id not in AdSetting.slot_keys():
        return OperationResult.fail(ErrorKind.NOT_FOUND, 'Espacio publicitario no encontrado.')

    defaults = {field: data[field] for field in UPSERT_FIELDS if field in data}
    try:
        setting, created = AdSetting.objects.update_or_create(slot_id=slot_id, defaults=defaults)
    except DatabaseError as e:
        logger.error(f"Erro ao salvar anúncio {slot_id}: {str(e)}")
        return OperationResult.fail(ErrorKind.UPSTREAM_FAILURE, 'Error al guardar la configuración.')

    invalidate_ad_settings_cache()
    logger.info(f"Anúncio {slot_id} {'criado' if created else 'atualizado'} ({setting.type})")
    return OperationResult.ok(setting)
