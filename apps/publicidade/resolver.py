"""
Decide o que renderizar em cada espaço de anúncio.

As configurações chegam num AdSettingsSnapshot carregado uma vez por
requisição (services.load_ad_settings) e passado explicitamente ao resolver.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional

from django.conf import settings
from django.utils.html import format_html
from django.utils.safestring import mark_safe

from apps.noticias.utils.imagens import get_valid_image_url
from .models import AdSetting

KIND_PLACEHOLDER = 'placeholder'
KIND_ADSENSE = 'adsense'
KIND_NONE = 'none'
KIND_CUSTOM_HTML = 'custom_html'
KIND_CUSTOM_IMAGE = 'custom_image'


@dataclass
class AdSettingsSnapshot:
    """Mapa slot_id -> AdSetting; loaded=False representa 'ainda carregando'"""

    slots: Dict[str, AdSetting] = field(default_factory=dict)
    loaded: bool = True

    @classmethod
    def loading(cls):
        return cls(slots={}, loaded=False)

    def get(self, slot_key):
        return self.slots.get(slot_key)


@dataclass
class ResolvedAd:
    slot_key: str
    kind: str
    ad_slot_id: Optional[str] = None
    custom_code: Optional[str] = None
    image_url: Optional[str] = None
    link_url: Optional[str] = None

    def render(self, ad_format='auto', full_width_responsive=True):
        if self.kind == KIND_PLACEHOLDER:
            return mark_safe('<div class="ad-placeholder" style="min-height:100px"></div>')

        if self.kind == KIND_ADSENSE:
            return format_html(
                '<div class="adsense-container"><ins class="adsbygoogle" style="display:block" '
                'data-ad-client="{}" data-ad-slot="{}" data-ad-format="{}" '
                'data-full-width-responsive="{}"></ins></div>',
                settings.ADSENSE_CLIENT_ID, self.ad_slot_id, ad_format,
                'true' if full_width_responsive else 'false'
            )

        if self.kind == KIND_CUSTOM_HTML:
            # Código colado pelo administrador, renderizado como está
            return mark_safe(self.custom_code)

        if self.kind == KIND_CUSTOM_IMAGE:
            content = format_html(
                '<div class="ad-custom"><img src="{}" alt="Anuncio" width="800" height="250" />'
                '<span class="ad-label">Publicidad</span></div>',
                self.image_url
            )
            if self.link_url:
                return format_html(
                    '<a href="{}" target="_blank" rel="noopener noreferrer">{}</a>',
                    self.link_url, content
                )
            return content

        return ''


def default_ad_slot_id(slot_key):
    return settings.ADSENSE_SLOTS.get(slot_key)


def resolve_ad(slot_key, snapshot):
    """
    Ordem de resolução:
    carregando -> placeholder; sem configuração -> AdSense padrão do slot;
    inativo -> nada; custom -> HTML, senão imagem, senão nada;
    adsense -> AdSense padrão do slot.
    """
    if not snapshot.loaded:
        return ResolvedAd(slot_key=slot_key, kind=KIND_PLACEHOLDER)

    setting = snapshot.get(slot_key)
    if setting is None:
        return ResolvedAd(slot_key=slot_key, kind=KIND_ADSENSE, ad_slot_id=default_ad_slot_id(slot_key))

    if not setting.is_active:
        return ResolvedAd(slot_key=slot_key, kind=KIND_NONE)

    if setting.type == AdSetting.TYPE_CUSTOM:
        if setting.custom_code:
            return ResolvedAd(slot_key=slot_key, kind=KIND_CUSTOM_HTML, custom_code=setting.custom_code)
        if setting.custom_image_url:
            return ResolvedAd(
                slot_key=slot_key,
                kind=KIND_CUSTOM_IMAGE,
                image_url=get_valid_image_url(setting.custom_image_url),
                link_url=setting.custom_link_url or None,
            )
        return ResolvedAd(slot_key=slot_key, kind=KIND_NONE)

    return ResolvedAd(slot_key=slot_key, kind=KIND_ADSENSE, ad_slot_id=default_ad_slot_id(slot_key))
