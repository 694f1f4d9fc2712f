import pytest
from django.test import override_settings

from apps.noticias.utils.imagens import FALLBACK_IMAGES
from apps.publicidade.models import AdSetting
from apps.publicidade.resolver import (
    KIND_ADSENSE,
    KIND_CUSTOM_HTML,
    KIND_CUSTOM_IMAGE,
    KIND_NONE,
    KIND_PLACEHOLDER,
    AdSettingsSnapshot,
    resolve_ad,
)

SLOTS = {
    'HOME_HEADER': '1111111111',
    'HOME_SIDEBAR': '2222222222',
    'ARTICLE_TOP': '3333333333',
    'ARTICLE_BOTTOM': '4444444444',
}

pytestmark = pytest.mark.usefixtures('ad_settings')


@pytest.fixture
def ad_settings():
    with override_settings(ADSENSE_CLIENT_ID='ca-pub-1234', ADSENSE_SLOTS=SLOTS):
        yield


def snapshot_with(**kwargs):
    setting = AdSetting(slot_id='HOME_HEADER', **kwargs)
    return AdSettingsSnapshot(slots={'HOME_HEADER': setting})


def test_loading_snapshot_renders_placeholder():
    ad = resolve_ad('HOME_HEADER', AdSettingsSnapshot.loading())
    assert ad.kind == KIND_PLACEHOLDER
    assert 'ad-placeholder' in ad.render()


@pytest.mark.parametrize('slot_key', list(SLOTS))
def test_missing_row_falls_back_to_default_adsense_unit(slot_key):
    ad = resolve_ad(slot_key, AdSettingsSnapshot())
    assert ad.kind == KIND_ADSENSE
    assert ad.ad_slot_id == SLOTS[slot_key]
    html = ad.render()
    assert f'data-ad-slot="{SLOTS[slot_key]}"' in html
    assert 'data-ad-client="ca-pub-1234"' in html


@pytest.mark.parametrize('fields', [
    {'type': AdSetting.TYPE_ADSENSE},
    {'type': AdSetting.TYPE_CUSTOM, 'custom_code': '<div>promo</div>'},
    {'type': AdSetting.TYPE_CUSTOM, 'custom_image_url': 'https://cdn.portal.com.do/banner.png'},
])
def test_inactive_row_renders_nothing(fields):
    ad = resolve_ad('HOME_HEADER', snapshot_with(is_active=False, **fields))
    assert ad.kind == KIND_NONE
    assert ad.render() == ''


def test_custom_code_wins_over_image():
    ad = resolve_ad('HOME_HEADER', snapshot_with(
        type=AdSetting.TYPE_CUSTOM,
        custom_code='<div class="promo">Promo</div>',
        custom_image_url='https://cdn.portal.com.do/banner.png',
    ))
    assert ad.kind == KIND_CUSTOM_HTML
    assert ad.render() == '<div class="promo">Promo</div>'


def test_custom_image_with_link():
    ad = resolve_ad('HOME_HEADER', snapshot_with(
        type=AdSetting.TYPE_CUSTOM,
        custom_image_url='https://cdn.portal.com.do/banner.png',
        custom_link_url='https://anunciante.com.do/',
    ))
    assert ad.kind == KIND_CUSTOM_IMAGE
    html = ad.render()
    assert html.startswith('<a href="https://anunciante.com.do/"')
    assert 'src="https://cdn.portal.com.do/banner.png"' in html
    assert 'Publicidad' in html


def test_custom_image_without_link():
    ad = resolve_ad('HOME_HEADER', snapshot_with(
        type=AdSetting.TYPE_CUSTOM,
        custom_image_url='https://cdn.portal.com.do/banner.png',
    ))
    assert ad.kind == KIND_CUSTOM_IMAGE
    assert ad.link_url is None
    assert not ad.render().startswith('<a ')


def test_custom_without_content_renders_nothing():
    ad = resolve_ad('HOME_HEADER', snapshot_with(type=AdSetting.TYPE_CUSTOM))
    assert ad.kind == KIND_NONE


def test_active_adsense_row_uses_slot_default_unit():
    ad = resolve_ad('HOME_HEADER', snapshot_with(type=AdSetting.TYPE_ADSENSE))
    assert ad.kind == KIND_ADSENSE
    assert ad.ad_slot_id == SLOTS['HOME_HEADER']


def test_custom_image_goes_through_image_validator():
    ad = resolve_ad('HOME_HEADER', snapshot_with(
        type=AdSetting.TYPE_CUSTOM,
        custom_image_url='https://photos.google.com/share/banner',
    ))
    assert ad.kind == KIND_CUSTOM_IMAGE
    assert ad.image_url in FALLBACK_IMAGES
