import pytest

from apps.publicidade.models import AdSetting
from apps.publicidade.services import load_ad_settings, upsert_ad_setting

pytestmark = pytest.mark.django_db


def test_public_slots_resolve_every_slot(api_client):
    AdSetting.objects.create(slot_id='HOME_SIDEBAR', type=AdSetting.TYPE_ADSENSE, is_active=False)

    response = api_client.get('/api/anuncios/')

    assert response.status_code == 200
    slots = response.json()['slots']
    assert set(slots) == set(AdSetting.slot_keys())
    assert slots['HOME_SIDEBAR']['kind'] == 'none'
    assert slots['HOME_SIDEBAR']['html'] == ''
    assert slots['HOME_HEADER']['kind'] == 'adsense'


def test_unknown_slot_is_404(api_client):
    response = api_client.get('/api/anuncios/FOOTER/')
    assert response.status_code == 404
    assert response.json()['error_kind'] == 'not_found'


def test_admin_list_includes_defaults_for_missing_rows(admin_client):
    AdSetting.objects.create(slot_id='ARTICLE_TOP', type=AdSetting.TYPE_CUSTOM, custom_code='<b>x</b>')

    response = admin_client.get('/api/admin/anuncios/')

    assert response.status_code == 200
    rows = {row['slot_id']: row for row in response.json()['results']}
    assert len(rows) == 4
    assert rows['ARTICLE_TOP']['configured'] is True
    assert rows['ARTICLE_TOP']['type'] == 'custom'
    assert rows['HOME_HEADER']['configured'] is False
    assert rows['HOME_HEADER']['type'] == 'adsense'
    assert rows['HOME_HEADER']['is_active'] is True


def test_upsert_creates_then_updates_single_row(publicista_client):
    payload = {'type': 'custom', 'custom_image_url': 'https://cdn.portal.com.do/banner.png', 'is_active': True}
    response = publicista_client.put('/api/admin/anuncios/HOME_HEADER/', payload, format='json')
    assert response.status_code == 200
    assert response.json()['setting']['custom_image_url'] == payload['custom_image_url']

    response = publicista_client.put(
        '/api/admin/anuncios/HOME_HEADER/', {'type': 'adsense', 'is_active': False}, format='json'
    )
    assert response.status_code == 200
    assert AdSetting.objects.filter(slot_id='HOME_HEADER').count() == 1
    setting = AdSetting.objects.get(slot_id='HOME_HEADER')
    assert setting.type == 'adsense'
    assert setting.is_active is False


def test_upsert_rejects_unknown_slot_and_invalid_type(admin_client):
    assert admin_client.put('/api/admin/anuncios/FOOTER/', {'type': 'adsense'}, format='json').status_code == 404

    response = admin_client.put('/api/admin/anuncios/HOME_HEADER/', {'type': 'banner'}, format='json')
    assert response.status_code == 400
    assert not AdSetting.objects.exists()


def test_admin_routes_require_login(api_client):
    assert api_client.get('/api/admin/anuncios/').status_code == 401
    assert api_client.put('/api/admin/anuncios/HOME_HEADER/', {'type': 'adsense'}, format='json').status_code == 401


def test_upsert_invalidates_cached_snapshot():
    assert load_ad_settings().get('HOME_HEADER') is None

    result = upsert_ad_setting('HOME_HEADER', {'type': 'custom', 'custom_code': '<i>promo</i>'})

    assert result.success
    snapshot = load_ad_settings()
    assert snapshot.get('HOME_HEADER').custom_code == '<i>promo</i>'
