from unittest.mock import patch

import pytest
from django.db import IntegrityError, transaction

from apps.core.results import ErrorKind
from apps.videos import services
from apps.videos.models import LiveVideo

pytestmark = pytest.mark.django_db


def make_video(title='Noticiero', video_id='vid0000001', **kwargs):
    return LiveVideo.objects.create(title=title, youtube_url=f'https://youtu.be/{video_id}', **kwargs)


def test_model_derives_id_thumbnail_and_canonical_url():
    video = make_video(video_id='abc123XYZ_')
    assert video.youtube_video_id == 'abc123XYZ_'
    assert video.thumbnail_url == 'https://img.youtube.com/vi/abc123XYZ_/maxresdefault.jpg'
    assert video.youtube_url == 'https://www.youtube.com/watch?v=abc123XYZ_'


def test_create_rejects_invalid_url_without_persisting(admin_user):
    result = services.create_live_video({'title': 'Vivo', 'youtube_url': 'https://vimeo.com/1'}, admin_user)
    assert not result.success
    assert result.error_kind == ErrorKind.VALIDATION
    assert not LiveVideo.objects.exists()


def test_create_enabled_disables_the_others(admin_user):
    first = make_video(is_enabled=True)

    result = services.create_live_video(
        {'title': 'Nuevo', 'youtube_url': 'https://youtu.be/abc123XYZ_', 'is_enabled': True}, admin_user
    )

    assert result.success
    assert result.data.created_by == admin_user
    first.refresh_from_db()
    assert first.is_enabled is False
    assert list(LiveVideo.objects.filter(is_enabled=True)) == [result.data]


def test_enable_leaves_exactly_one_enabled():
    videos = [make_video(title=f'Video {n}', video_id=f'vid000000{n}') for n in range(3)]
    services.enable_live_video(videos[0].pk)

    result = services.enable_live_video(videos[2].pk)

    assert result.success
    enabled = [video for video in services.get_all_live_videos().data if video.is_enabled]
    assert [video.pk for video in enabled] == [videos[2].pk]
    assert services.get_current_live_video().data.pk == videos[2].pk


def test_enable_missing_video_is_not_found():
    result = services.enable_live_video(999)
    assert result.error_kind == ErrorKind.NOT_FOUND


def test_database_rejects_second_enabled_row():
    make_video(is_enabled=True)
    with pytest.raises(IntegrityError):
        with transaction.atomic():
            LiveVideo.objects.create(
                title='Otro', youtube_url='https://youtu.be/vid0000009', is_enabled=True
            )


def test_enable_conflict_is_reported():
    video = make_video()
    with patch.object(services, '_disable_others', side_effect=IntegrityError('duplicate key')):
        result = services.enable_live_video(video.pk)
    assert not result.success
    assert result.error_kind == ErrorKind.CONFLICT


def test_update_validates_and_renormalises_url():
    video = make_video()

    invalid = services.update_live_video(video.pk, {'youtube_url': 'https://example.com/video'})
    assert invalid.error_kind == ErrorKind.VALIDATION

    result = services.update_live_video(video.pk, {'youtube_url': 'https://www.youtube.com/live/newid12345'})
    assert result.success
    video.refresh_from_db()
    assert video.youtube_video_id == 'newid12345'
    assert video.thumbnail_url.endswith('/newid12345/maxresdefault.jpg')


def test_update_to_enabled_disables_the_others():
    first = make_video(is_enabled=True)
    second = make_video(video_id='vid0000002')

    result = services.update_live_video(second.pk, {'is_enabled': True})

    assert result.success
    first.refresh_from_db()
    assert first.is_enabled is False
    assert LiveVideo.objects.get(is_enabled=True) == second


def test_delete_and_disable_all():
    video = make_video(is_enabled=True)
    make_video(video_id='vid0000002')

    assert services.disable_all_live_videos().data == 1
    assert services.get_current_live_video().data is None

    assert services.delete_live_video(video.pk).success
    assert services.delete_live_video(video.pk).error_kind == ErrorKind.NOT_FOUND


# ===== API =====

def test_public_current_video(api_client):
    assert api_client.get('/api/videos/ao-vivo/').json() == {'video': None}

    video = make_video(is_enabled=True)
    data = api_client.get('/api/videos/ao-vivo/').json()['video']
    assert data['id'] == video.pk
    assert data['embed_url'] == 'https://www.youtube.com/embed/vid0000001?rel=0&modestbranding=1'


def test_public_detail_only_for_enabled_video(api_client):
    disabled = make_video()
    assert api_client.get(f'/api/videos/{disabled.pk}/').status_code == 404

    services.enable_live_video(disabled.pk)
    response = api_client.get(f'/api/videos/{disabled.pk}/')
    assert response.status_code == 200
    assert 'autoplay=1' in response.json()['video']['embed_url']


def test_admin_create_and_enable_flow(publicista_client):
    response = publicista_client.post('/api/admin/videos/', {
        'title': 'Transmisión en vivo',
        'youtube_url': 'https://youtu.be/abc123XYZ_',
    }, format='json')
    assert response.status_code == 201
    video = response.json()['video']
    assert video['youtube_video_id'] == 'abc123XYZ_'
    assert video['thumbnail_url'] == 'https://img.youtube.com/vi/abc123XYZ_/maxresdefault.jpg'
    assert video['is_enabled'] is False
    assert video['is_live'] is False
    assert video['live_hint'] is True

    response = publicista_client.post(f"/api/admin/videos/{video['id']}/habilitar/")
    assert response.status_code == 200
    assert response.json()['video']['is_enabled'] is True

    response = publicista_client.post('/api/admin/videos/desabilitar-todos/')
    assert response.json() == {'success': True, 'disabled': 1}


def test_admin_invalid_url_is_400(admin_client):
    response = admin_client.post('/api/admin/videos/', {
        'title': 'Vivo', 'youtube_url': 'https://vimeo.com/1'
    }, format='json')
    assert response.status_code == 400
    assert response.json()['error_kind'] == 'validation'


def test_admin_patch_and_delete(admin_client):
    video = make_video()

    response = admin_client.patch(f'/api/admin/videos/{video.pk}/', {'title': 'Editado'}, format='json')
    assert response.status_code == 200
    video.refresh_from_db()
    assert video.title == 'Editado'
    assert video.is_enabled is False

    assert admin_client.delete(f'/api/admin/videos/{video.pk}/').status_code == 204
    assert admin_client.get(f'/api/admin/videos/{video.pk}/').status_code == 404


def test_admin_routes_require_login(api_client):
    assert api_client.get('/api/admin/videos/').status_code == 401


def test_create_without_is_live_keeps_it_false(admin_user):
    result = services.create_live_video(
        {'title': 'Resumen de actualidad semanal', 'youtube_url': 'https://youtu.be/abc123XYZ_'}, admin_user
    )
    assert result.success
    assert result.data.is_live is False

    result = services.create_live_video(
        {'title': 'Transmisión en vivo', 'youtube_url': 'https://youtu.be/vid0000002'}, admin_user
    )
    assert result.success
    assert result.data.is_live is False
