from unittest.mock import patch

import pytest
from django.db import DatabaseError

from apps.core.results import ErrorKind
from apps.noticias.models import Article
from apps.noticias.services import increment_article_views
from apps.noticias.tasks import incrementar_visualizacoes_task

pytestmark = pytest.mark.django_db


def test_atomic_increment(make_article):
    article = make_article(views=7)

    result = increment_article_views(article.id)

    assert result.success
    assert result.data.views == 8
    assert result.data.atomic is True


def test_fallback_when_atomic_update_fails(make_article):
    article = make_article(views=7)

    with patch('apps.noticias.services._atomic_increment', side_effect=DatabaseError('function does not exist')):
        result = increment_article_views(article.id)

    assert result.success
    assert result.data.atomic is False
    article.refresh_from_db()
    assert article.views == 8


def test_both_steps_failing_is_reported_not_raised(make_article):
    article = make_article(views=7)

    with patch('apps.noticias.services._atomic_increment', side_effect=DatabaseError('boom')), \
            patch('apps.noticias.services._manual_increment', side_effect=DatabaseError('boom')):
        result = increment_article_views(article.id)

    assert not result.success
    assert result.error_kind == ErrorKind.UPSTREAM_FAILURE
    article.refresh_from_db()
    assert article.views == 7


def test_missing_article_is_not_found():
    assert increment_article_views(12345).error_kind == ErrorKind.NOT_FOUND


def test_task_wraps_service(make_article):
    article = make_article(views=0)
    assert incrementar_visualizacoes_task.delay(article.id).get() == {'success': True, 'views': 1, 'atomic': True}


def test_endpoint_counts_once_per_session(api_client, make_article):
    article = make_article(views=0)
    url = f'/api/noticias/{article.id}/visualizacao/'

    first = api_client.post(url)
    second = api_client.post(url)

    assert first.json() == {'success': True, 'counted': True}
    assert second.json() == {'success': True, 'counted': False}
    article.refresh_from_db()
    assert article.views == 1


def test_endpoint_rejects_unpublished_article(api_client, make_article):
    draft = make_article(status=Article.STATUS_DRAFT)
    assert api_client.post(f'/api/noticias/{draft.id}/visualizacao/').status_code == 404
