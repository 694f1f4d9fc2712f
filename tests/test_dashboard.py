import pytest

from apps.dashboard.views import change_percentage
from apps.noticias.models import Article

pytestmark = pytest.mark.django_db


def test_backend_status(api_client):
    response = api_client.get('/api/status/')
    assert response.status_code == 200
    data = response.json()['data']
    assert data['database_status'] == 'connected'
    assert 'videos' in data['apps']


def test_admin_statistics(publicista_client, make_article):
    make_article('Uno', views=10)
    make_article('Dos', views=5)
    make_article('Tres', status=Article.STATUS_DRAFT)

    response = publicista_client.get('/api/admin/estatisticas/')

    assert response.status_code == 200
    data = response.json()['data']
    assert data['total_articles'] == 3
    assert data['published_articles'] == 2
    assert data['draft_articles'] == 1
    assert data['total_views'] == 15
    assert len(data['recent_articles']) == 3
    # Sem artigos antigos não há base de comparação
    assert data['total_change_month'] == 0


def test_admin_statistics_requires_login(api_client):
    assert api_client.get('/api/admin/estatisticas/').status_code == 401


def test_change_percentage():
    assert change_percentage(12, 10) == 20
    assert change_percentage(5, 10) == -50
    assert change_percentage(5, 0) == 0
