from datetime import timedelta

import pytest
from django.core.cache import cache
from django.utils import timezone
from rest_framework.test import APIClient

from apps.authentication.models import User
from apps.noticias.models import Article, Category


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        username='admin@portal.test',
        email='admin@portal.test',
        password='segredo123',
        role=User.ROLE_ADMIN,
    )


@pytest.fixture
def publicista(db):
    return User.objects.create_user(
        username='publicista@portal.test',
        email='publicista@portal.test',
        password='segredo123',
        role=User.ROLE_PUBLICISTA,
    )


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def publicista_client(publicista):
    client = APIClient()
    client.force_authenticate(user=publicista)
    return client


@pytest.fixture
def category(db):
    return Category.objects.create(name='Política', color='#1d4ed8')


@pytest.fixture
def make_article(db, category):
    def _make(title='Artículo de prueba', status=Article.STATUS_PUBLISHED, **kwargs):
        kwargs.setdefault('category', category)
        kwargs.setdefault('content', '<p>Contenido</p>')
        if status == Article.STATUS_PUBLISHED:
            kwargs.setdefault('published_at', timezone.now() - timedelta(hours=1))
        return Article.objects.create(title=title, status=status, **kwargs)
    return _make
