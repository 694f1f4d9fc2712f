from unittest.mock import patch

import pytest

from apps.noticias.utils.imagens import (
    DEFAULT_IMAGE_URL,
    FALLBACK_IMAGES,
    get_category_placeholder,
    get_valid_image_url,
    is_valid_image_url,
)


@pytest.mark.parametrize("url", [
    "https://cdn.portal.com.do/fotos/portada.jpg",
    "https://cdn.portal.com.do/fotos/portada.JPEG",
    "http://media.portal.com.do/a/b/logo.svg",
    "https://images.unsplash.com/photo-1504711434969?w=800",
    "https://picsum.photos/800/600",
    "http://localhost/foto.jpg",
    "http://localhost:8000/media/articles/1700000000000-abc.jpg",
])
def test_accepted_urls_are_returned_unchanged(url):
    assert is_valid_image_url(url)
    assert get_valid_image_url(url) == url


@pytest.mark.parametrize("url", [
    "ftp://cdn.portal.com.do/foto.jpg",
    "javascript:alert(1)",
    "cdn.portal.com.do/foto.jpg",
    "https://share.google/abc123",
    "https://photos.google.com/photo/foto.jpg",
    "https://lh3.googleusercontent.com/foto.png",
    "https://drive.google.com/file/d/123/view",
    "https://photos.app.goo.gl/xyz",
    "https://example.com/foto.jpg",
    "https://cdn.portal.com.do/pagina.html",
    "http://[::1/foto.jpg",
])
def test_rejected_urls_fall_back(url):
    assert not is_valid_image_url(url)
    assert get_valid_image_url(url) in FALLBACK_IMAGES


def test_rejected_url_logs_warning():
    with patch("apps.noticias.utils.imagens.logger") as logger:
        get_valid_image_url("https://share.google/abc123")
    logger.warning.assert_called_once()
    assert "share.google" in logger.warning.call_args[0][0]


@pytest.mark.parametrize("value", [None, "", "   "])
def test_empty_input_returns_default_image(value):
    assert get_valid_image_url(value) == DEFAULT_IMAGE_URL


def test_url_is_stripped_before_validation():
    assert get_valid_image_url("  https://cdn.portal.com.do/foto.png  ") == "https://cdn.portal.com.do/foto.png"


def test_category_placeholder():
    assert get_category_placeholder("Deportes") != DEFAULT_IMAGE_URL
    assert get_category_placeholder("Desconocida") == DEFAULT_IMAGE_URL
    assert get_category_placeholder(None) == DEFAULT_IMAGE_URL


def test_local_media_upload_is_not_replaced():
    url = "http://localhost:8000/media/articles/1700000000000-abc.jpg"
    with patch("apps.noticias.utils.imagens.logger") as logger:
        assert get_valid_image_url(url) == url
    logger.warning.assert_not_called()
