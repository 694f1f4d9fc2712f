"""
Validação de URLs de imagem informadas pelos editores.

Links de compartilhamento (Google Photos, Drive, share.google) não apontam
para os bytes da imagem e quebram a renderização; nesses casos, e em qualquer
URL inválida, devolvemos uma imagem de fallback.
"""
import logging
import random
from urllib.parse import urlparse

from django.conf import settings

logger = logging.getLogger(__name__)

# Domínios conhecidos que não servem a imagem diretamente (host ou subdomínio)
BLOCKED_DOMAINS = (
    'share.google',
    'photos.google.com',
    'googleusercontent.com',
    'example.com',
    'invalid',
    'test',
)

# Trechos de URL problemáticos
BLOCKED_PATTERNS = (
    'share.google',
    'drive.google.com/file',
    'drive.google.com/open',
    'photos.app.goo.gl',
    'Xw8NSUkRYIbPyn0pP',
)

VALID_EXTENSIONS = ('.jpg', '.jpeg', '.png', '.webp', '.gif', '.svg')

DEFAULT_TRUSTED_HOSTS = ('unsplash.com', 'picsum.photos', 'via.placeholder.com')

FALLBACK_IMAGES = (
    'https://images.unsplash.com/photo-1586953208448-b95a79798f07?w=800&h=600&q=80',  # Notícias gerais
    'https://images.unsplash.com/photo-1504711434969-e33886168f5c?w=800&h=600&q=80',  # Jornalismo
    'https://images.unsplash.com/photo-1495020689067-958852a7765e?w=800&h=600&q=80',  # Atualidade
    'https://images.unsplash.com/photo-1585776245991-cf89dd7fc73a?w=800&h=600&q=80',  # Política
    'https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=800&h=600&q=80',  # Cultura
)

DEFAULT_IMAGE_URL = FALLBACK_IMAGES[0]

CATEGORY_PLACEHOLDERS = {
    'política': 'https://images.unsplash.com/photo-1529107386315-e1a2ed48a620?w=800&h=600&q=80',
    'deportes': 'https://images.unsplash.com/photo-1461896836934-ffe607ba8211?w=800&h=600&q=80',
    'tecnología': 'https://images.unsplash.com/photo-1518709268805-4e9042af2176?w=800&h=600&q=80',
    'economía': 'https://images.unsplash.com/photo-1611974789855-9c2a0a7236a3?w=800&h=600&q=80',
    'cultura': 'https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=800&h=600&q=80',
    'internacional': 'https://images.unsplash.com/photo-1446776653964-20c1d3a81b06?w=800&h=600&q=80',
    'salud': 'https://images.unsplash.com/photo-1559757148-5c350d0d3c56?w=800&h=600&q=80',
}


def _host_matches(hostname, domains):
    return any(hostname == domain or hostname.endswith('.' + domain) for domain in domains)


def _trusted_hosts():
    return tuple(getattr(settings, 'TRUSTED_IMAGE_HOSTS', DEFAULT_TRUSTED_HOSTS))


def is_valid_image_url(url):
    """True se a URL pode ir direto para o componente de imagem"""
    if any(pattern in url for pattern in BLOCKED_PATTERNS):
        return False

    try:
        parsed = urlparse(url)
        hostname = (parsed.hostname or '').lower()
    except ValueError:
        return False

    if parsed.scheme not in ('http', 'https') or not hostname:
        return False

    if _host_matches(hostname, BLOCKED_DOMAINS):
        return False

    has_valid_extension = parsed.path.lower().endswith(VALID_EXTENSIONS)
    return has_valid_extension or _host_matches(hostname, _trusted_hosts())


def get_random_fallback_image():
    return random.choice(FALLBACK_IMAGES)


def get_valid_image_url(url):
    """
    Valida e corrige URLs de imagens problemáticas.
    Sem URL devolve a imagem padrão; URL rejeitada devolve um fallback aleatório.
    """
    if not url or not url.strip():
        return DEFAULT_IMAGE_URL

    clean_url = url.strip()
    if not is_valid_image_url(clean_url):
        logger.warning(f"URL de imagem bloqueada: {clean_url}")
        return get_random_fallback_image()

    return clean_url


def get_category_placeholder(category_name=None):
    """Imagem placeholder de acordo com a categoria do artigo"""
    key = (category_name or 'general').lower()
    return CATEGORY_PLACEHOLDERS.get(key, DEFAULT_IMAGE_URL)
