"""
Utilitários para links do YouTube.

Aceita os formatos watch?v=, youtu.be/, embed/, v/ e live/ e gera as URLs
canônicas de vídeo, miniatura e embed. Nenhuma chamada de rede.
"""
import re
from urllib.parse import urlencode

# A ordem importa: o primeiro padrão que casar vence
VIDEO_ID_PATTERNS = (
    re.compile(r'youtube\.com/watch\?v=([^&\n?#]+)'),
    re.compile(r'youtu\.be/([^&\n?#]+)'),
    re.compile(r'youtube\.com/embed/([^&\n?#]+)'),
    re.compile(r'youtube\.com/v/([^&\n?#]+)'),
    re.compile(r'youtube\.com/live/([^&\n?#]+)'),
)

THUMBNAIL_QUALITIES = {
    'default': 'default.jpg',
    'medium': 'mqdefault.jpg',
    'high': 'hqdefault.jpg',
    'maxres': 'maxresdefault.jpg',
}

LIVE_KEYWORDS = (
    'live', 'en vivo', 'directo', 'streaming', 'transmisión',
    'ahora', 'actual', 'tiempo real', 'breaking', 'última hora',
)

def extract_video_id(url):
    """Extrai o ID do vídeo; None se nenhum formato conhecido casar"""
    if not url:
        return None

    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match and match.group(1):
            return match.group(1)
    return None


def is_valid_url(url):
    return extract_video_id(url) is not None


def build_thumbnail_url(video_id, quality='maxres'):
    if quality not in THUMBNAIL_QUALITIES:
        raise ValueError(f"Qualidade de miniatura inválida: {quality}")
    return f"https://img.youtube.com/vi/{video_id}/{THUMBNAIL_QUALITIES[quality]}"


def build_embed_url(video_id, autoplay=False, mute=False):
    params = []
    if autoplay:
        params.append(('autoplay', '1'))
    if mute:
        params.append(('mute', '1'))
    # Sem vídeos relacionados e com logo discreto
    params += [('rel', '0'), ('modestbranding', '1')]
    return f"https://www.youtube.com/embed/{video_id}?{urlencode(params)}"


def normalize_url(url):
    """Reescreve para https://www.youtube.com/watch?v=<id>; sem ID, devolve a entrada"""
    video_id = extract_video_id(url)
    if not video_id:
        return url
    return f"https://www.youtube.com/watch?v={video_id}"


def is_likely_live_stream(title, description=None):
    """Heurística por palavras-chave para sugerir a flag is_live no painel"""
    text = f"{title or ''} {description or ''}".lower()
    return any(keyword in text for keyword in LIVE_KEYWORDS)


def get_video_info(url):
    video_id = extract_video_id(url)
    if not video_id:
        return None
    return {
        'video_id': video_id,
        'thumbnail_url': build_thumbnail_url(video_id),
    }
