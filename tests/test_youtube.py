import pytest

from apps.videos.utils.youtube import (
    build_embed_url,
    build_thumbnail_url,
    extract_video_id,
    get_video_info,
    is_likely_live_stream,
    is_valid_url,
    normalize_url,
)

VIDEO_ID = "abc123XYZ_"


@pytest.mark.parametrize("url", [
    f"https://www.youtube.com/watch?v={VIDEO_ID}",
    f"https://www.youtube.com/watch?v={VIDEO_ID}&t=42s",
    f"https://youtu.be/{VIDEO_ID}",
    f"https://youtu.be/{VIDEO_ID}?si=compartido",
    f"https://www.youtube.com/embed/{VIDEO_ID}",
    f"https://www.youtube.com/v/{VIDEO_ID}",
    f"https://www.youtube.com/live/{VIDEO_ID}?feature=share",
])
def test_every_supported_shape_yields_same_id(url):
    assert extract_video_id(url) == VIDEO_ID
    assert is_valid_url(url)
    assert normalize_url(url) == f"https://www.youtube.com/watch?v={VIDEO_ID}"


@pytest.mark.parametrize("url", [None, "", "https://vimeo.com/12345", "no es una url"])
def test_unknown_urls_have_no_id(url):
    assert extract_video_id(url) is None
    assert not is_valid_url(url)


def test_normalize_is_idempotent_on_canonical_url():
    canonical = f"https://www.youtube.com/watch?v={VIDEO_ID}"
    assert normalize_url(canonical) == canonical
    assert normalize_url(normalize_url(canonical)) == canonical


def test_normalize_returns_input_without_id():
    assert normalize_url("https://vimeo.com/12345") == "https://vimeo.com/12345"


def test_thumbnail_qualities():
    assert build_thumbnail_url(VIDEO_ID) == f"https://img.youtube.com/vi/{VIDEO_ID}/maxresdefault.jpg"
    assert build_thumbnail_url(VIDEO_ID, "default").endswith("/default.jpg")
    assert build_thumbnail_url(VIDEO_ID, "medium").endswith("/mqdefault.jpg")
    assert build_thumbnail_url(VIDEO_ID, "high").endswith("/hqdefault.jpg")
    with pytest.raises(ValueError):
        build_thumbnail_url(VIDEO_ID, "ultra")


def test_embed_url_flags():
    assert build_embed_url(VIDEO_ID) == f"https://www.youtube.com/embed/{VIDEO_ID}?rel=0&modestbranding=1"
    assert build_embed_url(VIDEO_ID, autoplay=True, mute=True) == (
        f"https://www.youtube.com/embed/{VIDEO_ID}?autoplay=1&mute=1&rel=0&modestbranding=1"
    )


def test_live_stream_heuristic():
    assert is_likely_live_stream("Noticiero EN VIVO")
    assert is_likely_live_stream("Resumen", "Transmisión desde el Congreso")
    assert not is_likely_live_stream("Entrevista grabada", "Episodio 4")


def test_get_video_info():
    assert get_video_info(f"https://youtu.be/{VIDEO_ID}") == {
        "video_id": VIDEO_ID,
        "thumbnail_url": f"https://img.youtube.com/vi/{VIDEO_ID}/maxresdefault.jpg",
    }
    assert get_video_info("https://vimeo.com/1") is None
