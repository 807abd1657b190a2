import pytest
import responses

from yaydl.definitions import ExtractionError, Video
from yaydl.handlers.youtube import (
    YouTubeHandler,
    extract_video_id,
    get_invidious_instance,
)

INSTANCE = "https://invidious.example.com"
URL = "https://www.youtube.com/watch?v=abc123"

PAGE = """<html><head>
<meta property="og:title" content="My Video">
</head><body><video>
<source src="/latest_version?id=abc123&itag=22" type='video/mp4; codecs="avc1.64001F, mp4a.40.2"' label="hd720">
<source src="/latest_version?id=abc123&itag=18" type='video/webm; codecs="vp9"' label="medium">
<source src="/latest_version?id=abc123&itag=17" type="video/3gpp" label="small">
</video></body></html>"""


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


@pytest.fixture
def instance(monkeypatch):
    monkeypatch.setenv("YAYDL_INVIDIOUS_INSTANCE", INSTANCE)
    return INSTANCE


def test_default_instance(monkeypatch):
    monkeypatch.delenv("YAYDL_INVIDIOUS_INSTANCE", raising=False)
    assert get_invidious_instance() == "https://invidious.nerdvpn.de"


def test_instance_from_environment(instance):
    assert get_invidious_instance() == instance


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=10", "dQw4w9WgXcQ"),
        ("https://youtu.be/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/shorts/xyz789", "xyz789"),
    ],
)
def test_extract_video_id(url, expected):
    assert extract_video_id(url) == expected


def test_extract_video_id_without_id_raises():
    with pytest.raises(ExtractionError):
        extract_video_id("https://www.youtube.com/")


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://www.youtube.com/watch?v=x", True),
        ("https://youtu.be/x", True),
        ("https://invidious.example.com/watch?v=x", True),
        ("https://vimeo.com/123", False),
    ],
)
def test_can_handle_url(url, expected):
    assert YouTubeHandler().can_handle_url(url) is expected


def test_static_properties():
    handler = YouTubeHandler()
    assert handler.display_name == "Invidious"
    assert handler.web_driver_required is False
    assert handler.is_playlist(URL, 0) is False


def test_fetches_watch_page_from_instance(rsps, instance):
    rsps.add(responses.GET, f"{instance}/watch?v=abc123", body=PAGE)
    video = Video()
    handler = YouTubeHandler()
    assert handler.does_video_exist(video, URL, 0) is True
    assert handler.find_video_title(video, URL, 0) == "My Video"
    assert len(rsps.calls) == 1


def test_missing_page_means_no_video(rsps, instance):
    rsps.add(responses.GET, f"{instance}/watch?v=abc123", status=404)
    video = Video()
    assert YouTubeHandler().does_video_exist(video, URL, 0) is False
    assert video.info == ""


def test_direct_url_stops_after_medium(instance):
    video = Video(info=PAGE)
    handler = YouTubeHandler()
    url = handler.find_video_direct_url(video, URL, 0, False)
    assert url == f"{instance}/latest_version?id=abc123&itag=18"
    assert video.mime == "video/webm"
    assert handler.find_video_file_extension(video, URL, 0, False) == "webm"


def test_no_sources_raises(instance):
    video = Video(info="<html><video></video></html>")
    with pytest.raises(ExtractionError):
        YouTubeHandler().find_video_direct_url(video, URL, 0, False)


def test_missing_title_raises():
    with pytest.raises(ExtractionError):
        YouTubeHandler().find_video_title(Video(info="<html></html>"), URL, 0)


@pytest.mark.parametrize(
    "mime, expected",
    [("video/webm", "webm"), ("audio/mp4", "m4a"), ("video/mp4", "mp4"), ("", "mp4")],
)
def test_file_extension_from_mime(mime, expected):
    video = Video(mime=mime)
    assert YouTubeHandler().find_video_file_extension(video, URL, 0, False) == expected