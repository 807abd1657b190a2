import pytest
import requests
import responses

from yaydl.definitions import ExtractionError, Video
from yaydl.handlers.xhamster import XHamsterHandler

PAGE_URL = "https://xhamster.com/videos/some-video"
MASTER_URL = "https://cdn.example.com/videos/abc/master.m3u8"

PAGE = f"""<html><head>
<link rel="preload" as="fetch" href="{MASTER_URL}">
</head><body><h1>Some Video</h1></body></html>"""

MASTER = "#EXTM3U\n#EXTINF:1,\nlow.m3u8\n#EXTINF:1,\nbest.m3u8\n"


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://xhamster.com/videos/x", True),
        ("https://xhamster.com/", False),
        ("https://example.com/x.html", False),
    ],
)
def test_can_handle_url(url, expected):
    assert XHamsterHandler().can_handle_url(url) is expected


def test_static_properties():
    handler = XHamsterHandler()
    assert handler.display_name == "xHamster"
    assert handler.web_driver_required is False
    assert handler.is_playlist(PAGE_URL, 0) is True
    assert handler.find_video_file_extension(Video(), PAGE_URL, 0, False) == "ts"


def test_title_fetched_from_page(rsps):
    rsps.add(responses.GET, PAGE_URL, body=PAGE)
    video = Video()
    handler = XHamsterHandler()
    assert handler.does_video_exist(video, PAGE_URL, 0) is True
    assert handler.find_video_title(video, PAGE_URL, 0) == "Some Video"
    assert len(rsps.calls) == 1


def test_missing_title_raises():
    with pytest.raises(ExtractionError):
        XHamsterHandler().find_video_title(Video(info="<p>nothing</p>"), PAGE_URL, 0)


def test_direct_url_is_last_playlist_entry(rsps):
    rsps.add(responses.GET, MASTER_URL, body=MASTER)
    url = XHamsterHandler().find_video_direct_url(Video(info=PAGE), PAGE_URL, 0, False)
    assert url == "https://cdn.example.com/videos/abc/best.m3u8"


def test_empty_playlist_raises(rsps):
    rsps.add(responses.GET, MASTER_URL, body="#EXTM3U\n#EXT-X-ENDLIST\n")
    with pytest.raises(ExtractionError):
        XHamsterHandler().find_video_direct_url(Video(info=PAGE), PAGE_URL, 0, False)


def test_missing_preload_link_raises():
    video = Video(info="<html><h1>t</h1></html>")
    with pytest.raises(ExtractionError):
        XHamsterHandler().find_video_direct_url(video, PAGE_URL, 0, False)


def test_fetch_failure_propagates(rsps):
    rsps.add(responses.GET, PAGE_URL, status=404)
    video = Video()
    with pytest.raises(requests.HTTPError):
        XHamsterHandler().does_video_exist(video, PAGE_URL, 0)
    assert video.info == ""