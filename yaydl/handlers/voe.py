"""Handler for VOE and the redirector domains in front of it."""

from __future__ import annotations

import re

import requests
from bs4 import BeautifulSoup

from ..definitions import ExtractionError, SiteDefinition, Video
from ..net import fetch_text

_REDIRECT = re.compile(r"window.location.href = '(?P<URL>.*?)'")
_PLAYER = re.compile(r"VOEPlayer")
_STREAM = re.compile(r'Node", "(?P<URL>[^"]+)')


def find_js_redirect(body: str) -> str | None:
    """Return the target of a JavaScript redirect in ``body``, if there is one."""
    match = _REDIRECT.search(body)
    return match.group("URL") if match else None


def resolve_js_redirect(url: str) -> str:
    """Return the page ``url`` redirects to through JavaScript, or ``url`` itself."""
    target = find_js_redirect(fetch_text(url))
    return url if target is None else target


def _ensure_info(video: Video, url: str) -> BeautifulSoup:
    if not video.info:
        video.info = fetch_text(resolve_js_redirect(url))
    return BeautifulSoup(video.info, "html.parser")


class VoeHandler(SiteDefinition):
    """Reads VOE pages; VOE serves its videos as HLS playlists."""

    display_name = "Voe"
    web_driver_required = False

    def can_handle_url(self, url: str) -> bool:
        # VOE hides behind changing redirector domains, so look at the page itself.
        try:
            body = fetch_text(resolve_js_redirect(url))
        except requests.RequestException:
            return False
        return _PLAYER.search(body) is not None

    def does_video_exist(self, video: Video, url: str, webdriver_port: int) -> bool:
        try:
            _ensure_info(video, url)
        except requests.RequestException:
            pass
        return bool(video.info)

    def is_playlist(self, url: str, webdriver_port: int) -> bool:
        return True

    def find_video_title(self, video: Video, url: str, webdriver_port: int) -> str:
        heading = _ensure_info(video, url).select_one("h1.mt-1")
        # Embedded videos come without a title.
        return heading.get_text() if heading is not None else "VOE"

    def find_video_direct_url(
        self, video: Video, url: str, webdriver_port: int, onlyaudio: bool
    ) -> str:
        _ensure_info(video, url)
        match = _STREAM.search(video.info)
        if match is None:
            raise ExtractionError("Could not find the video URL.")
        return match.group("URL")

    def find_video_file_extension(
        self, video: Video, url: str, webdriver_port: int, onlyaudio: bool
    ) -> str:
        return "mp4"