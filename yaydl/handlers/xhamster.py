"""Handler for xHamster; videos are served as HLS playlists."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

from ..definitions import ExtractionError, SiteDefinition, Video
from ..m3u8 import parse_media_playlist, replace_last_path_segment
from ..net import fetch_text

_SITE = re.compile(r"xhamster.com/.+")


def _ensure_info(video: Video, url: str) -> BeautifulSoup:
    if not video.info:
        video.info += fetch_text(url)
    return BeautifulSoup(video.info, "html.parser")


class XHamsterHandler(SiteDefinition):
    """Reads xHamster pages and picks the best media playlist."""

    display_name = "xHamster"
    web_driver_required = False

    def can_handle_url(self, url: str) -> bool:
        return _SITE.search(url) is not None

    def does_video_exist(self, video: Video, url: str, webdriver_port: int) -> bool:
        _ensure_info(video, url)
        return bool(video.info)

    def is_playlist(self, url: str, webdriver_port: int) -> bool:
        return True

    def find_video_title(self, video: Video, url: str, webdriver_port: int) -> str:
        heading = _ensure_info(video, url).find("h1")
        if heading is None:
            raise ExtractionError("Could not extract the video title.")
        return heading.get_text()

    def find_video_direct_url(
        self, video: Video, url: str, webdriver_port: int, onlyaudio: bool
    ) -> str:
        link = _ensure_info(video, url).select_one('link[rel="preload"][as="fetch"]')
        if link is None or link.get("href") is None:
            raise ExtractionError("Could not find the video playlist.")
        playlist_url = link["href"]

        playlist = parse_media_playlist(fetch_text(playlist_url))
        if not playlist.segments:
            raise ExtractionError("The video playlist is empty.")
        # The last entry is the best quality; its URI is relative to the playlist.
        return replace_last_path_segment(playlist_url, playlist.segments[-1].uri)

    def find_video_file_extension(
        self, video: Video, url: str, webdriver_port: int, onlyaudio: bool
    ) -> str:
        return "ts"