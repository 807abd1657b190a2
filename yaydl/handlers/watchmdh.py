"""Handler for WatchMDH (and watchdirty); pages are read through a web driver."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

from ..definitions import ExtractionError, SiteDefinition, Video
from ..webdriver import fetch_page_source

_SITE = re.compile(r"watch(mdh|dirty).to/.+")


def _ensure_info(video: Video, url: str, webdriver_port: int) -> BeautifulSoup:
    if not video.info:
        video.info += fetch_page_source(webdriver_port, url)
    return BeautifulSoup(video.info, "html.parser")


class WatchMDHHandler(SiteDefinition):
    """Reads WatchMDH pages rendered by a browser."""

    display_name = "WatchMDH"
    web_driver_required = True

    def can_handle_url(self, url: str) -> bool:
        return _SITE.search(url) is not None

    def does_video_exist(self, video: Video, url: str, webdriver_port: int) -> bool:
        _ensure_info(video, url, webdriver_port)
        return bool(video.info)

    def is_playlist(self, url: str, webdriver_port: int) -> bool:
        return False

    def find_video_title(self, video: Video, url: str, webdriver_port: int) -> str:
        meta = _ensure_info(video, url, webdriver_port).select_one(
            'meta[property="og:title"]'
        )
        if meta is None or meta.get("content") is None:
            raise ExtractionError("Could not extract the video title.")
        return meta["content"]

    def find_video_direct_url(
        self, video: Video, url: str, webdriver_port: int, onlyaudio: bool
    ) -> str:
        element = _ensure_info(video, url, webdriver_port).find("video")
        if element is None or element.get("src") is None:
            raise ExtractionError("Could not find the video URL.")
        return element["src"]

    def find_video_file_extension(
        self, video: Video, url: str, webdriver_port: int, onlyaudio: bool
    ) -> str:
        return "mp4"