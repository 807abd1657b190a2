"""Handler for Vimeo."""

from __future__ import annotations

import json
import re
from typing import Any

import requests

from ..definitions import ExtractionError, SiteDefinition, Video
from ..net import fetch_text

_SITE = re.compile(r"(?:www\.)?vimeo.com/.+")
_VIDEO_ID = re.compile(r"(?:vimeo.com/)(.*$)")
_CONFIG_URL = re.compile(
    r"window.vimeo.clip_page_config.player = .\"config_url\":\"(?P<URL>.+?)\""
)
_TITLE = re.compile(r"<meta property=\"og:title\" content=\"(?P<TITLE>.+?)\"")


def extract_config_url(body: str) -> str:
    """Return the player configuration URL hidden in a Vimeo page."""
    match = _CONFIG_URL.search(body)
    if match is None:
        raise ExtractionError("Could not find the player configuration. Invalid URL?")
    return match.group("URL").replace("\\", "")


def extract_title(body: str) -> str:
    """Return the og:title of a Vimeo page."""
    match = _TITLE.search(body)
    if match is None:
        raise ExtractionError("Could not extract the video title.")
    return match.group("TITLE")


def _lookup(data: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def best_progressive_url(config: Any) -> str:
    """Return the URL of the widest progressive stream, or "" if there is none."""
    streams = _lookup(config, "request", "files", "progressive")
    if not isinstance(streams, list):
        return ""

    url, width = "", 0
    # Quality grows with the width, so the widest stream is the best one.
    for stream in streams:
        this_width = _lookup(stream, "width")
        if isinstance(this_width, bool) or not isinstance(this_width, int) or this_width < 0:
            this_width = 0
        if this_width > width:
            stream_url = _lookup(stream, "url")
            if not isinstance(stream_url, str):
                raise ExtractionError("A progressive stream has no URL.")
            width, url = this_width, stream_url
    return url


def _ensure_info(video: Video, url: str) -> Any:
    if not video.info:
        body = fetch_text(url)
        config_url = extract_config_url(body)
        video.title = extract_title(body)
        video.info += fetch_text(config_url)
    return json.loads(video.info)


class VimeoHandler(SiteDefinition):
    """Reads Vimeo's player configuration."""

    display_name = "Vimeo"
    web_driver_required = False

    def can_handle_url(self, url: str) -> bool:
        return _SITE.search(url) is not None

    def does_video_exist(self, video: Video, url: str, webdriver_port: int) -> bool:
        try:
            _ensure_info(video, url)
        except (requests.RequestException, ValueError):
            pass
        return bool(video.info)

    def is_playlist(self, url: str, webdriver_port: int) -> bool:
        return False

    def find_video_title(self, video: Video, url: str, webdriver_port: int) -> str:
        return video.title

    def find_video_direct_url(
        self, video: Video, url: str, webdriver_port: int, onlyaudio: bool
    ) -> str:
        match = _VIDEO_ID.search(url)
        if match is None:
            raise ExtractionError(f"no video id in {url!r}")
        return best_progressive_url(_ensure_info(video, match.group(1)))

    def find_video_file_extension(
        self, video: Video, url: str, webdriver_port: int, onlyaudio: bool
    ) -> str:
        return "mp4"