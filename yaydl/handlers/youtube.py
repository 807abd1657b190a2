"""Handler for YouTube links, fetched through an Invidious instance."""

from __future__ import annotations

import os
import re

import requests
from bs4 import BeautifulSoup

from ..definitions import ExtractionError, SiteDefinition, Video
from ..net import fetch_text

#: Used unless YAYDL_INVIDIOUS_INSTANCE names another instance.
INVIDIOUS_INSTANCE = "https://invidious.nerdvpn.de"

_SITE = re.compile(r"invidious\.|(?:www\.)?youtu(?:be\.com|\.be)/")
_VIDEO_ID = re.compile(r"(?:v=|\.be/|shorts/)(.*?)(&.*)*$")


def get_invidious_instance() -> str:
    """Return the Invidious instance to use."""
    return os.environ.get("YAYDL_INVIDIOUS_INSTANCE", INVIDIOUS_INSTANCE)


def extract_video_id(url: str) -> str:
    """Return the video id of a YouTube, youtu.be, shorts or Invidious URL."""
    match = _VIDEO_ID.search(url)
    if match is None:
        raise ExtractionError(f"no video id in {url!r}")
    return match.group(1)


def _ensure_info(video: Video, url: str) -> BeautifulSoup:
    if not video.info:
        watch_url = f"{get_invidious_instance()}/watch?v={extract_video_id(url)}"
        video.info += fetch_text(watch_url)
    return BeautifulSoup(video.info, "html.parser")


class YouTubeHandler(SiteDefinition):
    """Reads video pages from Invidious."""

    display_name = "Invidious"
    web_driver_required = False

    def can_handle_url(self, url: str) -> bool:
        return _SITE.search(url) is not None

    def does_video_exist(self, video: Video, url: str, webdriver_port: int) -> bool:
        try:
            _ensure_info(video, url)
        except requests.RequestException:
            pass
        return bool(video.info)

    def is_playlist(self, url: str, webdriver_port: int) -> bool:
        return False

    def find_video_title(self, video: Video, url: str, webdriver_port: int) -> str:
        meta = _ensure_info(video, url).select_one('meta[property="og:title"]')
        if meta is None or meta.get("content") is None:
            raise ExtractionError("Could not extract the video title.")
        return meta["content"]

    def find_video_direct_url(
        self, video: Video, url: str, webdriver_port: int, onlyaudio: bool
    ) -> str:
        page = _ensure_info(video, url)
        chosen = ""
        last_quality = ""
        for source in page.find_all("source"):
            quality = source.get("label") or ""
            if quality == last_quality or last_quality == "medium":
                continue
            mimetype = source.get("type")
            relative_url = source.get("src")
            if mimetype is None or relative_url is None:
                raise ExtractionError("A video source lacks its type or URL.")
            # e.g. 'video/mp4; codecs="avc1.64001F, mp4a.40.2"'
            video.mime = mimetype.split(";")[0]
            chosen = f"{get_invidious_instance()}{relative_url}"
            last_quality = quality

        if not chosen:
            raise ExtractionError("Could not find a working video - aborting.")
        return chosen

    def find_video_file_extension(
        self, video: Video, url: str, webdriver_port: int, onlyaudio: bool
    ) -> str:
        if "/webm" in video.mime:
            return "webm"
        if "audio/mp4" in video.mime:
            return "m4a"
        return "mp4"