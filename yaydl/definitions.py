"""The interface every site handler implements, and the video state it fills in."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

import requests
from bs4 import BeautifulSoup

from .net import fetch_text


@dataclass
class Video:
    """What a handler has learned about one video so far.

    ``info`` holds the fetched page or metadata, ``title`` a title found
    while fetching it, and ``mime`` the MIME type of the chosen stream.
    """

    info: str = ""
    title: str = ""
    mime: str = ""


class ExtractionError(Exception):
    """Raised when a handler cannot extract what it needs from a page."""


class SiteDefinition(ABC):
    """A handler for one site, or one family of sites.

    Most of the answers a handler gives are fixed per site, so they are
    declared as class attributes and the matching methods read them.
    """

    #: Name of the site shown to the user, e.g. "Vimeo".
    display_name: ClassVar[str] = ""
    #: True if the site can only be read through a running web driver.
    web_driver_required: ClassVar[bool] = False
    #: Pattern a URL must contain for this handler to take it.
    url_pattern: ClassVar[re.Pattern[str] | None] = None
    #: True if the direct URL is an HLS playlist.
    playlist: ClassVar[bool] = False
    #: Extension of the downloaded file.
    file_extension: ClassVar[str] = "mp4"
    #: Errors while fetching the page that only mean "the video does not exist".
    tolerated_errors: ClassVar[tuple[type[BaseException], ...]] = (
        requests.RequestException,
    )

    def can_handle_url(self, url: str) -> bool:
        """Return True if this handler is responsible for ``url``."""
        return self.url_pattern is not None and self.url_pattern.search(url) is not None

    def does_video_exist(self, video: Video, url: str, webdriver_port: int) -> bool:
        """Return True if the video behind ``url`` exists."""
        try:
            self._page(video, url, webdriver_port)
        except self.tolerated_errors:
            pass
        return bool(video.info)

    def is_playlist(self, url: str, webdriver_port: int) -> bool:
        """Return True if the direct URL is an HLS playlist."""
        return self.playlist

    @abstractmethod
    def find_video_title(self, video: Video, url: str, webdriver_port: int) -> str:
        """Return the title of the video."""

    @abstractmethod
    def find_video_direct_url(
        self, video: Video, url: str, webdriver_port: int, onlyaudio: bool
    ) -> str:
        """Return the URL of the video file or playlist."""

    def find_video_file_extension(
        self, video: Video, url: str, webdriver_port: int, onlyaudio: bool
    ) -> str:
        """Return the file extension of the video, e.g. "mp4"."""
        return self.file_extension

    def _fetch_info(self, url: str, webdriver_port: int) -> str:
        """Fetch the page describing the video; a plain GET by default."""
        return fetch_text(url)

    def _page(self, video: Video, url: str, webdriver_port: int = 0) -> BeautifulSoup:
        """Fetch the video page once, cache it on ``video`` and parse it."""
        if not video.info:
            video.info = self._fetch_info(url, webdriver_port)
        return BeautifulSoup(video.info, "html.parser")

    def _select_attr(
        self,
        video: Video,
        url: str,
        webdriver_port: int,
        selector: str,
        attribute: str,
        message: str = "Could not find the video URL.",
    ) -> str:
        """Return ``attribute`` of the first element matching ``selector``."""
        element = self._page(video, url, webdriver_port).select_one(selector)
        value = None if element is None else element.get(attribute)
        if value is None:
            raise ExtractionError(message)
        return value