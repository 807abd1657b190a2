"""HTTP helpers; proxies are taken from the environment."""

from __future__ import annotations

import re
from collections.abc import Mapping

import requests

_CHARSET = re.compile(r"charset\s*=\s*[\"']?([^;\s\"']+)", re.IGNORECASE)


def get(
    url: str, headers: Mapping[str, str] | None = None, stream: bool = False
) -> requests.Response:
    """GET ``url`` and return the response; HTTP error statuses raise."""
    response = requests.get(url, headers=dict(headers) if headers else None, stream=stream)
    try:
        response.raise_for_status()
    except requests.HTTPError:
        response.close()
        raise
    return response


def fetch_text(url: str) -> str:
    """GET ``url`` and return its body as text (UTF-8 unless a charset is given)."""
    with get(url) as response:
        match = _CHARSET.search(response.headers.get("Content-Type", ""))
        encoding = match.group(1) if match else "utf-8"
        try:
            return response.content.decode(encoding, errors="replace")
        except LookupError:
            return response.content.decode("utf-8", errors="replace")