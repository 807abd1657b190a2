"""Downloading single files and HLS playlists to disk."""

from __future__ import annotations

from pathlib import Path

from tqdm import tqdm

from .m3u8 import parse_media_playlist, replace_last_path_segment
from .net import fetch_text, get

_CHUNK_SIZE = 64 * 1024
_BAR_FORMAT = "[{elapsed}] [{bar:40}] {percentage:3.0f}%"


def _progress(total: int, initial: int = 0) -> tqdm:
    return tqdm(
        total=total,
        initial=initial,
        bar_format=_BAR_FORMAT,
        ascii=" >#",
        leave=False,
    )


def download(url: str, filename: str) -> None:
    """Download ``url`` to ``filename``, continuing a partial file if present."""
    with get(url, stream=True) as probe:
        total_size = int(probe.headers.get("Content-Length", "0"))

    path = Path(filename)
    headers = None
    offset = 0
    if path.exists():
        size = path.stat().st_size
        if size:
            offset = size - 1
            headers = {"Range": f"bytes={offset}-"}

    with get(url, headers=headers, stream=True) as response, path.open(
        "ab"
    ) as dest, _progress(total_size, offset) as bar:
        for chunk in response.iter_content(_CHUNK_SIZE):
            dest.write(chunk)
            bar.update(len(chunk))


def download_from_playlist(url: str, filename: str, verbose: bool = False) -> None:
    """Fetch the media playlist at ``url`` and append all its segments to ``filename``."""
    if verbose:
        print("Found a playlist. Fetching ...")
    playlist_text = fetch_text(url)

    if verbose:
        print("Parsing ...")
    playlist = parse_media_playlist(playlist_text)

    path = Path(filename)
    segment_url = url
    with path.open("ab") as dest, _progress(len(playlist.segments)) as bar:
        for segment in playlist.segments:
            # Segment URIs are relative to the playlist's directory.
            segment_url = replace_last_path_segment(segment_url, segment.uri)
            with get(segment_url, stream=True) as response:
                for chunk in response.iter_content(_CHUNK_SIZE):
                    dest.write(chunk)
            bar.update(1)