"""A small reader for HLS media playlists."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import quote, urlsplit, urlunsplit

# Characters left unescaped when a path segment is appended to a URL.
_SEGMENT_SAFE = "!$&'()*+,;=:@[]\\^|"


class PlaylistError(ValueError):
    """Raised when a playlist cannot be parsed."""


@dataclass(frozen=True)
class Segment:
    """One entry of a media playlist."""

    uri: str
    duration: float = 0.0
    title: str = ""


@dataclass
class MediaPlaylist:
    """A parsed media playlist."""

    segments: list[Segment] = field(default_factory=list)
    target_duration: float = 0.0
    media_sequence: int = 0
    end_list: bool = False


def _tag_value(line: str, tag: str, convert):
    raw = line[len(tag):].strip()
    try:
        return convert(raw)
    except ValueError as exc:
        raise PlaylistError(f"invalid value in {line!r}") from exc


def parse_media_playlist(text: str) -> MediaPlaylist:
    """Parse ``text`` as a media playlist.

    Every non-comment line is a segment URI; an ``#EXTINF`` tag before it
    supplies its duration and title.
    """
    lines = text.lstrip("\ufeff").splitlines()
    if not lines or lines[0].strip() != "#EXTM3U":
        raise PlaylistError("not an M3U8 playlist: missing #EXTM3U header")

    playlist = MediaPlaylist()
    duration, title = 0.0, ""
    for raw in lines[1:]:
        line = raw.strip()
        if not line:
            continue
        if line.startswith("#EXTINF:"):
            value, _, title = line[len("#EXTINF:"):].partition(",")
            duration = _tag_value(value, "", float)
        elif line.startswith("#EXT-X-TARGETDURATION:"):
            playlist.target_duration = _tag_value(line, "#EXT-X-TARGETDURATION:", float)
        elif line.startswith("#EXT-X-MEDIA-SEQUENCE:"):
            playlist.media_sequence = _tag_value(line, "#EXT-X-MEDIA-SEQUENCE:", int)
        elif line == "#EXT-X-ENDLIST":
            playlist.end_list = True
        elif line.startswith("#"):
            continue
        else:
            playlist.segments.append(Segment(line, duration, title))
            duration, title = 0.0, ""
    return playlist


def replace_last_path_segment(url: str, uri: str) -> str:
    """Replace the last path segment of ``url`` with ``uri``.

    ``uri`` becomes a single, escaped segment; the query and fragment of
    ``url`` are kept.
    """
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"not an absolute URL: {url!r}")
    parent = (parts.path or "/").rsplit("/", 1)[0]
    path = f"{parent}/{quote(uri, safe=_SEGMENT_SAFE)}"
    return urlunsplit(parts._replace(path=path))