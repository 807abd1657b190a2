# yaydl

A library for fetching videos from video sites. Each supported site has a
handler that recognises its page addresses, finds the video title and the
direct stream, and reports the file extension. Download helpers then save
the stream to disk, either as a single file or as the segments of an HLS
playlist, and `ffmpeg` can convert the result.

## Supported sites

| Handler | Module | Notes |
| --- | --- | --- |
| `YouTubeHandler` | `yaydl.handlers.youtube` | YouTube, youtu.be and shorts links, read through an Invidious instance |
| `VimeoHandler` | `yaydl.handlers.vimeo` | picks the widest progressive stream |
| `VoeHandler` | `yaydl.handlers.voe` | follows JavaScript redirects; the stream is an HLS playlist |
| `XHamsterHandler` | `yaydl.handlers.xhamster` | the stream is an HLS playlist of `.ts` segments |
| `WatchMDHHandler` | `yaydl.handlers.watchmdh` | WatchMDH / watchdirty; needs a running web driver |

## Using a handler

Every handler derives from `yaydl.definitions.SiteDefinition` and works on a
`Video` object, which caches the fetched page (`info`), a title found on the
way (`title`) and the MIME type of the chosen stream (`mime`). Use a fresh
`Video` for each address.

```python
from yaydl.definitions import Video
from yaydl.download import download, download_from_playlist
from yaydl.handlers.youtube import YouTubeHandler

handler = YouTubeHandler()
video = Video()
port = 0  # web driver port; only handlers with web_driver_required use it

if handler.can_handle_url(page_url) and handler.does_video_exist(video, page_url, port):
    title = handler.find_video_title(video, page_url, port)
    stream_url = handler.find_video_direct_url(video, page_url, port, False)
    extension = handler.find_video_file_extension(video, page_url, port, False)
    target = f"{title}.{extension}"
    if handler.is_playlist(page_url, port):
        download_from_playlist(stream_url, target, verbose=True)
    else:
        download(stream_url, target)
```

Each handler also has `display_name` and `web_driver_required` attributes.
When a page lacks what a handler needs, it raises
`yaydl.definitions.ExtractionError`; network failures surface as `requests`
exceptions.

## Downloading

- `yaydl.download.download(url, filename)` streams `url` into `filename`
  with a progress bar. If `filename` already exists, the download is
  continued with an HTTP `Range` request and appended to it.
- `yaydl.download.download_from_playlist(url, filename, verbose)` reads a
  media playlist, resolves each segment against the playlist's directory and
  appends all segments to `filename`.

`yaydl.m3u8` holds the playlist reader: `parse_media_playlist(text)` returns a
`MediaPlaylist` of `Segment`s (raising `PlaylistError` on bad input), and
`replace_last_path_segment(url, uri)` swaps the last path segment of a URL.

`yaydl.net.get` and `yaydl.net.fetch_text` are the HTTP helpers the rest of
the package uses; HTTP error statuses raise.

## Conversion

`yaydl.ffmpeg.to_audio(inputfile, outputfile)` keeps only the audio streams,
and `yaydl.ffmpeg.ts_to_mp4(inputfile, outputfile)` remuxes a `.ts` download
into `.mp4` without re-encoding. Both run the `ffmpeg` program, which must be
installed and on your `PATH`; if it cannot be started they raise
`FfmpegMissingError`.

## Web drivers

WatchMDH renders its pages with JavaScript. Start a WebDriver server such as
geckodriver or chromedriver on a local port and pass that port to the handler
methods. `yaydl.webdriver.WebDriverSession(port)` is a small context-managed
client (`goto`, `execute`, `source`, `close_window`), and
`fetch_page_source(port, url, script)` loads a page, optionally runs a script
in it and returns the rendered source. Failures raise `WebDriverError`.

## Environment

- `YAYDL_INVIDIOUS_INSTANCE` – base address of the Invidious instance used by
  `YouTubeHandler` (see `get_invidious_instance()`).
- `HTTP_PROXY`, `HTTPS_PROXY`, `NO_PROXY` – honoured for every request.

## What this package does not do

- There is no command-line program; the package is used from Python.
- Handlers are not collected in a registry: choose the handler for an address
  yourself, for example by asking each one's `can_handle_url`.
- File names are not built or cleaned for you; derive a safe name from the
  title yourself before downloading.
- Only the sites listed above are handled; plain links to video files have no
  handler.