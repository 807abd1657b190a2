"""Site handlers, download helpers and ffmpeg post-processing for fetching videos."""

__version__ = "0.17.2"