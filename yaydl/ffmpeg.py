"""Post-processing through the system's ffmpeg."""

from __future__ import annotations

import os
import subprocess


class FfmpegMissingError(RuntimeError):
    """Raised when the ffmpeg program cannot be started."""


def _run(arguments: list[str], purpose: str) -> None:
    try:
        subprocess.run(["ffmpeg", *arguments], capture_output=True, check=False)
    except OSError as exc:
        raise FfmpegMissingError(
            f"Please install ffmpeg to convert the file into {purpose}."
        ) from exc


def to_audio(inputfile: str | os.PathLike, outputfile: str | os.PathLike) -> None:
    """Write the audio streams of ``inputfile`` to ``outputfile``."""
    _run(
        ["-i", os.fspath(inputfile), "-vn", "-loglevel", "quiet", os.fspath(outputfile)],
        "audio",
    )


def ts_to_mp4(inputfile: str | os.PathLike, outputfile: str | os.PathLike) -> None:
    """Remux ``inputfile`` into ``outputfile`` without re-encoding."""
    _run(
        [
            "-i",
            os.fspath(inputfile),
            "-acodec",
            "copy",
            "-vcodec",
            "copy",
            "-loglevel",
            "quiet",
            os.fspath(outputfile),
        ],
        "MP4",
    )