import subprocess
from pathlib import Path
from unittest import mock

import pytest

from yaydl.ffmpeg import FfmpegMissingError, to_audio, ts_to_mp4


@mock.patch("yaydl.ffmpeg.subprocess.run")
def test_to_audio_command(run):
    result = to_audio(Path("in.mp4"), Path("in.mp3"))
    assert result is None
    assert run.call_args.args[0] == [
        "ffmpeg", "-i", "in.mp4", "-vn", "-loglevel", "quiet", "in.mp3",
    ]


@mock.patch("yaydl.ffmpeg.subprocess.run")
def test_ts_to_mp4_command(run):
    result = ts_to_mp4("video.ts", "video.mp4")
    assert result is None
    assert run.call_args.args[0] == [
        "ffmpeg", "-i", "video.ts", "-acodec", "copy", "-vcodec", "copy",
        "-loglevel", "quiet", "video.mp4",
    ]


@mock.patch("yaydl.ffmpeg.subprocess.run")
def test_failed_conversion_is_not_an_error(run):
    run.return_value = subprocess.CompletedProcess(args=[], returncode=1)
    assert to_audio("a.mp4", "a.mp3") is None
    assert run.call_count == 1


@mock.patch("yaydl.ffmpeg.subprocess.run", side_effect=FileNotFoundError("ffmpeg"))
def test_missing_ffmpeg_for_audio(run):
    with pytest.raises(FfmpegMissingError, match="into audio"):
        to_audio("a.mp4", "a.mp3")


@mock.patch("yaydl.ffmpeg.subprocess.run", side_effect=FileNotFoundError("ffmpeg"))
def test_missing_ffmpeg_for_mp4(run):
    with pytest.raises(FfmpegMissingError, match="into MP4"):
        ts_to_mp4("a.ts", "a.mp4")