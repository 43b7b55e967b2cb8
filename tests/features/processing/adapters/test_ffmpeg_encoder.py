"""Tests for the ffmpeg command builder and error mapping."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from audiocc.features.processing.adapters import FFmpegEncoder
from audiocc.features.processing.usecases.ports import EncodeMetadata, EncodeRequest
from audiocc.shared.errors import EncodeError

RUN = "audiocc.features.processing.adapters.ffmpeg_encoder.subprocess.run"


def _request(
    quality: str = "V0",
    destination: str = "/work/1-01 Wilson.mp3",
    artwork: Path | None = None,
    fix: bool = False,
) -> EncodeRequest:
    return EncodeRequest(
        source=Path("/music/Camden/ph990710d1_01_Wilson.flac"),
        quality=quality,
        destination=Path(destination),
        metadata=EncodeMetadata(
            artist="Phish",
            album="1999-07-10 Camden",
            disc="1",
            track="01",
            title="Wilson",
            artwork=artwork,
        ),
        fix=fix,
    )


def _pairs(cmd: list[str]) -> list[tuple[str, str]]:
    return list(zip(cmd, cmd[1:]))


def test_vbr_quality_and_tags() -> None:
    cmd = FFmpegEncoder().build_command(_request())

    assert cmd[0] == "ffmpeg"
    assert cmd[-1] == "/work/1-01 Wilson.mp3"
    pairs = _pairs(cmd)
    assert ("-c:a", "libmp3lame") in pairs
    assert ("-q:a", "0") in pairs
    assert ("-metadata", "album=1999-07-10 Camden") in pairs
    assert ("-metadata", "track=01") in pairs
    assert ("-metadata", "disc=1") in pairs
    assert ("-map_metadata", "-1") in pairs
    assert "-err_detect" not in cmd


@pytest.mark.parametrize(
    ("quality", "expected"),
    [
        ("copy", [("-c:a", "copy")]),
        ("V5", [("-q:a", "5")]),
        ("320", [("-b:a", "320k")]),
        ("192k", [("-b:a", "192k")]),
    ],
)
def test_quality_args(quality: str, expected: list[tuple[str, str]]) -> None:
    pairs = _pairs(FFmpegEncoder().build_command(_request(quality=quality)))

    for pair in expected:
        assert pair in pairs


def test_unknown_quality_is_rejected() -> None:
    with pytest.raises(EncodeError):
        _ = FFmpegEncoder().build_command(_request(quality="best"))


def test_fix_and_artwork() -> None:
    cover = Path("/music/Camden/cover.jpg")

    cmd = FFmpegEncoder().build_command(_request(artwork=cover, fix=True))

    pairs = _pairs(cmd)
    assert ("-err_detect", "ignore_err") in pairs
    assert ("-i", str(cover)) in pairs
    assert ("-disposition:v", "attached_pic") in pairs
    assert cmd.index("-err_detect") < cmd.index("-i")


def test_flac_output_skips_artwork() -> None:
    cmd = FFmpegEncoder().build_command(
        _request(quality="copy", destination="/work/01 Song.flac", artwork=Path("/c.jpg"))
    )

    assert "/c.jpg" not in cmd
    assert "-id3v2_version" not in cmd


def test_encode_runs_ffmpeg(mocker: MockerFixture) -> None:
    run = mocker.patch(RUN)
    request = _request()

    written = FFmpegEncoder(binary="/usr/bin/ffmpeg", timeout=30).encode(request)

    assert written == request.destination
    args, kwargs = run.call_args
    assert args[0][0] == "/usr/bin/ffmpeg"
    assert kwargs["check"] is True
    assert kwargs["timeout"] == 30


def test_encode_failure_maps_to_encode_error(mocker: MockerFixture) -> None:
    _ = mocker.patch(
        RUN,
        side_effect=subprocess.CalledProcessError(1, ["ffmpeg"], stderr="Invalid data found"),
    )

    with pytest.raises(EncodeError, match="Invalid data found"):
        _ = FFmpegEncoder().encode(_request())


def test_missing_binary_maps_to_encode_error(mocker: MockerFixture) -> None:
    _ = mocker.patch(RUN, side_effect=FileNotFoundError("ffmpeg"))

    with pytest.raises(EncodeError, match="not installed"):
        _ = FFmpegEncoder().encode(_request())
