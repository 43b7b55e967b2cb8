"""src/audiocc/features/processing/adapters/ffmpeg_encoder.py
What: EncoderPort implementation that shells out to ffmpeg.
Why: Re-encode or stream-copy audio while rewriting its tags in one pass."""

from __future__ import annotations

import re
import subprocess
from pathlib import Path
from typing import Final

from audiocc.features.processing.usecases.ports import COPY_QUALITY, EncodeRequest, EncoderPort
from audiocc.platform.logging import logger
from audiocc.shared.errors import EncodeError

_VBR_QUALITY: Final[re.Pattern[str]] = re.compile(r"^[vV](?P<level>\d)$")
_CBR_QUALITY: Final[re.Pattern[str]] = re.compile(r"^(?P<kbps>\d+)[kK]?$")
_CODECS: Final[dict[str, str]] = {".mp3": "libmp3lame", ".flac": "flac"}
_STDERR_TAIL: Final[int] = 2000


class FFmpegEncoder(EncoderPort):
    """Drive the ``ffmpeg`` binary found on PATH.

    Args:
        binary: Executable name or path.
        timeout: Seconds before a single encode is abandoned; None waits forever.
    """

    def __init__(self, binary: str = "ffmpeg", timeout: float | None = None) -> None:
        self.binary: str = binary
        self.timeout: float | None = timeout

    def quality_args(self, request: EncodeRequest) -> list[str]:
        """Translate a quality string into codec arguments.

        ``copy`` keeps the stream, ``V0``..``V9`` select VBR levels and
        ``320``/``320k`` select a constant bitrate.

        Raises:
            EncodeError: If the quality string is not recognized.
        """

        if request.quality == COPY_QUALITY:
            return ["-c:a", "copy"]
        codec = ["-c:a", _CODECS.get(request.destination.suffix.lower(), "libmp3lame")]
        vbr = _VBR_QUALITY.match(request.quality)
        if vbr is not None:
            return [*codec, "-q:a", vbr.group("level")]
        cbr = _CBR_QUALITY.match(request.quality)
        if cbr is not None:
            return [*codec, "-b:a", f"{cbr.group('kbps')}k"]
        raise EncodeError(request.source, f"unsupported quality {request.quality!r}")

    def build_command(self, request: EncodeRequest) -> list[str]:
        """Return the ffmpeg argument list for ``request``."""

        metadata = request.metadata
        cmd = [self.binary, "-hide_banner", "-loglevel", "error", "-y"]
        if request.fix:
            cmd.extend(["-err_detect", "ignore_err"])
        cmd.extend(["-i", str(request.source)])

        artwork = metadata.artwork if request.destination.suffix.lower() == ".mp3" else None
        if artwork is not None:
            cmd.extend(["-i", str(artwork), "-map", "0:a", "-map", "1:0", "-c:v", "copy"])
            cmd.extend(["-disposition:v", "attached_pic", "-metadata:s:v", "title=Album cover"])
        else:
            cmd.extend(["-map", "0:a"])

        cmd.extend(["-map_metadata", "-1"])
        cmd.extend(self.quality_args(request))
        for key, value in (
            ("artist", metadata.artist),
            ("album", metadata.album),
            ("disc", metadata.disc),
            ("track", metadata.track),
            ("title", metadata.title),
        ):
            if value:
                cmd.extend(["-metadata", f"{key}={value}"])
        if request.destination.suffix.lower() == ".mp3":
            cmd.extend(["-id3v2_version", "3"])
        cmd.append(str(request.destination))
        return cmd

    def encode(self, request: EncodeRequest) -> Path:
        cmd = self.build_command(request)
        logger.debug("Running %s", " ".join(cmd))
        try:
            _ = subprocess.run(
                cmd,
                check=True,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise EncodeError(request.source, f"{self.binary} is not installed or not in PATH") from exc
        except subprocess.TimeoutExpired as exc:
            raise EncodeError(request.source, f"{self.binary} timed out after {exc.timeout}s") from exc
        except subprocess.CalledProcessError as exc:
            stderr = (exc.stderr or "").strip()[-_STDERR_TAIL:]
            raise EncodeError(request.source, f"{self.binary} failed ({stderr or exc.returncode})") from exc
        return request.destination


__all__ = ["FFmpegEncoder"]
