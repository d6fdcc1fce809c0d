import os
import shutil
import logging
from pathlib import Path
from typing import List, Optional

import ffmpeg

from noaudio.utils.constants import (
    FFMPEG_BINARY,
    FFMPEG_FALLBACK_PATHS,
    FFMPEG_INSTALL_HINT,
)
from noaudio.utils.exceptions import FfmpegNotFoundError, TranscodeError


def _is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def find_ffmpeg(
    explicit: Optional[str] = None,
    fallback_paths: Optional[List[str]] = None,
) -> str:
    """
    Locate the ffmpeg executable.

    An explicit path wins. Otherwise PATH is searched first, then a short list
    of well-known install locations.

    Args:
        explicit (Optional[str]): Binary given on the command line
        fallback_paths (Optional[List[str]]): Locations tried after PATH

    Returns:
        str: Path to a usable ffmpeg binary

    Raises:
        FfmpegNotFoundError: If nothing usable was found
    """
    logger = logging.getLogger(__name__)

    if explicit:
        if _is_executable(explicit):
            return explicit
        resolved = shutil.which(explicit)
        if resolved:
            return resolved
        raise FfmpegNotFoundError(f"ffmpeg not found at '{explicit}'.")

    found = shutil.which(FFMPEG_BINARY)
    if found:
        logger.debug(f"Found ffmpeg on PATH: {found}")
        return found

    if fallback_paths is None:
        fallback_paths = FFMPEG_FALLBACK_PATHS
    for candidate in fallback_paths:
        if _is_executable(candidate):
            logger.debug(f"Found ffmpeg at fallback location: {candidate}")
            return candidate

    raise FfmpegNotFoundError(f"ffmpeg not found. Try: {FFMPEG_INSTALL_HINT}")


def build_strip_audio_stream(input_path: Path, output_path: Path):
    """
    Build the ffmpeg graph that drops audio and stream-copies video.

    Equivalent to::

        ffmpeg -i IN -an -c:v copy -movflags +faststart OUT -hide_banner -loglevel error -n

    ``-n`` makes ffmpeg refuse to overwrite an existing output.
    """
    return (
        ffmpeg.input(str(input_path))
        .output(
            str(output_path),
            an=None,  # Drop every audio stream
            movflags="+faststart",  # moov atom up front for progressive playback
            **{"c:v": "copy"},  # No re-encode
        )
        .global_args("-hide_banner", "-loglevel", "error", "-n")
    )


def strip_audio(ffmpeg_path: str, input_path: Path, output_path: Path) -> None:
    """
    Write an audio-free copy of ``input_path`` to ``output_path``.

    ffmpeg's own stderr is left attached to the terminal so its error lines
    reach the user directly.

    Raises:
        TranscodeError: If ffmpeg exits with a non-zero status
    """
    logger = logging.getLogger(__name__)
    stream = build_strip_audio_stream(input_path, output_path)
    logger.debug(f"Running: {' '.join(ffmpeg.compile(stream, cmd=ffmpeg_path))}")
    try:
        ffmpeg.run(stream, cmd=ffmpeg_path)
    except ffmpeg.Error as e:
        raise TranscodeError(
            f"ffmpeg failed while processing '{input_path}'",
            input_path=input_path,
            output_path=output_path,
        ) from e
