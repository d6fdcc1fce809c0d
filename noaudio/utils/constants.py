# Description: Constants used in the project
from typing import List, Set


# Containers we know ffmpeg can stream-copy video out of without the audio
VIDEO_EXTENSIONS: Set[str] = {
    ".mp4",
    ".mov",
}

# Output folder created next to every processed input
NOAUDIO_DIR_NAME: str = "noaudio"
# Appended to the stem of every output file
NOAUDIO_SUFFIX: str = "_noaudio"

FFMPEG_BINARY: str = "ffmpeg"
# Checked in order when ffmpeg is not on PATH (Homebrew on Apple Silicon, then Intel)
FFMPEG_FALLBACK_PATHS: List[str] = [
    "/opt/homebrew/bin/ffmpeg",
    "/usr/local/bin/ffmpeg",
]
FFMPEG_INSTALL_HINT: str = "brew install ffmpeg"

PROGRAM_NAME: str = "remove-audio"
