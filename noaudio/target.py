from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Set

from noaudio.utils.constants import NOAUDIO_DIR_NAME, NOAUDIO_SUFFIX


def normalize_extensions(extensions: Iterable[str]) -> Set[str]:
    """Lower-case extensions and make sure every one starts with a dot."""
    normalized: Set[str] = set()
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext:
            continue
        normalized.add(ext if ext.startswith(".") else f".{ext}")
    return normalized


def has_allowed_extension(path: Path, extensions: Set[str]) -> bool:
    """Case-insensitive check of the final suffix against the allowed set."""
    return path.suffix.lower() in extensions


def absolute_path(path: Path) -> Path:
    """
    Resolve a path against the real filesystem.

    Directories resolve to their canonical location. For files only the
    parent directory is resolved and the original filename is appended, so a
    symlinked video keeps the name the user gave it.
    """
    if path.is_dir():
        return path.resolve()
    return path.parent.resolve() / path.name


# This is basically a struct in python
@dataclass(frozen=True)
class Target:
    """
    A video file that is a candidate for audio stripping.

    Attributes:
        path (Path): Absolute path to the video file
    """

    path: Path

    @classmethod
    def from_path(cls, path: Path) -> "Target":
        return cls(absolute_path(Path(path)))

    @property
    def extension(self) -> str:
        """Extension without the dot, in its original case."""
        return self.path.suffix[1:]

    @property
    def is_noaudio_output(self) -> bool:
        """True if the stem already carries the output suffix (case-sensitive)."""
        return self.path.stem.endswith(NOAUDIO_SUFFIX)

    @property
    def is_in_noaudio_dir(self) -> bool:
        """True if the file sits directly inside an output folder."""
        return self.path.parent.name == NOAUDIO_DIR_NAME
