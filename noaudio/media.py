import os
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Set

from noaudio.target import Target, has_allowed_extension
from noaudio.utils.constants import VIDEO_EXTENSIONS


def scan_directory(directory: Path, extensions: Set[str]) -> Iterator[Path]:
    """
    Yield files directly inside a directory that carry an allowed extension.

    The scan is not recursive, hidden entries are ignored and the order is
    whatever the filesystem listing returns.

    Args:
        directory (Path): Directory to scan
        extensions (Set[str]): Allowed lower-case extensions, dot included

    Yields:
        Path: Matching file paths, joined onto ``directory``
    """
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.name.startswith("."):
                continue
            if not entry.is_file():
                continue
            path = directory / entry.name
            if has_allowed_extension(path, extensions):
                yield path


class Media:
    """
    Turns the user's path arguments into video targets.
    """

    def __init__(
        self,
        paths: Iterable[str],
        extensions: Optional[Set[str]] = None,
        cwd: Optional[Path] = None,
    ):
        """
        Args:
            paths (Iterable[str]): Files and/or directories from the command line.
                Empty means "scan the current directory".
            extensions (Optional[Set[str]]): Allowed extensions, defaults to MP4/MOV
            cwd (Optional[Path]): Directory scanned when no paths are given
        """
        self._paths: List[str] = list(paths)
        self._extensions: Set[str] = extensions if extensions else set(VIDEO_EXTENSIONS)
        self._cwd: Path = cwd if cwd is not None else Path.cwd()
        self._logger = logging.getLogger(__name__)

    def iter_targets(self) -> Iterator[Target]:
        """
        Yield targets in argument order, then listing order within directories.

        Paths that do not exist and directories that cannot be listed are
        reported with a warning and skipped; files with other extensions are
        dropped silently.
        """
        if not self._paths:
            self._logger.debug(f"No paths given, scanning {self._cwd}")
            for path in scan_directory(self._cwd, self._extensions):
                yield Target.from_path(path)
            return

        for arg in self._paths:
            path = Path(arg)
            if path.is_dir():
                self._logger.debug(f"Scanning directory: {path}")
                try:
                    file_paths = list(scan_directory(path, self._extensions))
                except OSError as e:
                    self._logger.warning(f"Skipping unreadable directory: {arg} ({e.strerror})")
                    continue
                for file_path in file_paths:
                    yield Target.from_path(file_path)
            elif path.is_file():
                if has_allowed_extension(path, self._extensions):
                    yield Target.from_path(path)
                else:
                    self._logger.debug(f"Ignoring file with unsupported extension: {path}")
            else:
                self._logger.warning(f"Skipping non-existent path: {arg}")

    def get_targets(self) -> List[Target]:
        return list(self.iter_targets())
