import os
import argparse
from dataclasses import dataclass, field
from typing import List, Optional, Set

from noaudio import __version__
from noaudio.target import normalize_extensions
from noaudio.utils.constants import PROGRAM_NAME, VIDEO_EXTENSIONS

USAGE_EPILOG = """\
outputs:
  For each input video, the output is written to a "noaudio" subfolder in the
  same directory as the input, named <basename>_noaudio.<ext>. Example:
    /path/to/Video.MP4  ->  /path/to/noaudio/Video_noaudio.MP4
    /path/to/Clip.MOV   ->  /path/to/noaudio/Clip_noaudio.MOV

notes:
  * Existing outputs are not overwritten; (1), (2), ... is appended instead.
  * Files already ending with *_noaudio.<ext> are skipped.
  * Files inside a "noaudio" folder are skipped.
  * Output extensions keep the input's case, also with -e mp4 (clip.MP4 -> clip_noaudio.MP4).
  * Use -- before file names that start with a dash: remove-audio -- -clip.mp4
  * Requires ffmpeg (install: brew install ffmpeg)
"""


@dataclass
class AppOptions:
    """Configuration options for one run of the audio stripper."""

    paths: List[str] = field(default_factory=list)  # Files and/or directories, empty = cwd
    extensions: Set[str] = field(default_factory=lambda: set(VIDEO_EXTENSIONS))
    ffmpeg: Optional[str] = None        # Explicit ffmpeg binary
    dry_run: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None      # Extra DEBUG log written here

    def __str__(self):
        """
        Return a string representation of the AppOptions object.

        Returns:
            str: The options and their current values, one per line.
        """
        paths = ", ".join(os.path.normpath(p) for p in self.paths) if self.paths else "<current directory>"
        return (
            f"\nPaths: {paths}"
            f"\nExtensions: {', '.join(sorted(self.extensions))}"
            f"\nFFmpeg: {self.ffmpeg}"
            f"\nDry Run: {self.dry_run}"
            f"\nLog Level: {self.log_level}"
            f"\nLog File: {self.log_file}"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Remove audio tracks from MP4/MOV files without re-encoding (writes into ./noaudio)",
        epilog=USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Video files and/or directories to process (default: current directory, non-recursive)",
    )
    parser.add_argument(
        "-e",
        "--extension",
        action="append",
        default=None,
        metavar="EXT",
        help="Extension to process, may be repeated (default: mp4 and mov, any case)",
    )
    parser.add_argument(
        "--ffmpeg",
        default=None,
        metavar="PATH",
        help="Path to the ffmpeg binary (default: search PATH, then Homebrew locations)",
    )
    parser.add_argument(
        "-n",
        "--dry_run",
        action="store_true",
        help="Show what would be done without running ffmpeg or creating folders",
    )
    parser.add_argument(
        "-log",
        "--log_level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: INFO)",
    )
    parser.add_argument(
        "--log_file",
        default=None,
        metavar="PATH",
        help="Also write a DEBUG log to this file",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> AppOptions:
    """
    Parse and validate command line arguments.

    ``-h``/``--help`` and ``--version`` print and exit with status 0; bad
    arguments exit with status 2 (argparse behavior).

    Args:
        argv (Optional[List[str]]): Arguments without the program name, defaults to sys.argv

    Returns:
        AppOptions: Validated configuration options
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    options = AppOptions(
        paths=list(args.paths),
        ffmpeg=args.ffmpeg,
        dry_run=args.dry_run,
        log_level=args.log_level,
        log_file=args.log_file,
    )
    if args.extension:
        extensions = normalize_extensions(args.extension)
        if not extensions:
            parser.error("--extension needs a non-empty value")
        options.extensions = extensions

    return options
