import sys
import copy
import logging
import logging.config
from typing import List, Optional

import coloredlogs

from noaudio.app_options import AppOptions, parse_arguments
from noaudio.batch import run_batch
from noaudio.media import Media
from noaudio.transcoder import find_ffmpeg
from noaudio.utils.constants import PROGRAM_NAME
from noaudio.utils.exceptions import FfmpegNotFoundError, TranscodeError

LOG_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "detailed": {
            "format": "%(asctime)s - [%(name)s] - [%(levelname)s] : %(message)s",
        },
        "console": {
            "format": "%(levelname)s: %(message)s",
        },
    },
    "handlers": {},
    "root": {"handlers": [], "level": "DEBUG"},
}

logger = logging.getLogger("remove_audio")


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure logging for the run.

    Console output goes to stderr through coloredlogs so that stdout only
    carries the per-file progress lines. A log file, when requested, always
    records everything at DEBUG.
    """
    log_config = copy.deepcopy(LOG_CONFIG)
    if log_file:
        log_config["handlers"]["file"] = {
            "class": "logging.FileHandler",
            "filename": log_file,
            "mode": "a",
            "level": "DEBUG",
            "formatter": "detailed",
        }
        log_config["root"]["handlers"] = ["file"]
    logging.config.dictConfig(log_config)

    coloredlogs.install(
        level=log_level,
        fmt=log_config["formatters"]["console"]["format"],
        milliseconds=True,
        stream=sys.stderr,
    )


def extension_list(extensions) -> str:
    """Render the extension set as shell-glob style text, e.g. .mp4/.MP4/.mov/.MOV."""
    return "/".join(
        variant
        for ext in sorted(extensions, key=lambda e: (e != ".mp4", e))
        for variant in (ext.lower(), ext.upper())
    )


def run(options: AppOptions) -> int:
    """
    Run one batch with already parsed options.

    Returns:
        int: Process exit code
    """
    logger.debug(f"Options selected are -> {options}")
    try:
        ffmpeg_path = find_ffmpeg(options.ffmpeg)
    except FfmpegNotFoundError as e:
        logger.error(str(e))
        return 1

    media = Media(options.paths, options.extensions)
    try:
        result = run_batch(media.iter_targets(), ffmpeg_path, dry_run=options.dry_run)
    except TranscodeError as e:
        logger.error(f"{e} (output: {e.output_path}). Stopping, remaining files were not processed.")
        return 1
    except OSError as e:
        logger.error(f"Filesystem error on '{e.filename}': {e.strerror or e}. Stopping, remaining files were not processed.")
        return 1

    if not result.found_any:
        print(
            f"No {extension_list(options.extensions)} files found to process in the specified paths.",
            file=sys.stderr,
        )
        print(f"Tip: run '{PROGRAM_NAME} --help' for usage and examples.", file=sys.stderr)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    options = parse_arguments(argv)
    setup_logging(options.log_level, options.log_file)
    try:
        return run(options)
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 130


def main_cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    main_cli()
