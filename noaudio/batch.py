import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from noaudio.output_path import unique_output
from noaudio.target import Target
from noaudio.transcoder import strip_audio
from noaudio.utils.timer import Timer


@dataclass
class RunResult:
    """
    Outcome of one invocation.

    Attributes:
        processed (int): Targets handed to ffmpeg (or reported in a dry run)
        skipped (int): Targets left alone because they look like outputs
        outputs (List[Path]): Output paths, in processing order
    """

    processed: int = 0
    skipped: int = 0
    outputs: List[Path] = field(default_factory=list)

    @property
    def found_any(self) -> bool:
        return self.processed > 0


def skip_reason(target: Target) -> str | None:
    """Return the skip message prefix for a target, or None if it should run."""
    if target.is_noaudio_output:
        return "Skipping (already no-audio)"
    if target.is_in_noaudio_dir:
        return "Skipping (in noaudio dir)"
    return None


def process_target(
    target: Target,
    ffmpeg_path: str,
    dry_run: bool = False,
) -> Path | None:
    """
    Strip the audio from a single target.

    Returns:
        Path | None: The output path, or None when the target was skipped

    Raises:
        TranscodeError: Propagated from ffmpeg, the caller stops the batch
    """
    reason = skip_reason(target)
    if reason:
        print(f"{reason}: {target.path}", flush=True)
        return None

    output = unique_output(target, create_dir=not dry_run).path
    print(f"Processing: {target.path}", flush=True)
    print(f" -> Output : {output}", flush=True)
    if dry_run:
        return output
    strip_audio(ffmpeg_path, target.path, output)
    print("Done.", flush=True)
    return output


def run_batch(
    targets: Iterable[Target],
    ffmpeg_path: str,
    dry_run: bool = False,
) -> RunResult:
    """
    Process targets one after another.

    The first ffmpeg failure propagates out of here and ends the batch; the
    remaining targets are not touched.
    """
    logger = logging.getLogger(__name__)
    result = RunResult()
    stopwatch = Timer()

    try:
        for target in targets:
            stopwatch.start(str(target.path))
            output = process_target(target, ffmpeg_path, dry_run=dry_run)
            stopwatch.stop(str(target.path))
            if output is None:
                result.skipped += 1
                continue
            result.processed += 1
            result.outputs.append(output)
    finally:
        stopwatch.summary()

    logger.debug(f"Processed {result.processed} file(s), skipped {result.skipped}")
    return result
