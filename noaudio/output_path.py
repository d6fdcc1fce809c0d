import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from noaudio.target import Target
from noaudio.utils.constants import NOAUDIO_DIR_NAME, NOAUDIO_SUFFIX


@dataclass(frozen=True)
class OutputDescriptor:
    """
    Where the audio-free copy of a target is written.

    Attributes:
        directory (Path): The ``noaudio`` folder next to the input
        base (str): Input filename without its extension
        extension (str): Output extension without the dot, case preserved
        counter (Optional[int]): Disambiguation number, None for the plain name
    """

    directory: Path
    base: str
    extension: str
    counter: Optional[int] = None

    @property
    def filename(self) -> str:
        suffix = NOAUDIO_SUFFIX if self.counter is None else f"{NOAUDIO_SUFFIX}({self.counter})"
        if self.extension:
            return f"{self.base}{suffix}.{self.extension}"
        return f"{self.base}{suffix}"

    @property
    def path(self) -> Path:
        return self.directory / self.filename

    def next(self) -> "OutputDescriptor":
        """The descriptor probed after this one when its path is taken."""
        return replace(self, counter=1 if self.counter is None else self.counter + 1)


def output_directory(target: Target) -> Path:
    return target.path.parent / NOAUDIO_DIR_NAME


def unique_output(target: Target, create_dir: bool = True) -> OutputDescriptor:
    """
    Pick an output name inside ``<parent>/noaudio`` that does not exist yet.

    ``<base>_noaudio.<ext>`` is tried first, then ``<base>_noaudio(1).<ext>``,
    ``(2)`` and so on. The search has no upper bound. Nothing is reserved on
    disk, so two processes racing on the same folder can pick the same name.

    Args:
        target (Target): Input video
        create_dir (bool): Create the ``noaudio`` folder (and parents) if missing

    Returns:
        OutputDescriptor: First candidate whose path is free
    """
    logger = logging.getLogger(__name__)
    directory = output_directory(target)
    if create_dir:
        directory.mkdir(parents=True, exist_ok=True)

    descriptor = OutputDescriptor(
        directory=directory,
        base=target.path.stem,
        extension=target.extension,
    )
    while descriptor.path.exists():
        logger.debug(f"Output exists, trying next name: {descriptor.path}")
        descriptor = descriptor.next()
    return descriptor
