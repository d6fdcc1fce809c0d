import time
import logging
from typing import Dict


class Timer:
    """
    Measures how long each named step of a run takes.

    Every file handed to ffmpeg gets its own entry, keyed by the input path.
    The collected durations are only reported at DEBUG level, so a normal run
    prints nothing extra.

    Attributes:
        timings (Dict[str, Dict[str, float]]): Operation name mapped to its
            'start', 'end' and 'duration' values (seconds, monotonic clock).
    """

    def __init__(self) -> None:
        self.timings: Dict[str, Dict[str, float]] = {}
        self.logger = logging.getLogger(__name__)

    def start(self, name: str) -> None:
        self.timings[name] = {"start": time.monotonic()}
        self.logger.debug(f"Timer started for '{name}'")

    def stop(self, name: str) -> float:
        if name not in self.timings:
            self.logger.warning(f"Timer for '{name}' was not started.")
            return 0.0
        timing = self.timings[name]
        timing["end"] = time.monotonic()
        timing["duration"] = timing["end"] - timing["start"]
        self.logger.debug(f"Timer stopped for '{name}'")
        return timing["duration"]

    @staticmethod
    def format_time(seconds: float) -> str:
        """
        Converts a duration in seconds to HH:MM:SS.mmm.
        """
        total_ms: int = round(seconds * 1000)
        hours, total_ms = divmod(total_ms, 3_600_000)
        minutes, total_ms = divmod(total_ms, 60_000)
        secs, milliseconds = divmod(total_ms, 1000)
        return f"{hours:02d}:{minutes:02d}:{secs:02d}.{milliseconds:03d}"

    def summary(self) -> float:
        total: float = 0
        if not self.timings:
            return total
        self.logger.debug("=== Processing Times ===")
        for name, timing in self.timings.items():
            if "duration" in timing:
                duration: float = timing["duration"]
            else:
                # Started but never stopped, e.g. ffmpeg failed mid-batch
                duration = time.monotonic() - timing["start"]
                self.logger.debug(f"Timer '{name}' was never stopped")
            total += duration
            self.logger.debug(f"{name}: {self.format_time(duration)}")
        self.logger.debug(f"Total time: {self.format_time(total)}")
        return total
