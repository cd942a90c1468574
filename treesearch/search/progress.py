"""Progress reporting utilities for searching."""

import sys
import time
from dataclasses import dataclass, field


@dataclass
class SearchStats:
    """Statistics for a search operation."""

    directories_scanned: int = 0
    entries_seen: int = 0
    skipped_directories: int = 0
    matches: int = 0
    start_time: float = field(default_factory=time.time)
    end_time: float | None = None

    @property
    def elapsed_seconds(self) -> float:
        end = self.end_time if self.end_time is not None else time.time()
        return end - self.start_time

    def finish(self) -> None:
        self.end_time = time.time()


class ProgressReporter:
    """Reports search progress to the user."""

    def __init__(self, interval: int = 1000):
        self.interval = interval
        self._last_report_count = 0

    def reset(self) -> None:
        self._last_report_count = 0

    def report_if_needed(self, stats: SearchStats, current_directory: str) -> None:
        if stats.directories_scanned - self._last_report_count >= self.interval:
            self._print_progress(stats, current_directory)
            self._last_report_count = stats.directories_scanned

    def report_completion(self, stats: SearchStats) -> None:
        duration = _format_duration(stats.elapsed_seconds)
        print(
            f"Search complete: {stats.matches:,} matches in "
            f"{stats.directories_scanned:,} directories ({duration})",
            file=sys.stderr,
        )
        print(f"Entries examined: {stats.entries_seen:,}", file=sys.stderr)
        if stats.skipped_directories:
            print(
                f"Directories skipped: {stats.skipped_directories:,}",
                file=sys.stderr,
            )

    def _print_progress(self, stats: SearchStats, current_directory: str) -> None:
        print(
            f"[{stats.directories_scanned:,} dirs, {stats.matches:,} matches] "
            f"Searching: {current_directory}",
            file=sys.stderr,
        )


def _format_duration(seconds: float) -> str:
    hours, remainder = divmod(int(seconds), 3600)
    minutes, secs = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"
