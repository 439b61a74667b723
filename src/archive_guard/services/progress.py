"""Shared progress callback type for the archive check pipeline."""

from collections.abc import Callable

from archive_guard.schemas.archive_check import ArchiveProgress

ProgressCallback = Callable[[ArchiveProgress], None]


def noop_progress(_event: ArchiveProgress) -> None:
    pass
