"""Reader for the format version of Bethesda ``.bsa`` / ``.ba2`` archives.

Only the first 9 bytes are read.  The version is the sum of the unsigned
bytes at offsets 4-7 rather than a decoded integer: every format revision
shipped by the supported games is small enough to be identified by that
sum alone (BSA 103/104/105, BA2 1).
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

HEADER_PREFIX_SIZE = 9
VERSION_FIELD_START = 4
VERSION_FIELD_END = 8

# Reserved: no supported game expects version 0, so an unreadable archive
# always reports as a mismatch.  A future format summing to 0 would collide.
UNREADABLE_VERSION = 0


def parse_version_field(data: bytes) -> int:
    """Sum the version window of an in-memory header prefix."""
    if len(data) < HEADER_PREFIX_SIZE:
        raise ValueError(f"Header too short: {len(data)} bytes, need {HEADER_PREFIX_SIZE}")
    return sum(data[VERSION_FIELD_START:VERSION_FIELD_END])


def read_archive_version(file_path: str | Path) -> int:
    """Return the declared format version of the archive at *file_path*.

    Never raises: a missing, unreadable or truncated file yields
    ``UNREADABLE_VERSION``.
    """
    file_path = Path(file_path)
    try:
        with file_path.open("rb") as f:
            prefix = f.read(HEADER_PREFIX_SIZE)
        return parse_version_field(prefix)
    except (OSError, ValueError) as exc:
        logger.debug("Could not read archive header of %s: %s", file_path, exc)
        return UNREADABLE_VERSION
