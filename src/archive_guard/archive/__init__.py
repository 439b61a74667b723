from archive_guard.archive.header import (
    HEADER_PREFIX_SIZE,
    UNREADABLE_VERSION,
    parse_version_field,
    read_archive_version,
)

__all__ = [
    "HEADER_PREFIX_SIZE",
    "UNREADABLE_VERSION",
    "parse_version_field",
    "read_archive_version",
]
