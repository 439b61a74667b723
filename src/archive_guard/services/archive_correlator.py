"""Match enabled plugins to the archives they load from the data folder.

Bethesda engines load an archive for a plugin when the archive's file name
starts with the plugin's name (``Foo.esp`` loads ``Foo.bsa`` and
``Foo - Textures.bsa``).  Matching here is case-insensitive on the archive's
base name.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path

from archive_guard.constants import ARCHIVE_EXTENSIONS
from archive_guard.schemas.archive_check import ArchiveCandidate, PluginRecord

logger = logging.getLogger(__name__)


def sort_by_load_order(plugins: Iterable[PluginRecord]) -> list[PluginRecord]:
    return sorted(plugins, key=lambda p: p.load_order)


def archive_loaders(plugins: Iterable[PluginRecord]) -> list[PluginRecord]:
    """Keep enabled, non-native plugins that declare they load an archive."""
    return [p for p in plugins if not p.is_native and p.loads_archive and p.enabled]


def is_archive_file(filename: str) -> bool:
    return os.path.splitext(filename)[1].lower() in ARCHIVE_EXTENSIONS


def plugin_match_key(plugin_name: str) -> str:
    return os.path.splitext(plugin_name)[0].lower()


def list_data_archives(data_dir: str | Path) -> list[str]:
    """List the top level of *data_dir*.

    Raises ``OSError`` when the folder is missing or cannot be read; the
    caller decides how to treat that.
    """
    return [entry.name for entry in os.scandir(data_dir)]


def correlate(
    plugins: Sequence[PluginRecord],
    archive_files: Iterable[str],
) -> list[ArchiveCandidate]:
    """Pair every archive-loading plugin with each archive it prefix-matches.

    Plugin order is preserved and each plugin's matches are contiguous, in
    listing order.  An archive matched by several plugins yields one
    candidate per plugin.
    """
    archives = [a for a in archive_files if is_archive_file(a)]
    candidates: list[ArchiveCandidate] = []
    for plugin in archive_loaders(plugins):
        key = plugin_match_key(plugin.name)
        for archive in archives:
            if os.path.basename(archive).lower().startswith(key):
                candidates.append(
                    ArchiveCandidate(archive_file_name=archive, owning_plugin_name=plugin.name)
                )
    logger.debug(
        "Correlated %d archive(s) against %d plugin(s): %d candidate(s)",
        len(archives),
        len(plugins),
        len(candidates),
    )
    return candidates
