"""Compare archive header versions against the active game's expected version."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from archive_guard.archive.header import read_archive_version
from archive_guard.constants import GameProfile
from archive_guard.schemas.archive_check import (
    ArchiveCandidate,
    ArchiveIssue,
    ArchiveProgress,
    ModRecord,
    PluginRecord,
)
from archive_guard.services.progress import ProgressCallback, noop_progress

logger = logging.getLogger(__name__)


def _find_plugin(plugins: Sequence[PluginRecord], name: str) -> PluginRecord | None:
    return next((p for p in plugins if p.name == name), None)


def detect_version_mismatches(
    candidates: Sequence[ArchiveCandidate],
    profile: GameProfile,
    data_dir: str | Path,
    plugins: Sequence[PluginRecord],
    mods: Mapping[str, ModRecord],
    on_progress: ProgressCallback = noop_progress,
) -> list[ArchiveIssue]:
    """Read each candidate's header in order and collect version mismatches.

    Candidates are processed one at a time so progress is reported in
    candidate order.  ``on_progress`` fires before each read.  A failure
    reading one archive is logged and skipped.
    """
    data_dir = Path(data_dir)
    total = len(candidates)
    issues: list[ArchiveIssue] = []

    for pos, candidate in enumerate(candidates):
        on_progress(
            ArchiveProgress(
                completed_count=pos,
                total_count=total,
                current_archive_name=candidate.archive_file_name,
            )
        )
        try:
            version = read_archive_version(data_dir / candidate.archive_file_name)
        except Exception:
            logger.exception("Error checking archive version of %s", candidate.archive_file_name)
            continue

        if version == profile.expected_version:
            continue

        plugin = _find_plugin(plugins, candidate.owning_plugin_name)
        mod = mods.get(plugin.mod_name) if plugin and plugin.mod_name else None
        issues.append(
            ArchiveIssue(
                archive_file_name=candidate.archive_file_name,
                detected_version=version,
                expected_version=profile.expected_version,
                owning_plugin=plugin,
                owning_mod=mod,
            )
        )

    return issues
