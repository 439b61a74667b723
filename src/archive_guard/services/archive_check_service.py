"""Archive version check: one batch from plugin-state change to notification.

A batch snapshots the registries, lists the game's data folder, pairs
archive-loading plugins with their archives, reads every candidate's header
and, if any archive targets a different format version than the active game,
publishes an error notification with a grouped detail report.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path

from sqlmodel import Session, select

from archive_guard.config import settings
from archive_guard.constants import CHECKING_NOTIFICATION_ID
from archive_guard.models.game import Game
from archive_guard.models.install import InstalledMod
from archive_guard.schemas.archive_check import (
    ArchiveIssue,
    ArchiveReport,
    ModRecord,
    PluginRecord,
)
from archive_guard.services.archive_correlator import (
    correlate,
    list_data_archives,
    sort_by_load_order,
)
from archive_guard.services.game_profiles import get_game_profile
from archive_guard.services.notifications import NotificationCenter
from archive_guard.services.report_grouper import build_report
from archive_guard.services.version_checker import detect_version_mismatches

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ArchiveCheckInput:
    """Read-only snapshot of everything a batch needs."""

    game_id: str
    plugins: tuple[PluginRecord, ...]
    mods: Mapping[str, ModRecord]
    install_path: str | None


@dataclass(slots=True)
class ArchiveCheckOutcome:
    checked: int = 0
    issues: list[ArchiveIssue] = field(default_factory=list)
    report: ArchiveReport | None = None


def load_check_input(
    session: Session,
    game_id: str,
    plugins: Mapping[str, PluginRecord],
) -> ArchiveCheckInput:
    """Snapshot the game's discovery path and installed mods from the registry."""
    game = session.exec(select(Game).where(Game.game_id == game_id)).first()
    mods: dict[str, ModRecord] = {}
    if game is not None:
        rows = session.exec(select(InstalledMod).where(InstalledMod.game_id == game.id)).all()
        mods = {
            row.mod_id: ModRecord(
                id=row.mod_id,
                name=row.name,
                custom_name=row.custom_name,
                logical_file_name=row.logical_file_name,
            )
            for row in rows
        }
    return ArchiveCheckInput(
        game_id=game_id,
        plugins=tuple(plugins.values()),
        mods=mods,
        install_path=game.install_path if game else None,
    )


def run_archive_check(
    check_input: ArchiveCheckInput,
    notifications: NotificationCenter,
    *,
    data_folder: str | None = None,
) -> ArchiveCheckOutcome:
    """Run one batch and publish its notifications.

    Unsupported games, undiscovered installs, unreadable data folders and
    empty candidate lists all end the batch quietly with an empty outcome.
    Starting a batch supersedes any batch still running against the same
    notification center.
    """
    batch = notifications.begin_batch()

    profile = get_game_profile(check_input.game_id)
    if profile is None:
        logger.debug("Archive check skipped: unsupported game %s", check_input.game_id)
        return ArchiveCheckOutcome()

    if not check_input.plugins:
        return ArchiveCheckOutcome()

    plugins = sort_by_load_order(check_input.plugins)

    if not check_input.install_path:
        logger.warning("Archive check skipped: %s has not been discovered", profile.game_id)
        return ArchiveCheckOutcome()

    data_dir = Path(check_input.install_path) / (data_folder or settings.game_data_folder)
    try:
        data_files = list_data_archives(data_dir)
    except OSError as exc:
        logger.error("Error checking for %s errors in %s: %s", profile.archive_kind, data_dir, exc)
        return ArchiveCheckOutcome()

    candidates = correlate(plugins, data_files)
    if not candidates:
        logger.debug("Archive check: nothing to check for %s", profile.game_id)
        return ArchiveCheckOutcome()

    try:
        issues = detect_version_mismatches(
            candidates,
            profile,
            data_dir,
            plugins,
            check_input.mods,
            on_progress=partial(notifications.show_progress, batch=batch),
        )
    finally:
        notifications.dismiss(CHECKING_NOTIFICATION_ID, batch=batch)

    outcome = ArchiveCheckOutcome(checked=len(candidates), issues=issues)
    if issues:
        outcome.report = build_report(issues, profile)
        notifications.show_result(outcome.report, profile, batch=batch)
        logger.info(
            "Found %d incompatible %s archive(s) for %s",
            len(issues),
            profile.archive_kind,
            profile.game_id,
        )
    else:
        logger.debug("No issues with BA2/BSA files. Total checked: %d", len(candidates))
    return outcome
