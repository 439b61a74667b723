"""Session state for the archive check notifications.

Two slots exist, keyed by fixed ids: the in-progress "checking" activity and
the "issues found" result.  Publishing to a slot replaces whatever it held.

Batches may overlap when plugin state changes quickly, so every batch takes a
token from :meth:`NotificationCenter.begin_batch`.  Starting a batch clears
both slots, and calls made with a token other than the latest one are
ignored, so a batch that finishes late cannot overwrite the state of the one
that superseded it.
"""

from __future__ import annotations

import logging
import threading

from archive_guard.constants import (
    CHECKING_NOTIFICATION_ID,
    NOTIFICATION_IDS,
    RESULT_NOTIFICATION_ID,
    SHOW_DETAILS_ACTION,
    GameProfile,
)
from archive_guard.schemas.archive_check import (
    ArchiveProgress,
    ArchiveReport,
    Notification,
    NotificationAction,
)

logger = logging.getLogger(__name__)


class NotificationCenter:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._slots: dict[str, Notification] = {}
        self._report: ArchiveReport | None = None
        self._batch = 0

    def _is_stale(self, batch: int | None) -> bool:
        # Caller holds the lock. No token means an unconditional update.
        return batch is not None and batch != self._batch

    def begin_batch(self) -> int:
        """Supersede any running batch and return the new batch's token."""
        with self._lock:
            self._batch += 1
            self._slots.clear()
            self._report = None
            return self._batch

    def show_progress(
        self, event: ArchiveProgress, batch: int | None = None
    ) -> Notification | None:
        notification = Notification(
            id=CHECKING_NOTIFICATION_ID,
            type="activity",
            title="Checking archives",
            message=event.current_archive_name,
            progress=event.percent,
        )
        with self._lock:
            if self._is_stale(batch):
                return None
            self._slots[CHECKING_NOTIFICATION_ID] = notification
        return notification

    def show_result(
        self, report: ArchiveReport, profile: GameProfile, batch: int | None = None
    ) -> Notification | None:
        notification = Notification(
            id=RESULT_NOTIFICATION_ID,
            type="error",
            title="Incompatible mod archive(s)",
            message=f"Some {profile.archive_kind.value} files are not valid for this game.",
            actions=[NotificationAction(title="More", action=SHOW_DETAILS_ACTION)],
        )
        with self._lock:
            if self._is_stale(batch):
                logger.debug("Dropped result of superseded batch %d", batch)
                return None
            self._slots[RESULT_NOTIFICATION_ID] = notification
            self._report = report
        return notification

    def dismiss(self, notification_id: str, batch: int | None = None) -> bool:
        """Clear a slot.  Returns ``False`` if nothing was removed."""
        with self._lock:
            if self._is_stale(batch):
                return False
            removed = self._slots.pop(notification_id, None)
            if notification_id == RESULT_NOTIFICATION_ID:
                self._report = None
        if removed is not None:
            logger.debug("Dismissed notification %s", notification_id)
        return removed is not None

    def get(self, notification_id: str) -> Notification | None:
        with self._lock:
            return self._slots.get(notification_id)

    def active(self) -> list[Notification]:
        with self._lock:
            return [self._slots[i] for i in NOTIFICATION_IDS if i in self._slots]

    def report(self) -> ArchiveReport | None:
        with self._lock:
            return self._report


notification_center = NotificationCenter()
