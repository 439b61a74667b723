"""Endpoints driving the archive version check and its notifications."""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from sqlmodel import Session

from archive_guard.constants import NOTIFICATION_IDS, RESULT_NOTIFICATION_ID
from archive_guard.database import get_session
from archive_guard.routers.deps import get_notification_center
from archive_guard.schemas.archive_check import (
    ArchiveReport,
    CheckScheduled,
    GameProfileOut,
    Notification,
    PluginRecord,
)
from archive_guard.services.archive_check_service import (
    ArchiveCheckInput,
    load_check_input,
    run_archive_check,
)
from archive_guard.services.game_profiles import list_game_profiles
from archive_guard.services.notifications import NotificationCenter

logger = logging.getLogger(__name__)

router = APIRouter(tags=["archive-check"])


def _run_batch(check_input: ArchiveCheckInput, notifications: NotificationCenter) -> None:
    try:
        run_archive_check(check_input, notifications)
    except Exception:
        logger.exception("Archive check failed for game '%s'", check_input.game_id)


@router.get("/game-profiles", response_model=list[GameProfileOut])
def game_profiles() -> list[GameProfileOut]:
    return [
        GameProfileOut(
            game_id=p.game_id,
            display_name=p.display_name,
            expected_version=p.expected_version,
            archive_kind=p.archive_kind,
        )
        for p in list_game_profiles()
    ]


@router.post("/games/{game_id}/plugins", response_model=CheckScheduled, status_code=202)
def plugin_state_changed(
    game_id: str,
    plugins: dict[str, PluginRecord],
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_session),
    notifications: NotificationCenter = Depends(get_notification_center),
) -> CheckScheduled:
    """Receive the freshly computed plugin state and schedule an archive check."""
    check_input = load_check_input(session, game_id, plugins)
    background_tasks.add_task(_run_batch, check_input, notifications)
    return CheckScheduled(game_id=game_id, plugin_count=len(plugins))


@router.get("/notifications/", response_model=list[Notification])
def list_notifications(
    notifications: NotificationCenter = Depends(get_notification_center),
) -> list[Notification]:
    return notifications.active()


@router.get(f"/notifications/{RESULT_NOTIFICATION_ID}/details", response_model=ArchiveReport)
def archive_error_details(
    notifications: NotificationCenter = Depends(get_notification_center),
) -> ArchiveReport:
    report = notifications.report()
    if report is None:
        raise HTTPException(404, "No archive errors to show")
    return report


@router.delete("/notifications/{notification_id}", status_code=204)
def dismiss_notification(
    notification_id: str,
    notifications: NotificationCenter = Depends(get_notification_center),
) -> None:
    if notification_id not in NOTIFICATION_IDS:
        raise HTTPException(404, f"Unknown notification '{notification_id}'")
    notifications.dismiss(notification_id)
