"""Shared FastAPI dependencies used across routers."""

from fastapi import HTTPException
from sqlmodel import Session, select

from archive_guard.models.game import Game
from archive_guard.services.notifications import NotificationCenter, notification_center


def get_game_or_404(game_id: str, session: Session) -> Game:
    """Look up a game by its identifier, raising 404 if not found."""
    game = session.exec(select(Game).where(Game.game_id == game_id)).first()
    if not game:
        raise HTTPException(404, f"Game '{game_id}' not found")
    return game


def get_notification_center() -> NotificationCenter:
    return notification_center
