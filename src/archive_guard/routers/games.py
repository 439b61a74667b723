from datetime import UTC, datetime

from fastapi import APIRouter, Depends, Response
from sqlmodel import Session, select

from archive_guard.database import get_session
from archive_guard.models.game import Game
from archive_guard.routers.deps import get_game_or_404
from archive_guard.schemas.game import GameCreate, GameOut

router = APIRouter(prefix="/games", tags=["games"])


@router.get("/", response_model=list[GameOut])
def list_games(session: Session = Depends(get_session)) -> list[Game]:
    return list(session.exec(select(Game).order_by(Game.game_id)).all())


@router.post("/", response_model=GameOut, status_code=201)
def create_game(
    data: GameCreate, response: Response, session: Session = Depends(get_session)
) -> Game:
    existing = session.exec(select(Game).where(Game.game_id == data.game_id)).first()
    if existing:
        existing.name = data.name or existing.name
        existing.install_path = data.install_path
        existing.updated_at = datetime.now(UTC)
        session.commit()
        session.refresh(existing)
        response.status_code = 200
        return existing

    game = Game(game_id=data.game_id, name=data.name, install_path=data.install_path)
    session.add(game)
    session.commit()
    session.refresh(game)
    return game


@router.get("/{game_id}", response_model=GameOut)
def get_game(game_id: str, session: Session = Depends(get_session)) -> Game:
    return get_game_or_404(game_id, session)
