from fastapi import APIRouter, Depends, HTTPException, Response
from sqlmodel import Session, select

from archive_guard.database import get_session
from archive_guard.models.install import InstalledMod
from archive_guard.routers.deps import get_game_or_404
from archive_guard.schemas.mod import InstalledModIn, InstalledModOut

router = APIRouter(prefix="/games/{game_id}/mods", tags=["mods"])


@router.get("/", response_model=list[InstalledModOut])
def list_installed_mods(
    game_id: str, session: Session = Depends(get_session)
) -> list[InstalledMod]:
    game = get_game_or_404(game_id, session)
    return list(
        session.exec(
            select(InstalledMod)
            .where(InstalledMod.game_id == game.id)
            .order_by(InstalledMod.mod_id)
        ).all()
    )


@router.put("/{mod_id}", response_model=InstalledModOut)
def upsert_installed_mod(
    game_id: str,
    mod_id: str,
    data: InstalledModIn,
    response: Response,
    session: Session = Depends(get_session),
) -> InstalledMod:
    """Register an installed mod, or update its display names."""
    game = get_game_or_404(game_id, session)
    mod = session.exec(
        select(InstalledMod).where(InstalledMod.game_id == game.id, InstalledMod.mod_id == mod_id)
    ).first()
    if mod is None:
        mod = InstalledMod(game_id=game.id, mod_id=mod_id)  # type: ignore[arg-type]
        session.add(mod)
        response.status_code = 201
    mod.name = data.name
    mod.custom_name = data.custom_name
    mod.logical_file_name = data.logical_file_name
    session.commit()
    session.refresh(mod)
    return mod


@router.delete("/{mod_id}", status_code=204)
def delete_installed_mod(
    game_id: str, mod_id: str, session: Session = Depends(get_session)
) -> None:
    game = get_game_or_404(game_id, session)
    mod = session.exec(
        select(InstalledMod).where(InstalledMod.game_id == game.id, InstalledMod.mod_id == mod_id)
    ).first()
    if mod is None:
        raise HTTPException(404, "Installed mod not found")
    session.delete(mod)
    session.commit()
