from datetime import datetime

from pydantic import BaseModel


class GameCreate(BaseModel):
    game_id: str
    name: str = ""
    install_path: str | None = None


class GameOut(BaseModel):
    id: int
    game_id: str
    name: str
    install_path: str | None
    created_at: datetime
    updated_at: datetime
