from datetime import UTC, datetime

from sqlmodel import Field, Relationship, SQLModel, UniqueConstraint

from archive_guard.models.game import Game


class InstalledMod(SQLModel, table=True):
    __tablename__ = "installed_mods"
    __table_args__ = (UniqueConstraint("game_id", "mod_id"),)

    id: int | None = Field(default=None, primary_key=True)
    game_id: int = Field(foreign_key="games.id", index=True)
    mod_id: str = Field(index=True)
    name: str = ""
    custom_name: str = ""
    logical_file_name: str = ""
    installed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    game: Game | None = Relationship(back_populates="mods")
