from archive_guard.models.game import Game
from archive_guard.models.install import InstalledMod

__all__ = [
    "Game",
    "InstalledMod",
]
