from dataclasses import dataclass
from enum import StrEnum


class ArchiveKind(StrEnum):
    """Container format used by a game's packed asset archives."""

    BSA = "BSA"
    BA2 = "BA2"


@dataclass(frozen=True, slots=True)
class GameProfile:
    game_id: str
    display_name: str
    expected_version: int
    archive_kind: ArchiveKind


ARCHIVE_EXTENSIONS = frozenset({".bsa", ".ba2"})

CHECKING_NOTIFICATION_ID = "checking-archives-all"
RESULT_NOTIFICATION_ID = "archive-errors"
SHOW_DETAILS_ACTION = "show-details"

NOTIFICATION_IDS = (CHECKING_NOTIFICATION_ID, RESULT_NOTIFICATION_ID)

UNMANAGED_GROUP_KEY = "unmanaged"
UNMANAGED_GROUP_LABEL = "not managed by Archive Guard"
UNKNOWN_GAME_LABEL = "an unknown game"

# Fallout: New Vegas (BSA v104) is left out on purpose: it shares a version
# with Skyrim (2011) and would show up in Skyrim reverse lookups.
GAME_PROFILES: tuple[GameProfile, ...] = (
    GameProfile("skyrim", "Skyrim (2011)", 104, ArchiveKind.BSA),
    GameProfile("skyrimse", "Skyrim Special Edition", 105, ArchiveKind.BSA),
    GameProfile("skyrimvr", "Skyrim VR", 105, ArchiveKind.BSA),
    GameProfile("oblivion", "Oblivion", 103, ArchiveKind.BSA),
    GameProfile("fallout4", "Fallout 4", 1, ArchiveKind.BA2),
    GameProfile("fallout4vr", "Fallout 4 VR", 1, ArchiveKind.BA2),
    GameProfile("fallout76", "Fallout 76", 1, ArchiveKind.BA2),
)
