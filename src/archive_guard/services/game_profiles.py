from archive_guard.constants import GAME_PROFILES, GameProfile

_PROFILES_BY_ID: dict[str, GameProfile] = {p.game_id: p for p in GAME_PROFILES}


def get_game_profile(game_id: str) -> GameProfile | None:
    return _PROFILES_BY_ID.get(game_id)


def games_for_version(version: int) -> list[GameProfile]:
    """Return every supported game whose archives use *version*, in table order."""
    return [p for p in GAME_PROFILES if p.expected_version == version]


def list_game_profiles() -> list[GameProfile]:
    return list(GAME_PROFILES)
