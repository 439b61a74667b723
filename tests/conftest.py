import os
import tempfile
from collections.abc import Generator

os.environ.setdefault("AG_DATA_DIR", tempfile.mkdtemp(prefix="archive-guard-tests-"))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402
from sqlmodel.pool import StaticPool  # noqa: E402

import archive_guard.models  # noqa: E402, F401  register all tables
from archive_guard.database import get_session  # noqa: E402
from archive_guard.main import app  # noqa: E402
from archive_guard.models.game import Game  # noqa: E402
from archive_guard.models.install import InstalledMod  # noqa: E402
from archive_guard.routers.deps import get_notification_center  # noqa: E402
from archive_guard.services.notifications import NotificationCenter  # noqa: E402


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(eng)
    return eng


@pytest.fixture
def session(engine, monkeypatch):
    with Session(engine) as sess:
        monkeypatch.setattr("archive_guard.database.engine", engine)
        yield sess


@pytest.fixture
def notifications() -> NotificationCenter:
    return NotificationCenter()


@pytest.fixture
def client(engine, monkeypatch, notifications):
    monkeypatch.setattr("archive_guard.database.engine", engine)

    def _override_session() -> Generator[Session, None, None]:
        with Session(engine) as sess:
            yield sess

    app.dependency_overrides[get_session] = _override_session
    app.dependency_overrides[get_notification_center] = lambda: notifications
    with TestClient(app, raise_server_exceptions=False) as tc:
        yield tc
    app.dependency_overrides.clear()


@pytest.fixture
def write_archive():
    def _write(path, version: int = 105, magic: bytes = b"BSA\x00"):
        """Write a minimal archive whose version window sums to *version* (at most 1020)."""
        window = bytearray(4)
        remaining = version
        for i in range(4):
            window[i] = min(remaining, 255)
            remaining -= window[i]
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(magic + bytes(window) + b"\x24" + b"\x00" * 27)
        return path

    return _write


@pytest.fixture
def make_game(session):
    def _make(game_id: str = "skyrimse", install_path: str | None = None, name: str = "") -> Game:
        game = Game(game_id=game_id, name=name or game_id, install_path=install_path)
        session.add(game)
        session.commit()
        session.refresh(game)
        return game

    return _make


@pytest.fixture
def make_mod(session):
    def _make(game: Game, mod_id: str, **names: str) -> InstalledMod:
        mod = InstalledMod(game_id=game.id, mod_id=mod_id, **names)  # type: ignore[arg-type]
        session.add(mod)
        session.commit()
        session.refresh(mod)
        return mod

    return _make
