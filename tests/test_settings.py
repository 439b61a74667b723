from sqlalchemy import event

from archive_guard import database
from archive_guard.config import Settings


class TestSettings:
    def test_cors_origins_default_empty(self):
        assert Settings().cors_origins == []

    def test_cors_origins_from_env(self, monkeypatch):
        monkeypatch.setenv("AG_CORS_ORIGINS", '["http://localhost:3000"]')
        assert Settings().cors_origins == ["http://localhost:3000"]

    def test_db_path_under_data_dir(self, tmp_path):
        assert Settings(data_dir=tmp_path).db_path == tmp_path / "archive_guard.db"


class TestDatabase:
    def test_pragma_listener_registered_at_import(self):
        assert event.contains(database.engine, "connect", database._set_sqlite_pragma)

    def test_pragma_applied_after_repeated_setup(self):
        database.create_db_and_tables()
        database.create_db_and_tables()
        with database.engine.connect() as conn:
            # 1 is NORMAL
            assert conn.exec_driver_sql("PRAGMA synchronous").scalar() == 1
