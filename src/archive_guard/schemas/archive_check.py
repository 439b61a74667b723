"""Schemas for the archive version check pipeline."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from archive_guard.constants import ArchiveKind


class PluginRecord(BaseModel):
    """One entry of the plugin state computed by the plugin manager."""

    model_config = ConfigDict(frozen=True)

    name: str
    is_native: bool = False
    loads_archive: bool = False
    enabled: bool = False
    load_order: int = 0
    mod_name: str | None = None


class ModRecord(BaseModel):
    """Read-only view of an installed mod, keyed by its external id."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    custom_name: str = ""
    logical_file_name: str = ""


@dataclass(frozen=True, slots=True)
class ArchiveCandidate:
    archive_file_name: str
    owning_plugin_name: str


@dataclass(frozen=True, slots=True)
class ArchiveProgress:
    completed_count: int
    total_count: int
    current_archive_name: str

    @property
    def percent(self) -> float:
        if self.total_count <= 0:
            return 0.0
        return self.completed_count * 100 / self.total_count


class ArchiveIssue(BaseModel):
    archive_file_name: str
    detected_version: int
    expected_version: int
    owning_plugin: PluginRecord | None = None
    owning_mod: ModRecord | None = None


class GameProfileOut(BaseModel):
    game_id: str
    display_name: str
    expected_version: int
    archive_kind: ArchiveKind


class ReportLine(BaseModel):
    archive_file_name: str
    plugin_name: str
    detected_version: int
    intended_games: str


class ReportSection(BaseModel):
    key: str
    mod_id: str | None = None
    label: str
    lines: list[ReportLine]


class ArchiveReport(BaseModel):
    """Detail report shown when the user asks for more on an archive error."""

    game_id: str
    game_name: str
    archive_kind: ArchiveKind
    expected_version: int
    total_issues: int
    sections: list[ReportSection]
    bbcode: str


class NotificationAction(BaseModel):
    title: str
    action: str


class Notification(BaseModel):
    id: str
    type: str
    title: str
    message: str = ""
    progress: float | None = None
    actions: list[NotificationAction] = []


class CheckScheduled(BaseModel):
    game_id: str
    plugin_count: int
