"""Group archive issues by owning mod and build the detail report."""

from __future__ import annotations

from collections.abc import Sequence

from archive_guard.constants import (
    UNKNOWN_GAME_LABEL,
    UNMANAGED_GROUP_KEY,
    UNMANAGED_GROUP_LABEL,
    GameProfile,
)
from archive_guard.schemas.archive_check import (
    ArchiveIssue,
    ArchiveReport,
    ModRecord,
    ReportLine,
    ReportSection,
)
from archive_guard.services.game_profiles import games_for_version


def group_issues(issues: Sequence[ArchiveIssue]) -> dict[str | None, list[ArchiveIssue]]:
    """Partition *issues* by owning mod id, keeping detector order in each group.

    Issues without a resolvable mod are collected under ``None`` so that no
    mod id, whatever its value, can share their group.
    """
    groups: dict[str | None, list[ArchiveIssue]] = {}
    for issue in issues:
        key = issue.owning_mod.id if issue.owning_mod else None
        groups.setdefault(key, []).append(issue)
    return groups


def group_label(mod: ModRecord | None) -> str:
    if mod is None:
        return UNMANAGED_GROUP_LABEL
    return mod.custom_name or mod.logical_file_name or mod.name or mod.id


def intended_games(version: int) -> str:
    names = [p.display_name for p in games_for_version(version)]
    return "/".join(names) or UNKNOWN_GAME_LABEL


def _line(issue: ArchiveIssue) -> ReportLine:
    return ReportLine(
        archive_file_name=issue.archive_file_name,
        plugin_name=issue.owning_plugin.name if issue.owning_plugin else "an unknown plugin",
        detected_version=issue.detected_version,
        intended_games=intended_games(issue.detected_version),
    )


def render_report_bbcode(sections: Sequence[ReportSection], profile: GameProfile) -> str:
    game = profile.display_name
    kind = profile.archive_kind.value
    parts = [
        f"Some of the {kind} archives in your load order are incompatible with {game}. "
        "Using incompatible archives may cause your game to crash on load.",
    ]
    for section in sections:
        items = "".join(
            f"[*][b]{line.archive_file_name}[/b] - Is loaded by {line.plugin_name}, "
            f"but is intended for use in {line.intended_games}."
            for line in section.lines
        )
        parts.append(
            f"[h3]Incompatible Archives: {section.label}[/h3][list]{items}[/list]<br/><br/>"
        )
    parts.append(
        f"You can fix this problem yourself by removing any mods that are not intended "
        f"to be used with {game}. If you downloaded these mods from the correct game site "
        f"at Nexus Mods, you should inform the mod author of this issue. "
        f"Archives for this game must be {kind} files (v{profile.expected_version})."
    )
    return "\n".join(parts)


def build_report(issues: Sequence[ArchiveIssue], profile: GameProfile) -> ArchiveReport:
    sections = [
        ReportSection(
            key=UNMANAGED_GROUP_KEY if mod_id is None else mod_id,
            mod_id=mod_id,
            label=group_label(group[0].owning_mod),
            lines=[_line(issue) for issue in group],
        )
        for mod_id, group in group_issues(issues).items()
    ]
    return ArchiveReport(
        game_id=profile.game_id,
        game_name=profile.display_name,
        archive_kind=profile.archive_kind,
        expected_version=profile.expected_version,
        total_issues=len(issues),
        sections=sections,
        bbcode=render_report_bbcode(sections, profile),
    )
