from archive_guard.constants import CHECKING_NOTIFICATION_ID, RESULT_NOTIFICATION_ID
from archive_guard.schemas.archive_check import ArchiveProgress
from archive_guard.services.game_profiles import get_game_profile
from archive_guard.services.notifications import NotificationCenter
from archive_guard.services.report_grouper import build_report

SKYRIM_SE = get_game_profile("skyrimse")


def _report():
    return build_report([], SKYRIM_SE)


class TestNotificationCenter:
    def test_progress_slot_is_replaced(self):
        center = NotificationCenter()
        center.show_progress(ArchiveProgress(0, 2, "a.bsa"))
        center.show_progress(ArchiveProgress(1, 2, "b.bsa"))
        active = center.active()
        assert len(active) == 1
        assert active[0].id == CHECKING_NOTIFICATION_ID
        assert active[0].type == "activity"
        assert active[0].message == "b.bsa"
        assert active[0].progress == 50.0

    def test_result_holds_report_and_action(self):
        center = NotificationCenter()
        notification = center.show_result(_report(), SKYRIM_SE)
        assert notification.type == "error"
        assert notification.message == "Some BSA files are not valid for this game."
        assert [a.action for a in notification.actions] == ["show-details"]
        assert center.report() is not None

    def test_dismiss_result_drops_report(self):
        center = NotificationCenter()
        center.show_result(_report(), SKYRIM_SE)
        assert center.dismiss(RESULT_NOTIFICATION_ID) is True
        assert center.get(RESULT_NOTIFICATION_ID) is None
        assert center.report() is None

    def test_dismiss_empty_slot(self):
        assert NotificationCenter().dismiss(CHECKING_NOTIFICATION_ID) is False

    def test_active_order_is_fixed(self):
        center = NotificationCenter()
        center.show_result(_report(), SKYRIM_SE)
        center.show_progress(ArchiveProgress(0, 1, "a.bsa"))
        assert [n.id for n in center.active()] == [
            CHECKING_NOTIFICATION_ID,
            RESULT_NOTIFICATION_ID,
        ]

    def test_begin_batch_clears_both_slots(self):
        center = NotificationCenter()
        center.show_result(_report(), SKYRIM_SE)
        center.show_progress(ArchiveProgress(0, 1, "a.bsa"))
        center.begin_batch()
        assert center.active() == []
        assert center.report() is None


class TestBatchTokens:
    def test_stale_result_is_dropped(self):
        center = NotificationCenter()
        older = center.begin_batch()
        center.begin_batch()
        assert center.show_result(_report(), SKYRIM_SE, batch=older) is None
        assert center.active() == []
        assert center.report() is None

    def test_stale_progress_is_dropped(self):
        center = NotificationCenter()
        older = center.begin_batch()
        center.begin_batch()
        assert center.show_progress(ArchiveProgress(0, 1, "a.bsa"), batch=older) is None
        assert center.get(CHECKING_NOTIFICATION_ID) is None

    def test_stale_dismiss_keeps_newer_progress(self):
        center = NotificationCenter()
        older = center.begin_batch()
        newer = center.begin_batch()
        center.show_progress(ArchiveProgress(0, 2, "b.bsa"), batch=newer)
        assert center.dismiss(CHECKING_NOTIFICATION_ID, batch=older) is False
        assert center.get(CHECKING_NOTIFICATION_ID).message == "b.bsa"

    def test_current_batch_publishes(self):
        center = NotificationCenter()
        batch = center.begin_batch()
        assert center.show_result(_report(), SKYRIM_SE, batch=batch) is not None
        assert center.dismiss(RESULT_NOTIFICATION_ID, batch=batch) is True

    def test_untokened_dismiss_always_applies(self):
        center = NotificationCenter()
        batch = center.begin_batch()
        center.show_result(_report(), SKYRIM_SE, batch=batch)
        center.begin_batch()
        center.show_result(_report(), SKYRIM_SE)
        assert center.dismiss(RESULT_NOTIFICATION_ID) is True
