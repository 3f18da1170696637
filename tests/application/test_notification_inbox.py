import pytest

from shop.application.notification_inbox import NotificationInbox
from shop.domain.exceptions import EntityNotFoundError, ForbiddenError
from shop.domain.model.notification import NotificationType
from tests.fakes import build_shop


def _setup():
    shop = build_shop()
    note = shop.emitter.notify_user("alice", NotificationType.GENERIC, "hello")
    return shop, NotificationInbox(shop.notifications), note


class TestNotificationInbox:

    def test_list_for_user(self):
        _, inbox, note = _setup()
        assert [n.id for n in inbox.list_for_user("alice")] == [note.id]
        assert inbox.list_for_user("bob") == []

    def test_mark_seen_persists(self):
        shop, inbox, note = _setup()
        inbox.mark_seen(note.id, "alice")
        assert shop.notifications.get_by_id(note.id).seen is True

    def test_mark_seen_twice_writes_once(self):
        shop, inbox, note = _setup()
        inbox.mark_seen(note.id, "alice")
        shop.store.fail_writes("notifications")
        assert inbox.mark_seen(note.id, "alice").seen is True

    def test_unknown_notification(self):
        _, inbox, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            inbox.mark_seen("nope", "alice")

    def test_someone_elses_notification(self):
        shop, inbox, note = _setup()
        with pytest.raises(ForbiddenError):
            inbox.mark_seen(note.id, "bob")
        assert shop.notifications.get_by_id(note.id).seen is False
