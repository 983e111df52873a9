"""Tests for NotificationHub."""

import logging

from hris.activity_log import ActivityLog
from hris.notifications.hub import NotificationHub

# -- Helpers -----------------------------------------------------------------


class FakeChannel:
    """Minimal channel implementation for testing."""

    def __init__(self, channel_name: str = "fake", journal: list | None = None) -> None:
        self._name = channel_name
        self.sent: list[str] = []
        self._journal = journal

    @property
    def name(self) -> str:
        return self._name

    def send(self, message: str) -> bool:
        self.sent.append(message)
        if self._journal is not None:
            self._journal.append((self._name, message))
        return True


class FailChannel(FakeChannel):
    """Channel that always reports failure."""

    def send(self, message: str) -> bool:
        super().send(message)
        return False


class BrokenChannel(FakeChannel):
    """Channel that raises on every send."""

    def send(self, message: str) -> bool:
        raise RuntimeError("network down")


# -- Registration ------------------------------------------------------------


def test_add_channel_registers_and_logs(hub: NotificationHub, activity_log: ActivityLog) -> None:
    ch = FakeChannel("email")
    hub.add_channel(ch)
    assert hub.channels == (ch,)
    assert activity_log.entries() == ["[2024-03-15] Notification channel added: email"]


def test_channels_returns_snapshot(hub: NotificationHub) -> None:
    hub.add_channel(FakeChannel())
    snapshot = hub.channels
    hub.add_channel(FakeChannel("other"))
    assert len(snapshot) == 1


def test_remove_by_identity(hub: NotificationHub, activity_log: ActivityLog) -> None:
    a = FakeChannel("same")
    b = FakeChannel("same")
    hub.add_channel(a)
    hub.add_channel(b)

    assert hub.remove_channel(b) is True
    assert hub.channels == (a,)
    assert activity_log.entries()[-1] == "[2024-03-15] Notification channel removed: same"


def test_remove_unregistered_is_silent(hub: NotificationHub, activity_log: ActivityLog) -> None:
    hub.add_channel(FakeChannel("a"))
    before = len(activity_log)
    assert hub.remove_channel(FakeChannel("a")) is False
    assert len(hub.channels) == 1
    assert len(activity_log) == before


def test_remove_duplicate_registration_once(hub: NotificationHub) -> None:
    ch = FakeChannel()
    hub.add_channel(ch)
    hub.add_channel(ch)
    hub.remove_channel(ch)
    assert hub.channels == (ch,)


# -- Broadcast ---------------------------------------------------------------


def test_broadcast_in_registration_order(hub: NotificationHub) -> None:
    journal: list[tuple[str, str]] = []
    hub.add_channel(FakeChannel("email", journal))
    hub.add_channel(FakeChannel("sms", journal))
    hub.add_channel(FakeChannel("pager", journal))

    delivered = hub.broadcast("hello")
    assert delivered == 3
    assert journal == [("email", "hello"), ("sms", "hello"), ("pager", "hello")]


def test_broadcast_logs_message(hub: NotificationHub, activity_log: ActivityLog) -> None:
    hub.broadcast("New employee added: Alice")
    assert activity_log.entries() == [
        "[2024-03-15] Broadcasting notification: New employee added: Alice"
    ]


def test_broadcast_no_channels(hub: NotificationHub) -> None:
    assert hub.broadcast("nobody listening") == 0


def test_broadcast_skips_removed_channel(hub: NotificationHub) -> None:
    keep = FakeChannel("keep")
    drop = FakeChannel("drop")
    hub.add_channel(keep)
    hub.add_channel(drop)
    hub.remove_channel(drop)

    hub.broadcast("msg")
    assert keep.sent == ["msg"]
    assert drop.sent == []


def test_broadcast_counts_failures(hub: NotificationHub) -> None:
    ok = FakeChannel("ok")
    fail = FailChannel("fail")
    hub.add_channel(ok)
    hub.add_channel(fail)

    assert hub.broadcast("msg") == 1
    assert fail.sent == ["msg"]


def test_broadcast_continues_after_exception(hub: NotificationHub, caplog) -> None:
    after = FakeChannel("after")
    hub.add_channel(BrokenChannel("broken"))
    hub.add_channel(after)

    with caplog.at_level(logging.ERROR, logger="hris.notifications.hub"):
        delivered = hub.broadcast("msg")

    assert delivered == 1
    assert after.sent == ["msg"]
    assert "channel broken failed" in caplog.text
