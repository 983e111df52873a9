"""Tests for ActivityLog."""

import logging
from datetime import date

from hris.activity_log import ActivityLog

# -- Entries -----------------------------------------------------------------


def test_log_prefixes_iso_date(activity_log: ActivityLog) -> None:
    entry = activity_log.log("Something happened")
    assert entry == "[2024-03-15] Something happened"
    assert activity_log.entries() == ["[2024-03-15] Something happened"]


def test_entries_keep_insertion_order(activity_log: ActivityLog) -> None:
    activity_log.log("first")
    activity_log.log("second")
    activity_log.log("third")
    assert [e.split("] ", 1)[1] for e in activity_log.entries()] == ["first", "second", "third"]


def test_entries_returns_copy(activity_log: ActivityLog) -> None:
    activity_log.log("kept")
    snapshot = activity_log.entries()
    snapshot.clear()
    snapshot.append("forged")
    assert activity_log.entries() == ["[2024-03-15] kept"]


def test_len_counts_entries(activity_log: ActivityLog) -> None:
    assert len(activity_log) == 0
    activity_log.log("a")
    activity_log.log("b")
    assert len(activity_log) == 2


def test_default_clock_uses_today() -> None:
    log = ActivityLog()
    entry = log.log("hello")
    assert entry.startswith(f"[{date.today().isoformat()}]")


def test_also_emits_stdlib_log(activity_log: ActivityLog, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="hris.activity_log"):
        activity_log.log("audit me")
    assert "[2024-03-15] audit me" in caplog.text


# -- tail() ------------------------------------------------------------------


def test_tail_returns_last_entries(activity_log: ActivityLog) -> None:
    for i in range(7):
        activity_log.log(f"entry {i}")
    tail = activity_log.tail(5)
    assert len(tail) == 5
    assert tail[0].endswith("entry 2")
    assert tail[-1].endswith("entry 6")


def test_tail_shorter_log(activity_log: ActivityLog) -> None:
    activity_log.log("only")
    assert activity_log.tail(5) == ["[2024-03-15] only"]


def test_tail_zero_is_empty(activity_log: ActivityLog) -> None:
    activity_log.log("x")
    assert activity_log.tail(0) == []


# -- Singleton ---------------------------------------------------------------


def test_singleton_same_instance() -> None:
    assert ActivityLog.get() is ActivityLog.get()


def test_reset_creates_new_instance() -> None:
    a = ActivityLog.get()
    ActivityLog._reset()
    assert ActivityLog.get() is not a
