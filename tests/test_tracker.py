"""End-to-end tests for the habit tracking session."""

from __future__ import annotations

from datetime import date

import pytest

from habitkeeper.config import TestConfig
from habitkeeper.models.habit import Frequency, Habit
from habitkeeper.services.notifier import RecordingNotifier
from habitkeeper.services.reminders import (
    COMPLETED_TITLE,
    INCOMPLETE_TITLE,
    REMINDER_TITLE,
    REMOVED_TITLE,
)
from habitkeeper.services.tracker import create_tracker


class TestRefresh:
    def test_rows_follow_projection_order(self, tracker):
        rows = tracker.refresh()
        assert [r.habit.name for r in rows] == ["Exercise", "Meditate", "Read"]

    def test_rows_carry_derived_values(self, habit_factory, dispatcher, fixed_today, test_config, days_before):
        tracker = create_tracker(
            [habit_factory(name="Read", completed_dates=days_before(15), habit_id="r")],
            notifier=dispatcher.notifier,
            config=test_config,
            clock=lambda: fixed_today,
        )
        (row,) = tracker.refresh()
        assert row.streak == 15
        assert row.completed_today is True
        assert row.progress == pytest.approx(50.0)
        assert row.frequency_label == "Daily"
        assert row.action_label == "Completed"

    def test_reminds_for_each_incomplete_visible_habit(self, tracker, recording_notifier):
        tracker.refresh()
        assert recording_notifier.titles == [REMINDER_TITLE] * 3

    def test_search_keystrokes_renotify(self, tracker, recording_notifier):
        tracker.set_search("e")
        tracker.set_search("ex")
        # 3 habits contain "e", then only "Exercise" contains "ex".
        assert len(recording_notifier.sent) == 4

    def test_explicit_today_overrides_clock(self, tracker, store):
        store.toggle("read", "2024-02-01")
        rows = tracker.refresh(today=date(2024, 2, 1))
        read = next(r for r in rows if r.habit.id == "read")
        assert read.completed_today is True


class TestParams:
    def test_filter_and_sort_setters(self, tracker):
        rows = tracker.set_filter("daily")
        assert [r.habit.name for r in rows] == ["Meditate", "Read"]
        rows = tracker.set_filter("all")
        rows = tracker.set_sort("frequency")
        assert [r.habit.frequency for r in rows] == [Frequency.DAILY, Frequency.DAILY, Frequency.WEEKLY]
        assert [r.habit.id for r in rows] == ["read", "meditate", "exercise"]

    def test_unknown_sort_key_rejected(self, tracker):
        with pytest.raises(ValueError):
            tracker.set_sort("color")


class TestNotifierFailure:
    """A failing notification backend never interrupts a pass."""

    class _DeadNotifier:
        def notify(self, title, *, body):
            raise OSError("notification backend gone")

    def test_toggle_still_refreshes(self, store, fixed_today, test_config):
        tracker = create_tracker(
            store.snapshot(), notifier=self._DeadNotifier(), config=test_config, clock=lambda: fixed_today
        )

        rows = tracker.toggle("read")

        assert len(rows) == 3
        assert tracker.rows == rows
        read = next(r for r in rows if r.habit.id == "read")
        assert read.completed_today is True
        assert tracker.store.get("read").completed_dates == {"2024-01-03"}

    def test_remove_still_refreshes(self, store, fixed_today, test_config):
        tracker = create_tracker(
            store.snapshot(), notifier=self._DeadNotifier(), config=test_config, clock=lambda: fixed_today
        )

        rows = tracker.remove("exercise")

        assert [r.habit.id for r in rows] == ["meditate", "read"]


class TestToggle:
    def test_toggle_completes_and_announces(self, tracker, recording_notifier, fixed_today):
        rows = tracker.toggle("read")
        read = next(r for r in rows if r.habit.id == "read")

        assert read.completed_today is True
        assert read.streak == 1
        assert recording_notifier.sent[0].title == COMPLETED_TITLE
        assert recording_notifier.sent[0].body == 'Habit "Read" has been completed.'
        # The refresh afterwards reminds only about the other two.
        assert recording_notifier.titles[1:] == [REMINDER_TITLE] * 2

    def test_second_toggle_announces_incomplete(self, tracker, recording_notifier):
        tracker.toggle("read")
        recording_notifier.clear()
        tracker.toggle("read")
        assert recording_notifier.titles[0] == INCOMPLETE_TITLE

    def test_reference_scenario(self, habit_factory, fixed_today, test_config):
        notifier = RecordingNotifier()
        tracker = create_tracker(
            [habit_factory(name="Read", habit_id="r", completed_dates=["2024-01-01", "2024-01-02", "2024-01-03"])],
            notifier=notifier,
            config=test_config,
            clock=lambda: fixed_today,
        )
        assert tracker.refresh()[0].streak == 3

        (row,) = tracker.toggle("r", today="2024-01-03")

        assert row.habit.sorted_dates() == ["2024-01-01", "2024-01-02"]
        assert row.streak == 0
        assert notifier.titles[0] == INCOMPLETE_TITLE

    def test_unknown_id_only_refreshes(self, tracker, recording_notifier):
        tracker.toggle("missing")
        assert recording_notifier.titles == [REMINDER_TITLE] * 3


class TestRemove:
    def test_remove_announces_pre_removal_name(self, tracker, recording_notifier):
        rows = tracker.remove("meditate")
        assert [r.habit.id for r in rows] == ["exercise", "read"]
        assert recording_notifier.sent[0].title == REMOVED_TITLE
        assert recording_notifier.sent[0].body == 'Habit "Meditate" has been removed.'

    def test_remove_unknown_id(self, tracker, recording_notifier):
        rows = tracker.remove("missing")
        assert len(rows) == 3
        assert REMOVED_TITLE not in recording_notifier.titles


class TestDetails:
    def test_details_lists_history(self, tracker, store):
        store.toggle("read", "2024-01-03")
        store.toggle("read", "2024-01-01")
        store.toggle("read", "2024-01-02")

        details = tracker.details("read")

        assert details.name == "Read"
        assert details.frequency is Frequency.DAILY
        assert details.completed_dates == ["2024-01-01", "2024-01-02", "2024-01-03"]
        assert details.current_streak == 3
        assert details.longest_streak == 3

    def test_details_unknown_id(self, tracker):
        assert tracker.details("missing") is None


class TestCreateTracker:
    def test_reads_goal_and_reminder_settings(self, monkeypatch, tmp_path, fixed_today):
        monkeypatch.setenv("HABITKEEPER_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("HABITKEEPER_STREAK_GOAL_DAYS", "10")
        monkeypatch.setenv("HABITKEEPER_REMINDERS_ENABLED", "false")
        notifier = RecordingNotifier()

        tracker = create_tracker(
            [Habit(id="a", name="Read", completed_dates=["2024-01-03", "2024-01-02"])],
            notifier=notifier,
            config=TestConfig(),
            clock=lambda: fixed_today,
        )
        (row,) = tracker.refresh()

        assert row.progress == pytest.approx(20.0)
        assert notifier.sent == []

    def test_defaults_to_logging_notifier(self, test_config):
        tracker = create_tracker(config=test_config)
        assert tracker.refresh() == []
