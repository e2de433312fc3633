# File: tests/unit/test_event_store.py
"""
Unit tests for the in-memory EventStore.
"""

import pytest

from weekly_scheduler.core.event_store import EventStore
from weekly_scheduler.models import Event, EventColor


class TestInsert:

    def test_insert_into_empty_store(self, board_meeting):
        store = EventStore()

        assert store.insert(board_meeting) is None
        assert len(store) == 1
        assert board_meeting in store

    def test_overlap_returns_conflict_without_mutation(self, store, board_meeting, at):
        clash = Event("Clash", "HQ", at(0, 9, 30), at(0, 10, 30))

        assert store.insert(clash) is board_meeting
        assert len(store) == 2
        assert clash not in store

    def test_touching_endpoints_are_accepted(self, board_meeting, at):
        store = EventStore([board_meeting])
        before = Event("Before", "", at(0, 8), at(0, 9))
        after = Event("After", "", at(0, 10), at(0, 11))

        assert store.insert(before) is None
        assert store.insert(after) is None
        assert len(store) == 3

    def test_same_hours_on_other_day_do_not_conflict(self, board_meeting, at):
        store = EventStore([board_meeting])
        tuesday = Event("Board Mtg", "HQ", at(1, 9), at(1, 10))

        assert store.insert(tuesday) is None

    def test_constructor_rejects_overlapping_events(self, board_meeting, at):
        with pytest.raises(ValueError, match="overlaps"):
            EventStore([board_meeting, Event("Clash", "", at(0, 9), at(0, 9, 30))])


class TestRemove:

    def test_remove_by_identity(self, at):
        first = Event("Same", "Room", at(0, 9), at(0, 10), EventColor.RED)
        twin = Event("Same", "Room", at(1, 9), at(1, 10), EventColor.RED)
        store = EventStore([first, twin])

        assert store.remove(twin) is True
        assert list(store.all()) == [first]

    def test_remove_missing(self, store, at):
        stranger = Event("Stranger", "", at(3, 9), at(3, 10))

        assert store.remove(stranger) is False
        assert len(store) == 2

    def test_remove_field_equal_copy_is_not_found(self, store, board_meeting):
        copy = Event(*board_meeting.field_tuple())

        assert store.remove(copy) is False
        assert board_meeting in store


class TestLookup:

    def test_find_at_exact_start(self, store, board_meeting, at):
        assert store.find_at(at(0, 9)) is board_meeting

    def test_find_at_inside_interval_is_none(self, store, at):
        assert store.find_at(at(0, 9, 30)) is None

    def test_events_on(self, store, lunch, monday, at):
        assert store.events_on(at(2, 0).date()) == [lunch]
        assert store.events_on(monday.replace(day=7)) == []


class TestGridIndex:

    def test_board_meeting(self, board_meeting):
        assert EventStore.grid_index(board_meeting) == (1, 0)

    def test_first_and_last_rows(self, at):
        assert EventStore.grid_index(Event("a", "", at(4, 8), at(4, 9))) == (0, 4)
        assert EventStore.grid_index(Event("b", "", at(5, 20), at(5, 21))) == (12, 5)

    def test_out_of_range(self, at):
        assert EventStore.grid_index(Event("early", "", at(0, 7), at(0, 8))) is None
        assert EventStore.grid_index(Event("late", "", at(0, 21), at(0, 22))) is None


class TestIteration:

    def test_all_is_restartable_and_ordered(self, store, board_meeting, lunch):
        assert list(store.all()) == [board_meeting, lunch]
        assert list(store.all()) == [board_meeting, lunch]
        assert list(store) == [board_meeting, lunch]

    def test_all_iterates_a_snapshot(self, store, board_meeting, lunch):
        events = store.all()
        store.remove(lunch)

        assert list(events) == [board_meeting, lunch]

    def test_replace_all(self, store, at):
        replacement = EventStore([Event("New", "", at(1, 9), at(1, 10))])
        store.replace_all(replacement)

        assert [e.name for e in store.all()] == ["New"]
