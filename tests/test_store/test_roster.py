"""Tests for RosterStore."""

import itertools

import pytest

from hoopstats.models.player import Roster
from hoopstats.store.roster import (
    RosterStore,
    EmptyPlayerNameError,
    PlayerNotFoundError,
)


class TestAddPlayer:
    def test_add_player(self, sequential_ids):
        store = RosterStore(id_factory=sequential_ids)
        roster = store.add_player("Steph")

        assert len(roster) == 1
        assert roster.players[0].id == "p1"
        assert roster.players[0].name == "Steph"
        assert roster.players[0].games == ()
        assert store.roster is roster

    def test_name_is_trimmed(self):
        store = RosterStore()
        store.add_player("  Steph  ")
        assert store.roster.players[0].name == "Steph"

    def test_blank_name_is_ignored(self):
        store = RosterStore()
        store.add_player("A")
        before = store.roster

        after = store.add_player("   ")

        assert after is before
        assert len(store.roster) == 1

    def test_empty_name_is_ignored(self):
        store = RosterStore()
        store.add_player("")
        assert len(store.roster) == 0

    def test_blank_name_strict_raises(self):
        store = RosterStore(strict=True)
        with pytest.raises(EmptyPlayerNameError):
            store.add_player("   ")
        assert len(store.roster) == 0

    def test_insertion_order_preserved(self):
        store = RosterStore()
        for name in ["C", "A", "B"]:
            store.add_player(name)
        assert [p.name for p in store.roster] == ["C", "A", "B"]

    def test_default_ids_are_unique(self):
        store = RosterStore()
        for i in range(50):
            store.add_player(f"Player {i}")
        assert len(set(store.roster.ids)) == 50

    def test_colliding_id_factory_is_retried(self):
        ids = iter(["x", "x", "y"])
        store = RosterStore(id_factory=lambda: next(ids))
        store.add_player("A")
        store.add_player("B")
        assert store.roster.ids == ["x", "y"]


class TestRemovePlayer:
    def test_remove_player(self, sequential_ids):
        store = RosterStore(id_factory=sequential_ids)
        store.add_player("A")
        store.add_player("B")

        roster = store.remove_player("p1")

        assert roster.ids == ["p2"]

    def test_remove_unknown_is_noop(self, sequential_ids):
        store = RosterStore(id_factory=sequential_ids)
        store.add_player("A")
        before = store.roster

        assert store.remove_player("nope") is before

    def test_remove_unknown_strict_raises(self, sequential_ids):
        store = RosterStore(strict=True, id_factory=sequential_ids)
        store.add_player("A")

        with pytest.raises(PlayerNotFoundError) as exc_info:
            store.remove_player("nope")

        assert exc_info.value.player_id == "nope"
        assert store.roster.ids == ["p1"]

    def test_ids_stay_distinct(self):
        store = RosterStore()
        for i in range(10):
            store.add_player(f"Player {i}")
        for player_id in store.roster.ids[::2]:
            store.remove_player(player_id)
        for i in range(10):
            store.add_player(f"Late {i}")

        ids = store.roster.ids
        assert len(ids) == 15
        assert len(set(ids)) == len(ids)

    def test_ids_stay_distinct_with_reused_sequence(self):
        # A factory that reissues ids freed by removals must not create duplicates
        counter = itertools.cycle(["a", "b", "c"])
        store = RosterStore(id_factory=lambda: next(counter))
        store.add_player("A")
        store.add_player("B")
        store.remove_player("a")
        store.add_player("C")
        store.add_player("D")

        ids = store.roster.ids
        assert len(set(ids)) == len(ids) == 3


class TestAppendGame:
    def test_append_game(self, sequential_ids, sample_game):
        store = RosterStore(id_factory=sequential_ids)
        store.add_player("A")

        roster = store.append_game("p1", sample_game)

        assert roster.get("p1").games == (sample_game,)

    def test_append_preserves_order(self, sequential_ids, sample_games):
        store = RosterStore(id_factory=sequential_ids)
        store.add_player("A")
        for game in sample_games:
            store.append_game("p1", game)

        assert list(store.roster.get("p1").games) == sample_games

    def test_append_only_touches_target(self, sequential_ids, sample_game):
        store = RosterStore(id_factory=sequential_ids)
        store.add_player("A")
        store.add_player("B")
        other = store.roster.get("p2")

        store.append_game("p1", sample_game)

        assert store.roster.get("p2") is other

    def test_append_unknown_is_noop(self, sequential_ids, sample_game, sample_games):
        store = RosterStore(id_factory=sequential_ids)
        store.add_player("A")
        store.add_player("B")
        store.append_game("p1", sample_games[0])
        before = store.roster

        after = store.append_game("missing", sample_game)

        assert after is before
        assert after.get("p1").games == (sample_games[0],)
        assert after.get("p2").games == ()

    def test_append_unknown_strict_raises(self, sequential_ids, sample_game):
        store = RosterStore(strict=True, id_factory=sequential_ids)
        store.add_player("A")
        before = store.roster

        with pytest.raises(PlayerNotFoundError):
            store.append_game("missing", sample_game)

        assert store.roster is before
        assert store.roster.get("p1").games == ()

    def test_append_accepts_unvalidated_values(self, sequential_ids, game_factory):
        store = RosterStore(id_factory=sequential_ids)
        store.add_player("A")
        store.append_game("p1", game_factory(rebounds=-3))
        assert store.roster.get("p1").games[0].rebounds == -3


class TestSnapshots:
    def test_old_snapshot_unchanged(self, sequential_ids, sample_game):
        store = RosterStore(id_factory=sequential_ids)
        first = store.add_player("A")

        store.append_game("p1", sample_game)
        store.add_player("B")
        store.remove_player("p1")

        assert first.ids == ["p1"]
        assert first.get("p1").games == ()

    def test_initial_roster(self):
        store = RosterStore()
        assert store.roster == Roster()

    def test_get_player(self, sequential_ids):
        store = RosterStore(id_factory=sequential_ids)
        store.add_player("A")
        assert store.get_player("p1").name == "A"

    def test_get_player_unknown(self):
        with pytest.raises(PlayerNotFoundError):
            RosterStore().get_player("nope")
