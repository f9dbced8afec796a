"""Tests for random key selection and random pops."""

import random
from collections import Counter

import pytest

from mapops.config import reset_config
from mapops.exceptions import EmptyMapError
from mapops.sampling import (
    get_default_random,
    get_random_key,
    pop_random,
    seed_default_random,
)


class FixedRandom:
    """Random source that always returns the same index."""

    def __init__(self, index):
        self.index = index
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return self.index


class TestGetRandomKey:
    """Tests for get_random_key."""

    def test_key_is_present(self, style_map, rng):
        """Test that the picked key belongs to the map."""
        for _ in range(20):
            assert get_random_key(style_map, rng) in style_map

    def test_advances_iterator_by_drawn_index(self, ordered_map):
        """Test that the drawn index selects the key at that position."""
        source = FixedRandom(2)
        assert get_random_key(ordered_map, source) == "third"
        assert source.calls == [3]

    def test_single_entry(self):
        """Test that a single-entry map always yields its key."""
        assert get_random_key({"only": 1}) == "only"

    def test_empty_map(self):
        """Test that an empty map raises EmptyMapError."""
        with pytest.raises(EmptyMapError) as excinfo:
            get_random_key({})
        assert excinfo.value.operation == "get_random_key"

    def test_empty_map_is_lookup_error(self):
        """Test that EmptyMapError can be caught as LookupError."""
        with pytest.raises(LookupError):
            get_random_key({})

    def test_all_keys_reachable(self, rng):
        """Test that every key is eventually picked."""
        mapping = {name: i for i, name in enumerate("abcde")}
        counts = Counter(get_random_key(mapping, rng) for _ in range(500))
        assert set(counts) == set(mapping)

    def test_same_seed_same_keys(self, style_map):
        """Test that equal seeds give equal picks."""
        first = [get_random_key(style_map, random.Random(7)) for _ in range(5)]
        second = [get_random_key(style_map, random.Random(7)) for _ in range(5)]
        assert first == second


class TestDefaultRandom:
    """Tests for the shared random source."""

    def test_default_random_is_shared(self):
        """Test that the same instance is returned each time."""
        assert get_default_random() is get_default_random()

    def test_seed_default_random_repeats(self):
        """Test that reseeding reproduces the sequence."""
        mapping = {str(i): i for i in range(50)}
        seed_default_random(42)
        first = [get_random_key(mapping) for _ in range(10)]
        seed_default_random(42)
        second = [get_random_key(mapping) for _ in range(10)]
        assert first == second

    def test_seed_from_environment(self, monkeypatch):
        """Test that MAPOPS_RANDOM_SEED seeds the shared source."""
        mapping = {str(i): i for i in range(50)}
        monkeypatch.setenv("MAPOPS_RANDOM_SEED", "99")
        reset_config()
        first = [get_random_key(mapping) for _ in range(10)]
        reset_config()
        second = [get_random_key(mapping) for _ in range(10)]
        assert first == second


class TestPopRandom:
    """Tests for pop_random."""

    def test_pop_removes_pair(self, style_map, rng):
        """Test that the popped key was present and is now gone."""
        original = dict(style_map)
        key, value = pop_random(style_map, rng)
        assert original[key] == value
        assert key not in style_map
        assert len(style_map) == len(original) - 1

    def test_pop_until_empty(self, ordered_map, rng):
        """Test that popping every entry drains the map."""
        popped = dict(pop_random(ordered_map, rng) for _ in range(3))
        assert popped == {"first": 1, "second": 2, "third": 3}
        assert not ordered_map

    def test_pop_uses_given_rng(self, ordered_map):
        """Test that the random source picks the popped entry."""
        assert pop_random(ordered_map, FixedRandom(1)) == ("second", 2)
        assert list(ordered_map) == ["first", "third"]

    def test_pop_empty(self):
        """Test that popping from an empty map raises EmptyMapError."""
        with pytest.raises(EmptyMapError):
            pop_random({})
