"""Tests for the mapops exception hierarchy."""

from mapops.exceptions import (
    ConfigurationError,
    EmptyMapError,
    InvalidOptionError,
    KeyCollisionError,
    MapOpsError,
)


def test_all_errors_share_base():
    """Test that every error derives from MapOpsError."""
    errors = [
        EmptyMapError("pop_random"),
        InvalidOptionError("add target", "x", ["keys"]),
        KeyCollisionError("a", "x:a", "a"),
        ConfigurationError("bad"),
    ]
    for error in errors:
        assert isinstance(error, MapOpsError)


def test_builtin_bases():
    """Test the builtin exception each error also derives from."""
    assert isinstance(EmptyMapError("get_first_key"), LookupError)
    assert isinstance(InvalidOptionError("o", "v", []), ValueError)
    assert isinstance(KeyCollisionError("a", "b", "c"), KeyError)


def test_default_error_code():
    """Test that the error code defaults to the class name."""
    assert EmptyMapError("pop_random").error_code == "EMPTYMAPERROR"


def test_str_includes_context_and_actions():
    """Test the string form of an error with context."""
    error = InvalidOptionError("add target", "all", ["keys", "values"])
    text = str(error)
    assert text.startswith("Invalid add target: 'all'")
    assert "Context:" in text
    assert "Use one of: keys, values" in text


def test_key_collision_str_not_quoted():
    """Test that KeyCollisionError keeps the readable message."""
    error = KeyCollisionError("a", "x:a", "a")
    assert str(error).startswith("Keys 'x:a' and 'a' both become 'a'")
