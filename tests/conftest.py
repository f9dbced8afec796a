"""Pytest configuration for mapops tests."""

import logging
import random
from collections import OrderedDict
from typing import Dict, Generator

import pytest

from mapops.config import CONFIG_PATH_ENV_VAR, ENV_VARS, reset_config


def _clear_mapops_env(monkeypatch) -> None:
    for env_var in [*ENV_VARS.values(), CONFIG_PATH_ENV_VAR]:
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch) -> Generator[None, None, None]:
    """Run every test without MAPOPS_* settings and with a fresh config."""
    _clear_mapops_env(monkeypatch)
    reset_config()
    yield
    # tests may have set invalid values
    _clear_mapops_env(monkeypatch)
    reset_config()


@pytest.fixture
def rng() -> random.Random:
    """Return a seeded random source.

    Returns
    -------
        Deterministic random.Random

    """
    return random.Random(1234)


@pytest.fixture
def style_map() -> Dict[str, str]:
    """Return a map with prefixed style keys.

    Returns
    -------
        Sample map with string keys

    """
    return {
        "style:textColor": "red",
        "style:backgroundColor": "black",
        "sectionName": "header",
    }


@pytest.fixture
def ordered_map() -> "OrderedDict[str, int]":
    """Return an OrderedDict of small integers.

    Returns
    -------
        Sample ordered map

    """
    return OrderedDict([("first", 1), ("second", 2), ("third", 3)])


@pytest.fixture
def capture_mapops_logs(caplog, monkeypatch):
    """Let caplog see records from the mapops package logger."""
    monkeypatch.setattr(logging.getLogger("mapops"), "propagate", True)
    caplog.set_level(logging.DEBUG, logger="mapops")
    return caplog
