"""Tests for the entry point helpers"""
import logging

import pytest

from mappia.main import resolve_log_level


@pytest.mark.parametrize(
    "name, expected",
    [
        ("DEBUG", logging.DEBUG),
        ("info", logging.INFO),
        (" warning ", logging.WARNING),
        ("ERROR", logging.ERROR),
    ],
)
def test_known_levels(name, expected):
    assert resolve_log_level(name) == expected


@pytest.mark.parametrize("name", ["basic_format", "BASIC_FORMAT", "root", "verbose", ""])
def test_unknown_levels_fall_back_to_info(name):
    assert resolve_log_level(name) == logging.INFO
