"""Tests for the package logger hierarchy."""

from __future__ import annotations

import logging

from wikiquery.logger import get_logger, set_level


class TestGetLogger:
    def test_children_hang_off_package_root(self) -> None:
        assert get_logger("wikiquery.client").name == "wikiquery.client"
        assert get_logger("helpers").name == "wikiquery.helpers"

    def test_single_root_handler(self) -> None:
        get_logger("a")
        get_logger("b")
        assert len(logging.getLogger("wikiquery").handlers) == 1

    def test_set_level(self) -> None:
        root = logging.getLogger("wikiquery")
        previous = root.level
        try:
            set_level(logging.WARNING)
            assert not get_logger("x").isEnabledFor(logging.INFO)
        finally:
            root.setLevel(previous)
