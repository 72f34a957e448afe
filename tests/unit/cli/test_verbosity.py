"""Unit tests for CLI verbosity handling."""

from __future__ import annotations

import logging

import pytest

from torrentctl.cli.verbosity import VerbosityLevel, VerbosityManager

pytestmark = [pytest.mark.cli, pytest.mark.unit]


class TestVerbosityManager:
    """Test VerbosityManager class."""

    def test_default_keeps_configured_level(self):
        """Test that no -v flag leaves the configured level alone."""
        vm = VerbosityManager.from_count(0)
        assert vm.level == VerbosityLevel.NORMAL
        assert vm.get_logging_level() is None
        assert not vm.is_debug()

    def test_verbose(self):
        """Test that -v selects INFO."""
        vm = VerbosityManager.from_count(1)
        assert vm.level == VerbosityLevel.VERBOSE
        assert vm.get_logging_level() == logging.INFO

    def test_debug(self):
        """Test that -vv selects DEBUG."""
        vm = VerbosityManager.from_count(2)
        assert vm.get_logging_level() == logging.DEBUG
        assert vm.is_debug()

    def test_count_is_clamped(self):
        """Test that the count is clamped to the supported range."""
        assert VerbosityManager.from_count(-3).verbosity_count == 0
        assert VerbosityManager.from_count(7).level == VerbosityLevel.DEBUG
