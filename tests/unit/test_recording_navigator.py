"""
Unit tests for RecordingNavigator adapter.

Tests verify the navigator implements Navigator protocol and records
targets for the HTTP layer to return as ``redirect_to``.
"""

import logging

import pytest

from src.adapters.web.navigator import RecordingNavigator


class TestRecordingNavigatorProtocol:
    """Tests for Navigator protocol compliance."""

    def test_implements_navigator_protocol(self) -> None:
        from src.domain.ports import Navigator

        navigator = RecordingNavigator()

        def accepts_navigator(n: Navigator) -> None:
            pass

        accepts_navigator(navigator)
        assert callable(navigator.navigate)

    def test_no_explicit_inheritance(self) -> None:
        """RecordingNavigator uses structural subtyping, not inheritance."""
        assert RecordingNavigator.__bases__ == (object,)


class TestRecording:
    """Tests for target recording."""

    def test_no_navigation(self) -> None:
        navigator = RecordingNavigator()
        assert navigator.target is None
        assert navigator.history == []

    def test_records_target(self) -> None:
        navigator = RecordingNavigator()
        navigator.navigate("/your-ticket")
        assert navigator.target == "/your-ticket"

    def test_latest_target_wins(self) -> None:
        navigator = RecordingNavigator()
        navigator.navigate("/")
        navigator.navigate("/your-ticket")
        assert navigator.target == "/your-ticket"
        assert navigator.history == ["/", "/your-ticket"]

    def test_query_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Error text carried in the query string stays out of the log."""
        navigator = RecordingNavigator()

        with caplog.at_level(logging.DEBUG, logger="src.adapters.web.navigator"):
            navigator.navigate("/?error=Student+not+found")

        assert "/" in caplog.text
        assert "Student" not in caplog.text
