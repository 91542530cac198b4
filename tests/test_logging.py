"""Tests for helpkit.core.logging."""

import json

import structlog

from helpkit.core.logging import (
    add_correlation_id,
    get_correlation_id,
    get_logger,
    reset_logging,
    set_correlation_id,
    setup_logging,
)
from helpkit.utils.i18n import get_localized_value
from helpkit.utils.numeric import round_value
from helpkit.utils.objects import create_object_hash


class TestCorrelationId:
    """Tests for correlation id tracking."""

    def test_generated_when_missing(self):
        correlation_id = set_correlation_id()
        assert len(correlation_id) == 8
        assert get_correlation_id() == correlation_id

    def test_explicit_id(self):
        assert set_correlation_id("run-42") == "run-42"
        assert get_correlation_id() == "run-42"

    def test_processor_adds_id(self):
        set_correlation_id("run-42")
        event = add_correlation_id(None, "info", {"event": "x"})
        assert event["correlation_id"] == "run-42"

    def test_processor_without_id(self):
        assert add_correlation_id(None, "info", {"event": "x"}) == {"event": "x"}


class TestUnconfiguredLogging:
    """Helpers stay silent until logging is set up."""

    def test_helpers_write_nothing(self, capsys):
        get_localized_value({"en": "Hello"}, "en-GB", [])
        get_localized_value({"en": "Hello"}, "de", [])
        round_value(2.5)
        create_object_hash({"a": 1})

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_reset_after_setup_is_silent_again(self, capsys):
        setup_logging(debug=True, rich_output=False)
        reset_logging()

        round_value(2.5)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_json_output(self, capsys):
        setup_logging(debug=False, rich_output=False)
        set_correlation_id("run-7")

        get_logger("test").info("hello", answer=42)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "hello"
        assert record["answer"] == 42
        assert record["level"] == "info"
        assert record["correlation_id"] == "run-7"

    def test_debug_events_filtered_by_default(self, capsys):
        setup_logging(debug=False, rich_output=False)
        get_localized_value({"en": "Hello"}, "en-GB", [])
        assert "Resolved localized value" not in capsys.readouterr().err

    def test_debug_events_emitted_in_debug_mode(self, capsys):
        setup_logging(debug=True, rich_output=False)
        get_localized_value({"en": "Hello"}, "en-GB", [])

        records = [json.loads(line) for line in capsys.readouterr().err.strip().splitlines()]
        resolved = [r for r in records if r["event"] == "Resolved localized value"]
        assert resolved
        assert resolved[0]["candidate"] == "en"
        assert resolved[0]["key"] == "en"

    def test_rich_output_goes_to_stderr(self, capsys):
        setup_logging(debug=False, rich_output=True)
        assert structlog.is_configured()

        get_logger("test").info("hello", answer=42)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "hello" in captured.err
        assert "answer=42" in captured.err
