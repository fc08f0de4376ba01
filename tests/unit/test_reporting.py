"""Unit tests for warning sinks."""

import io

import pytest

from normtmp import config, reporting
from normtmp.errors import ConfigError


class RecordingSink:
    def __init__(self):
        self.messages = []
    
    def warn(self, message):
        self.messages.append(message)


class TestResolveSink:
    """Tests for resolve_sink."""
    
    @pytest.mark.parametrize("value", [False, "disabled"])
    def test_disabled(self, value):
        assert isinstance(reporting.resolve_sink(value), reporting.NullSink)
    
    @pytest.mark.parametrize("value", [True, "default"])
    def test_default(self, value):
        assert isinstance(reporting.resolve_sink(value), reporting.ConsoleSink)
    
    def test_custom_sink_is_used_as_is(self):
        sink = RecordingSink()
        assert reporting.resolve_sink(sink) is sink
    
    def test_none_follows_configuration(self):
        assert isinstance(reporting.resolve_sink(None), reporting.NullSink)
        config.configure(reporting="default")
        assert isinstance(reporting.resolve_sink(None), reporting.ConsoleSink)
    
    @pytest.mark.parametrize("value", ["loud", 1, object()])
    def test_rejects_other_values(self, value):
        with pytest.raises(ConfigError):
            reporting.resolve_sink(value)


class TestSinks:
    """Tests for the built-in sinks."""
    
    def test_null_sink_is_silent(self, capsys):
        reporting.NullSink().warn("nothing to see")
        captured = capsys.readouterr()
        assert captured.out == "" and captured.err == ""
    
    def test_console_sink_writes_line(self, monkeypatch):
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        stream = io.StringIO()
        reporting.ConsoleSink(stream).warn("careful")
        assert stream.getvalue() == "careful\n"
    
    def test_console_sink_colors_when_forced(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("FORCE_COLOR", "1")
        stream = io.StringIO()
        reporting.ConsoleSink(stream).warn("careful")
        assert stream.getvalue().startswith("\033[")
        assert "careful" in stream.getvalue()


def test_short_path_warning_mentions_path():
    message = reporting.short_path_warning("C:\\Users\\VERYLO~1\\AppData\\Local\\Temp")
    assert 'WARNING: temp directory "C:\\Users\\VERYLO~1\\AppData\\Local\\Temp"' in message
    assert "path comparisons" in message


def test_short_path_warning_banner():
    lines = reporting.short_path_warning("C:\\PROGRA~1").splitlines()
    assert lines[0] == "⚠️⚠️⚠️"
    assert lines[-1] == "⚠️⚠️⚠️"
    assert lines[1].startswith("WARNING: temp directory")
