"""Unit tests for running and parsing the short-name query."""

from unittest.mock import MagicMock

import pytest

from normtmp.platform import proc
from normtmp.shortpath import query


class TestParseQueryOutput:
    """Tests for parse_query_output."""
    
    def test_plain_path(self):
        assert query.parse_query_output("C:\\Users\\verylongusername") == "C:\\Users\\verylongusername"
    
    def test_padded_path(self):
        output = " " * 19 + "C:\\Users\\verylongusername"
        assert query.parse_query_output(output) == "C:\\Users\\verylongusername"
    
    def test_attribute_flags_before_path(self):
        output = "A  SH        C:\\Users\\VeryLongName"
        assert query.parse_query_output(output) == "C:\\Users\\VeryLongName"
    
    def test_trailing_carriage_return(self):
        assert query.parse_query_output("   D:\\Long Name\r") == "D:\\Long Name"
    
    def test_lowercase_drive(self):
        assert query.parse_query_output("d:\\stuff") == "d:\\stuff"
    
    @pytest.mark.parametrize("output", [
        "",
        "File not found - C:\\badname",
        "Path not found - C:\\VERYLO~1\\x",
        "Parameter format not correct -",
        "/tmp/foo",
    ])
    def test_error_or_garbage(self, output):
        assert query.parse_query_output(output) is None


class TestRunQuery:
    """Tests for run_query."""
    
    def test_runs_attrib_by_default(self, monkeypatch):
        run = MagicMock(return_value=proc.ProcessResult(0, "   C:\\Users\\bob\r\n", "", []))
        monkeypatch.setattr(proc, "run", run)
        
        assert query.run_query("C:\\Users\\BOB~1") == "C:\\Users\\bob"
        run.assert_called_once_with(["attrib.exe", "C:\\Users\\BOB~1"], timeout=None)
    
    def test_ignores_exit_status(self, monkeypatch):
        run = MagicMock(return_value=proc.ProcessResult(1, "File not found - C:\\x", "", []))
        monkeypatch.setattr(proc, "run", run)
        
        assert query.run_query("C:\\x") == "File not found - C:\\x"
    
    def test_passes_command_and_timeout(self, monkeypatch):
        run = MagicMock(return_value=proc.ProcessResult(0, "", "", []))
        monkeypatch.setattr(proc, "run", run)
        
        query.run_query("C:\\x", command="attrib", timeout=2.0)
        run.assert_called_once_with(["attrib", "C:\\x"], timeout=2.0)
    
    def test_missing_command_raises(self):
        with pytest.raises(FileNotFoundError, match="Command not found"):
            query.run_query("C:\\x", command="normtmp-no-such-command")
