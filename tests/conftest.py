"""
Shared fixtures.

``windows_mocks`` makes the host look like a Windows machine whose temp
directory is ``C:\\Users\\VERYLO~1\\AppData\\Local\\Temp``. Every collaborator
is a MagicMock so tests can reconfigure answers and count calls. The
short-name query (``proc.run``) fails unless a test configures it.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from normtmp import config
from normtmp import normalize
from normtmp import platform as host
from normtmp.platform import paths, proc


PATHS = SimpleNamespace(
    home_dir="C:\\Users\\VeryLongName",
    short_temp="C:\\Users\\VERYLO~1\\AppData\\Local\\Temp",
    long_temp="C:\\Users\\VeryLongName\\AppData\\Local\\Temp",
    weird_short_temp="D:\\VERYLO~1\\Temp",
    weird_long_temp="D:\\VeryLongName\\Temp",
    very_weird_short_temp="D:\\VERYLO~1\\EXTRAS~1\\Temp",
    very_weird_long_temp="D:\\VeryLongName\\ExtraStuff\\Temp",
    home_weird_short_temp="C:\\Users\\VERYLO~1\\EXTRAS~1\\Temp",
    home_weird_long_temp="C:\\Users\\VeryLongName\\ExtraStuff\\Temp",
    network="\\\\server\\share",
)


def unexpected_call(*args, **kwargs):
    raise AssertionError(f"Unexpected call: {args!r}")


def attrib_result(path: str) -> proc.ProcessResult:
    """Output shaped like attrib.exe's: padded, CRLF-terminated, exit status 0."""
    return proc.ProcessResult(
        returncode=0,
        stdout=" " * 19 + path + "\r\n",
        stderr="",
        command=["attrib.exe", path],
    )


@pytest.fixture(autouse=True)
def isolated_state():
    """Give every test the default configuration and an empty cache."""
    config.set_config(config.NormtmpConfig())
    normalize.reset_cache()
    yield
    config.set_config(config.NormtmpConfig())
    normalize.reset_cache()


@pytest.fixture
def windows_mocks(monkeypatch):
    mocks = SimpleNamespace(
        is_windows=MagicMock(return_value=True),
        system_name=MagicMock(return_value="windows"),
        run=MagicMock(side_effect=unexpected_call),
        exists=MagicMock(return_value=True),
        realpath=MagicMock(side_effect=lambda path: path),
        file_id=MagicMock(return_value=(1, 1)),
        get_home_dir=MagicMock(return_value=PATHS.home_dir),
        get_temp_dir=MagicMock(return_value=PATHS.short_temp),
    )
    monkeypatch.setattr(host, "is_windows", mocks.is_windows)
    monkeypatch.setattr(host, "system_name", mocks.system_name)
    monkeypatch.setattr(proc, "run", mocks.run)
    for name in ("exists", "realpath", "file_id", "get_home_dir", "get_temp_dir"):
        monkeypatch.setattr(paths, name, getattr(mocks, name))
    return mocks


@pytest.fixture
def strict_windows_mocks(windows_mocks):
    """Windows host where touching anything but the platform check fails the test."""
    for name in ("run", "exists", "realpath", "file_id", "get_home_dir", "get_temp_dir"):
        getattr(windows_mocks, name).side_effect = unexpected_call
    return windows_mocks


@pytest.fixture
def posix_mocks(windows_mocks):
    """Same collaborators, but the host is Linux."""
    windows_mocks.is_windows.return_value = False
    windows_mocks.system_name.return_value = "linux"
    return windows_mocks


@pytest.fixture
def win_paths():
    return PATHS


@pytest.fixture
def attrib():
    return attrib_result
