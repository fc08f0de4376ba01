#!/usr/bin/env python3
"""
Windows Smoke Tests for normtmp.

Exercises short-path expansion against a real Windows host: a real
attrib.exe, real 8.3 names and the real home directory. The unit tests
mock all of these, so run this on a Windows machine before a release.

Usage:
    python -m tools.windows_smoke
"""

import os
import platform
import sys
import tempfile


class SkipTest(Exception):
    """Raised by a smoke test that does not apply to this host."""


class SmokeTestRunner:
    """Simple test runner with plain output."""

    def __init__(self):
        self.passed = 0
        self.failed = 0
        self.skipped = 0
        self.errors = []

    def run_test(self, name: str, test_func):
        """Run a single test."""
        try:
            test_func()
            self.passed += 1
            print(f"  ✓ {name}")
        except SkipTest as e:
            self.skipped += 1
            print(f"  - {name}: skipped ({e})")
        except AssertionError as e:
            self.failed += 1
            self.errors.append((name, str(e)))
            print(f"  ✗ {name}: {e}")
        except Exception as e:
            self.failed += 1
            self.errors.append((name, f"Exception: {e}"))
            print(f"  ✗ {name}: Exception: {e}")

    def summary(self) -> int:
        """Print summary and return exit code."""
        print("\n" + "=" * 50)
        print(f"PASSED: {self.passed}  FAILED: {self.failed}  SKIPPED: {self.skipped}")

        if self.failed > 0:
            print("\nFailed tests:")
            for name, error in self.errors:
                print(f"  - {name}: {error}")
            print("\n❌ SMOKE TESTS FAILED")
            return 1
        else:
            print("\n✅ ALL SMOKE TESTS PASSED")
            return 0


def get_short_path(path: str) -> str:
    """Ask the OS for the 8.3 form of *path* (unchanged if none exists)."""
    import ctypes

    get_short_path_name = ctypes.windll.kernel32.GetShortPathNameW
    get_short_path_name.argtypes = [ctypes.c_wchar_p, ctypes.c_wchar_p, ctypes.c_uint]
    buffer = ctypes.create_unicode_buffer(4096)
    if get_short_path_name(path, buffer, len(buffer)) and buffer.value:
        return buffer.value
    return path


def test_platform_detection():
    """The host is recognized as Windows."""
    from normtmp import platform as host

    assert host.is_windows(), f"detected {host.system_name()}"


def test_attrib_available():
    """attrib.exe is on PATH."""
    from normtmp.platform import proc

    assert proc.is_command_available("attrib.exe"), "attrib.exe not found"


def test_attrib_error_output_rejected():
    """attrib's inline error text is not mistaken for a path."""
    from normtmp.shortpath.query import parse_query_output, run_query

    output = run_query("C:\\normtmp-missing-" + str(os.getpid()))
    assert parse_query_output(output) is None, f"parsed {output!r}"


def test_expand_created_short_path():
    """A directory reached through its 8.3 name expands back to its long name."""
    from normtmp import expand_short_path
    from normtmp.platform import paths

    with tempfile.TemporaryDirectory() as tmp:
        long_dir = os.path.join(paths.realpath(tmp), "Very Long Directory Name", "Another Long Name")
        os.makedirs(long_dir)
        short_dir = get_short_path(long_dir)
        if "~" not in short_dir:
            raise SkipTest("8.3 names are disabled on this volume")

        expanded = expand_short_path(short_dir)
        assert expanded is not None, f"could not expand {short_dir}"
        assert expanded.lower() == long_dir.lower(), f"{short_dir} -> {expanded}"


def test_normalized_tmpdir():
    """The normalized temp directory is long and points at the temp directory."""
    from normtmp import normalized_tmpdir
    from normtmp.platform import paths

    result = normalized_tmpdir(reporting=True)
    assert "~" not in result, f"still short: {result}"
    assert paths.file_id(result) == paths.file_id(paths.get_temp_dir())


def test_cli_expand():
    """normtmp expand prints the long form of the home directory's short name."""
    import io
    from contextlib import redirect_stdout
    from normtmp.cli.main import main
    from normtmp.platform import paths

    home = paths.get_home_dir()
    short_home = get_short_path(home)
    if "~" not in short_home:
        raise SkipTest("home directory has no 8.3 name")

    f = io.StringIO()
    with redirect_stdout(f):
        rc = main(["expand", short_home])
    assert rc == 0
    assert f.getvalue().strip().lower() == home.lower()


def main():
    """Run all smoke tests."""
    print("=" * 50)
    print("NORMTMP WINDOWS SMOKE TESTS")
    print(f"Platform: {platform.system()} {platform.release()}")
    print(f"Python: {sys.version}")
    print("=" * 50)
    print()

    if platform.system() != "Windows":
        print("Not a Windows host, nothing to do.")
        return 0

    runner = SmokeTestRunner()

    print("Host Tests:")
    runner.run_test("platform_detection", test_platform_detection)
    runner.run_test("attrib_available", test_attrib_available)
    runner.run_test("attrib_error_output_rejected", test_attrib_error_output_rejected)

    print("\nExpansion Tests:")
    runner.run_test("expand_created_short_path", test_expand_created_short_path)
    runner.run_test("normalized_tmpdir", test_normalized_tmpdir)
    runner.run_test("cli_expand", test_cli_expand)

    return runner.summary()


if __name__ == "__main__":
    sys.exit(main())
