"""
Main CLI entrypoint for normtmp.

Usage:
    normtmp --version
    normtmp [--warn] [--json] [tmpdir]
    normtmp [--json] expand PATH
"""

import argparse
import json
import platform
import sys
from typing import List, Optional

from normtmp import __version__
from normtmp.config import REPORTING_DEFAULT, configure, load_config, set_config
from normtmp.errors import ExitCode, NormtmpError
from normtmp.normalize import default_cache, normalized_tmpdir
from normtmp.platform import paths
from normtmp.platform.tty import ColorPrinter
from normtmp.shortpath.expander import Expanded, ShortPathExpander


def get_version_string() -> str:
    """Generate a detailed version string."""
    python_version = platform.python_version()
    os_info = f"{platform.system()} {platform.release()}"
    return (
        f"normtmp {__version__}\n"
        f"  python: {python_version}\n"
        f"  platform: {os_info}"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for normtmp."""
    parser = argparse.ArgumentParser(
        prog="normtmp",
        description="Print the OS temp directory with symlinks resolved and 8.3 short names expanded",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  normtmp
  normtmp --warn --json
  normtmp expand C:\\Users\\VERYLO~1\\AppData\\Local\\Temp
        """,
    )
    
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=get_version_string(),
    )
    
    parser.add_argument(
        "-c", "--config",
        dest="config",
        default=None,
        help="YAML configuration file",
    )
    
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for each short-name query (default: no limit)",
    )
    
    parser.add_argument(
        "-w", "--warn",
        action="store_true",
        help="Warn on stderr if a short segment cannot be expanded",
    )
    
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON object instead of a bare path",
    )
    
    subparsers = parser.add_subparsers(dest="command", help="Commands")
    
    subparsers.add_parser(
        "tmpdir",
        help="Print the normalized temp directory (default)",
    )
    
    expand_parser = subparsers.add_parser(
        "expand",
        help="Expand the short segments of an absolute Windows path",
    )
    expand_parser.add_argument(
        "path",
        help="Absolute drive path, e.g. C:\\PROGRA~1\\Foo",
    )
    
    return parser


def run_tmpdir(parsed: argparse.Namespace) -> int:
    """Print the normalized temp directory."""
    raw = paths.get_temp_dir()
    reporting = REPORTING_DEFAULT if parsed.warn else None
    result = normalized_tmpdir(reporting=reporting)
    
    if parsed.json:
        # Only an expansion that ran and succeeded counts
        outcome = default_cache.get(paths.realpath(raw))
        expanded = isinstance(outcome, Expanded) and outcome.path == result
        print(json.dumps({"raw": raw, "path": result, "expanded": expanded}))
    else:
        print(result)
    return ExitCode.SUCCESS


def run_expand(parsed: argparse.Namespace) -> int:
    """Print the long form of one path."""
    outcome = ShortPathExpander().expand(parsed.path)
    expanded = isinstance(outcome, Expanded)
    
    if parsed.json:
        print(json.dumps({
            "raw": parsed.path,
            "path": outcome.path if expanded else None,
            "expanded": expanded,
        }))
    elif expanded:
        print(outcome.path)
    else:
        printer = ColorPrinter(sys.stderr)
        printer.write(printer.error(f"Cannot expand {parsed.path}"))
    
    return ExitCode.SUCCESS if expanded else ExitCode.UNSUPPORTED


def main(args: Optional[List[str]] = None) -> int:
    """Main entrypoint for normtmp CLI."""
    parser = create_parser()
    parsed = parser.parse_args(args)
    
    try:
        if parsed.config:
            set_config(load_config(parsed.config))
        if parsed.timeout is not None:
            configure(query_timeout=parsed.timeout)
        
        if parsed.command == "expand":
            return run_expand(parsed)
        return run_tmpdir(parsed)
    except NormtmpError as e:
        printer = ColorPrinter(sys.stderr)
        printer.write(printer.error(f"ERROR: {e}"))
        return e.exit_code
    except KeyboardInterrupt:
        return ExitCode.KEYBOARD_INTERRUPT


if __name__ == "__main__":
    sys.exit(main())
