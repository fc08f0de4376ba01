"""
Terminal handling.

Decides whether warnings and CLI status lines can be colored, on both
Windows consoles and Unix terminals.
"""

import os
import sys
from typing import Optional, TextIO

from . import IS_WINDOWS


def is_tty(stream: Optional[TextIO] = None) -> bool:
    """Check if the given stream (or stdout) is a TTY."""
    if stream is None:
        stream = sys.stdout
    
    try:
        return stream.isatty()
    except AttributeError:
        return False


def supports_color(stream: Optional[TextIO] = None) -> bool:
    """
    Check if the stream supports ANSI color codes.
    
    NO_COLOR disables and FORCE_COLOR enables color regardless of the
    terminal; otherwise only TTYs get color.
    """
    if stream is None:
        stream = sys.stdout
    
    if os.environ.get("NO_COLOR"):
        return False
    
    if os.environ.get("FORCE_COLOR"):
        return True
    
    if not is_tty(stream):
        return False
    
    if IS_WINDOWS:
        return _windows_supports_color()
    
    term = os.environ.get("TERM", "")
    return term != "dumb"


def _windows_supports_color() -> bool:
    """Check if the Windows console supports ANSI colors."""
    # Windows Terminal always supports ANSI
    if os.environ.get("WT_SESSION"):
        return True
    
    if os.environ.get("ConEmuANSI") == "ON":
        return True
    
    if os.environ.get("TERM_PROGRAM") == "vscode":
        return True
    
    # Windows 10 1511+ can be switched into VT mode
    try:
        import ctypes
        kernel32 = ctypes.windll.kernel32
        
        # STD_ERROR_HANDLE = -12, warnings go to stderr
        handle = kernel32.GetStdHandle(-12)
        mode = ctypes.c_ulong()
        kernel32.GetConsoleMode(handle, ctypes.byref(mode))
        
        # ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004
        if kernel32.SetConsoleMode(handle, mode.value | 0x0004):
            return True
    except (AttributeError, OSError):
        return False
    
    return False


class Colors:
    """ANSI color codes for terminal output."""
    
    RESET = "\033[0m"
    BOLD = "\033[1m"
    
    BRIGHT_RED = "\033[91m"
    BRIGHT_YELLOW = "\033[93m"


class ColorPrinter:
    """Helper class for coloring output written to one stream."""
    
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self.enabled = supports_color(self.stream)
    
    def _wrap(self, text: str, *codes: str) -> str:
        """Wrap text with color codes if enabled."""
        if not self.enabled:
            return text
        return "".join(codes) + text + Colors.RESET
    
    def error(self, text: str) -> str:
        return self._wrap(text, Colors.BRIGHT_RED, Colors.BOLD)
    
    def warning(self, text: str) -> str:
        return self._wrap(text, Colors.BRIGHT_YELLOW)
    
    def write(self, text: str) -> None:
        """Write one line to the stream."""
        self.stream.write(text + "\n")
        self.stream.flush()
