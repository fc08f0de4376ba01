"""
Process execution for host queries.

Runs short-lived helper programs (such as ``attrib.exe``) and captures their
text output. Commands are always passed as argument lists, never through a
shell.
"""

import shutil
import subprocess
from typing import Optional, Sequence


CommandSequence = Sequence[str]


class ProcessResult:
    """Result of a process execution."""
    
    def __init__(
        self,
        returncode: int,
        stdout: str,
        stderr: str,
        command: CommandSequence,
    ):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.command = command
    
    def __repr__(self) -> str:
        return f"ProcessResult(returncode={self.returncode}, stdout={len(self.stdout)} chars)"


def run(
    cmd: CommandSequence,
    *,
    timeout: Optional[float] = None,
    encoding: str = "utf-8",
) -> ProcessResult:
    """
    Run a command to completion and return its captured output.
    
    The call blocks until the process exits. Without a timeout, a hung
    process hangs the caller.
    
    Args:
        cmd: Command and arguments
        timeout: Timeout in seconds (None waits forever)
        encoding: Output encoding; undecodable bytes are replaced
    
    Returns:
        ProcessResult with returncode, stdout, stderr
    
    Raises:
        subprocess.TimeoutExpired: If timeout exceeded
        FileNotFoundError: If the program does not exist
    """
    try:
        result = subprocess.run(
            list(cmd),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            stdin=subprocess.DEVNULL,
            timeout=timeout,
            shell=False,
        )
    except FileNotFoundError as e:
        # Provide a clearer error message
        raise FileNotFoundError(f"Command not found: {cmd[0]}") from e
    
    stdout = result.stdout.decode(encoding, errors="replace") if result.stdout else ""
    stderr = result.stderr.decode(encoding, errors="replace") if result.stderr else ""
    
    return ProcessResult(
        returncode=result.returncode,
        stdout=stdout,
        stderr=stderr,
        command=cmd,
    )


def which(program: str) -> Optional[str]:
    """
    Find the full path to an executable.
    
    Returns None if not found.
    """
    return shutil.which(program)


def is_command_available(program: str) -> bool:
    """Check if a command is available on the system."""
    return which(program) is not None
