"""Tmux-specific exceptions.

PUBLIC API:
  - TmuxError: Base exception for all tmux operations
  - CommandExecutionError: tmux exited non-zero or could not be started
  - UnsupportedVersionError: Feature not available in the server's tmux version
  - VersionParseError: tmux reported a version that cannot be parsed
  - SessionNotFoundError: Session not found exception
  - BufferNotFoundError: Buffer not found exception
"""

from typing import Sequence


class TmuxError(Exception):
    """Base exception for all tmux operations."""

    pass


class CommandExecutionError(TmuxError):
    """Raised when a tmux invocation fails to launch or exits non-zero.

    Attributes:
        cmd: Full argument vector that was executed.
        returncode: Exit status, or None if the binary could not be started.
        stderr: Captured standard error text.
    """

    def __init__(self, cmd: Sequence[str], returncode: int | None, stderr: str = ""):
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr.strip()
        if returncode is None:
            message = f"Failed to start {self.cmd[0]}: {self.stderr}"
        else:
            message = f"'{' '.join(self.cmd)}' exited with {returncode}"
            if self.stderr:
                message = f"{message}: {self.stderr}"
        super().__init__(message)


class UnsupportedVersionError(TmuxError):
    """Raised before running a command the server's tmux cannot handle."""

    def __init__(self, required: str, feature: str):
        self.required = required
        self.feature = feature
        super().__init__(f"{feature} requires tmux >= {required}")


class VersionParseError(TmuxError, ValueError):
    """Raised when `tmux -V` output holds no recognisable version."""

    pass


class SessionNotFoundError(TmuxError):
    """Raised when a tmux session cannot be found."""

    pass


class BufferNotFoundError(TmuxError):
    """Raised when a paste buffer is not on the stack."""

    pass
