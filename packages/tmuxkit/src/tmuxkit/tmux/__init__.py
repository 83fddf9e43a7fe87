"""tmux object model - server, sessions, windows, panes and paste buffers.

PUBLIC API:
  - Server: Command gateway shared by all objects
  - Session: Session and its buffer stack
  - Window: Window within a session
  - Pane: Pane within a window
  - Buffer: Paste buffer handle
  - Live, Frozen: Buffer states
  - run_command: Run a raw tmux argument vector
"""

from .core import run_command

from .server import Server
from .session import Session
from .window import Window
from .pane import Pane
from .buffer import Buffer, Frozen, Live

from .exceptions import (
    TmuxError,
    CommandExecutionError,
    UnsupportedVersionError,
    VersionParseError,
    SessionNotFoundError,
    BufferNotFoundError,
)

__all__ = [
    "run_command",
    "Server",
    "Session",
    "Window",
    "Pane",
    "Buffer",
    "Frozen",
    "Live",
    "TmuxError",
    "CommandExecutionError",
    "UnsupportedVersionError",
    "VersionParseError",
    "SessionNotFoundError",
    "BufferNotFoundError",
]
