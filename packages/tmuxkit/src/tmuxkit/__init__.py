"""Object-oriented binding over the tmux command line.

Sessions, windows, panes and paste buffers are modelled as objects whose
methods run the tmux binary and parse its output. The REPL/MCP front end
lives in tmuxkit.app.

PUBLIC API:
  - Server, Session, Window, Pane, Buffer: tmux object model
  - TmuxVersion, Capabilities, ByteCount: version gate and size values
  - TmuxError and subclasses: failures raised by the object model
"""

from .tmux import (
    Server,
    Session,
    Window,
    Pane,
    Buffer,
    TmuxError,
    CommandExecutionError,
    UnsupportedVersionError,
    VersionParseError,
    SessionNotFoundError,
    BufferNotFoundError,
)
from .types import TmuxVersion, Capabilities, ByteCount

__version__ = "0.1.0"
__all__ = [
    "Server",
    "Session",
    "Window",
    "Pane",
    "Buffer",
    "TmuxError",
    "CommandExecutionError",
    "UnsupportedVersionError",
    "VersionParseError",
    "SessionNotFoundError",
    "BufferNotFoundError",
    "TmuxVersion",
    "Capabilities",
    "ByteCount",
]
