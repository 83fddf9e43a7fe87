"""Server - the command gateway every tmux object talks through.

PUBLIC API:
  - Server: Builds tmux argument vectors, runs them and reports failures
"""

import logging
import re
from functools import cached_property
from typing import TYPE_CHECKING, List, Optional, Sequence

from .core import Runner, run_command, split_lines
from .exceptions import CommandExecutionError, SessionNotFoundError, VersionParseError
from ..types import Capabilities, SessionInfo, TmuxVersion

if TYPE_CHECKING:
    from ..config import ConfigManager
    from .session import Session

logger = logging.getLogger(__name__)

# "work: 2 windows (created Mon Oct  5 10:00:00 2026) [80x24] (attached)"
_SESSION_LINE_RE = re.compile(r"^(?P<name>.+?): (?P<windows>\d+) windows?\b(?P<rest>.*)$")


class Server:
    """A tmux server reached through its command line.

    One Server is shared by every Session, Window, Pane and Buffer derived
    from it. Every call spawns one tmux process and blocks until it exits.
    Not thread-safe.

    Args:
        binary: tmux executable name or path.
        socket_name: Passed as `-L`, selects a named server socket.
        socket_path: Passed as `-S`, full socket path. Wins over socket_name.
        runner: Replacement for run_command, receives the full argv.
    """

    def __init__(
        self,
        binary: str = "tmux",
        socket_name: Optional[str] = None,
        socket_path: Optional[str] = None,
        runner: Optional[Runner] = None,
    ):
        self.binary = binary
        self.socket_name = socket_name
        self.socket_path = socket_path
        self._runner = runner or run_command

    @classmethod
    def from_config(cls, config: "ConfigManager", runner: Optional[Runner] = None) -> "Server":
        """Create a server from loaded configuration."""
        return cls(
            binary=config.binary,
            socket_name=config.socket_name,
            socket_path=config.socket_path,
            runner=runner,
        )

    def command(self, *args: str) -> List[str]:
        """Build the full argument vector for a tmux command."""
        cmd = [self.binary]
        if self.socket_path:
            cmd.extend(["-S", self.socket_path])
        elif self.socket_name:
            cmd.extend(["-L", self.socket_name])
        cmd.extend(str(arg) for arg in args)
        return cmd

    def _execute(self, cmd: Sequence[str]) -> tuple[int, str, str]:
        try:
            return self._runner(cmd)
        except OSError as e:
            logger.error(f"Failed to start {cmd[0]}: {e}")
            raise CommandExecutionError(cmd, None, str(e)) from e

    def run(self, *args: str) -> str:
        """Run a tmux command and return its standard output.

        Args:
            *args: Command name and arguments, e.g. ("save-buffer", "-b", "0", "-").

        Returns:
            Captured standard output text.

        Raises:
            CommandExecutionError: If tmux cannot be started or exits non-zero.
        """
        cmd = self.command(*args)
        code, stdout, stderr = self._execute(cmd)
        if code != 0:
            logger.error(f"Command failed with exit code {code}: {' '.join(cmd)}")
            raise CommandExecutionError(cmd, code, stderr)
        return stdout

    @cached_property
    def version(self) -> TmuxVersion:
        """Version reported by `tmux -V`, fetched once."""
        output = self.run("-V").strip()
        try:
            version = TmuxVersion.parse(output)
        except ValueError as e:
            raise VersionParseError(str(e)) from e
        logger.debug(f"tmux version {version}")
        return version

    @cached_property
    def capabilities(self) -> Capabilities:
        """Feature switches for this server's tmux version."""
        return Capabilities.from_version(self.version)

    def list_sessions(self) -> List[SessionInfo]:
        """Get all tmux sessions.

        Returns:
            List of SessionInfo objects, empty if no server is running.
        """
        code, stdout, _ = self._execute(self.command("list-sessions"))
        if code != 0:
            return []

        sessions = []
        for line in split_lines(stdout):
            match = _SESSION_LINE_RE.match(line)
            if not match:
                logger.debug(f"Skipping unparseable session line: {line}")
                continue
            sessions.append(
                SessionInfo(
                    name=match.group("name"),
                    windows=int(match.group("windows")),
                    attached="(attached)" in match.group("rest"),
                )
            )
        return sessions

    def sessions(self) -> List["Session"]:
        """Get Session objects for every running session."""
        from .session import Session

        return [Session(self, info.name) for info in self.list_sessions()]

    def has_session(self, name: str) -> bool:
        """Check if session exists."""
        code, _, _ = self._execute(self.command("has-session", "-t", name))
        return code == 0

    def session(self, name: str) -> "Session":
        """Get an existing session.

        Raises:
            SessionNotFoundError: If no session has that name.
        """
        from .session import Session

        if not self.has_session(name):
            raise SessionNotFoundError(f"Session not found: {name}")
        return Session(self, name)

    def new_session(self, name: str, start_dir: Optional[str] = None) -> "Session":
        """Create a new detached session."""
        from .session import Session

        args = ["new-session", "-d", "-s", name]
        if start_dir:
            args.extend(["-c", start_dir])
        self.run(*args)
        logger.info(f"Created session {name}")
        return Session(self, name)

    def kill_session(self, name: str) -> None:
        """Kill a tmux session."""
        self.run("kill-session", "-t", name)
        logger.info(f"Killed session {name}")
