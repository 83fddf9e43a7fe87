"""Session management for tmux.

PUBLIC API:
  - Session: A tmux session and the paste buffers and windows scoped to it
"""

import logging
import re
from typing import TYPE_CHECKING, Dict, List

from .core import parse_indexes, split_lines
from ..types import BufferInfo, BufferNumber, ByteCount

if TYPE_CHECKING:
    from .buffer import Buffer
    from .server import Server
    from .window import Window

logger = logging.getLogger(__name__)

# tmux < 2.0 prints "0: 5 bytes: ...", later releases name buffers "buffer0"
_BUFFER_LINE_RE = re.compile(r'^(?:buffer)?(?P<number>\d+): (?P<size>\d+) bytes: "(?P<sample>.*)"$')


class Session:
    """A tmux session.

    Args:
        server: Gateway shared by everything derived from this session.
        name: Session name, used as its target identifier.
    """

    def __init__(self, server: "Server", name: str):
        self._server = server
        self._name = name

    @property
    def server(self) -> "Server":
        return self._server

    @property
    def name(self) -> str:
        return self._name

    @property
    def identifier(self) -> str:
        """Target string selecting this session."""
        return self._name

    def target_args(self) -> List[str]:
        """`-t <session>` for tmux releases that cannot infer it, else nothing."""
        if self._server.capabilities.requires_explicit_target:
            return ["-t", self.identifier]
        return []

    def buffers_information(self) -> Dict[BufferNumber, BufferInfo]:
        """Parse `list-buffers` into entries keyed by buffer number."""
        stdout = self._server.run("list-buffers", *self.target_args())

        info: Dict[BufferNumber, BufferInfo] = {}
        for line in split_lines(stdout):
            match = _BUFFER_LINE_RE.match(line)
            if not match:
                logger.debug(f"Skipping unparseable buffer line: {line}")
                continue
            number = int(match.group("number"))
            info[number] = BufferInfo(
                number=number,
                size=ByteCount(int(match.group("size"))),
                sample=match.group("sample"),
            )
        return info

    def buffers(self) -> List["Buffer"]:
        """Get a live handle for every buffer currently on the stack."""
        return [self.buffer(number) for number in sorted(self.buffers_information())]

    def buffer(self, number: BufferNumber) -> "Buffer":
        """Get a live handle for the buffer at the given stack position."""
        from .buffer import Buffer

        return Buffer(number, self)

    def windows(self) -> List["Window"]:
        """Get every window in this session."""
        stdout = self._server.run("list-windows", "-t", self.identifier)
        return [self.window(index) for index in parse_indexes(stdout)]

    def window(self, index: int) -> "Window":
        from .window import Window

        return Window(self, index)

    def kill(self) -> None:
        """Kill this session."""
        self._server.kill_session(self._name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Session):
            return NotImplemented
        return self._server is other._server and self._name == other._name

    def __hash__(self) -> int:
        return hash((id(self._server), self._name))

    def __repr__(self) -> str:
        return f"Session({self._name!r})"

