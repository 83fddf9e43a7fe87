"""Window operations.

PUBLIC API:
  - Window: A window inside a tmux session
"""

from typing import TYPE_CHECKING, List, Optional

from .core import parse_indexes

if TYPE_CHECKING:
    from .buffer import Buffer
    from .pane import Pane
    from .server import Server
    from .session import Session


class Window:
    """A tmux window, addressed as session:index."""

    def __init__(self, session: "Session", index: int):
        self._session = session
        self._index = index

    @property
    def session(self) -> "Session":
        return self._session

    @property
    def server(self) -> "Server":
        return self._session.server

    @property
    def index(self) -> int:
        return self._index

    @property
    def identifier(self) -> str:
        return f"{self._session.identifier}:{self._index}"

    def panes(self) -> List["Pane"]:
        """Get every pane in this window."""
        stdout = self.server.run("list-panes", "-t", self.identifier)
        return [self.pane(index) for index in parse_indexes(stdout)]

    def pane(self, index: int) -> "Pane":
        from .pane import Pane

        return Pane(self, index)

    def paste(
        self,
        buffer: "Buffer",
        pop: bool = False,
        translate: bool = True,
        separator: Optional[str] = None,
    ) -> None:
        """Paste a buffer into this window's active pane.

        See Buffer.paste for the flags.
        """
        buffer.paste(self, pop=pop, translate=translate, separator=separator)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Window):
            return NotImplemented
        return self._session == other._session and self._index == other._index

    def __hash__(self) -> int:
        return hash((self._session, self._index))

    def __repr__(self) -> str:
        return f"Window({self.identifier!r})"
