"""Pane operations.

PUBLIC API:
  - Pane: A pane inside a tmux window
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .buffer import Buffer
    from .server import Server
    from .session import Session
    from .window import Window


class Pane:
    """A tmux pane, addressed as session:window.pane.

    Pasting into a specific pane needs tmux 1.3 or later.
    """

    def __init__(self, window: "Window", index: int):
        self._window = window
        self._index = index

    @property
    def window(self) -> "Window":
        return self._window

    @property
    def session(self) -> "Session":
        return self._window.session

    @property
    def server(self) -> "Server":
        return self._window.server

    @property
    def index(self) -> int:
        return self._index

    @property
    def identifier(self) -> str:
        return f"{self._window.identifier}.{self._index}"

    def paste(
        self,
        buffer: "Buffer",
        pop: bool = False,
        translate: bool = True,
        separator: Optional[str] = None,
    ) -> None:
        """Paste a buffer into this pane.

        Raises:
            UnsupportedVersionError: If tmux is older than 1.3.
        """
        buffer.paste(self, pop=pop, translate=translate, separator=separator)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pane):
            return NotImplemented
        return self._window == other._window and self._index == other._index

    def __hash__(self) -> int:
        return hash((self._window, self._index))

    def __repr__(self) -> str:
        return f"Pane({self.identifier!r})"
