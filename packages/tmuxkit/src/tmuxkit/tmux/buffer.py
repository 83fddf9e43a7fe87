"""Paste buffer operations.

PUBLIC API:
  - Buffer: Handle on one slot of the tmux paste buffer stack
  - Live: Buffer state that queries tmux on every read
  - Frozen: Buffer state that serves a snapshot
"""

import logging
import os
import tempfile
import weakref
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Union

from .exceptions import BufferNotFoundError, UnsupportedVersionError
from .pane import Pane
from ..types import PANE_PASTE_SINCE, BufferNumber, ByteCount

if TYPE_CHECKING:
    from .server import Server
    from .session import Session
    from .window import Window

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Live:
    """Every read goes to tmux."""


@dataclass(frozen=True)
class Frozen:
    """Reads are served from this snapshot unless a reload is forced."""

    size: ByteCount
    data: str


type BufferState = Live | Frozen


def _remove_file(path: str) -> None:
    Path(path).unlink(missing_ok=True)


class Buffer:
    """A slot in the tmux paste buffer stack.

    tmux owns the slot; the handle is a best-effort mirror of it. A fresh
    handle is live and re-reads tmux every time. freeze() snapshots size and
    data so later reads are served from memory, and delete() freezes before
    removing the slot so the last value stays readable afterwards.

    Number and session are fixed at construction. Handles are not
    thread-safe.

    Args:
        number: Position in the stack, 0 is the most recent buffer.
        session: Session the buffer is scoped to.
    """

    def __init__(self, number: BufferNumber, session: "Session"):
        self._number = number
        self._session = session
        self._state: BufferState = Live()
        self._file: Optional[str] = None
        self._cleanup: Optional[weakref.finalize] = None

    @property
    def number(self) -> BufferNumber:
        return self._number

    @property
    def session(self) -> "Session":
        return self._session

    @property
    def server(self) -> "Server":
        return self._session.server

    @property
    def state(self) -> BufferState:
        return self._state

    @property
    def frozen(self) -> bool:
        return isinstance(self._state, Frozen)

    def _args(self) -> List[str]:
        return ["-b", str(self._number), *self._session.target_args()]

    def size(self, force_reload: bool = False) -> ByteCount:
        """Size of the buffer's content.

        Args:
            force_reload: Query tmux even when frozen.

        Raises:
            BufferNotFoundError: If the slot is not on the stack.
        """
        if isinstance(self._state, Frozen) and not force_reload:
            return self._state.size

        info = self._session.buffers_information().get(self._number)
        if info is None:
            raise BufferNotFoundError(f"Buffer {self._number} not found in session {self._session.name}")
        return info.size

    def data(self, force_reload: bool = False) -> str:
        """Content of the buffer.

        Uses save-buffer rather than show-buffer, which escapes tabs.

        Args:
            force_reload: Query tmux even when frozen.
        """
        if isinstance(self._state, Frozen) and not force_reload:
            return self._state.data

        if self.server.capabilities.supports_stdout_capture:
            return self.server.run("save-buffer", *self._args(), "-")

        # tmux < 1.3 cannot write a buffer to stdout
        path = self._tempfile()
        self.server.run("save-buffer", *self._args(), path)
        return Path(path).read_text(encoding="utf-8", errors="replace")

    def set_data(self, new_data: str) -> None:
        """Replace the buffer's content.

        The text reaches tmux as a single argument after `--`, so quotes,
        leading dashes and control characters are passed through unchanged.
        A frozen handle re-snapshots right after the write.
        """
        self.server.run("set-buffer", *self._args(), "--", new_data)
        if self.frozen:
            self._state = self._snapshot()

    def save(self, path: Union[str, os.PathLike], append: bool = False) -> None:
        """Write the buffer's content to a file.

        Args:
            path: File to write to. Relative paths resolve against the tmux
                server's working directory.
            append: Append to the file instead of overwriting it.
        """
        args = ["save-buffer"]
        if append:
            args.append("-a")
        self.server.run(*args, *self._args(), os.fspath(path))

    write = save

    def freeze(self) -> None:
        """Stop re-reading tmux; serve a snapshot of the current size and data."""
        self._state = self._snapshot()
        logger.info(f"Froze buffer {self._number} ({self._state.size})")

    def delete(self) -> None:
        """Remove the buffer from the stack.

        The handle is frozen first, so size() and data() keep answering with
        the value the buffer had before deletion.
        """
        self.freeze()
        self.server.run("delete-buffer", *self._args())
        logger.info(f"Deleted buffer {self._number}")

    def paste(
        self,
        target: Optional[Union["Window", Pane]] = None,
        pop: bool = False,
        translate: bool = True,
        separator: Optional[str] = None,
    ) -> None:
        """Paste the buffer into a window or pane.

        Args:
            target: Window or Pane to paste into, current pane if None.
                Panes need tmux 1.3 or later.
            pop: Delete the buffer from the stack after pasting.
            translate: Replace linefeeds with carriage returns. Pass False
                to paste linefeeds unchanged.
            separator: Replace linefeeds with this string instead. Needs
                tmux 1.3 or later; translate should be False.

        Raises:
            UnsupportedVersionError: If tmux cannot paste into panes and a
                pane target or separator was given. Nothing is run.
        """
        if not self.server.capabilities.supports_pane_paste:
            if isinstance(target, Pane):
                raise UnsupportedVersionError(PANE_PASTE_SINCE, "Pasting into a pane")
            if separator is not None:
                raise UnsupportedVersionError(PANE_PASTE_SINCE, "A custom paste separator")

        args = ["paste-buffer", "-b", str(self._number)]
        if pop:
            args.append("-d")
        if not translate:
            args.append("-r")
        if separator is not None:
            args.extend(["-s", separator])
        if target is not None:
            args.extend(["-t", target.identifier])
        self.server.run(*args)

    def close(self) -> None:
        """Remove the temporary file used on tmux < 1.3, if any.

        The file is also removed when the handle is garbage collected.
        """
        if self._cleanup is not None:
            self._cleanup()
        self._cleanup = None
        self._file = None

    def __enter__(self) -> "Buffer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _tempfile(self) -> str:
        if self._file is None:
            fd, path = tempfile.mkstemp(prefix="tmuxkit-buffer-")
            os.close(fd)
            # must not reference self, or the handle is never collected
            self._cleanup = weakref.finalize(self, _remove_file, path)
            self._file = path
        return self._file

    def _snapshot(self) -> Frozen:
        data = self.data(force_reload=True)
        return Frozen(size=self.size(force_reload=True), data=data)

    def __str__(self) -> str:
        return self.data()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Buffer):
            return NotImplemented
        return self._number == other._number and self._session == other._session

    def __hash__(self) -> int:
        return hash((self._number, self._session))

    def __repr__(self) -> str:
        return f"Buffer({self._number}, {self._session!r})"
