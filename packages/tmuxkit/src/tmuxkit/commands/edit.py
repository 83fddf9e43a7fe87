"""Buffer editing commands - set, save and delete.

PUBLIC API:
  - set_buffer: Replace a buffer's content
  - save: Write a buffer to a file
  - delete: Remove a buffer from the stack
"""

from typing import Any, Optional

from ..app import app
from ..errors import markdown_error_response
from ..tmux import TmuxError
from ._helpers import resolve_session, status_response


@app.command(
    display="markdown",
    fastmcp={"type": "tool", "tags": {"buffer"}, "description": "Replace the content of a tmux paste buffer"},
)
def set_buffer(state, content: str, number: int = 0, session: Optional[str] = None) -> dict[str, Any]:
    """Replace the content of a paste buffer.

    Args:
        state: Application state.
        content: New buffer content, sent verbatim.
        number: Buffer number. Defaults to 0.
        session: Session name. Defaults to configured or first session.
    """
    try:
        target = resolve_session(state.get_server(), session)
        target.buffer(number).set_data(content)
    except TmuxError as e:
        return markdown_error_response(str(e))

    return status_response("set", number, target)


@app.command(
    display="markdown",
    fastmcp={"type": "tool", "tags": {"buffer"}, "description": "Write a tmux paste buffer to a file"},
)
def save(state, path: str, number: int = 0, append: bool = False, session: Optional[str] = None) -> dict[str, Any]:
    """Write a paste buffer to a file.

    Args:
        state: Application state.
        path: Destination file.
        number: Buffer number. Defaults to 0.
        append: Append instead of overwriting. Defaults to False.
        session: Session name. Defaults to configured or first session.
    """
    try:
        target = resolve_session(state.get_server(), session)
        target.buffer(number).save(path, append=append)
    except TmuxError as e:
        return markdown_error_response(str(e))

    return status_response("save", number, target, path=path, append=append)


@app.command(
    display="markdown",
    fastmcp={"type": "tool", "tags": {"buffer"}, "description": "Delete a tmux paste buffer"},
)
def delete(state, number: int = 0, session: Optional[str] = None) -> dict[str, Any]:
    """Delete a paste buffer and show what it held.

    Args:
        state: Application state.
        number: Buffer number. Defaults to 0.
        session: Session name. Defaults to configured or first session.
    """
    try:
        target = resolve_session(state.get_server(), session)
        buffer = target.buffer(number)
        buffer.delete()
    except TmuxError as e:
        return markdown_error_response(str(e))

    # Frozen by delete(), served from the snapshot
    return status_response("delete", number, target, buffer.data(), size=buffer.size().pretty())
