"""Paste command - paste a buffer into a window or pane.

PUBLIC API:
  - paste: Paste a buffer into a target
"""

from typing import Any, Optional

from ..app import app
from ..errors import markdown_error_response
from ..tmux import TmuxError
from ._helpers import resolve_paste_target, resolve_session, status_response


@app.command(
    display="markdown",
    fastmcp={
        "type": "tool",
        "tags": {"input", "buffer"},
        "description": "Paste a tmux paste buffer into a window or pane",
    },
)
def paste(
    state,
    number: int = 0,
    target: Optional[str] = None,
    pop: bool = False,
    raw: bool = False,
    separator: Optional[str] = None,
    session: Optional[str] = None,
) -> dict[str, Any]:
    """Paste a buffer into a window or pane.

    Args:
        state: Application state.
        number: Buffer number. Defaults to 0.
        target: "session:window" or "session:window.pane". Defaults to the current pane.
        pop: Delete the buffer after pasting. Defaults to False.
        raw: Keep linefeeds instead of translating them to carriage returns.
        separator: Replace linefeeds with this string.
        session: Session owning the buffer. Defaults to configured or first session.
    """
    server = state.get_server()
    try:
        owner = resolve_session(server, session)
        paste_target = resolve_paste_target(server, target) if target else None
        owner.buffer(number).paste(paste_target, pop=pop, translate=not raw, separator=separator)
    except (TmuxError, ValueError) as e:
        return markdown_error_response(str(e))

    return status_response("paste", number, owner, target=target or "current")
