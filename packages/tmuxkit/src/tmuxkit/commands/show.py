"""Show command - print a buffer's content.

PUBLIC API:
  - show: Read the full content of a buffer
"""

from typing import Any, Optional

from ..app import app
from ..errors import markdown_error_response
from ..tmux import TmuxError
from ._helpers import resolve_session, status_response


@app.command(
    display="markdown",
    fastmcp={
        "type": "resource",
        "mime_type": "text/markdown",
        "tags": {"inspection", "buffer"},
        "description": "Read the content of a tmux paste buffer",
    },
)
def show(state, number: int = 0, session: Optional[str] = None) -> dict[str, Any]:
    """Show the content of a paste buffer.

    Args:
        state: Application state.
        number: Buffer number. Defaults to 0, the most recent buffer.
        session: Session name. Defaults to configured or first session.

    Returns:
        Markdown formatted result with the buffer content.
    """
    try:
        target = resolve_session(state.get_server(), session)
        buffer = target.buffer(number)
        content = buffer.data()
        size = buffer.size()
    except TmuxError as e:
        return markdown_error_response(str(e))

    return status_response("show", number, target, content, size=size.pretty())
