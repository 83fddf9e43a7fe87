"""Shared helper functions for commands.

PUBLIC API:
  - resolve_session: Pick the session a command acts on
  - resolve_paste_target: Turn a target string into a Window or Pane
  - status_response: Build markdown result for action commands
"""

from typing import Any, Optional, Union

from ..config import get_config_manager
from ..tmux import Pane, Server, Session, SessionNotFoundError, Window

__all__ = ["resolve_session", "resolve_paste_target", "status_response"]


def resolve_session(server: Server, name: Optional[str] = None) -> Session:
    """Pick the session a command acts on.

    Order: explicit name, `session` from tmuxkit.toml, first running session.

    Raises:
        SessionNotFoundError: If nothing matches.
    """
    name = name or get_config_manager().session
    if name:
        return server.session(name)

    sessions = server.sessions()
    if not sessions:
        raise SessionNotFoundError("No tmux sessions running")
    return sessions[0]


def resolve_paste_target(server: Server, target: str) -> Union[Window, Pane]:
    """Resolve "session:window" to a Window and "session:window.pane" to a Pane.

    Raises:
        ValueError: If target is not in one of those forms.
    """
    session_name, sep, rest = target.partition(":")
    if not sep or not session_name:
        raise ValueError(f"Invalid paste target: {target}")

    window_part, dot, pane_part = rest.partition(".")
    if not window_part.isdigit() or (dot and not pane_part.isdigit()):
        raise ValueError(f"Invalid paste target: {target}")

    window = Session(server, session_name).window(int(window_part))
    if dot:
        return window.pane(int(pane_part))
    return window


def status_response(action: str, number: int, session: Session, content: Optional[str] = None, **extra: Any) -> dict[str, Any]:
    """Build markdown result for action commands.

    Args:
        action: Name of the action performed
        number: Buffer number acted on
        session: Session the buffer belongs to
        content: Buffer content to show as a code block, if any
        **extra: Additional frontmatter fields
    """
    elements = []
    if content is not None:
        elements.append({"type": "code_block", "content": content, "language": "text"})

    return {
        "elements": elements,
        "frontmatter": {"action": action, "status": "ok", "buffer": number, "session": session.name, **extra},
    }
