"""tmuxkit ReplKit2 application.

Exposes paste buffer operations as REPL commands and MCP tools on top of the
tmuxkit object model.
"""

from dataclasses import dataclass, field
from typing import Optional

from replkit2 import App

from .config import get_config_manager
from .tmux import Server


@dataclass
class TmuxKitState:
    """Application state: the tmux server all commands talk to.

    The server is created from tmuxkit.toml on first use so that its
    version probe runs once per application.
    """

    server: Optional[Server] = field(default=None)

    def get_server(self) -> Server:
        if self.server is None:
            self.server = Server.from_config(get_config_manager())
        return self.server


# Must be created before command imports for decorator registration
app = App(
    "tmuxkit",
    TmuxKitState,
    uri_scheme="tmuxkit",
    fastmcp={
        "description": "tmux paste buffer manager",
        "tags": {"terminal", "clipboard", "tmux"},
    },
)


# Command imports trigger @app.command decorator registration
from .commands import buffers  # noqa: E402, F401
from .commands import show  # noqa: E402, F401
from .commands import edit  # noqa: E402, F401
from .commands import paste  # noqa: E402, F401
