"""tmux paste buffer manager.

Entry point for tmuxkit that runs either a REPL or an MCP server depending
on command line arguments.
"""

import sys
import logging

from .config import get_config_manager


def main():
    """Run tmuxkit as REPL or MCP server based on command line arguments.

    Checks for --mcp flag to determine mode:
    - With --mcp: Runs as MCP server for integration
    - Without --mcp: Runs as interactive REPL
    """
    logging.basicConfig(
        level=get_config_manager().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    from .app import app

    if "--mcp" in sys.argv:
        app.mcp.run()
    else:
        app.run(title="tmuxkit - tmux paste buffers")


if __name__ == "__main__":
    main()
