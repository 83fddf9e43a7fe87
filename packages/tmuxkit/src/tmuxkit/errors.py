"""Shared error handling utilities for tmuxkit commands.

Commands catch TmuxError and turn it into a response for their display
type; library code below the command layer always raises.

PUBLIC API:
  - markdown_error_response: Create error response for markdown display
  - table_error_response: Create error response for table display
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def markdown_error_response(message: str) -> dict[str, Any]:
    """Create error response for markdown display commands.

    Args:
        message: The error message to display

    Returns:
        Markdown display dict with error element
    """
    return {
        "elements": [{"type": "text", "content": f"Error: {message}"}],
        "frontmatter": {"error": message, "status": "error"},
    }


def table_error_response(message: str) -> list[dict[str, Any]]:
    """Create error response for table display commands.

    Args:
        message: The error message (will be logged)

    Returns:
        Empty list (tables show nothing on error)
    """
    logger.warning(f"Command failed: {message}")
    return []
