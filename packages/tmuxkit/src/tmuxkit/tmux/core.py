"""Core tmux operations - shared utilities for all tmux modules.

PUBLIC API:
  - run_command: Execute a tmux argument vector and return result
  - split_lines: Split command output into non-empty lines
  - parse_indexes: Extract window or pane indexes from listing output
  - Runner: Callable signature accepted by Server for command execution
"""

import logging
import subprocess
from typing import Callable, List, Sequence, Tuple

logger = logging.getLogger(__name__)

type Runner = Callable[[Sequence[str]], Tuple[int, str, str]]


def run_command(cmd: Sequence[str]) -> Tuple[int, str, str]:
    """Run a full tmux argument vector, return (returncode, stdout, stderr).

    No shell is involved: every element reaches tmux as one argument. Output
    bytes that are not valid UTF-8 decode to U+FFFD.

    Raises:
        OSError: If the binary cannot be started.
    """
    logger.debug(f"Running: {' '.join(cmd)}")
    result = subprocess.run(list(cmd), capture_output=True, text=True, encoding="utf-8", errors="replace")

    if result.stdout:
        logger.debug(f"stdout: {result.stdout.strip()}")
    if result.stderr:
        logger.debug(f"stderr: {result.stderr.strip()}")

    return result.returncode, result.stdout, result.stderr


def split_lines(stdout: str) -> List[str]:
    """Split command output into non-empty lines."""
    return [line for line in stdout.splitlines() if line.strip()]


def parse_indexes(stdout: str) -> List[int]:
    """Leading "N: " indexes of list-windows/list-panes default output."""
    indexes = []
    for line in split_lines(stdout):
        head, sep, _ = line.partition(": ")
        if sep and head.isdigit():
            indexes.append(int(head))
    return indexes
