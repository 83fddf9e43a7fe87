"""Buffers command - list the paste buffer stack."""

from typing import Optional

from ..app import app
from ..errors import table_error_response
from ..tmux import TmuxError
from ..types import BufferRow
from ._helpers import resolve_session

SAMPLE_WIDTH = 40


@app.command(
    display="table",
    headers=["Buffer", "Session", "Size", "Sample"],
    fastmcp={"type": "resource", "description": "List tmux paste buffers"},
)
def buffers(state, session: Optional[str] = None, filter: Optional[str] = None) -> list[BufferRow]:
    """List paste buffers with their size and a sample of their content."""
    try:
        target = resolve_session(state.get_server(), session)
        info = target.buffers_information()
    except TmuxError as e:
        return table_error_response(str(e))

    rows: list[BufferRow] = []
    for number in sorted(info):
        entry = info[number]
        if filter and filter.lower() not in entry.sample.lower():
            continue

        sample = entry.sample
        if len(sample) > SAMPLE_WIDTH:
            sample = f"{sample[: SAMPLE_WIDTH - 3]}..."

        rows.append({
            "Buffer": number,
            "Session": target.name,
            "Size": entry.size.pretty(),
            "Sample": sample,
        })

    return rows
