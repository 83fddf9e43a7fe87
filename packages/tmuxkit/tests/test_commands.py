"""Tests for the REPL/MCP commands."""

from __future__ import annotations

from pathlib import Path

import pytest

from tmuxkit.app import TmuxKitState
from tmuxkit.commands._helpers import resolve_paste_target, resolve_session
from tmuxkit.commands.buffers import buffers
from tmuxkit.commands.edit import delete, save, set_buffer
from tmuxkit.commands.paste import paste
from tmuxkit.commands.show import show
from tmuxkit.tmux import Pane, Server, SessionNotFoundError, Window

pytestmark = pytest.mark.unit


@pytest.fixture
def state(server: Server, fake_tmux, reset_config) -> TmuxKitState:
    fake_tmux.buffers = {0: "hello", 1: "x" * 2000}
    return TmuxKitState(server=server)


class TestHelpers:
    """Tests for session and target resolution."""

    def test_first_session_by_default(self, state: TmuxKitState) -> None:
        assert resolve_session(state.get_server()).name == "main"

    def test_configured_session(self, state: TmuxKitState, tmp_path: Path) -> None:
        (tmp_path / "tmuxkit.toml").write_text('[default]\nsession = "other"\n')

        with pytest.raises(SessionNotFoundError):
            resolve_session(state.get_server())

    def test_no_sessions(self, state: TmuxKitState, fake_tmux) -> None:
        fake_tmux.sessions = {}
        with pytest.raises(SessionNotFoundError):
            resolve_session(state.get_server())

    def test_paste_targets(self, server: Server) -> None:
        window = resolve_paste_target(server, "main:1")
        pane = resolve_paste_target(server, "main:1.2")

        assert isinstance(window, Window) and window.identifier == "main:1"
        assert isinstance(pane, Pane) and pane.identifier == "main:1.2"

    @pytest.mark.parametrize("target", ["main", ":1", "main:x", "main:1.", "main:1.y"])
    def test_invalid_paste_targets(self, server: Server, target: str) -> None:
        with pytest.raises(ValueError):
            resolve_paste_target(server, target)


class TestCommands:
    """Tests for command results."""

    def test_buffers(self, state: TmuxKitState) -> None:
        rows = buffers(state)

        assert [row["Buffer"] for row in rows] == [0, 1]
        assert rows[0] == {"Buffer": 0, "Session": "main", "Size": "5 B", "Sample": "hello"}
        assert rows[1]["Size"] == "2.0 KiB"
        assert rows[1]["Sample"].endswith("...")

    def test_buffers_filter(self, state: TmuxKitState) -> None:
        assert [row["Buffer"] for row in buffers(state, filter="HELL")] == [0]

    def test_buffers_unknown_session(self, state: TmuxKitState) -> None:
        assert buffers(state, session="nope") == []

    def test_show(self, state: TmuxKitState) -> None:
        result = show(state)

        assert result["elements"][0]["content"] == "hello"
        assert result["frontmatter"]["status"] == "ok"
        assert result["frontmatter"]["size"] == "5 B"

    def test_show_missing(self, state: TmuxKitState) -> None:
        result = show(state, number=9)
        assert result["frontmatter"]["status"] == "error"

    def test_set_buffer(self, state: TmuxKitState, fake_tmux) -> None:
        result = set_buffer(state, "new content", number=0)

        assert result["frontmatter"]["action"] == "set"
        assert fake_tmux.buffers[0] == "new content"

    def test_save(self, state: TmuxKitState, tmp_path: Path) -> None:
        path = tmp_path / "saved.txt"
        result = save(state, str(path))

        assert result["frontmatter"]["path"] == str(path)
        assert path.read_text() == "hello"

    def test_delete_shows_old_content(self, state: TmuxKitState, fake_tmux) -> None:
        result = delete(state, number=0)

        assert 0 not in fake_tmux.buffers
        assert result["elements"][0]["content"] == "hello"

    def test_paste(self, state: TmuxKitState, fake_tmux) -> None:
        result = paste(state, target="main:0.1", raw=True)

        assert result["frontmatter"]["target"] == "main:0.1"
        assert fake_tmux.commands()[-1] == ["paste-buffer", "-b", "0", "-r", "-t", "main:0.1"]

    def test_paste_bad_target(self, state: TmuxKitState) -> None:
        result = paste(state, target="nonsense")
        assert result["frontmatter"]["status"] == "error"

    def test_paste_unsupported(self, make_server, reset_config) -> None:
        server, fake = make_server("1.2")
        state = TmuxKitState(server=server)

        result = paste(state, target="main:0.0")

        assert "requires tmux >= 1.3" in result["elements"][0]["content"]
        assert not [call for call in fake.commands() if call[0] == "paste-buffer"]
