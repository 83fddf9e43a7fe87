"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pytest

from tmuxkit import config as config_module
from tmuxkit.tmux import Server

VALUE_FLAGS = {"-b", "-t", "-s", "-c"}


def parse_args(args: Sequence[str]) -> tuple[set[str], dict[str, str], list[str]]:
    """Split tmux-style arguments into (flags, options, positionals)."""
    flags: set[str] = set()
    options: dict[str, str] = {}
    positionals: list[str] = []
    items = iter(args)
    for arg in items:
        if arg == "--":
            positionals.extend(items)
            break
        if arg in VALUE_FLAGS:
            options[arg] = next(items)
        elif arg.startswith("-") and len(arg) == 2 and arg != "-":
            flags.add(arg)
        else:
            positionals.append(arg)
    return flags, options, positionals


class FakeTmux:
    """Runner standing in for the tmux binary.

    Keeps a buffer stack and a fixed session layout, and records every argv
    it receives.
    """

    def __init__(self, version: str = "3.4") -> None:
        self.version = version
        self.calls: list[list[str]] = []
        self.buffers: dict[int, str] = {}
        self.sessions = {"main": {0: [0, 1], 1: [0]}}
        self.fail_with: dict[str, tuple[int, str]] = {}

    def __call__(self, cmd: Sequence[str]) -> tuple[int, str, str]:
        self.calls.append(list(cmd))
        args = list(cmd[1:])
        while args and args[0] in ("-L", "-S"):
            args = args[2:]

        name, rest = args[0], args[1:]
        if name in self.fail_with:
            code, stderr = self.fail_with[name]
            return code, "", stderr

        handler = getattr(self, "_" + name.lstrip("-").replace("-", "_"))
        return handler(*parse_args(rest))

    def commands(self) -> list[list[str]]:
        """Recorded tmux commands without the binary and the version probe."""
        return [call[1:] for call in self.calls if call[1:] != ["-V"]]

    def _V(self, flags, options, positionals):
        return 0, f"tmux {self.version}\n", ""

    def _list_sessions(self, flags, options, positionals):
        lines = [
            f"{name}: {len(windows)} windows (created Sun Oct 18 10:00:00 2026) [80x24] (attached)"
            for name, windows in self.sessions.items()
        ]
        return 0, "\n".join(lines) + "\n", ""

    def _has_session(self, flags, options, positionals):
        if options["-t"] in self.sessions:
            return 0, "", ""
        return 1, "", f"can't find session: {options['-t']}\n"

    def _new_session(self, flags, options, positionals):
        self.sessions[options["-s"]] = {0: [0]}
        return 0, "", ""

    def _kill_session(self, flags, options, positionals):
        del self.sessions[options["-t"]]
        return 0, "", ""

    def _list_windows(self, flags, options, positionals):
        windows = self.sessions[options["-t"]]
        lines = [f"{index}: bash ({len(panes)} panes) [80x24]" for index, panes in windows.items()]
        return 0, "\n".join(lines) + "\n", ""

    def _list_panes(self, flags, options, positionals):
        session, _, window = options["-t"].partition(":")
        panes = self.sessions[session][int(window)]
        lines = [f"{index}: [80x24] [history 0/2000, 0 bytes] %{index}" for index in panes]
        return 0, "\n".join(lines) + "\n", ""

    def _list_buffers(self, flags, options, positionals):
        prefix = "buffer" if float(self.version.rstrip("abc")) >= 2.0 else ""
        lines = [
            f'{prefix}{number}: {len(data.encode())} bytes: "{data[:50]}"'
            for number, data in sorted(self.buffers.items())
        ]
        return 0, "".join(line + "\n" for line in lines), ""

    def _save_buffer(self, flags, options, positionals):
        number = int(options["-b"])
        if number not in self.buffers:
            return 1, "", f"no buffer {number}\n"
        path = positionals[0]
        if path == "-":
            return 0, self.buffers[number], ""
        mode = "a" if "-a" in flags else "w"
        with open(path, mode) as f:
            f.write(self.buffers[number])
        return 0, "", ""

    def _set_buffer(self, flags, options, positionals):
        self.buffers[int(options["-b"])] = positionals[0]
        return 0, "", ""

    def _delete_buffer(self, flags, options, positionals):
        number = int(options["-b"])
        if number not in self.buffers:
            return 1, "", f"no buffer {number}\n"
        del self.buffers[number]
        return 0, "", ""

    def _paste_buffer(self, flags, options, positionals):
        if "-d" in flags:
            self.buffers.pop(int(options["-b"]), None)
        return 0, "", ""


@pytest.fixture
def fake_tmux() -> FakeTmux:
    """Fake tmux reporting a current release."""
    return FakeTmux()


@pytest.fixture
def server(fake_tmux: FakeTmux) -> Server:
    return Server(runner=fake_tmux)


@pytest.fixture
def make_server():
    """Build a server on a fake tmux of the given version."""

    def factory(version: str) -> tuple[Server, FakeTmux]:
        fake = FakeTmux(version)
        return Server(runner=fake), fake

    return factory


@pytest.fixture
def reset_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Run with no tmuxkit.toml in reach and a fresh global config."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_module, "_config_manager", None)
    yield
