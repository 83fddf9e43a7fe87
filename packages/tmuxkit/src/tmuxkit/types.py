"""Type definitions for tmuxkit - versions, capabilities and buffer values.

The version gate lives here: a tmux version is parsed once per server and
resolved into a Capabilities struct that every operation consults.
"""

from typing import TypedDict, Literal
from dataclasses import dataclass
import functools
import re


# Identifiers
type BufferNumber = int  # position in the paste buffer stack, 0 is the top
type SessionName = str  # e.g. "work"

type SizeUnit = Literal["B", "KiB", "MiB", "GiB", "TiB"]

_UNITS: tuple[SizeUnit, ...] = ("B", "KiB", "MiB", "GiB", "TiB")

# Capability thresholds
STDOUT_CAPTURE_SINCE = "1.3"
PANE_PASTE_SINCE = "1.3"
IMPLICIT_TARGET_SINCE = "1.5"

_VERSION_RE = re.compile(
    r"^(?:tmux\s+)?(?P<prefix>next-|openbsd-)?(?P<numbers>\d+(?:\.\d+)*)(?P<suffix>[a-z]*)(?P<rc>-rc\d*)?$"
)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class TmuxVersion:
    """Parsed tmux version, ordered numerically component by component.

    Trailing zero components are ignored, so "1.3" equals "1.3.0". A letter
    suffix sorts after its base release ("1.9" < "1.9a" < "1.10"), while a
    "next-" prefix or an "-rc" tag sorts before it. "master" sorts after
    every release, and so does OpenBSD's base tmux ("openbsd-7.4"), which is
    numbered after the OS release and tracks tmux master.
    """

    numbers: tuple[int, ...]
    suffix: str = ""
    development: bool = False
    master: bool = False
    release_candidate: str = ""
    openbsd: bool = False

    @classmethod
    def parse(cls, text: str) -> "TmuxVersion":
        """Parse a version token or the full `tmux -V` output.

        Args:
            text: String like "1.8", "3.3a", "tmux 3.4", "tmux next-3.5",
                "3.4-rc" or "tmux openbsd-7.4".

        Returns:
            TmuxVersion instance

        Raises:
            ValueError: If the text holds no recognisable version.
        """
        value = text.strip()
        if value in ("master", "tmux master"):
            return cls(numbers=(), master=True)

        match = _VERSION_RE.match(value)
        if not match:
            raise ValueError(f"Invalid tmux version: {text!r}")

        prefix = match.group("prefix")
        return cls(
            numbers=tuple(int(part) for part in match.group("numbers").split(".")),
            suffix=match.group("suffix"),
            development=prefix == "next-",
            release_candidate=(match.group("rc") or "").lstrip("-"),
            openbsd=prefix == "openbsd-",
        )

    @property
    def _key(self) -> tuple:
        numbers = list(self.numbers)
        while numbers and numbers[-1] == 0:
            numbers.pop()
        # next- < -rc < release
        stage = 0 if self.development else 1 if self.release_candidate else 2
        return (self.master or self.openbsd, tuple(numbers), stage, self.release_candidate, self.suffix)

    @staticmethod
    def _coerce(other: object) -> "TmuxVersion | None":
        if isinstance(other, TmuxVersion):
            return other
        if isinstance(other, str):
            try:
                return TmuxVersion.parse(other)
            except ValueError:
                return None
        return None

    def __eq__(self, other: object) -> bool:
        version = self._coerce(other)
        if version is None:
            return NotImplemented
        return self._key == version._key

    def __lt__(self, other: object) -> bool:
        version = self._coerce(other)
        if version is None:
            return NotImplemented
        return self._key < version._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        if self.master:
            return "master"
        prefix = "next-" if self.development else "openbsd-" if self.openbsd else ""
        rc = f"-{self.release_candidate}" if self.release_candidate else ""
        return prefix + ".".join(str(n) for n in self.numbers) + self.suffix + rc


@dataclass(frozen=True)
class Capabilities:
    """Feature switches derived once from the server's tmux version."""

    supports_stdout_capture: bool
    supports_pane_paste: bool
    requires_explicit_target: bool

    @classmethod
    def from_version(cls, version: TmuxVersion) -> "Capabilities":
        return cls(
            supports_stdout_capture=version >= STDOUT_CAPTURE_SINCE,
            supports_pane_paste=version >= PANE_PASTE_SINCE,
            requires_explicit_target=version < IMPLICIT_TARGET_SINCE,
        )


class ByteCount(int):
    """A size in bytes with unit-aware formatting."""

    def to(self, unit: SizeUnit) -> float:
        """Convert to the given binary unit.

        Raises:
            ValueError: If unit is not one of B, KiB, MiB, GiB, TiB.
        """
        if unit not in _UNITS:
            raise ValueError(f"Unknown size unit: {unit}")
        return int(self) / (1024 ** _UNITS.index(unit))

    def pretty(self, precision: int = 1) -> str:
        """Format using the largest unit that keeps the value above 1."""
        if abs(self) < 1024:
            return f"{int(self)} B"

        size = float(self)
        for unit in _UNITS[1:-1]:
            size /= 1024
            if abs(size) < 1024:
                return f"{size:.{precision}f} {unit}"
        return f"{size / 1024:.{precision}f} {_UNITS[-1]}"

    def __str__(self) -> str:
        return self.pretty()

    def __repr__(self) -> str:
        return f"ByteCount({int(self)})"


@dataclass(frozen=True)
class BufferInfo:
    """One entry of `list-buffers` output."""

    number: BufferNumber
    size: ByteCount
    sample: str


@dataclass(frozen=True)
class SessionInfo:
    """One entry of `list-sessions` output."""

    name: SessionName
    windows: int
    attached: bool


# Display types for buffers() command
class BufferRow(TypedDict):
    """Row data for buffer listing."""

    Buffer: int
    Session: str
    Size: str
    Sample: str
