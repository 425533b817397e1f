"""
Data models for a triggered build and its observed state.
"""

from dataclasses import dataclass, field


class BuildStatus:
    """Terminal build results reported by Jenkins."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    ABORTED = "ABORTED"

    TERMINAL = frozenset({SUCCESS, FAILURE, ABORTED})


def is_terminal_status(result: str | None) -> bool:
    """Check whether a build result is final."""
    return result in BuildStatus.TERMINAL


@dataclass
class BuildState:
    """Mutable build state, refreshed by the status poller only."""

    result: str | None = None
    number: int | None = None
    building: bool = False
    duration_ms: int = 0
    url: str | None = None

    @property
    def is_terminal(self) -> bool:
        return is_terminal_status(self.result)


@dataclass
class BuildHandle:
    """Reference to a concrete build on the Jenkins server."""

    job_name: str
    number: int
    queue_id: int | None = None
    state: BuildState = field(default_factory=BuildState)


@dataclass(frozen=True)
class ConsoleChunk:
    """One slice of progressive console output, as raw bytes.

    Offsets count bytes, so a slice may end inside a multi-byte character.
    """

    content: bytes
    next_offset: int
    has_more: bool
