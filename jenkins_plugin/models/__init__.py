# Models - plugin data structures
from .build import BuildHandle, BuildState, BuildStatus, ConsoleChunk, is_terminal_status
from .deadline import Deadline
from .trigger import GitMaterial, TriggerRequest

__all__ = [
    "BuildHandle",
    "BuildState",
    "BuildStatus",
    "ConsoleChunk",
    "Deadline",
    "GitMaterial",
    "TriggerRequest",
    "is_terminal_status",
]
