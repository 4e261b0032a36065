"""Core module containing the interactive shell."""

from .shell import InteractiveShell, RunResult

__all__ = [
    "InteractiveShell",
    "RunResult",
]
