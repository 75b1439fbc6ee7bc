"""
Clipboard capabilities the export controller can write to.

The controller only needs one operation: write a string, or fail. Failures
are reported by raising ClipboardError.
"""

from collections import deque
from typing import Optional, Protocol


class ClipboardError(Exception):
    """The clipboard refused or could not take the write."""


class Clipboard(Protocol):
    """Something that accepts copied text."""

    async def write_text(self, text: str) -> None:
        ...


class MemoryClipboard:
    """
    Clipboard kept in process memory.
    
    Only the last `max_history` texts are kept; `writes` counts them all.
    
    Backs HTTP view sessions, where the client reads the copied text back
    and places it on its own clipboard.
    """

    def __init__(self, max_history: int = 20):
        self.history: deque[str] = deque(maxlen=max_history)
        self.writes = 0

    @property
    def text(self) -> Optional[str]:
        """Most recently written text, or None."""
        return self.history[-1] if self.history else None

    async def write_text(self, text: str) -> None:
        self.history.append(text)
        self.writes += 1


class UnavailableClipboard:
    """Clipboard for contexts without clipboard access. Every write fails."""

    def __init__(self, reason: str = "clipboard is not available"):
        self.reason = reason

    async def write_text(self, text: str) -> None:
        raise ClipboardError(self.reason)
