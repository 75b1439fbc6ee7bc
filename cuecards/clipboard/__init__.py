# Clipboard export
from cuecards.clipboard.backends import (
    Clipboard,
    ClipboardError,
    MemoryClipboard,
    UnavailableClipboard,
)
from cuecards.clipboard.controller import (
    ALL_ITEMS,
    CopyStatus,
    CopyStateMachine,
    ExportController,
)

__all__ = [
    "Clipboard",
    "ClipboardError",
    "MemoryClipboard",
    "UnavailableClipboard",
    "ALL_ITEMS",
    "CopyStatus",
    "CopyStateMachine",
    "ExportController",
]
