"""
Segment types produced by answer segmentation.

An answer is segmented exactly one way: either by role markers or by
paragraph separators. The two outcomes are separate types so callers
branch on the variant instead of re-inspecting the text.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Segment:
    """A piece of clean answer text, optionally tagged with a rhetorical role."""
    text: str
    role: Optional[str] = None


@dataclass(frozen=True)
class RoleMarked:
    """Answer split at (Role) markers. Every segment carries a role."""
    segments: tuple[Segment, ...]


@dataclass(frozen=True)
class Paragraphed:
    """Answer split into plain paragraphs. No segment carries a role."""
    segments: tuple[Segment, ...]


Segmentation = Union[RoleMarked, Paragraphed]
