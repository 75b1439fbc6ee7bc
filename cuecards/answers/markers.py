"""
Recognize (Role) markers in answer text and split the text into role segments.
"""

import re
from functools import lru_cache
from typing import Iterator, Sequence

from cuecards.answers.markup import strip_markup
from cuecards.answers.segments import Segment

# Closed vocabulary of rhetorical roles. The first entry is the role given to
# text that appears before any marker.
DEFAULT_ROLES: tuple[str, ...] = ("Point", "Reason", "Example", "Contrast", "Conclusion")


@lru_cache(maxsize=None)
def marker_pattern(vocabulary: tuple[str, ...]) -> re.Pattern:
    """Compile the "(Role)" pattern for a vocabulary, case-insensitive."""
    if not vocabulary:
        raise ValueError("role vocabulary must not be empty")
    names = "|".join(re.escape(role) for role in vocabulary)
    return re.compile(rf"\(({names})\)", re.IGNORECASE)


def has_role_markers(text: str, vocabulary: Sequence[str] = DEFAULT_ROLES) -> bool:
    """Return True if the text contains at least one known role marker."""
    if not text:
        return False
    return marker_pattern(tuple(vocabulary)).search(text) is not None


def canonical_role(name: str, vocabulary: Sequence[str] = DEFAULT_ROLES) -> str:
    """
    Map a marker name as written (e.g. "reason") to its vocabulary spelling.
    
    Names outside the vocabulary are returned unchanged.
    """
    lowered = name.lower()
    for role in vocabulary:
        if role.lower() == lowered:
            return role
    return name


def iter_role_segments(
    text: str,
    vocabulary: Sequence[str] = DEFAULT_ROLES,
) -> Iterator[Segment]:
    """
    Split text at role markers, yielding one Segment per non-empty span.
    
    - Text before the first marker gets the default role (first in vocabulary)
    - Each later span gets the role named by the marker in front of it
    - Markup is stripped from every span; spans left empty are skipped
    - Parenthesized words outside the vocabulary are ordinary content
    
    Args:
        text: Raw answer text
        vocabulary: Recognized role names
        
    Yields:
        Segment objects in text order
    """
    vocabulary = tuple(vocabulary)
    pattern = marker_pattern(vocabulary)
    
    role = vocabulary[0]
    position = 0
    
    for match in pattern.finditer(text):
        span = strip_markup(text[position:match.start()])
        if span:
            yield Segment(text=span, role=role)
        role = canonical_role(match.group(1), vocabulary)
        position = match.end()
    
    span = strip_markup(text[position:])
    if span:
        yield Segment(text=span, role=role)
