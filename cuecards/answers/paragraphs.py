"""
Paragraph segmentation for answers without role markers.
"""

import re
from typing import Iterable

from cuecards.answers.markup import strip_markup
from cuecards.answers.segments import Segment

# Two line breaks in a row: <br><br>, <BR/> <br />, etc.
PARAGRAPH_BREAK = re.compile(r"<br\s*/?>\s*<br\s*/?>", re.IGNORECASE)


def split_paragraphs(text: str) -> list[Segment]:
    """
    Split a raw answer on double line breaks.
    
    Each piece has its markup stripped and is trimmed; empty pieces are
    dropped. Text without a double break comes back as a single paragraph.
    
    Args:
        text: Raw answer text
        
    Returns:
        Paragraph segments (role is None) in order
    """
    if not text:
        return []
    
    paragraphs = []
    for piece in PARAGRAPH_BREAK.split(text):
        piece = strip_markup(piece)
        if piece:
            paragraphs.append(Segment(text=piece))
    
    return paragraphs


def fragment_paragraphs(fragments: Iterable[str]) -> list[Segment]:
    """
    Use pre-segmented answer fragments as paragraphs.
    
    Fragments are stored clean, so they are only trimmed. Marker-like or
    separator-like text inside a fragment is left as content.
    """
    return [Segment(text=f.strip()) for f in fragments if f and f.strip()]
