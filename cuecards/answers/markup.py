"""
Removal of inline presentational tags from stored answer text.
"""

import re

# Anything between angle brackets. Content is trusted catalog text, so tags
# are removed structurally without being parsed or validated.
TAG_PATTERN = re.compile(r"<[^>]+>")


def strip_markup(text: str) -> str:
    """
    Remove angle-bracket tags and trim surrounding whitespace.
    
    Inner whitespace is left alone. Unbalanced remnants such as a lone
    "<" stay in the text.
    
    Args:
        text: Fragment that may contain tags like <b> or <br/>
        
    Returns:
        Clean text
    """
    if not text:
        return ""
    
    return TAG_PATTERN.sub("", text).strip()
