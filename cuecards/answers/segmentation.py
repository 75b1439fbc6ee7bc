"""
Choose the segmentation strategy for an answer and apply it.
"""

from typing import Sequence, Union

from cuecards.answers.markers import DEFAULT_ROLES, has_role_markers, iter_role_segments
from cuecards.answers.paragraphs import fragment_paragraphs, split_paragraphs
from cuecards.answers.segments import Paragraphed, RoleMarked, Segmentation


def segment_answer(
    answer: Union[str, Sequence[str]],
    vocabulary: Sequence[str] = DEFAULT_ROLES,
) -> Segmentation:
    """
    Segment a stored answer.
    
    - A list of fragments is taken as-is, one paragraph per fragment
    - A text blob with any role marker is split by role; its paragraph
      breaks are stripped as markup, not re-segmented
    - Any other text blob is split on double line breaks
    
    Args:
        answer: Raw text, or pre-segmented fragments
        vocabulary: Recognized role names
        
    Returns:
        RoleMarked or Paragraphed
    """
    if not isinstance(answer, str):
        return Paragraphed(tuple(fragment_paragraphs(answer)))
    
    if has_role_markers(answer, vocabulary):
        return RoleMarked(tuple(iter_role_segments(answer, vocabulary)))
    
    return Paragraphed(tuple(split_paragraphs(answer)))
