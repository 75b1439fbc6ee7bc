"""
Score-tier version selection.
"""

import math
from typing import Iterable, Optional

from cuecards.schemas import AnswerVersion, SampleAnswer


def find_version(versions: Iterable[AnswerVersion], score: str) -> Optional[AnswerVersion]:
    """
    Find the version for a score label.
    
    Labels are compared as written, so "7" and "7.0" are different scores.
    
    Returns:
        The matching version, or None when the question has no answer at
        that score
    """
    for version in versions:
        if version.score == score:
            return version
    return None


def score_sort_key(label: str) -> tuple:
    """
    Sort key ordering score labels by decimal value.
    
    Labels that are not numbers go after all numeric ones, alphabetically.
    """
    try:
        value = float(label)
    except (TypeError, ValueError):
        return (1, 0.0, label)
    if math.isnan(value):
        return (1, 0.0, label)
    return (0, value, label)


def available_scores(sample_answers: Iterable[SampleAnswer]) -> list[str]:
    """
    Collect every score label used by any question of a card.
    
    Duplicates across questions collapse to one entry; the result is in
    ascending numeric order ("6", "6.5", "7", ... not lexicographic).
    """
    labels = {
        version.score
        for qa in sample_answers
        for version in qa.versions
    }
    return sorted(labels, key=score_sort_key)
