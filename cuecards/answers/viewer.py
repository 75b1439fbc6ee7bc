"""
Render model for a card's sample answers at one score.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from cuecards.answers.export import QuestionNumbering, question_label
from cuecards.answers.markers import DEFAULT_ROLES
from cuecards.answers.segmentation import segment_answer
from cuecards.answers.segments import RoleMarked, Segment
from cuecards.answers.versions import find_version
from cuecards.schemas import AnalysisItem, SampleAnswer


@dataclass
class AnswerView:
    """What the presentation layer needs to draw one question."""
    index: int
    label: str
    found: bool
    mode: Optional[str] = None  # "roles" | "paragraphs"
    segments: list[Segment] = field(default_factory=list)
    analysis: list[AnalysisItem] = field(default_factory=list)


def build_answer_views(
    sample_answers: Sequence[SampleAnswer],
    score: str,
    numbering: Optional[QuestionNumbering] = None,
    vocabulary: Sequence[str] = DEFAULT_ROLES,
) -> list[AnswerView]:
    """
    Build one AnswerView per question, in order.
    
    Questions without a version at the score get a placeholder view
    (found=False) instead of being dropped, so the page can say there is
    no answer at this score.
    """
    views = []
    for index, qa in enumerate(sample_answers):
        label = question_label(index, qa.question, numbering)
        version = find_version(qa.versions, score)
        
        if version is None:
            views.append(AnswerView(index=index, label=label, found=False))
            continue
        
        segmentation = segment_answer(version.answer, vocabulary)
        views.append(AnswerView(
            index=index,
            label=label,
            found=True,
            mode="roles" if isinstance(segmentation, RoleMarked) else "paragraphs",
            segments=list(segmentation.segments),
            analysis=list(version.analysis),
        ))
    
    return views
