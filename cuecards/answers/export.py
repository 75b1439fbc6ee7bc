"""
Plain-text export of sample answers for the clipboard.

Block layout for one question:

    **<question label>**

    <body>

Role-marked bodies prefix each segment with the role's first letter
("P: ...", "R: ..."). Segments and paragraphs are separated by a blank line.
"Copy all" joins the blocks with two blank lines.
"""

from typing import Callable, Optional, Sequence

from cuecards.answers.markers import DEFAULT_ROLES
from cuecards.answers.segmentation import segment_answer
from cuecards.answers.segments import RoleMarked, Segmentation
from cuecards.answers.versions import find_version
from cuecards.schemas import AnswerVersion, SampleAnswer

# (0-based index, question text) -> label shown in bold
QuestionNumbering = Callable[[int, str], str]

SEGMENT_SEPARATOR = "\n\n"
BLOCK_SEPARATOR = "\n\n\n"


def default_numbering(index: int, question: str) -> str:
    """Label questions "1. ...", "2. ..." in list order."""
    return f"{index + 1}. {question}"


def offset_numbering(start: int) -> QuestionNumbering:
    """
    Numbering that starts at `start` instead of 1.
    
    Used when a question list continues numbering from another list.
    """
    def numbering(index: int, question: str) -> str:
        return f"{index + start}. {question}"
    return numbering


def question_label(
    index: int,
    question: str,
    numbering: Optional[QuestionNumbering] = None,
) -> str:
    """Apply the numbering strategy, or the default one."""
    return (numbering or default_numbering)(index, question)


def render_body(segmentation: Segmentation) -> str:
    """Render segments as plain text."""
    if isinstance(segmentation, RoleMarked):
        parts = [f"{seg.role[:1]}: {seg.text}" for seg in segmentation.segments]
    else:
        parts = [seg.text for seg in segmentation.segments]
    return SEGMENT_SEPARATOR.join(parts)


def format_block(label: str, body: str) -> str:
    """Bold question label, blank line, body."""
    return f"**{label}**\n\n{body}"


def format_answer_block(
    index: int,
    question: str,
    version: AnswerVersion,
    numbering: Optional[QuestionNumbering] = None,
    vocabulary: Sequence[str] = DEFAULT_ROLES,
) -> Optional[str]:
    """
    Format one question/version pair as an export block.
    
    Returns None when segmentation leaves nothing to show, e.g. an answer
    made only of line breaks, whitespace or markers.
    """
    segmentation = segment_answer(version.answer, vocabulary)
    if not segmentation.segments:
        return None
    return format_block(question_label(index, question, numbering), render_body(segmentation))


def export_answer(
    sample_answers: Sequence[SampleAnswer],
    index: int,
    score: str,
    numbering: Optional[QuestionNumbering] = None,
    vocabulary: Sequence[str] = DEFAULT_ROLES,
) -> Optional[str]:
    """
    Export text for one question of a card.
    
    Returns:
        The block, or None if the question has no non-empty answer at
        this score
    """
    qa = sample_answers[index]
    version = find_version(qa.versions, score)
    if version is None:
        return None
    return format_answer_block(index, qa.question, version, numbering, vocabulary)


def export_all(
    sample_answers: Sequence[SampleAnswer],
    score: str,
    numbering: Optional[QuestionNumbering] = None,
    vocabulary: Sequence[str] = DEFAULT_ROLES,
) -> str:
    """
    Export every question of a card that has an answer at this score.
    
    Questions without one, or whose answer is empty once segmented, are
    left out entirely, so partial coverage never produces empty blocks.
    Numbering still follows list positions.
    
    Returns:
        Blocks joined by two blank lines, or "" if nothing matched
    """
    blocks = []
    for index in range(len(sample_answers)):
        block = export_answer(sample_answers, index, score, numbering, vocabulary)
        if block is not None:
            blocks.append(block)
    return BLOCK_SEPARATOR.join(blocks)
