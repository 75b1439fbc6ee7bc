# Answer segmentation, selection and export
from cuecards.answers.markup import strip_markup
from cuecards.answers.markers import DEFAULT_ROLES, has_role_markers, iter_role_segments
from cuecards.answers.paragraphs import split_paragraphs, fragment_paragraphs
from cuecards.answers.segments import Segment, RoleMarked, Paragraphed, Segmentation
from cuecards.answers.segmentation import segment_answer
from cuecards.answers.versions import find_version, available_scores, score_sort_key
from cuecards.answers.export import (
    QuestionNumbering,
    default_numbering,
    offset_numbering,
    format_answer_block,
    export_answer,
    export_all,
)
from cuecards.answers.viewer import AnswerView, build_answer_views

__all__ = [
    "strip_markup",
    "DEFAULT_ROLES",
    "has_role_markers",
    "iter_role_segments",
    "split_paragraphs",
    "fragment_paragraphs",
    "Segment",
    "RoleMarked",
    "Paragraphed",
    "Segmentation",
    "segment_answer",
    "find_version",
    "available_scores",
    "score_sort_key",
    "QuestionNumbering",
    "default_numbering",
    "offset_numbering",
    "format_answer_block",
    "export_answer",
    "export_all",
    "AnswerView",
    "build_answer_views",
]
