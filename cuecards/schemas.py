"""
Pydantic schemas for catalog content and API request/response models.
"""

from typing import Literal, Optional, Union
from pydantic import BaseModel, Field, field_validator


# --- Catalog Schemas ---

class AnalysisItem(BaseModel):
    """A language note attached to one answer version."""
    kind: Literal["vocab", "phrase", "sentence"] = Field(alias="type")
    text: str
    explanation: str

    class Config:
        populate_by_name = True


class AnswerVersion(BaseModel):
    """One score-tier rendering of an answer."""
    score: str
    answer: Union[str, list[str]]
    analysis: list[AnalysisItem] = Field(default_factory=list)

    class Config:
        frozen = True


class SampleAnswer(BaseModel):
    """A question with its answer versions, one per score label."""
    question: str
    versions: list[AnswerVersion] = Field(default_factory=list)

    class Config:
        frozen = True

    @field_validator("versions")
    @classmethod
    def scores_are_unique(cls, versions: list[AnswerVersion]) -> list[AnswerVersion]:
        seen = set()
        for version in versions:
            if version.score in seen:
                raise ValueError(f"duplicate score label {version.score!r}")
            seen.add(version.score)
        return versions


class CueCard(BaseModel):
    """A speaking-test card as stored in the catalog files."""
    id: str
    title: str
    category: str = ""
    category_class: str = Field(default="", alias="categoryClass")
    status: Optional[Literal["New"]] = None
    # Part 1
    part1_questions: list[str] = Field(default_factory=list, alias="part1Questions")
    sample_answers: list[SampleAnswer] = Field(default_factory=list, alias="sampleAnswers")
    # Part 2+3
    part2_title: Optional[str] = Field(default=None, alias="part2Title")
    part2_description: Optional[str] = Field(default=None, alias="part2Description")
    part2_prompts: list[str] = Field(default_factory=list, alias="part2Prompts")
    part3_questions: list[str] = Field(default_factory=list, alias="part3Questions")

    class Config:
        populate_by_name = True


class Topic(BaseModel):
    """A group of cards as stored in the catalog files."""
    id: str
    title: str
    is_new: bool = Field(default=False, alias="isNew")
    cards: list[CueCard] = Field(default_factory=list)

    class Config:
        populate_by_name = True


# --- Card Schemas ---

class TopicOut(BaseModel):
    """Topic response for list endpoints."""
    id: str
    title: str
    is_new: bool = False
    card_count: int = 0


class CardOut(BaseModel):
    """Card response for list endpoints."""
    id: str
    title: str
    category: Optional[str] = None
    category_class: Optional[str] = None
    status: Optional[str] = None
    topic_id: Optional[str] = None

    class Config:
        from_attributes = True


class CardDetailOut(CardOut):
    """Card response with question lists."""
    part1_questions: list[str] = Field(default_factory=list)
    part2_title: Optional[str] = None
    part2_description: Optional[str] = None
    part2_prompts: list[str] = Field(default_factory=list)
    part3_questions: list[str] = Field(default_factory=list)
    question_count: int = 0

    class Config:
        from_attributes = True


class ScoresOut(BaseModel):
    """Score labels offered for a card."""
    card_id: str
    default_score: str
    scores: list[str]


# --- Answer Rendering Schemas ---

class SegmentOut(BaseModel):
    """One classified unit of answer text."""
    role: Optional[str] = None
    text: str


class AnswerOut(BaseModel):
    """A rendered answer, or a placeholder when the score has no version."""
    index: int
    label: str
    found: bool
    mode: Optional[Literal["roles", "paragraphs"]] = None
    segments: list[SegmentOut] = Field(default_factory=list)
    analysis: list[AnalysisItem] = Field(default_factory=list)


class AnswersResponse(BaseModel):
    """Rendered answers for one card at one score."""
    card_id: str
    score: str
    scores: list[str]
    answers: list[AnswerOut]


# --- View Schemas ---

class ViewCreate(BaseModel):
    """Open a card at a score."""
    card_id: str
    score: Optional[str] = None


class ScoreChange(BaseModel):
    """Switch the active score of a view."""
    score: str


class ViewOut(BaseModel):
    """A view with its acknowledgment states."""
    view_id: str
    card_id: str
    score: str
    statuses: dict[str, Literal["idle", "copied"]]


class CopyResult(BaseModel):
    """Outcome of one copy action."""
    view_id: str
    item: str
    copied: bool
    status: Literal["idle", "copied"]


class ClipboardOut(BaseModel):
    """Last text written to a view's clipboard."""
    view_id: str
    text: Optional[str] = None
    writes: int = 0
