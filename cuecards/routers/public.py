"""
Public read-only API endpoints for cards, scores and answers.
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from cuecards.answers import (
    available_scores,
    build_answer_views,
    export_all,
    export_answer,
    offset_numbering,
)
from cuecards.db import crud
from cuecards.dependencies import get_db
from cuecards.schemas import (
    AnswerOut,
    AnswersResponse,
    CardDetailOut,
    CardOut,
    ScoresOut,
    SegmentOut,
    TopicOut,
)
from cuecards.settings import get_settings

router = APIRouter(prefix="/v1", tags=["public"])


def load_answers_or_404(db: Session, card_id: str) -> list:
    """Sample answers for a card, or a 404."""
    sample_answers = crud.get_sample_answers(db, card_id)
    if sample_answers is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Card {card_id} not found"
        )
    return sample_answers


# --- Topic & Card Endpoints ---

@router.get("/topics", response_model=list[TopicOut])
def list_topics(db: Session = Depends(get_db)):
    """List all topics with their card counts."""
    return [
        TopicOut(id=topic.id, title=topic.title, is_new=bool(topic.is_new), card_count=count)
        for topic, count in crud.list_topics(db)
    ]


@router.get("/cards", response_model=list[CardOut])
def list_cards(
    topic: Optional[str] = Query(default=None, description="Filter by topic id"),
    q: Optional[str] = Query(default=None, description="Search in card titles"),
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
):
    """
    List cue cards.
    
    - **topic**: Only cards of this topic
    - **q**: Optional title search
    - **limit**: Max number of results (1-200)
    - **offset**: Pagination offset
    """
    return crud.list_cards(db, topic_id=topic, q=q, limit=limit, offset=offset)


@router.get("/cards/{card_id}", response_model=CardDetailOut)
def get_card(card_id: str, db: Session = Depends(get_db)):
    """Get a card with its question lists."""
    card = crud.get_card(db, card_id)
    if not card:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Card {card_id} not found"
        )
    
    return CardDetailOut(
        id=card.id,
        title=card.title,
        category=card.category,
        category_class=card.category_class,
        status=card.status,
        topic_id=card.topic_id,
        part1_questions=card.part1_questions or [],
        part2_title=card.part2_title,
        part2_description=card.part2_description,
        part2_prompts=card.part2_prompts or [],
        part3_questions=card.part3_questions or [],
        question_count=len(card.questions),
    )


# --- Answer Endpoints ---

@router.get("/cards/{card_id}/scores", response_model=ScoresOut)
def get_scores(card_id: str, db: Session = Depends(get_db)):
    """Score labels offered for a card, in ascending order."""
    sample_answers = load_answers_or_404(db, card_id)
    return ScoresOut(
        card_id=card_id,
        default_score=get_settings().DEFAULT_SCORE,
        scores=available_scores(sample_answers),
    )


@router.get("/cards/{card_id}/answers", response_model=AnswersResponse)
def get_answers(
    card_id: str,
    score: Optional[str] = Query(default=None, description="Score label (default from settings)"),
    start: int = Query(default=1, description="Number of the first question"),
    db: Session = Depends(get_db),
):
    """
    Rendered sample answers for a card at one score.
    
    Questions without an answer at the score are returned with
    `found: false` so the page can show a placeholder.
    """
    sample_answers = load_answers_or_404(db, card_id)
    score = score or get_settings().DEFAULT_SCORE
    
    views = build_answer_views(sample_answers, score, numbering=offset_numbering(start))
    
    return AnswersResponse(
        card_id=card_id,
        score=score,
        scores=available_scores(sample_answers),
        answers=[
            AnswerOut(
                index=view.index,
                label=view.label,
                found=view.found,
                mode=view.mode,
                segments=[SegmentOut(role=seg.role, text=seg.text) for seg in view.segments],
                analysis=view.analysis,
            )
            for view in views
        ],
    )


@router.get("/cards/{card_id}/export", response_class=PlainTextResponse)
def export_card(
    card_id: str,
    score: Optional[str] = Query(default=None, description="Score label (default from settings)"),
    index: Optional[int] = Query(default=None, ge=0, description="Question index; omit for all"),
    start: int = Query(default=1, description="Number of the first question"),
    db: Session = Depends(get_db),
):
    """
    Copy-ready plain text for one question, or for the whole card.
    """
    sample_answers = load_answers_or_404(db, card_id)
    score = score or get_settings().DEFAULT_SCORE
    numbering = offset_numbering(start)
    
    if index is None:
        text = export_all(sample_answers, score, numbering)
    elif index >= len(sample_answers):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Card {card_id} has no question {index}"
        )
    else:
        text = export_answer(sample_answers, index, score, numbering)
    
    if not text:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No answer at score {score}"
        )
    
    return PlainTextResponse(text)
