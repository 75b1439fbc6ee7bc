"""
Database CRUD operations for topics, cards and sample answers.
"""

from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from cuecards.db.models import Topic, Card, SampleQuestion, AnswerVersionRow
from cuecards import schemas


# --- Topic Operations ---

def list_topics(session: Session) -> list[tuple[Topic, int]]:
    """All topics in display order, each with its card count."""
    rows = (
        session.query(Topic, func.count(Card.id))
        .outerjoin(Card, Card.topic_id == Topic.id)
        .group_by(Topic.id)
        .order_by(Topic.position, Topic.id)
        .all()
    )
    return [(topic, count) for topic, count in rows]


def upsert_topic(session: Session, topic: schemas.Topic, position: int = 0) -> Topic:
    """
    Insert or update a topic and all of its cards.
    
    Cards listed in the topic are upserted; their sample answers are
    replaced wholesale.
    """
    row = session.get(Topic, topic.id)
    
    if row:
        setattr(row, "title", topic.title)
        setattr(row, "is_new", topic.is_new)
        setattr(row, "position", position)
    else:
        row = Topic(
            id=topic.id,
            title=topic.title,
            is_new=topic.is_new,
            position=position,
        )
        session.add(row)
    
    session.flush()
    
    for card_position, card in enumerate(topic.cards):
        upsert_card(session, card, topic_id=topic.id, position=card_position)
    
    return row


# --- Card Operations ---

def get_card(session: Session, card_id: str) -> Optional[Card]:
    """Get a card by its ID."""
    return session.get(Card, card_id)


def list_cards(
    session: Session,
    topic_id: Optional[str] = None,
    q: Optional[str] = None,
    limit: int = 50,
    offset: int = 0,
) -> list[Card]:
    """List cards, optionally filtered by topic and title search."""
    query = session.query(Card)
    
    if topic_id:
        query = query.filter(Card.topic_id == topic_id)
    
    if q:
        query = query.filter(Card.title.ilike(f"%{q}%"))
    
    query = query.order_by(Card.topic_id, Card.position, Card.id)
    return query.offset(offset).limit(limit).all()


def upsert_card(
    session: Session,
    card: schemas.CueCard,
    topic_id: Optional[str] = None,
    position: int = 0,
) -> Card:
    """
    Insert or update a card.
    Replaces its sample questions and answer versions.
    """
    row = get_card(session, card.id)
    
    fields = dict(
        topic_id=topic_id,
        position=position,
        title=card.title,
        category=card.category,
        category_class=card.category_class,
        status=card.status,
        part1_questions=list(card.part1_questions),
        part2_title=card.part2_title,
        part2_description=card.part2_description,
        part2_prompts=list(card.part2_prompts),
        part3_questions=list(card.part3_questions),
    )
    
    if row:
        for key, value in fields.items():
            setattr(row, key, value)
        row.questions.clear()
        session.flush()  # Delete old questions before re-inserting positions
    else:
        row = Card(id=card.id, **fields)
        session.add(row)
    
    for question_position, qa in enumerate(card.sample_answers):
        question = SampleQuestion(position=question_position, question=qa.question)
        for version in qa.versions:
            question.versions.append(AnswerVersionRow(
                score=version.score,
                answer=version.answer if isinstance(version.answer, str) else list(version.answer),
                analysis=[item.model_dump(by_alias=True) for item in version.analysis],
            ))
        row.questions.append(question)
    
    session.flush()
    return row


# --- Sample Answer Operations ---

def to_sample_answers(card: Card) -> list[schemas.SampleAnswer]:
    """Convert a card's stored questions to SampleAnswer models."""
    return [
        schemas.SampleAnswer(
            question=question.question,
            versions=[
                schemas.AnswerVersion(
                    score=version.score,
                    answer=version.answer,
                    analysis=version.analysis or [],
                )
                for version in question.versions
            ],
        )
        for question in card.questions
    ]


def get_sample_answers(session: Session, card_id: str) -> Optional[list[schemas.SampleAnswer]]:
    """
    Load a card's sample answers.
    
    Returns:
        The answers in question order, or None if the card does not exist
    """
    card = get_card(session, card_id)
    if card is None:
        return None
    return to_sample_answers(card)
