"""
SQLAlchemy ORM models for the cue card catalog.
"""

from sqlalchemy import (
    Column, String, Text, Integer, Boolean, DateTime, ForeignKey, JSON,
    UniqueConstraint, Index, func
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class Topic(Base):
    """A group of cue cards, e.g. one season's Part 1 topics."""
    __tablename__ = "topics"
    
    id = Column(String(100), primary_key=True)
    title = Column(Text, nullable=False)
    is_new = Column(Boolean, nullable=False, default=False)
    position = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    
    # Relationships
    cards = relationship(
        "Card",
        back_populates="topic",
        order_by="Card.position",
        cascade="all, delete-orphan",
    )
    
    def __repr__(self):
        return f"<Topic(id={self.id}, title={self.title})>"


class Card(Base):
    """A cue card with its question lists."""
    __tablename__ = "cards"
    
    id = Column(String(100), primary_key=True)
    topic_id = Column(String(100), ForeignKey("topics.id", ondelete="CASCADE"))
    position = Column(Integer, nullable=False, default=0)
    title = Column(Text, nullable=False)
    category = Column(Text)
    category_class = Column(Text)
    status = Column(Text)  # "New" or NULL
    part1_questions = Column(JSON)  # list[str]
    part2_title = Column(Text)
    part2_description = Column(Text)
    part2_prompts = Column(JSON)  # list[str]
    part3_questions = Column(JSON)  # list[str]
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    
    # Relationships
    topic = relationship("Topic", back_populates="cards")
    questions = relationship(
        "SampleQuestion",
        back_populates="card",
        order_by="SampleQuestion.position",
        cascade="all, delete-orphan",
    )
    
    __table_args__ = (
        Index("idx_cards_topic_id", "topic_id"),
    )
    
    def __repr__(self):
        return f"<Card(id={self.id}, title={self.title[:50] if self.title is not None else None})>"


class SampleQuestion(Base):
    """A question on a card that has sample answers."""
    __tablename__ = "sample_questions"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    card_id = Column(String(100), ForeignKey("cards.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False)
    question = Column(Text, nullable=False)
    
    # Relationships
    card = relationship("Card", back_populates="questions")
    versions = relationship(
        "AnswerVersionRow",
        back_populates="question",
        order_by="AnswerVersionRow.id",
        cascade="all, delete-orphan",
    )
    
    __table_args__ = (
        UniqueConstraint("card_id", "position", name="uq_card_position"),
    )
    
    def __repr__(self):
        return f"<SampleQuestion(position={self.position}, question={self.question[:50] if self.question is not None else None})>"


class AnswerVersionRow(Base):
    """One score-tier answer to a sample question."""
    __tablename__ = "answer_versions"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    question_id = Column(Integer, ForeignKey("sample_questions.id", ondelete="CASCADE"), nullable=False)
    score = Column(String(20), nullable=False)
    answer = Column(JSON, nullable=False)  # str or list[str]
    analysis = Column(JSON)  # list of {type, text, explanation}
    
    # Relationships
    question = relationship("SampleQuestion", back_populates="versions")
    
    __table_args__ = (
        UniqueConstraint("question_id", "score", name="uq_question_score"),
        Index("idx_versions_question_id", "question_id"),
    )
    
    def __repr__(self):
        return f"<AnswerVersionRow(question_id={self.question_id}, score={self.score})>"
