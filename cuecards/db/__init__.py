# Database module
from cuecards.db.engine import get_engine, get_session, create_tables, SessionLocal
from cuecards.db.models import Base, Topic, Card, SampleQuestion, AnswerVersionRow

__all__ = [
    "get_engine",
    "get_session",
    "create_tables",
    "SessionLocal",
    "Base",
    "Topic",
    "Card",
    "SampleQuestion",
    "AnswerVersionRow",
]
