"""Tests for catalog storage."""

import pytest
from sqlalchemy.exc import IntegrityError

from cuecards.db import crud
from cuecards.db.models import AnswerVersionRow, SampleQuestion
from cuecards.schemas import AnswerVersion, CueCard, SampleAnswer, Topic


class TestUpsertTopic:

    def test_loads_cards_questions_and_versions(self, seeded):
        topics = crud.list_topics(seeded)
        assert [(t.id, count) for t, count in topics] == [("part1-sample", 2)]
        assert seeded.query(SampleQuestion).count() == 2
        assert seeded.query(AnswerVersionRow).count() == 3

    def test_reupsert_replaces_sample_answers(self, seeded, catalog_topic):
        card = catalog_topic.cards[0].model_copy(update={
            "sample_answers": [SampleAnswer(question="Only question?", versions=[
                AnswerVersion(score="6", answer="Short."),
            ])],
        })
        topic = catalog_topic.model_copy(update={"cards": [card, catalog_topic.cards[1]]})
        crud.upsert_topic(seeded, topic)
        seeded.commit()

        answers = crud.get_sample_answers(seeded, card.id)
        assert [qa.question for qa in answers] == ["Only question?"]
        assert seeded.query(AnswerVersionRow).count() == 1


class TestSampleAnswers:

    def test_round_trip_keeps_answer_shapes(self, seeded):
        answers = crud.get_sample_answers(seeded, "p1-pets")
        assert [qa.question for qa in answers] == [
            "Do you like cats or dogs?",
            "Did you have a pet when you were a child?",
        ]
        assert isinstance(answers[0].versions[0].answer, str)
        assert answers[1].versions[0].answer == [
            "Yes, we had a goldfish called Bubbles.",
            "Looking after it taught me a bit of responsibility.",
        ]
        assert answers[0].versions[1].analysis[0].kind == "phrase"

    def test_unknown_card(self, seeded):
        assert crud.get_sample_answers(seeded, "missing") is None

    def test_card_without_answers(self, seeded):
        assert crud.get_sample_answers(seeded, "p2-long-journey") == []


class TestListCards:

    def test_filter_by_topic_and_title(self, seeded):
        assert [c.id for c in crud.list_cards(seeded, topic_id="part1-sample")] == [
            "p1-pets", "p2-long-journey",
        ]
        assert [c.id for c in crud.list_cards(seeded, q="journey")] == ["p2-long-journey"]
        assert crud.list_cards(seeded, topic_id="other") == []


def test_duplicate_score_rejected_by_database(db_session):
    card = CueCard(id="c1", title="Card")
    crud.upsert_topic(db_session, Topic(id="t1", title="T", cards=[card]))
    question = SampleQuestion(card_id="c1", position=0, question="Q?")
    question.versions.append(AnswerVersionRow(score="7", answer="a"))
    question.versions.append(AnswerVersionRow(score="7", answer="b"))
    db_session.add(question)
    with pytest.raises(IntegrityError):
        db_session.flush()
