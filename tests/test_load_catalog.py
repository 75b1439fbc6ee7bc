"""Tests for the catalog loader CLI."""

import json
from contextlib import contextmanager

from cuecards.cli import load_catalog
from cuecards.db import crud

from conftest import CATALOG_PATH


def test_dry_run_counts_and_reports_bad_files(tmp_path, capsys):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    invalid = tmp_path / "invalid.json"
    invalid.write_text(json.dumps({"id": "t"}), encoding="utf-8")

    stats = load_catalog.load_files([CATALOG_PATH, broken, invalid], dry_run=True)

    assert stats.files == 3
    assert stats.failed == 2
    assert stats.topics == 1
    assert stats.cards == 2
    assert stats.questions == 2
    assert stats.versions == 3
    assert [name for name, _ in stats.errors] == [str(broken), str(invalid)]
    assert "scores 6.5, 7.5" in capsys.readouterr().out


def test_duplicate_scores_fail_validation(tmp_path):
    path = tmp_path / "dupes.json"
    path.write_text(json.dumps([{
        "id": "t",
        "title": "T",
        "cards": [{
            "id": "c",
            "title": "C",
            "sampleAnswers": [{
                "question": "Q?",
                "versions": [
                    {"score": "7", "answer": "a"},
                    {"score": "7", "answer": "b"},
                ],
            }],
        }],
    }]), encoding="utf-8")

    stats = load_catalog.load_files([path], dry_run=True)
    assert stats.failed == 1


def test_load_writes_to_database(db_session, monkeypatch):
    @contextmanager
    def test_session():
        yield db_session
        db_session.commit()

    monkeypatch.setattr(load_catalog, "get_session", test_session)
    stats = load_catalog.load_files([CATALOG_PATH])

    assert stats.failed == 0
    assert [qa.question for qa in crud.get_sample_answers(db_session, "p1-pets")] == [
        "Do you like cats or dogs?",
        "Did you have a pet when you were a child?",
    ]
