#!/usr/bin/env python3
"""
Load cue card catalog files into the database.

Each JSON file holds one topic object or a list of topic objects, in the
same shape the front end uses (camelCase keys: sampleAnswers, part1Questions,
categoryClass, ...).

Usage:
    python -m cuecards.cli.load_catalog data/part1.json                  # Load one file
    python -m cuecards.cli.load_catalog data/*.json --create-tables      # Create tables first
    python -m cuecards.cli.load_catalog data/part1.json --dry-run        # Validate only
"""

import argparse
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError

from cuecards.answers import available_scores
from cuecards.db import crud
from cuecards.db.engine import create_tables, get_session
from cuecards.logging import configure_logging, get_logger
from cuecards.schemas import Topic
from cuecards.settings import get_settings

logger = get_logger(__name__)


@dataclass
class LoadStats:
    """Statistics for one loader run."""
    files: int = 0
    topics: int = 0
    cards: int = 0
    questions: int = 0
    versions: int = 0
    failed: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    
    def print_summary(self):
        """Print a summary of the run."""
        print("\n" + "=" * 60)
        print("CATALOG LOAD SUMMARY")
        print("=" * 60)
        print(f"Files read:              {self.files}")
        print(f"  Failed:                {self.failed}")
        print(f"Topics:                  {self.topics}")
        print(f"Cards:                   {self.cards}")
        print(f"Sample questions:        {self.questions}")
        print(f"Answer versions:         {self.versions}")
        
        if self.errors:
            print("\nErrors:")
            for filename, error in self.errors:
                print(f"  {filename}: {error}")


def read_topics(path: Path) -> list[Topic]:
    """
    Parse and validate a catalog file.
    
    Raises:
        OSError, json.JSONDecodeError, ValidationError
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    
    if isinstance(data, dict):
        data = [data]
    
    return [Topic.model_validate(item) for item in data]


def load_files(
    paths: list[Path],
    dry_run: bool = False,
) -> LoadStats:
    """
    Validate every file, then upsert its topics unless dry_run is set.
    
    A file that fails to parse or validate is reported and skipped; the
    other files still load.
    """
    stats = LoadStats()
    position = 0
    
    for path in paths:
        stats.files += 1
        print(f"  Reading: {path}")
        
        try:
            topics = read_topics(path)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            stats.failed += 1
            stats.errors.append((str(path), str(e).splitlines()[0]))
            logger.warning(f"Skipping {path}: {e}")
            continue
        
        for topic in topics:
            stats.topics += 1
            for card in topic.cards:
                stats.cards += 1
                stats.questions += len(card.sample_answers)
                stats.versions += sum(len(qa.versions) for qa in card.sample_answers)
                if card.sample_answers:
                    scores = ", ".join(available_scores(card.sample_answers))
                    print(f"    {card.id}: {len(card.sample_answers)} questions, scores {scores}")
        
        if dry_run:
            print(f"    DRY RUN - Would save {len(topics)} topics")
            position += len(topics)
            continue
        
        with get_session() as session:
            for topic in topics:
                crud.upsert_topic(session, topic, position=position)
                position += 1
        print(f"    ✓ Saved {len(topics)} topics")
    
    return stats


def main():
    parser = argparse.ArgumentParser(
        description="Load cue card catalog JSON files into the database"
    )
    parser.add_argument(
        "files",
        nargs="+",
        help="Catalog JSON files",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate files without writing to the database",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before loading",
    )
    
    args = parser.parse_args()
    
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    
    problems = settings.validate()
    if problems:
        print(f"Error: Bad settings: {', '.join(problems)}")
        sys.exit(1)
    
    if args.create_tables and not args.dry_run:
        create_tables()
    
    print(f"Loading {len(args.files)} catalog files...")
    stats = load_files([Path(f) for f in args.files], dry_run=args.dry_run)
    stats.print_summary()
    
    if stats.failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
