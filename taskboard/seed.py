"""Demo data for a fresh Taskboard database.

Usage::

    python -m taskboard.seed          # migrate the schema, load demo boards
    python -m taskboard.seed --reset  # drop everything first
"""
import argparse
import logging
from typing import Dict, List, Tuple

from sqlalchemy.orm import Session

from taskboard.database import SessionLocal, drop_db, migrate_db
from taskboard.logging_setup import setup_logging
from taskboard.models import Board, BoardColumn, Subtask, Task

logger = logging.getLogger(__name__)

SEED_COLUMNS = ("TODO", "DOING", "DONE")

# board name -> column name -> [(title, description), ...] in display order
SEED_BOARDS: Dict[str, Dict[str, List[Tuple[str, str]]]] = {
    "Platform Launch": {
        "TODO": [
            ("Build UI for onboarding flow", "Create UI screens for onboarding process"),
            ("Build UI for search", "Create UI components for search functionality"),
            ("Build settings UI", "Create interface for app settings"),
            ("QA and test all major user journeys", "Ensure all user paths work correctly"),
        ],
        "DOING": [
            ("Design settings and search pages", "Create designs for settings and search functionality"),
            ("Add account management endpoints", "Develop API endpoints for account operations"),
            ("Design onboarding flow", "Create designs for user onboarding"),
            ("Add search endpoints", "Develop API endpoints for search functionality"),
            ("Add authentication endpoints", "Develop API endpoints for user authentication"),
            (
                "Research pricing points of various competitors and trial different business models",
                "Study competition pricing strategies",
            ),
        ],
        "DONE": [
            ("Conduct 5 wireframe tests", "Test wireframes with users"),
            ("Create wireframe prototype", "Build initial wireframe prototype"),
            ("Review results of usability tests and iterate", "Analyze test results and make improvements"),
            (
                "Create paper prototypes and conduct 10 usability tests with potential customers",
                "Test paper prototypes with potential users",
            ),
            ("Market discovery", "Research market needs and opportunities"),
            ("Competitor analysis", "Research and analyze competitors"),
            ("Research the market", "Study market trends and requirements"),
        ],
    },
    "Marketing Plan": {
        "TODO": [
            ("Create social media campaign", "Develop social media strategy and content"),
            ("Develop email newsletter", "Design templates and plan content schedule"),
            ("Create promotional video", "Produce a short video highlighting key features"),
        ],
        "DOING": [
            ("SEO optimization", "Optimize website content for search engines"),
            ("Plan product launch event", "Organize virtual launch event with demos"),
        ],
        "DONE": [
            ("Market research", "Complete analysis of target audience"),
            ("Brand identity development", "Finalize logo and brand guidelines"),
        ],
    },
    "Roadmap": {
        "TODO": [
            ("API integration with third-party services", "Add integrations with popular productivity tools"),
            ("Mobile app development", "Create native mobile applications"),
            ("Enterprise features", "Develop advanced security and admin features"),
        ],
        "DOING": [
            ("Improve performance", "Optimize load times and responsiveness"),
            ("User feedback implementation", "Address top user requests from feedback forum"),
        ],
        "DONE": [
            ("Core functionality", "Complete essential features for MVP"),
            ("Initial user testing", "Complete first round of beta testing"),
        ],
    },
}

# Checklists for the first three tasks, as (title, is_completed); orders start at 0.
SEED_SUBTASKS: List[List[Tuple[str, bool]]] = [
    [
        ("Research pricing", True),
        ("Review competitor product", False),
        ("Finalize requirements", False),
    ],
    [
        ("Draft wireframes", True),
        ("Review with design team", True),
        ("Finalize mockups", False),
    ],
    [
        ("Setup development environment", True),
        ("Create basic structure", False),
    ],
]


def seed_boards(db: Session) -> List[Board]:
    """Replace all boards with the demo boards, their columns and tasks."""
    db.query(Board).delete(synchronize_session=False)
    db.commit()
    # Deleted rows' ids may be handed out again, so forget every loaded instance.
    db.expunge_all()

    boards = []
    for board_name, lanes in SEED_BOARDS.items():
        board = Board(name=board_name)
        db.add(board)
        db.flush()

        for column_order, column_name in enumerate(SEED_COLUMNS, start=1):
            column = BoardColumn(name=column_name, board_id=board.id, order=column_order)
            db.add(column)
            db.flush()

            for task_order, (title, description) in enumerate(lanes.get(column_name, []), start=1):
                db.add(Task(title=title, description=description, column_id=column.id, order=task_order))

        boards.append(board)

    db.commit()
    logger.info("Seeded %d boards", len(boards))
    return boards


def seed_subtasks(db: Session) -> int:
    """Attach the demo checklists to the first tasks unless subtasks already exist."""
    if db.query(Subtask.id).first() is not None:
        logger.info("Subtasks already present; skipping subtask seed")
        return 0

    task_ids = [task_id for (task_id,) in db.query(Task.id).order_by(Task.id.asc()).limit(len(SEED_SUBTASKS))]

    created = 0
    for task_id, checklist in zip(task_ids, SEED_SUBTASKS):
        for order, (title, is_completed) in enumerate(checklist):
            db.add(Subtask(title=title, is_completed=is_completed, task_id=task_id, order=order))
            created += 1

    db.commit()
    logger.info("Seeded %d subtasks", created)
    return created


def run(reset: bool = False) -> None:
    if reset:
        drop_db()
    migrate_db()

    db = SessionLocal()
    try:
        seed_boards(db)
        seed_subtasks(db)
    finally:
        db.close()


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Load demo boards into the Taskboard database.")
    parser.add_argument("--reset", action="store_true", help="drop and recreate all tables first")
    args = parser.parse_args(argv)

    setup_logging()
    run(reset=args.reset)


if __name__ == "__main__":
    main()
