import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from typing import TypeVar

from internjobs import config
from internjobs.filters import (
    ALL,
    ANY_TIME,
    DATE_POSTED_OPTIONS,
    EDUCATION_LEVELS,
)
from internjobs.formatter import CandidateFormatter, JobFormatter, format_education_prompt
from internjobs.loader import load_candidates, load_jobs
from internjobs.search import JobFilters
from internjobs.session import JobBoardSession

logger = logging.getLogger(__name__)

T = TypeVar("T")


def setup_logging() -> None:
    """Configure logging once, in the application entry point only."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=config.LOG_LEVEL,
    )


def print_results(records: Sequence[T], render: Callable[[T], str], noun: str) -> None:
    if not records:
        print(f"No {noun} match the current filters.")
        return
    print(f"{len(records)} {noun} found\n")
    print("\n\n".join(render(record) for record in records))


def run_jobs(session: JobBoardSession, args: argparse.Namespace) -> None:
    """Filter a job snapshot with the options given on the command line."""
    if session.gate.show_modal:
        print(format_education_prompt())
        print()

    jobs = load_jobs(args.snapshot)
    session.jobs.set_filters(
        JobFilters(
            type=args.type,
            level=args.level,
            education_level=args.education_level,
            time_commitment=args.time_commitment,
            date_posted=args.date_posted,
            search_query=args.query,
            location=args.location,
        )
    )
    if args.use_preference:
        session.apply_education_preference()

    active = session.jobs.active_filters()
    if active:
        logger.info("Active filters: " + ", ".join(f"{k}={v!r}" for k, v in active.items()))

    print_results(session.jobs.apply(jobs), JobFormatter.format_job, "jobs")


def run_candidates(session: JobBoardSession, args: argparse.Namespace) -> None:
    """Search a candidate snapshot by free text and location."""
    candidates = load_candidates(args.snapshot)
    session.candidates.set_query(args.query)
    session.candidates.set_location(args.location)
    print_results(
        session.candidates.apply(candidates), CandidateFormatter.format_candidate, "candidates"
    )


def run_preference(session: JobBoardSession, args: argparse.Namespace) -> None:
    """Show, set or clear the stored education level."""
    gate = session.gate
    if args.action == "set":
        if args.level not in EDUCATION_LEVELS:
            logger.warning(
                f"'{args.level}' is not one of {', '.join(EDUCATION_LEVELS)}; storing it anyway."
            )
        gate.set_education_level(args.level)
    elif args.action == "clear":
        gate.clear_education_level()

    if gate.education_level:
        print(f"Education level: {gate.education_level}")
    else:
        print("Education level: not set")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="internjobs",
        description="Browse and filter internship listings and student profiles.",
    )
    parser.add_argument(
        "--db",
        default=None,
        metavar="PATH",
        help="Preference database (overrides INTERNJOBS_PREFERENCE_DB env var).",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    jobs = commands.add_parser("jobs", help="List jobs from a snapshot file.")
    jobs.add_argument("snapshot", help="JSON snapshot with a list of jobs.")
    jobs.add_argument("--type", default=ALL, help="Job type, e.g. 'Full-Time'.")
    jobs.add_argument("--level", default=ALL, help="Experience level, e.g. 'Entry Level'.")
    jobs.add_argument(
        "--education-level", default=ALL, help="Education level, e.g. 'High School'."
    )
    jobs.add_argument("--time-commitment", default=ALL, help="Evening, Weekend or Summer.")
    jobs.add_argument(
        "--date-posted",
        default=ANY_TIME,
        help=f"One of: {', '.join(DATE_POSTED_OPTIONS)}.",
    )
    jobs.add_argument("--query", default="", help="Text to look for in title, company or description.")
    jobs.add_argument("--location", default="", help="Part of the job location.")
    jobs.add_argument(
        "--use-preference",
        action="store_true",
        help="Filter by the stored education level.",
    )

    candidates = commands.add_parser("candidates", help="Search candidate profiles.")
    candidates.add_argument("snapshot", help="JSON snapshot with a list of candidates.")
    candidates.add_argument("--query", default="", help="Text to look for in name, title, skills or education.")
    candidates.add_argument("--location", default="", help="Part of the candidate location.")

    preference = commands.add_parser("preference", help="Manage the stored education level.")
    actions = preference.add_subparsers(dest="action", required=True)
    actions.add_parser("show", help="Print the stored education level.")
    set_action = actions.add_parser("set", help="Store an education level.")
    set_action.add_argument("level", help=f"One of: {', '.join(EDUCATION_LEVELS)}.")
    actions.add_parser("clear", help="Forget the stored education level.")

    return parser.parse_args(argv)


COMMANDS: dict[str, Callable[[JobBoardSession, argparse.Namespace], None]] = {
    "jobs": run_jobs,
    "candidates": run_candidates,
    "preference": run_preference,
}


def cli(argv: list[str] | None = None) -> None:
    """CLI entry point for the package."""
    args = parse_args(argv)
    setup_logging()

    # --db flag > env var > default
    db_path = args.db or config.PREFERENCE_DB_PATH

    with JobBoardSession.open(db_path, any_location=config.ANY_LOCATION) as session:
        try:
            COMMANDS[args.command](session, args)
        except (OSError, ValueError) as e:
            logger.error(f"Could not load snapshot '{getattr(args, 'snapshot', '')}': {e}")
            sys.exit(1)


if __name__ == "__main__":
    cli()
