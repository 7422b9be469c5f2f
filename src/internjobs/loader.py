import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from internjobs.models import Candidate, Job

logger = logging.getLogger(__name__)

_JOBS = TypeAdapter(list[Job])
_CANDIDATES = TypeAdapter(list[Candidate])


def _read_rows(path: str | Path, section: str) -> list[Any]:
    """
    Read rows from a snapshot file.
    A snapshot is either a bare list of rows or an object keyed by section
    ("jobs", "candidates").
    """
    with Path(path).open("r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        rows = data.get(section, [])
        if not isinstance(rows, list):
            raise ValueError(f"'{section}' in {path} must be a list, got {type(rows).__name__}")
        return rows
    raise ValueError(f"Snapshot {path} must be a list or an object, got {type(data).__name__}")


def load_jobs(path: str | Path) -> list[Job]:
    """Load and validate jobs from a snapshot file, keeping file order."""
    jobs = _JOBS.validate_python(_read_rows(path, "jobs"))
    invalid_dates = sum(1 for job in jobs if job.posted_at is None)
    if invalid_dates:
        logger.warning(f"{invalid_dates} job(s) in {path} have no valid posted date")
    logger.info(f"Loaded {len(jobs)} jobs from {path}")
    return jobs


def load_candidates(path: str | Path) -> list[Candidate]:
    """Load and validate candidate profiles from a snapshot file, keeping file order."""
    candidates = _CANDIDATES.validate_python(_read_rows(path, "candidates"))
    logger.info(f"Loaded {len(candidates)} candidates from {path}")
    return candidates
