import os
from datetime import UTC, datetime, timedelta

import pytest

# Keep tests independent of any local .env before the package is imported
os.environ["INTERNJOBS_PREFERENCE_DB"] = ":memory:"
os.environ["INTERNJOBS_LOG_LEVEL"] = "INFO"
os.environ["INTERNJOBS_ANY_LOCATION"] = "United States"

from internjobs.models import Candidate, Job  # noqa: E402
from internjobs.preferences import PreferenceStore  # noqa: E402

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def now():
    """A fixed point in time for recency filters."""
    return NOW


@pytest.fixture
def store():
    """An in-memory preference store."""
    with PreferenceStore(db_path=":memory:") as test_store:
        yield test_store


@pytest.fixture
def sample_jobs():
    """A small, varied job board."""
    return [
        Job(
            id="1",
            title="Software Engineering Intern",
            company="Tech Corp",
            description="Build internal tools with Python.",
            location="New York, NY",
            type="Internship",
            level="Entry Level",
            education_level="College",
            time_commitment="Summer",
            posted_at=NOW - timedelta(hours=2),
        ),
        Job(
            id="2",
            title="Cashier",
            company="Corner Market",
            description="Evening shifts at the register.",
            location="Houston, TX",
            type="Part-Time",
            level="Entry Level",
            education_level="High School",
            time_commitment="Evening",
            posted_at=NOW - timedelta(hours=100),
        ),
        Job(
            id="3",
            title="Data Analyst",
            company="Numbers LLC",
            description="SQL dashboards for the sales team.",
            location="Remote",
            type="Full-Time",
            level="Intermediate",
            posted_at=NOW - timedelta(hours=500),
        ),
        Job(
            id="4",
            title="Research Assistant",
            company="State University",
            description="Help run lab experiments.",
            location="Austin, TX",
            type="Full-Time",
            level="Expert",
            education_level="College",
            posted_at="not a date",
        ),
    ]


@pytest.fixture
def sample_candidates():
    """A few student profiles."""
    return [
        Candidate(
            id="c1",
            name="Ada Lovelace",
            title="Math Student",
            location="Remote",
            education="University of London",
            skills=["Rust", "Math"],
        ),
        Candidate(
            id="c2",
            name="Grace Hopper",
            title="CS Student",
            location="New York, NY",
            education="Yale",
            skills=["COBOL", "Compilers", "Leadership", "Navy", "Debugging"],
        ),
        Candidate(
            id="c3",
            name="Alan Turing",
            title="Junior",
            location="Houston, TX",
            education="Princeton High School",
            skills=[],
        ),
    ]
