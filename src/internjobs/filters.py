"""
Composable predicates over Job and Candidate records.

Every predicate is a pure function of one record and one filter value. A
filter value equal to its sentinel ("All", "Any time", or the empty string)
never excludes anything, so predicates can be ANDed in any order.
"""

from datetime import UTC, datetime

from internjobs.models import Candidate, Job

ALL = "All"
ANY_TIME = "Any time"

JOB_TYPES = [ALL, "Full-Time", "Part-Time", "Remote", "Internship"]
EXPERIENCE_LEVELS = [ALL, "Entry Level", "Intermediate", "Expert"]
TIME_COMMITMENTS = [ALL, "Evening", "Weekend", "Summer"]
EDUCATION_LEVELS = ["High School", "College"]
DATE_POSTED_OPTIONS = [ANY_TIME, "Past 24 hours", "Past week", "Past month"]

RECENCY_THRESHOLD_HOURS = {
    "Past 24 hours": 24,
    "Past week": 24 * 7,
    "Past month": 24 * 30,
}


def matches_category(value: str | None, selected: str | None) -> bool:
    """
    Exact, case-sensitive match of a categorical field.
    "All" (and an unset selection) matches every record.
    """
    if not selected or selected == ALL:
        return True
    return value == selected


def matches_date_posted(job: Job, date_posted: str, now: datetime | None = None) -> bool:
    """
    Keep jobs posted within the selected window.
    Unknown window labels do not filter. Jobs with an invalid posted-at date
    only pass "Any time".
    """
    if date_posted == ANY_TIME:
        return True

    threshold = RECENCY_THRESHOLD_HOURS.get(date_posted)
    if threshold is None:
        return True

    if job.posted_at is None:
        return False

    now = now or datetime.now(tz=UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    hours_since = (now - job.posted_at).total_seconds() / 3600
    return hours_since <= threshold


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


def matches_job_query(job: Job, query: str) -> bool:
    """Free-text match against title, company and description."""
    if not query:
        return True
    return any(_contains(field, query) for field in (job.title, job.company, job.description))


def candidate_search_text(candidate: Candidate) -> str:
    """Lower-cased text searched for a candidate: name, title, skills, education."""
    skills = " ".join(candidate.skills)
    return f"{candidate.name} {candidate.title} {skills} {candidate.education}".lower()


def matches_candidate_query(candidate: Candidate, query: str) -> bool:
    if not query:
        return True
    return query.lower() in candidate_search_text(candidate)


def matches_location(location: str, selected: str, any_location: str = "") -> bool:
    """
    Case-insensitive substring match on a record's location.
    `any_location` names a selection that means "anywhere" (e.g. the whole country).
    """
    if not selected:
        return True
    if any_location and selected == any_location:
        return True
    return _contains(location, selected)
