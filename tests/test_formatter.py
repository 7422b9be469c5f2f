from datetime import UTC, datetime

import pytest

from internjobs.formatter import (
    CandidateFormatter,
    JobFormatter,
    format_education_prompt,
    truncate_description,
)
from internjobs.models import Candidate, Job


def test_format_job_full_card():
    job = Job(
        id="1",
        title="Summer Intern",
        company="Tech Corp",
        location="Austin, TX",
        description="Great job.",
        type="Internship",
        level="Entry Level",
        time_commitment="Summer",
        education_level="College",
        posted_at=datetime(2025, 2, 25, 9, 30, tzinfo=UTC),
        external_link="https://example.com/apply",
    )

    formatted = JobFormatter.format_job(job)

    assert formatted.splitlines() == [
        "Summer Intern",
        "Tech Corp | Austin, TX",
        "[Internship] [Entry Level] [Summer] [College]",
        "Great job.",
        "Posted 2025-02-25",
        "Apply: https://example.com/apply",
    ]


def test_format_job_minimal_card():
    job = Job(id="1", title="Intern", posted_at="garbage")

    formatted = JobFormatter.format_job(job)

    assert formatted.splitlines() == ["Intern", "Posted date unknown"]


def test_format_job_without_location():
    job = Job(id="1", title="Intern", company="Acme")
    assert "Acme" in JobFormatter.format_job(job).splitlines()


def test_long_description_is_truncated():
    """Test that descriptions longer than 200 chars are cut at a word boundary."""
    desc = "word " * 100
    result = truncate_description(desc)
    assert result.endswith("...")
    assert len(result) <= 203
    assert not result[:-3].endswith(" ")


def test_short_description_is_unchanged():
    assert truncate_description("  Short one.  ") == "Short one."


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Ada Lovelace", "AL"),
        ("grace brewster hopper", "GBH"),
        ("Cher", "C"),
        ("  Alan   Turing ", "AT"),
    ],
)
def test_initials(name, expected):
    assert CandidateFormatter.initials(name) == expected


@pytest.mark.parametrize(
    "skills, expected",
    [
        ([], ""),
        (["Rust"], "Rust"),
        (["Rust", "Math", "Go"], "Rust, Math, Go"),
        (["Rust", "Math", "Go", "C"], "Rust, Math, Go +1 more"),
        (["A", "B", "C", "D", "E", "F"], "A, B, C +3 more"),
    ],
)
def test_summarize_skills(skills, expected):
    assert CandidateFormatter.summarize_skills(skills) == expected


def test_format_candidate_with_placeholder_avatar():
    candidate = Candidate(
        id="1",
        name="Grace Hopper",
        title="CS Student",
        location="New York, NY",
        skills=["COBOL", "Compilers", "Leadership", "Navy", "Debugging"],
    )

    assert CandidateFormatter.format_candidate(candidate).splitlines() == [
        "(GH) Grace Hopper",
        "CS Student",
        "New York, NY",
        "Top Skills: COBOL, Compilers, Leadership +2 more",
    ]


def test_format_candidate_with_avatar_and_no_skills():
    candidate = Candidate(id="1", name="Ada Lovelace", avatar_url="https://example.com/ada.png")

    formatted = CandidateFormatter.format_candidate(candidate)

    assert formatted == "https://example.com/ada.png Ada Lovelace"
    assert "Top Skills" not in formatted


def test_education_prompt_lists_levels():
    prompt = format_education_prompt()
    assert "High School" in prompt
    assert "College" in prompt
    assert "internjobs preference set" in prompt
