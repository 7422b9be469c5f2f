from internjobs.filters import EDUCATION_LEVELS
from internjobs.models import Candidate, Job

SKILLS_SHOWN = 3
DESCRIPTION_LIMIT = 200


def truncate_description(text: str, limit: int = DESCRIPTION_LIMIT) -> str:
    """Cut text to `limit` characters at the last word boundary."""
    desc = text.strip()
    if len(desc) > limit:
        desc = desc[:limit].rsplit(" ", 1)[0] + "..."
    return desc


class JobFormatter:
    """
    Formats a Job into a plain-text card for the terminal.
    """

    @classmethod
    def format_job(cls, job: Job) -> str:
        lines = [job.title]

        subtitle = " | ".join(part for part in (job.company, job.location) if part)
        if subtitle:
            lines.append(subtitle)

        tags = [job.type, job.level, job.time_commitment, job.education_level]
        tag_line = " ".join(f"[{tag}]" for tag in tags if tag)
        if tag_line:
            lines.append(tag_line)

        if job.description:
            lines.append(truncate_description(job.description))

        if job.posted_at:
            lines.append(f"Posted {job.posted_at.date().isoformat()}")
        else:
            lines.append("Posted date unknown")

        if job.external_link:
            lines.append(f"Apply: {job.external_link}")

        return "\n".join(lines)


class CandidateFormatter:
    """
    Formats a Candidate into a plain-text profile card.
    """

    @staticmethod
    def initials(name: str) -> str:
        """Placeholder avatar text: first letter of each name part."""
        return "".join(part[0] for part in name.split()).upper()

    @staticmethod
    def summarize_skills(skills: list[str], shown: int = SKILLS_SHOWN) -> str:
        """
        Show the first few skills and how many were left out,
        e.g. "Python, SQL, Git +2 more".
        """
        summary = ", ".join(skills[:shown])
        hidden = len(skills) - shown
        if hidden > 0:
            summary += f" +{hidden} more"
        return summary

    @classmethod
    def format_candidate(cls, candidate: Candidate) -> str:
        avatar = candidate.avatar_url or f"({cls.initials(candidate.name)})"
        lines = [f"{avatar} {candidate.name}"]
        if candidate.title:
            lines.append(candidate.title)
        if candidate.location:
            lines.append(candidate.location)
        if candidate.skills:
            lines.append(f"Top Skills: {cls.summarize_skills(candidate.skills)}")
        return "\n".join(lines)


def format_education_prompt() -> str:
    """Text of the first-run prompt asking which internships the user wants."""
    options = "\n".join(f"  - {level}" for level in EDUCATION_LEVELS)
    return (
        "Welcome to InternJobs.ai\n"
        "Are you looking for internships for high school or college students?\n"
        f"{options}\n"
        "Choose with: internjobs preference set <LEVEL>\n"
        "You can change this selection later."
    )
