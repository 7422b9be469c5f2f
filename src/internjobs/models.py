import logging
from datetime import UTC, date, datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


def parse_timestamp(value: object) -> datetime | None:
    """
    Parse a posted-at value from a backend row into an aware UTC datetime.
    Accepts datetimes, dates, ISO-8601 strings and numbers of milliseconds
    since the Unix epoch. Anything else, or a value that does not convert,
    is an invalid date and comes back as None.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            logger.debug(f"Unparseable posted-at value: {value!r}")
            return None
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            parsed = datetime.fromtimestamp(value / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError):
            logger.debug(f"Out-of-range posted-at timestamp: {value!r}")
            return None
    else:
        logger.debug(f"Unsupported posted-at type: {type(value).__name__}")
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


class Job(BaseModel):
    """
    A job posting as exported by the backend.
    Rows use snake_case column names; the camelCase names are accepted too.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    company: str = ""
    description: str = ""
    location: str = ""
    type: str = ""
    level: str = ""
    education_level: str | None = Field(
        default=None, validation_alias=AliasChoices("education_level", "educationLevel")
    )
    time_commitment: str | None = Field(
        default=None, validation_alias=AliasChoices("time_commitment", "timeCommitment")
    )
    # None means the backend sent an invalid date
    posted_at: datetime | None = Field(
        default=None, validation_alias=AliasChoices("posted_at", "postedAt")
    )
    requirements: list[str] = Field(default_factory=list)
    applicants: int = 0
    external_link: str | None = Field(
        default=None, validation_alias=AliasChoices("external_link", "externalLink")
    )
    company_logo: str | None = Field(
        default=None, validation_alias=AliasChoices("company_logo", "companyLogo")
    )

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("company", "description", "location", "type", "level", mode="before")
    @classmethod
    def _null_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("requirements", mode="before")
    @classmethod
    def _null_to_list(cls, value: object) -> object:
        return [] if value is None else value

    @field_validator("applicants", mode="before")
    @classmethod
    def _null_to_zero(cls, value: object) -> object:
        return 0 if value is None else value

    @field_validator("posted_at", mode="before")
    @classmethod
    def _parse_posted_at(cls, value: object) -> datetime | None:
        return parse_timestamp(value)


class Candidate(BaseModel):
    """
    A student profile shown on the talent search page.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    title: str = ""
    location: str = ""
    education: str = ""
    skills: list[str] = Field(default_factory=list)
    avatar_url: str | None = Field(
        default=None, validation_alias=AliasChoices("avatar_url", "avatarUrl", "avatar")
    )
    availability: str | None = None
    major: str | None = None
    graduation_year: int | None = Field(
        default=None, validation_alias=AliasChoices("graduation_year", "graduationYear")
    )
    bio: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Candidate name must not be empty")
        return value

    @field_validator("title", "location", "education", mode="before")
    @classmethod
    def _null_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("skills", mode="before")
    @classmethod
    def _null_to_list(cls, value: object) -> object:
        return [] if value is None else value
