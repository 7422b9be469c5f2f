import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from internjobs.filters import (
    ALL,
    ANY_TIME,
    matches_candidate_query,
    matches_category,
    matches_date_posted,
    matches_job_query,
    matches_location,
)
from internjobs.models import Candidate, Job

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JobFilters(BaseModel):
    """
    Current selection on the job board. Every field defaults to its
    "no filter" sentinel. Fields can be given by snake_case or camelCase name.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    type: str = ALL
    level: str = ALL
    education_level: str = ALL
    time_commitment: str = ALL
    date_posted: str = ANY_TIME
    search_query: str = ""
    location: str = ""


class SearchState(BaseModel):
    """Query and location typed into one search bar."""

    model_config = ConfigDict(frozen=True)

    query: str = ""
    location: str = ""


DEFAULT_FILTERS = JobFilters()

# Accept both the attribute name and its camelCase alias
_FILTER_KEYS: dict[str, str] = {}
for _name, _field in JobFilters.model_fields.items():
    _FILTER_KEYS[_name] = _name
    if _field.alias:
        _FILTER_KEYS[_field.alias] = _name


def resolve_filter_key(key: str) -> str:
    """Map a filter key (snake_case or camelCase) to its JobFilters field name."""
    try:
        return _FILTER_KEYS[key]
    except KeyError:
        raise KeyError(f"Unknown job filter '{key}'") from None


def build_filters(values: Mapping[str, str | None]) -> JobFilters:
    """
    Validate a mapping of filter keys (snake_case or camelCase) into JobFilters.
    None means "no filter" for that key.
    """
    unknown = [key for key in values if key not in _FILTER_KEYS]
    if unknown:
        raise KeyError(f"Unknown job filter(s): {', '.join(unknown)}")
    return JobFilters.model_validate(
        {_FILTER_KEYS[key]: value for key, value in values.items() if value is not None}
    )


class BaseSearch(ABC, Generic[T]):
    """
    Applies the active predicates to an in-memory collection.
    Filtering never reorders records and never mutates the input.
    """

    @abstractmethod
    def matches(self, record: T, now: datetime) -> bool:
        """Return True when every active predicate passes for the record."""

    def apply(self, records: Iterable[T], now: datetime | None = None) -> list[T]:
        now = now or datetime.now(tz=UTC)
        # Naive times are taken as UTC, like posted-at values
        if now.tzinfo is None:
            now = now.replace(tzinfo=UTC)
        records = list(records)
        result = [record for record in records if self.matches(record, now)]
        logger.debug(
            f"{type(self).__name__} kept {len(result)} of {len(records)} records "
            f"(active: {self.active_filters()})"
        )
        return result

    @abstractmethod
    def active_filters(self) -> dict[str, str]:
        """Return the dimensions currently set to something other than their sentinel."""


class JobSearch(BaseSearch[Job]):
    """
    Filter and search state for the job board, plus the filtering itself.
    The search bar's query and location live in the same state as the
    sidebar filters (`search_query` and `location`).
    """

    def __init__(self, filters: JobFilters | None = None, any_location: str = "") -> None:
        self._filters = filters or DEFAULT_FILTERS
        self.any_location = any_location

    @property
    def filters(self) -> JobFilters:
        return self._filters

    @property
    def search(self) -> SearchState:
        return SearchState(query=self._filters.search_query, location=self._filters.location)

    def update_filter(self, key: str, value: str | None) -> None:
        """
        Change one filter, leaving the others untouched.
        None resets that filter to its sentinel.
        """
        name = resolve_filter_key(key)
        values = self._filters.model_dump()
        values[name] = value
        self._filters = build_filters(values)

    def set_filters(self, filters: JobFilters | Mapping[str, str | None]) -> None:
        """
        Replace the whole filter state.
        Missing keys and None values fall back to their sentinels.
        """
        if not isinstance(filters, JobFilters):
            filters = build_filters(filters)
        self._filters = filters

    def reset_filters(self) -> None:
        self._filters = DEFAULT_FILTERS

    def set_query(self, value: str) -> None:
        self.update_filter("search_query", value)

    def set_location(self, value: str) -> None:
        self.update_filter("location", value)

    def active_filters(self) -> dict[str, str]:
        current = self._filters.model_dump()
        defaults = DEFAULT_FILTERS.model_dump()
        return {key: value for key, value in current.items() if value != defaults[key]}

    def matches(self, record: Job, now: datetime) -> bool:
        f = self._filters
        return (
            matches_category(record.type, f.type)
            and matches_category(record.level, f.level)
            and matches_category(record.education_level, f.education_level)
            and matches_category(record.time_commitment, f.time_commitment)
            and matches_date_posted(record, f.date_posted, now)
            and matches_job_query(record, f.search_query)
            and matches_location(record.location, f.location, self.any_location)
        )


class CandidateSearch(BaseSearch[Candidate]):
    """Search state for the talent page. Independent of the job board."""

    def __init__(self, state: SearchState | None = None, any_location: str = "") -> None:
        self._state = state or SearchState()
        self.any_location = any_location

    @property
    def search(self) -> SearchState:
        return self._state

    def set_query(self, value: str) -> None:
        self._state = self._state.model_copy(update={"query": value})

    def set_location(self, value: str) -> None:
        self._state = self._state.model_copy(update={"location": value})

    def active_filters(self) -> dict[str, str]:
        return {key: value for key, value in self._state.model_dump().items() if value}

    def matches(self, record: Candidate, now: datetime) -> bool:
        return matches_candidate_query(record, self._state.query) and matches_location(
            record.location, self._state.location, self.any_location
        )
