from types import TracebackType

from internjobs.gating import EducationLevelGate
from internjobs.preferences import PreferenceStore
from internjobs.search import CandidateSearch, JobSearch


class JobBoardSession:
    """
    Application state for one run of the job board: the preference store,
    the education-level gate and the two independent search engines.

    Build one at the entry point and pass it (or its parts) to whatever needs
    it. Use as a context manager so the store is closed on exit.
    """

    def __init__(
        self,
        store: PreferenceStore,
        jobs: JobSearch | None = None,
        candidates: CandidateSearch | None = None,
        any_location: str = "",
    ) -> None:
        self.store = store
        self.gate = EducationLevelGate(store)
        self.jobs = jobs or JobSearch(any_location=any_location)
        self.candidates = candidates or CandidateSearch(any_location=any_location)

    @classmethod
    def open(cls, db_path: str, any_location: str = "") -> "JobBoardSession":
        """Open the preference store at `db_path` and evaluate the gate once."""
        session = cls(PreferenceStore(db_path=db_path), any_location=any_location)
        session.gate.evaluate()
        return session

    def apply_education_preference(self) -> None:
        """
        Use the stored education level as the job board's education filter.
        Without a stored level the current filter is left as it is.
        """
        if self.gate.education_level:
            self.jobs.update_filter("education_level", self.gate.education_level)

    def close(self) -> None:
        self.store.close()

    def __enter__(self) -> "JobBoardSession":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
