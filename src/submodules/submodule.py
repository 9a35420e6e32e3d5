"""A single submodule entry: status record plus health cell."""

from collections.abc import Callable

from src.submodules.classifier import StatusClassifier
from src.submodules.health import HealthCell, HealthObserver
from src.submodules.models import HealthCode, SubmoduleRecord


class Submodule:
    """One submodule of a repository.

    The record is replaced only by an explicit ``refresh``; health is
    tracked separately and never alters the record.
    """

    def __init__(
        self,
        record: SubmoduleRecord,
        classifier: StatusClassifier,
        line: str | None = None,
    ) -> None:
        """Initialize the entry.

        Args:
            record: Classified record.
            classifier: Classifier used for refreshes.
            line: Raw line the record was built from.
        """
        self._record = record
        self._classifier = classifier
        self._line = line
        self._health = HealthCell(name=record.name)

    @classmethod
    def from_line(
        cls,
        line: str | None,
        repo_root: str | None,
        classifier: StatusClassifier,
    ) -> "Submodule":
        """Build an entry from one raw status line.

        Args:
            line: Raw status line.
            repo_root: Repository root path.
            classifier: Classifier to use.

        Returns:
            New Submodule with health OKAY.
        """
        return cls(classifier.build_record(line, repo_root), classifier, line)

    @property
    def record(self) -> SubmoduleRecord:
        """Get the current status record."""
        return self._record

    @property
    def line(self) -> str | None:
        """Get the raw line the record was built from."""
        return self._line

    @property
    def health(self) -> HealthCode:
        """Get the current health code."""
        return self._health.value

    def set_health(self, code: HealthCode) -> None:
        """Set the health code and notify observers."""
        self._health.set(code)

    def subscribe_health(self, observer: HealthObserver) -> Callable[[], None]:
        """Register a health observer; returns an unsubscribe callable."""
        return self._health.subscribe(observer)

    def refresh(self, repo_root: str | None, line: str | None = None) -> SubmoduleRecord:
        """Reclassify the entry.

        Args:
            repo_root: Repository root path.
            line: New raw line; defaults to the line last used.

        Returns:
            The updated record.
        """
        if line is not None and line != self._line:
            self._line = line
            self._record = self._classifier.build_record(line, repo_root)
        else:
            self._record = self._classifier.reclassify(self._record, self._line, repo_root)
        return self._record
