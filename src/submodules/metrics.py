"""Metrics for submodule classification."""

from collections import Counter
from threading import Lock

from src.submodules.models import StatusCode


class ClassificationMetrics:
    """Collects metrics for submodule classification.

    Provides thread-safe counters for:
    - submodules_classified_total{status}
    - submodules_unset_total
    - config_read_failures_total
    """

    _instance: "ClassificationMetrics | None" = None
    _lock = Lock()

    def __init__(self) -> None:
        """Initialize the metrics collector."""
        self._classified: Counter[StatusCode] = Counter()
        self._unset = 0
        self._config_read_failures = 0
        self._lock = Lock()

    @classmethod
    def get_instance(cls) -> "ClassificationMetrics":
        """Get the singleton metrics instance.

        Returns:
            The shared ClassificationMetrics instance.
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (for testing)."""
        with cls._lock:
            cls._instance = None

    def record_classified(self, status: StatusCode) -> None:
        """Record one classification result.

        Args:
            status: Resulting status code.
        """
        with self._lock:
            self._classified[status] += 1

    def record_unset(self) -> None:
        """Record a classification that left the status indeterminate."""
        with self._lock:
            self._unset += 1

    def record_config_read_failure(self) -> None:
        """Record a config file that existed but could not be read."""
        with self._lock:
            self._config_read_failures += 1

    def get_status_totals(self) -> dict[StatusCode, int]:
        """Get classification counts per status.

        Returns:
            Dict mapping status code to count.
        """
        with self._lock:
            return dict(self._classified)

    def to_dict(self) -> dict[str, int]:
        """Convert metrics to a flat dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        with self._lock:
            data = {
                f"submodules_classified_total{{status={status.value}}}": count
                for status, count in sorted(
                    self._classified.items(), key=lambda item: item[0].value
                )
            }
            data["submodules_unset_total"] = self._unset
            data["config_read_failures_total"] = self._config_read_failures
            return data
