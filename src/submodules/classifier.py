"""Status classification for submodule status lines."""

import structlog

from src.submodules.config_provider import ConfigTextProvider, FileConfigProvider
from src.submodules.metrics import ClassificationMetrics
from src.submodules.models import (
    CONFIG_NOT_FOUND_MESSAGE,
    StatusCode,
    StatusResult,
    SubmoduleRecord,
)
from src.submodules.parser import marker_of, parse_line


logger = structlog.get_logger()

# Marker characters that map directly to a status
MARKER_STATUS_MAP: dict[str, StatusCode] = {
    " ": StatusCode.CURRENT,
    "U": StatusCode.MERGE_CONFLICT,
    "+": StatusCode.NOT_CURRENT,
}

# Marker that needs a config lookup to tell initialized from not initialized
REGISTRATION_MARKER = "-"


def submodule_section_header(name: str | None) -> str:
    """Return the config section header registering a submodule.

    Args:
        name: Submodule name.

    Returns:
        Header of the form ``[submodule "<name>"]``.
    """
    return f'[submodule "{name or ""}"]'


def check_registration(
    repo_root: str | None,
    name: str | None,
    provider: ConfigTextProvider,
    metrics: ClassificationMetrics | None = None,
) -> StatusResult | None:
    """Determine whether a submodule is registered in the git config.

    Args:
        repo_root: Repository root path.
        name: Submodule name.
        provider: Source of the config text.
        metrics: Metrics collector; the shared instance by default.

    Returns:
        INITIALIZED or NOT_INITIALIZED depending on the config content,
        UNKNOWN if the config is missing or unreadable, or None when no
        repository root was given.
    """
    if not repo_root:
        return None
    if metrics is None:
        metrics = ClassificationMetrics.get_instance()

    try:
        content = provider.read_config(repo_root)
    except OSError as e:
        logger.warning(
            "config_read_failed",
            component="submodules",
            repo_root=repo_root,
            error=str(e),
            error_type=type(e).__name__,
        )
        metrics.record_config_read_failure()
        return StatusResult(
            status=StatusCode.UNKNOWN, message=str(e) or type(e).__name__
        )

    if content is None:
        return StatusResult(
            status=StatusCode.UNKNOWN, message=CONFIG_NOT_FOUND_MESSAGE
        )

    if submodule_section_header(name) in content:
        return StatusResult.of(StatusCode.INITIALIZED)
    return StatusResult.of(StatusCode.NOT_INITIALIZED)


class StatusClassifier:
    """Classifies raw submodule status lines.

    Dispatches on the first character of the raw line:
    - ``' '``: CURRENT
    - ``'U'``: MERGE_CONFLICT
    - ``'+'``: NOT_CURRENT
    - ``'-'``: registration check against the git config
    - anything else: UNKNOWN
    """

    def __init__(self, provider: ConfigTextProvider | None = None) -> None:
        """Initialize the classifier.

        Args:
            provider: Source of git config text. Defaults to the filesystem.
        """
        self._provider = provider or FileConfigProvider()
        self._metrics = ClassificationMetrics.get_instance()
        self._log = logger.bind(component="submodules")

    def classify(
        self,
        line: str | None,
        repo_root: str | None,
        name: str | None,
    ) -> StatusResult | None:
        """Classify one raw status line.

        Args:
            line: Raw, untrimmed status line.
            repo_root: Repository root, used only for the ``-`` marker.
            name: Parsed submodule name, used only for the ``-`` marker.

        Returns:
            The classification, or None when the line is empty or the
            registration check had no repository root to look in.
        """
        if not line:
            return None

        marker = marker_of(line)
        if marker == REGISTRATION_MARKER:
            result = check_registration(repo_root, name, self._provider, self._metrics)
        else:
            result = StatusResult.of(MARKER_STATUS_MAP.get(marker, StatusCode.UNKNOWN))

        if result is None:
            self._metrics.record_unset()
            self._log.debug("submodule_status_unset", name=name, marker=marker)
            return None

        self._metrics.record_classified(result.status)
        self._log.debug(
            "submodule_classified",
            name=name,
            marker=marker,
            status=result.status.value,
        )
        return result

    def build_record(self, line: str | None, repo_root: str | None) -> SubmoduleRecord:
        """Parse and classify one raw status line.

        Args:
            line: Raw status line.
            repo_root: Repository root path.

        Returns:
            SubmoduleRecord; every field is None for an empty line.
        """
        parsed = parse_line(line)
        if parsed.is_empty:
            return SubmoduleRecord()
        return SubmoduleRecord.from_parts(
            parsed, self.classify(line, repo_root, parsed.name)
        )

    def reclassify(
        self,
        record: SubmoduleRecord,
        line: str | None,
        repo_root: str | None,
    ) -> SubmoduleRecord:
        """Recompute the status of an existing record.

        Args:
            record: Previously built record.
            line: Raw status line the record came from.
            repo_root: Repository root path.

        Returns:
            A new record with a fresh status pair. The record is returned
            unchanged when the classification is indeterminate.
        """
        result = self.classify(line, repo_root, record.name)
        if result is None:
            return record
        return record.with_status(result)
