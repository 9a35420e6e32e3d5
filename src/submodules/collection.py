"""Build submodule entries from full status command output."""

from collections import Counter

import structlog

from src.submodules.classifier import StatusClassifier
from src.submodules.models import StatusCode, StatusSummary
from src.submodules.submodule import Submodule


logger = structlog.get_logger()


def parse_status_output(
    output: str,
    repo_root: str | None,
    classifier: StatusClassifier | None = None,
) -> list[Submodule]:
    """Build one entry per non-blank line of status output.

    Args:
        output: Raw multi-line output, one submodule per line.
        repo_root: Repository root path.
        classifier: Classifier to use; a filesystem-backed one by default.

    Returns:
        Entries in input order.
    """
    classifier = classifier or StatusClassifier()
    submodules = [
        Submodule.from_line(line, repo_root, classifier)
        for line in output.splitlines()
        if line.strip()
    ]
    logger.info(
        "submodule_status_parsed",
        component="submodules",
        repo_root=repo_root,
        submodules_total=len(submodules),
    )
    return submodules


def summarize(submodules: list[Submodule]) -> StatusSummary:
    """Count entries per status.

    Args:
        submodules: Entries to summarize.

    Returns:
        StatusSummary; indeterminate entries are counted as unset.
    """
    counts: Counter[StatusCode] = Counter(
        s.record.status for s in submodules if s.record.status is not None
    )
    return StatusSummary(
        total=len(submodules),
        counts=dict(counts),
        unset=sum(1 for s in submodules if s.record.status is None),
    )
