"""Submodule status parsing and classification.

This module provides:
- StatusCode and HealthCode enums
- parse_line for splitting one status line into fields
- StatusClassifier for mapping marker characters to statuses
- ConfigTextProvider implementations for the registration check
- HealthCell for out-of-band health signaling
- Submodule entries and parse_status_output for whole outputs
"""

from src.submodules.classifier import (
    StatusClassifier,
    check_registration,
    submodule_section_header,
)
from src.submodules.collection import parse_status_output, summarize
from src.submodules.config_provider import (
    ConfigTextProvider,
    FileConfigProvider,
    InMemoryConfigProvider,
    config_path_for,
)
from src.submodules.health import HealthCell
from src.submodules.metrics import ClassificationMetrics
from src.submodules.models import (
    STATUS_MESSAGE_MAP,
    HealthCode,
    ParsedLine,
    StatusCode,
    StatusResult,
    StatusSummary,
    SubmoduleRecord,
)
from src.submodules.parser import PLACEHOLDER, marker_of, parse_line
from src.submodules.submodule import Submodule


__all__ = [
    "PLACEHOLDER",
    "STATUS_MESSAGE_MAP",
    "ClassificationMetrics",
    "ConfigTextProvider",
    "FileConfigProvider",
    "HealthCell",
    "HealthCode",
    "InMemoryConfigProvider",
    "ParsedLine",
    "StatusClassifier",
    "StatusCode",
    "StatusResult",
    "StatusSummary",
    "Submodule",
    "SubmoduleRecord",
    "check_registration",
    "config_path_for",
    "marker_of",
    "parse_line",
    "parse_status_output",
    "submodule_section_header",
    "summarize",
]
