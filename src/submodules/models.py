"""Models for submodule status classification."""

from enum import Enum
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class StatusCode(str, Enum):
    """Canonical submodule status.

    Derived from the marker character of a status line and, for the
    ``-`` marker, from the repository's config file.
    """

    UNKNOWN = "UNKNOWN"
    NOT_INITIALIZED = "NOT_INITIALIZED"
    INITIALIZED = "INITIALIZED"
    MERGE_CONFLICT = "MERGE_CONFLICT"
    CURRENT = "CURRENT"
    NOT_CURRENT = "NOT_CURRENT"


class HealthCode(str, Enum):
    """Out-of-band health signal, independent of StatusCode."""

    UNKNOWN = "UNKNOWN"
    OKAY = "OKAY"
    WARNING = "WARNING"
    ERROR = "ERROR"


# Mapping from status code to human-readable text
STATUS_MESSAGE_MAP: dict[StatusCode, str] = {
    StatusCode.UNKNOWN: "Submodule status is unknown",
    StatusCode.NOT_INITIALIZED: "Submodule is not initialized",
    StatusCode.INITIALIZED: "Submodule is initialized",
    StatusCode.MERGE_CONFLICT: "Submodule has merge conflicts",
    StatusCode.CURRENT: "Submodule is current",
    StatusCode.NOT_CURRENT: "Submodule is not current",
}

CONFIG_NOT_FOUND_MESSAGE = "Git config file not found"


class StatusResult(BaseModel):
    """A status code paired with its message."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    status: StatusCode
    message: Annotated[str, Field(min_length=1)]

    @classmethod
    def of(cls, status: StatusCode) -> "StatusResult":
        """Build a result carrying the canonical message for a status.

        Args:
            status: Status code.

        Returns:
            StatusResult with the message from STATUS_MESSAGE_MAP.
        """
        return cls(status=status, message=STATUS_MESSAGE_MAP[status])


class ParsedLine(BaseModel):
    """Fields extracted from one raw status line.

    All fields are ``None`` when the line was empty.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    object_id: str | None = None
    name: str | None = None
    reference: str | None = None

    @property
    def is_empty(self) -> bool:
        """True when no field was parsed."""
        return self.object_id is None and self.name is None and self.reference is None


class SubmoduleRecord(BaseModel):
    """Result of processing one raw status line.

    Attributes:
        object_id: Object identifier with marker characters stripped.
        name: Submodule display name.
        reference: Descriptive ref without surrounding parentheses.
        status: Classified status; ``None`` when indeterminate.
        status_message: Message paired with ``status``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    object_id: str | None = None
    name: str | None = None
    reference: str | None = None
    status: StatusCode | None = None
    status_message: str | None = None

    @model_validator(mode="after")
    def _check_status_pair(self) -> Self:
        if (self.status is None) != (self.status_message is None):
            raise ValueError("status and status_message must be set together")
        if self.status_message == "":
            raise ValueError("status_message must not be empty")
        return self

    @classmethod
    def from_parts(
        cls, parsed: ParsedLine, result: StatusResult | None
    ) -> "SubmoduleRecord":
        """Combine parsed fields with a classification result.

        Args:
            parsed: Parsed line fields.
            result: Classification result, or None when indeterminate.

        Returns:
            New SubmoduleRecord.
        """
        return cls(
            object_id=parsed.object_id,
            name=parsed.name,
            reference=parsed.reference,
            status=result.status if result else None,
            status_message=result.message if result else None,
        )

    def with_status(self, result: StatusResult | None) -> "SubmoduleRecord":
        """Return a copy with the status pair replaced.

        Args:
            result: New classification result, or None to clear it.

        Returns:
            New SubmoduleRecord; this record is left untouched.
        """
        return self.model_copy(
            update={
                "status": result.status if result else None,
                "status_message": result.message if result else None,
            }
        )


class StatusSummary(BaseModel):
    """Counts of submodule entries per status."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    total: Annotated[int, Field(ge=0)]
    counts: dict[StatusCode, int]
    unset: Annotated[int, Field(ge=0)] = 0

    def count(self, status: StatusCode) -> int:
        """Number of entries with the given status."""
        return self.counts.get(status, 0)
