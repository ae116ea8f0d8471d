"""Data types for the upload session: selected files and submission state."""

import os
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Mapping, Optional

if TYPE_CHECKING:
    from session.artifacts import Artifact


@dataclass(frozen=True)
class FileEntry:
    """One user-selected file. Content is read only when submitted."""

    name: str
    size: int
    reader: Callable[[], bytes] = field(repr=False, compare=False)

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"File size must be non-negative, got {self.size}")

    @classmethod
    def from_path(cls, path) -> 'FileEntry':
        """
        Create an entry for a file on disk without reading it.

        Args:
            path: Path to an existing file

        Returns:
            FileEntry named after the file's basename
        """
        file_path = Path(path)
        size = os.path.getsize(file_path)
        return cls(name=file_path.name, size=size, reader=file_path.read_bytes)

    @classmethod
    def from_bytes(cls, name: str, data: bytes) -> 'FileEntry':
        """Create an entry backed by in-memory content."""
        data = bytes(data)
        return cls(name=name, size=len(data), reader=lambda: data)

    def read(self) -> bytes:
        """Read the full file content."""
        return self.reader()


class SubmissionStatus(Enum):
    """Lifecycle of a conversion request."""

    IDLE = auto()  # nothing submitted since the last selection
    SUBMITTING = auto()  # request in flight
    SUCCEEDED = auto()  # artifact available
    FAILED = auto()  # message available


@dataclass(frozen=True)
class SubmissionState:
    """Exactly one submission status, with its artifact or failure message."""

    status: SubmissionStatus
    artifact: Optional['Artifact'] = None
    message: Optional[str] = None

    @classmethod
    def idle(cls) -> 'SubmissionState':
        return cls(SubmissionStatus.IDLE)

    @classmethod
    def submitting(cls) -> 'SubmissionState':
        return cls(SubmissionStatus.SUBMITTING)

    @classmethod
    def succeeded(cls, artifact: 'Artifact') -> 'SubmissionState':
        return cls(SubmissionStatus.SUCCEEDED, artifact=artifact)

    @classmethod
    def failed(cls, message: str) -> 'SubmissionState':
        return cls(SubmissionStatus.FAILED, message=message)

    @property
    def is_idle(self) -> bool:
        return self.status is SubmissionStatus.IDLE

    @property
    def is_submitting(self) -> bool:
        return self.status is SubmissionStatus.SUBMITTING

    @property
    def is_succeeded(self) -> bool:
        return self.status is SubmissionStatus.SUCCEEDED

    @property
    def is_failed(self) -> bool:
        return self.status is SubmissionStatus.FAILED


def _parse_count(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        count = int(value.strip())
    except ValueError:
        return None
    return count if count >= 0 else None


@dataclass(frozen=True)
class ConversionStats:
    """Informational file counts reported by the conversion service."""

    processed: Optional[int] = None
    total: Optional[int] = None
    skipped: Optional[int] = None

    @classmethod
    def from_headers(
        cls,
        headers: Mapping[str, str],
        processed_header: str,
        total_header: str,
        skipped_header: str,
    ) -> 'ConversionStats':
        """
        Parse counts from response headers.

        Missing or non-numeric values are treated as absent.
        """
        return cls(
            processed=_parse_count(headers.get(processed_header)),
            total=_parse_count(headers.get(total_header)),
            skipped=_parse_count(headers.get(skipped_header)),
        )

    @property
    def is_reported(self) -> bool:
        return self.processed is not None and self.total is not None

    def summary(self) -> Optional[str]:
        """Return advisory text, or None if the service reported no counts."""
        if not self.is_reported:
            return None
        return (
            f"Processed: {self.processed} images\n"
            f"Total files sent: {self.total}\n"
            f"Skipped: {self.skipped or 0} files"
        )
