"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class SelectCommand:
    """Replace the selection with the given paths."""

    paths: tuple[str, ...]
    command: Literal["select"] = "select"


@dataclass(frozen=True)
class RemoveCommand:
    """Remove the selected file at a position."""

    index: int
    command: Literal["remove"] = "remove"


@dataclass(frozen=True)
class FilesCommand:
    """List selected files."""

    command: Literal["files"] = "files"


@dataclass(frozen=True)
class ConvertCommand:
    """Submit the selection for conversion."""

    command: Literal["convert"] = "convert"


@dataclass(frozen=True)
class SaveCommand:
    """Save the converted PDF."""

    output_path: str | None = None
    command: Literal["save"] = "save"


@dataclass(frozen=True)
class StatusCommand:
    """Show the submission status."""

    command: Literal["status"] = "status"


CommandRequest = (
    SelectCommand
    | RemoveCommand
    | FilesCommand
    | ConvertCommand
    | SaveCommand
    | StatusCommand
)
