"""Utility functions for CLI operations."""

import glob
from pathlib import Path
from typing import Sequence

from session.models import FileEntry


def pick_files(patterns: Sequence[str]) -> tuple[list[Path], list[str]]:
    """
    Resolve user-supplied paths the way a file picker would.

    An argument naming an existing file is taken literally, even when it
    contains glob characters. Otherwise glob patterns are expanded in sorted
    order. Every existing regular file is picked regardless of name,
    extension or type.

    Args:
        patterns: Paths or glob patterns as typed by the user

    Returns:
        Tuple of (picked_file_paths, error_messages)
    """
    picked: list[Path] = []
    errors: list[str] = []

    for pattern in patterns:
        expanded = str(Path(pattern).expanduser())
        if Path(expanded).is_file():
            picked.append(Path(expanded))
            continue

        if any(c in expanded for c in "*?["):
            matches = [Path(m) for m in sorted(glob.glob(expanded)) if Path(m).is_file()]
            if not matches:
                errors.append(f"No files match: {pattern}")
            picked.extend(matches)
            continue

        path = Path(expanded)
        if not path.exists():
            errors.append(f"File not found: {pattern}")
        elif not path.is_file():
            errors.append(f"Not a file: {pattern}")
        else:
            picked.append(path)

    return picked, errors


def format_selection(entries: Sequence[FileEntry]) -> str:
    """
    Format the selection as an indexed listing.

    Args:
        entries: Selected files

    Returns:
        One line per file with its position, name and size
    """
    if not entries:
        return "No files selected."

    lines = [f"Selected files ({len(entries)}):"]
    for index, entry in enumerate(entries):
        lines.append(f"  [{index}] {entry.name} ({format_file_size(entry.size)})")
    return '\n'.join(lines)


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in bytes to human-readable format with appropriate unit.

    Uses binary units (1024-based) and automatically selects the most
    appropriate unit (B, KiB, MiB, GiB, TiB).

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string with size and unit (e.g., "1.50 MiB", "512 B")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    units = ['KiB', 'MiB', 'GiB', 'TiB']
    size = size_bytes / 1024.0

    for unit in units:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0

    return f"{size:.2f} PiB"
