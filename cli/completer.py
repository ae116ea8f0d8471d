"""Custom completer for SnapMerge CLI with path and index autocompletion."""

from pathlib import Path
from typing import Callable, Iterable, Optional

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from cli.constants import COMMANDS
from session.controller import UploadSessionController


class SnapMergeCompleter(Completer):
    """
    Custom completer that provides:
    - Command name completion for the first token
    - Local path completion for the 'select' command (any file type)
    - Selection index completion for the 'remove' command
    """

    def __init__(self, get_controller: Optional[Callable[[], UploadSessionController]] = None):
        """
        Args:
            get_controller: Returns the session controller used for 'remove' indices
        """
        self.get_controller = get_controller

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions based on cursor position and context.
        """
        text = document.text_before_cursor
        tokens = text.split()

        is_typing_new_token = text.endswith(" ") or not tokens

        if not tokens or (len(tokens) == 1 and not is_typing_new_token):
            yield from self._complete_commands(tokens[0] if tokens else "")
            return

        command = tokens[0].lower()
        current_word = "" if is_typing_new_token else tokens[-1]

        if command == "select":
            yield from self._complete_paths(current_word)
        elif command == "remove" and len(tokens) - (0 if is_typing_new_token else 1) == 1:
            yield from self._complete_indices(current_word)

    def _complete_commands(self, partial: str) -> Iterable[Completion]:
        """Complete command names matching the partial input."""
        partial_lower = partial.lower()
        for cmd in COMMANDS:
            if cmd.startswith(partial_lower):
                yield Completion(cmd, start_position=-len(partial))

    def _complete_paths(self, partial: str) -> Iterable[Completion]:
        """
        Complete file and directory paths relative to the current directory.

        Directories are suggested with a trailing slash so completion can
        continue into them; hidden entries only appear once '.' is typed.
        """
        head, sep, name_part = partial.rpartition("/")
        directory_part = head + sep

        base = Path(directory_part).expanduser() if directory_part else Path.cwd()
        if not base.is_dir():
            return

        try:
            entries = sorted(base.iterdir(), key=lambda p: p.name.lower())
        except OSError:
            return

        for entry in entries:
            if entry.name.startswith(".") and not name_part.startswith("."):
                continue
            if not entry.name.startswith(name_part):
                continue
            suffix = "/" if entry.is_dir() else ""
            yield Completion(
                f"{directory_part}{entry.name}{suffix}",
                start_position=-len(partial),
                display=f"{entry.name}{suffix}",
            )

    def _complete_indices(self, partial: str) -> Iterable[Completion]:
        """Complete positions of currently selected files."""
        if self.get_controller is None:
            return

        for index, entry in enumerate(self.get_controller().files):
            text = str(index)
            if text.startswith(partial):
                yield Completion(text, start_position=-len(partial), display_meta=entry.name)
