"""REPL with prompt_toolkit for user interaction."""

import os
import sys
from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from cli.commands import (
    close_controller,
    get_controller,
    handle_convert,
    handle_files,
    handle_remove,
    handle_save,
    handle_select,
    handle_status,
)
from cli.completer import SnapMergeCompleter
from cli.constants import (
    HELP_TEXT,
    LOGO,
    PROMPT_TEXT,
    STYLE,
    WELCOME_HELP,
    WELCOME_TITLE,
)
from cli.models import (
    ConvertCommand,
    FilesCommand,
    RemoveCommand,
    SaveCommand,
    SelectCommand,
    StatusCommand,
)
from cli.parser import ParseError, parse_command
from session.exceptions import SessionError


def clear_screen() -> None:
    """Clear the terminal screen (cross-platform)."""
    if sys.platform == "win32":
        os.system("cls")
    else:
        os.system("clear")


def show_logo() -> None:
    """Display SnapMerge logo with ANSI colors."""
    print(LOGO)


async def dispatch_command(cmd_obj) -> str:
    """Dispatch parsed command to appropriate handler."""
    if isinstance(cmd_obj, SelectCommand):
        return handle_select(cmd_obj)
    elif isinstance(cmd_obj, RemoveCommand):
        return handle_remove(cmd_obj)
    elif isinstance(cmd_obj, FilesCommand):
        return handle_files(cmd_obj)
    elif isinstance(cmd_obj, ConvertCommand):
        print(f"Converting {len(get_controller().files)} file(s)...")
        return await handle_convert(cmd_obj)
    elif isinstance(cmd_obj, SaveCommand):
        return handle_save(cmd_obj)
    elif isinstance(cmd_obj, StatusCommand):
        return handle_status(cmd_obj)
    else:
        return f"Unknown command type: {type(cmd_obj)}"


async def repl_loop() -> None:
    """Start interactive REPL with prompt_toolkit."""
    completer = SnapMergeCompleter(get_controller)
    history = InMemoryHistory()
    session: PromptSession = PromptSession(
        completer=completer, history=history, style=STYLE
    )

    clear_screen()
    show_logo()
    print(WELCOME_TITLE)
    print(WELCOME_HELP)

    try:
        while True:
            try:
                user_input = await session.prompt_async([("class:prompt", PROMPT_TEXT)])

                if not user_input.strip():
                    continue

                if user_input.strip() == "exit":
                    print("Goodbye!")
                    break

                if user_input.strip() == "help":
                    print(HELP_TEXT)
                    continue

                if user_input.strip() == "clear":
                    clear_screen()
                    show_logo()
                    print(WELCOME_TITLE)
                    print(WELCOME_HELP)
                    continue

                cmd_obj = parse_command(user_input)
                result = await dispatch_command(cmd_obj)
                print(result)

            except (ParseError, SessionError) as e:
                print(f"Error: {e}")
            except KeyboardInterrupt:
                continue
            except EOFError:
                print("\nGoodbye!")
                break
    finally:
        await close_controller()
