"""Command parser for CLI input."""

import shlex

from cli.models import (
    CommandRequest,
    ConvertCommand,
    FilesCommand,
    RemoveCommand,
    SaveCommand,
    SelectCommand,
    StatusCommand,
)


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        CommandRequest object (one of Select/Remove/Files/Convert/Save/Status)

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0]

    if command_name == "select":
        return _parse_select(tokens[1:])
    elif command_name == "remove":
        return _parse_remove(tokens[1:])
    elif command_name == "files":
        return _parse_no_args(command_name, tokens[1:], FilesCommand)
    elif command_name == "convert":
        return _parse_no_args(command_name, tokens[1:], ConvertCommand)
    elif command_name == "save":
        return _parse_save(tokens[1:])
    elif command_name == "status":
        return _parse_no_args(command_name, tokens[1:], StatusCommand)
    else:
        raise ParseError(f"Unknown command: {command_name}")


def _parse_select(args: list[str]) -> SelectCommand:
    """Parse 'select <path...>' command. An empty selection is allowed."""
    return SelectCommand(paths=tuple(args))


def _parse_remove(args: list[str]) -> RemoveCommand:
    """Parse 'remove <index>' command."""
    if len(args) != 1:
        raise ParseError("remove requires exactly 1 argument: <index>")

    try:
        index = int(args[0])
    except ValueError:
        raise ParseError(f"remove index must be a number, got '{args[0]}'")

    return RemoveCommand(index=index)


def _parse_save(args: list[str]) -> SaveCommand:
    """Parse 'save [output_path]' command."""
    if len(args) > 1:
        raise ParseError("save accepts at most 1 argument: [output_path]")

    return SaveCommand(output_path=args[0] if args else None)


def _parse_no_args(name: str, args: list[str], command_cls):
    if args:
        raise ParseError(f"{name} takes no arguments")
    return command_cls()
