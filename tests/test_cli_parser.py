"""Tests for CLI command parser."""

import pytest

from cli.models import (
    ConvertCommand,
    FilesCommand,
    RemoveCommand,
    SaveCommand,
    SelectCommand,
    StatusCommand,
)
from cli.parser import ParseError, parse_command


def test_parse_select_multiple_paths():
    cmd = parse_command('select a.png b.pdf notes.txt')

    assert cmd == SelectCommand(paths=('a.png', 'b.pdf', 'notes.txt'))


def test_parse_select_quoted_path_with_spaces():
    cmd = parse_command('select "bank statement.pdf" passport.jpg')

    assert cmd.paths == ('bank statement.pdf', 'passport.jpg')


def test_parse_select_without_paths_clears_selection():
    assert parse_command('select') == SelectCommand(paths=())


def test_parse_remove():
    assert parse_command('remove 2') == RemoveCommand(index=2)


def test_parse_remove_negative_index_is_passed_through():
    assert parse_command('remove -1') == RemoveCommand(index=-1)


@pytest.mark.parametrize('line', ['remove', 'remove 1 2', 'remove first'])
def test_parse_remove_invalid(line):
    with pytest.raises(ParseError):
        parse_command(line)


def test_parse_save_default_and_explicit():
    assert parse_command('save') == SaveCommand(output_path=None)
    assert parse_command('save out/app.pdf') == SaveCommand(output_path='out/app.pdf')


def test_parse_save_too_many_arguments():
    with pytest.raises(ParseError, match='at most 1 argument'):
        parse_command('save a.pdf b.pdf')


@pytest.mark.parametrize('line, expected', [
    ('files', FilesCommand()),
    ('convert', ConvertCommand()),
    ('status', StatusCommand()),
])
def test_parse_commands_without_arguments(line, expected):
    assert parse_command(line) == expected


def test_parse_convert_rejects_arguments():
    with pytest.raises(ParseError, match='takes no arguments'):
        parse_command('convert now')


@pytest.mark.parametrize('line', ['', '   '])
def test_parse_empty(line):
    with pytest.raises(ParseError, match='Empty command'):
        parse_command(line)


def test_parse_unknown_command():
    with pytest.raises(ParseError, match='Unknown command'):
        parse_command('upload a.png')


def test_parse_unbalanced_quotes():
    with pytest.raises(ParseError, match='Invalid syntax'):
        parse_command('select "unterminated.png')
