"""Tests for CLI utility functions."""

import pytest

from cli.utils import format_file_size, format_selection, pick_files
from session.models import FileEntry


@pytest.mark.parametrize('size, expected', [
    (0, '0 B'),
    (512, '512 B'),
    (1024, '1.00 KiB'),
    (1536, '1.50 KiB'),
    (int(1.2 * 1024 * 1024), '1.20 MiB'),
    (3 * 1024 ** 3, '3.00 GiB'),
])
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected


def test_pick_files_keeps_given_order(multiple_sample_files):
    reordered = [multiple_sample_files[2], multiple_sample_files[0]]

    picked, errors = pick_files([str(p) for p in reordered])

    assert picked == reordered
    assert errors == []


def test_pick_files_reports_missing_and_directories(tmp_path, sample_file):
    picked, errors = pick_files([str(tmp_path / 'nope.png'), str(tmp_path), str(sample_file)])

    assert picked == [sample_file]
    assert errors == [
        f"File not found: {tmp_path / 'nope.png'}",
        f"Not a file: {tmp_path}",
    ]


def test_pick_files_glob_skips_directories(tmp_path, multiple_sample_files):
    (tmp_path / 'subdir').mkdir()

    picked, errors = pick_files([str(tmp_path / '*')])

    assert [p.name for p in picked] == ['letter.pdf', 'notes.txt', 'scan1.png']
    assert errors == []


def test_pick_files_glob_without_matches(tmp_path):
    picked, errors = pick_files([str(tmp_path / '*.tiff')])

    assert picked == []
    assert errors == [f"No files match: {tmp_path / '*.tiff'}"]


def test_pick_files_takes_bracketed_name_literally(tmp_path):
    """A file whose name looks like a glob is picked as-is, not as a pattern."""
    literal = tmp_path / 'scan[1].png'
    literal.write_bytes(b'literal')
    (tmp_path / 'scan1.png').write_bytes(b'lookalike')

    picked, errors = pick_files([str(literal)])

    assert picked == [literal]
    assert errors == []


def test_pick_files_wildcard_name_without_lookalike(tmp_path):
    literal = tmp_path / 'photo?.jpg'
    literal.write_bytes(b'x')

    picked, errors = pick_files([str(literal)])

    assert picked == [literal]
    assert errors == []


def test_pick_files_allows_duplicates(sample_file):
    picked, _ = pick_files([str(sample_file), str(sample_file)])

    assert picked == [sample_file, sample_file]


def test_format_selection_empty():
    assert format_selection(()) == 'No files selected.'


def test_format_selection_duplicate_names():
    entries = (FileEntry.from_bytes('scan.png', b'1'), FileEntry.from_bytes('scan.png', b'22'))

    assert format_selection(entries).splitlines() == [
        'Selected files (2):',
        '  [0] scan.png (1 B)',
        '  [1] scan.png (2 B)',
    ]
