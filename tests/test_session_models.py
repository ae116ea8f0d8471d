"""Tests for session data types."""

import pytest

from session.models import ConversionStats, FileEntry, SubmissionState, SubmissionStatus


def test_file_entry_from_path_does_not_read_content(tmp_path):
    path = tmp_path / 'scan.png'
    path.write_bytes(b'before')

    entry = FileEntry.from_path(path)
    path.write_bytes(b'after!')

    assert entry.name == 'scan.png'
    assert entry.size == 6
    assert entry.read() == b'after!'


def test_file_entry_from_path_accepts_strings(sample_file):
    entry = FileEntry.from_path(str(sample_file))

    assert entry.name == 'photo.png'
    assert entry.size == sample_file.stat().st_size


def test_file_entry_from_bytes():
    entry = FileEntry.from_bytes('empty.bin', b'')

    assert entry.size == 0
    assert entry.read() == b''


def test_file_entry_rejects_negative_size():
    with pytest.raises(ValueError):
        FileEntry(name='x', size=-1, reader=lambda: b'')


def test_file_entry_is_immutable():
    entry = FileEntry.from_bytes('a.png', b'x')

    with pytest.raises(AttributeError):
        entry.name = 'b.png'


def test_submission_state_constructors():
    assert SubmissionState.idle().status is SubmissionStatus.IDLE
    assert SubmissionState.submitting().is_submitting
    failed = SubmissionState.failed('nope')
    assert failed.is_failed
    assert failed.message == 'nope'
    assert failed.artifact is None


class TestConversionStats:
    """Parsing informational counts from headers."""

    HEADERS = ('X-Processed-Images', 'X-Total-Files', 'X-Skipped-Files')

    def test_from_headers(self):
        stats = ConversionStats.from_headers(
            {'X-Processed-Images': '4', 'X-Total-Files': '6', 'X-Skipped-Files': '2'},
            *self.HEADERS,
        )

        assert stats == ConversionStats(processed=4, total=6, skipped=2)
        assert stats.summary() == 'Processed: 4 images\nTotal files sent: 6\nSkipped: 2 files'

    def test_non_numeric_values_are_absent(self):
        stats = ConversionStats.from_headers(
            {'X-Processed-Images': 'many', 'X-Total-Files': '-1', 'X-Skipped-Files': ''},
            *self.HEADERS,
        )

        assert stats == ConversionStats()
        assert not stats.is_reported

    def test_summary_without_skipped_count(self):
        stats = ConversionStats(processed=2, total=2)

        assert stats.summary().endswith('Skipped: 0 files')
