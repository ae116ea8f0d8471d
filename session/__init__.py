"""Upload session: file selection, conversion requests and PDF artifacts."""

from session.artifacts import Artifact
from session.client import ConverterClient
from session.controller import UploadSessionController
from session.models import ConversionStats, FileEntry, SubmissionState, SubmissionStatus

__all__ = [
    "Artifact",
    "ConversionStats",
    "ConverterClient",
    "FileEntry",
    "SubmissionState",
    "SubmissionStatus",
    "UploadSessionController",
]
