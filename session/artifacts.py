"""
Converted PDF artifacts and the lifecycle of their downloadable resource.

An Artifact keeps the PDF bytes in memory and materializes them once into a
scratch file, exposed as a ``file://`` URI. The scratch file must be released
when the artifact is superseded so repeated conversions do not accumulate
files on disk.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional

from common.constants import DEFAULT_ARTIFACT_FILENAME
from common.logging_config import get_logger
from session.exceptions import ArtifactReleasedError
from session.models import ConversionStats

logger = get_logger(__name__)


class Artifact:
    """A successful conversion result plus its downloadable resource."""

    def __init__(
        self,
        content: bytes,
        filename: str = DEFAULT_ARTIFACT_FILENAME,
        stats: Optional[ConversionStats] = None,
        scratch_dir: Optional[str] = None,
    ):
        """
        Initialize the artifact and materialize its resource.

        Args:
            content: Full PDF body returned by the service
            filename: Suggested filename for downloads
            stats: Informational counts reported by the service
            scratch_dir: Directory for the scratch file (system temp dir if None)
        """
        self.content = bytes(content)
        self.filename = filename
        self.stats = stats or ConversionStats()
        self._path: Optional[Path] = self._materialize(scratch_dir)
        logger.debug(f"Materialized artifact {self.filename} ({self.size} bytes) at {self._path}")

    def _materialize(self, scratch_dir: Optional[str]) -> Path:
        if scratch_dir:
            Path(scratch_dir).mkdir(parents=True, exist_ok=True)
        fd, path = tempfile.mkstemp(prefix="snapmerge-", suffix=".pdf", dir=scratch_dir)
        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(self.content)
        except OSError:
            os.unlink(path)
            raise
        return Path(path)

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def released(self) -> bool:
        return self._path is None

    @property
    def path(self) -> Optional[Path]:
        """Scratch file backing the download, or None once released."""
        return self._path

    @property
    def url(self) -> Optional[str]:
        """Download URI, or None once released."""
        if self._path is None:
            return None
        return self._path.resolve().as_uri()

    def release(self) -> None:
        """Delete the scratch file. Safe to call more than once."""
        if self._path is None:
            return
        path, self._path = self._path, None
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Could not remove artifact file {path}: {e}")
        logger.debug(f"Released artifact {self.filename}")

    def save(self, destination=None) -> Path:
        """
        Save the PDF under its conventional filename.

        Args:
            destination: None for the current directory, an existing directory,
                or an explicit file path

        Returns:
            Path the PDF was written to

        Raises:
            ArtifactReleasedError: If the artifact was already superseded
        """
        if self.released:
            raise ArtifactReleasedError(
                "This PDF is no longer available. Convert the files again to download it."
            )

        if destination is None:
            target = Path.cwd() / self.filename
        else:
            target = Path(destination).expanduser()
            if target.is_dir():
                target = target / self.filename

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(self.content)
        logger.info(f"Saved {self.filename} ({self.size} bytes) to {target}")
        return target

    def __repr__(self) -> str:
        state = "released" if self.released else str(self._path)
        return f"Artifact(filename={self.filename!r}, size={self.size}, resource={state})"
