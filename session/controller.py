"""
Upload session controller.

Owns the selected files, the submission state and the converted artifact, and
is the only place where any of them change. Every user action mutates state
synchronously; the single awaited POST inside submit() is the only suspension
point.
"""

import asyncio
import uuid
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

from common.constants import DEFAULT_ARTIFACT_FILENAME
from common.logging_config import get_logger
from session.artifacts import Artifact
from session.client import ConverterClient
from session.exceptions import EmptySelectionError, NoArtifactError, TransportError
from session.models import FileEntry, SubmissionState

logger = get_logger(__name__)

Listener = Callable[['UploadSessionController'], None]


class UploadSessionController:
    """State container and request orchestration for one conversion session."""

    def __init__(
        self,
        client: ConverterClient,
        artifact_filename: str = DEFAULT_ARTIFACT_FILENAME,
        scratch_dir: Optional[str] = None,
    ):
        """
        Initialize the controller in the Idle state with an empty selection.

        Args:
            client: Converter client used for submissions
            artifact_filename: Conventional filename for converted PDFs
            scratch_dir: Directory for artifact scratch files (system temp dir if None)
        """
        self.client = client
        self.artifact_filename = artifact_filename
        self.scratch_dir = scratch_dir
        self._files: List[FileEntry] = []
        self._state = SubmissionState.idle()
        self._generation = 0
        self._listeners: List[Listener] = []

    @property
    def files(self) -> Tuple[FileEntry, ...]:
        """Current selection, in order."""
        return tuple(self._files)

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def artifact(self) -> Optional[Artifact]:
        return self._state.artifact

    def subscribe(self, listener: Listener) -> None:
        """Register a callback invoked after every selection or state change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                logger.error(f"Session listener failed: {e}", exc_info=True)

    def _set_state(self, state: SubmissionState) -> None:
        if state.status is not self._state.status:
            logger.debug(f"Submission state: {self._state.status.name} -> {state.status.name}")
        self._state = state

    def _release_artifact(self) -> None:
        """Release the current artifact's resource, if any."""
        artifact = self._state.artifact
        if artifact is not None:
            artifact.release()

    def select_files(self, raw_files: Iterable) -> Tuple[FileEntry, ...]:
        """
        Replace the selection with the given files, in the given order.

        No file is rejected here; the conversion service decides what it can
        use. A finished submission is reset to Idle and its artifact released.

        Args:
            raw_files: Paths or FileEntry objects from the file picker

        Returns:
            The new selection
        """
        entries = [
            raw if isinstance(raw, FileEntry) else FileEntry.from_path(raw)
            for raw in raw_files
        ]
        logger.info(f"File selection: accepting all {len(entries)} file(s)")
        for entry in entries:
            logger.debug(f"Selected {entry.name} ({entry.size} bytes)")

        self._files = entries
        self._release_artifact()
        if self._state.is_succeeded or self._state.is_failed:
            self._set_state(SubmissionState.idle())
        self._notify()
        return self.files

    def remove_file(self, index: int) -> bool:
        """
        Remove the entry at a zero-based position.

        Out-of-range positions, negative ones included, are ignored.

        Returns:
            True if an entry was removed
        """
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self._files):
            logger.warning(f"Ignoring removal of index {index!r} (selection has {len(self._files)} file(s))")
            return False

        removed = self._files.pop(index)
        logger.debug(f"Removed {removed.name} at index {index}")
        self._notify()
        return True

    async def submit(self) -> SubmissionState:
        """
        Convert the current selection with a single request to the service.

        Returns:
            The terminal state of this submission (Succeeded or Failed)

        Raises:
            EmptySelectionError: If no files are selected; nothing is sent
        """
        if not self._files:
            logger.warning("Submit rejected: no files selected")
            raise EmptySelectionError()

        entries = tuple(self._files)
        self._release_artifact()
        self._generation += 1
        generation = self._generation
        request_id = str(uuid.uuid4())

        self._set_state(SubmissionState.submitting())
        logger.info(f"Starting upload of {len(entries)} file(s) [request_id={request_id}]")
        self._notify()

        try:
            outcome = await self._convert(entries, request_id)
        except asyncio.CancelledError:
            if generation == self._generation:
                self._set_state(SubmissionState.failed("Conversion was interrupted."))
                self._notify()
            raise

        if generation != self._generation:
            # A newer submission (or teardown) superseded this one.
            logger.info(f"Discarding superseded result [request_id={request_id}]")
            if outcome.artifact is not None:
                outcome.artifact.release()
            return outcome

        self._set_state(outcome)
        if outcome.is_succeeded:
            logger.info(f"Conversion succeeded: {outcome.artifact.size} bytes [request_id={request_id}]")
        else:
            logger.warning(f"Conversion failed: {outcome.message} [request_id={request_id}]")
        self._notify()
        return outcome

    async def _convert(self, entries: Tuple[FileEntry, ...], request_id: str) -> SubmissionState:
        """Run one request and map every outcome to a terminal state."""
        try:
            response = await self.client.post_files(entries, request_id=request_id)
        except TransportError as e:
            return SubmissionState.failed(str(e))
        except OSError as e:
            logger.error(f"Could not read selected file: {e} [request_id={request_id}]")
            return SubmissionState.failed(f"Could not read a selected file: {e}")
        except Exception as e:
            logger.error(f"Unexpected error during conversion: {e} [request_id={request_id}]", exc_info=True)
            return SubmissionState.failed(f"Unexpected error during conversion: {e}")

        if not response.is_success:
            return SubmissionState.failed(self.client.describe_error(response))

        stats = self.client.parse_stats(response.headers)
        logger.debug(
            f"Processed: {stats.processed}, Total: {stats.total}, Skipped: {stats.skipped} [request_id={request_id}]"
        )
        try:
            artifact = await asyncio.to_thread(
                Artifact,
                response.content,
                filename=self.artifact_filename,
                stats=stats,
                scratch_dir=self.scratch_dir,
            )
        except OSError as e:
            logger.error(f"Could not store converted PDF: {e} [request_id={request_id}]")
            return SubmissionState.failed(f"Could not store the converted PDF: {e}")
        return SubmissionState.succeeded(artifact)

    def save_artifact(self, destination=None) -> Path:
        """
        Save the converted PDF under its conventional filename.

        Args:
            destination: None for the current directory, an existing directory,
                or an explicit file path

        Returns:
            Path the PDF was written to

        Raises:
            NoArtifactError: If the last submission did not succeed
        """
        artifact = self._state.artifact
        if artifact is None:
            raise NoArtifactError("No PDF available. Run 'convert' first.")
        return artifact.save(destination)

    def close(self) -> None:
        """Release the current artifact and discard any in-flight result."""
        self._generation += 1
        self._release_artifact()
        if not self._state.is_idle:
            self._set_state(SubmissionState.idle())
        logger.debug("Upload session closed")

    async def aclose(self) -> None:
        """Close the session and the underlying HTTP client."""
        self.close()
        await self.client.aclose()

    async def __aenter__(self) -> 'UploadSessionController':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
