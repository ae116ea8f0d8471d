"""Command handler functions for CLI operations."""

from pathlib import Path
from typing import Optional

from common.logging_config import get_logger
from cli.config import Config
from cli.models import (
    ConvertCommand,
    FilesCommand,
    RemoveCommand,
    SaveCommand,
    SelectCommand,
    StatusCommand,
)
from cli.utils import format_file_size, format_selection, pick_files
from session.client import ConverterClient
from session.controller import UploadSessionController
from session.exceptions import ArtifactReleasedError, EmptySelectionError, NoArtifactError
from session.models import SubmissionStatus

logger = get_logger(__name__)


_controller: Optional[UploadSessionController] = None


def get_controller() -> UploadSessionController:
    """
    Get or create global UploadSessionController instance.

    Returns:
        UploadSessionController instance
    """
    global _controller
    if _controller is None:
        logger.debug("Creating new UploadSessionController instance")
        config = Config(Path.home() / '.snapmerge' / 'config.json')
        client = ConverterClient(config.get_base_url(), timeout=config.get_timeout())
        _controller = UploadSessionController(
            client,
            artifact_filename=config.get_artifact_filename(),
            scratch_dir=config.get_scratch_dir(),
        )
    return _controller


async def close_controller() -> None:
    """Tear down the global controller, releasing any converted PDF."""
    global _controller
    if _controller is not None:
        await _controller.aclose()
        _controller = None


def handle_select(cmd: SelectCommand, controller: Optional[UploadSessionController] = None) -> str:
    """
    Handle 'select' command.

    Args:
        cmd: SelectCommand with paths
        controller: Optional UploadSessionController for dependency injection (testing)

    Returns:
        Selection summary, including any paths that could not be picked
    """
    if controller is None:
        controller = get_controller()

    paths, errors = pick_files(cmd.paths)
    logger.info(f"Executing select command: {len(cmd.paths)} argument(s), {len(paths)} file(s) picked")
    entries = controller.select_files(paths)

    lines = [f"Error: {error}" for error in errors]
    if entries:
        lines.append(
            f"Selected {len(entries)} file(s) ready for processing. "
            f"The conversion service will attempt to process all of them."
        )
    else:
        lines.append("Selection cleared. No files selected.")
    return '\n'.join(lines)


def handle_remove(cmd: RemoveCommand, controller: Optional[UploadSessionController] = None) -> str:
    """
    Handle 'remove' command.

    Args:
        cmd: RemoveCommand with index
        controller: Optional UploadSessionController for dependency injection (testing)

    Returns:
        Success or error message
    """
    if controller is None:
        controller = get_controller()

    files = controller.files
    if not controller.remove_file(cmd.index):
        if not files:
            return "Error: No files selected."
        return f"Error: No file at index {cmd.index} (valid range: 0-{len(files) - 1})"
    return f"Removed: {files[cmd.index].name} ({len(controller.files)} file(s) remaining)"


def handle_files(cmd: FilesCommand, controller: Optional[UploadSessionController] = None) -> str:
    """
    Handle 'files' command.

    Returns:
        Indexed listing of the selection
    """
    if controller is None:
        controller = get_controller()
    return format_selection(controller.files)


async def handle_convert(cmd: ConvertCommand, controller: Optional[UploadSessionController] = None) -> str:
    """
    Handle 'convert' command.

    Args:
        cmd: ConvertCommand
        controller: Optional UploadSessionController for dependency injection (testing)

    Returns:
        Conversion result, with service-reported counts and the download location
    """
    if controller is None:
        controller = get_controller()

    logger.info(f"Executing convert command: {len(controller.files)} file(s)")
    try:
        state = await controller.submit()
    except EmptySelectionError as e:
        return f"Error: {e}"

    if state.is_failed:
        return state.message

    artifact = state.artifact
    lines = ["PDF created successfully!"]
    summary = artifact.stats.summary()
    if summary:
        lines.append(summary)
    lines.append(f"Size: {format_file_size(artifact.size)}")
    lines.append(f"Download: {artifact.url}")
    lines.append(f"Run 'save [output_path]' to save it as {artifact.filename}.")
    return '\n'.join(lines)


def handle_save(cmd: SaveCommand, controller: Optional[UploadSessionController] = None) -> str:
    """
    Handle 'save' command.

    Args:
        cmd: SaveCommand with optional output_path
        controller: Optional UploadSessionController for dependency injection (testing)

    Returns:
        Saved location or error message
    """
    if controller is None:
        controller = get_controller()

    try:
        target = controller.save_artifact(cmd.output_path)
    except (NoArtifactError, ArtifactReleasedError) as e:
        return f"Error: {e}"
    except OSError as e:
        logger.error(f"Could not save PDF to {cmd.output_path}: {e}")
        return f"Error: Could not save PDF: {e}"

    return f"Saved: {target}"


def handle_status(cmd: StatusCommand, controller: Optional[UploadSessionController] = None) -> str:
    """
    Handle 'status' command.

    Returns:
        Human-readable submission status
    """
    if controller is None:
        controller = get_controller()

    state = controller.state
    count = len(controller.files)
    if state.status is SubmissionStatus.SUBMITTING:
        return f"Converting... ({count} file(s) selected)"
    if state.status is SubmissionStatus.SUCCEEDED:
        return f"PDF ready: {state.artifact.filename} ({format_file_size(state.artifact.size)})"
    if state.status is SubmissionStatus.FAILED:
        return f"Last conversion failed: {state.message}"
    return f"Idle ({count} file(s) selected)"
