"""Configuration management for the SnapMerge CLI."""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from common.constants import (
    DEFAULT_ARTIFACT_FILENAME,
    DEFAULT_CONVERTER_HOST,
    DEFAULT_CONVERTER_PORT,
)
from common.logging_config import get_logger

logger = get_logger(__name__)


class Config:
    """Manages CLI configuration stored in JSON file."""

    DEFAULT_CONFIG = {
        "converter_host": os.environ.get("SNAPMERGE_CONVERTER_HOST", DEFAULT_CONVERTER_HOST),
        "converter_port": int(os.environ.get("SNAPMERGE_CONVERTER_PORT", str(DEFAULT_CONVERTER_PORT))),
        "timeout": None,
        "artifact_filename": DEFAULT_ARTIFACT_FILENAME,
        "scratch_dir": None,
    }

    def __init__(self, config_path: Path):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (typically ~/.snapmerge/config.json)
        """
        self.config_path = config_path
        self.data = self._load()

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            self.config_path = Path(tempfile.gettempdir()) / '.snapmerge' / 'config.json'
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("config root must be an object")
                config = self.DEFAULT_CONFIG.copy()
                config.update(data)
                return config
            except (ValueError, OSError) as e:
                logger.warning(f"Invalid config file {self.config_path}: {e}; using defaults")
                backup_path = self.config_path.with_suffix('.json.bak')
                try:
                    shutil.copy(self.config_path, backup_path)
                except OSError:
                    pass
                return self.DEFAULT_CONFIG.copy()
        else:
            config = self.DEFAULT_CONFIG.copy()
            self._write(config)
            return config

    def _write(self, data: dict) -> None:
        try:
            with open(self.config_path, 'w') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.warning(f"Could not write config file {self.config_path}: {e}")

    def get_base_url(self) -> str:
        """
        Get conversion service base URL.

        Returns:
            Base URL string (e.g., "http://localhost:8000")
        """
        host = self.data.get('converter_host', DEFAULT_CONVERTER_HOST)
        port = self.data.get('converter_port', DEFAULT_CONVERTER_PORT)
        return f"http://{host}:{port}"

    def get_timeout(self) -> Optional[float]:
        """
        Get request timeout in seconds.

        Returns:
            Timeout in seconds, or None to wait for the service indefinitely
        """
        timeout = self.data.get('timeout')
        return float(timeout) if timeout is not None else None

    def get_artifact_filename(self) -> str:
        """Get the filename converted PDFs are saved under."""
        return self.data.get('artifact_filename') or DEFAULT_ARTIFACT_FILENAME

    def get_scratch_dir(self) -> Optional[str]:
        """Get the directory for artifact scratch files (None = system temp dir)."""
        return self.data.get('scratch_dir')
