"""Loader for package.json files on disk."""

import json
import logging
from pathlib import Path

from pkgscore.adapters.base import BaseLoader
from pkgscore.exceptions import ManifestLoadError
from pkgscore.models.schemas import Manifest

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"


class PackageJsonLoader(BaseLoader):
    """Reads ``package.json`` from a package directory.

    ``location`` may also point straight at the manifest file.
    """

    def __init__(self, filename: str = MANIFEST_FILENAME) -> None:
        self.filename = filename

    def resolve(self, location: str | Path) -> Path:
        """Return the manifest file path for ``location``."""
        path = Path(location)
        if path.is_dir():
            return path / self.filename
        return path

    def load(self, location: str | Path) -> Manifest:
        path = self.resolve(location)

        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            logger.warning(f"No manifest found at {path}")
            raise ManifestLoadError(str(location), f"{path} does not exist") from e
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {path}: {e}")
            raise ManifestLoadError(str(location), f"cannot read {path}: {e}") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning(f"Could not parse {path}: {e}")
            raise ManifestLoadError(str(location), f"invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            logger.warning(f"{path} does not contain a JSON object")
            raise ManifestLoadError(
                str(location), f"{path} must contain a JSON object, got {type(data).__name__}"
            )

        logger.info(f"Loaded manifest for {data.get('name', '<unnamed>')} from {path}")
        return data
