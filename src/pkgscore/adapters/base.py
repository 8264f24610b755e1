"""Abstract base class for manifest loaders."""

from abc import ABC, abstractmethod
from pathlib import Path

from pkgscore.models.schemas import Manifest


class BaseLoader(ABC):
    """Base class for manifest loaders.

    A loader turns a package location into a parsed manifest. The checker
    only talks to this interface, so tests can bypass the filesystem by
    injecting a manifest directly.
    """

    @abstractmethod
    def load(self, location: str | Path) -> Manifest:
        """Load the manifest for the package at ``location``.

        Args:
            location: Package directory or manifest file.

        Returns:
            The parsed manifest.

        Raises:
            ManifestLoadError: If the manifest cannot be read or parsed.
        """
        ...
