"""Loader for manifests published to the npm registry."""

import asyncio
import logging
import os
from pathlib import Path

import httpx

from pkgscore.adapters.base import BaseLoader
from pkgscore.exceptions import ManifestLoadError
from pkgscore.models.schemas import Manifest

logger = logging.getLogger(__name__)


class NpmRegistryLoader(BaseLoader):
    """Fetches the package.json of a published npm package version.

    Data source: https://registry.npmjs.org/{package}

    The registry packument holds the full manifest of every published
    version under ``versions``; the ``latest`` dist-tag picks the default.
    Locations are package specs such as ``npm:left-pad``, ``left-pad@1.3.0``
    or ``@babel/core@next``.
    Set PKGSCORE_NPM_REGISTRY to use a mirror or private registry.
    """

    REGISTRY_URL = "https://registry.npmjs.org"
    LOCATION_PREFIX = "npm:"

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        registry_url: str | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            client: Optional httpx client for making requests. If not provided,
                    a new client will be created for each request.
            registry_url: Registry base URL. If not provided, uses the
                    PKGSCORE_NPM_REGISTRY env var or the public registry.
        """
        self._client = client
        base = registry_url or os.environ.get("PKGSCORE_NPM_REGISTRY") or self.REGISTRY_URL
        self.registry_url = base.rstrip("/")

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create an HTTP client."""
        if self._client is not None:
            return self._client
        return httpx.AsyncClient(timeout=30.0, follow_redirects=True)

    async def _fetch_json(self, url: str) -> dict | list:
        """Fetch JSON from a URL."""
        client = await self._get_client()
        try:
            response = await client.get(url, headers={"Accept": "application/json"})
            response.raise_for_status()
            return response.json()
        finally:
            if self._client is None:
                await client.aclose()

    def packument_url(self, name: str) -> str:
        """Build the registry URL for a package.

        Scoped names (``@org/pkg``) keep the ``@`` but encode the slash.
        """
        encoded_name = name.replace("/", "%2F")
        return f"{self.registry_url}/{encoded_name}"

    async def fetch(self, name: str, version: str | None = None) -> Manifest:
        """Fetch the manifest for one version of an npm package.

        Args:
            name: Package name (supports scoped packages like @org/pkg).
            version: Exact version or dist-tag. Defaults to ``latest``.

        Returns:
            The manifest as published for that version.

        Raises:
            ManifestLoadError: If the package or version cannot be fetched.
        """
        location = f"npm:{name}" + (f"@{version}" if version else "")
        url = self.packument_url(name)

        try:
            data = await self._fetch_json(url)
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                logger.warning(f"Package {name} not found on {self.registry_url}")
                raise ManifestLoadError(location, "package not found in registry") from e
            logger.warning(f"Registry returned {e.response.status_code} for {name}")
            raise ManifestLoadError(
                location, f"registry returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"Failed to reach registry for {name}: {e}")
            raise ManifestLoadError(location, f"registry request failed: {e}") from e
        except ValueError as e:
            raise ManifestLoadError(location, "registry response is not valid JSON") from e

        if not isinstance(data, dict):
            raise ManifestLoadError(location, "unexpected registry response")

        dist_tags = data.get("dist-tags") or {}
        versions = data.get("versions") or {}
        wanted = version or "latest"
        resolved = dist_tags.get(wanted, wanted)

        manifest = versions.get(resolved)
        if not isinstance(manifest, dict):
            raise ManifestLoadError(location, f"version '{wanted}' not published")

        logger.info(f"Fetched manifest for {name}@{resolved}")
        return manifest

    def parse_location(self, location: str | Path) -> tuple[str, str | None]:
        """Split a ``[npm:]name[@version]`` spec into name and version.

        The leading ``@`` of a scoped name is part of the name.
        """
        spec = str(location).strip()
        if spec.startswith(self.LOCATION_PREFIX):
            spec = spec[len(self.LOCATION_PREFIX):]

        scope = ""
        if spec.startswith("@"):
            scope, spec = "@", spec[1:]

        name, _, version = spec.partition("@")
        if not name:
            raise ManifestLoadError(str(location), "no package name given")
        return scope + name, version or None

    def load(self, location: str | Path) -> Manifest:
        """Fetch the manifest for a package spec, blocking until it arrives.

        Must not be called from inside a running event loop; use ``fetch``
        there instead.
        """
        name, version = self.parse_location(location)
        return asyncio.run(self.fetch(name, version))
