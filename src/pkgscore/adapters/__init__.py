"""Manifest loaders."""

from pkgscore.adapters.base import BaseLoader
from pkgscore.adapters.npm import NpmRegistryLoader
from pkgscore.adapters.package_json import PackageJsonLoader

__all__ = ["BaseLoader", "NpmRegistryLoader", "PackageJsonLoader"]
