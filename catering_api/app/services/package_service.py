"""
Business logic for the package catalogue.

Packages are seeded by the store at startup.  The public site lists
only active packages; administrators can see and edit all of them.
"""

import logging
from typing import List

from ..core.errors import NotFoundError
from ..core.storage import MemoryStorage
from ..schemas.package import Package, PackagePatch


class PackageService:
    """Service for reading and maintaining catering packages."""

    @classmethod
    async def list_packages(cls, storage: MemoryStorage, include_inactive: bool = False) -> List[Package]:
        return storage.list_packages(active_only=not include_inactive)

    @classmethod
    async def get_package(cls, storage: MemoryStorage, package_id: int) -> Package:
        package = storage.get_package(package_id)
        if package is None:
            raise NotFoundError("Package")
        return package

    @classmethod
    async def update_package(cls, storage: MemoryStorage, package_id: int, patch: PackagePatch) -> Package:
        """Apply an admin edit (price, features, activation ...) to a package."""
        package = storage.update_package(package_id, patch)
        if package is None:
            raise NotFoundError("Package")
        logging.getLogger(__name__).info(
            "Package %s updated: %s", package_id, sorted(patch.changes())
        )
        return package
