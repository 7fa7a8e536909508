"""Public package catalogue endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Path

from catering_api.app.api.deps import get_storage
from catering_api.app.core.storage import MemoryStorage
from catering_api.app.schemas.package import Package
from catering_api.app.services.package_service import PackageService

router = APIRouter()


@router.get("", response_model=List[Package])
async def list_packages(storage: MemoryStorage = Depends(get_storage)) -> List[Package]:
    """List the packages currently offered (inactive packages are hidden)."""
    return await PackageService.list_packages(storage)


@router.get("/{package_id}", response_model=Package)
async def get_package(
    package_id: int = Path(..., description="ID of the package"),
    storage: MemoryStorage = Depends(get_storage),
) -> Package:
    """Fetch a single package.  Returns 404 if it does not exist."""
    return await PackageService.get_package(storage, package_id)
