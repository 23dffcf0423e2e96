"""Operation discovery endpoints."""

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from vercel_deployer.api.deps import RegistryDep

router = APIRouter()


class OperationListResponse(BaseModel):
    """Registered operations and their parameter schemas."""

    operations: list[dict[str, Any]]


@router.get("", response_model=OperationListResponse)
async def list_operations(registry: RegistryDep) -> OperationListResponse:
    """List the operations a host can run, with property descriptors."""
    return OperationListResponse(operations=registry.describe())
