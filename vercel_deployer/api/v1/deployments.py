"""Deployment endpoints."""

from typing import Any

from fastapi import APIRouter, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vercel_deployer.api.deps import CredentialsDep, NodeDep, TransportDep
from vercel_deployer.core.node import NodeItem
from vercel_deployer.models.parameters import CreateDeploymentParams

router = APIRouter()


class ExecuteRequest(BaseModel):
    """A batch of input items for one operation."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    resource: str = "deployment"
    operation: str = "create"
    items: list[dict[str, Any]] = Field(..., min_length=1)
    continue_on_fail: bool = False


class ExecuteResponse(BaseModel):
    """Output items, one per input item."""

    items: list[NodeItem]


@router.post(
    "/execute",
    response_model=ExecuteResponse,
    summary="Run an operation over a batch of items",
    description="Items are processed one at a time, in input order.",
)
async def execute(
    data: ExecuteRequest,
    node: NodeDep,
    credentials: CredentialsDep,
    transport: TransportDep,
) -> ExecuteResponse:
    items = await node.execute(
        data.resource,
        data.operation,
        data.items,
        credentials,
        continue_on_fail=data.continue_on_fail,
        transport=transport,
    )
    return ExecuteResponse(items=items)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Deploy one HTML page",
)
async def create_deployment(
    data: CreateDeploymentParams,
    node: NodeDep,
    credentials: CredentialsDep,
    transport: TransportDep,
) -> dict[str, Any]:
    items = await node.execute(
        "deployment",
        "create",
        [data.model_dump(by_alias=True)],
        credentials,
        transport=transport,
    )
    return items[0].data


@router.get(
    "/{deployment_id}",
    summary="Get deployment status",
)
async def get_deployment(
    deployment_id: str,
    node: NodeDep,
    credentials: CredentialsDep,
    transport: TransportDep,
) -> dict[str, Any]:
    items = await node.execute(
        "deployment",
        "get",
        [{"deploymentId": deployment_id}],
        credentials,
        transport=transport,
    )
    return items[0].data
