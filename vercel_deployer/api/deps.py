"""Dependency injection for API endpoints."""

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Header
from pydantic import ValidationError as PydanticValidationError

from vercel_deployer.config import settings
from vercel_deployer.core.exceptions import InvalidCredentialsError
from vercel_deployer.core.node import VercelNode
from vercel_deployer.core.transport import VercelTransport
from vercel_deployer.models.credentials import VercelCredentials
from vercel_deployer.operations.registry import OperationRegistry, get_operation_registry


async def get_credentials(
    x_vercel_token: Annotated[str | None, Header()] = None,
    x_vercel_team_id: Annotated[str | None, Header()] = None,
) -> VercelCredentials:
    """Credentials from request headers, falling back to settings."""
    token = x_vercel_token or settings.vercel_token
    team_id = x_vercel_team_id if x_vercel_token else settings.vercel_team_id
    if not token:
        raise InvalidCredentialsError("Vercel access token is not configured")
    try:
        return VercelCredentials(access_token=token, team_id=team_id)
    except PydanticValidationError as e:
        raise InvalidCredentialsError(
            "; ".join(err["msg"] for err in e.errors())
        ) from e


async def get_transport(
    credentials: Annotated[VercelCredentials, Depends(get_credentials)],
) -> AsyncIterator[VercelTransport]:
    """Transport scoped to one API request."""
    async with VercelTransport(credentials) as transport:
        yield transport


async def get_node() -> VercelNode:
    """Get a node executor."""
    return VercelNode()


async def get_registry() -> OperationRegistry:
    """Get the operation registry."""
    return get_operation_registry()


# Type aliases for cleaner signatures
CredentialsDep = Annotated[VercelCredentials, Depends(get_credentials)]
TransportDep = Annotated[VercelTransport, Depends(get_transport)]
NodeDep = Annotated[VercelNode, Depends(get_node)]
RegistryDep = Annotated[OperationRegistry, Depends(get_registry)]
