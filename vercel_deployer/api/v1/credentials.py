"""Credential verification endpoints."""

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from vercel_deployer.api.deps import TransportDep
from vercel_deployer.core.exceptions import UpstreamError

router = APIRouter()


class VerifyResponse(BaseModel):
    """Result of checking a token against the Vercel API."""

    valid: bool
    team_id: str | None = None
    user: dict[str, Any] | None = None
    error: str | None = None


@router.get("/verify", response_model=VerifyResponse)
async def verify_credentials(transport: TransportDep) -> VerifyResponse:
    """Check that the token is accepted by ``GET /v2/user``."""
    try:
        user = await transport.verify_credentials()
    except UpstreamError as e:
        if e.status_code in (401, 403):
            return VerifyResponse(valid=False, team_id=transport.team_id, error=e.message)
        raise
    return VerifyResponse(valid=True, team_id=transport.team_id, user=user)
