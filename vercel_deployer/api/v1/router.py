"""Main router for API v1."""

from fastapi import APIRouter

from vercel_deployer.api.v1 import credentials, deployments, health, operations

router = APIRouter(prefix="/v1")

# Include sub-routers
router.include_router(health.router, tags=["health"])
router.include_router(operations.router, prefix="/operations", tags=["operations"])
router.include_router(deployments.router, prefix="/deployments", tags=["deployments"])
router.include_router(credentials.router, prefix="/credentials", tags=["credentials"])
