"""Deployment lifecycle: return right away or wait for a terminal state."""

import asyncio
import time
from collections.abc import Awaitable, Callable

from vercel_deployer.config import settings
from vercel_deployer.models.deployment import Deployment, DeploymentMode, DeploymentStatus
from vercel_deployer.services.deployments import DeploymentSubmitter
from vercel_deployer.utils.logging import get_logger

logger = get_logger(__name__)


class DeploymentLifecycle:
    """Drives a submitted deployment to the state the caller asked for.

    State machine over ``readyState``:

        QUEUED -> BUILDING -> READY | ERROR | CANCELED

    The controller never writes deployment state; it only re-reads it.
    In blocking mode the status is fetched immediately and then every
    ``poll_interval`` seconds until a terminal status is seen or
    ``max_wait`` seconds have elapsed. The timeout is checked between
    polls, never during one. On timeout one last fetch is returned as-is,
    terminal or not.

    Transport errors while polling propagate unchanged.
    """

    def __init__(
        self,
        deployments: DeploymentSubmitter,
        poll_interval: float | None = None,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.deployments = deployments
        self.poll_interval = (
            settings.vercel_poll_interval if poll_interval is None else poll_interval
        )
        self._sleep = sleep
        self._clock = clock

    async def run(
        self,
        deployment: Deployment,
        mode: DeploymentMode,
        max_wait: float,
    ) -> Deployment:
        if mode == DeploymentMode.ASYNC:
            return deployment
        return await self.wait(deployment.id, max_wait)

    async def wait(self, deployment_id: str, max_wait: float) -> Deployment:
        start = self._clock()
        polls = 0

        while self._clock() - start < max_wait:
            current = await self.deployments.get(deployment_id)
            polls += 1
            logger.debug(
                "lifecycle.poll",
                deployment_id=deployment_id,
                status=current.status,
                attempt=polls,
            )

            if current.status == DeploymentStatus.READY:
                logger.info("lifecycle.ready", deployment_id=deployment_id, polls=polls)
                return current

            if current.is_failed:
                message = current.error_message or (
                    f"Deployment failed with status: {current.status}"
                )
                logger.info(
                    "lifecycle.failed",
                    deployment_id=deployment_id,
                    status=current.status,
                    error=message,
                )
                return current.with_error(message)

            await self._sleep(self.poll_interval)

        current = await self.deployments.get(deployment_id)
        logger.warning(
            "lifecycle.timeout",
            deployment_id=deployment_id,
            status=current.status,
            max_wait=max_wait,
            polls=polls,
        )
        return current
