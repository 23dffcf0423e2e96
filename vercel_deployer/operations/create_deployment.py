"""Create Deployment operation.

Deploys one HTML page to Vercel: resolves the project, uploads the
bundle and, in blocking mode, waits for the build to finish.
"""

import time

from vercel_deployer.core.exceptions import InvalidParameterError
from vercel_deployer.models.deployment import (
    DeploymentMode,
    DeploymentRequest,
    NormalizedResult,
    TargetEnvironment,
)
from vercel_deployer.models.parameters import CreateDeploymentParams
from vercel_deployer.operations.base import BaseOperation, OperationContext
from vercel_deployer.services.deployments import DeploymentSubmitter
from vercel_deployer.services.lifecycle import DeploymentLifecycle
from vercel_deployer.services.normalizer import normalize
from vercel_deployer.services.projects import ProjectResolver
from vercel_deployer.utils.content import ephemeral_workspace, resolve_html_content
from vercel_deployer.utils.naming import sanitize_project_name


class CreateDeploymentOperation(BaseOperation[CreateDeploymentParams, NormalizedResult]):
    """Deploy a static HTML page.

    Steps, strictly in order:
    1. Resolve the HTML payload and sanitize the project name
    2. Reuse or create the project and clear its protection
    3. Upload index.html + package.json from a scratch directory
    4. Optionally wait for a terminal status
    5. Normalize the outcome
    """

    @property
    def resource(self) -> str:
        return "deployment"

    @property
    def name(self) -> str:
        return "create"

    @property
    def description(self) -> str:
        return "Create a new deployment"

    @property
    def parameters(self) -> type[CreateDeploymentParams]:
        return CreateDeploymentParams

    def build_request(self, params: CreateDeploymentParams) -> DeploymentRequest:
        sanitized = sanitize_project_name(params.project_name)
        if not sanitized:
            raise InvalidParameterError(
                f"Project name {params.project_name!r} has no usable characters",
                {"project_name": params.project_name},
            )

        return DeploymentRequest(
            project_name=params.project_name,
            sanitized_name=sanitized,
            html=resolve_html_content(params.html_content),
            target=(
                TargetEnvironment.PRODUCTION
                if params.production
                else TargetEnvironment.PREVIEW
            ),
            mode=DeploymentMode(params.deployment_mode),
            max_wait_seconds=params.max_wait_time,
        )

    async def execute(
        self, params: CreateDeploymentParams, context: OperationContext
    ) -> NormalizedResult:
        start_time = time.time()
        request = self.build_request(params)

        self.logger.info(
            "create_deployment.started",
            item=context.item_index,
            project=request.sanitized_name,
            target=request.target.value,
            mode=request.mode.value,
        )

        projects = ProjectResolver(context.transport)
        resolution = await projects.resolve(request.sanitized_name)

        deployments = DeploymentSubmitter(context.transport)
        lifecycle = DeploymentLifecycle(
            deployments,
            poll_interval=context.poll_interval,
            sleep=context.sleep,
        )

        with ephemeral_workspace(prefix=f"vercel-{context.item_index}-") as workdir:
            submitted = await deployments.submit(
                resolution.project_id,
                request.sanitized_name,
                request.html,
                request.target,
                workdir,
            )
            final = await lifecycle.run(submitted, request.mode, request.max_wait_seconds)

        result = normalize(
            final,
            project_id=resolution.project_id,
            project_name=request.sanitized_name,
            mode=request.mode,
            submitted=submitted,
        )

        self.logger.info(
            "create_deployment.completed",
            item=context.item_index,
            deployment_id=result.deployment_id,
            status=result.status,
            success=result.success,
            url=result.url,
            duration_ms=int((time.time() - start_time) * 1000),
        )
        return result
