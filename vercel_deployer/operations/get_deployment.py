"""Get Deployment operation."""

from vercel_deployer.models.deployment import StatusResult
from vercel_deployer.models.parameters import GetDeploymentParams
from vercel_deployer.operations.base import BaseOperation, OperationContext
from vercel_deployer.services.deployments import DeploymentSubmitter
from vercel_deployer.services.normalizer import normalize_status


class GetDeploymentOperation(BaseOperation[GetDeploymentParams, StatusResult]):
    """Look up the current status of a deployment."""

    @property
    def resource(self) -> str:
        return "deployment"

    @property
    def name(self) -> str:
        return "get"

    @property
    def description(self) -> str:
        return "Get the status of a deployment"

    @property
    def parameters(self) -> type[GetDeploymentParams]:
        return GetDeploymentParams

    async def execute(
        self, params: GetDeploymentParams, context: OperationContext
    ) -> StatusResult:
        deployment = await DeploymentSubmitter(context.transport).get(params.deployment_id)
        self.logger.info(
            "get_deployment.completed",
            item=context.item_index,
            deployment_id=deployment.id,
            status=deployment.status,
        )
        return normalize_status(deployment)
