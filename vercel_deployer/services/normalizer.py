"""Map Vercel deployment payloads to the node's output records."""

from vercel_deployer.models.deployment import (
    Deployment,
    DeploymentMode,
    DeploymentStatus,
    NormalizedResult,
    StatusResult,
)


def deployment_url(deployment: Deployment, project_name: str | None = None) -> str | None:
    """Public URL of a deployment, if one can be known.

    Falls back to the project's ``.vercel.app`` alias only once the
    deployment is READY.
    """
    if deployment.url:
        return f"https://{deployment.url}"
    if project_name and deployment.status == DeploymentStatus.READY:
        return f"https://{project_name}.vercel.app"
    return None


def normalize(
    deployment: Deployment,
    *,
    project_id: str,
    project_name: str,
    mode: DeploymentMode,
    submitted: Deployment | None = None,
) -> NormalizedResult:
    """Build the create-operation record.

    ``success`` is true only for READY; a deployment without a status
    falls back to the status reported at submission.
    """
    status = deployment.status or (submitted.status if submitted else None)
    if status != deployment.status:
        deployment = deployment.model_copy(update={"status": status})

    return NormalizedResult(
        success=status == DeploymentStatus.READY,
        project_id=project_id,
        project_name=project_name,
        deployment_id=deployment.id,
        url=deployment_url(deployment, project_name),
        status=status,
        mode=mode.value,
        error_message=deployment.error_message,
        deployment=deployment.raw,
    )


def normalize_status(deployment: Deployment) -> StatusResult:
    """Build the status-lookup record; the lookup itself succeeded."""
    return StatusResult(
        success=True,
        deployment_id=deployment.id,
        url=deployment_url(deployment),
        status=deployment.status,
        deployment=deployment.raw,
    )
