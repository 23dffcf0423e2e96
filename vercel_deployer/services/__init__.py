"""Services that talk to Vercel on behalf of node operations."""

from vercel_deployer.services.deployments import DeploymentSubmitter, write_bundle
from vercel_deployer.services.lifecycle import DeploymentLifecycle
from vercel_deployer.services.normalizer import deployment_url, normalize, normalize_status
from vercel_deployer.services.projects import ProjectResolver

__all__ = [
    "DeploymentLifecycle",
    "DeploymentSubmitter",
    "ProjectResolver",
    "deployment_url",
    "normalize",
    "normalize_status",
    "write_bundle",
]
