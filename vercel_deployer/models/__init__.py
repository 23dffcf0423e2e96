"""Data models for the Vercel deployer."""

from vercel_deployer.models.credentials import VercelCredentials
from vercel_deployer.models.deployment import (
    BundleFile,
    Deployment,
    DeploymentMode,
    DeploymentRequest,
    DeploymentStatus,
    NormalizedResult,
    StatusResult,
    TargetEnvironment,
)
from vercel_deployer.models.parameters import (
    CreateDeploymentParams,
    GetDeploymentParams,
)
from vercel_deployer.models.project import Project, ProjectResolution

__all__ = [
    # Credentials
    "VercelCredentials",
    # Deployment models
    "BundleFile",
    "Deployment",
    "DeploymentMode",
    "DeploymentRequest",
    "DeploymentStatus",
    "NormalizedResult",
    "StatusResult",
    "TargetEnvironment",
    # Parameter models
    "CreateDeploymentParams",
    "GetDeploymentParams",
    # Project models
    "Project",
    "ProjectResolution",
]
