"""Node operations."""

from vercel_deployer.operations.base import BaseOperation, OperationContext
from vercel_deployer.operations.create_deployment import CreateDeploymentOperation
from vercel_deployer.operations.get_deployment import GetDeploymentOperation
from vercel_deployer.operations.registry import OperationRegistry, get_operation_registry

__all__ = [
    "BaseOperation",
    "OperationContext",
    "CreateDeploymentOperation",
    "GetDeploymentOperation",
    "OperationRegistry",
    "get_operation_registry",
]
