"""Operation registry for looking up node operations."""

from functools import lru_cache
from typing import Any

from vercel_deployer.operations.base import BaseOperation
from vercel_deployer.operations.create_deployment import CreateDeploymentOperation
from vercel_deployer.operations.get_deployment import GetDeploymentOperation
from vercel_deployer.utils.logging import get_logger

logger = get_logger(__name__)


class OperationRegistry:
    """Registry of node operations keyed by ``resource:operation``."""

    def __init__(self):
        self._operations: dict[str, type[BaseOperation[Any, Any]]] = {}

    def register(self, operation_class: type[BaseOperation[Any, Any]]) -> None:
        """Register an operation class."""
        # Create temporary instance to get the key
        key = operation_class().key

        if key in self._operations:
            logger.warning("registry.overwriting", operation=key)

        self._operations[key] = operation_class
        logger.debug("registry.registered", operation=key)

    def get(self, resource: str, operation: str) -> type[BaseOperation[Any, Any]] | None:
        """Get an operation class by resource and name."""
        return self._operations.get(f"{resource}:{operation}")

    def create(self, resource: str, operation: str) -> BaseOperation[Any, Any] | None:
        """Create an operation instance by resource and name."""
        operation_class = self.get(resource, operation)
        if operation_class:
            return operation_class()
        return None

    def list_operations(self) -> list[str]:
        """List all registered operation keys."""
        return list(self._operations.keys())

    def describe(self) -> list[dict[str, Any]]:
        """Descriptors of every registered operation."""
        return [cls().describe() for cls in self._operations.values()]


@lru_cache
def get_operation_registry() -> OperationRegistry:
    """Get the registry with the built-in operations."""
    registry = OperationRegistry()
    registry.register(CreateDeploymentOperation)
    registry.register(GetDeploymentOperation)
    return registry
