"""Base operation class for node operations."""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from vercel_deployer.core.transport import VercelTransport
from vercel_deployer.utils.logging import get_logger

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)


@dataclass
class OperationContext:
    """Everything an operation needs for one item, passed explicitly."""

    transport: VercelTransport
    item_index: int = 0
    poll_interval: float | None = None
    sleep: Callable[[float], Awaitable[object]] = field(default=asyncio.sleep)


class BaseOperation(ABC, Generic[InputT, OutputT]):
    """Base class for node operations.

    Subclasses implement:
    - resource / name: identify the operation (``deployment:create``)
    - description: shown in the host's operation picker
    - parameters: pydantic model of the per-item parameters
    - execute(): run the operation for one item
    """

    def __init__(self):
        self.logger = get_logger(f"operation.{self.key}")

    @property
    @abstractmethod
    def resource(self) -> str:
        """Resource the operation acts on."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Operation name within its resource."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this operation does."""
        pass

    @property
    @abstractmethod
    def parameters(self) -> type[InputT]:
        """Model the per-item parameters are validated against."""
        pass

    @property
    def key(self) -> str:
        return f"{self.resource}:{self.name}"

    def parse(self, raw: dict[str, Any]) -> InputT:
        """Validate raw item parameters."""
        return self.parameters.model_validate(raw)

    def describe(self) -> dict[str, Any]:
        """Property descriptors for the host's node editor."""
        return {
            "resource": self.resource,
            "operation": self.name,
            "description": self.description,
            "parameters": self.parameters.model_json_schema(by_alias=True),
        }

    @abstractmethod
    async def execute(self, params: InputT, context: OperationContext) -> OutputT:
        """Run the operation for one item.

        Args:
            params: Validated parameters of the item
            context: Transport and per-item settings

        Returns:
            Typed output record
        """
        pass
