"""Node executor.

Runs one operation over a batch of input items, strictly one item at a
time and in input order, the way a workflow host invokes a node.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from vercel_deployer.config import settings
from vercel_deployer.core.exceptions import (
    InvalidParameterError,
    NodeOperationError,
    VercelDeployerError,
)
from vercel_deployer.core.transport import VercelTransport
from vercel_deployer.models.credentials import VercelCredentials
from vercel_deployer.operations.base import BaseOperation, OperationContext
from vercel_deployer.operations.registry import OperationRegistry, get_operation_registry
from vercel_deployer.utils.logging import get_logger


class NodeItem(BaseModel):
    """One output record, linked to the input item it came from."""

    model_config = ConfigDict(populate_by_name=True)

    data: dict[str, Any] = Field(alias="json")
    paired_item: int = Field(alias="pairedItem")


class VercelNode:
    """Executes node operations against Vercel.

    Item failures either become ``{"error": ...}`` records
    (``continue_on_fail``) or abort the batch with
    :class:`NodeOperationError`. Deployments that end in ERROR or
    CANCELED are results, not failures.
    """

    def __init__(
        self,
        registry: OperationRegistry | None = None,
        poll_interval: float | None = None,
    ):
        self.registry = registry or get_operation_registry()
        self.poll_interval = (
            settings.vercel_poll_interval if poll_interval is None else poll_interval
        )
        self.logger = get_logger("node")

    async def execute(
        self,
        resource: str,
        operation: str,
        items: list[dict[str, Any]],
        credentials: VercelCredentials,
        continue_on_fail: bool = False,
        transport: VercelTransport | None = None,
    ) -> list[NodeItem]:
        """Run *operation* once per item.

        Args:
            resource: Resource name, e.g. ``deployment``
            operation: Operation name, e.g. ``create``
            items: Raw parameters of each input item
            credentials: Vercel token and optional team id
            continue_on_fail: Record item errors instead of raising
            transport: Transport to reuse; one is opened for the batch
                otherwise

        Raises:
            InvalidParameterError: Unknown resource/operation.
            NodeOperationError: An item failed and continue_on_fail is off.
        """
        op = self.registry.create(resource, operation)
        if op is None:
            raise InvalidParameterError(
                f"Unknown operation: {resource}:{operation}",
                {"available": self.registry.list_operations()},
            )

        self.logger.info(
            "node.batch.started",
            operation=op.key,
            items=len(items),
            team_scoped=credentials.team_id is not None,
        )

        if transport is None:
            async with VercelTransport(credentials) as owned:
                results = await self._run_items(op, items, owned, continue_on_fail)
        else:
            results = await self._run_items(op, items, transport, continue_on_fail)

        self.logger.info(
            "node.batch.completed",
            operation=op.key,
            items=len(results),
            errors=sum(1 for r in results if "error" in r.data),
        )
        return results

    async def _run_items(
        self,
        op: BaseOperation[Any, Any],
        items: list[dict[str, Any]],
        transport: VercelTransport,
        continue_on_fail: bool,
    ) -> list[NodeItem]:
        results: list[NodeItem] = []

        for index, raw in enumerate(items):
            context = OperationContext(
                transport=transport,
                item_index=index,
                poll_interval=self.poll_interval,
            )
            try:
                params = op.parse(raw)
                output = await op.execute(params, context)
            except Exception as e:
                error = _as_node_error(e)
                self.logger.error(
                    "node.item.failed",
                    operation=op.key,
                    item=index,
                    error=error.message,
                    error_type=type(e).__name__,
                    exc_info=not isinstance(e, (VercelDeployerError, PydanticValidationError)),
                )
                if not continue_on_fail:
                    raise NodeOperationError(index, error) from e
                results.append(NodeItem(data={"error": error.message}, paired_item=index))
                continue

            results.append(NodeItem(data=output.to_item(), paired_item=index))

        return results


def _as_node_error(exc: Exception) -> VercelDeployerError:
    if isinstance(exc, VercelDeployerError):
        return exc
    if not isinstance(exc, PydanticValidationError):
        return VercelDeployerError(
            f"{type(exc).__name__}: {exc}",
            {"error_type": type(exc).__name__},
        )
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return InvalidParameterError(f"Invalid parameters: {problems}", {"errors": problems})
