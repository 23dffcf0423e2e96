"""Deployment data models."""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DeploymentStatus(str, Enum):
    """Vercel deployment ``readyState`` values."""

    QUEUED = "QUEUED"
    BUILDING = "BUILDING"
    READY = "READY"
    ERROR = "ERROR"
    CANCELED = "CANCELED"


TERMINAL_STATUSES = frozenset(
    s.value
    for s in (DeploymentStatus.READY, DeploymentStatus.ERROR, DeploymentStatus.CANCELED)
)
FAILED_STATUSES = frozenset(
    s.value for s in (DeploymentStatus.ERROR, DeploymentStatus.CANCELED)
)


class TargetEnvironment(str, Enum):
    """Where the deployment is published."""

    PRODUCTION = "production"
    PREVIEW = "preview"


class DeploymentMode(str, Enum):
    """Whether the caller waits for the build to finish."""

    ASYNC = "async"
    BLOCKING = "blocking"


class DeploymentRequest(BaseModel):
    """Everything needed to deploy one input item."""

    model_config = ConfigDict(frozen=True)

    project_name: str
    sanitized_name: str
    html: str
    target: TargetEnvironment = TargetEnvironment.PRODUCTION
    mode: DeploymentMode = DeploymentMode.ASYNC
    max_wait_seconds: int = Field(default=300, ge=0)


class BundleFile(BaseModel):
    """One inline file of a deployment upload."""

    file: str
    data: str


class Deployment(BaseModel):
    """A deployment as last reported by Vercel.

    Only Vercel mutates deployments; this model is a snapshot of one
    response. ``url`` is the bare hostname Vercel reports, without scheme.
    """

    id: str
    url: str | None = None
    status: str | None = None
    error_message: str | None = None
    raw: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "Deployment":
        return cls(
            id=str(payload.get("id", "")),
            url=payload.get("url") or None,
            status=payload.get("readyState") or payload.get("status"),
            error_message=payload.get("errorMessage") or None,
            raw=payload,
        )

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def is_failed(self) -> bool:
        return self.status in FAILED_STATUSES

    def with_error(self, message: str) -> "Deployment":
        """Copy with ``errorMessage`` set on both the model and raw payload."""
        raw = {**self.raw, "readyState": self.status, "errorMessage": message}
        return self.model_copy(update={"error_message": message, "raw": raw})


class _OutputModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NormalizedResult(_OutputModel):
    """Output record of a create operation."""

    success: bool
    project_id: str
    project_name: str
    deployment_id: str
    url: str | None
    status: str | None
    mode: Literal["async", "blocking"]
    error_message: str | None = None
    deployment: dict[str, Any] = Field(default_factory=dict)

    def to_item(self) -> dict[str, Any]:
        """Serialize for the host; ``errorMessage`` only when present."""
        data = self.model_dump(by_alias=True, mode="json")
        if not self.error_message:
            data.pop("errorMessage", None)
        return data


class StatusResult(_OutputModel):
    """Output record of a status lookup."""

    success: bool
    deployment_id: str
    url: str | None
    status: str | None
    deployment: dict[str, Any] = Field(default_factory=dict)

    def to_item(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")
