"""Per-item parameter models for node operations.

These mirror the property descriptors a workflow host renders in its
node editor: names are camelCase on the wire and each field carries the
description shown to users.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Parameters(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class CreateDeploymentParams(_Parameters):
    """Parameters of the ``deployment:create`` operation."""

    project_name: str = Field(
        ...,
        min_length=1,
        title="Project Name",
        description="The name of the Vercel project",
    )
    html_content: str = Field(
        ...,
        title="HTML Content",
        description=(
            "HTML content to deploy. Can be HTML text or a file path "
            "(relative or absolute)"
        ),
    )
    production: bool = Field(
        default=True,
        title="Deploy to Production",
        description="Whether to deploy to production environment",
    )
    deployment_mode: Literal["async", "blocking"] = Field(
        default="async",
        title="Deployment Mode",
        description=(
            "Async returns right after the deployment is created; blocking "
            "waits until the build succeeds or fails"
        ),
    )
    max_wait_time: int = Field(
        default=300,
        ge=0,
        title="Max Wait Time",
        description="Maximum seconds to wait in blocking mode",
    )


class GetDeploymentParams(_Parameters):
    """Parameters of the ``deployment:get`` operation."""

    deployment_id: str = Field(
        ...,
        min_length=1,
        pattern=r"^[A-Za-z0-9][A-Za-z0-9_.-]*$",
        title="Deployment ID",
        description="The ID of the deployment to query",
    )
