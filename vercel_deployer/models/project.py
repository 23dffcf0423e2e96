"""Project-related data models."""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from vercel_deployer.core.outcome import BestEffort


class Project(BaseModel):
    """A Vercel project, identified by its sanitized name."""

    id: str
    name: str

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "Project":
        return cls(id=str(payload["id"]), name=str(payload.get("name", "")))


@dataclass(frozen=True)
class ProjectResolution:
    """Outcome of resolving a project name to a project id."""

    project_id: str
    name: str
    created: bool
    listing: BestEffort[list[Project]]
    protection: BestEffort[Any]
