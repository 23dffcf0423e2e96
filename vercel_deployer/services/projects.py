"""Project resolution: reuse a project by name or create it."""

from urllib.parse import quote

from vercel_deployer.core.exceptions import UpstreamError
from vercel_deployer.core.outcome import best_effort
from vercel_deployer.core.transport import VercelTransport
from vercel_deployer.models.project import Project, ProjectResolution
from vercel_deployer.utils.logging import get_logger

logger = get_logger(__name__)


class ProjectResolver:
    """Ensures a single project exists per sanitized name.

    Listing and protection-clearing are best effort: a listing failure
    falls through to creation, and a protection failure never stops the
    deployment.
    """

    def __init__(self, transport: VercelTransport):
        self.transport = transport

    async def resolve(self, name: str) -> ProjectResolution:
        listing = await best_effort(
            self.list_projects(name),
            "projects.listing_failed",
            project=name,
        )

        existing = next(
            (p for p in listing.value or [] if p.name == name),
            None,
        )
        if existing:
            project, created = existing, False
            logger.info("projects.reused", project=name, project_id=project.id)
        else:
            project, created = await self.create_project(name), True
            logger.info("projects.created", project=name, project_id=project.id)

        protection = await best_effort(
            self.disable_protection(project.id),
            "projects.protection_not_cleared",
            project_id=project.id,
        )

        return ProjectResolution(
            project_id=project.id,
            name=name,
            created=created,
            listing=listing,
            protection=protection,
        )

    async def list_projects(self, search: str | None = None) -> list[Project]:
        data = await self.transport.request(
            "GET", "/v9/projects", params={"search": search}
        )
        return [Project.from_api(p) for p in data.get("projects") or [] if "id" in p]

    async def create_project(self, name: str) -> Project:
        data = await self.transport.request(
            "POST", "/v9/projects", body={"name": name, "framework": None}
        )
        if not data.get("id"):
            raise UpstreamError("POST", "/v9/projects", None, "response has no project id")
        return Project.from_api(data)

    async def disable_protection(self, project_id: str) -> None:
        """Clear SSO and password protection so the URL is public."""
        await self.transport.request(
            "PATCH",
            f"/v9/projects/{quote(project_id, safe='')}",
            body={"ssoProtection": None, "passwordProtection": None},
        )

