"""Deployment submission and status lookup."""

import json
from pathlib import Path
from typing import Any
from urllib.parse import quote

from vercel_deployer.core.exceptions import UpstreamError
from vercel_deployer.core.transport import VercelTransport
from vercel_deployer.models.deployment import BundleFile, Deployment, TargetEnvironment
from vercel_deployer.utils.logging import get_logger

logger = get_logger(__name__)

DEPLOYMENTS_PATH = "/v13/deployments"

# Uploaded in this order
BUNDLE_FILES = ("index.html", "package.json")


def build_manifest(project_name: str) -> dict[str, object]:
    """The ``package.json`` shipped next to the page."""
    return {
        "name": project_name,
        "version": "1.0.0",
        "description": "Static HTML site deployed to Vercel",
        "private": True,
    }


def write_bundle(workdir: Path, project_name: str, html: str) -> list[BundleFile]:
    """Materialize the site in *workdir* and return it as inline files."""
    (workdir / "index.html").write_text(html, encoding="utf-8")
    (workdir / "package.json").write_text(
        json.dumps(build_manifest(project_name), indent=2),
        encoding="utf-8",
    )
    return [
        BundleFile(file=name, data=(workdir / name).read_text(encoding="utf-8"))
        for name in BUNDLE_FILES
    ]


class DeploymentSubmitter:
    """Creates deployments and reads back their state."""

    def __init__(self, transport: VercelTransport):
        self.transport = transport

    async def submit(
        self,
        project_id: str,
        project_name: str,
        html: str,
        target: TargetEnvironment,
        workdir: Path,
    ) -> Deployment:
        """Upload the two-file bundle as a new deployment of *project_id*.

        Preview deployments omit the ``target`` flag and get Vercel's
        default environment.
        """
        files = write_bundle(workdir, project_name, html)

        params: dict[str, str] = {"projectId": project_id}
        if target == TargetEnvironment.PRODUCTION:
            params["target"] = "production"

        data = await self.transport.request(
            "POST",
            DEPLOYMENTS_PATH,
            body={
                "name": project_name,
                "files": [f.model_dump() for f in files],
                "projectSettings": {"framework": None},
            },
            params=params,
        )
        deployment = _deployment("POST", DEPLOYMENTS_PATH, data)

        logger.info(
            "deployment.submitted",
            project_id=project_id,
            deployment_id=deployment.id,
            status=deployment.status,
            target=target.value,
        )
        return deployment

    async def get(self, deployment_id: str) -> Deployment:
        path = f"{DEPLOYMENTS_PATH}/{quote(deployment_id, safe='')}"
        data = await self.transport.request("GET", path)
        return _deployment("GET", path, data)


def _deployment(method: str, path: str, data: dict[str, Any]) -> Deployment:
    if not data.get("id"):
        raise UpstreamError(method, path, None, "response has no deployment id")
    return Deployment.from_api(data)
