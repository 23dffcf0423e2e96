"""Unit tests for deployment submission and result normalization."""

import json
from pathlib import Path

import httpx
import pytest
import respx

from tests.conftest import deployment_payload
from vercel_deployer.core.exceptions import UpstreamError
from vercel_deployer.models.deployment import Deployment, DeploymentMode, TargetEnvironment
from vercel_deployer.services.deployments import DeploymentSubmitter, write_bundle
from vercel_deployer.services.normalizer import deployment_url, normalize, normalize_status


class TestWriteBundle:
    """Tests for write_bundle."""

    def test_writes_two_files(self, tmp_path: Path):
        files = write_bundle(tmp_path, "my-site", "<p>hi</p>")

        assert [f.file for f in files] == ["index.html", "package.json"]
        assert files[0].data == "<p>hi</p>"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["index.html", "package.json"]

    def test_manifest(self, tmp_path: Path):
        files = write_bundle(tmp_path, "my-site", "<p>hi</p>")

        manifest = json.loads(files[1].data)
        assert manifest["name"] == "my-site"
        assert manifest["version"] == "1.0.0"
        assert manifest["private"] is True


class TestDeploymentSubmitter:
    """Tests for DeploymentSubmitter."""

    @pytest.mark.asyncio
    async def test_submit_production(
        self, transport, vercel_api: respx.MockRouter, tmp_path: Path
    ):
        route = vercel_api.post("/v13/deployments").mock(
            return_value=httpx.Response(200, json=deployment_payload(ready_state="QUEUED"))
        )

        deployment = await DeploymentSubmitter(transport).submit(
            "prj_1", "my-site", "<p>hi</p>", TargetEnvironment.PRODUCTION, tmp_path
        )

        assert deployment.id == "dpl_123"
        assert deployment.status == "QUEUED"
        assert deployment.url == "my-site-abc123.vercel.app"

        request = route.calls.last.request
        assert request.url.params["projectId"] == "prj_1"
        assert request.url.params["target"] == "production"
        body = json.loads(request.content)
        assert body["name"] == "my-site"
        assert body["projectSettings"] == {"framework": None}
        assert body["files"][0] == {"file": "index.html", "data": "<p>hi</p>"}
        assert body["files"][1]["file"] == "package.json"

    @pytest.mark.asyncio
    async def test_submit_preview_omits_target(
        self, transport, vercel_api: respx.MockRouter, tmp_path: Path
    ):
        route = vercel_api.post("/v13/deployments").mock(
            return_value=httpx.Response(200, json=deployment_payload())
        )

        await DeploymentSubmitter(transport).submit(
            "prj_1", "my-site", "<p>hi</p>", TargetEnvironment.PREVIEW, tmp_path
        )

        assert "target" not in route.calls.last.request.url.params

    @pytest.mark.asyncio
    async def test_get(self, transport, vercel_api: respx.MockRouter):
        vercel_api.get("/v13/deployments/dpl_123").mock(
            return_value=httpx.Response(200, json=deployment_payload(ready_state="BUILDING"))
        )

        deployment = await DeploymentSubmitter(transport).get("dpl_123")

        assert deployment.status == "BUILDING"


class TestNormalizer:
    """Tests for result normalization."""

    def test_ready_without_hostname_uses_project_alias(self):
        deployment = Deployment.from_api(deployment_payload(ready_state="READY", url=None))

        assert deployment_url(deployment, "my-site") == "https://my-site.vercel.app"

    def test_hostname_wins(self):
        deployment = Deployment.from_api(
            deployment_payload(ready_state="READY", url="x.vercel.app")
        )

        assert deployment_url(deployment, "my-site") == "https://x.vercel.app"

    def test_not_ready_without_hostname_has_no_url(self):
        deployment = Deployment.from_api(deployment_payload(ready_state="BUILDING", url=None))

        assert deployment_url(deployment, "my-site") is None

    def test_normalize_ready(self):
        deployment = Deployment.from_api(deployment_payload(ready_state="READY"))

        result = normalize(
            deployment,
            project_id="prj_1",
            project_name="my-site",
            mode=DeploymentMode.BLOCKING,
        )
        item = result.to_item()

        assert item["success"] is True
        assert item["projectId"] == "prj_1"
        assert item["projectName"] == "my-site"
        assert item["deploymentId"] == "dpl_123"
        assert item["url"] == "https://my-site-abc123.vercel.app"
        assert item["status"] == "READY"
        assert item["mode"] == "blocking"
        assert "errorMessage" not in item
        assert item["deployment"]["id"] == "dpl_123"

    def test_normalize_error_keeps_message(self):
        deployment = Deployment.from_api(
            deployment_payload(ready_state="ERROR", errorMessage="Build failed")
        )

        item = normalize(
            deployment,
            project_id="prj_1",
            project_name="my-site",
            mode=DeploymentMode.BLOCKING,
        ).to_item()

        assert item["success"] is False
        assert item["errorMessage"] == "Build failed"

    def test_missing_status_falls_back_to_submission(self):
        submitted = Deployment.from_api(deployment_payload(ready_state="QUEUED"))
        final = Deployment.from_api(deployment_payload(ready_state=None))

        item = normalize(
            final,
            project_id="prj_1",
            project_name="my-site",
            mode=DeploymentMode.ASYNC,
            submitted=submitted,
        ).to_item()

        assert item["status"] == "QUEUED"
        assert item["success"] is False

    def test_normalize_status(self):
        deployment = Deployment.from_api(deployment_payload(ready_state="READY", url=None))

        item = normalize_status(deployment).to_item()

        assert item == {
            "success": True,
            "deploymentId": "dpl_123",
            "url": None,
            "status": "READY",
            "deployment": deployment.raw,
        }


class TestDeploymentIdEscaping:
    """Deployment ids never change the requested endpoint."""

    @pytest.mark.asyncio
    async def test_slashes_stay_in_one_segment(self, transport, vercel_api: respx.MockRouter):
        route = vercel_api.route(method="GET").mock(
            return_value=httpx.Response(200, json=deployment_payload())
        )

        await DeploymentSubmitter(transport).get("../../v9/projects")

        request = route.calls.last.request
        assert request.url.raw_path == b"/v13/deployments/..%2F..%2Fv9%2Fprojects"

    @pytest.mark.asyncio
    async def test_query_characters_are_not_a_query(
        self, team_transport, vercel_api: respx.MockRouter
    ):
        route = vercel_api.route(method="GET").mock(
            return_value=httpx.Response(200, json=deployment_payload())
        )

        await DeploymentSubmitter(team_transport).get("dpl_1?teamId=team_evil")

        request = route.calls.last.request
        assert request.url.path == "/v13/deployments/dpl_1?teamId=team_evil"
        assert request.url.params["teamId"] == "team_42"

    @pytest.mark.asyncio
    async def test_response_without_id(self, transport, vercel_api: respx.MockRouter):
        vercel_api.get("/v13/deployments/dpl_123").mock(
            return_value=httpx.Response(200, json={"readyState": "READY"})
        )

        with pytest.raises(UpstreamError) as exc_info:
            await DeploymentSubmitter(transport).get("dpl_123")

        assert "no deployment id" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_submission_without_id(
        self, transport, vercel_api: respx.MockRouter, tmp_path: Path
    ):
        vercel_api.post("/v13/deployments").mock(return_value=httpx.Response(200, json={}))

        with pytest.raises(UpstreamError):
            await DeploymentSubmitter(transport).submit(
                "prj_1", "my-site", "<p>hi</p>", TargetEnvironment.PREVIEW, tmp_path
            )
