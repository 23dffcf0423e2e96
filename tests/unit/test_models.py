"""Unit tests for data models."""

import pytest
from pydantic import ValidationError

from vercel_deployer.models.credentials import VercelCredentials
from vercel_deployer.models.deployment import (
    Deployment,
    DeploymentMode,
    DeploymentRequest,
    TargetEnvironment,
)
from vercel_deployer.models.parameters import CreateDeploymentParams, GetDeploymentParams


class TestVercelCredentials:
    """Tests for VercelCredentials."""

    def test_from_host_shape(self):
        creds = VercelCredentials.model_validate({"accessToken": " tok ", "teamId": "team_1"})
        assert creds.access_token.get_secret_value() == "tok"
        assert creds.team_id == "team_1"

    def test_blank_team_is_none(self):
        assert VercelCredentials(access_token="tok", team_id="  ").team_id is None

    def test_token_is_hidden(self):
        creds = VercelCredentials(access_token="super-secret")
        assert "super-secret" not in repr(creds)

    def test_empty_token_rejected(self):
        with pytest.raises(ValidationError):
            VercelCredentials(access_token="")

    def test_legacy_token_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            VercelCredentials(access_token="abc:def")
        assert "Legacy" in str(exc_info.value)


class TestCreateDeploymentParams:
    """Tests for CreateDeploymentParams."""

    def test_defaults(self):
        params = CreateDeploymentParams.model_validate(
            {"projectName": "My Site", "htmlContent": "<p>hi</p>"}
        )
        assert params.production is True
        assert params.deployment_mode == "async"
        assert params.max_wait_time == 300

    def test_all_fields(self):
        params = CreateDeploymentParams.model_validate(
            {
                "projectName": "My Site",
                "htmlContent": "<p>hi</p>",
                "production": False,
                "deploymentMode": "blocking",
                "maxWaitTime": 60,
            }
        )
        assert params.production is False
        assert params.deployment_mode == "blocking"
        assert params.max_wait_time == 60

    def test_project_name_required(self):
        with pytest.raises(ValidationError):
            CreateDeploymentParams.model_validate({"htmlContent": "<p>hi</p>"})

    def test_rejects_unknown_mode(self):
        with pytest.raises(ValidationError):
            CreateDeploymentParams.model_validate(
                {"projectName": "x", "htmlContent": "y", "deploymentMode": "later"}
            )

    def test_rejects_negative_wait(self):
        with pytest.raises(ValidationError):
            CreateDeploymentParams.model_validate(
                {"projectName": "x", "htmlContent": "y", "maxWaitTime": -1}
            )

    def test_schema_has_descriptions(self):
        schema = CreateDeploymentParams.model_json_schema(by_alias=True)
        assert schema["properties"]["htmlContent"]["title"] == "HTML Content"
        assert "file path" in schema["properties"]["htmlContent"]["description"]
        assert set(schema["required"]) == {"projectName", "htmlContent"}


class TestGetDeploymentParams:
    def test_requires_id(self):
        with pytest.raises(ValidationError):
            GetDeploymentParams.model_validate({"deploymentId": ""})

    @pytest.mark.parametrize("deployment_id", ["dpl_123", "my-site-abc123.vercel.app"])
    def test_accepts_ids_and_hostnames(self, deployment_id):
        params = GetDeploymentParams.model_validate({"deploymentId": deployment_id})
        assert params.deployment_id == deployment_id

    @pytest.mark.parametrize(
        "deployment_id", ["../../v9/projects", "dpl_1?teamId=x", "..", "dpl 1"]
    )
    def test_rejects_path_characters(self, deployment_id):
        with pytest.raises(ValidationError):
            GetDeploymentParams.model_validate({"deploymentId": deployment_id})


class TestDeployment:
    """Tests for Deployment."""

    def test_from_api(self):
        deployment = Deployment.from_api(
            {"id": "dpl_1", "url": "a.vercel.app", "readyState": "BUILDING", "extra": 1}
        )
        assert deployment.id == "dpl_1"
        assert deployment.url == "a.vercel.app"
        assert deployment.status == "BUILDING"
        assert deployment.raw["extra"] == 1
        assert not deployment.is_terminal

    def test_terminal_states(self):
        for state in ("READY", "ERROR", "CANCELED"):
            assert Deployment(id="d", status=state).is_terminal
        assert Deployment(id="d", status="ERROR").is_failed
        assert not Deployment(id="d", status="READY").is_failed

    def test_with_error_does_not_touch_original(self):
        original = Deployment.from_api({"id": "dpl_1", "readyState": "ERROR"})
        failed = original.with_error("boom")

        assert failed.error_message == "boom"
        assert failed.raw["errorMessage"] == "boom"
        assert "errorMessage" not in original.raw


class TestDeploymentRequest:
    def test_is_frozen(self):
        request = DeploymentRequest(
            project_name="My Site",
            sanitized_name="my-site",
            html="<p>hi</p>",
            target=TargetEnvironment.PREVIEW,
            mode=DeploymentMode.BLOCKING,
            max_wait_seconds=10,
        )
        with pytest.raises(ValidationError):
            request.html = "<p>changed</p>"
