import pytest
import yaml
from click.testing import CliRunner

from aztecscan.artifacts import write_deployment_artifact
from scripts import register_artifact, verify, verify_deployment
from tests.conftest import ADDRESS, CLASS_ID, FakeResponse

BASE_URL = "https://api.example.xyz"

METADATA = {
    "contractIdentifier": "TokenContract",
    "details": "Standard Token Contract",
    "creatorName": "aztec-scan-sdk",
    "creatorContact": "",
    "appUrl": "",
    "repoUrl": "https://github.com/aztec-scan/aztec-scan-sdk",
    "aztecScanNotes": {
        "name": "AztecScanSDK Test Token",
        "origin": "aztec-scan-sdk",
        "comment": "Test token",
    },
}


@pytest.fixture(autouse=True)
def sleeps(monkeypatch):
    recorded = []
    monkeypatch.setattr(verify.time, "sleep", recorded.append)
    return recorded


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def metadata_filepath(tmp_path):
    filepath = tmp_path / "metadata.yml"
    filepath.write_text(yaml.safe_dump(METADATA))
    return filepath


def _common_args(deployment_artifact_filepath):
    return [
        "--explorer-api-url",
        BASE_URL,
        "--api-key",
        "my-key",
        "--deployment-artifact",
        str(deployment_artifact_filepath),
    ]


def test_register_artifact(runner, fake_request, deployment_artifact_filepath):
    recorder = fake_request(FakeResponse(201, "Created", json_data={}))
    result = runner.invoke(register_artifact.cli, _common_args(deployment_artifact_filepath))

    assert result.exit_code == 0, result.output
    assert "Registration completed successfully!" in result.output
    assert recorder.calls[0]["url"] == (
        f"{BASE_URL}/v1/my-key/l2/contract-classes/{CLASS_ID}/versions/1"
    )


def test_register_artifact_failure(runner, fake_request, deployment_artifact_filepath):
    fake_request(FakeResponse(500, "Internal Server Error", text="boom"))
    result = runner.invoke(register_artifact.cli, _common_args(deployment_artifact_filepath))
    assert result.exit_code == 1
    assert "Registration failed: 500 Internal Server Error" in result.output


def test_verify_deployment(runner, fake_request, deployment_artifact_filepath, metadata_filepath):
    recorder = fake_request(FakeResponse(200, "OK", json_data={}))
    args = _common_args(deployment_artifact_filepath) + ["--metadata", str(metadata_filepath)]
    result = runner.invoke(verify_deployment.cli, args)

    assert result.exit_code == 0, result.output
    assert recorder.calls[0]["url"] == f"{BASE_URL}/v1/my-key/l2/contract-instances/{ADDRESS}"
    body = recorder.last_json_body
    assert body["deployerMetadata"] == METADATA
    assert "stringifiedArtifactJson" in body["verifiedDeploymentArguments"]
    assert body["verifiedDeploymentArguments"]["constructorArgs"][-1] == "18"


def test_verify_deployment_skip_artifact(runner, fake_request, deployment_artifact_filepath):
    recorder = fake_request(FakeResponse(200, "OK", json_data={}))
    args = _common_args(deployment_artifact_filepath) + ["--skip-artifact"]
    result = runner.invoke(verify_deployment.cli, args)

    assert result.exit_code == 0, result.output
    body = recorder.last_json_body
    assert "deployerMetadata" not in body
    assert "stringifiedArtifactJson" not in body["verifiedDeploymentArguments"]


def test_verify_deployment_invalid_salt(runner, fake_request, tmp_path, deployment_artifact):
    filepath = write_deployment_artifact(
        deployment_artifact._replace(salt="0x1234"), tmp_path / "bad.json"
    )
    recorder = fake_request()
    result = runner.invoke(verify_deployment.cli, _common_args(filepath))

    assert result.exit_code == 2
    assert "Invalid salt length: expected 66, got 6" in result.output
    assert recorder.calls == []


def test_verify(runner, fake_request, deployment_artifact_filepath, metadata_filepath):
    recorder = fake_request(FakeResponse(200, "OK", json_data={}))
    args = _common_args(deployment_artifact_filepath) + ["--metadata", str(metadata_filepath)]
    result = runner.invoke(verify.cli, args)

    assert result.exit_code == 0, result.output
    assert [call["url"] for call in recorder.calls] == [
        f"{BASE_URL}/v1/my-key/l2/contract-classes/{CLASS_ID}/versions/1",
        f"{BASE_URL}/v1/my-key/l2/contract-instances/{ADDRESS}",
    ]
    assert "Artifact verified: YES" in result.output
    assert "Instance verified: YES" in result.output


def test_verify_waits_for_indexer(runner, fake_request, sleeps, deployment_artifact_filepath):
    fake_request(FakeResponse(200, "OK", json_data={}))
    result = runner.invoke(verify.cli, _common_args(deployment_artifact_filepath))

    assert result.exit_code == 0, result.output
    assert sleeps == [15]


def test_verify_without_wait(runner, fake_request, sleeps, deployment_artifact_filepath):
    fake_request(FakeResponse(200, "OK", json_data={}))
    args = _common_args(deployment_artifact_filepath) + ["--wait", "0"]
    result = runner.invoke(verify.cli, args)

    assert result.exit_code == 0, result.output
    assert sleeps == []


def test_verify_invalid_salt_sends_nothing(runner, fake_request, tmp_path, deployment_artifact):
    filepath = write_deployment_artifact(
        deployment_artifact._replace(salt="0x12"), tmp_path / "bad.json"
    )
    recorder = fake_request()
    result = runner.invoke(verify.cli, _common_args(filepath))

    assert result.exit_code == 2
    assert "Invalid salt length: expected 66, got 4" in result.output
    assert recorder.calls == []


def test_verify_failure_exit_code(runner, fake_request, deployment_artifact_filepath):
    fake_request(FakeResponse(400, "Bad Request", json_data={"error": "nope"}))
    result = runner.invoke(verify.cli, _common_args(deployment_artifact_filepath))

    assert result.exit_code == 1
    assert "Artifact verified: NO" in result.output
    assert "Verification failed." in result.output
