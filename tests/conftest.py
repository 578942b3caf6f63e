import json

import pytest

from aztecscan.artifacts import DeploymentArtifact, write_deployment_artifact
from aztecscan.types import VerifyInstanceArgs

# Common constants
PUBLIC_KEYS = {
    "masterNullifierPublicKey": "0x" + "01" * 64,
    "masterIncomingViewingPublicKey": "0x" + "02" * 64,
    "masterOutgoingViewingPublicKey": "0x" + "03" * 64,
    "masterTaggingPublicKey": "0x" + "04" * 64,
}
PUBLIC_KEYS_STRING = "0x" + "01" * 64 + "02" * 64 + "03" * 64 + "04" * 64
DEPLOYER = "0x" + "0a" * 32
SALT = "0x" + "0b" * 32
ADDRESS = "0x" + "0c" * 32
CLASS_ID = "0x" + "0d" * 32


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, reason="OK", json_data=None, text=""):
        self.status_code = status_code
        self.reason = reason
        self._json_data = json_data
        if json_data is not None:
            self.headers = {"content-type": "application/json; charset=utf-8"}
            self.text = json.dumps(json_data)
        else:
            self.headers = {"content-type": "text/plain"}
            self.text = text

    def json(self):
        return self._json_data


class RequestRecorder:
    """Replaces requests.request, recording each call and returning a canned response."""

    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []

    def __call__(self, method, url, **kwargs):
        self.calls.append(dict(method=method, url=url, **kwargs))
        if self.error:
            raise self.error
        return self.response

    @property
    def last_json_body(self):
        return json.loads(self.calls[-1]["data"].decode("utf-8"))


@pytest.fixture
def fake_request(monkeypatch):
    def _install(response=None, error=None):
        recorder = RequestRecorder(response=response, error=error)
        monkeypatch.setattr("aztecscan.api.requests.request", recorder)
        return recorder

    return _install


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("EXPLORER_API_URL", "API_KEY", "AZTEC_NODE_URL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def artifact():
    return {
        "name": "Token",
        "functions": [{"name": "constructor", "isInitializer": True}],
        "outputs": {"structs": {}, "globals": {}},
    }


@pytest.fixture
def verify_instance_args():
    return VerifyInstanceArgs(
        public_keys_string=PUBLIC_KEYS_STRING,
        deployer=DEPLOYER,
        salt=SALT,
        constructor_args=[DEPLOYER, "TokenName", "TKN", "18"],
    )


@pytest.fixture
def deployment_artifact(artifact):
    return DeploymentArtifact(
        address=ADDRESS,
        deployer=DEPLOYER,
        constructor_args=[DEPLOYER, "TokenName", "TKN", 18],
        salt=SALT,
        public_keys=dict(PUBLIC_KEYS),
        version=1,
        class_id=CLASS_ID,
        contract_artifact=artifact,
    )


@pytest.fixture
def deployment_artifact_filepath(tmp_path, deployment_artifact):
    return write_deployment_artifact(deployment_artifact, tmp_path / "deployment-artifact.json")
